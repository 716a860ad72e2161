# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the rx-catalog command line interface."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from rx_catalog.cli import app

JsonWriter = Callable[[Path, object], None]

runner = CliRunner()


def test_validate_cli_passes_for_shipped_catalog(shipped_components: Path) -> None:
    result = runner.invoke(app, ["validate", "--root", str(shipped_components.parent)])

    assert result.exit_code == 0, result.output
    assert "All validations passed!" in result.output
    assert "Package is ready for publishing with 1 components" in result.output


def test_validate_cli_reports_stale_entries(catalog_root: Path, write_json: JsonWriter) -> None:
    write_json(
        catalog_root / "json-components" / "index.json",
        {"version": "1.0.0", "components": ["button.json", "ghost.json"]},
    )

    result = runner.invoke(app, ["validate", "--root", str(catalog_root), "--no-emoji"])

    assert result.exit_code == 1
    assert "Stale entry in index.json (file does not exist): ghost.json" in result.output
    assert "Validation failed!" in result.output
    assert "❌" not in result.output


def test_validate_cli_warns_on_undeclared_files(
    catalog_root: Path,
    write_json: JsonWriter,
    make_component: Callable[..., dict[str, Any]],
) -> None:
    write_json(catalog_root / "json-components" / "card.json", make_component("Card", "card"))

    result = runner.invoke(app, ["validate", "--root", str(catalog_root)])

    assert result.exit_code == 0
    assert "Component file not listed in index.json: card.json" in result.output
    assert "add them to index.json" in result.output

    strict = runner.invoke(app, ["validate", "--root", str(catalog_root), "--strict"])

    assert strict.exit_code == 1


def test_validate_cli_reports_malformed_json(catalog_root: Path) -> None:
    (catalog_root / "json-components" / "button.json").write_text("{", encoding="utf-8")

    result = runner.invoke(app, ["validate", "--root", str(catalog_root)])

    assert result.exit_code == 1
    assert "Invalid JSON in file button.json" in result.output


def test_validate_cli_honours_components_dir(tmp_path: Path, write_json: JsonWriter) -> None:
    write_json(tmp_path / "widgets" / "index.json", {"version": "2.0.0", "components": []})

    result = runner.invoke(app, ["validate", "--root", str(tmp_path), "--components-dir", "widgets"])

    assert result.exit_code == 0, result.output
    assert "version 2.0.0" in result.output


def test_test_cli_reports_full_pass(shipped_components: Path) -> None:
    result = runner.invoke(app, ["test", "--root", str(shipped_components.parent)])

    assert result.exit_code == 0, result.output
    assert "Test Results: 8/8 tests passed" in result.output
    assert "All React component tests passed!" in result.output
    assert result.output.count("Test Results") == 1


def test_test_cli_reports_failures(repo_copy: Path) -> None:
    react_path = repo_copy / "json-components" / "react.json"
    document = json.loads(react_path.read_text(encoding="utf-8"))
    document["template"]["classes"] = ["rx-comp"]
    react_path.write_text(json.dumps(document, ensure_ascii=False), encoding="utf-8")

    result = runner.invoke(app, ["test", "--root", str(repo_copy)])

    assert result.exit_code == 1
    assert "Test Results: 7/8 tests passed" in result.output
    assert 'template.classes should include "rx-react"' in result.output
    assert "Some tests failed!" in result.output


def test_test_cli_fails_without_component(tmp_path: Path, write_json: JsonWriter) -> None:
    write_json(tmp_path / "json-components" / "index.json", {"version": "1.0.0", "components": []})

    result = runner.invoke(app, ["test", "--root", str(tmp_path)])

    assert result.exit_code == 1
    assert "Test suite failed" in result.output


def test_invalid_configuration_is_a_usage_error(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.rx-catalog]\nunknown = 1\n', encoding="utf-8")

    result = runner.invoke(app, ["validate", "--root", str(tmp_path)])

    assert result.exit_code == 2
