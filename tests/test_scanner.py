# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for component file discovery."""

from __future__ import annotations

from pathlib import Path

from rx_catalog.scanner import CatalogScanner


def test_scanner_walks_nested_directories(tmp_path: Path) -> None:
    (tmp_path / "forms" / "inputs").mkdir(parents=True)
    (tmp_path / "button.json").write_text("{}", encoding="utf-8")
    (tmp_path / "forms" / "select.json").write_text("{}", encoding="utf-8")
    (tmp_path / "forms" / "inputs" / "text.json").write_text("{}", encoding="utf-8")
    (tmp_path / "README.md").write_text("docs", encoding="utf-8")

    scanner = CatalogScanner(tmp_path)

    assert scanner.component_documents() == (
        "button.json",
        "forms/inputs/text.json",
        "forms/select.json",
    )


def test_scanner_skips_index_files_at_any_depth(tmp_path: Path) -> None:
    (tmp_path / "nested").mkdir()
    (tmp_path / "index.json").write_text("{}", encoding="utf-8")
    (tmp_path / "nested" / "index.json").write_text("{}", encoding="utf-8")
    (tmp_path / "nested" / "card.json").write_text("{}", encoding="utf-8")

    assert CatalogScanner(tmp_path).component_documents() == ("nested/card.json",)


def test_scanner_resolve_accepts_backslashes(tmp_path: Path) -> None:
    scanner = CatalogScanner(tmp_path)

    assert scanner.resolve("forms\\select.json") == tmp_path / "forms" / "select.json"
    assert scanner.resolve("forms/select.json") == tmp_path / "forms" / "select.json"
