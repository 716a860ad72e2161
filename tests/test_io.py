# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for JSON document loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from rx_catalog.errors import CatalogMissingError, CatalogParseError, CatalogValidationError
from rx_catalog.io import load_document, load_mapping


def test_load_document_returns_payload(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text('{"metadata": {"name": "React"}}', encoding="utf-8")

    assert load_document(path) == {"metadata": {"name": "React"}}


def test_load_document_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CatalogMissingError) as excinfo:
        load_document(tmp_path / "absent.json")

    assert excinfo.value.path == tmp_path / "absent.json"


def test_load_document_reports_parse_errors(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text('{"metadata": ', encoding="utf-8")

    with pytest.raises(CatalogParseError) as excinfo:
        load_document(path)

    assert excinfo.value.path == path
    assert "Expecting value" in excinfo.value.detail


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_load_document_rejects_non_standard_literals(tmp_path: Path, literal: str) -> None:
    path = tmp_path / "width.json"
    path.write_text(f'{{"defaultWidth": {literal}}}', encoding="utf-8")

    with pytest.raises(CatalogParseError) as excinfo:
        load_document(path)

    assert excinfo.value.detail == f"non-standard JSON literal {literal}"


def test_load_mapping_rejects_arrays(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(CatalogValidationError, match="expected a JSON object"):
        load_mapping(path)
