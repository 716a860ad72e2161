# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for component structure checks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from rx_catalog.checks import is_present, is_topic_document, missing_required_fields


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        (False, False),
        (0, False),
        ("", False),
        (True, True),
        (1, True),
        ("x", True),
        ({}, True),
        ([], True),
    ],
)
def test_is_present(value: object, expected: bool) -> None:
    assert is_present(value) is expected


def test_topic_documents_are_detected() -> None:
    assert is_topic_document({"topics": {"canvas.component.created": {}}})
    assert is_topic_document({"definitions": ["a"]})
    assert not is_topic_document({"topics": None, "metadata": {}})
    assert not is_topic_document(["topics"])


def test_complete_component_has_no_missing_fields(make_component: Callable[..., dict[str, Any]]) -> None:
    assert missing_required_fields(make_component()) == []


def test_missing_nested_fields_are_reported() -> None:
    document = {"metadata": {"type": "react"}, "ui": {}, "integration": {}}

    assert missing_required_fields(document) == ["metadata.name", "ui.template"]


def test_absent_parent_suppresses_children() -> None:
    document = {"ui": {"template": "<div></div>"}}

    assert missing_required_fields(document) == ["metadata", "integration"]


def test_non_object_document_misses_every_section() -> None:
    assert missing_required_fields([1, 2, 3]) == ["metadata", "ui", "integration"]


def test_non_object_parent_misses_children() -> None:
    document = {"metadata": "react", "ui": {"template": "x"}, "integration": {}}

    assert missing_required_fields(document) == ["metadata.type", "metadata.name"]
