# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural checks applied to individual component documents."""

from __future__ import annotations

from collections.abc import Mapping

from .types import REQUIRED_FIELDS, TOPIC_KEYS, JSONValue


def is_present(value: JSONValue | None) -> bool:
    """Return ``True`` when ``value`` counts as a populated field.

    Missing values, ``null``, ``false``, zero and the empty string are absent.
    Empty objects and arrays are present.

    Args:
        value: Raw JSON value pulled from a document.

    Returns:
        bool: ``True`` when the field is populated.
    """

    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value != ""
    return True


def is_topic_document(document: JSONValue) -> bool:
    """Return ``True`` when ``document`` describes messaging topics, not a component."""

    if not isinstance(document, Mapping):
        return False
    return any(is_present(document.get(key)) for key in TOPIC_KEYS)


def missing_required_fields(document: JSONValue) -> list[str]:
    """Return the dotted names of required fields absent from ``document``.

    Children of an absent parent are not reported separately, so a document
    without ``metadata`` yields ``"metadata"`` only.

    Args:
        document: Parsed component document.

    Returns:
        list[str]: Missing field names in declaration order.
    """

    root: Mapping[str, JSONValue] = document if isinstance(document, Mapping) else {}
    missing: list[str] = []
    for dotted in REQUIRED_FIELDS:
        parent, _, child = dotted.rpartition(".")
        if parent and parent in missing:
            continue
        container = root.get(parent) if parent else root
        value = container.get(child) if isinstance(container, Mapping) else None
        if not is_present(value):
            missing.append(dotted)
    return missing


__all__ = ["is_present", "is_topic_document", "missing_required_fields"]
