# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the component catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

DEFAULT_COMPONENTS_DIR: Final[str] = "json-components"
INDEX_FILENAME: Final[str] = "index.json"
JSON_SUFFIX: Final[str] = ".json"

# Top-level keys marking messaging topic documents stored beside components.
TOPIC_KEYS: Final[tuple[str, ...]] = ("topics", "definitions")

REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "metadata",
    "metadata.type",
    "metadata.name",
    "ui",
    "ui.template",
    "integration",
)

__all__ = [
    "DEFAULT_COMPONENTS_DIR",
    "INDEX_FILENAME",
    "JSON_SUFFIX",
    "REQUIRED_FIELDS",
    "TOPIC_KEYS",
    "JSONPrimitive",
    "JSONValue",
]
