# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from .errors import CatalogMissingError, CatalogParseError, CatalogValidationError
from .types import JSONValue


def load_document(path: Path) -> JSONValue:
    """Load a JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        CatalogMissingError: If the document does not exist.
        CatalogParseError: If the document is not valid JSON.
    """
    if not path.is_file():
        raise CatalogMissingError(path)

    def _reject_constant(token: str) -> JSONValue:
        # Only RFC 8259 literals are accepted; NaN and Infinity are not JSON.
        raise CatalogParseError(path, f"non-standard JSON literal {token}")

    with path.open("r", encoding="utf-8") as stream:
        try:
            return cast(JSONValue, json.load(stream, parse_constant=_reject_constant))
        except json.JSONDecodeError as exc:
            raise CatalogParseError(path, str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise CatalogParseError(path, f"not UTF-8 text: {exc.reason}") from exc


def load_mapping(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON document and ensure its root is an object.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        CatalogMissingError: If the document does not exist.
        CatalogParseError: If the document is not valid JSON.
        CatalogValidationError: If the document root is not a JSON object.
    """
    document = load_document(path)
    if not isinstance(document, Mapping):
        raise CatalogValidationError(f"{path}: expected a JSON object")
    return document


__all__ = ["load_document", "load_mapping"]
