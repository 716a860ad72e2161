# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating the catalog index."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Protocol, runtime_checkable

from jsonschema import Draft202012Validator

from .io import load_mapping
from .types import JSONValue

INDEX_SCHEMA_NAME = "index.schema.json"


class SchemaValidationError(Protocol):
    """Represent schema validation errors surfaced by jsonschema."""

    @property
    def message(self) -> str:
        """Return the descriptive validation error message."""

    @property
    def absolute_path(self) -> Iterable[str | int]:
        """Return the location of the offending value inside the instance."""


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def iter_errors(self, instance: JSONValue) -> Iterable[SchemaValidationError]:
        """Iterate over validation errors for ``instance``."""


def index_schema_path() -> Path:
    """Return the location of the bundled index schema.

    Returns:
        Path: Filesystem path of ``index.schema.json`` inside the package.
    """

    return Path(str(resources.files("rx_catalog") / "schemas" / INDEX_SCHEMA_NAME))


@lru_cache(maxsize=1)
def load_index_validator() -> SchemaValidator:
    """Return a cached Draft 2020-12 validator bound to the index schema.

    Returns:
        SchemaValidator: Validator for ``index.json`` documents.
    """

    schema = load_mapping(index_schema_path())
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def index_schema_errors(document: JSONValue) -> list[str]:
    """Return human-readable schema violations for an index ``document``.

    Args:
        document: Parsed ``index.json`` payload.

    Returns:
        list[str]: One message per violation, prefixed with its JSON location.
    """

    messages: list[str] = []
    for error in load_index_validator().iter_errors(document):
        location = ".".join(str(part) for part in error.absolute_path) or "<root>"
        messages.append(f"{location}: {error.message}")
    return sorted(messages)


__all__ = ["SchemaValidator", "index_schema_errors", "index_schema_path", "load_index_validator"]
