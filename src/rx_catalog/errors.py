# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by catalog operations."""

from __future__ import annotations

from pathlib import Path


class CatalogError(RuntimeError):
    """Base class for all catalog failures."""


class CatalogMissingError(CatalogError):
    """Raised when a catalog directory, index or component file does not exist."""

    def __init__(self, path: Path, *, what: str = "file") -> None:
        """Create the error for the missing ``path``.

        Args:
            path: Filesystem location that could not be found.
            what: Short noun describing the missing entity.
        """

        super().__init__(f"{what} not found: {path}")
        self.path = path


class CatalogParseError(CatalogError):
    """Raised when a catalog document is not parseable JSON."""

    def __init__(self, path: Path, detail: str) -> None:
        """Create the error for ``path`` carrying the decoder ``detail``.

        Args:
            path: Document that failed to parse.
            detail: Message produced by the JSON decoder.
        """

        super().__init__(f"{path}: invalid JSON ({detail})")
        self.path = path
        self.detail = detail


class CatalogValidationError(CatalogError):
    """Raised when a catalog document lacks a required structural field."""


class CatalogIntegrityError(CatalogError):
    """Raised when the index and the files on disk disagree."""


class CheckFailure(AssertionError):
    """Raised by suite assertion helpers when an expectation does not hold."""


__all__ = (
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogMissingError",
    "CatalogParseError",
    "CatalogValidationError",
    "CheckFailure",
)
