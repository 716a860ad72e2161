# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Validation and shape-testing tools for the RenderX component catalog."""

from __future__ import annotations

from importlib import metadata

from .config import CatalogConfig, ConfigError, load_config
from .errors import (
    CatalogError,
    CatalogIntegrityError,
    CatalogMissingError,
    CatalogParseError,
    CatalogValidationError,
    CheckFailure,
)
from .suites.react import run_react_suite
from .validator import CatalogValidator, Issue, Severity, ValidationReport, validate_catalog

try:
    __version__ = metadata.version("rx-catalog")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "CatalogConfig",
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogMissingError",
    "CatalogParseError",
    "CatalogValidationError",
    "CatalogValidator",
    "CheckFailure",
    "ConfigError",
    "Issue",
    "Severity",
    "ValidationReport",
    "__version__",
    "load_config",
    "run_react_suite",
    "validate_catalog",
]
