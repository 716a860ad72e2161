# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and ``pyproject.toml`` loading for catalog tooling."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .types import DEFAULT_COMPONENTS_DIR, INDEX_FILENAME

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "rx-catalog"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CatalogConfig(BaseModel):
    """Settings shared by the validator and the component test suite."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: Path = Field(default_factory=Path.cwd)
    components_dir: str = DEFAULT_COMPONENTS_DIR
    index_name: str = INDEX_FILENAME
    fail_on_undeclared: bool = False
    emoji: bool = True

    @field_validator("components_dir", "index_name")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @property
    def components_root(self) -> Path:
        """Return the directory holding component documents."""

        return self.root / self.components_dir

    @property
    def index_path(self) -> Path:
        """Return the location of the catalog index."""

        return self.components_root / self.index_name


def read_pyproject_section(root: Path) -> Mapping[str, Any]:
    """Return the ``[tool.rx-catalog]`` table from ``root/pyproject.toml``.

    Args:
        root: Directory expected to contain ``pyproject.toml``.

    Returns:
        Mapping[str, Any]: Table contents, or an empty mapping when absent.

    Raises:
        ConfigError: If ``pyproject.toml`` exists but is not valid TOML.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return {key.replace("-", "_"): value for key, value in section.items()}


def load_config(root: Path | None = None, **overrides: Any) -> CatalogConfig:
    """Build a :class:`CatalogConfig` for ``root``.

    Values from ``[tool.rx-catalog]`` are applied first, then every override
    that is not ``None``.

    Args:
        root: Catalog repository root. Defaults to the working directory.
        **overrides: Field values supplied by the caller, typically CLI options.

    Returns:
        CatalogConfig: Validated configuration.

    Raises:
        ConfigError: If the merged values fail validation.
    """

    resolved_root = (root or Path.cwd()).resolve()
    payload: dict[str, Any] = dict(read_pyproject_section(resolved_root))
    payload.update({key: value for key, value in overrides.items() if value is not None})
    payload["root"] = resolved_root
    try:
        return CatalogConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid rx-catalog configuration: {exc}") from exc


__all__ = ["CatalogConfig", "ConfigError", "load_config", "read_pyproject_section"]
