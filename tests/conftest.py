# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

JsonWriter = Callable[[Path, object], None]
ComponentFactory = Callable[..., dict[str, Any]]


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def _minimal_component(name: str = "Button", kind: str = "button") -> dict[str, Any]:
    return {
        "metadata": {"type": kind, "name": name},
        "ui": {"template": f"<div class='rx-{kind}'></div>"},
        "integration": {"properties": {}},
    }


@pytest.fixture
def write_json() -> JsonWriter:
    """Return a helper serialising a payload as formatted JSON, creating parents."""

    return _write_json


@pytest.fixture
def make_component() -> ComponentFactory:
    """Return a factory for the smallest component accepted by the validator."""

    return _minimal_component


@pytest.fixture
def shipped_components() -> Path:
    """Return the components directory shipped with the repository."""

    return REPO_ROOT / "json-components"


@pytest.fixture
def repo_copy(tmp_path: Path, shipped_components: Path) -> Path:
    """Return a scratch repository root holding a copy of the shipped catalog."""

    shutil.copytree(shipped_components, tmp_path / "json-components")
    return tmp_path


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """Return a scratch repository root with a one-component catalog."""

    components = tmp_path / "json-components"
    _write_json(components / "button.json", _minimal_component())
    _write_json(components / "index.json", {"version": "1.0.0", "components": ["button.json"]})
    return tmp_path
