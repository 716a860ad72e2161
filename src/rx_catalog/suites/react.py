# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shape checks for the React wrapper component shipped in the catalog."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from ..io import load_mapping
from ..suite import (
    CheckResult,
    Suite,
    SuiteResult,
    assert_contains,
    assert_equal,
    assert_exists,
    assert_true,
    assert_type,
    lookup,
)
from ..types import INDEX_FILENAME, JSONValue

REACT_COMPONENT_FILENAME: Final[str] = "react.json"
CREATE_INTERACTION: Final[str] = "canvas.component.create"


@dataclass(frozen=True, slots=True)
class ReactContext:
    """Documents inspected by the React suite."""

    component: Mapping[str, JSONValue]
    index: Mapping[str, JSONValue]

    def get(self, dotted: str) -> JSONValue | None:
        """Return a nested component value or ``None`` when absent."""

        return lookup(self.component, dotted)


def load_react_context(components_root: Path, *, index_name: str = INDEX_FILENAME) -> ReactContext:
    """Load ``react.json`` and the index from ``components_root``.

    Raises:
        CatalogMissingError: If either document is absent.
        CatalogParseError: If either document is not valid JSON.
    """

    return ReactContext(
        component=load_mapping(components_root / REACT_COMPONENT_FILENAME),
        index=load_mapping(components_root / index_name),
    )


REACT_SUITE: Suite[ReactContext] = Suite("React component")


@REACT_SUITE.check("React component has required metadata fields")
def check_metadata(ctx: ReactContext) -> None:
    assert_exists(ctx.get("metadata"), "metadata field missing")
    assert_equal(ctx.get("metadata.type"), "react", 'metadata.type should be "react"')
    assert_equal(ctx.get("metadata.name"), "React", 'metadata.name should be "React"')
    assert_exists(ctx.get("metadata.version"), "metadata.version missing")
    assert_exists(ctx.get("metadata.description"), "metadata.description missing")
    tags = ctx.get("metadata.tags")
    assert_type(tags, "array", "metadata.tags should be an array")
    assert_contains(tags, "react", 'metadata.tags should include "react"')


@REACT_SUITE.check("React component has proper UI configuration")
def check_ui(ctx: ReactContext) -> None:
    assert_exists(ctx.get("ui"), "ui field missing")
    assert_exists(ctx.get("ui.template"), "ui.template missing")
    assert_exists(ctx.get("ui.styles"), "ui.styles missing")
    assert_exists(ctx.get("ui.icon"), "ui.icon missing")
    assert_equal(ctx.get("ui.icon.value"), "⚛️", "ui.icon.value should be React emoji")
    assert_exists(ctx.get("ui.tools"), "ui.tools missing")
    assert_true(ctx.get("ui.tools.drag.enabled"), "ui.tools.drag should be enabled")
    assert_true(ctx.get("ui.tools.resize.enabled"), "ui.tools.resize should be enabled")


@REACT_SUITE.check("React component has proper integration configuration")
def check_integration_properties(ctx: ReactContext) -> None:
    assert_exists(ctx.get("integration"), "integration field missing")
    assert_exists(ctx.get("integration.properties"), "integration.properties missing")
    assert_exists(ctx.get("integration.properties.schema"), "integration.properties.schema missing")
    code_schema = ctx.get("integration.properties.schema.code")
    assert_exists(code_schema, "integration.properties.schema.code missing")

    assert_equal(lookup(code_schema, "type"), "string", "code schema type should be string")
    default = lookup(code_schema, "default")
    assert_exists(default, "code schema should have default value")
    assert_contains(default, "export default function", "default code should be a React component")
    assert_exists(lookup(code_schema, "ui"), "code schema should have UI configuration")
    assert_equal(lookup(code_schema, "ui.control"), "code", 'code schema UI control should be "code"')


@REACT_SUITE.check("React component has proper template structure for external plugins")
def check_template(ctx: ReactContext) -> None:
    assert_exists(ctx.get("template"), "template field missing")
    assert_exists(ctx.get("template.render"), "template.render missing")
    assert_equal(
        ctx.get("template.render.strategy"),
        "react",
        'template.render.strategy should be "react"',
    )
    assert_exists(ctx.get("template.react"), "template.react missing")
    assert_exists(ctx.get("template.react.code"), "template.react.code missing")
    classes = ctx.get("template.classes")
    assert_exists(classes, "template.classes missing")
    assert_type(classes, "array", "template.classes should be an array")
    assert_contains(classes, "rx-comp", 'template.classes should include "rx-comp"')
    assert_contains(classes, "rx-react", 'template.classes should include "rx-react"')


@REACT_SUITE.check("React component has proper plugin interactions")
def check_interactions(ctx: ReactContext) -> None:
    assert_exists(ctx.get("interactions"), "interactions field missing")
    create = ctx.get(f"interactions/{CREATE_INTERACTION}")
    assert_exists(create, f"{CREATE_INTERACTION} interaction missing")
    assert_equal(lookup(create, "pluginId"), "CanvasComponentPlugin", "should use CanvasComponentPlugin")
    assert_equal(
        lookup(create, "sequenceId"),
        "canvas-component-create-symphony",
        "should use correct sequence",
    )


@REACT_SUITE.check("Index file includes React component")
def check_index(ctx: ReactContext) -> None:
    components = ctx.index.get("components")
    assert_type(components, "array", "index.components should be an array")
    assert_contains(components, REACT_COMPONENT_FILENAME, f"index.components should include {REACT_COMPONENT_FILENAME}")


@REACT_SUITE.check("React component has proper canvas integration")
def check_canvas_integration(ctx: ReactContext) -> None:
    canvas = ctx.get("integration.canvasIntegration")
    assert_exists(canvas, "canvasIntegration missing")
    assert_true(lookup(canvas, "resizable"), "should be resizable")
    assert_true(lookup(canvas, "draggable"), "should be draggable")
    assert_true(lookup(canvas, "selectable"), "should be selectable")
    assert_type(lookup(canvas, "defaultWidth"), "number", "defaultWidth should be a number")
    assert_type(lookup(canvas, "defaultHeight"), "number", "defaultHeight should be a number")


@REACT_SUITE.check("React component has proper event definitions")
def check_events(ctx: ReactContext) -> None:
    assert_exists(ctx.get("integration.events"), "events field missing")
    for event in ("mount", "unmount", "error"):
        assert_exists(ctx.get(f"integration.events.{event}"), f"{event} event missing")


def run_react_suite(
    components_root: Path,
    *,
    index_name: str = INDEX_FILENAME,
    on_result: Callable[[CheckResult], Any] | None = None,
) -> SuiteResult:
    """Load the React component and run every React check against it."""

    context = load_react_context(components_root, index_name=index_name)
    return REACT_SUITE.run(context, on_result=on_result)


__all__ = [
    "CREATE_INTERACTION",
    "REACT_COMPONENT_FILENAME",
    "REACT_SUITE",
    "ReactContext",
    "load_react_context",
    "run_react_suite",
]
