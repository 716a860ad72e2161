# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point for validating and testing the component catalog."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .config import CatalogConfig, ConfigError, load_config
from .errors import CatalogError
from .logging import echo, fail, info, ok, section, warn
from .suite import CheckResult
from .suites.react import run_react_suite
from .validator import CatalogValidator, Severity, ValidationReport

ROOT_OPTION = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Repository root holding the components directory."),
]
COMPONENTS_DIR_OPTION = Annotated[
    str | None,
    typer.Option("--components-dir", help="Components directory, relative to the root."),
]
STRICT_OPTION = Annotated[
    bool | None,
    typer.Option("--strict/--no-strict", help="Treat component files missing from the index as errors."),
]
EMOJI_OPTION = Annotated[
    bool | None,
    typer.Option("--emoji/--no-emoji", help="Prefix messages with emoji."),
]

app = typer.Typer(
    name="rx-catalog",
    help="Validate and test the RenderX component catalog.",
    no_args_is_help=True,
    add_completion=False,
)


def _resolve_config(root: Path | None, **overrides: object) -> CatalogConfig:
    try:
        return load_config(root, **overrides)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("validate")
def validate_command(
    root: ROOT_OPTION = None,
    components_dir: COMPONENTS_DIR_OPTION = None,
    strict: STRICT_OPTION = None,
    emoji: EMOJI_OPTION = None,
) -> None:
    """Check that the index and the component files agree before publishing.

    Raises:
        typer.Exit: Raised with status 1 when any error was found, 0 otherwise.
    """

    config = _resolve_config(root, components_dir=components_dir, fail_on_undeclared=strict, emoji=emoji)
    use_emoji = config.emoji
    info("Validating RenderX plugin components package...", use_emoji=use_emoji)

    report = CatalogValidator(config).validate()
    render_report(report, config=config)
    raise typer.Exit(code=report.exit_code)


def render_report(report: ValidationReport, *, config: CatalogConfig) -> None:
    """Print ``report`` using the shared console helpers."""

    use_emoji = config.emoji
    if report.index_version is not None:
        ok(f"Index file is valid JSON (version {report.index_version})", use_emoji=use_emoji)
        info(f"Found {len(report.discovered)} component files", use_emoji=use_emoji)
        info(f"Index declares {len(report.declared)} components", use_emoji=use_emoji)

    for issue in report.issues:
        if issue.severity is Severity.ERROR:
            fail(issue.message, use_emoji=use_emoji)
        elif issue.severity is Severity.WARNING:
            warn(issue.message, use_emoji=use_emoji)
        else:
            info(issue.message, use_emoji=use_emoji)
    if report.undeclared and not config.fail_on_undeclared:
        echo(f"   If these should be discoverable by hosts, add them to {config.index_name}")

    if not report.ok:
        fail("Validation failed! Please fix the errors above.", use_emoji=use_emoji)
        return
    ok("All validations passed!", use_emoji=use_emoji)
    ok(f"Package is ready for publishing with {report.component_count} components", use_emoji=use_emoji)


@app.command("test")
def test_command(
    root: ROOT_OPTION = None,
    components_dir: COMPONENTS_DIR_OPTION = None,
    emoji: EMOJI_OPTION = None,
) -> None:
    """Run the React component shape checks and report ``<passed>/<total>``.

    Raises:
        typer.Exit: Raised with status 1 unless every check passed.
    """

    config = _resolve_config(root, components_dir=components_dir, emoji=emoji)
    use_emoji = config.emoji
    info("Running React component tests...", use_emoji=use_emoji)

    def _report(result: CheckResult) -> None:
        if result.passed:
            ok(result.name, use_emoji=use_emoji)
        else:
            fail(f"{result.name}: {result.message}", use_emoji=use_emoji)

    try:
        outcome = run_react_suite(config.components_root, index_name=config.index_name, on_result=_report)
    except CatalogError as exc:
        fail(f"Test suite failed: {exc}", use_emoji=use_emoji)
        raise typer.Exit(code=1) from exc

    section("Summary")
    echo(f"Test Results: {outcome.summary} tests passed")
    if outcome.ok:
        ok("All React component tests passed!", use_emoji=use_emoji)
    else:
        fail("Some tests failed!", use_emoji=use_emoji)
    raise typer.Exit(code=outcome.exit_code)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main", "render_report"]
