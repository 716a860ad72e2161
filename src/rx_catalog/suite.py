# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Minimal check-suite runner for asserting the shape of catalog documents."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Final, Generic, TypeVar

from .errors import CheckFailure
from .types import JSONValue

LOGGER = logging.getLogger(__name__)

ContextT = TypeVar("ContextT")
CheckCallable = Callable[[ContextT], None]

_JSON_TYPE_NAMES: Final[dict[str, tuple[type, ...]]] = {
    "string": (str,),
    "number": (int, float),
    "boolean": (bool,),
    "object": (Mapping,),
    "array": (list, tuple),
}


def lookup(document: JSONValue | None, dotted: str) -> JSONValue | None:
    """Return the value at ``dotted`` inside ``document`` or ``None`` when absent.

    Segments are split on ``/`` when present so keys containing dots, such as
    ``interactions/canvas.component.create``, stay addressable.
    """

    separator = "/" if "/" in dotted else "."
    current: JSONValue | None = document
    for segment in dotted.split(separator):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
    return current


def _json_type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    for name, types in _JSON_TYPE_NAMES.items():
        if isinstance(value, types):
            return name
    return type(value).__name__


def assert_true(condition: object, message: str) -> None:
    """Fail with ``message`` unless ``condition`` is truthy."""

    if not condition:
        raise CheckFailure(message)


def assert_equal(actual: object, expected: object, message: str) -> None:
    """Fail unless ``actual`` equals ``expected`` with matching JSON type."""

    if actual != expected or _json_type_name(actual) != _json_type_name(expected):
        raise CheckFailure(f"{message}: expected {expected!r}, got {actual!r}")


def assert_exists(value: object, message: str) -> None:
    """Fail when ``value`` is missing or ``null``."""

    if value is None:
        raise CheckFailure(f"{message}: value is undefined or null")


def assert_type(value: object, expected_type: str, message: str) -> None:
    """Fail unless ``value`` has the JSON type named ``expected_type``.

    Args:
        value: Value under test.
        expected_type: One of ``string``, ``number``, ``boolean``, ``object`` or ``array``.
        message: Failure message prefix.

    Raises:
        CheckFailure: If the JSON type does not match.
        ValueError: If ``expected_type`` is not a known JSON type name.
    """

    if expected_type not in _JSON_TYPE_NAMES:
        raise ValueError(f"unknown JSON type '{expected_type}'")
    actual_type = _json_type_name(value)
    if actual_type != expected_type:
        raise CheckFailure(f"{message}: expected {expected_type}, got {actual_type}")


def assert_contains(container: object, member: object, message: str) -> None:
    """Fail unless ``container`` is an array or string holding ``member``."""

    if isinstance(container, str):
        found = isinstance(member, str) and member in container
    elif isinstance(container, Sequence):
        found = member in container
    else:
        found = False
    if not found:
        raise CheckFailure(message)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a single suite check."""

    name: str
    passed: bool
    message: str | None = None


@dataclass(frozen=True, slots=True)
class SuiteResult:
    """Aggregated outcome of a suite run."""

    name: str
    results: tuple[CheckResult, ...]

    @property
    def total(self) -> int:
        """Return the number of executed checks."""

        return len(self.results)

    @property
    def passed(self) -> int:
        """Return the number of checks that passed."""

        return sum(1 for result in self.results if result.passed)

    @property
    def failures(self) -> tuple[CheckResult, ...]:
        """Return the checks that failed."""

        return tuple(result for result in self.results if not result.passed)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every check passed."""

        return self.passed == self.total

    @property
    def summary(self) -> str:
        """Return the ``<passed>/<total>`` summary string."""

        return f"{self.passed}/{self.total}"

    @property
    def exit_code(self) -> int:
        """Return the process exit status matching this result."""

        return 0 if self.ok else 1


@dataclass(slots=True)
class Suite(Generic[ContextT]):
    """Ordered collection of named checks evaluated against a shared context."""

    name: str
    _checks: list[tuple[str, CheckCallable[ContextT]]] = field(default_factory=list, repr=False)

    def check(self, name: str) -> Callable[[CheckCallable[ContextT]], CheckCallable[ContextT]]:
        """Register the decorated function as a check called ``name``."""

        def decorator(func: CheckCallable[ContextT]) -> CheckCallable[ContextT]:
            self._checks.append((name, func))
            return func

        return decorator

    @property
    def check_names(self) -> tuple[str, ...]:
        """Return the registered check names in execution order."""

        return tuple(name for name, _ in self._checks)

    def run(
        self,
        context: ContextT,
        *,
        on_result: Callable[[CheckResult], Any] | None = None,
    ) -> SuiteResult:
        """Execute every check against ``context``.

        A failing check never stops the run; its error is recorded and the
        next check executes.

        Args:
            context: Value handed to each check.
            on_result: Optional callback invoked after each check completes.

        Returns:
            SuiteResult: Per-check outcomes in registration order.
        """

        results: list[CheckResult] = []
        for name, func in self._checks:
            try:
                func(context)
            except CheckFailure as exc:
                result = CheckResult(name=name, passed=False, message=str(exc))
            except Exception as exc:  # noqa: BLE001 - a broken check counts as a failure
                LOGGER.debug("check %r raised %s", name, type(exc).__name__, exc_info=True)
                result = CheckResult(name=name, passed=False, message=f"{type(exc).__name__}: {exc}")
            else:
                result = CheckResult(name=name, passed=True)
            results.append(result)
            if on_result is not None:
                on_result(result)
        return SuiteResult(name=self.name, results=tuple(results))


__all__ = [
    "CheckResult",
    "Suite",
    "SuiteResult",
    "assert_contains",
    "assert_equal",
    "assert_exists",
    "assert_true",
    "assert_type",
    "lookup",
]
