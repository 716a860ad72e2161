# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Consistency validation for the component catalog before publishing."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final

from .checks import is_present, is_topic_document, missing_required_fields
from .config import CatalogConfig, load_config
from .errors import (
    CatalogError,
    CatalogIntegrityError,
    CatalogMissingError,
    CatalogParseError,
    CatalogValidationError,
)
from .io import load_document
from .scanner import CatalogScanner
from .schema import index_schema_errors
from .types import JSONValue

LOGGER = logging.getLogger(__name__)

EXIT_OK: Final[int] = 0
EXIT_FAILED: Final[int] = 1


class Severity(str, Enum):
    """Enumerate how strongly an issue affects the validation outcome."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueCategory(str, Enum):
    """Enumerate the failure classes a catalog can exhibit."""

    MISSING = "missing"
    PARSE = "parse"
    SHAPE = "shape"
    CONSISTENCY = "consistency"
    NOTICE = "notice"


@dataclass(frozen=True, slots=True)
class Issue:
    """Single finding produced while validating the catalog."""

    severity: Severity
    category: IssueCategory
    message: str
    path: str | None = None


_CATEGORY_ERRORS: Final[dict[IssueCategory, type[CatalogError]]] = {
    IssueCategory.SHAPE: CatalogValidationError,
    IssueCategory.CONSISTENCY: CatalogIntegrityError,
}


@dataclass(slots=True)
class ValidationReport:
    """Outcome of a catalog validation run."""

    issues: list[Issue] = field(default_factory=list)
    index_version: str | None = None
    discovered: tuple[str, ...] = ()
    declared: tuple[str, ...] = ()
    undeclared: list[str] = field(default_factory=list)
    stale: list[str] = field(default_factory=list)
    components: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)

    @property
    def errors(self) -> list[Issue]:
        """Return issues that fail the run."""

        return [issue for issue in self.issues if issue.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Issue]:
        """Return issues reported without failing the run."""

        return [issue for issue in self.issues if issue.severity is Severity.WARNING]

    @property
    def notices(self) -> list[Issue]:
        """Return informational issues such as skipped topic documents."""

        return [issue for issue in self.issues if issue.severity is Severity.INFO]

    @property
    def ok(self) -> bool:
        """Return ``True`` when no error was recorded."""

        return not self.errors

    @property
    def component_count(self) -> int:
        """Return the number of validated, non-topic component documents."""

        return len(self.components)

    @property
    def exit_code(self) -> int:
        """Return the process exit status matching this report."""

        return EXIT_OK if self.ok else EXIT_FAILED

    def add(
        self,
        severity: Severity,
        category: IssueCategory,
        message: str,
        *,
        path: str | None = None,
    ) -> None:
        """Append a new issue to the report."""

        self.issues.append(Issue(severity=severity, category=category, message=message, path=path))

    def raise_for_errors(self) -> None:
        """Raise a catalog exception describing the first error, if any.

        Raises:
            CatalogError: Subclass matching the category of the first error.
        """

        errors = self.errors
        if not errors:
            return
        error_cls = _CATEGORY_ERRORS.get(errors[0].category, CatalogError)
        raise error_cls("; ".join(issue.message for issue in errors))


@dataclass(slots=True)
class CatalogValidator:
    """Cross-check the catalog index against component documents on disk."""

    config: CatalogConfig
    _scanner: CatalogScanner = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialise the scanner bound to the configured components directory."""

        self._scanner = CatalogScanner(self.config.components_root, index_name=self.config.index_name)

    def validate(self) -> ValidationReport:
        """Run every catalog check and collect the findings.

        Returns:
            ValidationReport: Findings, discovered and declared files, and
            the components that passed through structural validation.
        """

        report = ValidationReport()
        if not self._check_locations(report):
            return report
        index = self._load_index(report)
        if index is None:
            return report

        report.discovered = self._scanner.component_documents()
        report.declared = tuple(sorted(index))
        LOGGER.debug(
            "index declares %d components, %d found on disk",
            len(report.declared),
            len(report.discovered),
        )
        self._compare(report)
        for relative in report.discovered:
            self._validate_component(relative, report)
        return report

    def _check_locations(self, report: ValidationReport) -> bool:
        components_root = self.config.components_root
        index_path = self.config.index_path
        if not components_root.is_dir():
            report.add(
                Severity.ERROR,
                IssueCategory.MISSING,
                f"Components directory not found: {components_root}",
            )
        if not index_path.is_file():
            report.add(Severity.ERROR, IssueCategory.MISSING, f"Index file not found: {index_path}")
        return report.ok

    def _load_index(self, report: ValidationReport) -> list[str] | None:
        try:
            document = load_document(self.config.index_path)
        except CatalogParseError as exc:
            report.add(
                Severity.ERROR,
                IssueCategory.PARSE,
                f"Invalid JSON in index file: {exc.detail}",
                path=self.config.index_name,
            )
            return None

        root: Mapping[str, JSONValue] = document if isinstance(document, Mapping) else {}
        version = root.get("version")
        components = root.get("components")
        if not is_present(version):
            report.add(Severity.ERROR, IssueCategory.SHAPE, "Index file missing version field")
        if not isinstance(components, list):
            report.add(
                Severity.ERROR,
                IssueCategory.SHAPE,
                "Index file missing or invalid components array",
            )
        if not report.ok:
            return None

        for message in index_schema_errors(document):
            report.add(Severity.ERROR, IssueCategory.SHAPE, f"Index file schema violation at {message}")
        if not report.ok:
            return None

        report.index_version = str(version)
        return [str(entry) for entry in _as_sequence(components)]

    def _compare(self, report: ValidationReport) -> None:
        declared = set(report.declared)
        discovered = set(report.discovered)
        undeclared_severity = Severity.ERROR if self.config.fail_on_undeclared else Severity.WARNING

        report.undeclared = [relative for relative in report.discovered if relative not in declared]
        report.stale = sorted(declared - discovered)

        for relative in report.undeclared:
            report.add(
                undeclared_severity,
                IssueCategory.CONSISTENCY,
                f"Component file not listed in {self.config.index_name}: {relative}",
                path=relative,
            )
        for relative, count in sorted(Counter(report.declared).items()):
            if count > 1:
                report.add(
                    Severity.WARNING,
                    IssueCategory.CONSISTENCY,
                    f"Component listed {count} times in {self.config.index_name}: {relative}",
                    path=relative,
                )
        for relative in report.stale:
            report.add(
                Severity.ERROR,
                IssueCategory.CONSISTENCY,
                f"Stale entry in {self.config.index_name} (file does not exist): {relative}",
                path=relative,
            )

    def _validate_component(self, relative: str, report: ValidationReport) -> None:
        try:
            document = load_document(self._scanner.resolve(relative))
        except CatalogParseError as exc:
            report.add(
                Severity.ERROR,
                IssueCategory.PARSE,
                f"Invalid JSON in file {relative}: {exc.detail}",
                path=relative,
            )
            return
        except CatalogMissingError:
            report.add(
                Severity.ERROR,
                IssueCategory.MISSING,
                f"Component file {relative} is not a readable file",
                path=relative,
            )
            return

        if is_topic_document(document):
            report.topics.append(relative)
            report.add(
                Severity.INFO,
                IssueCategory.NOTICE,
                f"Skipping non-component file: {relative} (appears to be a topic definition)",
                path=relative,
            )
            return

        missing = missing_required_fields(document)
        for dotted in missing:
            report.add(
                Severity.ERROR,
                IssueCategory.SHAPE,
                f"Component {relative} missing '{dotted}' field",
                path=relative,
            )
        report.components.append(relative)


def _as_sequence(value: JSONValue | None) -> Sequence[JSONValue]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    return ()


def validate_catalog(root: Path | None = None, *, config: CatalogConfig | None = None) -> ValidationReport:
    """Validate the catalog rooted at ``root``.

    Args:
        root: Repository root holding the components directory. Ignored when
            ``config`` is supplied.
        config: Explicit configuration to use instead of loading one.

    Returns:
        ValidationReport: Findings for the catalog.
    """

    resolved = config if config is not None else load_config(root)
    return CatalogValidator(resolved).validate()


__all__ = [
    "CatalogValidator",
    "Issue",
    "IssueCategory",
    "Severity",
    "ValidationReport",
    "validate_catalog",
]
