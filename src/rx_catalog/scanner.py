# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for the component catalog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .types import INDEX_FILENAME, JSON_SUFFIX

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogScanner:
    """Scan the components directory tree for JSON documents."""

    components_root: Path
    index_name: str = INDEX_FILENAME

    def component_documents(self) -> tuple[str, ...]:
        """Return the relative paths of every component document on disk.

        Subdirectories are walked depth-first. Any file named after the index
        is skipped, wherever it sits in the tree.

        Returns:
            tuple[str, ...]: Sorted POSIX-style paths relative to ``components_root``.
        """
        found = self._walk(self.components_root, ())
        LOGGER.debug("discovered %d JSON documents under %s", len(found), self.components_root)
        return tuple(sorted(found))

    def resolve(self, relative: str) -> Path:
        """Return the absolute location of a catalog-relative ``relative`` path.

        Args:
            relative: POSIX-style path as listed in the index.

        Returns:
            Path: Location of the document beneath ``components_root``.
        """
        return self.components_root.joinpath(*relative.replace("\\", "/").split("/"))

    def _walk(self, directory: Path, parts: tuple[str, ...]) -> list[str]:
        files: list[str] = []
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                files.extend(self._walk(entry, (*parts, entry.name)))
            elif entry.name.endswith(JSON_SUFFIX) and entry.name != self.index_name:
                files.append("/".join((*parts, entry.name)))
        return files


__all__ = ["CatalogScanner"]
