"""Filesystem builders executing a :class:`~skeleton.plan.BuildPlan`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .errors import DirectoryCreationError, FileCreationError
from .plan import FileEntry

__all__ = ["DirectoryBuilder", "FileBuilder"]


LOGGER = logging.getLogger(__name__)


class DirectoryBuilder:
    """Create planned directories one at a time, in order."""

    def __init__(self, log_level: int = logging.DEBUG) -> None:
        self._log_level = log_level

    def create(self, base_path: Path | str, planned_dirs: Iterable[str]) -> list[Path]:
        """Create every directory of ``planned_dirs`` below ``base_path``.

        Each directory is created without ``parents`` or ``exist_ok``; the plan
        guarantees parents come first. Creation stops at the first failure,
        which raises :class:`DirectoryCreationError` listing what was already
        created. Nothing is cleaned up here.
        """

        base = Path(base_path)
        created: list[Path] = []
        for relative in planned_dirs:
            path = base / relative
            LOGGER.log(self._log_level, "Creating directory: %s", path)
            try:
                path.mkdir()
            except OSError as exc:
                raise DirectoryCreationError(path, exc, created) from exc
            created.append(path)
        return created


class FileBuilder:
    """Write planned files one at a time, in order."""

    def __init__(self, log_level: int = logging.DEBUG, encoding: str = "utf-8") -> None:
        self._log_level = log_level
        self._encoding = encoding

    def create(self, base_path: Path | str, manifest: Iterable[FileEntry]) -> list[Path]:
        """Write every entry of ``manifest`` below ``base_path``.

        Existing files are truncated. The first failure raises
        :class:`FileCreationError`; files written before it stay on disk.
        """

        base = Path(base_path)
        written: list[Path] = []
        for entry in manifest:
            path = base / entry.path
            try:
                path.write_text(entry.content, encoding=self._encoding)
            except OSError as exc:
                raise FileCreationError(path, exc, written) from exc
            LOGGER.log(self._log_level, "Created file: %s", path)
            written.append(path)
        return written
