"""Custom exception types raised while validating names and building skeletons."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Sequence

__all__ = [
    "DirectoryCreationError",
    "FileCreationError",
    "InvalidNameError",
    "NameErrorReason",
    "ScaffoldIOError",
    "SkeletonError",
]


class NameErrorReason(str, Enum):
    """Why a name was rejected by :func:`skeleton.naming.validate_name`."""

    NUMBER_NOT_ALLOWED = "number_not_allowed"
    SPECIAL_CHAR_NOT_ALLOWED = "special_char_not_allowed"

    @property
    def message(self) -> str:
        if self is NameErrorReason.NUMBER_NOT_ALLOWED:
            return "Numbers are not allowed!"
        return "Only alphabetic characters are allowed"


class SkeletonError(Exception):
    """Base class for every error raised by this package."""


class InvalidNameError(SkeletonError, ValueError):
    """Raised when a name does not satisfy its casing policy."""

    def __init__(self, name: str, reason: NameErrorReason, index: int) -> None:
        self.name = name
        self.reason = reason
        self.index = index
        self.char = name[index]
        super().__init__(f"{reason.message} (found {self.char!r} at position {index} of {name!r})")


class ScaffoldIOError(SkeletonError):
    """Raised when a filesystem operation of the build fails."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause.strerror or cause}")


class DirectoryCreationError(ScaffoldIOError):
    """Raised by :class:`skeleton.builders.DirectoryBuilder` on the first failed directory."""

    def __init__(self, path: Path, cause: OSError, created: Sequence[Path] = ()) -> None:
        super().__init__(path, cause)
        self.created = tuple(created)


class FileCreationError(ScaffoldIOError):
    """Raised by :class:`skeleton.builders.FileBuilder` on the first failed file."""

    def __init__(self, path: Path, cause: OSError, written: Sequence[Path] = ()) -> None:
        super().__init__(path, cause)
        self.written = tuple(written)
