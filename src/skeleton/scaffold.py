"""Build orchestration: validate names, create the tree, roll back on failure."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .builders import DirectoryBuilder, FileBuilder
from .config import ProjectConfig
from .errors import DirectoryCreationError, FileCreationError, InvalidNameError, NameErrorReason
from .plan import BuildPlan
from .template import TemplateRenderer

__all__ = [
    "BuildErrorKind",
    "BuildFailure",
    "BuildOutcome",
    "BuildPhase",
    "CleanupStatus",
    "ProjectScaffolder",
    "build_skeleton",
]


LOGGER = logging.getLogger(__name__)


class BuildErrorKind(str, Enum):
    """Coarse error signal returned to callers."""

    NAME = "name"
    IO = "io"


class BuildPhase(str, Enum):
    """Phase of the build in which a failure happened."""

    VALIDATION = "validation"
    WORKSPACE = "workspace"
    DIRECTORIES = "directories"
    FILES = "files"


class CleanupStatus(str, Enum):
    """Result of the rollback attempted after a failed phase."""

    NOT_NEEDED = "not_needed"
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


class BuildFailure(BaseModel):
    """Details of a failed build."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: BuildErrorKind = Field(..., description="Whether a name or a filesystem operation failed.")
    phase: BuildPhase = Field(..., description="Phase in which the failure happened.")
    cause: str = Field(..., description="Human-readable description of the underlying error.")
    path: Optional[Path] = Field(None, description="Filesystem path that could not be created, if any.")
    reason: Optional[NameErrorReason] = Field(None, description="Rejection reason for name failures.")
    cleanup: CleanupStatus = Field(default=CleanupStatus.NOT_NEEDED, description="Outcome of the rollback.")


class BuildOutcome(BaseModel):
    """Result of :func:`build_skeleton`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    ok: bool = Field(..., description="Whether the whole plan was created.")
    root: Optional[Path] = Field(None, description="Absolute path of the project root, once known.")
    failure: Optional[BuildFailure] = Field(None, description="Failure details when ``ok`` is False.")

    @classmethod
    def succeeded(cls, root: Path) -> "BuildOutcome":
        return cls(ok=True, root=root)

    @classmethod
    def failed(cls, failure: BuildFailure, root: Path | None = None) -> "BuildOutcome":
        return cls(ok=False, root=root, failure=failure)

    @property
    def error(self) -> BuildErrorKind | None:
        return self.failure.kind if self.failure is not None else None


def _rollback_directories(created: Sequence[Path]) -> CleanupStatus:
    # Only directories made by this build are removed, deepest first, and
    # never recursively: anything foreign inside them makes rmdir fail.
    if not created:
        return CleanupStatus.NOT_NEEDED
    for path in reversed(created):
        try:
            path.rmdir()
        except OSError as exc:
            # Swallowed: the directory failure stays the reported error.
            LOGGER.warning("Could not remove %s during rollback: %s", path, exc)
    return CleanupStatus.INCOMPLETE if created[0].exists() else CleanupStatus.COMPLETE


def _rollback_root(root: Path) -> CleanupStatus:
    try:
        shutil.rmtree(root)
    except OSError as exc:
        # Swallowed: the file failure stays the reported error.
        LOGGER.warning("Could not remove %s during rollback: %s", root, exc)
        return CleanupStatus.INCOMPLETE
    return CleanupStatus.COMPLETE


@dataclass(slots=True)
class ProjectScaffolder:
    """Create the skeleton described by a :class:`ProjectConfig`."""

    renderer: TemplateRenderer
    verbose: bool

    def __init__(self, renderer: TemplateRenderer | None = None, *, verbose: bool = False) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.verbose = verbose

    @property
    def progress_level(self) -> int:
        """Log level used for progress messages."""

        return logging.INFO if self.verbose else logging.DEBUG

    def create(self, config: ProjectConfig, base_dir: str | Path | None = None) -> BuildOutcome:
        """Create the skeleton for ``config`` inside ``base_dir``.

        ``base_dir`` defaults to the current working directory and must
        already exist. Directories are created first, then files. When a phase
        fails, what this build created is removed (best effort) and the
        failure is returned; filesystem errors are never raised.
        """

        plan = BuildPlan.from_config(config, self.renderer)

        try:
            base = Path.cwd() if base_dir is None else Path(base_dir).expanduser().resolve()
        except OSError as exc:
            LOGGER.error("Can not get current directory: %s", exc)
            return BuildOutcome.failed(
                BuildFailure(kind=BuildErrorKind.IO, phase=BuildPhase.WORKSPACE, cause=str(exc))
            )

        root = base / plan.root

        try:
            DirectoryBuilder(self.progress_level).create(base, plan.directories)
        except DirectoryCreationError as exc:
            LOGGER.error("There was a problem creating the directories: %s", exc)
            LOGGER.log(self.progress_level, "Falling back from directories creation")
            cleanup = _rollback_directories(exc.created)
            return BuildOutcome.failed(
                BuildFailure(
                    kind=BuildErrorKind.IO,
                    phase=BuildPhase.DIRECTORIES,
                    cause=str(exc),
                    path=exc.path,
                    cleanup=cleanup,
                ),
                root=root,
            )

        try:
            FileBuilder(self.progress_level).create(base, plan.files)
        except FileCreationError as exc:
            LOGGER.error("There was a problem creating the files: %s", exc)
            LOGGER.log(self.progress_level, "Falling back from files creation")
            cleanup = _rollback_root(root)
            return BuildOutcome.failed(
                BuildFailure(
                    kind=BuildErrorKind.IO,
                    phase=BuildPhase.FILES,
                    cause=str(exc),
                    path=exc.path,
                    cleanup=cleanup,
                ),
                root=root,
            )

        return BuildOutcome.succeeded(root)


def build_skeleton(
    project_name: str,
    package_name: str,
    *,
    verbose: bool = False,
    include_docs: bool = False,
    base_dir: str | Path | None = None,
) -> BuildOutcome:
    """Validate the names and build a new project skeleton.

    Parameters
    ----------
    project_name:
        Name of the project root directory, normalised to Train-Case.
    package_name:
        Name of the package under ``src/``, normalised to snake_case.
    verbose:
        Log progress at ``INFO`` instead of ``DEBUG``.
    include_docs:
        Add a ``docs/`` directory to the tree.
    base_dir:
        Directory in which the project root is created. Defaults to the
        current working directory.

    Name errors are reported before anything touches the filesystem.
    """

    scaffolder = ProjectScaffolder(verbose=verbose)
    try:
        config = ProjectConfig.from_names(
            project_name,
            package_name,
            include_docs=include_docs,
            log_level=scaffolder.progress_level,
        )
    except InvalidNameError as exc:
        LOGGER.error("The name %r has an error: %s", exc.name, exc)
        return BuildOutcome.failed(
            BuildFailure(
                kind=BuildErrorKind.NAME,
                phase=BuildPhase.VALIDATION,
                cause=str(exc),
                reason=exc.reason,
            )
        )

    return scaffolder.create(config, base_dir)
