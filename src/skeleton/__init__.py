"""Generate standardized Python project skeletons.

The package validates a Train-Case project name and a snake_case package name,
plans the directory tree and boilerplate files of the new project, and builds
them on disk. When a build fails halfway, whatever it created is rolled back so
no half-built tree is left behind.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProjectConfig
from .errors import (
    DirectoryCreationError,
    FileCreationError,
    InvalidNameError,
    NameErrorReason,
    ScaffoldIOError,
    SkeletonError,
)
from .naming import CasingPolicy, NormalizedName, validate_name
from .plan import BuildPlan, FileEntry, plan_directories, plan_files
from .scaffold import (
    BuildErrorKind,
    BuildFailure,
    BuildOutcome,
    BuildPhase,
    CleanupStatus,
    ProjectScaffolder,
    build_skeleton,
)
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "BuildErrorKind",
    "BuildFailure",
    "BuildOutcome",
    "BuildPhase",
    "BuildPlan",
    "CasingPolicy",
    "CleanupStatus",
    "DirectoryCreationError",
    "FileCreationError",
    "FileEntry",
    "InvalidNameError",
    "NameErrorReason",
    "NormalizedName",
    "ProjectConfig",
    "ProjectScaffolder",
    "ScaffoldIOError",
    "SkeletonError",
    "TemplateRenderer",
    "TemplateRenderingError",
    "build_skeleton",
    "plan_directories",
    "plan_files",
    "validate_name",
]
