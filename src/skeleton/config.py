"""Configuration shared by the build orchestrator, the planners and the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .naming import CasingPolicy, NormalizedName, validate_name

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Validated inputs describing one skeleton build.

    Attributes
    ----------
    project_name:
        The Train-Case name of the project root directory, e.g. ``My-Project``.
    package_name:
        The snake_case name of the package created under ``src/``.
    include_docs:
        Whether a ``docs/`` directory is added to the tree.
    """

    project_name: NormalizedName
    package_name: NormalizedName
    include_docs: bool = False

    @classmethod
    def from_names(
        cls,
        project_name: str,
        package_name: str,
        *,
        include_docs: bool = False,
        log_level: int = logging.DEBUG,
    ) -> "ProjectConfig":
        """Validate raw user input and build a :class:`ProjectConfig`.

        The project name is checked as Train-Case first, then the package name
        as snake_case. The first failure raises
        :class:`~skeleton.errors.InvalidNameError`; each check is logged at
        ``log_level`` just before it runs.
        """

        LOGGER.log(log_level, "Validating `%s` as Train-Case", project_name)
        project = validate_name(project_name, CasingPolicy.TRAIN_CASE)
        LOGGER.log(log_level, "Validating `%s` as snake_case", package_name)
        package = validate_name(package_name, CasingPolicy.SNAKE_CASE)
        return cls(project_name=project, package_name=package, include_docs=include_docs)
