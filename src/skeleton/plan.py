"""Deterministic build plans: which directories and files a skeleton contains."""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from . import boilerplate
from .config import ProjectConfig
from .naming import NormalizedName
from .template import TemplateRenderer

__all__ = ["BuildPlan", "FileEntry", "plan_directories", "plan_files"]


class FileEntry(BaseModel):
    """A file to write, relative to the build's base directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="Relative, '/'-separated path of the file.")
    content: str = Field(..., description="Full text written to the file.")


def plan_directories(root: NormalizedName, package: NormalizedName, include_docs: bool) -> list[str]:
    """Return the directories of the skeleton in creation order.

    Parents always precede their children so every entry can be created with a
    non-recursive ``mkdir``. ``docs`` is appended last when requested.
    """

    directories = [
        root,
        f"{root}/config",
        f"{root}/files",
        f"{root}/notebooks",
        f"{root}/test",
        f"{root}/src",
        f"{root}/src/{package}",
    ]
    if include_docs:
        directories.append(f"{root}/docs")
    return directories


def plan_files(
    root: NormalizedName,
    package: NormalizedName,
    renderer: TemplateRenderer | None = None,
) -> list[FileEntry]:
    """Return the boilerplate files of the skeleton in write order.

    Only ``pyproject.toml`` is rendered; it receives ``package`` as
    ``package_name``. Every other file is taken verbatim from
    :mod:`skeleton.boilerplate`.
    """

    renderer = renderer or TemplateRenderer()
    pyproject = renderer.render_string(boilerplate.PYPROJECT_TEMPLATE, {"package_name": package})
    package_dir = f"{root}/src/{package}"

    files = [
        (f"{root}/README.md", boilerplate.README_TEMPLATE),
        (f"{root}/pyproject.toml", pyproject),
        (f"{root}/.gitignore", boilerplate.GITIGNORE_TEMPLATE),
        (f"{package_dir}/__init__.py", boilerplate.INIT_TEMPLATE),
        (f"{package_dir}/env.py", boilerplate.ENV_TEMPLATE),
        (f"{package_dir}/db.py", boilerplate.DB_TEMPLATE),
        (f"{root}/test/sample_test.py", boilerplate.TEST_TEMPLATE),
        (f"{package_dir}/main.py", boilerplate.MAIN_TEMPLATE),
        (f"{root}/config/DEV.yaml", boilerplate.CONFIG_TEMPLATE),
    ]
    return [FileEntry(path=path, content=content) for path, content in files]


class BuildPlan(BaseModel):
    """Everything a build creates, derived from a :class:`ProjectConfig`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: str = Field(..., description="Relative path of the project root directory.")
    directories: Tuple[str, ...] = Field(..., description="Directories in creation order.")
    files: Tuple[FileEntry, ...] = Field(..., description="Files in write order.")

    @classmethod
    def from_config(cls, config: ProjectConfig, renderer: TemplateRenderer | None = None) -> "BuildPlan":
        return cls(
            root=config.project_name,
            directories=tuple(
                plan_directories(config.project_name, config.package_name, config.include_docs)
            ),
            files=tuple(plan_files(config.project_name, config.package_name, renderer)),
        )
