"""Contents of the files written into a new project skeleton.

Everything here is written verbatim except :data:`PYPROJECT_TEMPLATE`, which
receives the package name through :class:`skeleton.template.TemplateRenderer`.
"""

from __future__ import annotations

README_TEMPLATE = """# README's template for projects
A short tagline or description of what your project does.

## Project Structure
```
project-name/
|- src/                # Source code
|- test/               # Unit tests
|- pyproject.toml      # Python dependencies and setup
|- README.md           # Project documentation
|- config/             # Configuration of environments
|- notebooks/          # Development notebooks
|- files/              # Data related to the project
```

## Installation
Installation instructions go here.

## Usage
An explanation of how to use the package.

## Running Tests
How to test the project and which environments to use.

## Configuration
How to configure the package.

## Documentation
Where do I find information?

## Contributing
How do we work together?

## Issues
How to report something.

## License
Only if needed.
"""

PYPROJECT_TEMPLATE = """[build-system]
requires = ["setuptools >= 70.0"]
build-backend = "setuptools.build_meta"

[project]
name = "{{ package_name }}"
version = "0.1.0"
description = "Some description of the project."
readme = "README.md"
requires-python = ">=3.10"
dependencies = [
    "oracledb",
    "sqlalchemy",
    "numpy",
    "polars",
    "plotly",
    "structlog",
    "pyyaml",
]

# Scripts here
[project.scripts]

[dependency-groups]
dev = [
    "jupyterlab>=4.4.0",
    "pytest",
    "ipywidgets",
]

[tool.ruff.lint]
extend-select = ["SIM", "I", "D", "S", "PT"]

[tool.ruff.lint.pydocstyle]
convention = "numpy"

[tool.ruff.lint.per-file-ignores]
"test/*" = ["D", "S"]
"""

GITIGNORE_TEMPLATE = """# Python-generated files
__pycache__/
*.py[oc]
build/
dist/
wheels/
*.egg-info

# Virtual environments
.venv

# Jupyter checkpoints
.ipynb_checkpoints/
"""

INIT_TEMPLATE = '''"""Package initialiser.

Loads the environment variables.
"""

from .env import load_env

load_env()
'''

ENV_TEMPLATE = '''"""Load environment variables."""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Optional

import yaml


def find_config_file(
    possible_names: Iterable[str] = ("config.yaml", "settings.yaml", "DEV.yaml"),
) -> Optional[Path]:
    """Search for a configuration file.

    Starts in the current directory and walks up through its parents until a
    ``config/<name>`` file is found.

    Parameters
    ----------
    possible_names: Iterable[str]
        Candidate names of the YAML configuration file.

    Returns
    -------
    Optional[Path]
        Path of the file, or ``None`` when nothing was found.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        for name in possible_names:
            candidate = parent / "config" / name
            if candidate.exists():
                return candidate
    return None


def load_env(path: Optional[str | Path] = None) -> None:
    """Load environment variables from a YAML file.

    Parameters
    ----------
    path: Optional[str | Path]
        Path to the configuration file. If None, search for it.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            raise FileNotFoundError("It was not possible to find a configuration file.")
    else:
        path = Path(path)
    with open(path, "r") as f:
        config = yaml.safe_load(f)

    for section in config:
        for key in config[section]:
            os.environ[key] = config[section][key]
'''

DB_TEMPLATE = '''"""Database connections.

This module builds connections to databases. Currently only Oracle is
supported, with the secrets configured through environment variables.

Functions
---------
get_engine
    Create the engine for the production database.
"""

import os
import sys

import oracledb
import sqlalchemy

STD_PRD = os.environ["DB_USER"]
STD_PRD_PASS = os.environ["DB_PASSWORD"]
STD_PRD_DSN = f"{os.environ.get('DB_HOST')}/{os.environ.get('DB_DATABASE')}"


def get_engine() -> sqlalchemy.Engine:
    """Create the Oracle connection engine.

    Uses ``oracledb`` as the SQLAlchemy backend.

    Returns
    -------
    sqlalchemy.Engine
        Connection engine.

    Raises
    ------
    KeyError
        If an environment variable is missing (``DB_USER``, ``DB_PASSWORD``).

    Examples
    --------
    >>> engine = get_engine()
    >>> with engine.connect() as conn:
    ...     result = conn.execute(text("SELECT * FROM employers"))
    """
    oracledb.version = "8.3.0"
    sys.modules["cx_Oracle"] = oracledb
    engine = sqlalchemy.create_engine(
        "oracle://:@",
        connect_args={"user": STD_PRD, "password": STD_PRD_PASS, "dsn": STD_PRD_DSN},
    )
    return engine
'''

TEST_TEMPLATE = '''import pytest


def test_sample():
    # Test something
    pass
'''

MAIN_TEMPLATE = '''"""Example of main file with logs."""

import polars as pl
import structlog

# This must be called in every file that logs.
logger = structlog.get_logger()

df = pl.DataFrame({"A": [1, 2], "B": [3, 4]})
logger.info("Hello world!", more_than_strings=df)
'''

CONFIG_TEMPLATE = """# Environment variables are split in categories to make them easier
# to read.
DB:
    DB_USER: "some_user"
    DB_PASSWORD: "some_password"
    DB_HOST: "some_host"
    DB_DATABASE: "some_service"
"""
