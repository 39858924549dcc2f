from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from skeleton.config import ProjectConfig
from skeleton.errors import NameErrorReason
from skeleton.scaffold import (
    BuildErrorKind,
    BuildPhase,
    CleanupStatus,
    ProjectScaffolder,
    build_skeleton,
)

EXPECTED_FILES = [
    "README.md",
    "pyproject.toml",
    ".gitignore",
    "src/my_pkg/__init__.py",
    "src/my_pkg/env.py",
    "src/my_pkg/db.py",
    "src/my_pkg/main.py",
    "test/sample_test.py",
    "config/DEV.yaml",
]


def _directories(root: Path) -> list[Path]:
    return [root, *(path for path in root.rglob("*") if path.is_dir())]


def _fail_on(
    name: str, original, error: type[OSError] = PermissionError, strerror: str = "Permission denied"
):
    def wrapper(self, *args, **kwargs):
        if self.name == name:
            raise error(13, strerror, str(self))
        return original(self, *args, **kwargs)

    return wrapper


def test_build_creates_full_skeleton(workspace: Path):
    outcome = build_skeleton("my-project", "my_pkg")

    root = workspace / "My-Project"
    assert outcome.ok
    assert outcome.failure is None
    assert outcome.error is None
    assert outcome.root is not None and outcome.root.resolve() == root.resolve()
    assert len(_directories(root)) == 7
    assert not (root / "docs").exists()
    for relative in EXPECTED_FILES:
        path = root / relative
        assert path.is_file(), f"expected {path} to exist"
        assert path.stat().st_size > 0
    assert "my_pkg" in (root / "pyproject.toml").read_text(encoding="utf-8")


def test_build_with_docs_adds_docs_directory(tmp_path: Path):
    outcome = build_skeleton("Demo", "demo", include_docs=True, base_dir=tmp_path)

    assert outcome.ok
    assert (tmp_path / "Demo" / "docs").is_dir()
    assert len(_directories(tmp_path / "Demo")) == 8


@pytest.mark.parametrize(
    "project, package, reason",
    [
        ("01", "test", NameErrorReason.NUMBER_NOT_ALLOWED),
        ("test", "test$", NameErrorReason.SPECIAL_CHAR_NOT_ALLOWED),
        ("my_project", "pkg", NameErrorReason.SPECIAL_CHAR_NOT_ALLOWED),
    ],
)
def test_invalid_names_have_no_side_effects(workspace: Path, project, package, reason):
    outcome = build_skeleton(project, package)

    assert not outcome.ok
    assert outcome.error is BuildErrorKind.NAME
    assert outcome.failure.phase is BuildPhase.VALIDATION
    assert outcome.failure.reason is reason
    assert outcome.root is None
    assert list(workspace.iterdir()) == []


def test_existing_root_is_left_untouched(tmp_path: Path):
    assert build_skeleton("demo", "demo", base_dir=tmp_path).ok
    readme = tmp_path / "Demo" / "README.md"
    readme.write_text("edited", encoding="utf-8")

    outcome = build_skeleton("demo", "demo", base_dir=tmp_path)

    assert outcome.error is BuildErrorKind.IO
    assert outcome.failure.phase is BuildPhase.DIRECTORIES
    assert outcome.failure.cleanup is CleanupStatus.NOT_NEEDED
    assert readme.read_text(encoding="utf-8") == "edited"


def test_plain_file_at_root_path_is_not_removed(tmp_path: Path):
    blocker = tmp_path / "My-Project"
    blocker.write_text("keep me", encoding="utf-8")

    outcome = build_skeleton("my-project", "my_pkg", base_dir=tmp_path)

    assert outcome.error is BuildErrorKind.IO
    assert outcome.failure.path == blocker
    assert blocker.read_text(encoding="utf-8") == "keep me"


def test_directory_failure_rolls_back_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(Path, "mkdir", _fail_on("my_pkg", Path.mkdir))

    outcome = build_skeleton("my-project", "my_pkg", base_dir=tmp_path)

    assert outcome.error is BuildErrorKind.IO
    assert outcome.failure.phase is BuildPhase.DIRECTORIES
    assert outcome.failure.path == tmp_path / "My-Project" / "src" / "my_pkg"
    assert outcome.failure.cleanup is CleanupStatus.COMPLETE
    assert "Permission denied" in outcome.failure.cause
    assert not (tmp_path / "My-Project").exists()



def test_directory_collision_rolls_back_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(
        Path, "mkdir", _fail_on("notebooks", Path.mkdir, FileExistsError, "File exists")
    )

    outcome = build_skeleton("my-project", "my_pkg", base_dir=tmp_path)

    assert outcome.error is BuildErrorKind.IO
    assert outcome.failure.phase is BuildPhase.DIRECTORIES
    assert outcome.failure.path == tmp_path / "My-Project" / "notebooks"
    assert outcome.failure.cleanup is CleanupStatus.COMPLETE
    assert "File exists" in outcome.failure.cause
    assert not (tmp_path / "My-Project").exists()
    assert list(tmp_path.iterdir()) == []


def test_invalid_project_name_stops_before_package_check(
    workspace: Path, caplog: pytest.LogCaptureFixture
):
    caplog.set_level(logging.INFO, logger="skeleton")

    outcome = build_skeleton("my_project", "my_pkg", verbose=True)

    assert outcome.error is BuildErrorKind.NAME
    assert "Validating `my_project` as Train-Case" in caplog.messages
    assert not any("snake_case" in message for message in caplog.messages)

def test_file_failure_rolls_back_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(Path, "write_text", _fail_on("db.py", Path.write_text))

    outcome = build_skeleton("my-project", "my_pkg", base_dir=tmp_path)

    assert outcome.error is BuildErrorKind.IO
    assert outcome.failure.phase is BuildPhase.FILES
    assert outcome.failure.path == tmp_path / "My-Project" / "src" / "my_pkg" / "db.py"
    assert outcome.failure.cleanup is CleanupStatus.COMPLETE
    assert list(tmp_path.iterdir()) == []


def test_directory_cleanup_failure_does_not_mask_original_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
    def refuse_rmdir(self):
        raise OSError(16, "Device or resource busy", str(self))

    monkeypatch.setattr(Path, "mkdir", _fail_on("notebooks", Path.mkdir))
    monkeypatch.setattr(Path, "rmdir", refuse_rmdir)

    outcome = build_skeleton("my-project", "my_pkg", base_dir=tmp_path)

    assert outcome.error is BuildErrorKind.IO
    assert outcome.failure.phase is BuildPhase.DIRECTORIES
    assert "Permission denied" in outcome.failure.cause
    assert outcome.failure.cleanup is CleanupStatus.INCOMPLETE
    assert any("during rollback" in message for message in caplog.messages)


def test_file_cleanup_failure_does_not_mask_original_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
    def refuse_rmtree(path, *args, **kwargs):
        raise OSError(16, "Device or resource busy", str(path))

    monkeypatch.setattr(Path, "write_text", _fail_on("DEV.yaml", Path.write_text))
    monkeypatch.setattr(shutil, "rmtree", refuse_rmtree)

    outcome = build_skeleton("my-project", "my_pkg", base_dir=tmp_path)

    assert outcome.failure.phase is BuildPhase.FILES
    assert "Permission denied" in outcome.failure.cause
    assert outcome.failure.cleanup is CleanupStatus.INCOMPLETE
    assert (tmp_path / "My-Project").is_dir()
    assert any("during rollback" in message for message in caplog.messages)


def test_unreadable_working_directory_is_an_io_failure(monkeypatch: pytest.MonkeyPatch):
    def missing_cwd(cls=None):
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(Path, "cwd", classmethod(missing_cwd))

    outcome = build_skeleton("my-project", "my_pkg")

    assert outcome.error is BuildErrorKind.IO
    assert outcome.failure.phase is BuildPhase.WORKSPACE
    assert outcome.failure.cleanup is CleanupStatus.NOT_NEEDED
    assert outcome.root is None


def test_verbose_logs_progress_at_info(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="skeleton")

    build_skeleton("demo", "demo", base_dir=tmp_path)
    quiet = list(caplog.messages)
    caplog.clear()
    shutil.rmtree(tmp_path / "Demo")
    build_skeleton("demo", "demo", verbose=True, base_dir=tmp_path)

    assert not any(message.startswith("Creating directory") for message in quiet)
    assert "Validating `demo` as Train-Case" in caplog.messages
    assert any(message.startswith("Creating directory") for message in caplog.messages)
    assert any(message.startswith("Created file") for message in caplog.messages)


def test_scaffolder_accepts_a_prepared_config(tmp_path: Path):
    config = ProjectConfig.from_names("sk-learn", "sk_learn")
    outcome = ProjectScaffolder().create(config, tmp_path)

    assert outcome.ok
    assert (tmp_path / "Sk-Learn" / "src" / "sk_learn" / "__init__.py").is_file()
