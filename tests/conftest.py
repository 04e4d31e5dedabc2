"""Shared fixtures and helpers for tests."""

import logging
import subprocess
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Git helpers: small committed repositories to clone from
# ---------------------------------------------------------------------------


def run_git(args: list[str], cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


def create_git_repo(path: Path, files: dict[str, str]) -> str:
    """Create a repository at *path* with one commit holding *files*; return the commit hash."""
    path.mkdir(parents=True, exist_ok=True)
    run_git(["init", "-q"], path)
    for rel, content in files.items():
        target = path / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    run_git(["add", "-A"], path)
    run_git(
        ["-c", "user.name=Test Author", "-c", "user.email=author@example.com", "commit", "-q", "-m", "initial"],
        path,
    )
    return run_git(["rev-parse", "HEAD"], path)


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[[str, dict[str, str]], tuple[Path, str]]:
    """Factory fixture: ``make_repo(name, files)`` returns (repo_path, commit_sha)."""

    def _make(name: str, files: dict[str, str]) -> tuple[Path, str]:
        repo_path = tmp_path / "sources" / name
        sha = create_git_repo(repo_path, files)
        return repo_path, sha

    return _make


# ---------------------------------------------------------------------------
# Logging isolation: the CLI detaches the package logger from the root logger
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Generator[None, None, None]:
    yield
    logger = logging.getLogger("code_scraper")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
