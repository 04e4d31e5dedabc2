import logging
import os
import subprocess
from pathlib import Path

from code_scraper.config import GIT_EXECUTABLE_ENV
from code_scraper.core.ports.vcs import CloneError, RevisionError

logger = logging.getLogger(__name__)


class GitClient:
    """Shallow-clones repositories and reads their HEAD revision with the ``git`` CLI.

    Implements the ``VersionControl`` protocol.
    """

    def __init__(self, executable: str | None = None) -> None:
        self._executable = executable or os.getenv(GIT_EXECUTABLE_ENV, "git")

    def clone(self, location: str, destination: Path) -> None:
        args = ["clone", "--depth=1", "--", location, str(destination)]
        try:
            result = subprocess.run(
                [self._executable, *args],
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise CloneError(location, str(exc)) from exc
        if result.returncode != 0:
            raise CloneError(location, f"exit status {result.returncode}", result.stdout)
        logger.debug("Cloned %s into %s", location, destination)

    def resolve_revision(self, workspace: Path) -> str:
        try:
            result = subprocess.run(
                [self._executable, "-C", str(workspace), "rev-parse", "HEAD"],
                check=False,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise RevisionError(str(exc)) from exc
        if result.returncode != 0:
            raise RevisionError(result.stderr.strip() or f"exit status {result.returncode}")
        return result.stdout.strip()
