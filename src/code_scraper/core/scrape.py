import logging
import tempfile
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path

from code_scraper.config import ScrapeSettings
from code_scraper.core.output import SampleWriter
from code_scraper.core.ports.vcs import CloneError, RevisionError, VersionControl
from code_scraper.core.walk import WalkError, iter_selected_files, relative_path
from code_scraper.models import CodeSample

logger = logging.getLogger(__name__)

_WORKSPACE_PREFIX = "repo-"


@dataclass
class RepositoryOutcome:
    location: str
    status: str = "ok"
    commit: str = ""
    files_written: int = 0
    error: str | None = None


@dataclass
class ScrapeReport:
    repositories: list[RepositoryOutcome] = field(default_factory=list)

    @property
    def files_written(self) -> int:
        return sum(outcome.files_written for outcome in self.repositories)


def _ignore_progress(_: str) -> None:
    return None


def emit_file(writer: SampleWriter, path: Path, root: Path, location: str, commit: str) -> bool:
    """Read one selected file and append it as a record. Returns False when the file was skipped."""
    try:
        content = path.read_bytes()
    except OSError as exc:
        logger.warning("Failed to read %s: %s", path, exc)
        return False
    sample = CodeSample(
        repo=location,
        commit=commit,
        path=relative_path(path, root),
        text=content.decode("utf-8", errors="replace"),
    )
    return writer.write(sample)


def scrape_repository(
    vcs: VersionControl,
    location: str,
    settings: ScrapeSettings,
    writer: SampleWriter,
    progress: Callable[[str], None] = _ignore_progress,
) -> RepositoryOutcome:
    """Clone one repository into a scoped temporary workspace and emit its matching files.

    The workspace is removed before returning, whatever the outcome.
    """
    outcome = RepositoryOutcome(location=location)
    progress(f"Processing repo: {location}")

    try:
        workspace = tempfile.TemporaryDirectory(prefix=_WORKSPACE_PREFIX, ignore_cleanup_errors=True)
    except OSError as exc:
        logger.error("Failed to create temp dir for %s: %s", location, exc)
        outcome.status = "workspace_failed"
        outcome.error = str(exc)
        return outcome

    with workspace as temp_dir:
        root = Path(temp_dir)

        progress(" Cloning...")
        try:
            vcs.clone(location, root)
        except CloneError as exc:
            logger.error("Git clone failed for %s: %s\n%s", location, exc, exc.output)
            outcome.status = "clone_failed"
            outcome.error = str(exc)
            return outcome

        try:
            outcome.commit = vcs.resolve_revision(root)
        except RevisionError as exc:
            logger.warning("Failed to get commit SHA for %s: %s", location, exc)

        try:
            for path in iter_selected_files(root, settings.extensions, settings.skip_tests):
                if emit_file(writer, path, root, location, outcome.commit):
                    outcome.files_written += 1
        except WalkError as exc:
            logger.error("Error walking %s: %s", location, exc)
            outcome.status = "walk_failed"
            outcome.error = str(exc)

    return outcome


def run_scrape(
    vcs: VersionControl,
    locations: Iterable[str],
    settings: ScrapeSettings,
    writer: SampleWriter,
    progress: Callable[[str], None] = _ignore_progress,
) -> ScrapeReport:
    """Process repositories one at a time, in order. Per-repository failures never stop the run."""
    report = ScrapeReport()
    for location in locations:
        outcome = scrape_repository(vcs, location, settings, writer, progress)
        logger.debug(
            "Finished %s: status=%s commit=%s files=%d",
            location,
            outcome.status,
            outcome.commit or "<none>",
            outcome.files_written,
        )
        report.repositories.append(outcome)
    return report
