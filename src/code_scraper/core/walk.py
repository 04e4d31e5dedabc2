import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from code_scraper.core.extensions import select_file
from code_scraper.errors import ScraperError


class WalkError(ScraperError):
    pass


def iter_selected_files(root: Path, extensions: Sequence[str], skip_tests: bool) -> Iterator[Path]:
    """Yield every file under *root* whose name passes the extension and test-file filters.

    Directories are descended into (symlinked ones are not followed) but never yielded.
    Raises ``WalkError`` when a directory cannot be listed.
    """

    def _fail(error: OSError) -> None:
        raise WalkError(f"cannot list {error.filename}: {error.strerror}") from error

    for dirpath, dirnames, filenames in os.walk(root, onerror=_fail):
        dirnames.sort()
        for filename in sorted(filenames):
            if select_file(filename, extensions, skip_tests):
                yield Path(dirpath) / filename


def relative_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)
