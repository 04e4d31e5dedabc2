import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from code_scraper.models import CodeSample

logger = logging.getLogger(__name__)


class SampleWriter:
    """Writes ``CodeSample`` records as JSON lines and counts what it wrote."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self.count = 0

    def write(self, sample: CodeSample) -> bool:
        try:
            line = sample.to_json_line()
        except (TypeError, ValueError):
            logger.exception("JSON serialization failed for %s", sample.path)
            return False
        self._stream.write(line)
        self._stream.write("\n")
        self.count += 1
        return True


@contextmanager
def open_sample_writer(path: Path) -> Iterator[SampleWriter]:
    """Open *path* for appending and yield a writer; flushed and closed on exit."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8", newline="\n") as stream:
        yield SampleWriter(stream)
