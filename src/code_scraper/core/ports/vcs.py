from pathlib import Path
from typing import Protocol

from code_scraper.errors import ScraperError


class CloneError(ScraperError):
    def __init__(self, location: str, message: str, output: str = "") -> None:
        super().__init__(f"clone of {location} failed: {message}")
        self.location = location
        self.output = output


class RevisionError(ScraperError):
    pass


class VersionControl(Protocol):
    def clone(self, location: str, destination: Path) -> None: ...

    def resolve_revision(self, workspace: Path) -> str: ...
