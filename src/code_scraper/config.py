"""Defaults and environment variable names for scraper settings."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from code_scraper.core.extensions import parse_extensions

DEFAULT_EXTENSIONS = "go,py,js"
DEFAULT_OUTPUT = "code_dataset.jsonl"
DEFAULT_SKIP_TESTS = True

EXTENSIONS_ENV = "CODE_SCRAPER_EXT"
OUTPUT_ENV = "CODE_SCRAPER_OUT"
SKIP_TESTS_ENV = "CODE_SCRAPER_SKIP_TESTS"
GIT_EXECUTABLE_ENV = "CODE_SCRAPER_GIT"


class ScrapeSettings(BaseModel):
    extensions: list[str] = Field(default_factory=lambda: parse_extensions(DEFAULT_EXTENSIONS))
    output: Path = Path(DEFAULT_OUTPUT)
    skip_tests: bool = DEFAULT_SKIP_TESTS

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_extensions(value)
        return value
