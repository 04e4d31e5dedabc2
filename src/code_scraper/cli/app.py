from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from code_scraper.config import (
    DEFAULT_EXTENSIONS,
    DEFAULT_OUTPUT,
    DEFAULT_SKIP_TESTS,
    EXTENSIONS_ENV,
    OUTPUT_ENV,
    SKIP_TESTS_ENV,
    ScrapeSettings,
)
from code_scraper.core.output import open_sample_writer
from code_scraper.core.scrape import run_scrape
from code_scraper.log import configure_logging
from code_scraper.vcs.git import GitClient

app = typer.Typer(
    name="code-scraper",
    help="Clone repositories and dump their source files as JSON Lines.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console(highlight=False, markup=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

_USAGE = "Usage: code-scraper [flags] <repo1> <repo2> ..."


@app.command()
def scrape(
    repos: Annotated[
        list[str] | None,
        typer.Argument(help="Repository locations to clone (URLs or local paths).", show_default=False),
    ] = None,
    ext: Annotated[
        str,
        typer.Option("-ext", "--ext", envvar=EXTENSIONS_ENV, help="Comma-separated list of file extensions (no dot)."),
    ] = DEFAULT_EXTENSIONS,
    out: Annotated[
        Path,
        typer.Option("-out", "--out", envvar=OUTPUT_ENV, help="Output JSONL file path (appended to)."),
    ] = Path(DEFAULT_OUTPUT),
    skip_tests: Annotated[
        str,
        typer.Option(
            "-skip-tests",
            "--skip-tests",
            metavar="BOOL",
            envvar=SKIP_TESTS_ENV,
            help="Skip test files whose name contains '_test.' or '.test.'.",
        ),
    ] = str(DEFAULT_SKIP_TESTS).lower(),
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Enable debug logging.")] = False,
) -> None:
    """Clone each repository and append its matching source files to the output file."""
    configure_logging(verbose=verbose)
    if not repos:
        err_console.print(f"[red]{escape(_USAGE)}[/red]")
        raise typer.Exit(1)

    try:
        settings = ScrapeSettings(extensions=ext, output=out, skip_tests=skip_tests)
    except ValidationError as exc:
        raise typer.BadParameter(f"expected true or false, got {skip_tests!r}", param_hint="'-skip-tests'") from exc

    try:
        with open_sample_writer(settings.output) as writer:
            report = run_scrape(GitClient(), repos, settings, writer, progress=console.print)
    except OSError as exc:
        err_console.print(f"[red]Cannot write output file {escape(str(settings.output))}: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    console.print(f"Done. Wrote {report.files_written} files to {settings.output}")


def main() -> None:
    app()
