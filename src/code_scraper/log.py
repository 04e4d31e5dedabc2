import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGER_NAME = "code_scraper"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send ``code_scraper`` log records to stderr through rich."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # repeated CLI invocations in one process must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=verbose)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
