class ScraperError(Exception):
    """Base class for errors raised while scraping repositories."""
