"""Domain errors."""


class FeedFetchError(Exception):
    """Raised when an RSS feed cannot be fetched or parsed."""


class ReaderError(Exception):
    """Raised when an article cannot be turned into a reader document."""
