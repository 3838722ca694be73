"""Logging setup."""

import logging

from rich.logging import RichHandler


def setup_logging(level: str = "INFO") -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
