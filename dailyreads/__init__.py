"""dailyreads: a daily list of essays and longform picked from RSS feeds."""

__version__ = "0.1.0"
