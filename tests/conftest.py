"""Shared fixtures."""

from datetime import timedelta
from email.utils import format_datetime

import pendulum
import pytest

from dailyreads.ingestion.models import RawArticle
from dailyreads.ranking.models import ScoredArticle

NOW = pendulum.datetime(2025, 3, 1, 12, 0, 0, tz="UTC")


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_raw():
    def _make(
        title="A quiet note on gardens in spring",
        url="https://example.com/article",
        source="https://feed-a.example/rss",
        snippet="",
        hours_old=1.0,
        pub_date=None,
    ):
        return RawArticle(
            title=title,
            url=url,
            pub_date=pub_date or NOW - timedelta(hours=hours_old),
            source=source,
            content_snippet=snippet,
        )

    return _make


@pytest.fixture
def make_scored(make_raw):
    def _make(score, url, source="https://feed-a.example/rss", title=None):
        raw = make_raw(title=title or f"Article at {url}", url=url, source=source)
        return ScoredArticle.from_raw(raw, score)

    return _make


@pytest.fixture
def rss_item():
    def _item(title, link, hours_old=None, description="", date_tag="pubDate"):
        parts = [f"<title>{title}</title>", f"<link>{link}</link>"]
        if hours_old is not None:
            published = format_datetime(NOW - timedelta(hours=hours_old))
            parts.append(f"<{date_tag}>{published}</{date_tag}>")
        if description:
            parts.append(f"<description>{description}</description>")
        return "<item>" + "".join(parts) + "</item>"

    return _item


@pytest.fixture
def rss_feed():
    def _feed(*items):
        return (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<rss version="2.0"><channel><title>Feed</title>\n'
            + "\n".join(items)
            + "\n</channel></rss>"
        )

    return _feed
