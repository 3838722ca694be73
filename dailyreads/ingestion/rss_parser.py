"""RSS item extraction."""

import logging
import re
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import List, Optional

import pendulum

from .markup import clean_text, extract_tag
from .models import RawArticle

logger = logging.getLogger(__name__)

MAX_ITEMS_PER_FEED = 30

_ITEM_RE = re.compile(r"<item>(.*?)</item>", re.DOTALL)


def parse_pub_date(value: str, now: Optional[datetime] = None) -> datetime:
    """
    Parse a feed date string into an aware datetime.

    RSS dates are RFC 822 (``pubDate``); ``dc:date`` is usually ISO 8601.
    Anything missing or unparseable falls back to ``now``.
    """
    fallback = now or pendulum.now("UTC")
    value = (value or "").strip()
    if not value:
        return fallback

    try:
        return pendulum.instance(parsedate_to_datetime(value))
    except (TypeError, ValueError, IndexError):
        pass

    # ISO 8601 only; relative strings like "Tuesday" count as unparseable
    try:
        parsed = pendulum.parse(value, exact=True)
    except (ValueError, TypeError, OverflowError):
        logger.debug("Unparseable date %r, using now", value)
        return fallback

    if isinstance(parsed, datetime):
        return parsed
    if isinstance(parsed, date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz="UTC")
    return fallback


def parse_feed(
    xml: str,
    source: str,
    now: Optional[datetime] = None,
    max_items: int = MAX_ITEMS_PER_FEED,
) -> List[RawArticle]:
    """
    Turn raw feed XML into candidate articles.

    Args:
        xml: Feed document text
        source: Feed URL the document came from
        now: Reference time used for items without a usable date
        max_items: Stop after this many articles

    Returns:
        Articles in feed order; items without a title or link are skipped
    """
    now = now or pendulum.now("UTC")
    articles: List[RawArticle] = []

    for match in _ITEM_RE.finditer(xml):
        if len(articles) >= max_items:
            break

        item_xml = match.group(1)
        title = clean_text(extract_tag(item_xml, "title"))
        link = extract_tag(item_xml, "link").strip()
        if not title or not link:
            continue

        pub_date = extract_tag(item_xml, "pubDate") or extract_tag(item_xml, "dc:date")
        description = extract_tag(item_xml, "description") or extract_tag(item_xml, "content:encoded")

        articles.append(
            RawArticle(
                title=title,
                url=link,
                pub_date=parse_pub_date(pub_date, now),
                source=source,
                content_snippet=clean_text(description),
            )
        )

    return articles
