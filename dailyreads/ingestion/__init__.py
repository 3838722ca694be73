"""RSS ingestion."""

from .markup import clean_text, extract_tag
from .models import FeedResult, RawArticle
from .rss_fetcher import RSSFetcher, print_feed_summary
from .rss_parser import MAX_ITEMS_PER_FEED, parse_feed, parse_pub_date

__all__ = [
    "RSSFetcher",
    "RawArticle",
    "FeedResult",
    "MAX_ITEMS_PER_FEED",
    "clean_text",
    "extract_tag",
    "parse_feed",
    "parse_pub_date",
    "print_feed_summary",
]
