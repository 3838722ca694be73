"""Tests for the feed parser."""

from datetime import timedelta, timezone

import pytest

from dailyreads.ingestion.rss_parser import parse_feed, parse_pub_date

SOURCE = "https://feed-a.example/rss"


class TestParseFeed:
    def test_parses_items(self, now, rss_feed, rss_item):
        xml = rss_feed(
            rss_item(
                "<![CDATA[Notes &amp; Queries]]>",
                "\n  https://example.com/notes  \n",
                hours_old=3,
                description="<p>A <b>short</b> intro</p>",
            )
        )

        articles = parse_feed(xml, SOURCE, now=now)

        assert len(articles) == 1
        article = articles[0]
        assert article.title == "Notes & Queries"
        assert article.url == "https://example.com/notes"
        assert article.source == SOURCE
        assert article.content_snippet == "A short intro"
        assert article.pub_date == now - timedelta(hours=3)

    def test_preserves_feed_order(self, now, rss_feed, rss_item):
        xml = rss_feed(
            rss_item("First title", "https://example.com/1"),
            rss_item("Second title", "https://example.com/2"),
        )

        articles = parse_feed(xml, SOURCE, now=now)

        assert [a.url for a in articles] == ["https://example.com/1", "https://example.com/2"]

    def test_skips_items_without_title_or_link(self, now, rss_feed, rss_item):
        xml = rss_feed(
            "<item><link>https://example.com/no-title</link></item>",
            "<item><title>No link here</title></item>",
            rss_item("<![CDATA[   ]]>", "https://example.com/blank-title"),
            rss_item("Title only spaces link", "   "),
            rss_item("Kept", "https://example.com/kept"),
        )

        articles = parse_feed(xml, SOURCE, now=now)

        assert [a.url for a in articles] == ["https://example.com/kept"]

    def test_caps_items_per_feed(self, now, rss_feed, rss_item):
        xml = rss_feed(*[rss_item(f"Title {i}", f"https://example.com/{i}") for i in range(40)])

        articles = parse_feed(xml, SOURCE, now=now)

        assert len(articles) == 30
        assert articles[-1].url == "https://example.com/29"

    def test_custom_item_cap(self, now, rss_feed, rss_item):
        xml = rss_feed(*[rss_item(f"Title {i}", f"https://example.com/{i}") for i in range(5)])

        assert len(parse_feed(xml, SOURCE, now=now, max_items=2)) == 2

    def test_missing_date_defaults_to_now(self, now, rss_feed, rss_item):
        xml = rss_feed(rss_item("Undated", "https://example.com/undated"))

        assert parse_feed(xml, SOURCE, now=now)[0].pub_date == now

    def test_dc_date_fallback(self, now, rss_feed):
        xml = rss_feed(
            "<item><title>Dated</title><link>https://example.com/d</link>"
            "<dc:date>2025-02-28T12:00:00Z</dc:date></item>"
        )

        article = parse_feed(xml, SOURCE, now=now)[0]

        assert article.pub_date == now - timedelta(days=1)

    def test_content_encoded_fallback(self, now, rss_feed):
        xml = rss_feed(
            "<item><title>Body</title><link>https://example.com/b</link>"
            "<content:encoded><![CDATA[<p>Full text</p>]]></content:encoded></item>"
        )

        assert parse_feed(xml, SOURCE, now=now)[0].content_snippet == "Full text"

    def test_item_with_attributes_is_not_matched(self, now, rss_feed):
        xml = rss_feed('<item rdf:about="x"><title>T</title><link>https://example.com/x</link></item>')

        assert parse_feed(xml, SOURCE, now=now) == []

    def test_no_items(self, now):
        assert parse_feed("<html><body>Not a feed</body></html>", SOURCE, now=now) == []


class TestParsePubDate:
    def test_rfc822(self, now):
        parsed = parse_pub_date("Sat, 01 Mar 2025 10:00:00 +0000", now)

        assert parsed == now - timedelta(hours=2)

    def test_rfc822_with_offset(self, now):
        parsed = parse_pub_date("Sat, 01 Mar 2025 13:00:00 +0200", now)

        assert parsed == now - timedelta(hours=1)

    def test_iso8601(self, now):
        assert parse_pub_date("2025-03-01T11:30:00+00:00", now) == now - timedelta(minutes=30)

    def test_result_is_timezone_aware(self, now):
        parsed = parse_pub_date("Sat, 01 Mar 2025 10:00:00 -0000", now)

        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == timezone.utc.utcoffset(None)

    def test_garbage_defaults_to_now(self, now):
        assert parse_pub_date("not a date at all", now) == now

    @pytest.mark.parametrize("value", ["Tuesday", "12:30", "yesterday"])
    def test_relative_strings_default_to_now(self, now, value):
        assert parse_pub_date(value, now) == now

    def test_bare_date_is_midnight_utc(self, now):
        assert parse_pub_date("2025-02-27", now) == now - timedelta(days=2, hours=12)

    def test_empty_defaults_to_now(self, now):
        assert parse_pub_date("   ", now) == now
