"""Daily article aggregation: fetch → parse → score → select."""

import asyncio
import logging
from datetime import datetime
from typing import List, Optional

import httpx
import pendulum

from ..config import ConfigModel, DEFAULT_SOURCES, SourceConfig
from ..ingestion import RSSFetcher
from ..ranking import ArticleScorer, SelectedArticle, rank_articles, select_articles
from .models import AggregationReport

logger = logging.getLogger(__name__)


class DailyArticlesAggregator:
    """Build the daily list from the configured feeds.

    Holds no state between calls; every ``collect`` fetches and scores
    from scratch.
    """

    def __init__(
        self,
        config: Optional[ConfigModel] = None,
        sources: Optional[List[SourceConfig]] = None,
        scorer: Optional[ArticleScorer] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize aggregator.

        Args:
            config: Application configuration, defaults when omitted
            sources: Feeds to aggregate, the built-in five when omitted
            scorer: Article scorer
            transport: Optional httpx transport for the feed fetcher
        """
        self.config = config or ConfigModel()
        self.sources = list(sources) if sources is not None else list(DEFAULT_SOURCES)
        self.scorer = scorer or ArticleScorer()
        self.fetcher = RSSFetcher(self.config.fetch, transport=transport)

    async def collect(self, now: Optional[datetime] = None) -> AggregationReport:
        """Run the whole pipeline and keep the intermediate results."""
        now = now or pendulum.now("UTC")

        feed_results = await self.fetcher.fetch_all_feeds(self.sources, now=now)

        candidates = []
        for result in feed_results:
            if result.success:
                candidates.extend(result.items)

        ranked = rank_articles(candidates, self.scorer, now)
        selected = select_articles(
            ranked,
            max_articles=self.config.selection.max_articles,
            diversity_threshold=self.config.selection.diversity_threshold,
        )

        failed = sum(1 for r in feed_results if not r.success)
        logger.info(
            "Selected %d of %d candidates (%d ranked, %d/%d feeds failed)",
            len(selected),
            len(candidates),
            len(ranked),
            failed,
            len(feed_results),
        )

        return AggregationReport(
            articles=selected,
            ranked=ranked,
            feed_results=feed_results,
            candidate_count=len(candidates),
            generated_at=now,
        )

    async def aggregate(self, now: Optional[datetime] = None) -> List[SelectedArticle]:
        """Return the daily list of ``{title, url}`` entries."""
        report = await self.collect(now)
        return report.articles

    def collect_sync(self, now: Optional[datetime] = None) -> AggregationReport:
        """Synchronous wrapper for collect."""
        return asyncio.run(self.collect(now))

    def aggregate_sync(self, now: Optional[datetime] = None) -> List[SelectedArticle]:
        """Synchronous wrapper for aggregate."""
        return asyncio.run(self.aggregate(now))
