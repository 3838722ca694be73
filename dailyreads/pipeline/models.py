"""Pipeline models."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from ..ingestion.models import FeedResult
from ..ranking.models import ScoredArticle, SelectedArticle


class AggregationReport(BaseModel):
    """Everything one aggregation run produced."""

    articles: List[SelectedArticle] = Field(default_factory=list, description="Selected articles, best first")
    ranked: List[ScoredArticle] = Field(default_factory=list, description="Positive-scoring candidates, best first")
    feed_results: List[FeedResult] = Field(default_factory=list, description="Per-feed fetch outcomes")
    candidate_count: int = Field(0, description="Articles parsed across all feeds")
    generated_at: datetime = Field(..., description="Reference time used for scoring")

    @property
    def failed_feeds(self) -> List[FeedResult]:
        """Feeds that contributed nothing because they failed."""
        return [r for r in self.feed_results if not r.success]
