"""Ranking models."""

from pydantic import BaseModel, ConfigDict, Field

from ..ingestion.models import RawArticle


class ScoredArticle(RawArticle):
    """Article with its heuristic score attached."""

    score: int = Field(..., description="Heuristic score, may be negative")

    @classmethod
    def from_raw(cls, article: RawArticle, score: int) -> "ScoredArticle":
        """Attach a score to a raw article."""
        return cls(**article.model_dump(), score=score)


class SelectedArticle(BaseModel):
    """Public entry of the daily list."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Article title")
    url: str = Field(..., description="Article URL")
