"""Heuristic article scorer."""

from datetime import datetime
from typing import Dict, Iterable, Optional

import pendulum

from ..ingestion.models import RawArticle
from .keywords import (
    CLICKBAIT_WORDS,
    DEPTH_WORDS,
    ESSAY_WORDS,
    EXCLUDE_PATTERNS,
    LONGFORM_WORDS,
    QUALITY_WORDS,
)

EXCLUDED_SCORE = -1000
TOO_SHORT_SCORE = -500
MIN_TITLE_LENGTH = 30

# (max age in hours, bonus), checked in order
RECENCY_BUCKETS = ((24, 30), (72, 25), (168, 20), (336, 15), (720, 10))


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return pendulum.instance(value, tz="UTC")
    return value


def _count_matches(text: str, keywords: Iterable[str]) -> int:
    return sum(1 for keyword in keywords if keyword in text)


class ArticleScorer:
    """Score articles by recency, keyword families and title shape."""

    def __init__(
        self,
        exclude_patterns: Iterable[str] = EXCLUDE_PATTERNS,
        essay_words: Iterable[str] = ESSAY_WORDS,
        longform_words: Iterable[str] = LONGFORM_WORDS,
        clickbait_words: Iterable[str] = CLICKBAIT_WORDS,
        quality_words: Iterable[str] = QUALITY_WORDS,
        depth_words: Iterable[str] = DEPTH_WORDS,
    ) -> None:
        """
        Initialize article scorer.

        Args:
            exclude_patterns: Title phrases that reject an article
            essay_words: Essay indicators, 12 points each, capped at 35
            longform_words: Longform indicators, 10 points each, capped at 15
            clickbait_words: Title phrases worth a flat -30
            quality_words: Title words, 5 points each, capped at 10
            depth_words: Depth indicators, 10 points each, capped at 20
        """
        self.exclude_patterns = tuple(k.lower() for k in exclude_patterns)
        self.essay_words = tuple(k.lower() for k in essay_words)
        self.longform_words = tuple(k.lower() for k in longform_words)
        self.clickbait_words = tuple(k.lower() for k in clickbait_words)
        self.quality_words = tuple(k.lower() for k in quality_words)
        self.depth_words = tuple(k.lower() for k in depth_words)

    def recency_bonus(self, pub_date: datetime, now: datetime) -> int:
        """Bonus for the age bucket the article falls into."""
        age_hours = (_as_utc(now) - _as_utc(pub_date)).total_seconds() / 3600
        for max_age, bonus in RECENCY_BUCKETS:
            if age_hours < max_age:
                return bonus
        return 0

    def breakdown(self, article: RawArticle, now: Optional[datetime] = None) -> Dict[str, int]:
        """
        Score components for an article.

        A rejected article yields a single ``excluded`` or ``too_short``
        entry; otherwise one entry per signal. The score is the sum.
        """
        now = now or pendulum.now("UTC")
        title = article.title.lower()

        if "!" in title or any(pattern in title for pattern in self.exclude_patterns):
            return {"excluded": EXCLUDED_SCORE}
        if len(article.title) < MIN_TITLE_LENGTH:
            return {"too_short": TOO_SHORT_SCORE}

        full_text = f"{title} {article.content_snippet.lower()}"
        title_length = len(article.title)

        return {
            "recency": self.recency_bonus(article.pub_date, now),
            "essay": min(_count_matches(full_text, self.essay_words) * 12, 35),
            "longform": min(_count_matches(full_text, self.longform_words) * 10, 15),
            "title_length": 15 if 40 <= title_length <= 120 else 0,
            "clickbait": -30 if _count_matches(title, self.clickbait_words) else 0,
            "quality": min(_count_matches(title, self.quality_words) * 5, 10),
            "colon": 5 if ":" in title else 0,
            "depth": min(_count_matches(full_text, self.depth_words) * 10, 20),
        }

    def score(self, article: RawArticle, now: Optional[datetime] = None) -> int:
        """Score an article at ``now`` (defaults to the current time)."""
        return sum(self.breakdown(article, now).values())


_default_scorer = ArticleScorer()


def score_article(article: RawArticle, now: Optional[datetime] = None) -> int:
    """Score an article with the built-in keyword lists."""
    return _default_scorer.score(article, now)
