"""Article scoring and selection."""

from .models import ScoredArticle, SelectedArticle
from .scorers import ArticleScorer, score_article
from .selector import (
    DIVERSITY_THRESHOLD,
    MAX_ARTICLES,
    print_ranking_summary,
    rank_articles,
    select_articles,
)

__all__ = [
    "ArticleScorer",
    "ScoredArticle",
    "SelectedArticle",
    "DIVERSITY_THRESHOLD",
    "MAX_ARTICLES",
    "print_ranking_summary",
    "rank_articles",
    "score_article",
    "select_articles",
]
