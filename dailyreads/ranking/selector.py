"""Ranking and source-diverse selection of the daily list."""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Set

import pendulum
from rich.console import Console
from rich.table import Table

from ..ingestion.models import RawArticle
from .models import ScoredArticle, SelectedArticle
from .scorers import ArticleScorer

console = Console()

MAX_ARTICLES = 9
DIVERSITY_THRESHOLD = 5


def rank_articles(
    articles: Iterable[RawArticle],
    scorer: Optional[ArticleScorer] = None,
    now: Optional[datetime] = None,
) -> List[ScoredArticle]:
    """
    Score articles, drop non-positive ones and sort best first.

    The sort is stable, so equal scores keep their input order.
    """
    scorer = scorer or ArticleScorer()
    now = now or pendulum.now("UTC")

    scored = [ScoredArticle.from_raw(article, scorer.score(article, now)) for article in articles]
    scored = [article for article in scored if article.score > 0]
    scored.sort(key=lambda a: a.score, reverse=True)
    return scored


def select_articles(
    scored: Sequence[ScoredArticle],
    max_articles: int = MAX_ARTICLES,
    diversity_threshold: int = DIVERSITY_THRESHOLD,
) -> List[SelectedArticle]:
    """
    Pick the daily list from articles sorted best first.

    First pass takes one article per source until ``diversity_threshold``
    picks exist, after which sources may repeat. Second pass backfills
    from whatever is left. URLs are never repeated.
    """
    candidates = [article for article in scored if article.score > 0]
    selected: List[SelectedArticle] = []
    selected_urls: Set[str] = set()
    used_sources: Set[str] = set()

    for article in candidates:
        if len(selected) >= max_articles:
            break
        if article.url in selected_urls:
            continue
        if article.source not in used_sources or len(selected) >= diversity_threshold:
            selected.append(SelectedArticle(title=article.title, url=article.url))
            selected_urls.add(article.url)
            used_sources.add(article.source)

    for article in candidates:
        if len(selected) >= max_articles:
            break
        if article.url not in selected_urls:
            selected.append(SelectedArticle(title=article.title, url=article.url))
            selected_urls.add(article.url)

    return selected


def print_ranking_summary(
    ranked: Sequence[ScoredArticle],
    selected: Sequence[SelectedArticle],
    scorer: Optional[ArticleScorer] = None,
    now: Optional[datetime] = None,
    explain: bool = False,
) -> None:
    """Print the selected articles with their scores."""
    console.print("\n[bold]Ranking Summary:[/bold]")
    console.print(f"  Positive-scoring articles: {len(ranked)}")
    console.print(f"  Selected: {len(selected)}")

    if not selected:
        return

    by_url = {article.url: article for article in ranked}
    scorer = scorer or ArticleScorer()
    now = now or pendulum.now("UTC")

    table = Table(title="Daily Articles")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Score", style="green", justify="right")
    table.add_column("Title", style="yellow")
    table.add_column("Source", style="cyan")
    if explain:
        table.add_column("Breakdown", style="dim")

    for i, pick in enumerate(selected, 1):
        article = by_url.get(pick.url)
        row = [
            str(i),
            str(article.score) if article else "-",
            pick.title,
            article.source if article else "-",
        ]
        if explain:
            parts = scorer.breakdown(article, now) if article else {}
            row.append(" ".join(f"{k}:{v}" for k, v in parts.items() if v))
        table.add_row(*row)

    console.print(table)
