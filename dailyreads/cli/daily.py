"""Daily command implementation."""

import json

import typer
from rich.console import Console

from ..config import Config
from ..ingestion import print_feed_summary
from ..pipeline import DailyArticlesAggregator
from ..ranking import print_ranking_summary

console = Console()


def daily_command(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the API payload instead of tables"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show the score breakdown per article"),
) -> None:
    """Fetch the feeds and print today's selection."""
    settings: Config = ctx.obj
    try:
        aggregator = DailyArticlesAggregator(settings.config, sources=settings.enabled_sources)
        report = aggregator.collect_sync()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Aggregation failed: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps([a.model_dump() for a in report.articles], indent=2, ensure_ascii=False))
        return

    print_feed_summary(report.feed_results)
    print_ranking_summary(
        report.ranked,
        report.articles,
        scorer=aggregator.scorer,
        now=report.generated_at,
        explain=explain,
    )
