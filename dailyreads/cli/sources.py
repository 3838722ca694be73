"""Sources management commands."""

from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from ..config import Config, SourceConfig, save_sources
from ..ingestion import parse_feed

console = Console()
sources_app = typer.Typer(help="Manage RSS sources")


def _load(settings: Config):
    try:
        return settings.sources
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Could not load sources: {e}[/red]")
        raise typer.Exit(1)


@sources_app.command("list")
def sources_list(ctx: typer.Context) -> None:
    """List all configured sources."""
    settings: Config = ctx.obj
    sources = _load(settings)

    if not sources:
        console.print("[yellow]No sources configured.[/yellow]")
        return

    table = Table(title="Configured Sources")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", style="yellow")
    table.add_column("URL", style="blue")

    for source in sources:
        table.add_row(
            source.name,
            "✓" if source.enabled else "✗",
            source.url,
        )

    console.print(table)
    if not settings.sources_path.exists():
        console.print("[dim]Using built-in feed list (no sources.yaml found).[/dim]")


@sources_app.command("add")
def sources_add(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="Source name"),
    url: str = typer.Option(..., "--url", "-u", help="RSS feed URL"),
) -> None:
    """Add a new RSS source."""
    settings: Config = ctx.obj
    sources = list(_load(settings))

    if any(s.name == name or s.url == url for s in sources):
        console.print(f"[red]Source '{name}' or URL already exists.[/red]")
        raise typer.Exit(1)

    sources.append(SourceConfig(name=name, url=url, enabled=True))
    save_sources(sources, settings.sources_path)

    console.print(f"[green]✅ Added source: {name}[/green]")


@sources_app.command("remove")
def sources_remove(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Source name to remove"),
) -> None:
    """Remove a source."""
    settings: Config = ctx.obj
    sources = list(_load(settings))

    original_count = len(sources)
    sources = [s for s in sources if s.name != name]

    if len(sources) == original_count:
        console.print(f"[red]Source '{name}' not found.[/red]")
        raise typer.Exit(1)

    save_sources(sources, settings.sources_path)
    console.print(f"[green]✅ Removed source: {name}[/green]")


@sources_app.command("test")
def sources_test(
    ctx: typer.Context,
    name: Optional[str] = typer.Argument(None, help="Source name to test (or test all)"),
) -> None:
    """Check that feeds respond and contain parseable items."""
    settings: Config = ctx.obj
    sources = _load(settings)

    if name:
        sources = [s for s in sources if s.name == name]
        if not sources:
            console.print(f"[red]Source '{name}' not found.[/red]")
            raise typer.Exit(1)

    fetch = settings.config.fetch
    with httpx.Client(
        timeout=fetch.timeout,
        follow_redirects=True,
        headers={"User-Agent": fetch.user_agent},
    ) as client:
        for source in sources:
            if not source.enabled:
                console.print(f"[yellow]⚠️  {source.name}: Disabled[/yellow]")
                continue

            try:
                response = client.get(source.url)
                response.raise_for_status()
            except httpx.HTTPError as e:
                console.print(f"[red]❌ {source.name}: Failed - {e}[/red]")
                continue

            items = parse_feed(response.text, source.url, max_items=fetch.max_items_per_feed)
            console.print(
                f"[green]✅ {source.name}: OK ({response.status_code}, {len(items)} items)[/green]"
            )
