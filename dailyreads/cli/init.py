"""Init command implementation."""

import typer
from rich.console import Console
from rich.panel import Panel

from ..config import DEFAULT_SOURCES, Config, ConfigModel, save_config, save_sources

console = Console()


def init_command(
    ctx: typer.Context,
    seed_sources: bool = typer.Option(
        True,
        "--seed-sources/--no-seed-sources",
        help="Seed the default feed list",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
) -> None:
    """Write default config.yaml and sources.yaml."""
    settings: Config = ctx.obj
    config_path = settings.config_path
    sources_path = settings.sources_path

    if config_path.exists() and not force:
        console.print(f"[red]Config already exists: {config_path} (use --force to overwrite)[/red]")
        raise typer.Exit(1)

    save_config(ConfigModel(), config_path)
    console.print(f"✅ Created config: {config_path}")

    if seed_sources:
        sources = list(DEFAULT_SOURCES)
        save_sources(sources, sources_path)
        console.print(f"✅ Created sources: {sources_path} (seeded with {len(sources)} sources)")
    else:
        save_sources([], sources_path)
        console.print(f"✅ Created sources: {sources_path} (empty)")

    console.print(
        Panel(
            f"[green]✅ dailyreads initialized![/green]\n\n"
            f"Configuration: {config_path}\n"
            f"Sources: {sources_path}\n\n"
            f"Next steps:\n"
            f"1. Preview today's list: [bold]dailyreads daily[/bold]\n"
            f"2. Serve the API: [bold]dailyreads serve[/bold]",
            style="green",
        )
    )
