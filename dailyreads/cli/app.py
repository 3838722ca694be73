"""Main CLI application."""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

from ..config import Config
from ..log import setup_logging
from .daily import daily_command
from .init import init_command
from .read import read_command
from .serve import serve_command
from .sources import sources_app

app = typer.Typer(
    name="dailyreads",
    help="dailyreads - daily essay and longform picks from RSS feeds",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        envvar="DAILYREADS_CONFIG",
        help="Path to config.yaml (sources.yaml is read from the same folder)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Load configuration and set up logging for every command."""
    settings = Config(config_path)
    try:
        level = "DEBUG" if verbose else settings.config.log_level
    except (FileNotFoundError, ValueError):
        level = "DEBUG" if verbose else "INFO"
    setup_logging(level)
    ctx.obj = settings


# Register commands
app.command("init")(init_command)
app.command("daily")(daily_command)
app.command("read")(read_command)
app.command("serve")(serve_command)
app.add_typer(sources_app, name="sources", help="Manage RSS sources")


if __name__ == "__main__":
    app()
