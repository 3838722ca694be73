"""Read command implementation."""

import typer
from rich.console import Console
from rich.markdown import Markdown

from ..config import Config
from ..exceptions import ReaderError
from ..reader import ReaderClient

console = Console()


def read_command(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Article URL"),
    html: bool = typer.Option(False, "--html", help="Print the HTML fragment served by the API"),
) -> None:
    """Print a readable version of an article."""
    settings: Config = ctx.obj
    reader = ReaderClient(settings.config.reader)

    try:
        document = reader.read_sync(url)
    except ReaderError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)

    if html:
        typer.echo(document.content)
        return

    if document.title:
        console.rule(f"[bold]{document.title}[/bold]")
    console.print(Markdown(document.markdown))
