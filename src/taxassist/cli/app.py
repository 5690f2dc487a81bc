"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..features import build_deadlines, filter_deadlines
from ..features.deadlines import ALL
from ..llm import TaxAssistError
from ..markup import render, render_console
from ..prompts import get_app_explanation_instruction
from .providers import get_service, get_theme_store, require_service

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="taxassist",
    help="Tax compliance assistant: deadlines, checklists, research and drafting",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command(name="ui")
def ui_command(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive dashboard."""
    async def _ui():
        from ..ui import run_textual_tui

        service = get_service(console)
        await run_textual_tui(service, theme_store=get_theme_store(), log_level=log_level)
        console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_ui())
    except KeyboardInterrupt:
        pass


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Question for the assistant"),
    search: bool = typer.Option(
        False,
        "--search",
        "-s",
        help="Ground the answer with Google Search and list sources"
    ),
    app_help: bool = typer.Option(
        False,
        "--app-help",
        help="Answer as the app explanation assistant instead of the tax assistant"
    ),
):
    """Ask the assistant a single question."""
    async def _ask():
        service = require_service(console)
        custom_instruction = get_app_explanation_instruction() if app_help else None

        try:
            with console.status("[dim]Thinking...[/dim]"):
                result = await service.request(
                    prompt,
                    use_default_instruction=not app_help,
                    use_search_grounding=search,
                    custom_instruction=custom_instruction,
                )
        except TaxAssistError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(code=1)
        finally:
            await service.close()

        console.print(Panel(render_console(result.text), title=f"[bold]{result.model}[/bold]", border_style="cyan"))
        if result.references:
            console.print("[bold]Sources:[/bold]")
            for i, reference in enumerate(result.references, 1):
                console.print(f"  {i}. {escape(reference.title)} [dim]{escape(reference.uri)}[/dim]", highlight=False)

    asyncio.run(_ask())


@app.command(name="render")
def render_command(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Text file with markup to convert"
    ),
):
    """Convert a markup file to HTML and print it."""
    try:
        text = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    typer.echo(render(text))


@app.command()
def deadlines(
    jurisdiction: str = typer.Option(
        ALL,
        "--jurisdiction",
        "-j",
        help="Only show deadlines for this jurisdiction"
    ),
    entity_type: str = typer.Option(
        ALL,
        "--entity-type",
        "-e",
        help="Only show deadlines for this entity type (general deadlines always shown)"
    ),
    year: int | None = typer.Option(
        None,
        "--year",
        "-y",
        help="Tax year (default: current year)"
    ),
):
    """List filing deadlines, sorted by date."""
    selected = filter_deadlines(build_deadlines(year), jurisdiction, entity_type)
    if not selected:
        console.print("[yellow]No deadlines match the filters[/yellow]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Due Date", style="green", width=12)
    table.add_column("Deadline")
    table.add_column("Jurisdiction", style="cyan")
    table.add_column("Entity Type", style="yellow")

    for deadline in selected:
        table.add_row(
            deadline.due_date.isoformat(),
            deadline.name,
            deadline.jurisdiction,
            deadline.entity_type or "All entities",
        )

    console.print(table)
    console.print("[dim]Illustrative dates. Confirm with the relevant tax authority.[/dim]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
