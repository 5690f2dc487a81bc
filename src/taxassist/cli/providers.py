"""Service and store factories for the CLI.

Centralizes creation of the assistant service and the theme store from
environment variables. Hides configuration details from command
implementations.
"""

from rich.console import Console

from ..config import ThemeStore, create_service, create_theme_store, load_settings
from ..llm import AssistantService

# Default console for output
_console = Console()


def get_service(console: Console | None = None) -> AssistantService:
    """Create the assistant service from environment variables.

    Without a credential the service is still returned, with AI features
    disabled, and a warning is printed.

    Environment variables:
        GEMINI_API_KEY: Gemini API key (falls back to API_KEY)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
    """
    con = console or _console
    settings = load_settings()
    if not settings.has_credential:
        con.print("[yellow]Warning: GEMINI_API_KEY not set, AI features disabled[/yellow]")
    return create_service(settings)


def require_service(console: Console | None = None) -> AssistantService:
    """Get the assistant service, exiting if no credential is configured.

    Raises:
        typer.Exit: If no API key is configured
    """
    import typer

    con = console or _console
    service = get_service(con)
    if not service.available:
        con.print("[red]Error: Gemini API key is not configured[/red]")
        raise typer.Exit(code=1)
    return service


def get_theme_store() -> ThemeStore:
    """JSON theme store at TAXASSIST_THEME_FILE (default ~/.taxassist/theme.json)."""
    return create_theme_store("json", path=load_settings().theme_file)
