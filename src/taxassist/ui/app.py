"""Main Textual TUI application.

Owns the app-wide state the screens share: the assistant service, the
theme preference and the trace log.
"""

import asyncio
import contextlib
from collections import deque
from datetime import datetime

from textual.app import App
from textual.binding import Binding

from ..config.theme import DEFAULT_THEME_MODE, InMemoryThemeStore, ThemeMode, ThemeStore
from ..llm.service import AssistantService
from .config import APP_TITLE, LOG_BACKLOG_SIZE, LogLevel
from .screens import HomeScreen
from .styles import APP_CSS
from .themes import THEMES, theme_name
from .widgets import DebugPanel


class TaxAssistApp(App):
    """Textual TUI for the tax compliance dashboard."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+d", "toggle_debug", "Debug"),
    ]

    def __init__(
        self,
        service: AssistantService,
        theme_store: ThemeStore | None = None,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self.service = service
        self.theme_store = theme_store or InMemoryThemeStore()
        self.theme_mode: ThemeMode = self.theme_store.load()
        self.log_level = LogLevel.from_string(log_level) if log_level else LogLevel.DEBUG
        self.debug_visible = log_level is not None
        self._trace_backlog: deque[tuple[datetime, LogLevel, str, str]] = deque(maxlen=LOG_BACKLOG_SIZE)
        self.service.set_debug_callback(self.trace)

    def on_mount(self) -> None:
        for theme in THEMES:
            self.register_theme(theme)
        self.theme = theme_name(self.theme_mode)
        self.sub_title = self.service.model or "AI features disabled"

        self.trace("info", "TUI", f"Started ({self.theme_mode.value} theme)")
        if not self.service.available:
            self.trace("warning", "TUI", "No API key configured, AI features disabled")
        self.push_screen(HomeScreen())

    def trace(self, level: str, component: str, message: str) -> None:
        """Record a trace entry and show it in every open trace panel.

        Signature matches the debug callbacks of the core components.
        """
        entry = (datetime.now(), LogLevel.from_string(level), component, message)
        self._trace_backlog.append(entry)
        for panel in self._debug_panels():
            panel.trace(component, message, entry[1], timestamp=entry[0])

    def attach_debug_panel(self, panel: DebugPanel) -> None:
        """Configure a newly mounted panel and replay recent entries."""
        panel.log_level = self.log_level
        panel.set_visible(self.debug_visible)
        for timestamp, level, component, message in self._trace_backlog:
            panel.trace(component, message, level, timestamp=timestamp)

    def _debug_panels(self) -> list[DebugPanel]:
        panels: list[DebugPanel] = []
        for screen in self.screen_stack:
            panels.extend(screen.query(DebugPanel))
        return panels

    def apply_theme(self, mode: ThemeMode) -> None:
        self.theme_mode = mode
        self.theme = theme_name(mode)

    def action_toggle_theme(self) -> None:
        """Switch light/dark and persist the choice."""
        mode = self.theme_mode.toggled()
        self.apply_theme(mode)
        self.theme_store.save(mode)
        self.trace("info", "Theme", f"Switched to {mode.value}")
        self.notify(f"{mode.value.capitalize()} theme", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the trace panel on every screen."""
        self.debug_visible = not self.debug_visible
        for panel in self._debug_panels():
            panel.set_visible(self.debug_visible)
        self.notify(f"Log panel {'shown' if self.debug_visible else 'hidden'}", timeout=2)

    def clear_local_data(self) -> None:
        """Reset stored preferences to their defaults."""
        self.theme_store.save(DEFAULT_THEME_MODE)
        self.apply_theme(DEFAULT_THEME_MODE)
        self.trace("info", "Theme", "Local data cleared")
        self.notify("Local data cleared", timeout=2)


async def run_textual_tui(
    service: AssistantService,
    theme_store: ThemeStore | None = None,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        service: Assistant service (without a provider, AI features are disabled)
        theme_store: Where the theme preference is loaded from and saved to
        log_level: Trace panel level (debug/info/warning/error), None to hide
    """
    app = TaxAssistApp(service=service, theme_store=theme_store, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await service.close()
