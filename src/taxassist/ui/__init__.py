"""Terminal UI for taxassist.

Provides a Textual-based TUI for the tax compliance dashboard.

Module structure (each module hides a design decision):
- config.py: Constants and trace levels
- themes.py: Light and dark color palettes
- styles.py: CSS styling (layout decisions)
- widgets.py: Chat history, input bar, trace panel, dashboard cards
- callbacks.py: How conversation updates reach the chat view
- base.py: Common screen frame and confirmation dialog
- sections.py: One screen per dashboard feature
- screens.py: Welcome page, dashboard, feature dispatch
- app.py: Application orchestration (theme, trace log, service)
"""

from .app import TaxAssistApp, run_textual_tui
from .callbacks import ChatViewCallback
from .config import LogLevel
from .screens import DashboardScreen, HomeScreen, screen_for
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, FeatureCard, MarkupView

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChatViewCallback",
    "DashboardScreen",
    "DebugPanel",
    "FeatureCard",
    "HomeScreen",
    "LogLevel",
    "MarkupView",
    "TaxAssistApp",
    "run_textual_tui",
    "screen_for",
]
