"""Navigation screens and feature dispatch.

This module hides the design decisions about:
- What the welcome page and the dashboard show
- Which screen opens for a feature (one exhaustive match over Feature)
- What happens when an AI feature is picked without a credential
"""

from typing import assert_never

from textual.app import ComposeResult
from textual.containers import Center, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import Button, Static

from ..features import FEATURE_GROUPS, Feature, requires_ai
from ..llm.errors import MISSING_KEY_MESSAGE
from .base import BaseScreen
from .config import APP_TITLE
from .sections import (
    ChecklistScreen,
    CommunicationScreen,
    DeadlineScreen,
    DocumentAnalysisScreen,
    SettingsScreen,
    SummarizerScreen,
    app_explanation_screen,
    research_screen,
)
from .widgets import FeatureCard


def screen_for(feature: Feature) -> Screen:
    """Build the screen for a dashboard feature."""
    match feature:
        case Feature.DOCUMENT_ANALYSIS:
            return DocumentAnalysisScreen()
        case Feature.CHECKLIST_GENERATION:
            return ChecklistScreen()
        case Feature.DEADLINE_TRACKING:
            return DeadlineScreen()
        case Feature.TAX_RESEARCH:
            return research_screen()
        case Feature.REGULATION_SUMMARIZER:
            return SummarizerScreen()
        case Feature.CLIENT_COMMUNICATION:
            return CommunicationScreen()
        case Feature.APP_EXPLANATION:
            return app_explanation_screen()
        case Feature.SETTINGS:
            return SettingsScreen()
        case _:
            assert_never(feature)


class HomeScreen(BaseScreen):
    """Welcome page. Escape does nothing here; Ctrl+C quits."""

    def compose_body(self) -> ComposeResult:
        with Vertical(id="welcome"):
            with Vertical(id="welcome-box"):
                yield Static(APP_TITLE, id="welcome-title")
                yield Static(
                    "Document analysis, compliance checklists, filing deadlines "
                    "and AI-assisted research and drafting for tax professionals.",
                    id="welcome-text",
                )
                if not self.taxassist.service.available:
                    yield Static(MISSING_KEY_MESSAGE, classes="status-line -warning")
                with Horizontal(id="welcome-actions"):
                    yield Button("Get Started", id="start-btn", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#start-btn", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "start-btn":
            self.app.push_screen(DashboardScreen())

    def action_back(self) -> None:
        pass


class DashboardScreen(BaseScreen):
    """Feature cards grouped by purpose."""

    SECTION_TITLE = "Dashboard"

    def compose_body(self) -> ComposeResult:
        available = self.taxassist.service.available
        for group in FEATURE_GROUPS:
            yield Static(group.title, classes="group-title")
            with Horizontal(classes="card-row"):
                for info in group.features:
                    yield FeatureCard(info, enabled=available or not requires_ai(info.feature))
        with Center():
            yield Static("Enter opens a card. Esc goes back. Ctrl+T switches theme.", classes="section-intro")

    def on_feature_card_selected(self, event: FeatureCard.Selected) -> None:
        self.open_feature(event.feature)

    def open_feature(self, feature: Feature) -> None:
        if requires_ai(feature) and not self.taxassist.service.available:
            self.notify(MISSING_KEY_MESSAGE, severity="warning", timeout=5)
            self.trace("warning", "TUI", f"{feature.value} needs an API key")
            return
        self.trace("debug", "TUI", f"Opening {feature.value}")
        self.app.push_screen(screen_for(feature))
