"""Tests for the Textual TUI using the headless test pilot."""
import pytest
from textual.widgets import Button, DataTable, TextArea

from taxassist.chat import Sender
from taxassist.config import InMemoryThemeStore, ThemeMode
from taxassist.features import Feature
from taxassist.llm import Reference
from taxassist.ui import TaxAssistApp
from taxassist.ui.screens import DashboardScreen, HomeScreen, screen_for
from taxassist.ui.sections import (
    ChatScreen,
    DeadlineScreen,
    DocumentAnalysisScreen,
    SummarizerScreen,
    research_screen,
)
from taxassist.ui.themes import theme_name
from taxassist.ui.widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    MarkupView,
    format_references,
)


@pytest.mark.parametrize("feature", list(Feature))
def test_every_feature_has_a_screen(feature):
    """Test that every feature maps to a screen."""
    assert screen_for(feature) is not None


@pytest.mark.asyncio
async def test_starts_on_home_screen(offline_service):
    """Test that the app opens on the home screen in dark mode."""
    app = TaxAssistApp(offline_service)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, HomeScreen)
        assert app.theme == theme_name(ThemeMode.DARK)


@pytest.mark.asyncio
async def test_theme_toggle_is_saved(offline_service):
    """Test that toggling the theme is saved to the store."""
    store = InMemoryThemeStore()
    app = TaxAssistApp(offline_service, theme_store=store)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("ctrl+t")

        assert app.theme_mode is ThemeMode.LIGHT
        assert app.theme == theme_name(ThemeMode.LIGHT)
        assert store.load() is ThemeMode.LIGHT


@pytest.mark.asyncio
async def test_stored_theme_is_applied(offline_service):
    """Test that a stored theme is applied on start."""
    app = TaxAssistApp(offline_service, theme_store=InMemoryThemeStore(ThemeMode.LIGHT))
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.theme == theme_name(ThemeMode.LIGHT)


@pytest.mark.asyncio
async def test_clear_local_data_restores_default(offline_service):
    """Test that clearing local data restores the dark theme."""
    store = InMemoryThemeStore(ThemeMode.LIGHT)
    app = TaxAssistApp(offline_service, theme_store=store)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.clear_local_data()

        assert store.load() is ThemeMode.DARK
        assert app.theme == theme_name(ThemeMode.DARK)


@pytest.mark.asyncio
async def test_debug_panel_toggle(offline_service):
    """Test that the debug panel starts hidden and toggles on."""
    app = TaxAssistApp(offline_service)
    async with app.run_test() as pilot:
        await pilot.pause()
        panel = app.screen.query_one("#debug-panel", DebugPanel)
        assert not panel.display

        await pilot.press("ctrl+d")
        assert app.debug_visible
        assert panel.display


@pytest.mark.asyncio
async def test_dashboard_navigation(offline_service):
    """Test that the dashboard opens a feature and escape returns."""
    app = TaxAssistApp(offline_service)
    async with app.run_test() as pilot:
        await pilot.pause()
        app.screen.query_one("#start-btn").press()
        await pilot.pause()
        assert isinstance(app.screen, DashboardScreen)

        app.screen.open_feature(Feature.DEADLINE_TRACKING)
        await pilot.pause()
        assert isinstance(app.screen, DeadlineScreen)
        assert app.screen.query_one("#deadline-table", DataTable).row_count == 10

        await pilot.press("escape")
        await pilot.pause()
        assert isinstance(app.screen, DashboardScreen)


@pytest.mark.asyncio
async def test_ai_feature_refused_without_credential(offline_service):
    """Test that AI features are not opened without a credential."""
    app = TaxAssistApp(offline_service)
    async with app.run_test() as pilot:
        await pilot.pause()
        dashboard = DashboardScreen()
        await app.push_screen(dashboard)
        await pilot.pause()

        dashboard.open_feature(Feature.TAX_RESEARCH)
        await pilot.pause()

        assert app.screen is dashboard


@pytest.mark.asyncio
async def test_document_analysis_screen(offline_service):
    """Test that the analysis screen flags issues for a document."""
    app = TaxAssistApp(offline_service)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = DocumentAnalysisScreen()
        await app.push_screen(screen)
        await pilot.pause()

        issues = screen.analyze("Schedule C business expense")
        assert issues is not None
        assert [issue.id for issue in issues] == ["2"]
        assert screen.analyze("") is None


@pytest.mark.asyncio
async def test_chat_screen_streams_reply(service, fake_provider):
    """Test that a submitted prompt streams a reply into the chat view."""
    app = TaxAssistApp(service)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = research_screen()
        await app.push_screen(screen)
        await pilot.pause()

        screen.query_one(ChatInputBar).post_message(ChatInputBar.Submitted("When is Form 1065 due?"))
        await pilot.pause()
        await app.workers.wait_for_complete()
        await pilot.pause()

        messages = screen.session.conversation.messages
        assert [m.sender for m in messages] == [Sender.USER, Sender.AI]
        assert messages[-1].text == "Hello world"
        assert len(screen.query_one(ChatHistoryWidget).message_ids) == 2
        assert fake_provider.calls[0]["prompt"] == "When is Form 1065 due?"


@pytest.mark.asyncio
async def test_chat_screen_disabled_without_credential(offline_service):
    """Test that the chat screen is disabled without a credential."""
    app = TaxAssistApp(offline_service)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = ChatScreen("Tax Research", "Ask a question.")
        await app.push_screen(screen)
        await pilot.pause()

        assert screen.session is not None
        assert not screen.session.available


@pytest.mark.asyncio
async def test_summarizer_shows_answer(service, fake_provider):
    """Test that the summarizer shows the model answer."""
    app = TaxAssistApp(service)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = SummarizerScreen()
        await app.push_screen(screen)
        await pilot.pause()

        screen.query_one("#source-input", TextArea).text = "Section 199A deduction rules."
        screen.query_one("#submit-btn", Button).press()
        await pilot.pause()
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert screen.query_one("#result", MarkupView).source == "Answer"
        assert "Section 199A deduction rules." in fake_provider.calls[0]["prompt"]


@pytest.mark.asyncio
async def test_every_fragment_rerenders_once(service, monkeypatch):
    """Test that each streamed fragment updates the chat view exactly once."""
    app = TaxAssistApp(service)
    async with app.run_test() as pilot:
        await pilot.pause()
        screen = research_screen()
        await app.push_screen(screen)
        await pilot.pause()

        rendered: list[tuple[str, bool]] = []
        history = screen.query_one(ChatHistoryWidget)
        monkeypatch.setattr(
            history, "upsert_message",
            lambda message, streaming=False: rendered.append((message.text, streaming)),
        )

        conversation = screen.session.conversation
        conversation.begin_ai_turn()
        for fragment in ["a", "b", "c", "d"]:
            conversation.consume(fragment, False)
        conversation.consume("", True)

        assert rendered == [
            ("", True),
            ("a", True),
            ("ab", True),
            ("abc", True),
            ("abcd", True),
            ("abcd", False),
        ]


def test_references_link_uri_with_spaces():
    """Test that a source URI containing spaces is kept whole as the link."""
    uri = "https://www.irs.gov/forms pubs/about form 1065"
    text = format_references([Reference(title="About Form 1065", uri=uri)])

    assert text.plain == "Sources:\n1. About Form 1065"
    links = [span.style.link for span in text.spans if not isinstance(span.style, str)]
    assert links == [uri]
