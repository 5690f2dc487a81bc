"""Feature sections of the dashboard.

Each screen owns its state; leaving a screen cancels its workers and, for
chat sections, closes the conversation so late stream callbacks are
ignored.
"""

from rich.table import Table
from rich.text import Text as RichText
from textual import work
from textual.app import ComposeResult
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import (
    Button,
    Checkbox,
    DataTable,
    Select,
    SelectionList,
    Static,
    TextArea,
)
from textual.widgets.selection_list import Selection

from ..chat.conversation import TurnInProgressError
from ..chat.session import ChatSession
from ..features import (
    AUDIENCE_OPTIONS,
    ENTITY_TYPES,
    JURISDICTIONS,
    ChecklistItem,
    ComplianceIssue,
    DocumentAnalysisError,
    RiskLevel,
    analyze_document,
    build_client_communication_prompt,
    build_deadlines,
    build_regulation_summary_prompt,
    entity_type_options,
    filter_deadlines,
    generate_checklist,
    jurisdiction_options,
    progress,
    toggle_item,
)
from ..features.deadlines import ALL
from ..llm.errors import MISSING_KEY_MESSAGE, TaxAssistError
from ..prompts import get_app_explanation_instruction
from .base import BaseScreen, ConfirmationScreen
from .callbacks import ChatViewCallback
from .config import APP_VERSION_LABEL
from .themes import code_theme
from .widgets import ChatHistoryWidget, ChatInputBar, MarkupView

RISK_STYLES = {
    RiskLevel.HIGH: "bold red",
    RiskLevel.MEDIUM: "bold yellow",
    RiskLevel.LOW: "bold green",
}


def _status(classes: str = "status-line") -> Static:
    return Static("", classes=classes, markup=False)


def _set_status(status: Static, message: str, kind: str | None = None) -> None:
    status.update(message)
    status.set_class(kind == "error", "-error")
    status.set_class(kind == "warning", "-warning")


class ChatScreen(BaseScreen):
    """Streaming chat with the assistant.

    Used by Tax Research (default instruction, optional search grounding)
    and the App Explanation assistant (custom instruction).
    """

    def __init__(
        self,
        title: str,
        intro: str,
        custom_instruction: str | None = None,
        allow_search: bool = False,
        placeholder: str = "Ask a question...",
    ) -> None:
        super().__init__()
        self.SECTION_TITLE = title
        self._intro = intro
        self._custom_instruction = custom_instruction
        self._allow_search = allow_search
        self._placeholder = placeholder
        self._chat: ChatViewCallback | None = None
        self._session: ChatSession | None = None

    @property
    def session(self) -> ChatSession | None:
        return self._session

    def compose_body(self) -> ComposeResult:
        yield Static(self._intro, classes="section-intro")
        if self._allow_search:
            yield Checkbox("Use Google Search grounding", id="search-toggle")
        yield ChatHistoryWidget(id="chat-history", code_theme=code_theme(self.taxassist.theme_mode))
        yield _status()
        yield ChatInputBar(id="chat-input-bar", placeholder=self._placeholder)

    def on_mount(self) -> None:
        status = self.query_one(".status-line", Static)
        self._chat = ChatViewCallback(
            self.query_one("#chat-history", ChatHistoryWidget),
            status,
            trace=self.trace,
            notify=lambda message: self.notify(message, severity="error", timeout=5),
        )
        self._session = ChatSession(
            self.taxassist.service,
            conversation=self._chat.conversation,
            use_default_instruction=self._custom_instruction is None,
            custom_instruction=self._custom_instruction,
            on_error=self._chat.on_error,
        )

        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        if not self._session.available:
            _set_status(status, MISSING_KEY_MESSAGE, "warning")
            input_bar.set_enabled(False)
            if self._allow_search:
                self.query_one("#search-toggle", Checkbox).disabled = True
        else:
            input_bar.focus_input()

    def on_unmount(self) -> None:
        if self._session is not None:
            self._session.close()
        self.app.workers.cancel_node(self)

    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        if self._session is not None and event.checkbox.id == "search-toggle":
            self._session.use_search_grounding = event.value
            self.trace("debug", "Chat", f"Search grounding {'on' if event.value else 'off'}")

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        if self._session is None:
            return
        if self._session.busy:
            self.notify("Please wait for the current response.", severity="warning", timeout=3)
            return
        self._send(event.value)

    @work(exclusive=True)
    async def _send(self, prompt: str) -> None:
        if self._session is None or self._chat is None:
            return
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)
        self._chat.clear_status()
        input_bar.set_enabled(False)
        try:
            await self._session.submit(prompt)
        except TurnInProgressError as e:
            self.notify(str(e), severity="warning", timeout=3)
        except TaxAssistError as e:
            self._chat.show_error(str(e))
            self.notify(str(e), severity="error", timeout=5)
        finally:
            if self._session.conversation.is_alive:
                input_bar.set_enabled(True)
                input_bar.focus_input()


def research_screen() -> ChatScreen:
    return ChatScreen(
        title="Tax Research",
        intro="Ask about tax law, regulations and recent changes. "
              "Enable search grounding for answers with cited web sources.",
        allow_search=True,
        placeholder="e.g. What changed in the 2024 standard deduction?",
    )


def app_explanation_screen() -> ChatScreen:
    return ChatScreen(
        title="App Explanation Assistant",
        intro="Ask how this application works and what each feature does.",
        custom_instruction=get_app_explanation_instruction(),
        placeholder="e.g. How do I track filing deadlines?",
    )


class DocumentAnalysisScreen(BaseScreen):
    """Paste a document and list the compliance issues found."""

    SECTION_TITLE = "Document Analysis"

    def compose_body(self) -> ComposeResult:
        yield Static(
            "Paste the text of a tax document to check it for common compliance issues.",
            classes="section-intro",
        )
        yield TextArea(id="document-input", classes="editor")
        with Horizontal(classes="form-row"):
            yield Button("Analyze Document", id="analyze-btn", variant="primary")
        yield _status()
        yield Static("", id="issues", classes="result-panel")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "analyze-btn":
            self.analyze(self.query_one("#document-input", TextArea).text)

    def analyze(self, text: str) -> list[ComplianceIssue] | None:
        status = self.query_one(".status-line", Static)
        panel = self.query_one("#issues", Static)
        try:
            issues = analyze_document(text)
        except DocumentAnalysisError as e:
            _set_status(status, str(e), "error")
            panel.update("")
            self.trace("warning", "Features", f"Document analysis failed: {e}")
            return None

        self.trace("info", "Features", f"Document analysis found {len(issues)} issue(s)")
        if not issues:
            _set_status(status, "No compliance issues found.")
            panel.update("")
            return issues

        _set_status(status, f"{len(issues)} potential issue(s) found.")
        panel.update(self._issue_table(issues))
        return issues

    @staticmethod
    def _issue_table(issues: list[ComplianceIssue]) -> Table:
        table = Table(expand=True, show_lines=True)
        table.add_column("Risk", no_wrap=True)
        table.add_column("Issue", ratio=2)
        table.add_column("Recommendation", ratio=2)
        table.add_column("Reference", no_wrap=True)
        for issue in issues:
            table.add_row(
                RichText(issue.risk_level.value, style=RISK_STYLES[issue.risk_level]),
                issue.description,
                issue.recommendation,
                issue.reference or "",
            )
        return table


class ChecklistScreen(BaseScreen):
    """Generate and tick off a compliance checklist."""

    SECTION_TITLE = "Checklist Generation"

    def __init__(self) -> None:
        super().__init__()
        self.items: list[ChecklistItem] = []

    def compose_body(self) -> ComposeResult:
        with Horizontal(classes="form-row"):
            yield Select(
                [(entity, entity) for entity in ENTITY_TYPES],
                value=ENTITY_TYPES[0],
                allow_blank=False,
                id="entity-select",
            )
            yield Select(
                [(jurisdiction, jurisdiction) for jurisdiction in JURISDICTIONS],
                value=JURISDICTIONS[0],
                allow_blank=False,
                id="jurisdiction-select",
            )
            yield Button("Generate Checklist", id="generate-btn", variant="primary")
        yield _status()
        yield SelectionList[str](id="checklist")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "generate-btn":
            entity = self.query_one("#entity-select", Select).value
            jurisdiction = self.query_one("#jurisdiction-select", Select).value
            self.generate(str(entity), str(jurisdiction))

    def generate(self, entity_type: str, jurisdiction: str) -> None:
        self.items = generate_checklist(entity_type, jurisdiction)
        self.trace("info", "Features", f"Checklist for {entity_type} / {jurisdiction}: {len(self.items)} items")

        checklist = self.query_one("#checklist", SelectionList)
        checklist.clear_options()
        checklist.add_options([
            Selection(self._label(item), item.id, item.completed) for item in self.items
        ])
        checklist.border_title = f"{entity_type} / {jurisdiction}"
        self._show_progress()

    def on_selection_list_selection_toggled(self, event: SelectionList.SelectionToggled) -> None:
        self.items = toggle_item(self.items, str(event.selection.value))
        self._show_progress()

    def _show_progress(self) -> None:
        done, total = progress(self.items)
        _set_status(self.query_one(".status-line", Static), f"{done} of {total} completed")

    @staticmethod
    def _label(item: ChecklistItem) -> RichText:
        label = RichText(item.text)
        if item.details:
            label.append(f"\n{item.details}", style="dim")
        return label


class DeadlineScreen(BaseScreen):
    """Filterable table of filing deadlines."""

    SECTION_TITLE = "Deadline Tracking"

    def __init__(self) -> None:
        super().__init__()
        self.deadlines = build_deadlines()

    def compose_body(self) -> ComposeResult:
        yield Static(
            "Key deadlines for the current tax year. Always confirm dates with the relevant authority.",
            classes="section-intro",
        )
        with Horizontal(classes="form-row"):
            yield Select(
                [(option, option) for option in jurisdiction_options(self.deadlines)],
                value=ALL,
                allow_blank=False,
                id="jurisdiction-filter",
            )
            yield Select(
                [(option, option) for option in entity_type_options(self.deadlines)],
                value=ALL,
                allow_blank=False,
                id="entity-filter",
            )
        table = DataTable(id="deadline-table", zebra_stripes=True, cursor_type="row")
        table.add_columns("Deadline", "Due Date", "Jurisdiction", "Entity Type")
        yield table

    def on_mount(self) -> None:
        self.refresh_table()

    def on_select_changed(self, event: Select.Changed) -> None:
        self.refresh_table()

    def refresh_table(self) -> None:
        jurisdiction = str(self.query_one("#jurisdiction-filter", Select).value)
        entity_type = str(self.query_one("#entity-filter", Select).value)
        selected = filter_deadlines(self.deadlines, jurisdiction, entity_type)

        table = self.query_one("#deadline-table", DataTable)
        table.clear()
        for deadline in selected:
            table.add_row(
                deadline.name,
                deadline.due_date.strftime("%b %d, %Y"),
                deadline.jurisdiction,
                deadline.entity_type or "All entities",
                key=deadline.id,
            )
        table.border_title = f"{len(selected)} deadlines"


class _GenerationScreen(BaseScreen):
    """One-shot request: build a prompt, show the answer as rendered markup."""

    SUBMIT_LABEL = "Generate"
    INTRO = ""

    def compose_body(self) -> ComposeResult:
        yield Static(self.INTRO, classes="section-intro")
        yield TextArea(id="source-input", classes="editor")
        with Horizontal(classes="form-row"):
            yield from self.compose_options()
            yield Button(self.SUBMIT_LABEL, id="submit-btn", variant="primary")
        yield _status()
        with VerticalScroll(classes="result-panel"):
            yield MarkupView(id="result", code_theme=code_theme(self.taxassist.theme_mode))

    def compose_options(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        if not self.taxassist.service.available:
            _set_status(self.query_one(".status-line", Static), MISSING_KEY_MESSAGE, "warning")
            self.query_one("#submit-btn", Button).disabled = True

    def on_unmount(self) -> None:
        self.app.workers.cancel_node(self)

    def build_prompt(self, text: str) -> str:
        raise NotImplementedError

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "submit-btn":
            return
        status = self.query_one(".status-line", Static)
        try:
            prompt = self.build_prompt(self.query_one("#source-input", TextArea).text)
        except ValueError as e:
            _set_status(status, str(e), "warning")
            return
        self._generate(prompt)

    @work(exclusive=True)
    async def _generate(self, prompt: str) -> None:
        status = self.query_one(".status-line", Static)
        button = self.query_one("#submit-btn", Button)
        result = self.query_one("#result", MarkupView)

        _set_status(status, "Working...")
        button.disabled = True
        try:
            answer = await self.taxassist.service.request(prompt)
        except TaxAssistError as e:
            _set_status(status, str(e), "error")
            self.notify(str(e), severity="error", timeout=5)
            return
        finally:
            button.disabled = False

        _set_status(status, "")
        result.set_source(answer.text)


class SummarizerScreen(_GenerationScreen):
    SECTION_TITLE = "Regulation Summarizer"
    SUBMIT_LABEL = "Summarize"
    INTRO = "Paste regulation or guidance text to get a concise professional summary."

    def build_prompt(self, text: str) -> str:
        return build_regulation_summary_prompt(text)


class CommunicationScreen(_GenerationScreen):
    SECTION_TITLE = "Client Communication"
    SUBMIT_LABEL = "Draft Communication"
    INTRO = "Paste technical tax information and choose an audience for a client-friendly draft."

    def compose_options(self) -> ComposeResult:
        yield Select(
            [(audience, audience) for audience in AUDIENCE_OPTIONS],
            value=AUDIENCE_OPTIONS[0],
            allow_blank=False,
            id="audience-select",
        )

    def build_prompt(self, text: str) -> str:
        audience = str(self.query_one("#audience-select", Select).value)
        return build_client_communication_prompt(text, audience)


class SettingsScreen(BaseScreen):
    """Theme, credential status, and clearing stored preferences."""

    SECTION_TITLE = "Settings"

    def compose_body(self) -> ComposeResult:
        yield Static("", id="settings-info")
        with Horizontal(classes="form-row"):
            yield Button("Toggle Theme (Ctrl+T)", id="theme-btn", variant="primary")
            yield Button("Clear Local Data", id="clear-btn", variant="error")
        yield Static(
            f"{APP_VERSION_LABEL}\n"
            "Information provided by this application is for guidance only "
            "and is not a substitute for professional tax advice.",
            classes="section-intro",
        )

    def on_mount(self) -> None:
        self.refresh_info()

    def refresh_info(self) -> None:
        service = self.taxassist.service
        credential = (
            f"configured (model: {service.model})" if service.available
            else "not configured, AI features are disabled"
        )
        self.query_one("#settings-info", Static).update(
            RichText.assemble(
                ("Theme: ", "bold"), self.taxassist.theme_mode.value.capitalize(), "\n",
                ("API key: ", "bold"), credential,
            )
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "theme-btn":
            self.taxassist.action_toggle_theme()
            self.refresh_info()
        elif event.button.id == "clear-btn":
            self.app.push_screen(
                ConfirmationScreen("Reset all stored preferences to their defaults?"),
                self._on_clear_confirmed,
            )

    def _on_clear_confirmed(self, confirmed: bool | None) -> None:
        if confirmed:
            self.taxassist.clear_local_data()
            self.refresh_info()
