"""CSS styles for the TUI.

Hides layout and styling decisions from the screens.
Uses Textual CSS features: nesting, pseudo-classes, theme variables, so
both light and dark themes share one stylesheet.
"""

APP_CSS = """
/* ============================================
   Design Tokens
   ============================================ */
$panel-border: round $border;
$panel-border-focus: round $primary;

/* ============================================
   Screen Body
   ============================================ */
Screen {
    background: $background;
}

.screen-body {
    height: 1fr;
    padding: 1 2;
}

.section-title {
    text-style: bold;
    color: $primary;
    margin-bottom: 1;
}

.section-intro {
    color: $text-muted;
    margin-bottom: 1;
}

.status-line {
    height: auto;
    margin: 1 0 0 0;

    &.-error {
        color: $error;
        text-style: bold;
    }

    &.-warning {
        color: $warning;
    }
}

.form-row {
    height: auto;
    margin-bottom: 1;

    & Select {
        width: 1fr;
        margin-right: 1;
    }

    & Button {
        margin-left: 1;
    }
}

.editor {
    height: 10;
    border: $panel-border;

    &:focus {
        border: $panel-border-focus;
    }
}

.result-panel {
    height: 1fr;
    border: $panel-border;
    border-title-color: $accent;
    border-title-style: bold;
    background: $panel;
    padding: 0 1;
}

/* ============================================
   Home and Dashboard
   ============================================ */
#welcome {
    align: center middle;
}

#welcome-box {
    width: 72;
    height: auto;
    border: tall $primary;
    background: $surface;
    padding: 1 3;
}

#welcome-title {
    text-align: center;
    text-style: bold;
    color: $accent;
    margin-bottom: 1;
}

#welcome-text {
    text-align: center;
    margin-bottom: 1;
}

#welcome-actions {
    height: 3;
    align: center middle;
}

.group-title {
    text-style: bold;
    color: $accent;
    margin: 1 0 0 0;
}

.card-row {
    height: auto;
}

FeatureCard {
    width: 1fr;
    height: 5;
    margin: 0 1 0 0;
    padding: 0 1;
    border: $panel-border;
    background: $surface;

    &:hover {
        background: $primary 10%;
    }

    &:focus {
        border: $panel-border-focus;
        background: $primary 15%;
    }

    &.-disabled {
        color: $text-muted;
    }
}

/* ============================================
   Chat
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

.chat-message {
    height: auto;
    margin: 1 0 0 0;
    padding: 0 1;
}

.user-message {
    border-left: thick $secondary;

    & .message-header {
        color: $secondary;
    }
}

.ai-message {
    border-left: thick $primary;

    & .message-header {
        color: $primary;
    }
}

.message-header {
    text-style: bold;
}

.message-content {
    height: auto;
}

.message-references {
    height: auto;
    color: $text-muted;
    margin-top: 1;
}

ChatInputBar {
    height: 7;
    margin-top: 1;
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: $panel-border;

    &:focus {
        border: $panel-border-focus;
    }
}

#send-btn {
    width: 10;
    height: 100%;
    margin-left: 1;
}

/* ============================================
   Trace Panel
   ============================================ */
#debug-panel {
    height: 12;
    dock: bottom;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Tables and Lists
   ============================================ */
DataTable {
    height: 1fr;
    background: $panel;
}

DataTable > .datatable--header {
    background: $surface;
    color: $primary;
    text-style: bold;
}

SelectionList {
    height: 1fr;
    border: $panel-border;
    background: $panel;
}

/* ============================================
   Notification Toasts
   ============================================ */
Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
    }

    &.-error {
        border: tall $error;
    }

    &.-warning {
        border: tall $warning;
    }
}

Header {
    background: $panel;
    color: $foreground;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}
"""
