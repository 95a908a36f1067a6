"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - Mode Bar + Views
   ============================================ */
Screen {
    background: $background;
}

#main {
    height: 1fr;
}

/* ============================================
   Mode Bar - View Navigation
   ============================================ */
#mode-bar {
    width: 26;
    height: 100%;
    background: $panel;
    border-right: tall $border;
    padding: 1;

    & Button {
        width: 100%;
        margin-bottom: 1;
    }

    & Button.-active {
        background: $primary;
        color: $background;
        text-style: bold;
    }
}

#views {
    width: 1fr;
    height: 100%;
}

/* ============================================
   Shared View Chrome
   ============================================ */
.view-title {
    height: auto;
    text-style: bold;
    color: $primary;
    padding: 1 2 0 2;
}

.view-subtitle {
    height: auto;
    color: $text-muted;
    padding: 0 2 1 2;
}

.form-label {
    height: auto;
    color: $text-muted;
    margin-top: 1;
}

.error-text {
    height: auto;
    color: $error;
    background: $error 12%;
    padding: 0 1;
    margin-top: 1;
}

.muted-note {
    height: auto;
    color: $text-muted;
    text-align: center;
}

/* ============================================
   Knowledge Base View
   ============================================ */
#snippet-form {
    height: auto;
    margin: 0 2 1 2;
    padding: 1 2;
    border: round $primary 60%;
    background: $surface;
}

#snippet-content {
    height: 10;
}

#snippet-list {
    height: 1fr;
    padding: 0 2;
    scrollbar-gutter: stable;
}

.snippet-card {
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    background: $surface;
    border-left: tall $secondary;

    & .snippet-body {
        width: 1fr;
        height: auto;
    }

    & Button {
        width: 10;
        min-width: 8;
    }
}

/* ============================================
   Planner View
   ============================================ */
#planner-form {
    height: 1fr;
    padding: 0 2;
}

#job-description {
    height: 12;
}

#plan-result {
    height: 1fr;
    padding: 0 2;
}

#plan-actions {
    height: auto;
    margin-bottom: 1;

    & Button {
        margin-right: 1;
    }
}

#plan-markdown {
    height: auto;
    background: $surface;
    padding: 1 2;
}

/* ============================================
   Interview View - Chat History
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
}

.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
}

.user-message {
    border-left: tall $primary;
    background: $primary 8%;

    & .message-header {
        color: $primary;
        text-style: bold;
    }
}

.model-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }

    &.-failed {
        border-left: tall $warning;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    margin: 0;
    padding: 0;
}

.thinking {
    height: auto;
    color: $text-muted;
    text-style: italic;
}

.message-sources {
    height: auto;
    margin-top: 1;
    color: $text-muted;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:disabled {
        background: $panel;
        border: tall $border;
        color: $text-muted;
    }
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    scrollbar-gutter: stable;
}

/* ============================================
   Header and Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
    height: 1;
}

Footer {
    background: $panel;
    height: auto;
}
"""
