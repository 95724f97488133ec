"""Static footer content for the browser frame."""

from __future__ import annotations

FOOTER_HELP_TEXT = "↑/↓ navigate | Enter open | H hidden files | Q quit"

HIDDEN_SHOWN_TEXT = "👁 hidden files shown"
HIDDEN_CONCEALED_TEXT = "🙈 hidden files concealed"


def hidden_status_text(show_hidden: bool) -> str:
    return HIDDEN_SHOWN_TEXT if show_hidden else HIDDEN_CONCEALED_TEXT
