"""
Scrollable transcript pane.
"""
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from gemini_tui.widgets.render import CHAT_TITLE


class ChatLog(VerticalScroll):
    DEFAULT_CSS = """
    ChatLog {
        height: 1fr;
        border: round $secondary;
    }
    """
    can_focus = False

    def compose(self) -> ComposeResult:
        yield Static(id="chat_body")

    def on_mount(self) -> None:
        self.border_title = CHAT_TITLE

    def show(self, body: Text, offset: int) -> None:
        """Replace the transcript and scroll to ``offset`` lines once laid out. Textual clamps the offset."""
        self.query_one("#chat_body", Static).update(body)
        self.call_after_refresh(self.scroll_to, y=offset, animate=False)
