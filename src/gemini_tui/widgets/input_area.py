"""
One-line input pane. Display only: key handling belongs to the app.
"""
from rich.text import Text
from textual.widgets import Static


class InputArea(Static):
    DEFAULT_CSS = """
    InputArea {
        height: 3;
        border: round $primary;
        padding: 0 1;
    }
    InputArea.-busy {
        border: round $panel;
    }
    """

    def show(self, title: str, content: Text, busy: bool) -> None:
        self.border_title = title
        self.set_class(busy, "-busy")
        self.update(content)
