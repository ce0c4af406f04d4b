"""
Pure projection of a session view into the two screen regions.
"""
from rich.style import Style
from rich.text import Text

from gemini_tui.models import Mode, SessionView, Speaker

CHAT_TITLE = "Chat (↑↓ scroll)"
IDLE_TITLE = "Input (Enter to send, Esc to quit)"
BUSY_TITLE = "Processing..."

_PREFIXES = {
    Speaker.USER: ("You: ", Style(color="yellow", bold=True)),
    Speaker.ASSISTANT: ("Gemini: ", Style(color="cyan", bold=True)),
}


def render_transcript(view: SessionView) -> Text:
    """Role-prefixed line per turn, each followed by a blank line."""
    text = Text()
    for turn in view.transcript:
        prefix, style = _PREFIXES[turn.speaker]
        text.append(prefix, style=style)
        text.append(turn.text)
        text.append("\n\n")
    return text


def input_title(view: SessionView) -> str:
    return IDLE_TITLE if view.mode is Mode.IDLE else BUSY_TITLE


def render_input(view: SessionView) -> Text:
    style = "" if view.mode is Mode.IDLE else "bright_black"
    return Text(view.input_text, style=style, no_wrap=True, overflow="ellipsis")
