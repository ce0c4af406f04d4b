"""
Key handling for the chat loop, kept free of any terminal or widget code.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gemini_tui.models import EditOp, Mode, Session, Turn


class Action(Enum):
    NONE = "none"
    REDRAW = "redraw"
    DISPATCH = "dispatch"
    QUIT = "quit"


@dataclass(frozen=True)
class Outcome:
    action: Action
    snapshot: Optional[tuple[Turn, ...]] = None


IGNORED = Outcome(Action.NONE)
REDRAW = Outcome(Action.REDRAW)


class KeyController:
    def __init__(self, session: Session):
        self.session = session

    def handle(self, key: str, character: Optional[str] = None) -> Outcome:
        """
        Apply one key press to the session.

        While a reply is pending every key is ignored. In IDLE, ``enter``
        returns DISPATCH with the request snapshot when there was input to
        send; the caller is responsible for starting the round trip.
        """
        if self.session.mode is Mode.AWAITING_REPLY:
            return IGNORED

        if key == "enter":
            snapshot = self.session.submit()
            if snapshot is None:
                return IGNORED
            return Outcome(Action.DISPATCH, snapshot)
        if key == "escape":
            return Outcome(Action.QUIT)
        if key == "backspace":
            self.session.edit_input(EditOp.REMOVE_LAST)
            return REDRAW
        if key == "up":
            self.session.adjust_scroll(-1)
            return REDRAW
        if key == "down":
            self.session.adjust_scroll(1)
            return REDRAW
        if character and character.isprintable():
            self.session.edit_input(EditOp.APPEND, character)
            return REDRAW
        return IGNORED
