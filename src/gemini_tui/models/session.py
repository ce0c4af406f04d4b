"""
Shared conversation state.

The session is read by the UI loop and written by both the loop and the
dispatch worker, so every public method takes the lock for one short,
non-blocking critical section. Nothing here awaits or does I/O.
"""
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gemini_tui.models.turn import Speaker, Turn


class Mode(Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"

    def can_transition_to(self, target: "Mode") -> bool:
        return target in _TRANSITIONS[self]


_TRANSITIONS = {
    Mode.IDLE: {Mode.AWAITING_REPLY},
    Mode.AWAITING_REPLY: {Mode.IDLE},
}


class InvalidTransition(RuntimeError):
    def __init__(self, current: Mode, target: Mode) -> None:
        super().__init__(f"cannot move from {current.value} to {target.value}")
        self.current = current
        self.target = target


class EditOp(Enum):
    APPEND = "append"
    REMOVE_LAST = "remove_last"


@dataclass(frozen=True)
class SessionView:
    """Point-in-time copy of the whole session, used for rendering."""
    mode: Mode
    input_text: str
    transcript: tuple[Turn, ...]
    scroll_offset: int


class Session:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._mode = Mode.IDLE
        self._input: list[str] = []
        self._transcript: list[Turn] = []
        self._scroll = 0

    @property
    def mode(self) -> Mode:
        with self._lock:
            return self._mode

    @property
    def input_text(self) -> str:
        with self._lock:
            return "".join(self._input)

    @property
    def scroll_offset(self) -> int:
        with self._lock:
            return self._scroll

    def edit_input(self, op: EditOp, char: str = "") -> None:
        """Append ``char`` or drop the last character. Removing from an empty buffer is a no-op."""
        with self._lock:
            if op is EditOp.APPEND:
                if char:
                    self._input.append(char)
            elif self._input:
                self._input.pop()

    def take_input_for_submission(self) -> Optional[str]:
        with self._lock:
            return self._drain_input()

    def append_turn(self, speaker: Speaker, text: str) -> Turn:
        turn = Turn(speaker=speaker, text=text)
        with self._lock:
            self._transcript.append(turn)
        return turn

    def set_mode(self, mode: Mode) -> None:
        with self._lock:
            self._transition(mode)

    def adjust_scroll(self, delta: int) -> int:
        with self._lock:
            self._scroll = max(0, self._scroll + delta)
            return self._scroll

    def snapshot_transcript_for_request(self) -> tuple[Turn, ...]:
        with self._lock:
            return tuple(self._transcript)

    def submit(self) -> Optional[tuple[Turn, ...]]:
        """
        Take the input and queue it for a reply in one atomic step.

        Drains the buffer into a new user turn, flips the mode to
        AWAITING_REPLY and returns the transcript snapshot to send. Returns
        None without touching anything when a reply is already pending or the
        buffer is empty.
        """
        with self._lock:
            if self._mode is not Mode.IDLE:
                return None
            text = self._drain_input()
            if text is None:
                return None
            self._transcript.append(Turn(speaker=Speaker.USER, text=text))
            self._transition(Mode.AWAITING_REPLY)
            return tuple(self._transcript)

    def commit_reply(self, text: str) -> Turn:
        """Append an assistant turn and return to IDLE in one atomic step."""
        turn = Turn(speaker=Speaker.ASSISTANT, text=text)
        with self._lock:
            self._transcript.append(turn)
            self._transition(Mode.IDLE)
        return turn

    def view(self) -> SessionView:
        with self._lock:
            return SessionView(
                mode=self._mode,
                input_text="".join(self._input),
                transcript=tuple(self._transcript),
                scroll_offset=self._scroll,
            )

    # callers hold self._lock
    def _drain_input(self) -> Optional[str]:
        if not self._input:
            return None
        text = "".join(self._input)
        self._input.clear()
        return text

    def _transition(self, target: Mode) -> None:
        if not self._mode.can_transition_to(target):
            raise InvalidTransition(self._mode, target)
        self._mode = target
