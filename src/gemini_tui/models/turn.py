"""
Data models for the Gemini TUI conversation.
"""
from dataclasses import dataclass
from enum import Enum


class Speaker(Enum):
    USER = "user"
    ASSISTANT = "model"

    @property
    def role(self) -> str:
        """Role tag used on the wire for this speaker."""
        return self.value


@dataclass(frozen=True)
class Turn:
    """
    A single conversation entry. Immutable once created.
    """
    speaker: Speaker
    text: str
