from .turn import Speaker, Turn
from .session import EditOp, InvalidTransition, Mode, Session, SessionView

__all__ = [
    "EditOp",
    "InvalidTransition",
    "Mode",
    "Session",
    "SessionView",
    "Speaker",
    "Turn",
]
