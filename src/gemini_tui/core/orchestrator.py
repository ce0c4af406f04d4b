import logging
import threading
from typing import Optional, Sequence

from gemini_tui.core.errors import CompletionError
from gemini_tui.core.gemini_client import CompletionClient
from gemini_tui.models import Session, Turn

logger = logging.getLogger(__name__)


class Orchestrator:
    """
    Runs one request/reply round trip per submission and commits the outcome
    back into the session.
    """

    def __init__(self, session: Session, client: CompletionClient):
        self.session = session
        self.client = client

    async def run(self, snapshot: Sequence[Turn], cancelled: Optional[threading.Event] = None) -> Optional[Turn]:
        """
        Send ``snapshot`` and commit the reply, or an error turn on failure.

        The session lock is never held while the client call is pending. If
        ``cancelled`` is set by the time the call returns, nothing is
        committed and None is returned.
        """
        logger.info("dispatch start turns=%d", len(snapshot))
        try:
            text = await self.client.complete(snapshot)
        except CompletionError as exc:
            logger.warning("dispatch failed: %s: %s", type(exc).__name__, exc)
            text = f"Error: {exc}"
        else:
            logger.info("dispatch reply chars=%d", len(text))

        if cancelled is not None and cancelled.is_set():
            logger.info("dispatch cancelled, dropping result")
            return None

        return self.session.commit_reply(text)
