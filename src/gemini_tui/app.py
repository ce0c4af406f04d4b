"""
Gemini TUI
"""

import argparse
import logging
import sys
import threading
from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Key
from textual.worker import Worker

from gemini_tui.config import load_settings
from gemini_tui.core.controller import Action, KeyController
from gemini_tui.core.errors import ConfigError
from gemini_tui.core.gemini_client import CompletionClient, GeminiClient
from gemini_tui.core.orchestrator import Orchestrator
from gemini_tui.log_utils import build_log_config, configure_logging
from gemini_tui.models import Mode, Session, SessionView, Turn
from gemini_tui.widgets import ChatLog, InputArea
from gemini_tui.widgets.render import input_title, render_input, render_transcript

logger = logging.getLogger(__name__)

# upper bound between redraws, so a committed reply shows up without input
POLL_INTERVAL = 0.2


class ChatApp(App):
    TITLE = "Gemini"
    BINDINGS = [
        Binding("enter", "session_key('enter')", show=False, priority=True),
        Binding("backspace", "session_key('backspace')", show=False, priority=True),
        Binding("escape", "session_key('escape')", show=False, priority=True),
        Binding("up", "session_key('up')", show=False, priority=True),
        Binding("down", "session_key('down')", show=False, priority=True),
    ]

    def __init__(self, client: CompletionClient, session: Optional[Session] = None):
        """Initialize the chat application around one session."""
        super().__init__()
        self.session = session or Session()
        self.client = client
        self.controller = KeyController(self.session)
        self.orchestrator = Orchestrator(self.session, client)

        self._cancelled = threading.Event()
        self._dispatch_worker: Optional[Worker] = None
        self._last_view: Optional[SessionView] = None

    def compose(self) -> ComposeResult:
        """
        Create the main UI layout: transcript on top, input line below.
        """
        yield ChatLog(id="chat_log")
        yield InputArea(id="input_text")

    def on_mount(self) -> None:
        self._redraw()
        self.set_interval(POLL_INTERVAL, self._redraw)

    async def on_unmount(self) -> None:
        self._cancel_dispatch()
        aclose = getattr(self.client, "aclose", None)
        if aclose is not None:
            await aclose()

    def on_key(self, event: Key) -> None:
        if event.is_printable and event.character:
            event.stop()
            self._handle_key(event.key, event.character)

    def action_session_key(self, key: str) -> None:
        self._handle_key(key)

    def _handle_key(self, key: str, character: Optional[str] = None) -> None:
        outcome = self.controller.handle(key, character)

        if outcome.action is Action.QUIT:
            logger.info("quit requested")
            self._cancel_dispatch()
            self.exit(return_code=0)
            return

        if outcome.action is Action.DISPATCH:
            logger.info("submitted turn %d", len(outcome.snapshot))
            self._dispatch_worker = self.run_dispatch(outcome.snapshot)

        if outcome.action is not Action.NONE:
            self._redraw()

    @work(exclusive=True, group='dispatch')
    async def run_dispatch(self, snapshot: tuple[Turn, ...]) -> None:
        """
        One round trip to the completion service. Commits into the session;
        the next redraw picks the result up.
        """
        await self.orchestrator.run(snapshot, self._cancelled)

    def _cancel_dispatch(self) -> None:
        self._cancelled.set()
        if self._dispatch_worker is not None and not self._dispatch_worker.is_finished:
            logger.info("cancelling in-flight dispatch")
            self._dispatch_worker.cancel()

    def _redraw(self) -> None:
        view = self.session.view()
        if view == self._last_view:
            return
        self._last_view = view

        self.query_one("#chat_log", ChatLog).show(render_transcript(view), view.scroll_offset)
        self.query_one("#input_text", InputArea).show(
            input_title(view), render_input(view), busy=view.mode is Mode.AWAITING_REPLY
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gemini-tui", description="Chat with Gemini in the terminal.")
    parser.add_argument("--model", help="model name (default: $GEMINI_MODEL or gemini-2.5-flash)")
    parser.add_argument("--timeout", help="request timeout in seconds, 0 to disable")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(build_log_config())

    try:
        settings = load_settings().with_overrides(model=args.model, timeout=args.timeout)
    except ConfigError as exc:
        logger.error("startup failed: %s", exc)
        print(f"gemini-tui: {exc}", file=sys.stderr)
        return 1

    client = GeminiClient(
        settings.api_key,
        model=settings.model,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )
    app = ChatApp(client)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
