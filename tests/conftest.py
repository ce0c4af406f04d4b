from __future__ import annotations

import asyncio
from typing import Sequence

import pytest

from gemini_tui.core.errors import CompletionError
from gemini_tui.models import Turn


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path, monkeypatch):
    """Keep tests away from the real log directory and any local API settings."""
    monkeypatch.setenv("GEMINI_TUI_LOG_DIR", str(tmp_path / "logs"))
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_API_BASE", "GEMINI_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class FakeClient:
    """Completion client that replays canned replies or errors."""

    def __init__(self, *replies: str | CompletionError) -> None:
        self.replies = list(replies)
        self.calls: list[tuple[Turn, ...]] = []
        self.release = asyncio.Event()
        self.release.set()
        self.closed = False

    def hold(self) -> None:
        self.release.clear()

    async def complete(self, turns: Sequence[Turn]) -> str:
        self.calls.append(tuple(turns))
        await self.release.wait()
        reply = self.replies.pop(0)
        if isinstance(reply, CompletionError):
            raise reply
        return reply

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client():
    return FakeClient
