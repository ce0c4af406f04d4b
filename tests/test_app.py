from __future__ import annotations

import pytest

from gemini_tui.app import ChatApp, main
from gemini_tui.core.errors import TransportError
from gemini_tui.models import Mode, Speaker
from gemini_tui.widgets import InputArea
from gemini_tui.widgets.render import BUSY_TITLE, IDLE_TITLE


def _pairs(app: ChatApp):
    return [(t.speaker, t.text) for t in app.session.view().transcript]


@pytest.mark.asyncio
async def test_typed_message_gets_a_reply(fake_client):
    client = fake_client("hello")
    app = ChatApp(client)

    async with app.run_test() as pilot:
        await pilot.press("h", "i", "enter")
        await app.workers.wait_for_complete()
        await pilot.pause(0.3)

        assert _pairs(app) == [(Speaker.USER, "hi"), (Speaker.ASSISTANT, "hello")]
        assert app.session.mode is Mode.IDLE
        assert app.query_one(InputArea).border_title == IDLE_TITLE


@pytest.mark.asyncio
async def test_input_is_read_only_while_awaiting(fake_client):
    client = fake_client("hello")
    client.hold()
    app = ChatApp(client)

    async with app.run_test() as pilot:
        await pilot.press("h", "i", "enter")
        await pilot.pause()

        assert app.session.mode is Mode.AWAITING_REPLY
        assert app.query_one(InputArea).border_title == BUSY_TITLE

        await pilot.press("x", "enter", "escape")
        await pilot.pause()

        assert app.session.input_text == ""
        assert _pairs(app) == [(Speaker.USER, "hi")]
        assert len(client.calls) == 1

        client.release.set()
        await app.workers.wait_for_complete()
        await pilot.pause(0.3)

        assert _pairs(app)[-1] == (Speaker.ASSISTANT, "hello")
        assert app.query_one(InputArea).border_title == IDLE_TITLE


@pytest.mark.asyncio
async def test_failed_request_shows_error_turn(fake_client):
    app = ChatApp(fake_client(TransportError("timeout")))

    async with app.run_test() as pilot:
        await pilot.press("h", "i", "enter")
        await app.workers.wait_for_complete()
        await pilot.pause()

        assert _pairs(app) == [(Speaker.USER, "hi"), (Speaker.ASSISTANT, "Error: timeout")]
        assert app.session.mode is Mode.IDLE


@pytest.mark.asyncio
async def test_backspace_and_scroll_keys(fake_client):
    app = ChatApp(fake_client())

    async with app.run_test() as pilot:
        await pilot.press("a", "b", "backspace", "down", "down", "up")
        await pilot.pause()

        assert app.session.input_text == "a"
        assert app.session.scroll_offset == 1


@pytest.mark.asyncio
async def test_escape_exits_cleanly(fake_client):
    client = fake_client()
    app = ChatApp(client)

    async with app.run_test() as pilot:
        await pilot.press("escape")

    assert app.return_code == 0
    assert client.closed


@pytest.mark.asyncio
async def test_quitting_drops_pending_reply(fake_client):
    client = fake_client("too late")
    client.hold()
    app = ChatApp(client)

    async with app.run_test() as pilot:
        await pilot.press("h", "i", "enter")
        await pilot.pause()
        await app.action_quit()

    assert _pairs(app) == [(Speaker.USER, "hi")]
    assert app.session.mode is Mode.AWAITING_REPLY


def test_main_without_api_key_fails(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("gemini_tui.app.configure_logging", lambda config: None)

    assert main([]) == 1
    assert "GEMINI_API_KEY" in capsys.readouterr().err
