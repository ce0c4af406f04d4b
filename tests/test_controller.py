from __future__ import annotations

from gemini_tui.core.controller import Action, KeyController
from gemini_tui.models import Mode, Session, Speaker


def _press_text(controller: KeyController, text: str) -> None:
    for ch in text:
        controller.handle(ch, ch)


def test_typing_and_backspace_edit_the_buffer():
    session = Session()
    controller = KeyController(session)

    _press_text(controller, "hix")
    outcome = controller.handle("backspace")

    assert outcome.action is Action.REDRAW
    assert session.input_text == "hi"


def test_space_is_typed():
    session = Session()
    controller = KeyController(session)

    controller.handle("a", "a")
    controller.handle("space", " ")
    controller.handle("b", "b")

    assert session.input_text == "a b"


def test_enter_with_empty_buffer_does_nothing():
    session = Session()
    controller = KeyController(session)

    outcome = controller.handle("enter")

    assert outcome.action is Action.NONE
    assert session.mode is Mode.IDLE
    assert session.view().transcript == ()


def test_enter_dispatches_snapshot_including_new_turn():
    session = Session()
    controller = KeyController(session)
    _press_text(controller, "hi")

    outcome = controller.handle("enter")

    assert outcome.action is Action.DISPATCH
    assert [(t.speaker, t.text) for t in outcome.snapshot] == [(Speaker.USER, "hi")]
    assert session.mode is Mode.AWAITING_REPLY
    assert session.input_text == ""


def test_keys_are_ignored_while_awaiting_reply():
    session = Session()
    controller = KeyController(session)
    _press_text(controller, "hi")
    controller.handle("enter")

    for key, char in [("x", "x"), ("backspace", None), ("up", None), ("down", None),
                      ("enter", None), ("escape", None)]:
        assert controller.handle(key, char).action is Action.NONE

    view = session.view()
    assert len(view.transcript) == 1
    assert view.input_text == ""
    assert view.scroll_offset == 0


def test_escape_quits_when_idle():
    controller = KeyController(Session())

    assert controller.handle("escape").action is Action.QUIT


def test_arrows_scroll_and_clamp():
    session = Session()
    controller = KeyController(session)

    controller.handle("up")
    assert session.scroll_offset == 0
    controller.handle("down")
    controller.handle("down")
    controller.handle("up")
    assert session.scroll_offset == 1


def test_unprintable_keys_are_ignored():
    session = Session()
    controller = KeyController(session)

    assert controller.handle("tab", "\t").action is Action.NONE
    assert controller.handle("f1").action is Action.NONE
    assert session.input_text == ""
