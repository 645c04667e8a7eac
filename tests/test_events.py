"""Tests for keystroke translation and the event reader."""

from itertools import islice

import pytest
from blessed.keyboard import Keystroke

from events import KeyCode, KeyEvent, ResizeEvent, key_event, read_events


class TestKeyEvent:
    @pytest.mark.parametrize("name, code", [
        ("KEY_TAB", KeyCode.TAB),
        ("KEY_BTAB", KeyCode.BACKTAB),
        ("KEY_ENTER", KeyCode.ENTER),
        ("KEY_BACKSPACE", KeyCode.BACKSPACE),
        ("KEY_ESCAPE", KeyCode.ESCAPE),
    ])
    def test_named_keys(self, name, code):
        assert key_event(Keystroke("\x00", code=1, name=name)).code is code

    @pytest.mark.parametrize("raw, code", [
        ("\t", KeyCode.TAB),
        ("\x1b[Z", KeyCode.BACKTAB),
        ("\r", KeyCode.ENTER),
        ("\x7f", KeyCode.BACKSPACE),
        ("\x1b", KeyCode.ESCAPE),
    ])
    def test_raw_keys_without_name(self, raw, code):
        assert key_event(Keystroke(raw)).code is code

    def test_printable_char(self):
        assert key_event(Keystroke("q")) == KeyEvent(KeyCode.CHAR, "q")

    def test_unhandled_sequence(self):
        event = key_event(Keystroke("\x1b[A", code=259, name="KEY_UP"))
        assert event.code is KeyCode.OTHER

    def test_forward_delete_does_not_erase(self):
        event = key_event(Keystroke("\x1b[3~", code=330, name="KEY_DELETE"))
        assert event.code is KeyCode.OTHER

    def test_is_char(self):
        assert KeyEvent(KeyCode.CHAR, "a").is_char("a")
        assert not KeyEvent(KeyCode.CHAR, "b").is_char("a")
        assert not KeyEvent(KeyCode.TAB).is_char("\t")


class FakeTerminal:
    """Replays keystrokes; each entry may also change the terminal size."""

    def __init__(self, script, width=80, height=24):
        self.script = list(script)
        self.width = width
        self.height = height
        self.timeouts = []

    def inkey(self, timeout=None):
        self.timeouts.append(timeout)
        keystroke, size = self.script.pop(0)
        if size is not None:
            self.width, self.height = size
        return keystroke


def test_read_events_yields_keys():
    term = FakeTerminal([(Keystroke("a"), None), (Keystroke("\t"), None)])
    events = list(islice(read_events(term), 2))
    assert events == [KeyEvent(KeyCode.CHAR, "a"), KeyEvent(KeyCode.TAB)]


def test_read_events_skips_empty_reads():
    term = FakeTerminal([(Keystroke(""), None), (Keystroke(""), None), (Keystroke("x"), None)])
    assert next(read_events(term, poll_seconds=0.5)) == KeyEvent(KeyCode.CHAR, "x")
    assert term.timeouts == [0.5, 0.5, 0.5]


def test_read_events_reports_resize():
    term = FakeTerminal([(Keystroke(""), (120, 50)), (Keystroke("q"), None)])
    events = list(islice(read_events(term), 2))
    assert events == [ResizeEvent(120, 50), KeyEvent(KeyCode.CHAR, "q")]


def test_read_events_resize_before_key_in_same_read():
    term = FakeTerminal([(Keystroke("a"), (90, 30))])
    events = list(islice(read_events(term), 2))
    assert events == [ResizeEvent(90, 30), KeyEvent(KeyCode.CHAR, "a")]
