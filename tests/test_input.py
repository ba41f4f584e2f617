"""Tests for pygame event translation, text editing and pointer gestures."""

import os
import sys

import pygame

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from file_dialog.constants import DOUBLE_CLICK_THRESHOLD, SCROLL_THRESHOLD
from file_dialog.input.events import build_frame_context
from file_dialog.input.keyboard import apply_text_event, click_modifier
from file_dialog.input.touch import TouchHandler
from file_dialog.services.selection import ClickModifier
from file_dialog.state import TextSelection


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="")


def _text(value):
    return pygame.event.Event(pygame.TEXTINPUT, text=value)


# ---------------------------------------------------------------------------
# Frame context
# ---------------------------------------------------------------------------

def test_build_frame_context_flags():
    events = [_text("a"), _key(pygame.K_ESCAPE)]
    frame = build_frame_context(None, events, time_ms=42)
    assert frame.escape_pressed
    assert not frame.window_closed
    assert frame.time_ms == 42
    assert frame.events == events
    assert frame.events is not events

    frame = build_frame_context(None, [pygame.event.Event(pygame.QUIT)], time_ms=0)
    assert frame.window_closed
    assert not frame.escape_pressed


# ---------------------------------------------------------------------------
# Keyboard
# ---------------------------------------------------------------------------

def test_click_modifier():
    assert click_modifier(0) is ClickModifier.PLAIN
    assert click_modifier(pygame.KMOD_LCTRL) is ClickModifier.TOGGLE
    assert click_modifier(pygame.KMOD_LMETA) is ClickModifier.TOGGLE
    assert click_modifier(pygame.KMOD_LSHIFT) is ClickModifier.RANGE
    assert click_modifier(pygame.KMOD_LCTRL | pygame.KMOD_LSHIFT) is ClickModifier.TOGGLE


def test_text_input_appends():
    edit = apply_text_event("/ho", _text("m"))
    assert edit.text == "/hom"
    assert edit.changed and not edit.deletion


def test_text_input_replaces_selection():
    edit = apply_text_event("/docs/report.txt", _text("x"), TextSelection(9, 16))
    assert edit.text == "/docs/repx"


def test_backspace_removes_selection_or_last_char():
    edit = apply_text_event("/docs/report.txt", _key(pygame.K_BACKSPACE), TextSelection(9, 16))
    assert edit.text == "/docs/rep"
    assert edit.deletion

    edit = apply_text_event("/docs/rep", _key(pygame.K_BACKSPACE))
    assert edit.text == "/docs/re"

    edit = apply_text_event("", _key(pygame.K_BACKSPACE))
    assert not edit.changed


def test_enter_and_tab():
    assert apply_text_event("a", _key(pygame.K_RETURN)).submitted
    assert apply_text_event("a", _key(pygame.K_KP_ENTER)).submitted
    edit = apply_text_event("a", _key(pygame.K_TAB))
    assert edit.accepted and not edit.changed


def test_unrelated_events_are_ignored():
    assert apply_text_event("a", _key(pygame.K_LEFT)) is None
    assert apply_text_event("a", pygame.event.Event(pygame.MOUSEMOTION, pos=(0, 0))) is None


# ---------------------------------------------------------------------------
# Pointer
# ---------------------------------------------------------------------------

def test_double_click_same_item():
    touch = TouchHandler()
    assert not touch.check_double_click(3, 1000)
    assert touch.check_double_click(3, 1000 + DOUBLE_CLICK_THRESHOLD - 1)
    # A third click starts a new pair
    assert not touch.check_double_click(3, 1000 + DOUBLE_CLICK_THRESHOLD)


def test_double_click_requires_same_item_and_time():
    touch = TouchHandler()
    touch.check_double_click(1, 0)
    assert not touch.check_double_click(2, 100)
    assert not touch.check_double_click(2, 100 + DOUBLE_CLICK_THRESHOLD)

    touch.reset_double_click()
    assert not touch.check_double_click(2, 100 + DOUBLE_CLICK_THRESHOLD + 1)


def test_drag_detection():
    touch = TouchHandler()
    assert touch.move((10, 10)) == (0, 0)

    touch.press((0, 0))
    assert touch.move((2, 1)) == (2, 1)
    assert not touch.is_dragging
    assert touch.move((SCROLL_THRESHOLD + 3, 1)) == (SCROLL_THRESHOLD + 1, 0)
    assert touch.is_dragging
    assert touch.release()
    assert not touch.is_dragging

    touch.press((0, 0))
    assert not touch.release()
