"""
Tests for the pygame file dialog modal.

Runs against SDL's dummy video driver so no window is opened.
"""

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pygame

from file_dialog.constants import DOUBLE_CLICK_THRESHOLD, LIST_ITEM_HEIGHT, MIN_DIALOG_SIZE
from file_dialog.dialog import FileDialog
from file_dialog.input.events import build_frame_context
from file_dialog.services.memory_fs import MemoryFileSystem
from file_dialog.services.platform_support import PlatformCapabilities
from file_dialog.state import DialogState, TextSelection
from file_dialog.ui.screens.modals.file_dialog_modal import (
    FOCUS_LIST,
    FOCUS_PATH,
    FileDialogModal,
)


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((800, 600))
    yield surface
    pygame.quit()


def _dialog(factory, path, paths, **kwargs):
    fs = MemoryFileSystem(paths)
    modal = FileDialogModal()
    dialog = factory(path, backend=fs, platform=PlatformCapabilities(), **kwargs).renderer(modal)
    dialog.open()
    return dialog, modal, fs


def _click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode="")


def _text(value):
    return pygame.event.Event(pygame.TEXTINPUT, text=value)


def _row(modal, screen, dialog, index):
    listing = modal._layout(screen, dialog).listing
    return (listing.centerx, listing.top + index * LIST_ITEM_HEIGHT + LIST_ITEM_HEIGHT // 2)


def _frame(dialog, screen, events, time_ms=0):
    return dialog.show(build_frame_context(screen, events, time_ms=time_ms))


# ---------------------------------------------------------------------------
# Listing clicks
# ---------------------------------------------------------------------------

def test_click_row_selects_entry(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/a.txt", "/d/b.txt"])

    state = _frame(dialog, screen, [_click(_row(modal, screen, dialog, 1))], time_ms=1000)
    assert state is DialogState.OPEN
    assert dialog.selection() == [Path("/d/b.txt")]
    assert dialog.edit.filename_edit == "b.txt"
    assert modal.focus == FOCUS_LIST


def test_double_click_row_opens_file(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/a.txt", "/d/b.txt"])
    pos = _row(modal, screen, dialog, 0)

    _frame(dialog, screen, [_click(pos)], time_ms=1000)
    state = _frame(dialog, screen, [_click(pos)], time_ms=1200)
    assert state is DialogState.SELECTED
    assert dialog.path() == Path("/d/a.txt")


def test_slow_second_click_does_not_open(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/a.txt"])
    pos = _row(modal, screen, dialog, 0)

    _frame(dialog, screen, [_click(pos)], time_ms=1000)
    state = _frame(dialog, screen, [_click(pos)], time_ms=1000 + DOUBLE_CLICK_THRESHOLD)
    assert state is DialogState.OPEN


def test_double_click_directory_navigates(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/sub/inner.txt"])
    pos = _row(modal, screen, dialog, 0)

    _frame(dialog, screen, [_click(pos)], time_ms=100)
    _frame(dialog, screen, [_click(pos)], time_ms=200)
    assert dialog.directory == Path("/d/sub")

    _frame(dialog, screen, [], time_ms=300)
    assert modal.highlighted == -1
    assert modal.scroll_offset == 0


def test_only_one_command_per_frame(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/a.txt", "/d/b.txt"])
    events = [
        _click(_row(modal, screen, dialog, 0)),
        _click(_row(modal, screen, dialog, 1)),
    ]
    _frame(dialog, screen, events, time_ms=1000)
    assert dialog.selection() == [Path("/d/a.txt")]


# ---------------------------------------------------------------------------
# Buttons
# ---------------------------------------------------------------------------

def test_cancel_button(screen):
    dialog, modal, _ = _dialog(FileDialog.select_folder, "/d", ["/d/"])
    cancel = modal._layout(screen, dialog).cancel
    assert _frame(dialog, screen, [_click(cancel.center)]) is DialogState.CANCELLED


def test_confirm_button_selects_folder(screen):
    dialog, modal, _ = _dialog(FileDialog.select_folder, "/d", ["/d/"])
    confirm = modal._layout(screen, dialog).confirm
    assert _frame(dialog, screen, [_click(confirm.center)]) is DialogState.SELECTED
    assert dialog.path() == Path("/d")


def test_up_button_navigates(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d/inner", ["/d/inner/"])
    up = modal._layout(screen, dialog).up
    _frame(dialog, screen, [_click(up.center)])
    assert dialog.directory == Path("/d")


def test_new_folder_button_uses_filename(screen):
    dialog, modal, fs = _dialog(FileDialog.open_file, "/d", ["/d/"])
    dialog.edit_filename_text("made")
    new_folder = modal._layout(screen, dialog).new_folder
    _frame(dialog, screen, [_click(new_folder.center)])
    assert fs.exists("/d/made")
    assert dialog.selection() == [Path("/d/made")]


def test_optional_buttons_hidden(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/"])
    dialog.show_rename(False).show_new_folder(False)
    layout = modal._layout(screen, dialog)
    assert layout.rename is None
    assert layout.new_folder is None


def test_show_hidden_checkbox_toggles(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/.hidden", "/d/shown"])
    assert [entry.display_name for entry in dialog.listing] == ["shown"]

    toggle = modal._layout(screen, dialog).show_hidden
    _frame(dialog, screen, [_click(toggle.center)])
    assert [entry.display_name for entry in dialog.listing] == [".hidden", "shown"]


# ---------------------------------------------------------------------------
# Keyboard
# ---------------------------------------------------------------------------

def test_escape_cancels(screen):
    dialog, _, _ = _dialog(FileDialog.open_file, "/d", ["/d/"])
    assert _frame(dialog, screen, [_key(pygame.K_ESCAPE)]) is DialogState.CANCELLED


def test_typing_in_path_field_completes(screen):
    dialog, modal, _ = _dialog(
        FileDialog.open_file, "/docs", ["/docs/report.txt", "/docs/notes.md"]
    )
    path_field = modal._layout(screen, dialog).path_field

    _frame(dialog, screen, [_click(path_field.center), _text("r")])
    assert modal.focus == FOCUS_PATH
    assert dialog.edit.path_edit == "/docs/report.txt"
    assert dialog.edit.path_selection == TextSelection(7, 16)

    _frame(dialog, screen, [_key(pygame.K_TAB)])
    assert dialog.edit.path_selection is None

    assert _frame(dialog, screen, [_key(pygame.K_RETURN)]) is DialogState.SELECTED
    assert dialog.path() == Path("/docs/report.txt")


def test_typing_replaces_completion_highlight(screen):
    dialog, modal, _ = _dialog(
        FileDialog.open_file, "/docs", ["/docs/report.txt", "/docs/readme.md"]
    )
    path_field = modal._layout(screen, dialog).path_field

    _frame(dialog, screen, [_click(path_field.center), _text("r"), _text("e"), _text("p")])
    assert dialog.edit.path_edit == "/docs/report.txt"

    _frame(dialog, screen, [_key(pygame.K_BACKSPACE)])
    assert dialog.edit.path_edit == "/docs/rep"
    assert dialog.edit.path_selection is None


def test_save_dialog_types_filename(screen):
    dialog, _, _ = _dialog(FileDialog.save_file, "/d", ["/d/"])

    _frame(dialog, screen, [_text("o"), _text("u"), _text("t")])
    assert dialog.edit.filename_edit == "out"

    assert _frame(dialog, screen, [_key(pygame.K_RETURN)]) is DialogState.SELECTED
    assert dialog.path() == Path("/d/out")


def test_arrow_keys_select_and_enter_opens(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/sub/", "/d/a.txt"])

    _frame(dialog, screen, [_key(pygame.K_DOWN)])
    assert dialog.selection() == [Path("/d/sub")]
    _frame(dialog, screen, [_key(pygame.K_DOWN)])
    assert dialog.selection() == [Path("/d/a.txt")]
    _frame(dialog, screen, [_key(pygame.K_UP)])
    assert modal.highlighted == 0

    _frame(dialog, screen, [_key(pygame.K_RETURN)])
    assert dialog.directory == Path("/d/sub")

    _frame(dialog, screen, [_key(pygame.K_BACKSPACE)])
    assert dialog.directory == Path("/d")


def test_space_toggles_in_multi_select(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/a", "/d/b"])
    dialog.multi_select(True)

    _frame(dialog, screen, [_key(pygame.K_DOWN)])
    assert dialog.selection() == []
    _frame(dialog, screen, [_key(pygame.K_SPACE)])
    _frame(dialog, screen, [_key(pygame.K_DOWN)])
    _frame(dialog, screen, [_key(pygame.K_SPACE)])
    assert dialog.selection() == [Path("/d/a"), Path("/d/b")]


def test_tab_cycles_focus(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/"])
    assert modal.focus is None
    _frame(dialog, screen, [_key(pygame.K_TAB)])
    assert modal.focus == "filename"


# ---------------------------------------------------------------------------
# Window
# ---------------------------------------------------------------------------

def test_resize_grip_changes_size(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/"])
    grip = modal._layout(screen, dialog).grip
    width, height = dialog.settings.default_size

    motion = pygame.event.Event(
        pygame.MOUSEMOTION, pos=(grip.centerx + 30, grip.centery + 20), rel=(30, 20), buttons=(1, 0, 0)
    )
    _frame(dialog, screen, [_click(grip.center), motion])
    assert modal.size == (width + 30, height + 20)

    shrink = pygame.event.Event(
        pygame.MOUSEMOTION, pos=(0, 0), rel=(0, 0), buttons=(1, 0, 0)
    )
    _frame(dialog, screen, [shrink])
    assert modal.size == MIN_DIALOG_SIZE

    release = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0))
    _frame(dialog, screen, [release])
    assert not modal.resizing


def test_not_resizable_has_no_grip(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/"])
    dialog.resizable(False)
    assert modal._layout(screen, dialog).grip is None


def test_anchor_places_window(screen):
    dialog, modal, _ = _dialog(FileDialog.open_file, "/d", ["/d/"])
    dialog.anchor("top_left", (10, 20))
    window = modal._layout(screen, dialog).window
    assert window.topleft == (10, 20)


def test_listing_error_ignores_row_clicks(screen):
    dialog, modal, fs = _dialog(FileDialog.open_file, "/d", ["/d/locked/a.txt"])
    fs.deny("/d/locked")
    dialog.set_path("/d/locked")
    assert dialog.listing_error is not None

    state = _frame(dialog, screen, [_click(_row(modal, screen, dialog, 0))])
    assert state is DialogState.OPEN
    assert dialog.selection() == []
