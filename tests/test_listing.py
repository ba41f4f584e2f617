"""Tests for the listing pipeline: filtering, dotfiles, ordering and volume roots."""

import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from file_dialog.models import Entry, EntryKind
from file_dialog.services.listing import build_listing
from file_dialog.state import DialogKind


def _file(path):
    return Entry(path=Path(path), kind=EntryKind.FILE)


def _dir(path):
    return Entry(path=Path(path), kind=EntryKind.DIRECTORY)


def _names(entries):
    return [entry.display_name for entry in entries]


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------

def test_directories_come_before_files():
    raw = [_file("/d/a.txt"), _dir("/d/zeta"), _file("/d/b.txt"), _dir("/d/alpha")]
    listing = build_listing(raw, DialogKind.OPEN_FILE)
    assert _names(listing) == ["alpha", "zeta", "a.txt", "b.txt"]


def test_names_sort_by_codepoint():
    raw = [_file("/d/b"), _file("/d/B"), _file("/d/a"), _file("/d/_x")]
    listing = build_listing(raw, DialogKind.OPEN_FILE)
    # uppercase < underscore < lowercase
    assert _names(listing) == ["B", "_x", "a", "b"]


def test_input_entries_are_not_modified():
    raw = [_file("/d/b"), _file("/d/a")]
    build_listing(raw, DialogKind.OPEN_FILE)
    assert _names(raw) == ["b", "a"]


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------

def test_select_folder_drops_everything_but_directories():
    raw = [
        _file("/d/a.txt"),
        _dir("/d/sub"),
        Entry(path=Path("/d/socket"), kind=EntryKind.OTHER),
    ]
    listing = build_listing(raw, DialogKind.SELECT_FOLDER)
    assert _names(listing) == ["sub"]


def test_name_filter_applies_to_files_only():
    raw = [_file("/d/a.txt"), _file("/d/b.png"), _dir("/d/pics.png.d")]

    def only_txt(path):
        return path.suffix == ".txt"

    listing = build_listing(raw, DialogKind.OPEN_FILE, only_txt)
    assert _names(listing) == ["pics.png.d", "a.txt"]


def test_dotfiles_hidden_when_requested():
    raw = [_file("/d/.profile"), _dir("/d/.config"), _file("/d/notes")]

    hidden = build_listing(raw, DialogKind.OPEN_FILE, hide_dotfiles=True)
    assert _names(hidden) == ["notes"]

    shown = build_listing(raw, DialogKind.OPEN_FILE, hide_dotfiles=False)
    assert _names(shown) == [".config", ".profile", "notes"]


# ---------------------------------------------------------------------------
# Volume roots
# ---------------------------------------------------------------------------

def test_volume_roots_prepended_in_enumeration_order():
    raw = [
        _file("/d/a.txt"),
        Entry(path=Path("/mnt/z"), kind=EntryKind.DIRECTORY, is_volume_root=True),
        _dir("/d/sub"),
        Entry(path=Path("/mnt/c"), kind=EntryKind.DIRECTORY, is_volume_root=True),
    ]
    listing = build_listing(raw, DialogKind.OPEN_FILE)
    assert _names(listing) == ["/mnt/z", "/mnt/c", "sub", "a.txt"]


def test_volume_roots_survive_select_folder_and_dotfile_hiding():
    raw = [Entry(path=Path("/.vol"), kind=EntryKind.DIRECTORY, is_volume_root=True)]
    listing = build_listing(raw, DialogKind.SELECT_FOLDER, hide_dotfiles=True)
    assert len(listing) == 1 and listing[0].is_volume_root
