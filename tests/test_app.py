"""Tests for the demo command line."""

import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from file_dialog.app import DEMO_TREE, demo_file_system, parse_args
from file_dialog.dialog import FileDialog
from file_dialog.services.platform_support import PlatformCapabilities


def test_parse_args_defaults():
    args = parse_args([])
    assert args.path is None
    assert not args.fake_fs
    assert not args.multi_select
    assert args.config is None
    assert args.log_file is None


def test_parse_args_options():
    args = parse_args(["/srv", "--fake-fs", "--multi-select", "--config", "dialog.json"])
    assert args.path == "/srv"
    assert args.fake_fs
    assert args.multi_select
    assert args.config == "dialog.json"


def test_demo_file_system_contains_tree():
    fs = demo_file_system()
    for path in DEMO_TREE:
        assert fs.exists(path.rstrip("/"))


def test_demo_tree_is_browsable():
    dialog = FileDialog.open_file(
        "/home/user/documents", backend=demo_file_system(), platform=PlatformCapabilities()
    )
    dialog.open()
    assert [entry.display_name for entry in dialog.listing] == [
        "notes.md",
        "report-draft.txt",
        "report.txt",
    ]
    dialog.edit_path_text("/home/user/documents/n")
    assert dialog.edit.path_edit == "/home/user/documents/notes.md"
    assert dialog.directory == Path("/home/user/documents")
