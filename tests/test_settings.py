"""Tests for dialog settings and the dialog-kind lookup."""

import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from file_dialog.config.settings import (
    ANCHORS,
    DialogLabels,
    DialogSettings,
    load_dialog_settings,
)
from file_dialog.constants import DEFAULT_DIALOG_SIZE, SCROLLAREA_MAX_HEIGHT
from file_dialog.state import DialogKind, DialogState, TextSelection


def test_defaults():
    settings = DialogSettings()
    assert settings.default_size == DEFAULT_DIALOG_SIZE
    assert settings.scrollarea_max_height == SCROLLAREA_MAX_HEIGHT
    assert settings.anchor is None
    assert settings.resizable
    assert not settings.multi_select
    assert settings.labels.title_open_file == "Open File"


def test_from_dict_ignores_unknown_keys():
    settings = DialogSettings.from_dict({"multi_select": True, "bogus": 1})
    assert settings.multi_select
    assert not hasattr(settings, "bogus")


def test_from_dict_builds_nested_labels():
    settings = DialogSettings.from_dict(
        {"labels": {"cancel": "Abort", "unknown_label": "x"}}
    )
    assert isinstance(settings.labels, DialogLabels)
    assert settings.labels.cancel == "Abort"
    assert settings.labels.save == "Save"


def test_lists_become_tuples():
    settings = DialogSettings.from_dict(
        {"default_size": [640, 480], "position": [5, 6], "anchor_offset": [1, 2]}
    )
    assert settings.default_size == (640, 480)
    assert settings.position == (5, 6)
    assert settings.anchor_offset == (1, 2)


def test_unknown_anchor_raises():
    with pytest.raises(ValueError):
        DialogSettings(anchor="middle")
    for anchor in ANCHORS:
        assert DialogSettings(anchor=anchor).anchor == anchor


def test_to_dict_round_trip():
    settings = DialogSettings(anchor="bottom", show_hidden=True)
    restored = DialogSettings.from_dict(json.loads(json.dumps(settings.to_dict())))
    assert restored == settings


def test_load_missing_file_gives_defaults(tmp_path):
    assert load_dialog_settings(str(tmp_path / "missing.json")) == DialogSettings()


def test_load_invalid_file_gives_defaults(tmp_path, capsys):
    config = tmp_path / "settings.json"
    config.write_text("{not json", encoding="utf-8")
    assert load_dialog_settings(str(config)) == DialogSettings()
    assert "Failed to load dialog settings" in capsys.readouterr().err


def test_load_file_with_bad_anchor_gives_defaults(tmp_path):
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"anchor": "nowhere"}), encoding="utf-8")
    assert load_dialog_settings(str(config)) == DialogSettings()


def test_load_file(tmp_path):
    config = tmp_path / "settings.json"
    config.write_text(
        json.dumps({"scrollarea_max_height": 200, "labels": {"open": "Go"}}),
        encoding="utf-8",
    )
    settings = load_dialog_settings(str(config))
    assert settings.scrollarea_max_height == 200
    assert settings.labels.open == "Go"


# ---------------------------------------------------------------------------
# State types
# ---------------------------------------------------------------------------

def test_dialog_kind_from_name():
    assert DialogKind.from_name("save_file") is DialogKind.SAVE_FILE
    with pytest.raises(ValueError):
        DialogKind.from_name("pick_color")


def test_terminal_states():
    assert DialogState.SELECTED.is_terminal
    assert DialogState.CANCELLED.is_terminal
    assert not DialogState.OPEN.is_terminal
    assert not DialogState.CLOSED.is_terminal


def test_empty_text_selection():
    assert TextSelection(3, 3).is_empty
    assert not TextSelection(1, 4).is_empty
