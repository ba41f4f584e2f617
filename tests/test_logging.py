"""Tests for the error log helpers."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from file_dialog.utils import logging as dialog_logging
from file_dialog.utils.logging import (
    get_log_file,
    init_log_file,
    log_error,
    log_info,
    set_log_file,
    update_log_file_path,
)


@pytest.fixture(autouse=True)
def reset_log_file():
    yield
    set_log_file(None)


def test_console_logging_by_default(capsys):
    assert get_log_file() is None
    log_error("boom", "OSError")
    err = capsys.readouterr().err
    assert "ERROR: boom" in err
    assert "Type: OSError" in err


def test_log_error_writes_to_file(tmp_path):
    log_path = tmp_path / "error.log"
    set_log_file(str(log_path))

    log_error("Failed to read folder /x", "PermissionError", "Traceback text")
    log_info("Selected /x/a.txt")

    content = log_path.read_text(encoding="utf-8")
    assert "ERROR: Failed to read folder /x" in content
    assert "Type: PermissionError" in content
    assert "Traceback:\nTraceback text" in content
    assert "INFO: Selected /x/a.txt" in content
    assert content.count("-" * 80) == 2


def test_update_log_file_path_creates_directory(tmp_path):
    work_dir = tmp_path / "logs"
    update_log_file_path(str(work_dir))
    assert work_dir.is_dir()
    assert get_log_file() == os.path.join(str(work_dir), "error.log")


def test_init_log_file(tmp_path):
    assert not init_log_file()

    log_path = tmp_path / "nested" / "error.log"
    set_log_file(str(log_path))
    assert init_log_file()
    assert log_path.read_text(encoding="utf-8").startswith("Error Log - Started at")


def test_unwritable_log_file_falls_back_to_console(tmp_path, capsys):
    set_log_file(str(tmp_path))  # a directory cannot be opened for append
    log_error("still reported")
    err = capsys.readouterr().err
    assert "Failed to write to log file" in err
    assert "still reported" in err
    assert dialog_logging.get_log_file() == str(tmp_path)
