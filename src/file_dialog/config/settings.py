"""
Settings management for the file dialog.
Holds the dialog configuration surface and its default values.
"""

import json
import os
import traceback
from dataclasses import dataclass, field, asdict, fields
from typing import Dict, Any, Optional, Tuple

from file_dialog.constants import (
    DEFAULT_DIALOG_SIZE,
    DEFAULT_NEW_FOLDER_NAME,
    SCROLLAREA_MAX_HEIGHT,
)

ANCHORS = (
    "top_left",
    "top",
    "top_right",
    "left",
    "center",
    "right",
    "bottom_left",
    "bottom",
    "bottom_right",
)


@dataclass
class DialogLabels:
    """Every user-visible string of the dialog."""

    title_select_folder: str = "Select Folder"
    title_open_file: str = "Open File"
    title_save_file: str = "Save File"
    parent_folder: str = "Up"
    parent_folder_hint: str = "Parent Folder"
    refresh: str = "Refresh"
    refresh_hint: str = "Refresh"
    file_label: str = "File:"
    new_folder: str = "New Folder"
    rename: str = "Rename"
    open: str = "Open"
    save: str = "Save"
    cancel: str = "Cancel"
    show_hidden: str = "Show Hidden"
    folder_icon: str = "[DIR] "
    file_icon: str = ""
    default_new_folder_name: str = DEFAULT_NEW_FOLDER_NAME

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DialogLabels":
        valid_keys = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in valid_keys})


@dataclass
class DialogSettings:
    """Dialog configuration with default values."""

    initial_path: str = ""  # empty: process working directory
    default_size: Tuple[int, int] = DEFAULT_DIALOG_SIZE
    position: Optional[Tuple[int, int]] = None
    anchor: Optional[str] = None  # one of ANCHORS
    anchor_offset: Tuple[int, int] = (0, 0)
    scrollarea_max_height: int = SCROLLAREA_MAX_HEIGHT
    resizable: bool = True
    show_rename: bool = True
    show_new_folder: bool = True
    multi_select: bool = False
    keep_on_top: bool = False
    show_system_files: bool = False
    show_hidden: bool = False  # dot-prefixed names, where the platform hides them
    show_volume_roots: bool = True  # drive letters, where the platform has them
    labels: DialogLabels = field(default_factory=DialogLabels)

    def __post_init__(self):
        """Validate the anchor and normalise JSON lists to tuples."""
        if self.anchor is not None and self.anchor not in ANCHORS:
            raise ValueError(f"Unknown anchor: {self.anchor!r}")
        self.default_size = tuple(self.default_size)
        self.anchor_offset = tuple(self.anchor_offset)
        if self.position is not None:
            self.position = tuple(self.position)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DialogSettings":
        """Create settings from a dictionary, ignoring unknown keys."""
        valid_keys = {f.name for f in fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        if isinstance(filtered_data.get("labels"), dict):
            filtered_data["labels"] = DialogLabels.from_dict(filtered_data["labels"])
        return cls(**filtered_data)


def load_dialog_settings(config_file: str) -> DialogSettings:
    """
    Load dialog settings from a JSON file.

    Missing files and unreadable or invalid content fall back to defaults.

    Args:
        config_file: Path to the JSON file

    Returns:
        DialogSettings instance
    """
    if not os.path.exists(config_file):
        return DialogSettings()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            return DialogSettings.from_dict(json.load(f))
    except (OSError, ValueError, TypeError) as e:
        from file_dialog.utils.logging import log_error

        log_error(
            f"Failed to load dialog settings from {config_file}, using defaults",
            type(e).__name__,
            traceback.format_exc(),
        )
        return DialogSettings()
