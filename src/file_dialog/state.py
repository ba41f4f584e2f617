"""
Dialog state definitions for the file dialog.
Groups the state machine enums and the editable text buffers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DialogState(Enum):
    """Lifecycle state of a dialog. Exactly one is active at a time."""

    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"
    SELECTED = "selected"

    @property
    def is_terminal(self) -> bool:
        """Cancelled and Selected are reported to the host for one frame."""
        return self in (DialogState.CANCELLED, DialogState.SELECTED)


class DialogKind(Enum):
    """What the dialog is asking the user for. Fixed at construction."""

    SELECT_FOLDER = "select_folder"
    OPEN_FILE = "open_file"
    SAVE_FILE = "save_file"

    @classmethod
    def from_name(cls, name: str) -> "DialogKind":
        """
        Look up a dialog kind by its value.

        Raises:
            ValueError: If the name is not a known dialog kind
        """
        for kind in cls:
            if kind.value == name:
                return kind
        raise ValueError(f"Unknown dialog kind: {name!r}")


@dataclass(frozen=True)
class TextSelection:
    """Character span of a text buffer that the next keystroke replaces."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start >= self.end


@dataclass
class EditBuffers:
    """Editable text fields of the dialog."""

    path_edit: str = ""
    path_selection: Optional[TextSelection] = None
    filename_edit: str = ""

    def set_path_text(self, text: str) -> None:
        """Replace the path field text and drop any completion highlight."""
        self.path_edit = text
        self.path_selection = None
