"""
Entry model for the file dialog.

An Entry is one browsable object surfaced by a listing: a file, a
directory, or a synthetic volume root. Entries are plain values and are
produced fresh on every refresh.
"""

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Kind of a listed object. OTHER covers unknown metadata and system objects."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass
class Entry:
    """One object in a directory listing."""

    path: Path
    kind: EntryKind = EntryKind.OTHER
    selected: bool = False
    is_volume_root: bool = False

    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def set_selected(self, selected: bool) -> None:
        self.selected = selected

    @property
    def display_name(self) -> str:
        """File name of the entry, or the root string itself for volume roots."""
        if self.is_volume_root:
            return str(self.path)
        return self.path.name

    def copy(self) -> "Entry":
        """Return an independent copy of this entry."""
        return replace(self)

