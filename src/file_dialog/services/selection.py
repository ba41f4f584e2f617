"""
Selection model for the file dialog.

Two mutually exclusive modes exist, chosen at construction: a single
selected entry, or per-entry flags with an anchor for range selection.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from file_dialog.models import Entry


class ClickModifier(Enum):
    """How a click on a listing row combines with the current selection."""

    PLAIN = "plain"
    TOGGLE = "toggle"  # ctrl/cmd-click
    RANGE = "range"  # shift-click


class SingleSelection:
    """At most one selected entry, held as an independent copy."""

    def __init__(self):
        self.entry: Optional[Entry] = None

    def select(self, entry: Optional[Entry]) -> None:
        self.entry = entry.copy() if entry is not None else None

    def clear(self) -> None:
        self.entry = None

    @property
    def path(self) -> Optional[Path]:
        return self.entry.path if self.entry is not None else None

    def is_selected(self, entry: Entry) -> bool:
        return self.entry is not None and self.entry.path == entry.path


class MultiSelection:
    """
    Per-entry selected flags over the current listing.

    The flags live on the listing entries themselves; this class only
    remembers the anchor index used by range clicks.
    """

    def __init__(self):
        self.anchor: Optional[int] = None

    def click(self, entries: List[Entry], index: int, modifier: ClickModifier) -> None:
        """
        Apply one click on ``entries[index]``.

        Out-of-range indices are ignored.
        """
        if not 0 <= index < len(entries):
            return

        if modifier is ClickModifier.TOGGLE:
            entry = entries[index]
            entry.set_selected(not entry.selected)
            self.anchor = index if entry.selected else None

        elif modifier is ClickModifier.RANGE:
            if self.anchor is None or self.anchor >= len(entries):
                return
            low, high = min(self.anchor, index), max(self.anchor, index)
            for i in range(low, high + 1):
                entries[i].set_selected(True)

        else:
            entry = entries[index]
            for i, other in enumerate(entries):
                if i != index:
                    other.set_selected(False)
            entry.set_selected(not entry.selected)
            self.anchor = index if entry.selected else None

    def select_path(self, entries: List[Entry], path: Path) -> bool:
        """Flag the entry at ``path`` alone and anchor on it. Returns False if absent."""
        for i, entry in enumerate(entries):
            if entry.path == path:
                self.clear(entries)
                entry.set_selected(True)
                self.anchor = i
                return True
        return False

    def clear(self, entries: List[Entry]) -> None:
        for entry in entries:
            entry.set_selected(False)
        self.anchor = None

    @staticmethod
    def selected_entries(entries: List[Entry]) -> List[Entry]:
        return [entry for entry in entries if entry.selected]
