"""
Commands collected by the rendering layer during a frame.

At most one command is collected per frame and the dialog applies it in a
single step after rendering completes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from file_dialog.models import Entry
from file_dialog.services.selection import ClickModifier


class Command:
    """Base class for dialog commands."""


@dataclass(frozen=True)
class Select(Command):
    """Single-select an entry (None clears the selection)."""

    entry: Optional[Entry]


@dataclass(frozen=True)
class MultiSelect(Command):
    """Click on listing index ``index`` in multi-select mode."""

    index: int
    modifier: ClickModifier = ClickModifier.PLAIN


@dataclass(frozen=True)
class Open(Command):
    """Select ``path`` and open it: navigate into directories, confirm files."""

    path: Path


@dataclass(frozen=True)
class OpenSelected(Command):
    """Open the current selection."""


@dataclass(frozen=True)
class Save(Command):
    """Confirm a save dialog with ``path``."""

    path: Path


@dataclass(frozen=True)
class ConfirmFolder(Command):
    """Confirm a folder dialog."""


@dataclass(frozen=True)
class UpDirectory(Command):
    """Navigate to the parent of the current directory."""


@dataclass(frozen=True)
class Refresh(Command):
    """Re-read the current directory."""


@dataclass(frozen=True)
class Rename(Command):
    """Rename ``source`` to ``target`` through the storage backend."""

    source: Path
    target: Path


@dataclass(frozen=True)
class CreateDirectory(Command):
    """Create a directory named after the filename field in the current directory."""


@dataclass(frozen=True)
class SetShowHidden(Command):
    """Toggle listing of dot-prefixed names."""

    value: bool


@dataclass(frozen=True)
class Cancel(Command):
    """Cancel the dialog."""
