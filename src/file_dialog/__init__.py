"""
Embeddable file and folder picker for pygame applications.

Usage:
    dialog = FileDialog.open_file("/home/user")
    dialog.open()

    # every frame
    if dialog.show(build_frame_context(screen, events)) is DialogState.SELECTED:
        print(dialog.path())
"""

from .commands import Command
from .config.settings import DialogLabels, DialogSettings, load_dialog_settings
from .dialog import FileDialog
from .frame import DialogRenderer, FrameContext
from .input.events import build_frame_context
from .models import Entry, EntryKind
from .services.local_fs import LocalFileSystem
from .services.memory_fs import MemoryFileSystem
from .services.storage import PlatformOptions, StorageBackend
from .state import DialogKind, DialogState

__all__ = [
    "Command",
    "DialogKind",
    "DialogLabels",
    "DialogRenderer",
    "DialogSettings",
    "DialogState",
    "Entry",
    "EntryKind",
    "FileDialog",
    "FrameContext",
    "LocalFileSystem",
    "MemoryFileSystem",
    "PlatformOptions",
    "StorageBackend",
    "build_frame_context",
    "load_dialog_settings",
]
