"""
Real filesystem storage backend.
"""

import os
from pathlib import Path
from typing import List, Optional

from file_dialog.constants import HIDDEN_PREFIX
from file_dialog.models import Entry, EntryKind
from file_dialog.services.platform_support import PlatformCapabilities, current_platform
from file_dialog.services.storage import (
    NameFilter,
    PlatformOptions,
    StorageBackend,
    keep_entry,
    prepend_volume_roots,
)


def _entry_kind(child: os.DirEntry) -> EntryKind:
    """Classify a scandir entry, following symlinks."""
    try:
        if child.is_dir():
            return EntryKind.DIRECTORY
        if child.is_file():
            return EntryKind.FILE
    except OSError:
        pass
    return EntryKind.OTHER


class LocalFileSystem(StorageBackend):
    """Storage backend over the local filesystem."""

    def __init__(self, platform: Optional[PlatformCapabilities] = None):
        self.platform = platform or current_platform()

    def create_dir(self, path: Path) -> None:
        os.mkdir(path)

    def rename(self, source: Path, target: Path) -> None:
        os.rename(source, target)

    def read_folder(
        self,
        path: Path,
        show_system_entries: bool,
        name_filter: NameFilter,
        options: PlatformOptions,
    ) -> List[Entry]:
        hide_dotfiles = self.platform.hides_dotfiles and not options.show_hidden
        entries: List[Entry] = []

        with os.scandir(path) as children:
            for child in children:
                if hide_dotfiles and child.name.startswith(HIDDEN_PREFIX):
                    continue
                entry = Entry(path=Path(child.path), kind=_entry_kind(child))
                if keep_entry(entry, show_system_entries, name_filter):
                    entries.append(entry)

        return prepend_volume_roots(entries, self.platform, options)
