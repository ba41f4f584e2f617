"""
Storage backend interface for the file dialog.

The dialog talks to storage only through this interface. A real
filesystem and an in-memory tree implement it identically.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

from file_dialog.models import Entry, EntryKind
from file_dialog.services.platform_support import PlatformCapabilities

# Returns True when a path should be shown
NameFilter = Callable[[Path], bool]


def accept_all(_path: Path) -> bool:
    """Default name filter."""
    return True


@dataclass(frozen=True)
class PlatformOptions:
    """
    Platform-specific listing augmentation.

    Attributes:
        show_hidden: Keep dot-prefixed names where the platform hides them
        show_volume_roots: Also synthesize one entry per storage volume root
    """

    show_hidden: bool = False
    show_volume_roots: bool = False


class StorageBackend(ABC):
    """
    Capability set the dialog needs from storage.

    All operations are synchronous and raise an ``OSError`` subclass on
    failure.
    """

    @abstractmethod
    def create_dir(self, path: Path) -> None:
        """
        Create exactly one directory level.

        Raises:
            FileExistsError: If ``path`` already exists
            FileNotFoundError: If the parent does not exist
            PermissionError: If the store refuses the operation
        """

    @abstractmethod
    def rename(self, source: Path, target: Path) -> None:
        """
        Move ``source`` to ``target``.

        Raises:
            FileNotFoundError: If ``source`` or the parent of ``target`` is missing
        """

    @abstractmethod
    def read_folder(
        self,
        path: Path,
        show_system_entries: bool,
        name_filter: NameFilter,
        options: PlatformOptions,
    ) -> List[Entry]:
        """
        List the entries directly contained in ``path``, unordered.

        Entries whose kind is unknown are dropped unless
        ``show_system_entries`` is set. ``name_filter`` only applies to
        non-directory entries.

        Raises:
            OSError: If the directory cannot be listed
        """


def keep_entry(entry: Entry, show_system_entries: bool, name_filter: NameFilter) -> bool:
    """Shared per-entry rule for ``read_folder`` implementations."""
    if entry.is_dir():
        return True
    if not show_system_entries and not entry.is_file():
        return False
    return name_filter(entry.path)


def prepend_volume_roots(
    entries: List[Entry], platform: PlatformCapabilities, options: PlatformOptions
) -> List[Entry]:
    """Put one directory entry per volume root ahead of ``entries`` when enabled."""
    if not (options.show_volume_roots and platform.has_volume_roots):
        return entries
    roots = [
        Entry(path=root, kind=EntryKind.DIRECTORY, is_volume_root=True)
        for root in platform.list_volume_roots()
    ]
    return roots + entries
