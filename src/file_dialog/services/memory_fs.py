"""
In-memory storage backend.

Holds a virtual tree of paths so the dialog can be driven in tests and
demos without touching the real filesystem. Error semantics follow the
local filesystem.
"""

import errno
from pathlib import Path, PurePosixPath
from typing import Dict, Iterable, List, Optional, Set

from file_dialog.constants import HIDDEN_PREFIX
from file_dialog.models import Entry, EntryKind
from file_dialog.services.platform_support import PlatformCapabilities
from file_dialog.services.storage import (
    NameFilter,
    PlatformOptions,
    StorageBackend,
    keep_entry,
    prepend_volume_roots,
)


def _error(exc_type, code: int, path) -> OSError:
    return exc_type(code, errno.errorcode.get(code, "error"), str(path))


class MemoryFileSystem(StorageBackend):
    """
    Virtual filesystem keyed by absolute POSIX-style paths.

    The root ``/`` always exists. Paths passed in may be strings or paths;
    listed entries carry ``pathlib.Path`` values.
    """

    def __init__(
        self,
        paths: Optional[Iterable[str]] = None,
        platform: Optional[PlatformCapabilities] = None,
    ):
        """
        Initialize the tree.

        Args:
            paths: Paths to create; a trailing ``/`` marks a directory,
                anything else is a file. Parents are created as needed.
            platform: Platform capabilities (default: POSIX rules)
        """
        self.platform = platform or PlatformCapabilities()
        self._nodes: Dict[PurePosixPath, EntryKind] = {
            PurePosixPath("/"): EntryKind.DIRECTORY
        }
        self._denied: Set[PurePosixPath] = set()

        for path in paths or []:
            if path.endswith("/"):
                self.add_dir(path)
            else:
                self.add_file(path)

    # ---- Tree setup ---- #

    def add_dir(self, path) -> None:
        """Add a directory and any missing parents."""
        node = PurePosixPath(path)
        self._add_parents(node)
        self._nodes[node] = EntryKind.DIRECTORY

    def add_file(self, path) -> None:
        """Add a regular file and any missing parents."""
        node = PurePosixPath(path)
        self._add_parents(node)
        self._nodes[node] = EntryKind.FILE

    def add_special(self, path) -> None:
        """Add an object that is neither a file nor a directory."""
        node = PurePosixPath(path)
        self._add_parents(node)
        self._nodes[node] = EntryKind.OTHER

    def deny(self, path) -> None:
        """Make listing and writing inside ``path`` fail with PermissionError."""
        self._denied.add(PurePosixPath(path))

    def allow(self, path) -> None:
        self._denied.discard(PurePosixPath(path))

    def exists(self, path) -> bool:
        return PurePosixPath(path) in self._nodes

    def kind(self, path) -> Optional[EntryKind]:
        return self._nodes.get(PurePosixPath(path))

    def _add_parents(self, node: PurePosixPath) -> None:
        for parent in node.parents:
            self._nodes.setdefault(parent, EntryKind.DIRECTORY)

    # ---- StorageBackend ---- #

    def create_dir(self, path) -> None:
        node = PurePosixPath(path)
        parent = node.parent
        if node in self._nodes:
            raise _error(FileExistsError, errno.EEXIST, path)
        if self._nodes.get(parent) is not EntryKind.DIRECTORY:
            raise _error(FileNotFoundError, errno.ENOENT, path)
        if parent in self._denied:
            raise _error(PermissionError, errno.EACCES, path)
        self._nodes[node] = EntryKind.DIRECTORY

    def rename(self, source, target) -> None:
        src = PurePosixPath(source)
        dst = PurePosixPath(target)
        if src not in self._nodes:
            raise _error(FileNotFoundError, errno.ENOENT, source)
        if self._nodes.get(dst.parent) is not EntryKind.DIRECTORY:
            raise _error(FileNotFoundError, errno.ENOENT, target)
        if src.parent in self._denied or dst.parent in self._denied:
            raise _error(PermissionError, errno.EACCES, source)
        if src == dst:
            return
        if self._nodes.get(dst) is EntryKind.DIRECTORY:
            raise _error(FileExistsError, errno.EEXIST, target)
        if dst.is_relative_to(src):
            raise _error(OSError, errno.EINVAL, target)

        moved = {
            node: kind
            for node, kind in self._nodes.items()
            if node == src or node.is_relative_to(src)
        }
        for node in moved:
            del self._nodes[node]
        for node, kind in moved.items():
            self._nodes[dst / node.relative_to(src)] = kind

    def read_folder(
        self,
        path,
        show_system_entries: bool,
        name_filter: NameFilter,
        options: PlatformOptions,
    ) -> List[Entry]:
        node = PurePosixPath(path)
        kind = self._nodes.get(node)
        if kind is None:
            raise _error(FileNotFoundError, errno.ENOENT, path)
        if kind is not EntryKind.DIRECTORY:
            raise _error(NotADirectoryError, errno.ENOTDIR, path)
        if node in self._denied:
            raise _error(PermissionError, errno.EACCES, path)

        hide_dotfiles = self.platform.hides_dotfiles and not options.show_hidden
        entries: List[Entry] = []
        for child, child_kind in self._nodes.items():
            if child.parent != node or child == node:
                continue
            if hide_dotfiles and child.name.startswith(HIDDEN_PREFIX):
                continue
            entry = Entry(path=Path(child), kind=child_kind)
            if keep_entry(entry, show_system_entries, name_filter):
                entries.append(entry)

        return prepend_volume_roots(entries, self.platform, options)
