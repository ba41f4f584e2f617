"""
Listing pipeline: turns a raw backend listing into the rendered entry order.
"""

from typing import Iterable, List

from file_dialog.constants import HIDDEN_PREFIX
from file_dialog.models import Entry
from file_dialog.services.storage import NameFilter, accept_all
from file_dialog.state import DialogKind


def _sort_key(entry: Entry):
    # Directories first, then codepoint order of the display name
    return (not entry.is_dir(), entry.display_name)


def build_listing(
    raw_entries: Iterable[Entry],
    kind: DialogKind,
    name_filter: NameFilter = accept_all,
    hide_dotfiles: bool = False,
) -> List[Entry]:
    """
    Produce the sorted, filtered listing for one directory.

    Steps:
        1. Drop non-directories under SELECT_FOLDER, and non-directories
           rejected by ``name_filter`` otherwise.
        2. Drop dot-prefixed names when ``hide_dotfiles`` is set.
        3. Stable-sort directories before files, then by display name.
        4. Prepend volume-root entries in the order they were received.

    Args:
        raw_entries: Entries returned by the storage backend
        kind: Dialog kind
        name_filter: Filter applied to non-directory paths
        hide_dotfiles: Suppress dot-prefixed names

    Returns:
        New list of entries; the input entries are not modified
    """
    volume_roots: List[Entry] = []
    entries: List[Entry] = []

    for entry in raw_entries:
        if entry.is_volume_root:
            volume_roots.append(entry)
            continue

        if not entry.is_dir():
            if kind is DialogKind.SELECT_FOLDER:
                continue
            if not name_filter(entry.path):
                continue

        if hide_dotfiles and entry.display_name.startswith(HIDDEN_PREFIX):
            continue

        entries.append(entry)

    entries.sort(key=_sort_key)
    return volume_roots + entries
