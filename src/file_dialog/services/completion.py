"""
Incremental filename completion for the path field.

A prefix automaton is built over the sibling names of the directory being
typed in. Each edit walks the automaton with the trailing path segment and,
when the continuation is unambiguous, appends it to the text.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from file_dialog.services.storage import PlatformOptions, StorageBackend, accept_all
from file_dialog.state import TextSelection

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


class AutomatonNode:
    """One state of the prefix automaton."""

    __slots__ = ("transitions", "is_final")

    def __init__(self):
        self.transitions: Dict[int, "AutomatonNode"] = {}
        self.is_final = False


class PrefixAutomaton:
    """Byte-level prefix automaton over a set of names."""

    def __init__(self, names: Iterable[str] = ()):
        self.root = AutomatonNode()
        self._size = 0
        for name in sorted(set(names)):
            self._insert(name.encode("utf-8"))

    def __len__(self) -> int:
        return self._size

    def __contains__(self, name: str) -> bool:
        node = self.walk(name.encode("utf-8"))
        return node is not None and node.is_final

    def _insert(self, key: bytes) -> None:
        node = self.root
        for byte in key:
            node = node.transitions.setdefault(byte, AutomatonNode())
        if not node.is_final:
            node.is_final = True
            self._size += 1

    def walk(self, prefix: bytes) -> Optional[AutomatonNode]:
        """Follow ``prefix`` from the root. Returns None when no transition matches."""
        node = self.root
        for byte in prefix:
            node = node.transitions.get(byte)
            if node is None:
                return None
        return node

    @staticmethod
    def unique_continuation(node: AutomatonNode) -> bytes:
        """Follow single outgoing transitions until a branch, a dead end or a final state."""
        consumed = bytearray()
        while not node.is_final and len(node.transitions) == 1:
            byte, node = next(iter(node.transitions.items()))
            consumed.append(byte)
        return bytes(consumed)


def _decode_whole_chars(data: bytes) -> str:
    """Decode UTF-8, dropping an incomplete sequence at the end."""
    for end in range(len(data), max(len(data) - 4, -1), -1):
        try:
            return data[:end].decode("utf-8")
        except UnicodeDecodeError:
            continue
    return ""


def split_typed_path(text: str) -> Tuple[str, str]:
    """
    Split path field text into its directory part and the segment being typed.

    The directory part keeps its trailing separator; the segment is empty
    when the text ends with a separator.
    """
    cut = max(text.rfind(sep) for sep in _SEPARATORS)
    if cut < 0:
        return "", text
    return text[: cut + 1], text[cut + 1 :]


def folder_depth(directory_text: str) -> int:
    """Number of components in a directory string (0 for an empty string)."""
    if not directory_text:
        return 0
    return len(Path(directory_text).parts)


class PathCompleter:
    """
    Completion engine for the path field.

    The automaton is rebuilt only when the directory depth of the typed
    text changes or the typed segment is empty; otherwise it is reused.
    """

    def __init__(self, backend: StorageBackend, show_hidden: bool = False):
        self.backend = backend
        self.show_hidden = show_hidden
        self.folder_depth = -1
        self.directory: Optional[Path] = None
        self.automaton = PrefixAutomaton()

    def reset(self, directory: Path) -> None:
        """Build the automaton for ``directory`` (called on every refresh)."""
        self.folder_depth = len(directory.parts)
        self._build(directory)

    def _build(self, directory: Optional[Path]) -> None:
        self.directory = directory
        if directory is None:
            self.automaton = PrefixAutomaton()
            return
        try:
            entries = self.backend.read_folder(
                directory,
                True,
                accept_all,
                PlatformOptions(show_hidden=self.show_hidden),
            )
        except OSError:
            self.automaton = PrefixAutomaton()
            return

        names = []
        for entry in entries:
            name = entry.display_name
            if entry.is_dir():
                name += os.sep
            names.append(name)
        self.automaton = PrefixAutomaton(names)

    def complete(self, text: str, deletion: bool = False) -> Tuple[str, Optional[TextSelection]]:
        """
        Process one edit of the path field.

        Args:
            text: Field text after the edit
            deletion: The edit removed characters; no completion is offered

        Returns:
            Tuple of (new text, appended span or None). A segment that matches
            no name leaves the text untouched.
        """
        directory_text, segment = split_typed_path(text)
        depth = folder_depth(directory_text)
        if depth != self.folder_depth or not segment:
            self.folder_depth = depth
            self._build(Path(directory_text) if directory_text else None)

        if deletion:
            return text, None

        node = self.automaton.walk(segment.encode("utf-8"))
        if node is None or node.is_final:
            return text, None

        suffix = _decode_whole_chars(PrefixAutomaton.unique_continuation(node))
        if not suffix:
            return text, None
        return text + suffix, TextSelection(len(text), len(text) + len(suffix))
