"""
Platform capabilities used by the storage backends.

Volume-root enumeration and dotfile hiding differ between Windows and
POSIX systems. The dialog only ever talks to a PlatformCapabilities
instance, so the platform branch lives here.
"""

import os
import string
from pathlib import Path
from typing import List


class PlatformCapabilities:
    """What the current platform supports. The base class is POSIX-like."""

    name = "posix"
    hides_dotfiles = True
    has_volume_roots = False

    def list_volume_roots(self) -> List[Path]:
        """Return volume roots in enumeration order."""
        return []

    def is_volume_root(self, path: Path) -> bool:
        return False


class WindowsCapabilities(PlatformCapabilities):
    """Drive letters are volume roots; dot-prefixed names are ordinary."""

    name = "windows"
    hides_dotfiles = False
    has_volume_roots = True

    def list_volume_roots(self) -> List[Path]:
        listdrives = getattr(os, "listdrives", None)
        if listdrives is not None:
            return [Path(drive) for drive in listdrives()]
        return [
            Path(f"{letter}:\\")
            for letter in string.ascii_uppercase
            if os.path.exists(f"{letter}:\\")
        ]

    def is_volume_root(self, path: Path) -> bool:
        text = str(path)
        return len(text) == 3 and text[0] in string.ascii_uppercase and text[1:] == ":\\"


def current_platform() -> PlatformCapabilities:
    """Return the capabilities of the running platform."""
    if os.name == "nt":
        return WindowsCapabilities()
    return PlatformCapabilities()
