"""
Services layer for the file dialog.
Storage backends, the listing pipeline, selection and completion.
"""

from .storage import (
    StorageBackend,
    PlatformOptions,
    NameFilter,
    accept_all,
)
from .platform_support import (
    PlatformCapabilities,
    WindowsCapabilities,
    current_platform,
)
from .local_fs import LocalFileSystem
from .memory_fs import MemoryFileSystem
from .listing import build_listing
from .selection import ClickModifier, SingleSelection, MultiSelection
from .completion import PrefixAutomaton, PathCompleter

__all__ = [
    # Storage
    'StorageBackend',
    'PlatformOptions',
    'NameFilter',
    'accept_all',
    'PlatformCapabilities',
    'WindowsCapabilities',
    'current_platform',
    'LocalFileSystem',
    'MemoryFileSystem',
    # Listing
    'build_listing',
    # Selection
    'ClickModifier',
    'SingleSelection',
    'MultiSelection',
    # Completion
    'PrefixAutomaton',
    'PathCompleter',
]
