"""
File dialog controller.

The host calls ``show(frame)`` once per rendered frame. While the dialog is
open, the rendering layer draws it and collects at most one command, which
is applied after rendering completes. The controller owns no event loop or
thread; every storage call runs synchronously in the frame that issues it.
"""

import os
import traceback
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from file_dialog.commands import (
    Cancel,
    Command,
    ConfirmFolder,
    CreateDirectory,
    MultiSelect,
    Open,
    OpenSelected,
    Refresh,
    Rename,
    Save,
    Select,
    SetShowHidden,
    UpDirectory,
)
from file_dialog.config.settings import DialogLabels, DialogSettings
from file_dialog.frame import DialogRenderer, FrameContext
from file_dialog.models import Entry
from file_dialog.services.completion import PathCompleter
from file_dialog.services.listing import build_listing
from file_dialog.services.local_fs import LocalFileSystem
from file_dialog.services.platform_support import PlatformCapabilities, current_platform
from file_dialog.services.selection import MultiSelection, SingleSelection
from file_dialog.services.storage import (
    NameFilter,
    PlatformOptions,
    StorageBackend,
    accept_all,
)
from file_dialog.state import DialogKind, DialogState, EditBuffers
from file_dialog.utils.logging import log_error

# Returns True when a typed or selected file name is acceptable
FilenameFilter = Callable[[str], bool]


def _accept_any_name(_name: str) -> bool:
    return True


def _reject_files(_path: Path) -> bool:
    return False


def _is_single_component(name: str) -> bool:
    """True for a plain file name: no separators, not `.` or `..`."""
    return name not in (".", "..") and Path(name).name == name and os.sep not in name


def _with_trailing_separator(text: str) -> str:
    if text.endswith(os.sep) or (os.altsep and text.endswith(os.altsep)):
        return text
    return text + os.sep


class FileDialog:
    """
    File/folder picker controller.

    Create one with ``select_folder``, ``open_file`` or ``save_file``,
    configure it with the builder methods, call ``open()`` and then
    ``show(frame)`` every frame until ``state()`` is SELECTED or CANCELLED.
    """

    def __init__(
        self,
        kind: DialogKind,
        initial_path: Optional[os.PathLike] = None,
        settings: Optional[DialogSettings] = None,
        backend: Optional[StorageBackend] = None,
        platform: Optional[PlatformCapabilities] = None,
    ):
        """
        Initialize the dialog.

        Args:
            kind: What the dialog asks for
            initial_path: Directory to start in, or a file to preselect
            settings: Configuration (default: DialogSettings())
            backend: Storage backend (default: the local filesystem)
            platform: Platform capabilities (default: the running platform)
        """
        self.settings = settings or DialogSettings()
        if initial_path is None:
            initial_path = self.settings.initial_path or os.getcwd()

        self._kind = kind
        self._platform = platform or current_platform()
        self._backend = backend or LocalFileSystem(self._platform)
        self._renderer: Optional[DialogRenderer] = None
        self._name_filter: Optional[NameFilter] = None
        self._filename_filter: FilenameFilter = _accept_any_name

        self._state = DialogState.CLOSED
        self._path = Path(initial_path)
        self._started = False
        self.edit = EditBuffers()

        self._listing: List[Entry] = []
        self._listing_error: Optional[OSError] = None
        self._single = SingleSelection()
        self._multi = MultiSelection()
        self._completer = PathCompleter(self._backend, self.settings.show_hidden)

        self._result: Optional[Path] = None
        self._result_selection: List[Path] = []

    # ---- Constructors ---- #

    @classmethod
    def select_folder(cls, initial_path: Optional[os.PathLike] = None, **kwargs) -> "FileDialog":
        """Create a dialog that prompts the user to select a folder."""
        return cls(DialogKind.SELECT_FOLDER, initial_path, **kwargs)

    @classmethod
    def open_file(cls, initial_path: Optional[os.PathLike] = None, **kwargs) -> "FileDialog":
        """Create a dialog that prompts the user to open a file."""
        return cls(DialogKind.OPEN_FILE, initial_path, **kwargs)

    @classmethod
    def save_file(cls, initial_path: Optional[os.PathLike] = None, **kwargs) -> "FileDialog":
        """Create a dialog that prompts the user to save a file."""
        return cls(DialogKind.SAVE_FILE, initial_path, **kwargs)

    # ---- Builder configuration ---- #

    def default_size(self, width: int, height: int) -> "FileDialog":
        self.settings.default_size = (width, height)
        return self

    def current_pos(self, x: int, y: int) -> "FileDialog":
        self.settings.position = (x, y)
        return self

    def anchor(self, align: str, offset: Tuple[int, int] = (0, 0)) -> "FileDialog":
        """
        Anchor the window to a screen edge or corner.

        Raises:
            ValueError: If ``align`` is not one of config.ANCHORS
        """
        self.settings = DialogSettings.from_dict(
            {**self.settings.to_dict(), "anchor": align, "anchor_offset": offset}
        )
        return self

    def scrollarea_max_height(self, height: int) -> "FileDialog":
        self.settings.scrollarea_max_height = height
        return self

    def resizable(self, resizable: bool) -> "FileDialog":
        self.settings.resizable = resizable
        return self

    def show_rename(self, show: bool) -> "FileDialog":
        self.settings.show_rename = show
        return self

    def show_new_folder(self, show: bool) -> "FileDialog":
        self.settings.show_new_folder = show
        return self

    def multi_select(self, enabled: bool) -> "FileDialog":
        """Switch selection mode. Set it before ``open()``; switching later drops the selection."""
        if enabled != self.settings.multi_select:
            self._single.clear()
            self._multi.clear(self._listing)
        self.settings.multi_select = enabled
        return self

    def keep_on_top(self, keep: bool) -> "FileDialog":
        self.settings.keep_on_top = keep
        return self

    def show_system_files(self, show: bool) -> "FileDialog":
        self.settings.show_system_files = show
        return self

    def show_hidden(self, show: bool) -> "FileDialog":
        self.settings.show_hidden = show
        self._completer.show_hidden = show
        return self

    def show_volume_roots(self, show: bool) -> "FileDialog":
        self.settings.show_volume_roots = show
        return self

    def show_files_filter(self, name_filter: NameFilter) -> "FileDialog":
        """Only list non-directory paths for which ``name_filter`` returns True."""
        self._name_filter = name_filter
        return self

    def filename_filter(self, filename_filter: FilenameFilter) -> "FileDialog":
        """Only allow confirming file names for which ``filename_filter`` returns True."""
        self._filename_filter = filename_filter
        return self

    def storage(self, backend: StorageBackend) -> "FileDialog":
        self._backend = backend
        self._completer = PathCompleter(backend, self.settings.show_hidden)
        return self

    def labels(self, labels: DialogLabels) -> "FileDialog":
        self.settings.labels = labels
        return self

    def renderer(self, renderer: DialogRenderer) -> "FileDialog":
        self._renderer = renderer
        return self

    # ---- Host contract ---- #

    @property
    def dialog_kind(self) -> DialogKind:
        return self._kind

    @property
    def directory(self) -> Path:
        """Directory currently being browsed."""
        return self._path

    @property
    def listing(self) -> List[Entry]:
        """Sorted entries of the current directory (empty on listing failure)."""
        return self._listing

    @property
    def listing_error(self) -> Optional[OSError]:
        """Error of the last refresh, None when it succeeded."""
        return self._listing_error

    @property
    def platform(self) -> PlatformCapabilities:
        return self._platform

    @property
    def is_multi_select(self) -> bool:
        return self.settings.multi_select

    def state(self) -> DialogState:
        return self._state

    def visible(self) -> bool:
        return self._state is DialogState.OPEN

    def selected(self) -> bool:
        """True once the selection was confirmed."""
        return self._state is DialogState.SELECTED

    def path(self) -> Optional[Path]:
        """Confirmed result, valid once ``state()`` is SELECTED."""
        return self._result

    def selection(self) -> List[Path]:
        """Confirmed multi-select result, or the current selection while open."""
        if self._state is DialogState.SELECTED:
            return list(self._result_selection)
        if self.is_multi_select:
            return [entry.path for entry in MultiSelection.selected_entries(self._listing)]
        return [self._single.path] if self._single.path is not None else []

    def title(self) -> str:
        labels = self.settings.labels
        if self._kind is DialogKind.SELECT_FOLDER:
            return labels.title_select_folder
        if self._kind is DialogKind.OPEN_FILE:
            return labels.title_open_file
        return labels.title_save_file

    def open(self) -> None:
        """Open the dialog and read the current directory."""
        self._state = DialogState.OPEN
        self._result = None
        self._result_selection = []
        if not self._started:
            self._started = True
            self._navigate(self._path)
        else:
            self.refresh()

    def set_path(self, path: os.PathLike) -> None:
        """Navigate programmatically; a file path selects its parent directory."""
        self._started = True
        self._navigate(Path(path))

    def show(self, frame: Optional[FrameContext] = None) -> DialogState:
        """
        Run one frame of the dialog.

        Must be called every frame. Terminal states are reported once and
        become CLOSED on the following call.

        Args:
            frame: Host input for this frame

        Returns:
            The dialog state after this frame
        """
        if frame is None:
            frame = FrameContext()

        if self._state is not DialogState.OPEN:
            self._state = DialogState.CLOSED
            return self._state

        if frame.escape_pressed or frame.window_closed:
            self._state = DialogState.CANCELLED
            return self._state

        renderer = self._get_renderer(frame)
        command = renderer.render(self, frame) if renderer is not None else None
        if command is not None:
            self.apply(command)

        return self._state

    def _get_renderer(self, frame: FrameContext) -> Optional[DialogRenderer]:
        if self._renderer is None and frame.screen is not None:
            from file_dialog.ui.screens.modals.file_dialog_modal import FileDialogModal

            self._renderer = FileDialogModal()
        return self._renderer

    # ---- Edit buffers ---- #

    def edit_path_text(self, text: str, deletion: bool = False) -> None:
        """Update the path field and run completion on it."""
        new_text, span = self._completer.complete(text, deletion)
        self.edit.path_edit = new_text
        self.edit.path_selection = span

    def accept_path_completion(self) -> None:
        """Keep the suggested text and drop its highlight."""
        self.edit.path_selection = None

    def edit_filename_text(self, text: str) -> None:
        self.edit.filename_edit = text

    # ---- Gating predicates ---- #

    def primary_entry(self) -> Optional[Entry]:
        """The single selected entry (in multi-select: the only flagged one)."""
        if self.is_multi_select:
            flagged = MultiSelection.selected_entries(self._listing)
            return flagged[0] if len(flagged) == 1 else None
        return self._single.entry

    def is_entry_selected(self, entry: Entry) -> bool:
        if self.is_multi_select:
            return entry.selected
        return self._single.is_selected(entry)

    def _confirmable(self, entry: Entry) -> bool:
        if self._kind is DialogKind.SELECT_FOLDER:
            kind_ok = entry.is_dir()
        else:
            kind_ok = entry.is_file()
        return kind_ok and self._filename_filter(entry.display_name)

    def can_open(self) -> bool:
        if self.is_multi_select:
            return any(
                self._confirmable(entry)
                for entry in MultiSelection.selected_entries(self._listing)
            )
        entry = self._single.entry
        return entry is not None and entry.is_file()

    def can_select_folder(self) -> bool:
        """Folder dialogs confirm the current directory or a selected directory."""
        if self.is_multi_select:
            flagged = MultiSelection.selected_entries(self._listing)
            return all(entry.is_dir() for entry in flagged)
        entry = self._single.entry
        return entry is None or entry.is_dir()

    def can_save(self) -> bool:
        name = self.edit.filename_edit
        return bool(name) and self._filename_filter(name)

    def can_rename(self) -> bool:
        entry = self.primary_entry()
        name = self.edit.filename_edit
        return (
            entry is not None
            and entry.is_file()
            and bool(name)
            and _is_single_component(name)
            and name != entry.display_name
        )

    # ---- Command factories used by the rendering layer ---- #

    def double_click_command(self, entry: Entry) -> Command:
        if self._kind is DialogKind.SAVE_FILE and not entry.is_dir():
            if self._filename_filter(entry.display_name):
                return Save(entry.path)
            return Select(entry)
        return Open(entry.path)

    def confirm_command(self) -> Optional[Command]:
        """Command for the Open/Save button, or None while it is disabled."""
        if self._kind is DialogKind.SELECT_FOLDER:
            return ConfirmFolder() if self.can_select_folder() else None

        if self._kind is DialogKind.OPEN_FILE:
            return OpenSelected() if self.can_open() else None

        entry = self.primary_entry()
        if entry is not None and entry.is_dir():
            return OpenSelected()
        if self.can_save():
            return Save(self._path / self.edit.filename_edit)
        return None

    def confirm_label(self) -> str:
        labels = self.settings.labels
        if self._kind is DialogKind.SAVE_FILE:
            entry = self.primary_entry()
            return labels.open if entry is not None and entry.is_dir() else labels.save
        return labels.open

    def filename_enter_command(self) -> Optional[Command]:
        """Command for Enter in the filename field, or None."""
        name = self.edit.filename_edit
        if not name:
            return None
        path = self._path / name

        if self._kind is DialogKind.SELECT_FOLDER:
            return ConfirmFolder()

        entry = self._lookup(path)
        if self._kind is DialogKind.OPEN_FILE:
            return Open(path) if entry is not None else None

        if entry is not None and entry.is_dir():
            return Open(path)
        return Save(path) if self.can_save() else None

    def path_enter_command(self) -> Optional[Command]:
        """Command for leaving the path field with Enter."""
        text = self.edit.path_edit
        return Open(Path(text)) if text else None

    def rename_command(self) -> Optional[Command]:
        if not self.can_rename():
            return None
        entry = self.primary_entry()
        return Rename(entry.path, entry.path.with_name(self.edit.filename_edit))

    def can_go_up(self) -> bool:
        return self._path.parent != self._path

    # ---- Command application ---- #

    def apply(self, command: Command) -> None:
        """Apply one command. Called once per frame after rendering."""
        if isinstance(command, Select):
            self._select(command.entry)

        elif isinstance(command, MultiSelect):
            self._multi_click(command)

        elif isinstance(command, ConfirmFolder):
            self._confirm_folder()

        elif isinstance(command, Open):
            self._open_path(command.path)

        elif isinstance(command, OpenSelected):
            self._open_selected()

        elif isinstance(command, Save):
            if self._filename_filter(command.path.name):
                self._confirm(command.path, [command.path])

        elif isinstance(command, Cancel):
            self._state = DialogState.CANCELLED

        elif isinstance(command, Refresh):
            self.refresh()

        elif isinstance(command, UpDirectory):
            if self.can_go_up():
                self._path = self._path.parent
                self.refresh()

        elif isinstance(command, CreateDirectory):
            self._create_directory()

        elif isinstance(command, Rename):
            self._rename(command.source, command.target)

        elif isinstance(command, SetShowHidden):
            self.show_hidden(command.value)
            self.refresh()

        else:
            raise TypeError(f"Unknown command: {command!r}")

    def refresh(self) -> None:
        """Re-read the current directory. Clears the selection."""
        had_selection = bool(self.selection())
        name_filter = self._effective_name_filter()

        try:
            raw_entries = self._backend.read_folder(
                self._path,
                self.settings.show_system_files,
                name_filter,
                self._platform_options(),
            )
        except OSError as e:
            self._listing = []
            self._listing_error = e
            log_error(f"Failed to read folder {self._path}: {e}", type(e).__name__)
        else:
            self._listing = build_listing(
                raw_entries,
                self._kind,
                name_filter,
                hide_dotfiles=self._platform.hides_dotfiles and not self.settings.show_hidden,
            )
            self._listing_error = None

        self._completer.reset(self._path)
        self.edit.set_path_text(_with_trailing_separator(str(self._path)))
        self._single.clear()
        self._multi.clear(self._listing)
        if had_selection:
            self.edit.filename_edit = ""

    def _effective_name_filter(self) -> NameFilter:
        if self._kind is DialogKind.SELECT_FOLDER:
            return _reject_files
        return self._name_filter or accept_all

    def _platform_options(self) -> PlatformOptions:
        return PlatformOptions(
            show_hidden=self.settings.show_hidden,
            show_volume_roots=self.settings.show_volume_roots,
        )

    def _navigate(self, path: Path) -> None:
        entry = self._lookup(path)
        if entry is not None and not entry.is_dir():
            if self._kind is not DialogKind.SELECT_FOLDER:
                self.edit.filename_edit = entry.display_name
            path = path.parent
        self._path = path
        self.refresh()

    def _lookup(self, path: Path) -> Optional[Entry]:
        """Find ``path`` in the listing, or else in its parent's listing."""
        for entry in self._listing:
            if entry.path == path:
                return entry.copy()

        parent = path.parent
        if parent == path:
            return None
        try:
            entries = self._backend.read_folder(
                parent, True, accept_all, PlatformOptions(show_hidden=True)
            )
        except OSError:
            return None
        for entry in entries:
            if entry.path == path:
                return entry
        return None

    def _select(self, entry: Optional[Entry]) -> None:
        if self.is_multi_select:
            if entry is None:
                self._multi.clear(self._listing)
            else:
                self._multi.select_path(self._listing, entry.path)
        else:
            self._single.select(entry)
        self.edit.filename_edit = entry.display_name if entry is not None else ""

    def _reselect(self, path: Path) -> None:
        for entry in self._listing:
            if entry.path == path:
                self._select(entry)
                return

    def _multi_click(self, command: MultiSelect) -> None:
        if not self.is_multi_select:
            if 0 <= command.index < len(self._listing):
                self._select(self._listing[command.index])
            return

        self._multi.click(self._listing, command.index, command.modifier)
        primary = self.primary_entry()
        if primary is not None:
            self.edit.filename_edit = primary.display_name
        elif not MultiSelection.selected_entries(self._listing):
            self.edit.filename_edit = ""

    def _confirm(self, path: Path, selection: List[Path]) -> None:
        self._result = path
        self._result_selection = selection
        self._state = DialogState.SELECTED

    def _confirm_folder(self) -> None:
        if self.is_multi_select:
            folders = [
                entry.path
                for entry in MultiSelection.selected_entries(self._listing)
                if entry.is_dir()
            ]
            if folders:
                self._confirm(folders[0], folders)
                return

        target = self._path
        entry = self.primary_entry()
        if entry is not None and entry.is_dir():
            target = entry.path
        elif self.edit.filename_edit:
            candidate = self._path / self.edit.filename_edit
            typed = next((e for e in self._listing if e.path == candidate), None)
            if typed is not None and typed.is_dir():
                target = candidate
        self._confirm(target, [target])

    def _open_path(self, path: Path) -> None:
        entry = self._lookup(path)
        if entry is None:
            if path.parent == path:
                self._path = path
                self.refresh()
            return

        if entry.is_dir():
            self._path = path
            self.refresh()
            return

        self._select(entry)
        confirmable = self._confirmable(entry) if self.is_multi_select else entry.is_file()
        if self._kind is DialogKind.OPEN_FILE and confirmable:
            self._confirm(path, [path])

    def _open_selected(self) -> None:
        if self.is_multi_select:
            flagged = MultiSelection.selected_entries(self._listing)
            if len(flagged) == 1 and flagged[0].is_dir():
                self._path = flagged[0].path
                self.refresh()
                return
            paths = [entry.path for entry in flagged if self._confirmable(entry)]
            if paths and self._kind is not DialogKind.SAVE_FILE:
                self._confirm(paths[0], paths)
            return

        entry = self._single.entry
        if entry is None:
            return
        if entry.is_dir():
            self._path = entry.path
            self.refresh()
        elif entry.is_file() and self._kind is DialogKind.OPEN_FILE:
            self._confirm(entry.path, [entry.path])

    def _create_directory(self) -> None:
        name = self.edit.filename_edit or self.settings.labels.default_new_folder_name
        path = self._path / name
        try:
            self._backend.create_dir(path)
        except OSError as e:
            log_error(
                f"Error while creating directory {path}: {e}",
                type(e).__name__,
                traceback.format_exc(),
            )
            return

        self.refresh()
        self._reselect(path)

    def _rename(self, source: Path, target: Path) -> None:
        try:
            self._backend.rename(source, target)
        except OSError as e:
            log_error(
                f"Error while renaming {source} to {target}: {e}",
                type(e).__name__,
                traceback.format_exc(),
            )
            return

        self.refresh()
        self._reselect(target)

    def __repr__(self) -> str:
        return (
            f"FileDialog(kind={self._kind.value}, state={self._state.value}, "
            f"path={str(self._path)!r}, path_edit={self.edit.path_edit!r}, "
            f"filename_edit={self.edit.filename_edit!r}, selection={self.selection()!r}, "
            f"entries={len(self._listing)}, error={self._listing_error!r})"
        )
