"""
Demo host for the file dialog.

Runs a pygame loop with Open File, Save File and Select Folder buttons,
shows the active dialog every frame and prints the result.
"""

import argparse
import traceback
from typing import List, Optional

import pygame

from file_dialog.config.settings import DialogSettings, load_dialog_settings
from file_dialog.constants import APP_VERSION, FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from file_dialog.dialog import FileDialog
from file_dialog.input.events import build_frame_context
from file_dialog.services.memory_fs import MemoryFileSystem
from file_dialog.services.storage import StorageBackend
from file_dialog.state import DialogState
from file_dialog.ui.molecules.action_button import ActionButton
from file_dialog.ui.atoms.text import Text
from file_dialog.ui.theme import Theme
from file_dialog.utils.logging import init_log_file, log_error, log_info, set_log_file

DEMO_TREE = [
    "/home/user/",
    "/home/user/.profile",
    "/home/user/documents/report.txt",
    "/home/user/documents/report-draft.txt",
    "/home/user/documents/notes.md",
    "/home/user/pictures/holiday.png",
    "/home/user/projects/demo/README.md",
    "/tmp/",
]

DEMO_BUTTONS = ("Open File", "Save File", "Select Folder")


def demo_file_system() -> MemoryFileSystem:
    """In-memory tree browsed by ``--fake-fs``."""
    return MemoryFileSystem(DEMO_TREE)


class DialogDemoApp:
    """
    Demo application.

    Owns the pygame window and at most one active dialog.
    """

    def __init__(
        self,
        settings: Optional[DialogSettings] = None,
        backend: Optional[StorageBackend] = None,
        initial_path: Optional[str] = None,
    ):
        pygame.init()
        pygame.display.set_caption(f"File Dialog Demo {APP_VERSION}")
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        self.theme = Theme()
        self.text = Text(self.theme)
        self.action_button = ActionButton(self.theme)

        self.settings = settings or DialogSettings()
        self.backend = backend
        self.initial_path = initial_path
        self.dialog: Optional[FileDialog] = None
        self.last_result = "No file selected"
        self.button_rects: List[pygame.Rect] = []

    def _create_dialog(self, index: int) -> FileDialog:
        constructors = (FileDialog.open_file, FileDialog.save_file, FileDialog.select_folder)
        settings = DialogSettings.from_dict(self.settings.to_dict())
        dialog = constructors[index](
            self.initial_path, settings=settings, backend=self.backend
        )
        dialog.open()
        return dialog

    def run(self) -> None:
        """Run the main loop until the window is closed."""
        running = True

        while running:
            self.clock.tick(FPS)
            events = pygame.event.get()

            if self.dialog is None:
                for event in events:
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        for index, rect in enumerate(self.button_rects):
                            if rect.collidepoint(event.pos):
                                self.dialog = self._create_dialog(index)
                                events = []
                                break

            self._draw()

            if self.dialog is not None:
                frame = build_frame_context(self.screen, events)
                state = self.dialog.show(frame)
                if state is DialogState.SELECTED:
                    self.last_result = ", ".join(str(path) for path in self.dialog.selection())
                    log_info(f"Selected: {self.last_result}")
                    print(f"Selected: {self.last_result}")
                elif state is DialogState.CANCELLED:
                    self.last_result = "Cancelled"
                    if frame.window_closed:
                        running = False
                elif state is DialogState.CLOSED:
                    self.dialog = None

            pygame.display.flip()

        pygame.quit()

    def _draw(self) -> None:
        self.screen.fill(self.theme.background)
        width = self.screen.get_width()

        self.button_rects = []
        x = self.theme.padding_lg
        for label in DEMO_BUTTONS:
            rect = pygame.Rect(x, self.theme.padding_lg, 160, 40)
            self.action_button.render(screen=self.screen, rect=rect, label=label)
            self.button_rects.append(rect)
            x = rect.right + self.theme.padding_md

        self.text.render(
            self.screen,
            self.last_result,
            (self.theme.padding_lg, 80),
            color=self.theme.text_secondary,
            size=self.theme.font_size_sm,
            max_width=width - self.theme.padding_lg * 2,
        )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="File dialog demo")
    parser.add_argument("path", nargs="?", help="initial directory or file")
    parser.add_argument("--fake-fs", action="store_true", help="browse an in-memory demo tree")
    parser.add_argument("--config", help="JSON file with dialog settings")
    parser.add_argument("--multi-select", action="store_true", help="allow selecting several entries")
    parser.add_argument("--log-file", help="append errors to this file instead of the console")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the demo."""
    args = parse_args(argv)

    if args.log_file:
        set_log_file(args.log_file)
        init_log_file()

    settings = load_dialog_settings(args.config) if args.config else DialogSettings()
    if args.multi_select:
        settings.multi_select = True

    backend = None
    initial_path = args.path
    if args.fake_fs:
        backend = demo_file_system()
        initial_path = initial_path or "/home/user"

    try:
        app = DialogDemoApp(settings, backend, initial_path)
        app.run()
    except Exception as e:
        log_error(f"Application error: {e}", type(e).__name__, traceback.format_exc())
        raise


if __name__ == "__main__":
    main()
