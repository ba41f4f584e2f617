"""
File dialog modal - Pygame rendering layer of FileDialog.
"""

import pygame
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from file_dialog.commands import (
    Cancel,
    Command,
    CreateDirectory,
    MultiSelect,
    Refresh,
    Select,
    SetShowHidden,
    UpDirectory,
)
from file_dialog.constants import (
    BUTTON_HEIGHT,
    FIELD_HEIGHT,
    LIST_ITEM_HEIGHT,
    MIN_DIALOG_SIZE,
)
from file_dialog.frame import DialogRenderer, FrameContext
from file_dialog.input.keyboard import apply_text_event, click_modifier
from file_dialog.input.touch import TouchHandler
from file_dialog.models import Entry
from file_dialog.services.selection import ClickModifier
from file_dialog.state import DialogKind
from file_dialog.ui.theme import Theme, default_theme
from file_dialog.ui.organisms.modal_frame import ModalFrame
from file_dialog.ui.organisms.menu_list import MenuList
from file_dialog.ui.molecules.action_button import ActionButton
from file_dialog.ui.molecules.text_field import TextField
from file_dialog.ui.atoms.button import Button
from file_dialog.ui.atoms.text import Text

FOCUS_PATH = "path"
FOCUS_LIST = "list"
FOCUS_FILENAME = "filename"
FOCUS_ORDER = (FOCUS_PATH, FOCUS_LIST, FOCUS_FILENAME)


@dataclass
class ModalLayout:
    """Rectangles of one frame of the modal."""

    window: pygame.Rect
    content: pygame.Rect
    close: Optional[pygame.Rect]
    grip: Optional[pygame.Rect]
    up: pygame.Rect
    refresh: pygame.Rect
    path_field: pygame.Rect
    listing: pygame.Rect
    filename_label: pygame.Rect
    filename_field: pygame.Rect
    new_folder: Optional[pygame.Rect]
    rename: Optional[pygame.Rect]
    show_hidden: Optional[pygame.Rect]
    confirm: pygame.Rect
    cancel: pygame.Rect


class FileDialogModal(DialogRenderer):
    """
    File dialog modal.

    Draws a FileDialog and turns this frame's pygame events into at most
    one command. Focus, scrolling, window size and double-click tracking
    are presentation state and live here, not in the dialog.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.modal_frame = ModalFrame(theme)
        self.menu_list = MenuList(theme)
        self.action_button = ActionButton(theme)
        self.text_field = TextField(theme)
        self.button = Button(theme)
        self.text = Text(theme)
        self.touch = TouchHandler()

        self.focus: Optional[str] = None
        self.highlighted = -1
        self.scroll_offset = 0
        self.size: Optional[Tuple[int, int]] = None
        self.resizing = False
        self._directory: Optional[Path] = None

    def render(self, dialog, frame: FrameContext) -> Optional[Command]:
        """
        Render the dialog for one frame.

        Args:
            dialog: FileDialog being shown
            frame: Host input for this frame

        Returns:
            Command collected this frame, or None
        """
        screen = frame.screen
        if self.focus is None:
            self.focus = FOCUS_FILENAME if dialog.dialog_kind is DialogKind.SAVE_FILE else FOCUS_LIST
        if dialog.directory != self._directory:
            self._directory = dialog.directory
            self.highlighted = -1
            self.scroll_offset = 0
            self.touch.reset_double_click()

        layout = self._layout(screen, dialog)

        command = None
        for event in frame.events:
            command = self._handle_event(dialog, event, layout, frame.time_ms)
            if command is not None:
                break

        self._draw(screen, dialog, layout, frame.time_ms)
        return command

    # ---- Layout ---- #

    def _layout(self, screen: pygame.Surface, dialog) -> ModalLayout:
        settings = dialog.settings
        labels = settings.labels
        padding = self.theme.padding_sm

        size = self.size or settings.default_size
        window = self.modal_frame.place(
            screen.get_rect(),
            size,
            position=settings.position,
            anchor=settings.anchor,
            anchor_offset=settings.anchor_offset,
        )
        content, close, grip = self.modal_frame.layout(
            window, has_title=True, show_close=True, show_grip=settings.resizable
        )

        # Toolbar: up, refresh, path field
        button_width = self.theme.toolbar_button_width
        up = pygame.Rect(content.left, content.top, button_width, FIELD_HEIGHT)
        refresh = pygame.Rect(up.right + padding, content.top, button_width, FIELD_HEIGHT)
        path_field = pygame.Rect(
            refresh.right + padding,
            content.top,
            content.right - refresh.right - padding,
            FIELD_HEIGHT,
        )

        # Bottom rows: filename, then buttons
        buttons_y = content.bottom - BUTTON_HEIGHT
        filename_y = buttons_y - padding - FIELD_HEIGHT
        label_width = self.text.measure(labels.file_label, self.theme.font_size_sm)[0] + padding
        filename_label = pygame.Rect(content.left, filename_y, label_width, FIELD_HEIGHT)
        filename_field = pygame.Rect(
            filename_label.right, filename_y, content.right - filename_label.right, FIELD_HEIGHT
        )

        list_top = up.bottom + padding
        list_height = min(settings.scrollarea_max_height, filename_y - padding - list_top)
        listing = pygame.Rect(
            content.left, list_top, content.width, max(LIST_ITEM_HEIGHT, list_height)
        )

        action_width = self.theme.action_button_width
        cancel = pygame.Rect(content.right - action_width, buttons_y, action_width, BUTTON_HEIGHT)
        confirm = pygame.Rect(cancel.left - padding - action_width, buttons_y, action_width, BUTTON_HEIGHT)

        x = content.left
        new_folder = rename = show_hidden = None
        if settings.show_new_folder:
            new_folder = pygame.Rect(x, buttons_y, action_width, BUTTON_HEIGHT)
            x = new_folder.right + padding
        if settings.show_rename:
            rename = pygame.Rect(x, buttons_y, action_width, BUTTON_HEIGHT)
            x = rename.right + padding
        if dialog.platform.hides_dotfiles:
            toggle_width = (
                self.theme.checkbox_size
                + padding
                + self.text.measure(labels.show_hidden, self.theme.font_size_xs)[0]
            )
            show_hidden = pygame.Rect(x, buttons_y, toggle_width, BUTTON_HEIGHT)

        return ModalLayout(
            window=window,
            content=content,
            close=close,
            grip=grip,
            up=up,
            refresh=refresh,
            path_field=path_field,
            listing=listing,
            filename_label=filename_label,
            filename_field=filename_field,
            new_folder=new_folder,
            rename=rename,
            show_hidden=show_hidden,
            confirm=confirm,
            cancel=cancel,
        )

    def _item_index_at(self, dialog, layout: ModalLayout, pos: Tuple[int, int]) -> int:
        """Listing index under ``pos``, or -1."""
        if dialog.listing_error is not None or not layout.listing.collidepoint(pos):
            return -1
        index = self._scroll(dialog, layout) + (pos[1] - layout.listing.top) // LIST_ITEM_HEIGHT
        return index if index < len(dialog.listing) else -1

    def _scroll(self, dialog, layout: ModalLayout) -> int:
        visible = MenuList.visible_count(layout.listing, LIST_ITEM_HEIGHT)
        self.scroll_offset = MenuList.clamp_scroll(self.scroll_offset, len(dialog.listing), visible)
        return self.scroll_offset

    # ---- Event handling ---- #

    def _handle_event(
        self, dialog, event: pygame.event.Event, layout: ModalLayout, time_ms: int
    ) -> Optional[Command]:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._handle_press(dialog, event.pos, layout, time_ms)

        if event.type == pygame.MOUSEMOTION:
            dx, dy = self.touch.move(event.pos)
            if self.resizing:
                width, height = self.size or dialog.settings.default_size
                self.size = (
                    max(MIN_DIALOG_SIZE[0], width + dx),
                    max(MIN_DIALOG_SIZE[1], height + dy),
                )
            return None

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.touch.release()
            self.resizing = False
            return None

        if event.type == pygame.MOUSEWHEEL:
            if layout.listing.collidepoint(pygame.mouse.get_pos()):
                self.scroll_offset = max(0, self.scroll_offset - event.y)
            return None

        if event.type in (pygame.KEYDOWN, pygame.TEXTINPUT):
            return self._handle_key(dialog, event, layout)

        return None

    def _handle_press(
        self, dialog, pos: Tuple[int, int], layout: ModalLayout, time_ms: int
    ) -> Optional[Command]:
        self.touch.press(pos)

        if layout.close is not None and layout.close.collidepoint(pos):
            return Cancel()

        if layout.grip is not None and layout.grip.collidepoint(pos):
            self.resizing = True
            return None

        if layout.up.collidepoint(pos):
            return UpDirectory() if dialog.can_go_up() else None

        if layout.refresh.collidepoint(pos):
            return Refresh()

        if layout.path_field.collidepoint(pos):
            self.focus = FOCUS_PATH
            return None

        if layout.filename_field.collidepoint(pos):
            self.focus = FOCUS_FILENAME
            return None

        index = self._item_index_at(dialog, layout, pos)
        if index >= 0:
            self.focus = FOCUS_LIST
            self.highlighted = index
            return self._click_entry(dialog, index, time_ms)

        if layout.new_folder is not None and layout.new_folder.collidepoint(pos):
            return CreateDirectory()

        if layout.rename is not None and layout.rename.collidepoint(pos):
            return dialog.rename_command()

        if layout.show_hidden is not None and layout.show_hidden.collidepoint(pos):
            return SetShowHidden(not dialog.settings.show_hidden)

        if layout.confirm.collidepoint(pos):
            return dialog.confirm_command()

        if layout.cancel.collidepoint(pos):
            return Cancel()

        return None

    def _click_entry(self, dialog, index: int, time_ms: int) -> Command:
        entry = dialog.listing[index]
        if self.touch.check_double_click(index, time_ms):
            return dialog.double_click_command(entry)
        if dialog.is_multi_select:
            return MultiSelect(index, click_modifier(pygame.key.get_mods()))
        return Select(entry)

    def _handle_key(
        self, dialog, event: pygame.event.Event, layout: ModalLayout
    ) -> Optional[Command]:
        if self.focus == FOCUS_PATH:
            edit = apply_text_event(dialog.edit.path_edit, event, dialog.edit.path_selection)
            if edit is None:
                return None
            if edit.changed:
                dialog.edit_path_text(edit.text, deletion=edit.deletion)
            if edit.accepted:
                dialog.accept_path_completion()
            if edit.submitted:
                return dialog.path_enter_command()
            return None

        if event.type == pygame.KEYDOWN and event.key == pygame.K_TAB:
            position = FOCUS_ORDER.index(self.focus)
            self.focus = FOCUS_ORDER[(position + 1) % len(FOCUS_ORDER)]
            return None

        if self.focus == FOCUS_FILENAME:
            edit = apply_text_event(dialog.edit.filename_edit, event)
            if edit is None:
                return None
            if edit.changed:
                dialog.edit_filename_text(edit.text)
            if edit.submitted:
                return dialog.filename_enter_command()
            return None

        if event.type != pygame.KEYDOWN:
            return None
        return self._handle_list_key(dialog, event.key, layout)

    def _handle_list_key(self, dialog, key: int, layout: ModalLayout) -> Optional[Command]:
        count = len(dialog.listing)

        if key in (pygame.K_UP, pygame.K_DOWN) and count:
            step = -1 if key == pygame.K_UP else 1
            self.highlighted = max(0, min(count - 1, self.highlighted + step))
            visible = MenuList.visible_count(layout.listing, LIST_ITEM_HEIGHT)
            self.scroll_offset = MenuList.scroll_to(self.highlighted, self.scroll_offset, visible)
            if dialog.is_multi_select:
                return None
            return Select(dialog.listing[self.highlighted])

        if key == pygame.K_SPACE and dialog.is_multi_select and 0 <= self.highlighted < count:
            return MultiSelect(self.highlighted, ClickModifier.TOGGLE)

        if key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            if 0 <= self.highlighted < count and not dialog.is_multi_select:
                return dialog.double_click_command(dialog.listing[self.highlighted])
            return dialog.confirm_command()

        if key == pygame.K_BACKSPACE:
            return UpDirectory() if dialog.can_go_up() else None

        if key == pygame.K_F5:
            return Refresh()

        return None

    # ---- Drawing ---- #

    def _draw(self, screen: pygame.Surface, dialog, layout: ModalLayout, time_ms: int) -> None:
        settings = dialog.settings
        labels = settings.labels
        mouse = pygame.mouse.get_pos()

        self.modal_frame.render(
            screen,
            layout.window,
            title=dialog.title(),
            show_close=True,
            show_grip=settings.resizable,
            with_backdrop=settings.keep_on_top,
            close_hover=layout.close is not None and layout.close.collidepoint(mouse),
        )

        self.action_button.render_secondary(
            screen,
            layout.up,
            labels.parent_folder,
            hover=layout.up.collidepoint(mouse),
            disabled=not dialog.can_go_up(),
        )
        self.action_button.render_secondary(
            screen, layout.refresh, labels.refresh, hover=layout.refresh.collidepoint(mouse)
        )
        self.text_field.render(
            screen,
            layout.path_field,
            dialog.edit.path_edit,
            focused=self.focus == FOCUS_PATH,
            selection=dialog.edit.path_selection,
            time_ms=time_ms,
        )

        self._draw_listing(screen, dialog, layout, mouse)

        self.text.render(
            screen,
            labels.file_label,
            (layout.filename_label.left, layout.filename_label.centery - self.theme.font_size_sm // 3),
            color=self.theme.text_secondary,
            size=self.theme.font_size_sm,
        )
        self.text_field.render(
            screen,
            layout.filename_field,
            dialog.edit.filename_edit,
            focused=self.focus == FOCUS_FILENAME,
            time_ms=time_ms,
        )

        if layout.new_folder is not None:
            self.action_button.render_secondary(
                screen, layout.new_folder, labels.new_folder, hover=layout.new_folder.collidepoint(mouse)
            )
        if layout.rename is not None:
            self.action_button.render_secondary(
                screen,
                layout.rename,
                labels.rename,
                hover=layout.rename.collidepoint(mouse),
                disabled=not dialog.can_rename(),
            )
        if layout.show_hidden is not None:
            self._draw_show_hidden(screen, layout.show_hidden, labels.show_hidden, settings.show_hidden)

        self.action_button.render_success(
            screen,
            layout.confirm,
            dialog.confirm_label(),
            hover=layout.confirm.collidepoint(mouse),
            disabled=dialog.confirm_command() is None,
        )
        self.action_button.render_secondary(
            screen, layout.cancel, labels.cancel, hover=layout.cancel.collidepoint(mouse)
        )

        self._draw_hint(screen, layout, labels, mouse)

    def _draw_listing(self, screen: pygame.Surface, dialog, layout: ModalLayout, mouse) -> None:
        if dialog.listing_error is not None:
            pygame.draw.rect(screen, self.theme.field, layout.listing)
            self.text.render_wrapped(
                screen,
                str(dialog.listing_error),
                layout.listing.inflate(-self.theme.padding_md * 2, -self.theme.padding_md * 2),
                color=self.theme.error,
            )
            return

        hovered = self._item_index_at(dialog, layout, mouse)
        selected = {
            i for i, entry in enumerate(dialog.listing) if dialog.is_entry_selected(entry)
        }
        self.menu_list.render(
            screen,
            layout.listing,
            dialog.listing,
            self._scroll(dialog, layout),
            self.highlighted if self.focus == FOCUS_LIST else hovered,
            selected,
            LIST_ITEM_HEIGHT,
            get_label=lambda entry: self._get_item_label(dialog, entry),
            show_checkbox=dialog.is_multi_select,
        )

    def _draw_show_hidden(self, screen: pygame.Surface, rect: pygame.Rect, label: str, checked: bool) -> None:
        size = self.theme.checkbox_size
        box = pygame.Rect(rect.left, rect.centery - size // 2, size, size)
        self.button.render_checkbox(screen, box, checked)
        self.text.render(
            screen,
            label,
            (box.right + self.theme.padding_sm, rect.centery - self.theme.font_size_xs // 3),
            color=self.theme.text_secondary,
            size=self.theme.font_size_xs,
        )

    def _draw_hint(self, screen: pygame.Surface, layout: ModalLayout, labels, mouse) -> None:
        """Tooltip for the toolbar buttons."""
        if layout.up.collidepoint(mouse):
            hint = labels.parent_folder_hint
        elif layout.refresh.collidepoint(mouse):
            hint = labels.refresh_hint
        else:
            return

        width, height = self.text.measure(hint, self.theme.font_size_xs)
        rect = pygame.Rect(mouse[0] + 12, mouse[1] + 16, width + 8, height + 4)
        pygame.draw.rect(screen, self.theme.surface_hover, rect, border_radius=self.theme.radius_sm)
        self.text.render(
            screen, hint, (rect.left + 4, rect.top + 2), color=self.theme.text_primary, size=self.theme.font_size_xs
        )

    def _get_item_label(self, dialog, entry: Entry) -> str:
        """Get display label for an entry."""
        labels = dialog.settings.labels
        icon = labels.folder_icon if entry.is_dir() else labels.file_icon
        return f"{icon}{entry.display_name}"
