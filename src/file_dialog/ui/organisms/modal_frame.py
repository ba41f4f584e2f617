"""
Modal frame organism - Dialog window container.
"""

import pygame
from typing import Tuple, Optional

from file_dialog.ui.theme import Theme, default_theme
from file_dialog.ui.atoms.surface import Surface
from file_dialog.ui.atoms.text import Text
from file_dialog.ui.atoms.button import Button


class ModalFrame:
    """
    Modal frame organism.

    Provides the dialog window: backdrop, header with title and close
    button, and an optional resize grip in the bottom-right corner.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.surface = Surface(theme)
        self.text = Text(theme)
        self.button = Button(theme)

    def place(
        self,
        screen_rect: pygame.Rect,
        size: Tuple[int, int],
        position: Optional[Tuple[int, int]] = None,
        anchor: Optional[str] = None,
        anchor_offset: Tuple[int, int] = (0, 0),
    ) -> pygame.Rect:
        """
        Compute the window rectangle.

        An anchor wins over an explicit position; without either the
        window is centered. The result is clamped to the screen.

        Args:
            screen_rect: Rectangle of the host surface
            size: (width, height) of the window
            position: Top-left corner
            anchor: One of config.ANCHORS
            anchor_offset: Offset applied after anchoring

        Returns:
            Window rect
        """
        width = min(size[0], screen_rect.width)
        height = min(size[1], screen_rect.height)
        rect = pygame.Rect(0, 0, width, height)

        if anchor is not None:
            # "top_left" -> "topleft", "bottom" -> "midbottom", "center" -> "center"
            attribute = anchor.replace("_", "")
            if anchor in ("top", "bottom", "left", "right"):
                attribute = "mid" + anchor
            setattr(rect, attribute, getattr(screen_rect, attribute))
            rect.move_ip(anchor_offset)
        elif position is not None:
            rect.topleft = position
        else:
            rect.center = screen_rect.center

        return rect.clamp(screen_rect)

    def layout(
        self,
        rect: pygame.Rect,
        has_title: bool = True,
        show_close: bool = True,
        show_grip: bool = False,
    ) -> Tuple[pygame.Rect, Optional[pygame.Rect], Optional[pygame.Rect]]:
        """
        Compute the frame geometry without drawing.

        Returns:
            Tuple of (content_rect, close_button_rect or None, grip_rect or None)
        """
        header_height = self.theme.header_height if has_title else 0
        padding = self.theme.padding_md

        content_rect = pygame.Rect(
            rect.left + padding,
            rect.top + header_height + padding,
            rect.width - padding * 2,
            rect.height - header_height - padding * 2,
        )

        close_button_rect = None
        if has_title and show_close:
            close_size = header_height - padding
            close_button_rect = pygame.Rect(0, 0, close_size, close_size)
            close_button_rect.midright = (rect.right - padding // 2, rect.top + header_height // 2)

        grip_rect = None
        if show_grip:
            size = self.theme.resize_grip_size
            grip_rect = pygame.Rect(rect.right - size, rect.bottom - size, size, size)

        return content_rect, close_button_rect, grip_rect

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        title: Optional[str] = None,
        show_close: bool = True,
        show_grip: bool = False,
        with_backdrop: bool = True,
        backdrop_alpha: int = 140,
        close_hover: bool = False,
    ) -> Tuple[pygame.Rect, Optional[pygame.Rect], Optional[pygame.Rect]]:
        """
        Render a modal frame.

        Args:
            screen: Surface to render to
            rect: Window rectangle
            title: Optional title
            show_close: Show close button
            show_grip: Draw the resize grip
            with_backdrop: Draw backdrop
            backdrop_alpha: Backdrop opacity
            close_hover: The pointer is over the close button

        Returns:
            Tuple of (content_rect, close_button_rect or None, grip_rect or None)
        """
        if with_backdrop:
            self.surface.render_modal_backdrop(screen, backdrop_alpha)

        self.surface.render(
            screen,
            rect,
            color=self.theme.surface,
            shadow=True,
            shadow_offset=4,
            border_color=self.theme.primary_dark,
            border_width=1,
        )

        content_rect, close_button_rect, grip_rect = self.layout(
            rect, has_title=bool(title), show_close=show_close, show_grip=show_grip
        )
        header_height = self.theme.header_height if title else 0
        padding = self.theme.padding_md

        if title:
            header_rect = pygame.Rect(rect.left, rect.top, rect.width, header_height)
            pygame.draw.rect(
                screen,
                self.theme.surface_hover,
                header_rect,
                border_top_left_radius=self.theme.border_radius,
                border_top_right_radius=self.theme.border_radius,
            )

            self.text.render(
                screen,
                title,
                (rect.left + padding, header_rect.centery - self.theme.font_size_lg // 3),
                color=self.theme.text_primary,
                size=self.theme.font_size_lg,
                max_width=rect.width - header_height - padding * 2,
            )

            if close_button_rect is not None:
                self.button.render_close(screen, close_button_rect, hover=close_hover)

        if grip_rect is not None:
            for step in range(4, grip_rect.width, 4):
                pygame.draw.line(
                    screen,
                    self.theme.text_disabled,
                    (rect.right - step, rect.bottom - 2),
                    (rect.right - 2, rect.bottom - step),
                )

        return content_rect, close_button_rect, grip_rect


# Default instance
modal_frame = ModalFrame()
