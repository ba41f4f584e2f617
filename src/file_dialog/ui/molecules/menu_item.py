"""
Menu item molecule - One row of the directory listing.
"""

import pygame
from typing import Optional

from file_dialog.ui.theme import Theme, default_theme
from file_dialog.ui.atoms.button import Button
from file_dialog.ui.atoms.text import Text


class MenuItem:
    """
    Menu item molecule.

    Renders a listing row with selected and highlighted states and an
    optional checkbox for multi-select listings.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)
        self.button = Button(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        selected: bool = False,
        highlighted: bool = False,
        secondary_text: Optional[str] = None,
        show_checkbox: bool = False,
    ) -> pygame.Rect:
        """
        Render a menu item.

        Args:
            screen: Surface to render to
            rect: Item rectangle
            label: Primary text
            selected: Item is selected
            highlighted: Item has keyboard focus or is hovered
            secondary_text: Optional secondary text (right side)
            show_checkbox: Show selection checkbox

        Returns:
            Item rect
        """
        padding = self.theme.padding_sm
        content_left = rect.left + padding
        content_right = rect.right - padding

        if selected:
            pygame.draw.rect(screen, self.theme.surface_selected, rect)
        elif highlighted:
            pygame.draw.rect(screen, self.theme.surface_hover, rect)

        if show_checkbox:
            size = self.theme.checkbox_size
            checkbox_rect = pygame.Rect(content_left, rect.centery - size // 2, size, size)
            self.button.render_checkbox(screen, checkbox_rect, selected)
            content_left = checkbox_rect.right + padding

        if secondary_text:
            secondary_width, _ = self.text.measure(secondary_text, size=self.theme.font_size_xs)
            self.text.render(
                screen,
                secondary_text,
                (content_right, rect.centery - self.theme.font_size_xs // 3),
                color=self.theme.text_secondary,
                size=self.theme.font_size_xs,
                align="right",
            )
            content_right -= secondary_width + padding

        text_color = self.theme.primary if selected or highlighted else self.theme.text_secondary
        self.text.render(
            screen,
            label,
            (content_left, rect.centery - self.theme.font_size_sm // 3),
            color=text_color,
            size=self.theme.font_size_sm,
            max_width=content_right - content_left,
        )

        return rect


# Default instance
menu_item = MenuItem()
