"""
Action button molecule - Button with label.
"""

import pygame
from typing import Optional

from file_dialog.ui.theme import Theme, Color, default_theme
from file_dialog.ui.atoms.button import Button
from file_dialog.ui.atoms.text import Text


class ActionButton:
    """
    Action button molecule.

    Combines a button with a text label, supporting hover and disabled
    states.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.button = Button(theme)
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        color: Optional[Color] = None,
        text_color: Optional[Color] = None,
        hover: bool = False,
        disabled: bool = False,
    ) -> pygame.Rect:
        """
        Render an action button.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            label: Button label
            color: Background color
            text_color: Text color
            hover: Hover state
            disabled: Disabled state

        Returns:
            Button rect
        """
        if disabled:
            color = self.theme.surface
            text_color = self.theme.text_disabled
        else:
            if color is None:
                color = self.theme.primary_dark
            if text_color is None:
                text_color = self.theme.text_highlight

        self.button.render(
            screen,
            rect,
            color=color,
            hover=hover and not disabled,
            shadow=not disabled,
            border_color=self.theme.text_disabled if disabled else None,
            border_width=1 if disabled else 0,
        )

        self.text.render(
            screen,
            label,
            (rect.centerx, rect.centery - self.theme.font_size_sm // 3),
            color=text_color,
            size=self.theme.font_size_sm,
            max_width=rect.width - self.theme.padding_sm,
            align="center",
        )

        return rect

    def render_secondary(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        hover: bool = False,
        disabled: bool = False,
    ) -> pygame.Rect:
        """Render a secondary style button."""
        return self.render(
            screen,
            rect,
            label,
            color=self.theme.surface_hover,
            text_color=self.theme.text_primary,
            hover=hover,
            disabled=disabled,
        )

    def render_success(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        label: str,
        hover: bool = False,
        disabled: bool = False,
    ) -> pygame.Rect:
        """Render the confirming button of a dialog."""
        return self.render(
            screen, rect, label, color=self.theme.success, hover=hover, disabled=disabled
        )


# Default instance
action_button = ActionButton()
