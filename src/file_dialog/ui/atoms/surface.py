"""
Surface atom - Panel and window surface rendering.
"""

import pygame
from typing import Optional

from file_dialog.ui.theme import Theme, Color, default_theme


class Surface:
    """
    Surface rendering atom.

    Renders panels with optional shadows, borders and selection states.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        border_radius: Optional[int] = None,
        shadow: bool = False,
        shadow_offset: int = 2,
        border_color: Optional[Color] = None,
        border_width: int = 0,
        selected: bool = False,
        highlighted: bool = False,
    ) -> pygame.Rect:
        """
        Render a panel.

        Args:
            screen: Surface to render to
            rect: Panel rectangle
            color: Fill color (default depends on state)
            border_radius: Corner radius
            shadow: Draw drop shadow
            shadow_offset: Shadow offset in pixels
            border_color: Border color
            border_width: Border width
            selected: Apply selected state
            highlighted: Apply highlighted/hover state

        Returns:
            Panel rect
        """
        if color is None:
            if selected:
                color = self.theme.surface_selected
            elif highlighted:
                color = self.theme.surface_hover
            else:
                color = self.theme.surface

        if border_radius is None:
            border_radius = self.theme.border_radius

        if shadow:
            shadow_surface = pygame.Surface(rect.size, pygame.SRCALPHA)
            pygame.draw.rect(
                shadow_surface,
                self.theme.shadow,
                shadow_surface.get_rect(),
                border_radius=border_radius,
            )
            screen.blit(shadow_surface, (rect.x, rect.y + shadow_offset))

        pygame.draw.rect(screen, color, rect, border_radius=border_radius)

        if border_color and border_width > 0:
            pygame.draw.rect(
                screen,
                border_color,
                rect,
                width=border_width,
                border_radius=border_radius,
            )

        return rect

    def render_modal_backdrop(self, screen: pygame.Surface, alpha: int = 128) -> None:
        """
        Render a semi-transparent backdrop over the whole screen.

        Args:
            screen: Surface to render to
            alpha: Backdrop opacity (0-255)
        """
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((*self.theme.background, alpha))
        screen.blit(overlay, (0, 0))


# Default instance
surface = Surface()
