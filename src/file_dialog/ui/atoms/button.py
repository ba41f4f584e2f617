"""
Button atom - Basic button shape rendering.
"""

import pygame
from typing import Optional

from file_dialog.ui.theme import Theme, Color, default_theme


class Button:
    """
    Basic button rendering atom.

    Renders button shapes with configurable colors, borders,
    and shadows.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        border_radius: Optional[int] = None,
        shadow: bool = True,
        border_color: Optional[Color] = None,
        border_width: int = 0,
        hover: bool = False,
    ) -> pygame.Rect:
        """
        Render a button shape.

        Args:
            screen: Surface to render to
            rect: Button rectangle
            color: Fill color (default: primary)
            border_radius: Corner radius (default: theme.radius_md)
            shadow: Draw shadow
            border_color: Border color (optional)
            border_width: Border width
            hover: Apply hover effect

        Returns:
            Button rect
        """
        if color is None:
            color = self.theme.primary
        if border_radius is None:
            border_radius = self.theme.radius_md

        if hover:
            color = self._lighten(color, 0.15)

        if shadow:
            shadow_surface = pygame.Surface(rect.size, pygame.SRCALPHA)
            pygame.draw.rect(
                shadow_surface,
                self.theme.shadow,
                shadow_surface.get_rect(),
                border_radius=border_radius,
            )
            screen.blit(shadow_surface, (rect.x, rect.y + 2))

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

    def render_checkbox(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        checked: bool,
        color: Optional[Color] = None,
    ) -> pygame.Rect:
        """Render a square checkbox, ticked when ``checked``."""
        if color is None:
            color = self.theme.primary

        pygame.draw.rect(screen, self.theme.field, rect, border_radius=self.theme.radius_sm)
        pygame.draw.rect(screen, color, rect, width=2, border_radius=self.theme.radius_sm)

        if checked:
            points = [
                (rect.left + 3, rect.centery),
                (rect.centerx - 1, rect.bottom - 4),
                (rect.right - 3, rect.top + 3),
            ]
            pygame.draw.lines(screen, color, False, points, 2)

        return rect

    def render_close(self, screen: pygame.Surface, rect: pygame.Rect, hover: bool = False) -> pygame.Rect:
        """Render the X button of a window header."""
        color = self.theme.error if hover else self.theme.text_secondary
        inset = rect.width // 4
        pygame.draw.line(
            screen, color, (rect.left + inset, rect.top + inset), (rect.right - inset, rect.bottom - inset), 2
        )
        pygame.draw.line(
            screen, color, (rect.right - inset, rect.top + inset), (rect.left + inset, rect.bottom - inset), 2
        )
        return rect

    def _lighten(self, color: Color, amount: float) -> Color:
        """Lighten a color by a percentage."""
        return tuple(min(255, int(c + (255 - c) * amount)) for c in color)


# Default instance
button = Button()
