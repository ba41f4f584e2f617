"""
Text field molecule - Single-line editable text with completion highlight.
"""

import pygame
from typing import Optional

from file_dialog.state import TextSelection
from file_dialog.ui.theme import Theme, default_theme
from file_dialog.ui.atoms.text import Text


class TextField:
    """
    Text field molecule.

    Draws a field box, its text, a highlighted span (the completion
    suggestion) and a blinking cursor at the end when focused. The text is
    clipped from the left so the end stays visible.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.text = Text(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        value: str,
        focused: bool = False,
        selection: Optional[TextSelection] = None,
        time_ms: int = 0,
    ) -> pygame.Rect:
        """
        Render a text field.

        Args:
            screen: Surface to render to
            rect: Field rectangle
            value: Current text
            focused: Field has keyboard focus
            selection: Span to highlight, if any
            time_ms: Host clock, drives the cursor blink

        Returns:
            Field rect
        """
        border = self.theme.primary if focused else self.theme.text_disabled
        pygame.draw.rect(screen, self.theme.field, rect, border_radius=self.theme.radius_sm)
        pygame.draw.rect(screen, border, rect, width=1, border_radius=self.theme.radius_sm)

        size = self.theme.font_size_sm
        font = self.text.get_font(size)
        inner = rect.inflate(-self.theme.padding_sm * 2, 0)
        text_y = rect.centery - font.get_height() // 2

        # Keep the end of the text visible
        full_width = font.size(value)[0]
        offset = max(0, full_width - inner.width + 2)

        previous_clip = screen.get_clip()
        screen.set_clip(inner)

        if selection is not None and not selection.is_empty:
            start_x = font.size(value[: selection.start])[0] - offset
            end_x = font.size(value[: selection.end])[0] - offset
            highlight = pygame.Rect(
                inner.left + start_x, text_y, end_x - start_x, font.get_height()
            )
            pygame.draw.rect(screen, self.theme.completion_highlight, highlight)

        surface = font.render(value, True, self.theme.text_primary)
        screen.blit(surface, (inner.left - offset, text_y))

        if focused and (time_ms // self.theme.cursor_blink_rate) % 2 == 0:
            cursor_x = inner.left + full_width - offset + 1
            pygame.draw.line(
                screen,
                self.theme.primary,
                (cursor_x, text_y),
                (cursor_x, text_y + font.get_height()),
                2,
            )

        screen.set_clip(previous_clip)
        return rect


# Default instance
text_field = TextField()
