"""
Text atom - Basic text rendering component.
"""

import pygame
from typing import Dict, List, Tuple, Optional

from file_dialog.ui.theme import Theme, Color, default_theme


class Text:
    """
    Basic text rendering atom.

    Handles text rendering with truncation, wrapping and alignment.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self._font_cache: Dict[int, pygame.font.Font] = {}

    def get_font(self, size: int) -> pygame.font.Font:
        """Get or create a font of the given size."""
        if size not in self._font_cache:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_cache[size] = pygame.font.Font(self.theme.font_path, size)
        return self._font_cache[size]

    def render(
        self,
        screen: pygame.Surface,
        text: str,
        position: Tuple[int, int],
        color: Optional[Color] = None,
        size: Optional[int] = None,
        max_width: Optional[int] = None,
        align: str = "left",  # "left", "center", "right"
        keep_end: bool = False,
        antialias: bool = True,
    ) -> pygame.Rect:
        """
        Render text to the screen.

        Args:
            screen: Surface to render to
            text: Text to render
            position: (x, y) position
            color: Text color (default: text_primary)
            size: Font size (default: font_size_md)
            max_width: Maximum width (truncate with ellipsis if exceeded)
            align: Text alignment ("left", "center", "right")
            keep_end: Truncate at the start instead of the end (for paths)
            antialias: Use antialiasing

        Returns:
            Rect of rendered text
        """
        if color is None:
            color = self.theme.text_primary
        if size is None:
            size = self.theme.font_size_md

        font = self.get_font(size)

        if max_width:
            text = self._truncate(text, font, max_width, keep_end)

        surface = font.render(text, antialias, color)
        rect = surface.get_rect()

        x, y = position
        if align == "center":
            rect.centerx = x
            rect.top = y
        elif align == "right":
            rect.right = x
            rect.top = y
        else:
            rect.topleft = position

        screen.blit(surface, rect)
        return rect

    def render_wrapped(
        self,
        screen: pygame.Surface,
        text: str,
        rect: pygame.Rect,
        color: Optional[Color] = None,
        size: Optional[int] = None,
        line_spacing: int = 4,
    ) -> pygame.Rect:
        """
        Render text word-wrapped to the width of ``rect``.

        Lines that do not fit vertically are dropped.

        Returns:
            Bounding rect of all rendered text
        """
        if size is None:
            size = self.theme.font_size_sm

        font = self.get_font(size)
        y = rect.top
        total_rect = pygame.Rect(rect.left, rect.top, 0, 0)

        for line in self.wrap(text, font, rect.width):
            if y + font.get_height() > rect.bottom:
                break
            line_rect = self.render(screen, line, (rect.left, y), color=color, size=size)
            total_rect = total_rect.union(line_rect)
            y += line_rect.height + line_spacing

        return total_rect

    def measure(self, text: str, size: Optional[int] = None) -> Tuple[int, int]:
        """
        Measure text dimensions without rendering.

        Args:
            text: Text to measure
            size: Font size

        Returns:
            (width, height) tuple
        """
        if size is None:
            size = self.theme.font_size_md

        return self.get_font(size).size(text)

    @staticmethod
    def wrap(text: str, font: pygame.font.Font, max_width: int) -> List[str]:
        """Split ``text`` into lines no wider than ``max_width`` where possible."""
        lines: List[str] = []
        for paragraph in text.split("\n"):
            current = ""
            for word in paragraph.split(" "):
                candidate = f"{current} {word}" if current else word
                if current and font.size(candidate)[0] > max_width:
                    lines.append(current)
                    current = word
                else:
                    current = candidate
            lines.append(current)
        return lines

    def _truncate(
        self,
        text: str,
        font: pygame.font.Font,
        max_width: int,
        keep_end: bool = False,
        ellipsis: str = "...",
    ) -> str:
        """
        Truncate text to fit within max_width.

        Args:
            text: Text to truncate
            font: Font to use for measurement
            max_width: Maximum width in pixels
            keep_end: Drop characters from the start instead of the end
            ellipsis: Marker for the dropped part

        Returns:
            Truncated text
        """
        if font.size(text)[0] <= max_width:
            return text

        available_width = max_width - font.size(ellipsis)[0]

        # Binary search for the longest part that fits
        low, high = 0, len(text)
        while low < high:
            mid = (low + high + 1) // 2
            part = text[len(text) - mid:] if keep_end else text[:mid]
            if font.size(part)[0] <= available_width:
                low = mid
            else:
                high = mid - 1

        if keep_end:
            return ellipsis + text[len(text) - low:]
        return text[:low] + ellipsis


# Default instance
text = Text()
