"""
Menu list organism - Scrollable list of menu items.
"""

import pygame
from typing import Callable, List, Optional, Set, Tuple, Any

from file_dialog.ui.theme import Theme, default_theme
from file_dialog.ui.molecules.menu_item import MenuItem


class MenuList:
    """
    Menu list organism.

    Displays a scrollable window over a list of items with selection and
    highlight support. Scrolling is owned by the caller.
    """

    def __init__(self, theme: Theme = default_theme):
        self.theme = theme
        self.menu_item = MenuItem(theme)

    def render(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        items: List[Any],
        scroll_offset: int,
        highlighted: int,
        selected: Set[int],
        item_height: int,
        get_label: Callable[[Any], str],
        get_secondary: Optional[Callable[[Any], str]] = None,
        show_checkbox: bool = False,
    ) -> List[Tuple[int, pygame.Rect]]:
        """
        Render a menu list.

        Args:
            screen: Surface to render to
            rect: List area rectangle
            items: List of items
            scroll_offset: Index of the first visible item
            highlighted: Highlighted index (-1 for none)
            selected: Set of selected indices
            item_height: Height of each item
            get_label: Function to get label from item
            get_secondary: Function to get secondary text
            show_checkbox: Show selection checkboxes

        Returns:
            List of (item index, item rect) for the visible items
        """
        pygame.draw.rect(screen, self.theme.field, rect)
        if not items:
            return []

        visible_count = self.visible_count(rect, item_height)
        scroll_offset = self.clamp_scroll(scroll_offset, len(items), visible_count)

        item_rects = []
        y = rect.top
        for i in range(scroll_offset, min(scroll_offset + visible_count, len(items))):
            item = items[i]
            item_rect = pygame.Rect(rect.left, y, rect.width - 6, item_height)

            self.menu_item.render(
                screen,
                item_rect,
                get_label(item),
                selected=(i in selected),
                highlighted=(i == highlighted),
                secondary_text=get_secondary(item) if get_secondary else None,
                show_checkbox=show_checkbox,
            )

            item_rects.append((i, item_rect))
            y += item_height

        self._draw_scrollbar(screen, rect, scroll_offset, len(items), visible_count)

        return item_rects

    @staticmethod
    def visible_count(rect: pygame.Rect, item_height: int) -> int:
        return max(1, rect.height // item_height)

    @staticmethod
    def clamp_scroll(scroll_offset: int, total_items: int, visible_count: int) -> int:
        """Clamp a scroll offset so the last page stays full."""
        return max(0, min(scroll_offset, total_items - visible_count))

    @staticmethod
    def scroll_to(highlighted: int, scroll_offset: int, visible_count: int) -> int:
        """Smallest change of ``scroll_offset`` that shows ``highlighted``."""
        if highlighted < scroll_offset:
            return highlighted
        if highlighted >= scroll_offset + visible_count:
            return highlighted - visible_count + 1
        return scroll_offset

    def _draw_scrollbar(
        self,
        screen: pygame.Surface,
        rect: pygame.Rect,
        scroll_offset: int,
        total_items: int,
        visible_count: int,
    ) -> None:
        """Draw a scrollbar if the list is scrollable."""
        if total_items <= visible_count:
            return

        scrollbar_height = max(8, rect.height * visible_count // total_items)
        scrollbar_y = rect.top + (rect.height - scrollbar_height) * scroll_offset // (
            total_items - visible_count
        )
        scrollbar_rect = pygame.Rect(rect.right - 4, scrollbar_y, 3, scrollbar_height)
        pygame.draw.rect(
            screen, self.theme.primary_dark, scrollbar_rect, border_radius=2
        )


# Default instance
menu_list = MenuList()
