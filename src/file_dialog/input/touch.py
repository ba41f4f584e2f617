"""
Mouse and touch input handling for the file dialog.
Tracks drags and double-clicks.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from file_dialog.constants import DOUBLE_CLICK_THRESHOLD, SCROLL_THRESHOLD


@dataclass
class TouchState:
    """State for tracking touch/mouse input."""
    start_pos: Optional[Tuple[int, int]] = None
    last_pos: Optional[Tuple[int, int]] = None
    is_dragging: bool = False
    last_click_time: int = 0
    last_clicked_item: int = -1


class TouchHandler:
    """
    Handles pointer input for the dialog.

    Times come from the host frame rather than the pygame clock so that a
    scripted host can drive double-clicks deterministically.
    """

    def __init__(self):
        self._state = TouchState()

    @property
    def is_dragging(self) -> bool:
        """Check if the pointer moved far enough to count as a drag."""
        return self._state.is_dragging

    def press(self, pos: Tuple[int, int]) -> None:
        """Record a button or finger press."""
        self._state.start_pos = pos
        self._state.last_pos = pos
        self._state.is_dragging = False

    def move(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        """
        Record pointer motion while pressed.

        Returns:
            (dx, dy) since the previous position, (0, 0) when not pressed
        """
        if not self._state.start_pos or not self._state.last_pos:
            return (0, 0)

        dx_total = pos[0] - self._state.start_pos[0]
        dy_total = pos[1] - self._state.start_pos[1]
        if (dx_total * dx_total + dy_total * dy_total) ** 0.5 > SCROLL_THRESHOLD:
            self._state.is_dragging = True

        delta = (pos[0] - self._state.last_pos[0], pos[1] - self._state.last_pos[1])
        self._state.last_pos = pos
        return delta

    def release(self) -> bool:
        """
        Record a release.

        Returns:
            True if the pointer was dragged while pressed
        """
        was_dragging = self._state.is_dragging
        self._state.start_pos = None
        self._state.last_pos = None
        self._state.is_dragging = False
        return was_dragging

    def check_double_click(self, item_index: int, time_ms: int) -> bool:
        """
        Check if this click constitutes a double-click on the same item.

        Args:
            item_index: Index of clicked item
            time_ms: Time of the click

        Returns:
            True if this is a double-click
        """
        is_double = (
            item_index == self._state.last_clicked_item and
            time_ms - self._state.last_click_time < DOUBLE_CLICK_THRESHOLD
        )

        if is_double:
            self.reset_double_click()
        else:
            self._state.last_clicked_item = item_index
            self._state.last_click_time = time_ms

        return is_double

    def reset_double_click(self) -> None:
        """Reset double-click tracking."""
        self._state.last_clicked_item = -1
        self._state.last_click_time = 0

    def reset(self) -> None:
        """Reset all pointer state."""
        self._state = TouchState()
