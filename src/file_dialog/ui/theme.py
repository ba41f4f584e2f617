"""
Theme and design tokens for the file dialog.
Centralizes all visual constants for consistent styling.
"""

from dataclasses import dataclass
from typing import Tuple, Optional

# Type alias for colors
Color = Tuple[int, int, int]
ColorAlpha = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Theme:
    """
    Design tokens for the dialog UI.

    This class is immutable; pass a different instance to the modal to
    restyle it.
    """

    # ---- Base Colors ---- #
    background: Color = (0, 20, 0)
    surface: Color = (0, 30, 0)
    surface_hover: Color = (0, 40, 0)
    surface_selected: Color = (0, 60, 10)
    field: Color = (0, 12, 0)

    # ---- Accents ---- #
    primary: Color = (0, 255, 65)
    primary_dark: Color = (0, 180, 45)
    secondary: Color = (200, 200, 0)

    # ---- Text Colors ---- #
    text_primary: Color = (0, 255, 65)
    text_secondary: Color = (0, 180, 45)
    text_disabled: Color = (0, 80, 20)
    text_highlight: Color = (0, 20, 0)  # text drawn on primary fills

    # ---- Status Colors ---- #
    error: Color = (255, 50, 30)
    success: Color = (0, 255, 65)

    # ---- Effects ---- #
    shadow: ColorAlpha = (0, 0, 0, 80)
    completion_highlight: Color = (0, 110, 30)

    # ---- Spacing ---- #
    padding_xs: int = 4
    padding_sm: int = 8
    padding_md: int = 12
    padding_lg: int = 16

    # ---- Typography ---- #
    font_size_xs: int = 16
    font_size_sm: int = 20
    font_size_md: int = 24
    font_size_lg: int = 30
    font_path: Optional[str] = None  # pygame default font

    # ---- Border Radius ---- #
    radius_sm: int = 2
    radius_md: int = 4

    # ---- Component Sizes ---- #
    header_height: int = 40
    toolbar_button_width: int = 90
    action_button_width: int = 110
    checkbox_size: int = 16
    resize_grip_size: int = 14

    # ---- Animation Timing ---- #
    cursor_blink_rate: int = 500  # ms

    @property
    def border_radius(self) -> int:
        """Default border radius."""
        return self.radius_md


# Default theme instance
default_theme = Theme()
