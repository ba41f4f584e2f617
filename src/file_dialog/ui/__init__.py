"""
Pygame rendering layer of the file dialog.
Follows Atomic Design methodology: atoms -> molecules -> organisms -> screens.
"""

from .theme import Theme, default_theme

__all__ = ["Theme", "default_theme"]
