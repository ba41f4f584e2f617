"""
UI Molecules - Combinations of atoms.
Simple groups of atoms functioning together.
"""

from .menu_item import MenuItem
from .action_button import ActionButton
from .text_field import TextField

__all__ = [
    "MenuItem",
    "ActionButton",
    "TextField",
]
