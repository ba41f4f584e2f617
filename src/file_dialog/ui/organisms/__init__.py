"""
UI Organisms - Complex UI sections.
Composed of multiple molecules working together.
"""

from .menu_list import MenuList
from .modal_frame import ModalFrame

__all__ = [
    "MenuList",
    "ModalFrame",
]
