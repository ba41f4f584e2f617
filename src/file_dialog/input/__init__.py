"""
Input handling for the file dialog.
Turns pygame events into frame input, text edits and click gestures.
"""

from .events import build_frame_context
from .keyboard import TextEdit, apply_text_event, click_modifier
from .touch import TouchHandler

__all__ = [
    "build_frame_context",
    "TextEdit",
    "apply_text_event",
    "click_modifier",
    "TouchHandler",
]
