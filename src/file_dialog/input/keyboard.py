"""
Keyboard handling for the dialog's text fields and listing clicks.
"""

import pygame
from dataclasses import dataclass
from typing import Optional

from file_dialog.services.selection import ClickModifier
from file_dialog.state import TextSelection


@dataclass
class TextEdit:
    """
    Result of one key event on a text field.

    Attributes:
        text: Field text after the event
        changed: The text changed
        deletion: The change removed characters
        submitted: Enter was pressed
        accepted: Tab was pressed (keep the completion suggestion)
    """

    text: str
    changed: bool = False
    deletion: bool = False
    submitted: bool = False
    accepted: bool = False


def click_modifier(mods: int) -> ClickModifier:
    """Map pygame key modifiers to a listing click modifier."""
    if mods & (pygame.KMOD_CTRL | pygame.KMOD_META):
        return ClickModifier.TOGGLE
    if mods & pygame.KMOD_SHIFT:
        return ClickModifier.RANGE
    return ClickModifier.PLAIN


def _remove_span(text: str, selection: Optional[TextSelection]) -> str:
    if selection is None or selection.is_empty:
        return text
    return text[: selection.start] + text[selection.end :]


def apply_text_event(
    text: str,
    event: pygame.event.Event,
    selection: Optional[TextSelection] = None,
) -> Optional[TextEdit]:
    """
    Apply a key event to a single-line field edited at its end.

    A highlighted ``selection`` is replaced by typed text and removed by
    backspace.

    Args:
        text: Current field text
        event: TEXTINPUT or KEYDOWN event
        selection: Highlighted span of ``text``

    Returns:
        TextEdit, or None when the event does not concern text fields
    """
    if event.type == pygame.TEXTINPUT:
        return TextEdit(_remove_span(text, selection) + event.text, changed=True)

    if event.type != pygame.KEYDOWN:
        return None

    if event.key == pygame.K_BACKSPACE:
        if selection is not None and not selection.is_empty:
            new_text = _remove_span(text, selection)
        else:
            new_text = text[:-1]
        return TextEdit(new_text, changed=new_text != text, deletion=True)

    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        return TextEdit(text, submitted=True)

    if event.key == pygame.K_TAB:
        return TextEdit(text, accepted=True)

    return None
