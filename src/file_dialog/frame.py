"""
Per-frame host input handed to ``FileDialog.show``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class FrameContext:
    """
    Input for one rendered frame.

    Attributes:
        screen: Surface the rendering layer draws on (None when headless)
        events: Events received by the host this frame
        escape_pressed: The cancel key was pressed this frame
        window_closed: The host closed the window hosting the dialog
        time_ms: Host clock in milliseconds, used for double-click detection
    """

    screen: Optional[Any] = None
    events: List[Any] = field(default_factory=list)
    escape_pressed: bool = False
    window_closed: bool = False
    time_ms: int = 0


class DialogRenderer(ABC):
    """
    Rendering layer of a dialog.

    ``render`` draws the dialog for one frame and returns at most one
    command for the dialog to apply after rendering completes. Text field
    edits go through the dialog's edit methods; every other change is a
    command.
    """

    @abstractmethod
    def render(self, dialog, frame: FrameContext):
        """Draw one frame and return the collected command, or None."""
