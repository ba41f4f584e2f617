"""
Frame input construction for hosts running a pygame event loop.
"""

import pygame
from typing import List, Optional

from file_dialog.frame import FrameContext


def build_frame_context(
    screen: Optional[pygame.Surface],
    events: List[pygame.event.Event],
    time_ms: Optional[int] = None,
) -> FrameContext:
    """
    Build the per-frame input for ``FileDialog.show``.

    Args:
        screen: Surface the dialog draws on
        events: Events drained from the pygame queue this frame
        time_ms: Host clock (default: pygame.time.get_ticks())

    Returns:
        FrameContext for this frame
    """
    escape_pressed = False
    window_closed = False

    for event in events:
        if event.type == pygame.QUIT:
            window_closed = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            escape_pressed = True

    if time_ms is None:
        time_ms = pygame.time.get_ticks()

    return FrameContext(
        screen=screen,
        events=list(events),
        escape_pressed=escape_pressed,
        window_closed=window_closed,
        time_ms=time_ms,
    )
