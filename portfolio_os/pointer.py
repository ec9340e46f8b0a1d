"""
Mouse and touch input folded into one pointer stream.

Sessions only ever see PointerEvent(x, y, phase); everything device specific
stays in this module.
"""
import enum
from collections import namedtuple

import pygame


class Phase(enum.Enum):
    START = "start"
    MOVE = "move"
    END = "end"


PointerEvent = namedtuple("PointerEvent", "x y phase source")

_MOUSE_PHASES = {
    pygame.MOUSEBUTTONDOWN: Phase.START,
    pygame.MOUSEMOTION: Phase.MOVE,
    pygame.MOUSEBUTTONUP: Phase.END,
}

_FINGER_PHASES = {
    pygame.FINGERDOWN: Phase.START,
    pygame.FINGERMOTION: Phase.MOVE,
    pygame.FINGERUP: Phase.END,
}


class TouchTracker:
    """Follows the first finger down; extra fingers are ignored until it lifts."""

    def __init__(self):
        self.finger_id = None

    def accept(self, e):
        if e.type == pygame.FINGERDOWN:
            if self.finger_id is not None:
                return False
            self.finger_id = e.finger_id
            return True
        if e.finger_id != self.finger_id:
            return False
        if e.type == pygame.FINGERUP:
            self.finger_id = None
        return True

    def reset(self):
        self.finger_id = None


def from_pygame(e, surface_size, touch=None):
    """Translate a pygame event into a PointerEvent, or None if it is not one."""
    if e.type in _MOUSE_PHASES:
        # SDL mirrors touches as mouse events; the finger events already cover them
        if getattr(e, "touch", False):
            return None
        if e.type != pygame.MOUSEMOTION and e.button != 1:
            return None
        x, y = e.pos
        return PointerEvent(x, y, _MOUSE_PHASES[e.type], "mouse")

    if e.type in _FINGER_PHASES:
        if touch is not None and not touch.accept(e):
            return None
        sw, sh = surface_size
        return PointerEvent(int(round(e.x * sw)), int(round(e.y * sh)), _FINGER_PHASES[e.type], "touch")

    return None
