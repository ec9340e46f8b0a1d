"""
Drag and resize sessions.

A session lives from a press on a title bar or border handle until the
pointer is released anywhere. The controller holds exactly one session value
at a time (Idle, Dragging or Resizing), so two concurrent gestures cannot
exist. Moves are coalesced to one store write per frame; release flushes the
last pending position before returning to Idle.
"""
import enum
import logging
from collections import namedtuple

from .config import MIN_H, MIN_W
from .frames import FrameCoalescer
from .pointer import Phase
from .registry import WindowId
from .store import Point, clamp_y

log = logging.getLogger(__name__)


class Edge(enum.Enum):
    N = "n"
    S = "s"
    E = "e"
    W = "w"
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"

    @property
    def north(self):
        return "n" in self.value

    @property
    def south(self):
        return "s" in self.value

    @property
    def east(self):
        return "e" in self.value

    @property
    def west(self):
        return "w" in self.value

    @property
    def moves_anchor(self):
        return self.north or self.west


Geometry = namedtuple("Geometry", "x y width height")


def resize_geometry(edge, start, dx, dy):
    """Geometry for a resize from ``start`` after the pointer moved (dx, dy).

    When the minimum size clamps a west or north drag, the window is
    re-anchored so the opposite edge stays where it was.
    """
    x, y, width, height = start
    if edge.east:
        width = start.width + dx
    if edge.west:
        width = start.width - dx
        x = start.x + dx
    if edge.south:
        height = start.height + dy
    if edge.north:
        height = start.height - dy
        y = start.y + dy

    width = max(MIN_W, width)
    height = max(MIN_H, height)

    if edge.west and width == MIN_W:
        x = start.x + start.width - MIN_W
    if edge.north and height == MIN_H:
        y = start.y + start.height - MIN_H
    return Geometry(x, y, width, height)


# ---------- session states ----------
class Idle:
    window_id = None

    def update(self, store, point):
        pass

    def __repr__(self):
        return "Idle()"


IDLE = Idle()


class Dragging:
    def __init__(self, window_id, anchor):
        self.window_id = window_id
        self.anchor = anchor

    def update(self, store, point):
        x = point[0] - self.anchor.x
        y = clamp_y(point[1] - self.anchor.y)
        store.set_position(self.window_id, x, y)

    def __repr__(self):
        return "Dragging(%s, anchor=%r)" % (self.window_id.value, tuple(self.anchor))


class Resizing:
    def __init__(self, window_id, edge, pointer, start):
        self.window_id = window_id
        self.edge = edge
        self.pointer = pointer
        self.start = start

    def update(self, store, point):
        dx = point[0] - self.pointer.x
        dy = point[1] - self.pointer.y
        g = resize_geometry(self.edge, self.start, dx, dy)
        store.set_size(self.window_id, g.width, g.height)
        if self.edge.moves_anchor:
            store.set_position(self.window_id, g.x, clamp_y(g.y))

    def __repr__(self):
        return "Resizing(%s, %s)" % (self.window_id.value, self.edge.name)


# ---------- controller ----------
class InteractionController:
    def __init__(self, store, scheduler):
        self.store = store
        self.session = IDLE
        self._moves = FrameCoalescer(scheduler, self._apply)

    @property
    def active(self):
        return self.session is not IDLE

    def _apply(self, point):
        self.session.update(self.store, point)

    def _can_start(self, window_id):
        st = self.store[window_id]
        if not st.is_open:
            log.debug("gesture on closed window %s ignored", window_id.value)
            return False
        if st.is_maximized:
            log.debug("gesture on maximized window %s ignored", window_id.value)
            return False
        return True

    def begin_drag(self, window_id, point):
        window_id = WindowId(window_id)
        st = self.store[window_id]
        if not self._can_start(window_id):
            return False
        self.release()
        self.session = Dragging(window_id, Point(point[0] - st.position.x, point[1] - st.position.y))
        self.store.focus(window_id)
        log.debug("start %r", self.session)
        return True

    def begin_resize(self, window_id, edge, point):
        window_id = WindowId(window_id)
        st = self.store[window_id]
        if not self._can_start(window_id):
            return False
        self.release()
        start = Geometry(st.position.x, st.position.y, st.size.width, st.size.height)
        self.session = Resizing(window_id, Edge(edge), Point(*point), start)
        self.store.focus(window_id)
        log.debug("start %r", self.session)
        return True

    def handle(self, event):
        """Feed a normalized PointerEvent. Returns True if a session used it."""
        if not self.active:
            return False
        if event.phase is Phase.MOVE:
            self._moves.push(Point(event.x, event.y))
            return True
        if event.phase is Phase.END:
            self._moves.push(Point(event.x, event.y))
            self.release()
            return True
        return False

    def release(self):
        if not self.active:
            return
        self._moves.flush()
        log.debug("end %r", self.session)
        self.session = IDLE
