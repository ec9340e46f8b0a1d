"""
Window state container.

Holds one WindowState per catalog window plus the stacking counter and the
boot gate. Every mutation goes through the methods below; records are
immutable and swapped on change so subscribers can compare old and new.

Focus is not stored: the open window with the highest stack_order is the
focused one.
"""
import logging
from collections import namedtuple
from dataclasses import dataclass, replace

from .config import MENU_BAR_H, MIN_H, MIN_W
from .registry import CATALOG, WindowId

log = logging.getLogger(__name__)

Point = namedtuple("Point", "x y")
Size = namedtuple("Size", "width height")


@dataclass(frozen=True)
class WindowState:
    is_open: bool
    is_maximized: bool
    stack_order: int
    position: Point
    size: Size


def clamp_size(width, height):
    return Size(max(MIN_W, width), max(MIN_H, height))


def clamp_y(y):
    return max(MENU_BAR_H, y)


class WindowStore:
    def __init__(self, catalog=None):
        catalog = catalog or CATALOG
        self.top_stack_order = 1
        self.booted = False
        self._windows = {}
        for wid, spec in catalog.items():
            self._windows[WindowId(wid)] = WindowState(
                is_open=False,
                is_maximized=False,
                stack_order=1,
                position=Point(*spec.position),
                size=clamp_size(*spec.size),
            )
        self._listeners = []
        self._boot_listeners = []

    # ---------- reads ----------
    def __getitem__(self, window_id):
        return self._windows[WindowId(window_id)]

    def __iter__(self):
        return iter(self._windows)

    def snapshot(self):
        return dict(self._windows)

    def focused(self):
        open_ids = [wid for wid, st in self._windows.items() if st.is_open]
        if not open_ids:
            return None
        return max(open_ids, key=lambda wid: self._windows[wid].stack_order)

    def is_active(self, window_id):
        st = self[window_id]
        return st.is_open and st.stack_order == self.top_stack_order

    def windows_in_paint_order(self):
        open_ids = [wid for wid, st in self._windows.items() if st.is_open]
        return sorted(open_ids, key=lambda wid: self._windows[wid].stack_order)

    # ---------- subscriptions ----------
    def subscribe(self, listener):
        """Call ``listener(window_id, before, after)`` on every record change.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def on_boot(self, listener):
        self._boot_listeners.append(listener)

    def _commit(self, window_id, new_state):
        before = self._windows[window_id]
        if new_state == before:
            return
        self._windows[window_id] = new_state
        for listener in list(self._listeners):
            listener(window_id, before, new_state)

    def _raise(self, window_id, **changes):
        self.top_stack_order += 1
        st = self._windows[window_id]
        self._commit(window_id, replace(st, stack_order=self.top_stack_order, **changes))

    # ---------- operations ----------
    def open(self, window_id):
        self._raise(WindowId(window_id), is_open=True)

    def close(self, window_id):
        wid = WindowId(window_id)
        self._commit(wid, replace(self._windows[wid], is_open=False, is_maximized=False))

    def focus(self, window_id):
        wid = WindowId(window_id)
        if not self._windows[wid].is_open:
            log.debug("focus(%s) ignored: window is closed", wid.value)
            return
        self._raise(wid)

    def toggle_maximize(self, window_id):
        wid = WindowId(window_id)
        st = self._windows[wid]
        self._commit(wid, replace(st, is_maximized=not st.is_maximized))

    def set_position(self, window_id, x, y):
        wid = WindowId(window_id)
        st = self._windows[wid]
        if not st.is_maximized:
            y = clamp_y(y)
        self._commit(wid, replace(st, position=Point(x, y)))

    def set_size(self, window_id, width, height):
        wid = WindowId(window_id)
        self._commit(wid, replace(self._windows[wid], size=clamp_size(width, height)))

    def set_boot(self, booted):
        if self.booted and not booted:
            log.debug("set_boot(False) ignored: boot gate is one-way")
            return
        if self.booted == booted:
            return
        self.booted = booted
        for listener in list(self._boot_listeners):
            listener()
