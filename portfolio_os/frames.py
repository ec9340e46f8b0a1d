"""
Per-frame scheduling.

FrameScheduler is the desktop's stand-in for an animation-frame callback API:
callbacks requested between ticks run once on the next tick. FrameCoalescer
sits on top of it and collapses any number of pushed values into a single
apply per frame, keeping only the latest one.
"""
import logging

log = logging.getLogger(__name__)


class FrameScheduler:
    def __init__(self):
        self._pending = []
        self.frame = 0

    def request(self, callback):
        self._pending.append(callback)

    def pending(self):
        return len(self._pending)

    def tick(self):
        """Run everything requested before this tick. Returns the count run."""
        self.frame += 1
        callbacks, self._pending = self._pending, []
        for cb in callbacks:
            cb()
        return len(callbacks)


class FrameCoalescer:
    _EMPTY = object()

    def __init__(self, scheduler, apply):
        self.scheduler = scheduler
        self.apply = apply
        self._value = self._EMPTY
        self._scheduled = False

    def push(self, value):
        self._value = value
        if not self._scheduled:
            self._scheduled = True
            self.scheduler.request(self._on_frame)

    def _on_frame(self):
        self._scheduled = False
        self.flush()

    def flush(self):
        if self._value is self._EMPTY:
            return False
        value, self._value = self._value, self._EMPTY
        self.apply(value)
        return True
