import logging
import time

from .config import BOOT_DELAY

log = logging.getLogger(__name__)


class BootSequence:
    """Opens the store's boot gate once, ``delay`` seconds after start."""

    def __init__(self, store, delay=BOOT_DELAY, now=None):
        self.store = store
        self.delay = delay
        self.started = time.monotonic() if now is None else now

    def progress(self, now=None):
        now = time.monotonic() if now is None else now
        if self.delay <= 0:
            return 1.0
        return max(0.0, min(1.0, (now - self.started) / self.delay))

    def update(self, now=None):
        if self.store.booted:
            return False
        now = time.monotonic() if now is None else now
        if now - self.started < self.delay:
            return False
        log.info("boot complete after %.2fs", now - self.started)
        self.store.set_boot(True)
        return True
