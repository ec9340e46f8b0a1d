"""
Boot-gated desktop extras: the welcome toast in the top right corner and the
typewriter and status cards drawn on the wallpaper under the windows.

Both start their clocks from the store's boot gate and never write to it.
"""
import time

import pygame

from .config import (BASE, BLUE, GREEN, MENU_BAR_H, SURFACE_1, TEXT, TEXT_DIM,
                     TOAST_DELAY, TOAST_LIFETIME, WHITE, WIDGETS_DELAY)
from .ui import draw_text, draw_text_centered, font, rounded_rect, shadow, translucent_rect, wrap_text

WELCOME_TITLE = "Welcome to PortfolioOS"
WELCOME_MESSAGE = "Double-click icons to explore. Try right-clicking the desktop or pressing Ctrl+K."

TYPE_SPEED = 0.038  # seconds per character
LINE_PAUSE = 0.35

TYPED_LINES = [
    (True, "whoami"),
    (False, "Akshaj K.S. - MS CS @ UIC | Software Engineer"),
    (True, "status"),
    (False, "Open to New Grad Roles (SWE, ML/AI, Data Science)"),
    (True, "skills --top"),
    (False, "Python, Go, Java, AWS, PyTorch, Distributed Systems"),
]

STATUS_ROWS = [
    ("Name", "Akshaj K.S."),
    ("Role", "MS CS @ UIC"),
    ("Location", "Chicago, IL"),
    ("Status", "Open to Roles"),
    ("Email", "akshaj32@gmail.com"),
]


def typed_lines(elapsed, lines=TYPED_LINES):
    """Lines shown ``elapsed`` seconds into the typewriter, and whether it has finished.

    The first character of a line appears as soon as the line starts, then one
    more every TYPE_SPEED seconds; a finished line holds for LINE_PAUSE.
    """
    shown = []
    start = 0.0
    for prompt, text in lines:
        if elapsed < start:
            return shown, False
        chars = min(len(text), int((elapsed - start) / TYPE_SPEED) + 1)
        shown.append((prompt, text[:chars]))
        start += len(text) * TYPE_SPEED + LINE_PAUSE
    return shown, elapsed >= start


class BootClock:
    """Seconds since the store's boot gate opened; None before that."""

    def __init__(self, clock=time.monotonic):
        self.clock = clock
        self.booted_at = None

    def attach(self, store):
        store.on_boot(self._on_boot)

    def _on_boot(self):
        self.booted_at = self.clock()

    def since_boot(self, now=None):
        if self.booted_at is None:
            return None
        now = self.clock() if now is None else now
        return now - self.booted_at


# ---------- Toast ----------
class Toast(BootClock):
    WIDTH = 300
    HEIGHT = 78

    def __init__(self, title=WELCOME_TITLE, message=WELCOME_MESSAGE, clock=time.monotonic):
        BootClock.__init__(self, clock)
        self.title = title
        self.message = message
        self.dismissed = False
        self.visible = False

    def update(self, now=None):
        age = self.since_boot(now)
        self.visible = (age is not None and not self.dismissed
                        and TOAST_DELAY <= age < TOAST_LIFETIME)
        return self.visible

    def dismiss(self):
        self.dismissed = True
        self.visible = False

    def rect(self, surface_size):
        return pygame.Rect(surface_size[0] - 16 - self.WIDTH, MENU_BAR_H + 12, self.WIDTH, self.HEIGHT)

    def close_rect(self, surface_size):
        r = self.rect(surface_size)
        return pygame.Rect(r.right - 26, r.y + 8, 18, 18)

    def press(self, pos, surface_size):
        """Returns True if the press landed on the toast."""
        if not self.visible or not self.rect(surface_size).collidepoint(pos):
            return False
        if self.close_rect(surface_size).collidepoint(pos):
            self.dismiss()
        return True

    def draw(self, surf):
        if not self.visible:
            return
        size = surf.get_size()
        r = self.rect(size)
        shadow(surf, r, alpha=120)
        rounded_rect(surf, r, BASE, radius=12)
        rounded_rect(surf, r, SURFACE_1, radius=12, width=1)
        badge = pygame.Rect(r.x + 12, r.y + 12, 32, 32)
        rounded_rect(surf, badge, (38, 50, 74), radius=8)
        draw_text_centered(surf, "A", badge.center, "md", BLUE)
        draw_text(surf, self.title, (badge.right + 12, r.y + 10), "sm", WHITE)
        y = r.y + 28
        for line in wrap_text(self.message, "sm", r.w - 90)[:3]:
            draw_text(surf, line, (badge.right + 12, y), "sm", TEXT_DIM)
            y += 15
        draw_text_centered(surf, "x", self.close_rect(size).center, "sm", TEXT_DIM)


# ---------- Wallpaper cards ----------
class DesktopWidgets(BootClock):
    def __init__(self, clock=time.monotonic):
        BootClock.__init__(self, clock)
        self.visible = False
        self.lines = []
        self.done = False
        self._blink = True

    def update(self, now=None):
        age = self.since_boot(now)
        if age is None or age < WIDGETS_DELAY:
            self.visible = False
            return
        self.visible = True
        self.lines, self.done = typed_lines(age - WIDGETS_DELAY)
        self._blink = not self.done or int(age * 2) % 2 == 0

    def _left(self, sw):
        if sw >= 1024:
            return 80
        return 48 if sw >= 640 else 24

    def draw(self, surf):
        if not self.visible:
            return
        sw, sh = surf.get_size()
        mono = font("mono")
        line_h = mono.get_linesize() + 2
        x = self._left(sw)

        term_w = min(520, int(sw * 0.9))
        rows = []
        for prompt, text in self.lines:
            for i, part in enumerate(wrap_text(text, mono, term_w - 56)):
                rows.append((prompt, i == 0, part))
        term_h = 32 + max(1, len(rows)) * line_h + (line_h if self.done else 0)
        status_w = min(340, int(sw * 0.9))
        status_h = 44 + len(STATUS_ROWS) * line_h
        y = max(MENU_BAR_H + 12, (sh - term_h - 16 - status_h) // 2)

        term = pygame.Rect(x, y, term_w, term_h)
        translucent_rect(surf, term, (17, 17, 27, 190), radius=12)
        rounded_rect(surf, term, SURFACE_1, radius=12, width=1)
        ty = term.y + 16
        cursor_at = (term.x + 20, ty)
        for prompt, first, part in rows:
            tx = term.x + 20
            if prompt:
                if first:
                    draw_text(surf, "$", (tx, ty), mono, GREEN)
                tx += mono.size("$ ")[0]
                w = draw_text(surf, part, (tx, ty), mono, BLUE)
            else:
                w = draw_text(surf, part, (tx, ty), mono, TEXT_DIM)
            cursor_at = (tx + w + 2, ty)
            ty += line_h
        if self.done:
            cursor_at = (term.x + 20, ty)
        if self._blink:
            pygame.draw.rect(surf, BLUE, (cursor_at[0], cursor_at[1] + 2, 8, line_h - 4))

        status = pygame.Rect(x, term.bottom + 16, status_w, status_h)
        translucent_rect(surf, status, (17, 17, 27, 190), radius=12)
        rounded_rect(surf, status, SURFACE_1, radius=12, width=1)
        draw_text(surf, "> status", (status.x + 20, status.y + 12), "sm", BLUE)
        ky = status.y + 34
        key_w = max(mono.size(k)[0] for k, _ in STATUS_ROWS) + 12
        for key, val in STATUS_ROWS:
            draw_text(surf, key, (status.x + 20, ky), mono, TEXT_DIM)
            draw_text(surf, ":", (status.x + 20 + key_w, ky), mono, TEXT_DIM)
            w = draw_text(surf, val, (status.x + 36 + key_w, ky), mono, TEXT)
            if key == "Status":
                pygame.draw.circle(surf, GREEN, (status.x + 46 + key_w + w, ky + line_h // 2), 4)
            ky += line_h
