import webbrowser

import pygame

from .config import BLUE, MAUVE, SURFACE_0, TEXT, TEXT_DIM, WHITE
from .ui import draw_text, font, rounded_rect, wrap_text

PAD = 24

STYLE_FONTS = {
    "title": ("lg", WHITE),
    "heading": ("md", WHITE),
    "body": ("md", TEXT),
    "dim": ("sm", TEXT_DIM),
    "accent": ("md", BLUE),
    "bullet": ("md", TEXT),
    "link": ("sm", MAUVE),
    "spacer": ("sm", TEXT),
}


# ---------- Apps ----------
class BaseApp:
    name = "App"
    wants_keys = False

    def handle_event(self, e, rect): pass
    def update(self, dt): pass
    def draw(self, surf, rect): pass


class ContentApp(BaseApp):
    """Scrollable static content built from (style, payload) blocks."""

    def __init__(self, name, blocks):
        self.name = name
        self.blocks = blocks
        self.scroll = 0
        self._content_h = 0
        self._links = []

    def handle_event(self, e, rect):
        if e.type == pygame.MOUSEWHEEL:
            self.scroll = max(0, min(self.scroll - e.y * 30, max(0, self._content_h - rect.h + PAD)))
        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            for r, url in self._links:
                if r.collidepoint(e.pos):
                    webbrowser.open(url if "://" in url or url.startswith("mailto:") else "https://" + url)
                    return

    def _layout(self, width):
        rows = []
        for style, payload in self.blocks:
            if style == "spacer":
                rows.append((style, "", 10))
            elif style == "bar":
                rows.append((style, payload, 34))
            else:
                fname, _ = STYLE_FONTS[style]
                fnt = font(fname)
                indent = 16 if style == "bullet" else 0
                for i, line in enumerate(wrap_text(payload, fnt, width - indent)):
                    if style == "bullet":
                        line = ("- " if i == 0 else "  ") + line
                    rows.append((style, line, fnt.get_linesize() + 2))
        return rows

    def draw(self, surf, rect):
        area = rect.inflate(-PAD * 2, -PAD)
        rows = self._layout(area.w)
        self._content_h = sum(h for _, _, h in rows)
        self._links = []
        y = area.y - self.scroll
        for style, payload, h in rows:
            if y + h >= rect.y and y <= rect.bottom:
                if style == "bar":
                    self._draw_bar(surf, payload, area.x, y, area.w)
                elif style != "spacer":
                    fname, color = STYLE_FONTS[style]
                    w = draw_text(surf, payload, (area.x, y), fname, color)
                    if style == "link":
                        self._links.append((pygame.Rect(area.x, y, w, h), payload.strip()))
            y += h

    def _draw_bar(self, surf, skill, x, y, width):
        label, level, color = skill
        draw_text(surf, label, (x, y), "sm", TEXT)
        draw_text(surf, "%d%%" % level, (x + width - 36, y), "sm", TEXT_DIM)
        track = pygame.Rect(x, y + 19, width, 6)
        rounded_rect(surf, track, SURFACE_0, radius=3)
        fill = track.copy()
        fill.w = int(width * level / 100)
        rounded_rect(surf, fill, color, radius=3)
