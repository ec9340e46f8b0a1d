"""
Window chrome: where a window is drawn, where its handles and buttons sit,
and how it looks. Geometry comes from the store; this module never writes it.
"""
import pygame

from .config import (BASE, CORNER_GRIP, EDGE_GRIP, EDGE_INSET, GREEN, MENU_BAR_H, MOBILE_BREAKPOINT,
                     RED, SURFACE_0, SURFACE_1, TEXT, TEXT_DIM, TITLEBAR_H, YELLOW)
from .sessions import Edge
from .ui import draw_text_centered, font, rounded_rect, shadow

BUTTON_R = 6
BUTTON_GAP = 7

CURSORS = {
    Edge.N: pygame.SYSTEM_CURSOR_SIZENS, Edge.S: pygame.SYSTEM_CURSOR_SIZENS,
    Edge.E: pygame.SYSTEM_CURSOR_SIZEWE, Edge.W: pygame.SYSTEM_CURSOR_SIZEWE,
    Edge.NE: pygame.SYSTEM_CURSOR_SIZENESW, Edge.SW: pygame.SYSTEM_CURSOR_SIZENESW,
    Edge.NW: pygame.SYSTEM_CURSOR_SIZENWSE, Edge.SE: pygame.SYSTEM_CURSOR_SIZENWSE,
}


def is_mobile(width):
    return width < MOBILE_BREAKPOINT


# ---------- Geometry ----------
def window_rect(state, surface_size):
    sw, sh = surface_size
    if is_mobile(sw):
        return pygame.Rect(int(sw * 0.02), 32, int(sw * 0.96), sh - 100)
    if state.is_maximized:
        return pygame.Rect(0, MENU_BAR_H, sw, sh - MENU_BAR_H)
    return pygame.Rect(int(state.position.x), int(state.position.y), int(state.size.width), int(state.size.height))


def titlebar_rect(rect):
    return pygame.Rect(rect.x, rect.y, rect.w, TITLEBAR_H)


def content_rect(rect):
    return pygame.Rect(rect.x, rect.y + TITLEBAR_H, rect.w, rect.h - TITLEBAR_H)


def handle_rects(rect):
    """Resize affordances, corners first so they win over the edges."""
    c = CORNER_GRIP
    inner_w = rect.w - 2 * EDGE_INSET
    inner_h = rect.h - 2 * EDGE_INSET
    return [
        (Edge.NW, pygame.Rect(rect.x, rect.y, c, c)),
        (Edge.NE, pygame.Rect(rect.right - c, rect.y, c, c)),
        (Edge.SW, pygame.Rect(rect.x, rect.bottom - c, c, c)),
        (Edge.SE, pygame.Rect(rect.right - c, rect.bottom - c, c, c)),
        (Edge.N, pygame.Rect(rect.x + EDGE_INSET, rect.y, inner_w, EDGE_GRIP)),
        (Edge.S, pygame.Rect(rect.x + EDGE_INSET, rect.bottom - EDGE_GRIP, inner_w, EDGE_GRIP)),
        (Edge.E, pygame.Rect(rect.right - EDGE_GRIP, rect.y + EDGE_INSET, EDGE_GRIP, inner_h)),
        (Edge.W, pygame.Rect(rect.x, rect.y + EDGE_INSET, EDGE_GRIP, inner_h)),
    ]


def hit_handle(rect, pos):
    for edge, r in handle_rects(rect):
        if r.collidepoint(pos):
            return edge
    return None


def title_buttons(rect):
    cy = rect.y + TITLEBAR_H // 2
    x = rect.x + 16 + BUTTON_R
    step = 2 * BUTTON_R + BUTTON_GAP
    return [
        ("close", (x, cy), RED),
        ("minimize", (x + step, cy), YELLOW),
        ("maximize", (x + 2 * step, cy), GREEN),
    ]


def hit_title_button(rect, pos):
    for action, (cx, cy), _ in title_buttons(rect):
        if (pos[0] - cx) ** 2 + (pos[1] - cy) ** 2 <= (BUTTON_R + 2) ** 2:
            return action
    return None


# ---------- Drawing ----------
def draw_window(surf, rect, title, app, active, square=False):
    radius = 0 if square else 12
    shadow(surf, rect, alpha=140 if active else 80, spread=20 if active else 12)
    rounded_rect(surf, rect, BASE, radius=radius)
    t = titlebar_rect(rect)
    rounded_rect(surf, t, SURFACE_0, radius=radius)
    pygame.draw.rect(surf, SURFACE_0, (t.x, t.centery, t.w, t.h // 2))
    pygame.draw.line(surf, SURFACE_1, (t.x, t.bottom - 1), (t.right - 1, t.bottom - 1))
    for _, center, color in title_buttons(rect):
        pygame.draw.circle(surf, color if active else TEXT_DIM, center, BUTTON_R)
    draw_text_centered(surf, title.upper(), t.center, font("sm"), TEXT if active else TEXT_DIM)

    body = content_rect(rect)
    prev_clip = surf.get_clip()
    surf.set_clip(body.clip(prev_clip))
    app.draw(surf, body)
    surf.set_clip(prev_clip)
    rounded_rect(surf, rect, SURFACE_1 if active else SURFACE_0, radius=radius, width=1)
