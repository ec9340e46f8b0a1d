"""
PortfolioOS desktop shell.

Boot screen, menu bar, desktop icons and cards, dock, windows, welcome toast,
command palette and context menu, drawn with pygame from the window store.
Every window change goes through the store; drags and resizes go through the
interaction controller.
"""
import logging
import os
import sys
import time

import pygame
from pygame.locals import *

from .apps import ContentApp
from .boot import BootSequence
from .chrome import (CURSORS, content_rect, draw_window, hit_handle, hit_title_button, is_mobile,
                     titlebar_rect, window_rect)
from .config import (BLUE, CRUST, DOCK_ICON, DOUBLE_CLICK, FPS, GREEN, H, ICON_SIZE, MAUVE, MENU_BAR_H,
                     PEACH, RED, SURFACE_0, SURFACE_1, TEAL, TEXT, TEXT_DIM, W, WALLPAPERS, WHITE,
                     YELLOW, load_settings, save_settings)
from .content import BLOCKS
from .flappy import FlappyApp
from .frames import FrameScheduler
from .palette import CommandPalette, ContextMenu, build_commands
from .pointer import Phase, TouchTracker, from_pygame
from .registry import CATALOG, DESKTOP_ICONS, DOCK_ITEMS, WindowId
from .sessions import InteractionController
from .sounds import SAMPLE_RATE, AudioCues
from .store import WindowStore
from .terminal import TerminalApp
from .ui import (draw_text, draw_text_centered, init_fonts, rounded_rect, shadow, translucent_rect,
                 vertical_gradient)
from .widgets import DesktopWidgets, Toast

log = logging.getLogger(__name__)

ICON_COLORS = {
    WindowId.ABOUT: BLUE, WindowId.PROJECTS: GREEN, WindowId.SKILLS: MAUVE,
    WindowId.EXPERIENCE: PEACH, WindowId.EDUCATION: RED, WindowId.CONTACT: TEAL,
    WindowId.RESUME: (245, 194, 231), WindowId.TERMINAL: (166, 173, 200), WindowId.GAME: YELLOW,
}


# ---------- Desktop ----------
class Desktop:
    def __init__(self, settings=None, cues=None, size=(W, H), clock=time.monotonic):
        self.clock = clock
        self.settings = settings if settings is not None else load_settings()
        self.cues = cues or AudioCues(muted=self.settings["muted"])
        self.size = size
        self.touch = TouchTracker()
        self._wallpaper = None
        self.reset()

    def reset(self):
        """Fresh store and boot sequence, as after a page reload."""
        self.store = WindowStore()
        self.scheduler = FrameScheduler()
        self.controller = InteractionController(self.store, self.scheduler)
        self.boot = BootSequence(self.store)
        self.cues.attach(self.store)
        self.toast = Toast(clock=self.clock)
        self.toast.attach(self.store)
        self.widgets = DesktopWidgets(clock=self.clock)
        self.widgets.attach(self.store)
        self.apps = self._make_apps()
        self.palette = CommandPalette(build_commands(self.store))
        self.menu = ContextMenu(lambda: self.store.open(WindowId.TERMINAL), self.set_wallpaper, self.reset)
        self.selected_icon = None
        self.hover_dock = None
        self._last_icon_click = (None, 0.0)
        self._last_title_click = (None, 0.0)
        self.touch.reset()
        self.started = time.time()
        log.info("desktop reset")

    def _make_apps(self):
        apps = {wid: ContentApp(CATALOG[wid].title, build()) for wid, build in BLOCKS.items()}
        apps[WindowId.TERMINAL] = TerminalApp(open_window=self.store.open)
        apps[WindowId.GAME] = FlappyApp()
        return apps

    # ---------- settings ----------
    def set_wallpaper(self, index):
        self.settings["wallpaper_index"] = index % len(WALLPAPERS)
        self._wallpaper = None
        save_settings(self.settings)

    def toggle_mute(self):
        self.settings["muted"] = self.cues.toggle_mute()
        save_settings(self.settings)

    # ---------- layout ----------
    def search_rect(self):
        sw = self.size[0]
        w = 360 if not is_mobile(sw) else 280
        return pygame.Rect((sw - w) // 2, 3, w, MENU_BAR_H - 6)

    def mute_rect(self):
        return pygame.Rect(self.size[0] - 120, 4, 40, MENU_BAR_H - 8)

    def dock_rects(self):
        sw, sh = self.size
        gap = 6
        width = len(DOCK_ITEMS) * (DOCK_ICON + gap) - gap + 24
        panel = pygame.Rect((sw - width) // 2, sh - DOCK_ICON - 16 - 12, width, DOCK_ICON + 16)
        items = []
        x = panel.x + 12
        for wid, label in DOCK_ITEMS:
            items.append((wid, label, pygame.Rect(x, panel.y + 8, DOCK_ICON, DOCK_ICON)))
            x += DOCK_ICON + gap
        return panel, items

    def icon_rects(self):
        x = self.size[0] - 16 - 84
        return [(wid, label, pygame.Rect(x, 40 + i * 84, 84, 80)) for i, (wid, label) in enumerate(DESKTOP_ICONS)]

    def window_at(self, pos):
        for wid in reversed(self.store.windows_in_paint_order()):
            rect = window_rect(self.store[wid], self.size)
            if rect.collidepoint(pos):
                return wid, rect
        return None, None

    # ---------- events ----------
    def handle_event(self, e):
        if e.type == WINDOWFOCUSLOST:
            # the release may never arrive once the pointer leaves us
            self.controller.release()
            self.touch.reset()
            return
        if not self.store.booted:
            return

        if e.type == KEYDOWN and e.key == K_k and e.mod & (KMOD_CTRL | KMOD_META):
            self.palette.toggle()
            return
        if self.palette.is_open and e.type in (KEYDOWN, TEXTINPUT):
            self.palette.handle_event(e)
            return
        if e.type == KEYDOWN and e.key == K_ESCAPE and self.menu.is_open:
            self.menu.close()
            return
        if e.type in (KEYDOWN, TEXTINPUT):
            self._to_focused(e)
            return
        if e.type == MOUSEWHEEL:
            wid, rect = self.window_at(pygame.mouse.get_pos())
            if wid:
                self.apps[wid].handle_event(e, content_rect(rect))
            return
        if e.type == MOUSEBUTTONDOWN and e.button == 3 and not getattr(e, "touch", False):
            self._open_context_menu(e.pos)
            return

        p = from_pygame(e, self.size, self.touch)
        if p is None:
            return
        if self.controller.handle(p):
            return
        pos = (p.x, p.y)
        if p.phase is Phase.START:
            self.press(pos, e)
        elif p.phase is Phase.MOVE:
            self.hover(pos)
        else:
            wid, rect = self.window_at(pos)
            if wid:
                self.apps[wid].handle_event(e, content_rect(rect))

    def _to_focused(self, e):
        wid = self.store.focused()
        if wid and self.apps[wid].wants_keys:
            self.apps[wid].handle_event(e, content_rect(window_rect(self.store[wid], self.size)))

    def press(self, pos, e):
        if self.menu.is_open and self.menu.press(pos):
            return
        if self.palette.is_open:
            self.palette.press(pos)
            return
        if self.toast.press(pos, self.size):
            return
        if pos[1] < MENU_BAR_H:
            self._press_menu_bar(pos)
            return

        panel, items = self.dock_rects()
        for wid, _, r in items:
            if r.collidepoint(pos):
                self.cues.play_click()
                if self.store[wid].is_open:
                    self.store.focus(wid)
                else:
                    self.store.open(wid)
                return
        if panel.collidepoint(pos):
            return

        wid, rect = self.window_at(pos)
        if wid:
            self._press_window(wid, rect, pos, e)
            return

        for wid, _, r in self.icon_rects():
            if r.collidepoint(pos):
                now = time.time()
                last_id, last_t = self._last_icon_click
                if last_id == wid and now - last_t < DOUBLE_CLICK:
                    self.store.open(wid)
                    self._last_icon_click = (None, 0.0)
                else:
                    self._last_icon_click = (wid, now)
                self.selected_icon = wid
                return
        self.selected_icon = None

    def _press_window(self, wid, rect, pos, e):
        mobile = is_mobile(self.size[0])
        if not mobile and not self.store[wid].is_maximized:
            edge = hit_handle(rect, pos)
            if edge:
                self.controller.begin_resize(wid, edge, pos)
                return

        if titlebar_rect(rect).collidepoint(pos):
            action = hit_title_button(rect, pos)
            self.store.focus(wid)
            if action in ("close", "minimize"):
                self.store.close(wid)
                return
            if action == "maximize":
                self.store.toggle_maximize(wid)
                return
            now = time.time()
            last_id, last_t = self._last_title_click
            if last_id == wid and now - last_t < DOUBLE_CLICK:
                self._last_title_click = (None, 0.0)
                self.store.toggle_maximize(wid)
                return
            self._last_title_click = (wid, now)
            if not mobile:
                self.controller.begin_drag(wid, pos)
            return

        self.store.focus(wid)
        self.apps[wid].handle_event(e, content_rect(rect))

    def _press_menu_bar(self, pos):
        if self.search_rect().collidepoint(pos):
            self.palette.open()
        elif self.mute_rect().collidepoint(pos):
            self.toggle_mute()

    def _open_context_menu(self, pos):
        if self.menu.is_open and self.menu.press(pos):
            return
        if pos[1] < MENU_BAR_H or self.dock_rects()[0].collidepoint(pos):
            return
        if self.window_at(pos)[0] or any(r.collidepoint(pos) for _, _, r in self.icon_rects()):
            return
        self.menu.open_at(pos)

    def hover(self, pos):
        self.hover_dock = None
        for wid, _, r in self.dock_rects()[1]:
            if r.collidepoint(pos):
                self.hover_dock = wid
        if self.palette.is_open:
            self.palette.hover(pos)

        cursor = SYSTEM_CURSOR_ARROW
        wid, rect = self.window_at(pos)
        if wid and not is_mobile(self.size[0]) and not self.store[wid].is_maximized:
            edge = hit_handle(rect, pos)
            if edge:
                cursor = CURSORS[edge]
            elif titlebar_rect(rect).collidepoint(pos) and not hit_title_button(rect, pos):
                cursor = SYSTEM_CURSOR_HAND
        try:
            pygame.mouse.set_cursor(cursor)
        except pygame.error as err:
            log.debug("cursor change failed: %s", err)

    # ---------- frame ----------
    def update(self, dt):
        self.boot.update()
        self.scheduler.tick()
        self.cues.update()
        self.toast.update()
        self.widgets.update()
        for wid in self.store.windows_in_paint_order():
            self.apps[wid].update(dt)

    def draw(self, surf):
        self.size = surf.get_size()
        if not self.store.booted:
            self.draw_boot(surf)
            return
        self.draw_wallpaper(surf)
        self.draw_icons(surf)
        self.widgets.draw(surf)
        square = is_mobile(self.size[0])
        for wid in self.store.windows_in_paint_order():
            st = self.store[wid]
            draw_window(surf, window_rect(st, self.size), CATALOG[wid].title, self.apps[wid],
                        self.store.is_active(wid), square=square or st.is_maximized)
        self.draw_dock(surf)
        self.draw_menu_bar(surf)
        self.toast.draw(surf)
        self.menu.draw(surf)
        self.palette.draw(surf)

    def draw_boot(self, surf):
        surf.fill(CRUST)
        sw, sh = surf.get_size()
        draw_text_centered(surf, "A://", (sw // 2, sh // 2 - 40), "xl", BLUE)
        bar = pygame.Rect(sw // 2 - 96, sh // 2 + 10, 192, 4)
        rounded_rect(surf, bar, SURFACE_0, radius=2)
        fill = bar.copy()
        fill.w = int(bar.w * min(1.0, self.boot.progress() / 0.75))
        rounded_rect(surf, fill, BLUE, radius=2)
        draw_text_centered(surf, "loading portfolio.sys...", (sw // 2, sh // 2 + 36), "mono_sm", TEXT_DIM)

    def draw_wallpaper(self, surf):
        idx = self.settings["wallpaper_index"] % len(WALLPAPERS)
        key = (self.size, idx)
        if self._wallpaper is None or self._wallpaper[0] != key:
            _, top, bottom = WALLPAPERS[idx]
            self._wallpaper = (key, vertical_gradient(self.size, top, bottom))
        surf.blit(self._wallpaper[1], (0, 0))

    def draw_icons(self, surf):
        for wid, label, r in self.icon_rects():
            if wid == self.selected_icon:
                translucent_rect(surf, r, (137, 180, 250, 40))
            tile = pygame.Rect(0, 0, ICON_SIZE, ICON_SIZE)
            tile.midtop = (r.centerx, r.y + 4)
            shadow(surf, tile, alpha=60, spread=6)
            rounded_rect(surf, tile, ICON_COLORS[wid], radius=14)
            draw_text_centered(surf, CATALOG[wid].icon, tile.center, "lg", CRUST)
            draw_text_centered(surf, label, (r.centerx, tile.bottom + 12), "sm", TEXT)

    def draw_dock(self, surf):
        panel, items = self.dock_rects()
        shadow(surf, panel, alpha=90)
        translucent_rect(surf, panel, (30, 30, 46, 200), radius=16)
        rounded_rect(surf, panel, SURFACE_1, radius=16, width=1)
        for wid, label, r in items:
            is_open = self.store[wid].is_open
            tile = r.move(0, -8) if wid == self.hover_dock else r
            color = ICON_COLORS[wid] if is_open or wid == self.hover_dock else [int(c * 0.6) for c in ICON_COLORS[wid]]
            rounded_rect(surf, tile, color, radius=12)
            draw_text_centered(surf, CATALOG[wid].icon, tile.center, "lg", CRUST)
            if is_open:
                pygame.draw.circle(surf, BLUE, (r.centerx, r.bottom + 4), 3)
            if wid == self.hover_dock:
                tip = pygame.Rect(0, 0, max(60, len(label) * 8 + 16), 24)
                tip.midbottom = (r.centerx, tile.y - 6)
                rounded_rect(surf, tip, (30, 30, 46), radius=6)
                draw_text_centered(surf, label, tip.center, "sm", TEXT)

    def draw_menu_bar(self, surf):
        sw = self.size[0]
        bar = pygame.Rect(0, 0, sw, MENU_BAR_H)
        translucent_rect(surf, bar, (17, 17, 27, 210), radius=0)
        pygame.draw.line(surf, SURFACE_0, (0, MENU_BAR_H - 1), (sw, MENU_BAR_H - 1))
        x = 16 + draw_text(surf, "A://", (16, 5), "md", BLUE) + 12
        focused = self.store.focused()
        crumb = "~/desktop/" + CATALOG[focused].label if focused else "~/desktop"
        x += draw_text(surf, crumb, (x, 7), "sm", TEXT_DIM) + 12
        if not is_mobile(sw):
            elapsed = int(time.time() - self.started)
            mins, secs = divmod(elapsed, 60)
            draw_text(surf, "up %dm %ds" % (mins, secs) if mins else "up %ds" % secs, (x, 7), "sm", SURFACE_1)

        search = self.search_rect()
        translucent_rect(surf, search, (255, 255, 255, 12), radius=8)
        rounded_rect(surf, search, SURFACE_0, radius=8, width=1)
        draw_text(surf, "Search or type a command...", (search.x + 12, search.y + 4), "sm", TEXT_DIM)
        draw_text(surf, "Ctrl+K", (search.right - 50, search.y + 4), "sm", TEXT_DIM)

        mute = self.mute_rect()
        draw_text(surf, "mute" if self.cues.muted else "snd", (mute.x + 4, mute.y + 2), "sm",
                  TEXT_DIM if self.cues.muted else WHITE)
        draw_text(surf, time.strftime("%I:%M %p").lstrip("0"), (sw - 72, 7), "sm", TEXT_DIM)


# ---------- Main loop ----------
def main():
    logging.basicConfig(level=os.environ.get("PORTFOLIO_OS_LOG", "WARNING").upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1)
    pygame.init()
    screen = pygame.display.set_mode((W, H), pygame.RESIZABLE)
    pygame.display.set_caption("PortfolioOS")
    pygame.key.set_repeat(400, 35)
    clock = pygame.time.Clock()
    init_fonts()

    desktop = Desktop(size=screen.get_size())

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        for ev in pygame.event.get():
            if ev.type == QUIT:
                running = False
            elif ev.type == VIDEORESIZE:
                screen = pygame.display.set_mode((ev.w, ev.h), pygame.RESIZABLE)
                desktop.size = screen.get_size()
            else:
                desktop.handle_event(ev)
        desktop.update(dt)
        desktop.draw(screen)
        pygame.display.flip()

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
