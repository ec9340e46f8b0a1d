import webbrowser
from collections import namedtuple

import pygame

from .config import BASE, BLUE, SURFACE_0, SURFACE_1, TEXT, TEXT_DIM, WALLPAPERS, WHITE
from .portfolio import PERSONAL
from .registry import WindowId
from .ui import draw_text, rounded_rect, shadow, translucent_rect

Command = namedtuple("Command", "id label category action")

ROW_H = 34


def build_commands(store, open_url=webbrowser.open):
    labels = [
        (WindowId.ABOUT, "Open About Me"), (WindowId.PROJECTS, "Open Projects"),
        (WindowId.SKILLS, "Open Skills"), (WindowId.EXPERIENCE, "Open Experience"),
        (WindowId.EDUCATION, "Open Education"), (WindowId.CONTACT, "Open Contact"),
        (WindowId.RESUME, "Open Resume"), (WindowId.TERMINAL, "Open Terminal"),
    ]
    commands = [Command(wid.value, label, "Windows", lambda wid=wid: store.open(wid)) for wid, label in labels]
    commands.append(Command("game", "Play Flappy Bird", "Fun", lambda: store.open(WindowId.GAME)))
    links = PERSONAL["links"]
    commands += [
        Command("github", "Go to GitHub", "Links", lambda: open_url(links["github"])),
        Command("linkedin", "Go to LinkedIn", "Links", lambda: open_url(links["linkedin"])),
        Command("email", "Send Email", "Links", lambda: open_url("mailto:" + links["email"])),
    ]
    return commands


# ---------- Command Palette ----------
class CommandPalette:
    def __init__(self, commands):
        self.commands = commands
        self.is_open = False
        self.query = ""
        self.selected = 0
        self._rows = []
        self._panel = pygame.Rect(0, 0, 0, 0)

    def open(self):
        self.is_open = True
        self.query = ""
        self.selected = 0

    def close(self):
        self.is_open = False

    def toggle(self):
        if self.is_open:
            self.close()
        else:
            self.open()

    def filtered(self):
        if not self.query:
            return list(self.commands)
        q = self.query.lower()
        return [c for c in self.commands if q in c.label.lower()]

    def set_query(self, query):
        self.query = query
        self.selected = 0

    def move(self, delta):
        n = len(self.filtered())
        self.selected = max(0, min(self.selected + delta, n - 1)) if n else 0

    def run_selected(self):
        items = self.filtered()
        if not items or self.selected >= len(items):
            return None
        cmd = items[self.selected]
        cmd.action()
        self.close()
        return cmd

    def handle_event(self, e):
        if e.type == pygame.TEXTINPUT:
            self.set_query(self.query + e.text)
        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_ESCAPE:
                self.close()
            elif e.key == pygame.K_DOWN:
                self.move(1)
            elif e.key == pygame.K_UP:
                self.move(-1)
            elif e.key == pygame.K_RETURN:
                self.run_selected()
            elif e.key == pygame.K_BACKSPACE:
                self.set_query(self.query[:-1])

    def press(self, pos):
        if not self._panel.collidepoint(pos):
            self.close()
            return
        for i, r in self._rows:
            if r.collidepoint(pos):
                self.selected = i
                self.run_selected()
                return

    def hover(self, pos):
        for i, r in self._rows:
            if r.collidepoint(pos):
                self.selected = i

    def draw(self, surf):
        if not self.is_open:
            return
        sw, sh = surf.get_size()
        translucent_rect(surf, surf.get_rect(), (0, 0, 0, 128), radius=0)
        items = self.filtered()
        width = min(520, int(sw * 0.9))
        height = 48 + max(1, min(len(items), 9)) * ROW_H + 16
        panel = pygame.Rect((sw - width) // 2, int(sh * 0.2), width, height)
        self._panel = panel
        shadow(surf, panel)
        rounded_rect(surf, panel, BASE, radius=12)
        rounded_rect(surf, panel, SURFACE_1, radius=12, width=1)
        draw_text(surf, self.query or "Type a command...", (panel.x + 16, panel.y + 14), "md",
                  WHITE if self.query else TEXT_DIM)
        draw_text(surf, "ESC", (panel.right - 40, panel.y + 16), "sm", TEXT_DIM)
        pygame.draw.line(surf, SURFACE_0, (panel.x, panel.y + 46), (panel.right - 1, panel.y + 46))
        self._rows = []
        y = panel.y + 54
        if not items:
            draw_text(surf, "No results found", (panel.centerx - 60, y + 8), "md", TEXT_DIM)
        for i, cmd in enumerate(items[:9]):
            row = pygame.Rect(panel.x + 6, y, panel.w - 12, ROW_H - 2)
            if i == self.selected:
                rounded_rect(surf, row, (40, 48, 72), radius=6)
            draw_text(surf, cmd.label, (row.x + 10, row.y + 7), "md", WHITE if i == self.selected else TEXT)
            draw_text(surf, cmd.category.upper(), (row.right - 80, row.y + 9), "sm", TEXT_DIM)
            self._rows.append((i, row))
            y += ROW_H


# ---------- Context Menu ----------
class ContextMenu:
    ITEM_H = 28
    WIDTH = 200

    def __init__(self, open_terminal, set_wallpaper, restart):
        self.open_terminal = open_terminal
        self.set_wallpaper = set_wallpaper
        self.restart = restart
        self.pos = None
        self.show_wallpapers = False
        self._items = []
        self._sub = []

    @property
    def is_open(self):
        return self.pos is not None

    def open_at(self, pos):
        self.pos = pos
        self.show_wallpapers = False

    def close(self):
        self.pos = None
        self.show_wallpapers = False

    def items(self):
        return [("terminal", "Open Terminal"), ("wallpaper", "Change Wallpaper"),
                ("restart", "Restart System"), ("about", "PortfolioOS v1.0")]

    def press(self, pos):
        """Handle a click while open. Returns True if it landed on the menu."""
        for idx, r in self._sub:
            if r.collidepoint(pos):
                self.set_wallpaper(idx)
                self.close()
                return True
        for key, r in self._items:
            if r.collidepoint(pos):
                if key == "wallpaper":
                    self.show_wallpapers = not self.show_wallpapers
                    return True
                self.close()
                if key == "terminal":
                    self.open_terminal()
                elif key == "restart":
                    self.restart()
                return True
        self.close()
        return False

    def draw(self, surf):
        if not self.is_open:
            return
        sw, sh = surf.get_size()
        items = self.items()
        h = len(items) * self.ITEM_H + 16
        x = min(self.pos[0], sw - self.WIDTH - 4)
        y = min(self.pos[1], sh - h - 4)
        panel = pygame.Rect(x, y, self.WIDTH, h)
        shadow(surf, panel)
        rounded_rect(surf, panel, BASE, radius=10)
        rounded_rect(surf, panel, SURFACE_1, radius=10, width=1)
        self._items = []
        iy = panel.y + 6
        for key, label in items:
            if key == "restart":
                pygame.draw.line(surf, SURFACE_0, (panel.x + 8, iy + 2), (panel.right - 8, iy + 2))
                iy += 4
            r = pygame.Rect(panel.x + 4, iy, panel.w - 8, self.ITEM_H)
            draw_text(surf, label, (r.x + 10, r.y + 6), "sm", TEXT_DIM if key == "about" else TEXT)
            self._items.append((key, r))
            iy += self.ITEM_H

        self._sub = []
        if self.show_wallpapers:
            anchor = self._items[1][1]
            sub = pygame.Rect(panel.right + 4, anchor.y - 6, 160, len(WALLPAPERS) * self.ITEM_H + 12)
            if sub.right > sw:
                sub.right = panel.x - 4
            shadow(surf, sub)
            rounded_rect(surf, sub, BASE, radius=10)
            rounded_rect(surf, sub, SURFACE_1, radius=10, width=1)
            for i, (label, top, bottom) in enumerate(WALLPAPERS):
                r = pygame.Rect(sub.x + 4, sub.y + 6 + i * self.ITEM_H, sub.w - 8, self.ITEM_H)
                pygame.draw.circle(surf, bottom, (r.x + 14, r.centery), 6)
                draw_text(surf, label, (r.x + 28, r.y + 6), "sm", TEXT)
                self._sub.append((i, r))
        if self.show_wallpapers:
            pygame.draw.circle(surf, BLUE, (panel.right - 14, self._items[1][1].centery), 3)
