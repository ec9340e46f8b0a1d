import time

import pygame

from .apps import BaseApp
from .config import BLUE, GREEN, TEXT_DIM, WHITE
from .portfolio import EXPERIENCE, EXPERTISE, PERSONAL, PROJECTS, SKILLS
from .registry import WindowId
from .ui import draw_text, font, rounded_rect

PROMPT_USER = "akshaj@portfolio"

NEOFETCH = """
  AAAA      KK  KK   akshaj@portfolio
 AA  AA     KK KK    ------------------
 AAAAAA     KKKK     OS: PortfolioOS v1.0
 AA  AA     KK KK    Host: UIC Chicago
 AA  AA     KK  KK   Kernel: CPython
                     Shell: portfolio-sh
                     WM: pygame
                     Theme: Catppuccin Mocha
                     CPU: Caffeine-powered
                     Memory: {skills} skills loaded
"""

HELP = [
    "Available commands:",
    "  whoami        - Who am I?",
    "  neofetch      - System info",
    "  ls            - List sections",
    "  cat <file>    - View a section (about, skills, projects, experience)",
    "  open <window> - Open a window",
    "  history       - Command history",
    "  clear         - Clear terminal",
    "  echo <text>   - Print text",
    "  date          - Current date",
    "  uptime        - System uptime",
    "  sudo <cmd>    - Try it :)",
    "",
]


# ---------- Shell ----------
class Shell:
    def __init__(self, open_window=None, clock=time.time):
        self.open_window = open_window
        self.clock = clock
        self.started = clock()
        self.lines = [("output", "PortfolioOS v1.0 - Type 'help' for available commands."), ("output", "")]
        self.history = []
        self.history_idx = -1

    def submit(self, cmd):
        cmd = cmd.strip()
        if cmd:
            self.history.append(cmd)
            self.history_idx = -1
        output = self.run(cmd)
        if output is None:
            self.lines = []
            return []
        self.lines.append(("input", cmd))
        self.lines += [("output", text) for text in output]
        return output

    def run(self, cmd):
        """Output lines for ``cmd``; None means the screen was cleared."""
        parts = cmd.strip().split()
        command = parts[0].lower() if parts else ""
        arg = " ".join(parts[1:]).lower()

        if command == "":
            return []
        if command == "help":
            return list(HELP)
        if command == "whoami":
            return [PERSONAL["name"], PERSONAL["title"], PERSONAL["location"], ""] + PERSONAL["bio"] + [""]
        if command == "neofetch":
            return NEOFETCH.format(skills=len(SKILLS)).split("\n")
        if command == "ls":
            return ["drwxr-xr-x  about/", "drwxr-xr-x  projects/", "drwxr-xr-x  skills/",
                    "drwxr-xr-x  experience/", "drwxr-xr-x  education/", "-rw-r--r--  resume.pdf",
                    "-rw-r--r--  contact.txt", ""]
        if command == "cat":
            return self._cat(arg)
        if command == "open":
            return self._open(arg)
        if command == "echo":
            return [arg, ""]
        if command == "date":
            return [time.strftime("%a %b %d %Y %H:%M:%S", time.localtime(self.clock())), ""]
        if command == "uptime":
            elapsed = int(self.clock() - self.started)
            mins, secs = divmod(elapsed, 60)
            return ["up %dm %ds. Powered by caffeine and curiosity." % (mins, secs), ""]
        if command == "clear":
            return None
        if command == "history":
            return ["  %d  %s" % (i + 1, h) for i, h in enumerate(self.history)] + [""]
        if command == "sudo":
            return ["Nice try. Permission denied: you're not root on this portfolio.", ""]
        return ["command not found: %s. Type 'help' for available commands." % command, ""]

    def _cat(self, arg):
        arg = arg.rstrip("/")
        if not arg:
            return ["Usage: cat <filename>", "Try: cat about, cat skills, cat projects, cat experience", ""]
        if arg == "about":
            return PERSONAL["bio"] + [""]
        if arg == "skills":
            out = ["Technical Proficiency:"]
            for name, level, _ in SKILLS:
                filled = level // 5
                out.append("  %s %s%s %d%%" % (name.ljust(24), "#" * filled, "." * (20 - filled), level))
            return out + ["", "Domains: " + ", ".join(EXPERTISE), ""]
        if arg == "projects":
            out = []
            for p in PROJECTS:
                out += ["> %s [%s]" % (p["name"], p["tag"]), "  " + p["description"],
                        "  Tech: " + ", ".join(p["tech"]), ""]
            return out
        if arg == "experience":
            out = []
            for e in EXPERIENCE:
                where = " - " + e["location"] if e.get("location") else ""
                out += ["> %s @ %s" % (e["role"], e["company"]), "  " + e["date"] + where,
                        "  " + e["summary"], ""]
            return out
        return ["cat: %s: No such file or directory" % arg, ""]

    def _open(self, arg):
        if not arg:
            return ["Usage: open <window>",
                    "Windows: " + ", ".join(w.value for w in WindowId if w is not WindowId.TERMINAL), ""]
        try:
            wid = WindowId(arg)
        except ValueError:
            return ["open: %s: not found" % arg, ""]
        if self.open_window:
            self.open_window(wid)
        return ["Opening %s..." % arg, ""]

    def history_up(self):
        if not self.history:
            return None
        if self.history_idx == -1:
            self.history_idx = len(self.history) - 1
        else:
            self.history_idx = max(0, self.history_idx - 1)
        return self.history[self.history_idx]

    def history_down(self):
        if self.history_idx == -1:
            return None
        self.history_idx += 1
        if self.history_idx >= len(self.history):
            self.history_idx = -1
            return ""
        return self.history[self.history_idx]


# ---------- Terminal App ----------
class TerminalApp(BaseApp):
    name = "Terminal"
    wants_keys = True

    def __init__(self, open_window=None):
        self.shell = Shell(open_window)
        self.input = ""

    def handle_event(self, e, rect):
        if e.type == pygame.TEXTINPUT:
            self.input += e.text
        elif e.type == pygame.KEYDOWN:
            if e.key == pygame.K_RETURN:
                self.shell.submit(self.input)
                self.input = ""
            elif e.key == pygame.K_BACKSPACE:
                self.input = self.input[:-1]
            elif e.key == pygame.K_UP:
                prev = self.shell.history_up()
                if prev is not None:
                    self.input = prev
            elif e.key == pygame.K_DOWN:
                nxt = self.shell.history_down()
                if nxt is not None:
                    self.input = nxt

    def draw(self, surf, rect):
        rounded_rect(surf, rect, (17, 17, 27), radius=0)
        mono = font("mono")
        lh = mono.get_height() + 3
        rows = [(kind, text) for kind, text in self.shell.lines] + [("prompt", self.input)]
        visible = max(1, (rect.h - 16) // lh)
        y = rect.y + 8
        for kind, text in rows[-visible:]:
            x = rect.x + 10
            if kind == "output":
                draw_text(surf, text, (x, y), mono, TEXT_DIM)
            else:
                x += draw_text(surf, PROMPT_USER, (x, y), mono, GREEN)
                x += draw_text(surf, ":", (x, y), mono, TEXT_DIM)
                x += draw_text(surf, "~", (x, y), mono, BLUE)
                cursor = "_" if kind == "prompt" and int(time.time() * 2) % 2 == 0 else ""
                draw_text(surf, "$ " + text + cursor, (x, y), mono, WHITE)
            y += lh
