import json
import logging
import os

log = logging.getLogger(__name__)

# ---------- CONFIG ----------
W, H = 1280, 800
FPS = 60
MENU_BAR_H = 28
TITLEBAR_H = 40
MIN_W, MIN_H = 320, 200
MOBILE_BREAKPOINT = 768
BOOT_DELAY = 2.0
TOAST_DELAY = 0.6
TOAST_LIFETIME = 8.0
WIDGETS_DELAY = 0.8
DOUBLE_CLICK = 0.35

# resize affordances
EDGE_GRIP = 6
EDGE_INSET = 8
CORNER_GRIP = 12

ICON_SIZE = 52
DOCK_ICON = 52

SETTINGS_FILE = os.environ.get("PORTFOLIO_OS_SETTINGS", "portfolio_os_settings.json")

# Colors (catppuccin mocha)
CRUST = (17, 17, 27)
BASE = (30, 30, 46)
SURFACE_0 = (49, 50, 68)
SURFACE_1 = (69, 71, 90)
TEXT = (205, 214, 244)
TEXT_DIM = (147, 153, 178)
WHITE = (255, 255, 255)
BLUE = (137, 180, 250)
GREEN = (166, 227, 161)
RED = (243, 139, 168)
YELLOW = (249, 226, 175)
MAUVE = (203, 166, 247)
PEACH = (250, 179, 135)
TEAL = (148, 226, 213)

# Wallpapers (top color, bottom color)
WALLPAPERS = [
    ("Cyberpunk", (22, 33, 62), (83, 52, 131)),
    ("Deep Ocean", (10, 22, 40), (26, 58, 92)),
    ("Aurora", (15, 25, 35), (45, 27, 78)),
    ("Ember", (26, 16, 20), (61, 26, 42)),
]

DEFAULT_SETTINGS = {"wallpaper_index": 0, "muted": False}


def load_settings(path=None):
    path = path or SETTINGS_FILE
    settings = dict(DEFAULT_SETTINGS)
    if not os.path.exists(path):
        return settings
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Could not read settings from %s: %s", path, e)
        return settings
    if not isinstance(data, dict):
        log.warning("Ignoring settings in %s: expected an object, got %s", path, type(data).__name__)
        return settings
    if "wallpaper_index" in data:
        try:
            settings["wallpaper_index"] = int(data["wallpaper_index"]) % len(WALLPAPERS)
        except (TypeError, ValueError, OverflowError):
            log.warning("Ignoring bad wallpaper_index %r in %s", data["wallpaper_index"], path)
    if "muted" in data:
        if isinstance(data["muted"], bool):
            settings["muted"] = data["muted"]
        else:
            log.warning("Ignoring bad muted value %r in %s", data["muted"], path)
    return settings


def save_settings(settings, path=None):
    path = path or SETTINGS_FILE
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump({k: settings[k] for k in DEFAULT_SETTINGS}, f, indent=2)
    except OSError as e:
        log.warning("Could not save settings to %s: %s", path, e)
