import pygame

from .config import TEXT

# ---------- Fonts ----------
FONTS = {}


def init_fonts():
    pygame.font.init()
    FONTS["sm"] = pygame.font.SysFont("Segoe UI", 13)
    FONTS["md"] = pygame.font.SysFont("Segoe UI", 15)
    FONTS["lg"] = pygame.font.SysFont("Segoe UI", 20, bold=True)
    FONTS["xl"] = pygame.font.SysFont("Segoe UI", 44, bold=True)
    FONTS["mono"] = pygame.font.SysFont("Consolas", 14)
    FONTS["mono_sm"] = pygame.font.SysFont("Consolas", 11)


def font(name="md"):
    if not FONTS:
        init_fonts()
    return FONTS[name]


# ---------- Drawing helpers ----------
def draw_text(surf, text, pos, fnt="md", color=TEXT):
    if isinstance(fnt, str):
        fnt = font(fnt)
    img = fnt.render(str(text), True, color)
    surf.blit(img, pos)
    return img.get_width()


def draw_text_centered(surf, text, center, fnt="md", color=TEXT):
    if isinstance(fnt, str):
        fnt = font(fnt)
    img = fnt.render(str(text), True, color)
    surf.blit(img, img.get_rect(center=center))


def rounded_rect(surf, rect, color, radius=8, width=0):
    pygame.draw.rect(surf, color, rect, width, border_radius=radius)


def translucent_rect(surf, rect, rgba, radius=8):
    rect = pygame.Rect(rect)
    s = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    pygame.draw.rect(s, rgba, s.get_rect(), border_radius=radius)
    surf.blit(s, rect.topleft)


def shadow(surf, rect, alpha=100, spread=12, radius=14):
    shad = pygame.Rect(rect).inflate(spread, spread)
    translucent_rect(surf, shad, (0, 0, 0, alpha), radius)


def vertical_gradient(size, top, bottom):
    w, h = size
    grad = pygame.Surface((w, max(1, h)))
    for y in range(max(1, h)):
        t = y / max(1, h - 1)
        color = [int(top[i] + (bottom[i] - top[i]) * t) for i in range(3)]
        pygame.draw.line(grad, color, (0, y), (w, y))
    return grad


def wrap_text(text, fnt, width):
    if isinstance(fnt, str):
        fnt = font(fnt)
    if not text:
        return [""]
    lines = []
    line = ""
    for word in text.split(" "):
        trial = word if not line else line + " " + word
        if fnt.size(trial)[0] <= width or not line:
            line = trial
        else:
            lines.append(line)
            line = word
    lines.append(line)
    return lines
