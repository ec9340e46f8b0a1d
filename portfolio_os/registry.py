"""
Window catalog: the fixed set of windows the desktop knows about, with the
geometry each one starts from and the labels its chrome shows.
"""
import enum
from collections import namedtuple


class WindowId(str, enum.Enum):
    ABOUT = "about"
    PROJECTS = "projects"
    SKILLS = "skills"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    CONTACT = "contact"
    GAME = "game"
    RESUME = "resume"
    TERMINAL = "terminal"


WindowSpec = namedtuple("WindowSpec", "id title label icon position size")

CATALOG = {
    WindowId.ABOUT: WindowSpec(WindowId.ABOUT, "About Me", "about-me", "Me", (80, 60), (680, 520)),
    WindowId.PROJECTS: WindowSpec(WindowId.PROJECTS, "Projects - ~/dev", "projects", "Pr", (150, 80), (700, 540)),
    WindowId.SKILLS: WindowSpec(WindowId.SKILLS, "Terminal - skills.sh", "skills", "Sk", (200, 70), (600, 480)),
    WindowId.EXPERIENCE: WindowSpec(WindowId.EXPERIENCE, "Experience", "experience", "Ex", (120, 90), (640, 480)),
    WindowId.EDUCATION: WindowSpec(WindowId.EDUCATION, "Education", "education", "Ed", (180, 100), (580, 420)),
    WindowId.CONTACT: WindowSpec(WindowId.CONTACT, "Contact", "contact", "@", (220, 80), (520, 400)),
    WindowId.GAME: WindowSpec(WindowId.GAME, "Flappy Bird", "flappy-bird", "Fb", (100, 50), (420, 600)),
    WindowId.RESUME: WindowSpec(WindowId.RESUME, "Resume", "resume", "Cv", (100, 50), (650, 550)),
    WindowId.TERMINAL: WindowSpec(WindowId.TERMINAL, "Terminal", "terminal", ">_", (140, 60), (620, 450)),
}

# Desktop icon column; the game lives in the dock only.
DESKTOP_ICONS = [
    (WindowId.ABOUT, "About Me"),
    (WindowId.PROJECTS, "Projects"),
    (WindowId.SKILLS, "Skills"),
    (WindowId.EXPERIENCE, "Experience"),
    (WindowId.EDUCATION, "Education"),
    (WindowId.CONTACT, "Contact"),
    (WindowId.RESUME, "Resume"),
    (WindowId.TERMINAL, "Terminal"),
]

DOCK_ITEMS = DESKTOP_ICONS + [(WindowId.GAME, "Flappy Bird")]
