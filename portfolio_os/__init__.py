"""PortfolioOS: a desktop-styled portfolio with a small window manager."""
from .registry import WindowId
from .sessions import Edge, InteractionController
from .store import WindowState, WindowStore

__version__ = "1.0.0"
