import pytest

from portfolio_os.frames import FrameScheduler
from portfolio_os.sessions import InteractionController
from portfolio_os.store import WindowStore


@pytest.fixture
def store():
    return WindowStore()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def controller(store, scheduler):
    return InteractionController(store, scheduler)
