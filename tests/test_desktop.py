import pygame
import pytest

from portfolio_os.config import DEFAULT_SETTINGS
from portfolio_os.desktop import Desktop
from portfolio_os.registry import WindowId
from portfolio_os.sounds import AudioCues


class FakePlayer:
    def __init__(self):
        self.played = []

    def play(self, freq, duration, wave, volume):
        self.played.append(freq)


@pytest.fixture
def desktop(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    d = Desktop(settings=dict(DEFAULT_SETTINGS), cues=AudioCues(player=FakePlayer()), size=(1280, 800))
    d.store.set_boot(True)
    return d


def mouse(kind, pos, button=1):
    if kind == pygame.MOUSEMOTION:
        return pygame.event.Event(kind, pos=pos, rel=(0, 0), buttons=(1, 0, 0), touch=False)
    return pygame.event.Event(kind, pos=pos, button=button, touch=False)


def test_input_is_ignored_before_boot(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    d = Desktop(settings=dict(DEFAULT_SETTINGS), cues=AudioCues(player=FakePlayer()))
    d.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (400, 750)))
    assert not d.store[WindowId.ABOUT].is_open


def test_dock_click_opens_window(desktop):
    desktop.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (400, 750)))
    assert desktop.store[WindowId.ABOUT].is_open
    assert desktop.store.focused() is WindowId.ABOUT
    assert desktop.cues.player.played[0] == 1000


def test_title_drag_moves_window(desktop):
    desktop.store.open(WindowId.ABOUT)
    desktop.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (400, 80)))
    desktop.handle_event(mouse(pygame.MOUSEMOTION, (500, 180)))
    desktop.update(0.016)
    assert desktop.store[WindowId.ABOUT].position == (180, 160)
    desktop.handle_event(mouse(pygame.MOUSEBUTTONUP, (500, 180)))
    assert desktop.store[WindowId.ABOUT].position == (180, 160)
    assert not desktop.controller.active


def test_losing_focus_ends_drag(desktop):
    desktop.store.open(WindowId.ABOUT)
    desktop.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (400, 80)))
    desktop.handle_event(mouse(pygame.MOUSEMOTION, (420, 100)))
    desktop.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
    assert desktop.store[WindowId.ABOUT].position == (100, 80)
    desktop.handle_event(mouse(pygame.MOUSEMOTION, (700, 400)))
    desktop.update(0.016)
    assert desktop.store[WindowId.ABOUT].position == (100, 80)


def test_close_button(desktop):
    desktop.store.open(WindowId.ABOUT)
    desktop.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (102, 80)))
    assert not desktop.store[WindowId.ABOUT].is_open


def test_ctrl_k_toggles_palette(desktop):
    key = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_k, mod=pygame.KMOD_LCTRL, unicode="k")
    desktop.handle_event(key)
    assert desktop.palette.is_open
    desktop.handle_event(key)
    assert not desktop.palette.is_open


def test_restart_recreates_store(desktop):
    desktop.store.open(WindowId.SKILLS)
    desktop.reset()
    assert not desktop.store.booted
    assert not desktop.store[WindowId.SKILLS].is_open


def finger(kind, x, y, finger_id=1):
    return pygame.event.Event(kind, touch_id=0, finger_id=finger_id, x=x, y=y, dx=0.0, dy=0.0, pressure=1.0)


def test_touch_drag_uses_the_same_session_as_mouse(desktop):
    desktop.store.open(WindowId.ABOUT)
    # (400, 80) and (500, 180) on a 1280x800 surface
    desktop.handle_event(finger(pygame.FINGERDOWN, 0.3125, 0.1))
    assert desktop.controller.active
    desktop.handle_event(finger(pygame.FINGERMOTION, 0.390625, 0.225))
    desktop.update(0.016)
    assert desktop.store[WindowId.ABOUT].position == (180, 160)
    desktop.handle_event(finger(pygame.FINGERUP, 0.390625, 0.225))
    assert not desktop.controller.active
    assert desktop.store[WindowId.ABOUT].position == (180, 160)


def test_west_handle_press_resizes_with_anchor_correction(desktop):
    desktop.store.open(WindowId.ABOUT)
    desktop.handle_event(mouse(pygame.MOUSEBUTTONDOWN, (81, 300)))
    assert desktop.controller.active
    desktop.handle_event(mouse(pygame.MOUSEMOTION, (681, 300)))
    desktop.update(0.016)
    desktop.handle_event(mouse(pygame.MOUSEBUTTONUP, (681, 300)))
    st = desktop.store[WindowId.ABOUT]
    assert st.size == (320, 520)
    assert st.position == (440, 60)
    assert not desktop.controller.active


def test_mobile_layout_starts_no_gesture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    d = Desktop(settings=dict(DEFAULT_SETTINGS), cues=AudioCues(player=FakePlayer()), size=(600, 800))
    d.store.set_boot(True)
    d.store.open(WindowId.ABOUT)
    # title bar, then the left border of the full-width mobile window
    for pos in ((300, 50), (13, 300)):
        d.handle_event(mouse(pygame.MOUSEBUTTONDOWN, pos))
        assert not d.controller.active
        d.handle_event(mouse(pygame.MOUSEMOTION, (400, 400)))
        d.update(0.016)
        d.handle_event(mouse(pygame.MOUSEBUTTONUP, (400, 400)))
    st = d.store[WindowId.ABOUT]
    assert st.position == (80, 60)
    assert st.size == (680, 520)


def test_welcome_toast_after_boot_and_dismiss(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    now = [0.0]
    d = Desktop(settings=dict(DEFAULT_SETTINGS), cues=AudioCues(player=FakePlayer()), size=(1280, 800),
                clock=lambda: now[0])
    d.update(0.016)
    assert not d.toast.visible and not d.widgets.visible
    d.store.set_boot(True)
    now[0] = 0.3
    d.update(0.016)
    assert not d.toast.visible
    now[0] = 1.0
    d.update(0.016)
    assert d.toast.visible and d.widgets.visible
    d.handle_event(mouse(pygame.MOUSEBUTTONDOWN, d.toast.close_rect(d.size).center))
    assert not d.toast.visible
    now[0] = 2.0
    d.update(0.016)
    assert not d.toast.visible
