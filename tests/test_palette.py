import pygame

from portfolio_os.palette import CommandPalette, ContextMenu, build_commands
from portfolio_os.registry import WindowId


def make_palette(store):
    urls = []
    palette = CommandPalette(build_commands(store, open_url=urls.append))
    palette.open()
    return palette, urls


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="")


def test_filter_is_case_insensitive_substring(store):
    palette, _ = make_palette(store)
    assert len(palette.filtered()) == 12
    palette.set_query("FLAPPY")
    assert [c.id for c in palette.filtered()] == ["game"]
    palette.set_query("go to")
    assert [c.id for c in palette.filtered()] == ["github", "linkedin"]
    palette.set_query("zzz")
    assert palette.filtered() == []
    assert palette.run_selected() is None


def test_enter_runs_selected_window_command_and_closes(store):
    palette, _ = make_palette(store)
    palette.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="open p"))
    palette.handle_event(key(pygame.K_RETURN))
    assert store[WindowId.PROJECTS].is_open
    assert not palette.is_open


def test_arrow_keys_clamp_selection(store):
    palette, _ = make_palette(store)
    palette.handle_event(key(pygame.K_UP))
    assert palette.selected == 0
    for _ in range(20):
        palette.handle_event(key(pygame.K_DOWN))
    assert palette.selected == 11
    palette.handle_event(pygame.event.Event(pygame.TEXTINPUT, text="e"))
    assert palette.selected == 0


def test_link_commands_open_urls(store):
    palette, urls = make_palette(store)
    palette.set_query("email")
    palette.run_selected()
    assert urls == ["mailto:akshaj32@gmail.com"]


def test_escape_and_backspace(store):
    palette, _ = make_palette(store)
    palette.set_query("ab")
    palette.handle_event(key(pygame.K_BACKSPACE))
    assert palette.query == "a"
    palette.handle_event(key(pygame.K_ESCAPE))
    assert not palette.is_open


def test_reopening_palette_resets_query(store):
    palette, _ = make_palette(store)
    palette.set_query("res")
    palette.toggle()
    palette.toggle()
    assert palette.is_open and palette.query == ""


def test_context_menu_open_and_close():
    calls = []
    menu = ContextMenu(lambda: calls.append("terminal"), calls.append, lambda: calls.append("restart"))
    menu.open_at((100, 100))
    assert menu.is_open
    assert menu.press((5000, 5000)) is False
    assert not menu.is_open
    assert calls == []
