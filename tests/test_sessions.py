import random

import pytest

from portfolio_os.config import MIN_H, MIN_W
from portfolio_os.pointer import Phase, PointerEvent
from portfolio_os.sessions import IDLE, Dragging, Edge, Geometry, Resizing, resize_geometry


def move(x, y):
    return PointerEvent(x, y, Phase.MOVE, "mouse")


def release(x, y):
    return PointerEvent(x, y, Phase.END, "mouse")


def resize(controller, scheduler, wid, edge, start, end):
    assert controller.begin_resize(wid, edge, start)
    controller.handle(move(*end))
    scheduler.tick()
    controller.handle(release(*end))


# ---------- resize ----------
def test_east_resize_grows_width_only(store, scheduler, controller):
    store.open("about")
    resize(controller, scheduler, "about", Edge.E, (760, 300), (810, 300))
    assert store["about"].size == (730, 520)
    assert store["about"].position == (80, 60)


def test_west_shrink_past_minimum_keeps_east_edge(store, scheduler, controller):
    store.open("about")
    resize(controller, scheduler, "about", Edge.W, (80, 300), (480, 300))
    st = store["about"]
    assert st.size.width == 320
    assert st.position.x == 440
    assert st.position.x + st.size.width == 80 + 680


def test_north_shrink_past_minimum_keeps_south_edge(store, scheduler, controller):
    store.open("about")
    resize(controller, scheduler, "about", Edge.N, (300, 60), (300, 460))
    st = store["about"]
    assert st.size.height == 200
    assert st.position.y == 380
    assert st.position.y + st.size.height == 60 + 520


def test_resized_geometry_survives_close_and_reopen(store, scheduler, controller):
    store.open("about")
    resize(controller, scheduler, "about", Edge.W, (80, 300), (480, 300))
    before = store["about"]
    store.close("about")
    store.open("about")
    assert store["about"].position == before.position == (440, 60)
    assert store["about"].size == before.size == (320, 520)


def test_west_grow_moves_anchor_left(store, scheduler, controller):
    store.open("about")
    resize(controller, scheduler, "about", Edge.W, (80, 300), (30, 300))
    assert store["about"].position == (30, 60)
    assert store["about"].size == (730, 520)


def test_north_grow_is_floored_at_menu_bar(store, scheduler, controller):
    store.open("about")
    resize(controller, scheduler, "about", Edge.N, (300, 60), (300, 0))
    assert store["about"].position.y == 28
    assert store["about"].size.height == 580


def test_south_east_corner_changes_size_not_position(store, scheduler, controller):
    store.open("projects")
    resize(controller, scheduler, "projects", Edge.SE, (850, 620), (900, 700))
    assert store["projects"].size == (750, 620)
    assert store["projects"].position == (150, 80)


def test_north_west_corner_clamps_both_axes(store, scheduler, controller):
    store.open("about")
    resize(controller, scheduler, "about", Edge.NW, (80, 60), (1000, 1000))
    st = store["about"]
    assert st.size == (MIN_W, MIN_H)
    assert st.position == (80 + 680 - MIN_W, 60 + 520 - MIN_H)


@pytest.mark.parametrize("edge", list(Edge))
def test_random_resize_traces_never_go_below_minimum(store, scheduler, controller, edge):
    rng = random.Random(edge.value)
    sizes = []
    store.subscribe(lambda wid, before, after: sizes.append(after.size))
    store.open("contact")
    st = store["contact"]
    start = (st.position.x + 5, st.position.y + 5)
    assert controller.begin_resize("contact", edge, start)
    for _ in range(200):
        controller.handle(move(rng.randint(-2000, 2000), rng.randint(-2000, 2000)))
        if rng.random() < 0.5:
            scheduler.tick()
    controller.handle(release(0, 0))
    assert sizes
    assert all(w >= MIN_W and h >= MIN_H for w, h in sizes)


def test_resize_geometry_only_touches_named_edges():
    start = Geometry(100, 100, 500, 400)
    assert resize_geometry(Edge.S, start, 40, 30) == Geometry(100, 100, 500, 430)
    assert resize_geometry(Edge.E, start, 40, 30) == Geometry(100, 100, 540, 400)
    assert resize_geometry(Edge.SW, start, 40, 30) == Geometry(140, 100, 460, 430)
    assert resize_geometry(Edge.NE, start, 40, 30) == Geometry(100, 130, 540, 370)


# ---------- drag ----------
def test_drag_moves_window_by_pointer_delta(store, scheduler, controller):
    store.open("about")
    assert controller.begin_drag("about", (100, 70))
    assert isinstance(controller.session, Dragging)
    controller.handle(move(400, 300))
    scheduler.tick()
    assert store["about"].position == (380, 290)
    controller.handle(release(400, 300))
    assert controller.session is IDLE


def test_drag_floors_y_and_leaves_x_unbounded(store, scheduler, controller):
    store.open("about")
    controller.begin_drag("about", (100, 70))
    controller.handle(move(-900, 5))
    scheduler.tick()
    assert store["about"].position == (-920, 28)


def test_drag_never_changes_size(store, scheduler, controller):
    store.open("game")
    size = store["game"].size
    rng = random.Random(3)
    controller.begin_drag("game", (150, 60))
    for _ in range(100):
        controller.handle(move(rng.randint(-500, 2000), rng.randint(-500, 2000)))
        scheduler.tick()
    controller.handle(release(10, 10))
    assert store["game"].size == size


def test_release_commits_last_position_without_waiting_for_frame(store, scheduler, controller):
    store.open("about")
    controller.begin_drag("about", (100, 70))
    controller.handle(move(200, 200))
    controller.handle(release(210, 210))
    assert store["about"].position == (190, 200)
    assert not controller.active
    # the frame that was already requested has nothing left to apply
    scheduler.tick()
    assert store["about"].position == (190, 200)


def test_moves_within_one_frame_write_once_with_latest(store, scheduler, controller):
    store.open("about")
    calls = []
    original = store.set_position

    def spy(wid, x, y):
        calls.append((x, y))
        original(wid, x, y)
    store.set_position = spy

    controller.begin_drag("about", (80, 60))
    for i in range(1, 11):
        controller.handle(move(80 + i, 60 + i * 2))
    assert calls == []
    scheduler.tick()
    assert calls == [(90, 80)]
    scheduler.tick()
    assert calls == [(90, 80)]


def test_press_focuses_window(store, controller):
    store.open("about")
    store.open("projects")
    controller.begin_drag("about", (100, 70))
    assert store.focused().value == "about"
    controller.release()
    controller.begin_resize("projects", Edge.S, (200, 620))
    assert store.focused().value == "projects"


# ---------- refused starts ----------
def test_sessions_refuse_maximized_windows(store, controller):
    store.open("about")
    store.toggle_maximize("about")
    order = store["about"].stack_order
    assert not controller.begin_drag("about", (100, 70))
    assert not controller.begin_resize("about", Edge.E, (760, 300))
    assert controller.session is IDLE
    assert store["about"].stack_order == order


def test_sessions_refuse_closed_windows(store, controller):
    assert not controller.begin_drag("resume", (120, 60))
    assert controller.session is IDLE


def test_moves_without_session_are_ignored(store, scheduler, controller):
    assert controller.handle(move(500, 500)) is False
    assert scheduler.pending() == 0


def test_new_press_ends_stuck_session(store, scheduler, controller):
    store.open("about")
    store.open("skills")
    controller.begin_drag("about", (100, 70))
    controller.handle(move(150, 90))
    controller.begin_resize("skills", Edge.E, (800, 300))
    assert isinstance(controller.session, Resizing)
    assert store["about"].position == (130, 80)
    controller.handle(move(850, 300))
    scheduler.tick()
    assert store["skills"].size.width == 650
    assert store["about"].position == (130, 80)


def test_release_without_session_is_harmless(controller):
    controller.release()
    assert controller.session is IDLE
