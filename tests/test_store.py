import random

from portfolio_os.registry import CATALOG, WindowId
from portfolio_os.store import Point, Size, WindowStore


def test_initial_state_is_closed_and_unbooted(store):
    assert store.top_stack_order == 1
    assert store.booted is False
    for wid in WindowId:
        st = store[wid]
        assert not st.is_open
        assert not st.is_maximized
        assert st.stack_order == 1
        assert st.position == Point(*CATALOG[wid].position)
        assert st.size == Size(*CATALOG[wid].size)
    assert store.focused() is None


def test_open_and_focus_scenarios(store):
    store.open("about")
    assert store["about"].is_open
    assert store["about"].stack_order == 2
    assert store.top_stack_order == 2

    store.open("projects")
    assert store["projects"].stack_order == 3
    assert store.top_stack_order == 3
    assert store.focused() is WindowId.PROJECTS

    store.focus("about")
    assert store["about"].stack_order == 4
    assert store.top_stack_order == 4
    assert store.focused() is WindowId.ABOUT
    assert store.is_active("about")
    assert not store.is_active("projects")


def test_open_on_open_window_refocuses(store):
    store.open(WindowId.ABOUT)
    store.open(WindowId.SKILLS)
    store.open(WindowId.ABOUT)
    assert store["about"].is_open
    assert store["about"].stack_order == 4
    assert store.focused() is WindowId.ABOUT


def test_focus_on_closed_window_is_noop(store):
    store.focus("contact")
    assert not store["contact"].is_open
    assert store["contact"].stack_order == 1
    assert store.top_stack_order == 1


def test_stacking_is_monotonic_and_unique_over_random_calls():
    store = WindowStore()
    rng = random.Random(7)
    ids = list(WindowId)
    assigned = []
    last_target = None
    for _ in range(300):
        wid = rng.choice(ids)
        op = rng.choice(["open", "focus", "close"])
        before_top = store.top_stack_order
        if op == "open":
            store.open(wid)
        elif op == "focus":
            store.focus(wid)
        else:
            store.close(wid)
        assert store.top_stack_order >= before_top
        if store.top_stack_order > before_top:
            order = store[wid].stack_order
            assert all(order > prev for prev in assigned)
            assigned.append(order)
            last_target = wid
        if store.focused() is not None and store[last_target].is_open:
            assert store.focused() is last_target


def test_close_clears_maximize_and_keeps_geometry(store):
    store.open("about")
    store.set_position("about", 300, 200)
    store.set_size("about", 900, 700)
    store.toggle_maximize("about")
    order = store["about"].stack_order
    store.close("about")
    st = store["about"]
    assert not st.is_open and not st.is_maximized
    assert st.position == (300, 200)
    assert st.size == (900, 700)
    assert st.stack_order == order

    store.open("about")
    assert store["about"].position == (300, 200)
    assert store["about"].size == (900, 700)


def test_set_size_clamps_to_minimum(store):
    store.set_size("skills", 10, -50)
    assert store["skills"].size == (320, 200)
    store.set_size("skills", 321, 199)
    assert store["skills"].size == (321, 200)


def test_set_position_floors_y_below_menu_bar(store):
    store.set_position("about", -500, 3)
    assert store["about"].position == (-500, 28)


def test_set_position_when_maximized_is_not_floored(store):
    store.open("about")
    store.toggle_maximize("about")
    store.set_position("about", 10, 0)
    assert store["about"].position == (10, 0)


def test_toggle_maximize_flips(store):
    store.toggle_maximize("game")
    assert store["game"].is_maximized
    store.toggle_maximize("game")
    assert not store["game"].is_maximized


def test_boot_gate_is_one_way(store):
    fired = []
    store.on_boot(lambda: fired.append(True))
    store.set_boot(True)
    store.set_boot(False)
    store.set_boot(True)
    assert store.booted is True
    assert fired == [True]


def test_subscribers_see_before_and_after(store):
    seen = []
    unsubscribe = store.subscribe(lambda wid, before, after: seen.append((wid, before.is_open, after.is_open)))
    store.open("contact")
    store.close("contact")
    unsubscribe()
    store.open("contact")
    assert seen == [(WindowId.CONTACT, False, True), (WindowId.CONTACT, True, False)]


def test_paint_order_lists_open_windows_bottom_first(store):
    store.open("about")
    store.open("resume")
    store.open("terminal")
    store.focus("about")
    store.close("resume")
    assert store.windows_in_paint_order() == [WindowId.TERMINAL, WindowId.ABOUT]
