import math

import pytest

from car_table_browser.query_state import QueryState, SortDirection
from car_table_browser.table_controller import TableController, derive


def _type(controller, clock, text, gap=50):
    """Type text one key at a time, gap ms apart."""
    for i in range(1, len(text) + 1):
        controller.on_search_text_changed(text[:i])
        clock.advance(gap)


# --- derive --------------------------------------------------------------------


def test_derive_initial_view(cars):
    view = derive(cars, QueryState())
    assert view.total_pages == 3
    assert view.page_records == tuple(cars[:10])
    assert view.filtered_records == tuple(cars)


def test_derive_filters_before_sorting_and_paging(cars):
    state = QueryState(search_text="o", page_index=1, page_size=5).with_sort("price")
    view = derive(cars, state)
    filtered = [r for r in cars if "o" in r["make"].lower() or "o" in r["model"].lower()]
    ordered = sorted(filtered, key=lambda r: r["price"])
    assert view.filtered_records == tuple(filtered)
    assert view.sorted_records == tuple(ordered)
    assert view.page_records == tuple(ordered[5:10])
    assert view.total_pages == math.ceil(len(filtered) / 5)


def test_derive_is_pure(cars):
    state = QueryState(search_text="a").with_sort("make")
    assert derive(cars, state) == derive(cars, state)


# --- initial state ---------------------------------------------------------------


def test_initial_controller(controller, cars):
    assert controller.current_page == 0
    assert controller.total_pages == 3
    assert controller.visible_page == tuple(cars[:10])
    assert controller.sort_attribute is None
    assert controller.sort_direction is None


def test_bad_page_size_raises(cars):
    with pytest.raises(ValueError):
        TableController(cars, _page_size=0)


# --- search -----------------------------------------------------------------------


def test_search_honda_after_debounce(controller, clock):
    controller.on_search_text_changed("honda")
    assert controller.tick() is False
    clock.advance(300)
    assert controller.tick() is True
    assert [r["model"] for r in controller.visible_page] == ["Civic", "Accord"]
    assert controller.total_pages == 1
    assert controller.current_page == 0


def test_search_runs_once_for_a_burst(controller, clock):
    seen = []
    controller.subscribe(seen.append)
    _type(controller, clock, "honda")
    clock.advance(300)
    controller.tick()
    controller.tick()
    assert len(seen) == 1
    assert controller.search_text == "honda"


def test_search_pending_until_window_passes(controller, clock):
    controller.on_search_text_changed("kia")
    assert controller.search_pending
    assert controller.search_text == ""
    clock.advance(300)
    controller.tick()
    assert not controller.search_pending
    assert controller.search_text == "kia"


def test_same_search_twice_runs_once(controller, clock):
    seen = []
    controller.subscribe(seen.append)
    controller.on_search_text_changed("ford")
    clock.advance(300)
    controller.tick()
    controller.on_search_text_changed("ford")
    clock.advance(300)
    assert controller.tick() is False
    assert len(seen) == 1


def test_flush_search(controller):
    controller.on_search_text_changed("tesla")
    assert controller.flush_search()
    assert [r["make"] for r in controller.visible_page] == ["Tesla"]


def test_set_search_text_applies_right_away(controller):
    controller.set_search_text("jeep")
    assert controller.total_pages == 1
    assert controller.visible_page[0]["model"] == "Wrangler"


def test_search_recomputes_total_pages(controller, cars):
    controller.set_search_text("a")
    expected = [r for r in cars if "a" in r["make"].lower() or "a" in r["model"].lower()]
    assert controller.total_pages == math.ceil(len(expected) / 10)
    controller.set_search_text("")
    assert controller.total_pages == 3


def test_search_with_no_match(controller):
    controller.set_search_text("zzz")
    assert controller.visible_page == ()
    assert controller.total_pages == 0
    controller.on_next_page()
    controller.on_jump_to_page(0)
    assert controller.current_page == 0


def test_search_clamps_page(controller):
    controller.on_jump_to_page(2)
    controller.set_search_text("honda")
    assert controller.current_page == 0
    assert len(controller.visible_page) == 2


def test_lazy_clamp_keeps_page(cars, clock):
    controller = TableController(cars, _clock=clock, _clamp_on_change=False)
    controller.on_jump_to_page(2)
    controller.set_search_text("honda")
    assert controller.current_page == 2
    assert controller.visible_page == ()
    assert controller.total_pages == 1
    controller.on_next_page()
    assert controller.current_page == 2


# --- sort -------------------------------------------------------------------------


def test_sort_twice_reverses(controller):
    controller.on_sort_requested("price")
    first = controller.view.sorted_records
    assert controller.sort_direction is SortDirection.ASCENDING
    controller.on_sort_requested("price")
    assert controller.sort_direction is SortDirection.DESCENDING
    assert controller.view.sorted_records == tuple(reversed(first))


def test_sort_twice_reverses_visible_page_of_filtered_set(controller):
    controller.set_search_text("honda")
    controller.on_sort_requested("price")
    first = controller.visible_page
    controller.on_sort_requested("price")
    assert controller.visible_page == tuple(reversed(first))


def test_sort_applies_to_filtered_records(controller):
    controller.set_search_text("o")
    controller.on_sort_requested("price")
    prices = [r["price"] for r in controller.view.sorted_records]
    assert prices == sorted(prices)
    assert len(prices) == controller.view.match_count


def test_sort_survives_page_change(controller):
    controller.on_sort_requested("price")
    controller.on_next_page()
    page0 = derive(controller.dataset, controller.state.with_page(0)).page_records
    assert max(r["price"] for r in page0) < min(r["price"] for r in controller.visible_page)


def test_sort_survives_new_search(controller):
    controller.on_sort_requested("price")
    controller.on_sort_requested("price")
    controller.set_search_text("honda")
    assert [r["model"] for r in controller.visible_page] == ["Accord", "Civic"]


def test_sort_keeps_page(controller):
    controller.on_next_page()
    controller.on_sort_requested("make")
    assert controller.current_page == 1


def test_sort_unknown_column_is_noop(controller):
    seen = []
    controller.subscribe(seen.append)
    before = controller.state
    controller.on_sort_requested("color")
    assert controller.state is before
    assert seen == []


def test_sort_column_name_is_case_insensitive(controller):
    controller.on_sort_requested("PRICE")
    assert controller.sort_attribute == "price"


# --- pages ------------------------------------------------------------------------


def test_next_page_three_times_stops_on_last(controller):
    controller.on_next_page()
    controller.on_next_page()
    controller.on_next_page()
    assert controller.current_page == 2
    assert len(controller.visible_page) == 5


def test_previous_page_on_first_is_noop(controller):
    controller.on_previous_page()
    assert controller.current_page == 0


def test_previous_page(controller, cars):
    controller.on_next_page()
    controller.on_previous_page()
    assert controller.visible_page == tuple(cars[:10])


@pytest.mark.parametrize("raw", [5, 3, -1, "abc", None, "1.5", "", "1_0", "\u0661"])
def test_jump_to_invalid_page_is_noop(controller, raw):
    controller.on_next_page()
    controller.on_jump_to_page(raw)
    assert controller.current_page == 1


@pytest.mark.parametrize("raw", ["1_0", "+1_0", "\u0661\u0662"])
def test_jump_ignores_text_python_int_would_accept(cars, raw):
    controller = TableController(cars, _page_size=1)
    controller.on_jump_to_page(raw)
    assert controller.current_page == 0


def test_page_change_keeps_applied_search_while_typing(controller, clock, cars):
    controller.on_search_text_changed("kia")
    controller.on_next_page()
    assert controller.search_pending
    assert controller.search_text == ""
    assert controller.visible_page == tuple(cars[10:20])
    clock.advance(300)
    controller.tick()
    assert controller.search_text == "kia"
    assert controller.current_page == 0


def test_jump_to_page(controller, cars):
    controller.on_jump_to_page("2")
    assert controller.current_page == 2
    assert controller.visible_page == tuple(cars[20:])


def test_jump_to_page_one_based(controller):
    controller.on_jump_to_page("3", _one_based=True)
    assert controller.current_page == 2
    controller.on_jump_to_page("0", _one_based=True)
    assert controller.current_page == 2


def test_first_and_last_page(controller):
    controller.on_last_page()
    assert controller.current_page == 2
    controller.on_first_page()
    assert controller.current_page == 0


# --- listeners ----------------------------------------------------------------------


def test_subscribe_and_unsubscribe(controller):
    seen = []
    unsubscribe = controller.subscribe(seen.append)
    controller.on_next_page()
    assert seen == [controller.view]
    unsubscribe()
    controller.on_next_page()
    assert len(seen) == 1


def test_noop_navigation_does_not_publish(controller):
    seen = []
    controller.subscribe(seen.append)
    controller.on_previous_page()
    controller.on_jump_to_page(9)
    assert seen == []
