import locale

import pytest

from car_table_browser.filter_and_sort import (
    FilterAndSort,
    accessor_for,
    compare_values,
    number_text,
)
from car_table_browser.query_state import SortDirection, SortKey


@pytest.fixture
def fs():
    return FilterAndSort()


def _matches(text, record):
    t = text.lower()
    return (not text
            or t in record["make"].lower()
            or t in record["model"].lower()
            or text in number_text(record["price"]))


# --- search -------------------------------------------------------------------


def test_empty_search_returns_dataset_unchanged(fs, cars):
    assert fs.search("", cars) is cars
    assert fs.search(None, cars) is cars


def test_search_is_case_insensitive_on_make(fs, cars):
    result = fs.search("HONDA", cars)
    assert [r["model"] for r in result] == ["Civic", "Accord"]


def test_search_matches_model(fs, cars):
    assert [r["make"] for r in fs.search("wrangler", cars)] == ["Jeep"]


def test_search_matches_price_digits(fs, cars):
    result = fs.search("995", cars)
    assert {r["price"] for r in result} == {31995, 27995}


def test_search_price_of_integral_float_has_no_fraction(fs):
    records = [{"make": "A", "model": "B", "price": 25000.0}]
    assert fs.search("25000", records) == records
    assert fs.search(".0", records) == []


@pytest.mark.parametrize("text", ["a", "o", "Mo", "2", "00", "x", "zzz", "3 S", "-"])
def test_search_keeps_exactly_the_matching_records_in_order(fs, cars, text):
    expected = [r for r in cars if _matches(text, r)]
    assert fs.search(text, cars) == expected


def test_search_ignores_fields_of_the_wrong_type(fs):
    records = [{"make": 123, "model": "X", "price": "abc"}]
    assert fs.search("abc", records) == []
    assert fs.search("x", records) == records


# --- accessors and comparison ---------------------------------------------------------


def test_accessor_for_resolves_case_insensitive():
    assert accessor_for("Price").name == "price"
    assert accessor_for(" make ").kind == "text"


@pytest.mark.parametrize("name", ["color", "", None, 3])
def test_accessor_for_unknown_is_none(name):
    assert accessor_for(name) is None


def test_compare_values():
    assert compare_values(1, 2) < 0
    assert compare_values(2.5, 2) > 0
    assert compare_values(3, 3.0) == 0
    assert compare_values("Audi", "BMW") == (locale.strcoll("Audi", "BMW") > 0) - (locale.strcoll("Audi", "BMW") < 0)


@pytest.mark.parametrize("a, b", [("a", 1), (1, "a"), (None, 1), ("x", None), (True, 1)])
def test_compare_values_mismatched_types_are_neutral(a, b):
    assert compare_values(a, b) == 0


# --- sort ------------------------------------------------------------------------


def test_sort_by_price_ascending_and_descending(fs, cars):
    up = fs.sort("price", cars, SortDirection.ASCENDING)
    down = fs.sort("price", cars, SortDirection.DESCENDING)
    assert [r["price"] for r in up] == sorted(r["price"] for r in cars)
    assert down == list(reversed(up))


@pytest.fixture
def c_collation():
    previous = locale.setlocale(locale.LC_COLLATE)
    locale.setlocale(locale.LC_COLLATE, "C")
    yield
    locale.setlocale(locale.LC_COLLATE, previous)


def test_sort_by_make_uses_locale_collation(fs, cars):
    result = fs.sort("make", cars)
    assert [r["make"] for r in result] == sorted((r["make"] for r in cars), key=locale.strxfrm)


def test_sort_by_model_in_c_collation_is_code_point_order(fs, c_collation):
    records = [{"make": "Lexus", "model": m, "price": 1} for m in ("es", "Elantra", "ES")]
    result = fs.sort("model", records)
    assert [r["model"] for r in result] == ["ES", "Elantra", "es"]


def test_sort_by_model_follows_the_locale_collation(fs, monkeypatch):
    def casefold_coll(a, b):
        a, b = a.casefold(), b.casefold()
        return (a > b) - (a < b)

    monkeypatch.setattr(locale, "strcoll", casefold_coll)
    records = [{"make": "Lexus", "model": m, "price": 1} for m in ("Elantra", "ES", "accord")]
    result = fs.sort("model", records)
    assert [r["model"] for r in result] == ["accord", "Elantra", "ES"]


def test_sort_does_not_touch_input(fs, cars):
    before = list(cars)
    fs.sort("price", cars, SortDirection.DESCENDING)
    assert cars == before


def test_sort_is_stable_in_both_directions(fs):
    records = [
        {"make": "Honda", "model": "Civic", "price": 1},
        {"make": "Audi", "model": "A4", "price": 2},
        {"make": "Honda", "model": "Accord", "price": 3},
    ]
    up = fs.sort("make", records, SortDirection.ASCENDING)
    down = fs.sort("make", records, SortDirection.DESCENDING)
    assert [r["model"] for r in up] == ["A4", "Civic", "Accord"]
    assert [r["model"] for r in down] == ["Civic", "Accord", "A4"]


def test_sort_with_mixed_types_does_not_raise(fs):
    records = [
        {"make": "A", "model": "a", "price": 3},
        {"make": "B", "model": "b", "price": "n/a"},
        {"make": "C", "model": "c", "price": 1},
    ]
    result = fs.sort("price", records)
    assert len(result) == 3
    assert sorted(map(id, result)) == sorted(map(id, records))


def test_sort_unknown_column_keeps_order(fs, cars):
    result = fs.sort("color", cars)
    assert result == cars
    assert result is not cars


def test_sort_by_keys_replays_history(fs):
    records = [
        {"make": "Honda", "model": "Civic", "price": 3},
        {"make": "Audi", "model": "A4", "price": 2},
        {"make": "Honda", "model": "Accord", "price": 1},
    ]
    keys = (SortKey("price", SortDirection.ASCENDING), SortKey("make", SortDirection.ASCENDING))
    result = fs.sort_by_keys(records, keys)
    # --- Hondas tie on make and keep the price order from the earlier sort
    assert [r["model"] for r in result] == ["A4", "Accord", "Civic"]


def test_sort_by_keys_without_history_returns_input(fs, cars):
    assert fs.sort_by_keys(cars, ()) is cars
