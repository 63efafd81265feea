"""Catalog Handlers — raw dict input validated before core is called.

Tests cover:
    - top_rated returns ok + filtered plain dicts (default and custom threshold)
    - top_rated threshold falls back to settings
    - most_expensive returns ok + product dict, or None for empty input
    - Invalid input returns VALIDATION_ERROR dict with field, never raises
"""

import pytest

from drills.services.handle_catalog import most_expensive, top_rated


BOOKS = [
    {"title": "Book A", "rating": 4.5},
    {"title": "Book B", "rating": 3.2},
    {"title": "Book C", "rating": 5.0},
]


# ─── top_rated ───────────────────────────────────────────────────

def test_top_rated_filters_books():
    result = top_rated(BOOKS)
    assert result["status"] == "ok"
    assert result["min_rating"] == 4.0
    assert result["items"] == [
        {"title": "Book A", "rating": 4.5},
        {"title": "Book C", "rating": 5.0},
    ]


def test_top_rated_custom_threshold():
    result = top_rated(BOOKS, min_rating=3.0)
    assert [i["title"] for i in result["items"]] == ["Book A", "Book B", "Book C"]


def test_top_rated_threshold_from_settings(monkeypatch):
    from drills.config import get_settings
    monkeypatch.setenv("DRILLS_MIN_RATING", "5")
    get_settings.cache_clear()
    result = top_rated(BOOKS)
    assert [i["title"] for i in result["items"]] == ["Book C"]


def test_top_rated_empty():
    assert top_rated([]) == {"status": "ok", "min_rating": 4.0, "items": []}


def test_top_rated_missing_rating():
    result = top_rated([{"title": "Book A"}])
    assert result["status"] == "error"
    assert result["error_code"] == "VALIDATION_ERROR"
    assert result["field"] == "0.rating"
    assert result["exercise"] == "top_rated"


def test_top_rated_rating_out_of_range():
    result = top_rated([BOOKS[0], {"title": "Book X", "rating": 6}])
    assert result["status"] == "error"
    assert result["field"] == "1.rating"
    assert result["message"].startswith("Item 1:")


def test_top_rated_non_dict_entry():
    result = top_rated(["not a book"])
    assert result["status"] == "error"
    assert result["field"].startswith("0.")


# ─── most_expensive ──────────────────────────────────────────────

def test_most_expensive_picks_max():
    result = most_expensive([
        {"name": "Pen", "price": 10},
        {"name": "Notebook", "price": 25},
        {"name": "Bag", "price": 50},
    ])
    assert result == {"status": "ok", "product": {"name": "Bag", "price": 50.0}}


def test_most_expensive_empty_is_none():
    assert most_expensive([]) == {"status": "ok", "product": None}


def test_most_expensive_free_product_is_returned():
    result = most_expensive([{"name": "Sample", "price": 0}])
    assert result["product"] == {"name": "Sample", "price": 0.0}


def test_most_expensive_negative_price():
    result = most_expensive([{"name": "Refund", "price": -5}])
    assert result["status"] == "error"
    assert result["error_code"] == "VALIDATION_ERROR"
    assert result["field"] == "0.price"


def test_most_expensive_blank_name():
    result = most_expensive([{"name": "   ", "price": 5}])
    assert result["status"] == "error"
    assert result["field"] == "0.name"


# ─── Malformed payloads ──────────────────────────────────────────
@pytest.mark.parametrize("payload", [None, 42, "Book A", {"title": "Book A", "rating": 5}])
def test_top_rated_non_list_payload(payload):
    result = top_rated(payload)
    assert result["status"] == "error"
    assert result["error_code"] == "VALIDATION_ERROR"
    assert result["field"] == "__root__"


@pytest.mark.parametrize("payload", [None, 3.5])
def test_most_expensive_non_list_payload(payload):
    result = most_expensive(payload)
    assert result["status"] == "error"
    assert result["field"] == "__root__"
    assert result["exercise"] == "most_expensive"


def test_top_rated_accepts_tuples():
    result = top_rated(tuple(BOOKS))
    assert [i["title"] for i in result["items"]] == ["Book A", "Book C"]


@pytest.mark.parametrize("threshold", ["4", [4], True, float("nan")])
def test_top_rated_invalid_threshold(threshold):
    result = top_rated(BOOKS, min_rating=threshold)
    assert result["status"] == "error"
    assert result["error_code"] == "VALIDATION_ERROR"
    assert result["field"] == "min_rating"
