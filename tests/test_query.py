from datetime import datetime, timedelta, timezone

from backend.models.property import FilterCriteria, Property
from backend.services.query import (
    SORT_KEYS,
    filter_properties,
    paginate,
    resolve_sort_key,
    run_query,
    run_search,
    sort_properties,
)

NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)


def _prop(pid: int, **fields) -> Property:
    values = {
        "title": f"Listing {pid}",
        "price": 100000 * pid,
        "bedrooms": pid % 4,
        "bathrooms": 1,
        "sqft": 500 + pid * 10,
        "description": "",
        "address": f"{pid} Test Street",
        "property_type": "House",
        "status": "Available",
        "created_at": NOW - timedelta(days=pid),
        "updated_at": NOW - timedelta(days=pid),
    }
    values.update(fields)
    return Property(id=pid, **values)


def _ids(items):
    return [prop.id for prop in items]


def test_sort_keys_are_tagged_by_value_kind():
    assert SORT_KEYS["price"].kind == "numeric"
    assert SORT_KEYS["title"].kind == "text"
    assert SORT_KEYS["createdat"].kind == "date"
    assert resolve_sort_key("PRICE").name == "price"
    assert resolve_sort_key("unknown").name == "createdAt"
    assert resolve_sort_key(None).name == "createdAt"


def test_filters_combine_with_and():
    items = [
        _prop(1, price=200000, bedrooms=2),
        _prop(2, price=400000, bedrooms=3),
        _prop(3, price=600000, bedrooms=3),
    ]
    criteria = FilterCriteria(min_price=300000, min_bedrooms=3)
    assert _ids(filter_properties(items, criteria)) == [2, 3]
    criteria = FilterCriteria(min_price=300000, max_price=500000, min_bedrooms=3)
    assert _ids(filter_properties(items, criteria)) == [2]


def test_empty_text_criteria_are_ignored():
    items = [_prop(1), _prop(2, property_type="Condo")]
    criteria = FilterCriteria(property_type="", status="", search_term="")
    assert _ids(filter_properties(items, criteria)) == [1, 2]


def test_featured_false_is_a_real_filter():
    items = [_prop(1, is_featured=True), _prop(2)]
    assert _ids(filter_properties(items, FilterCriteria(is_featured=False))) == [2]
    assert _ids(filter_properties(items, FilterCriteria(is_featured=True))) == [1]


def test_search_term_uses_case_folding():
    items = [
        _prop(1, title="STRASSE Apartment"),
        _prop(2, description="Near the park"),
        _prop(3, address="9 Harbour Road"),
    ]
    assert _ids(filter_properties(items, FilterCriteria(search_term="straße"))) == [1]
    assert _ids(filter_properties(items, FilterCriteria(search_term="PARK"))) == [2]
    assert _ids(filter_properties(items, FilterCriteria(search_term="harbour"))) == [3]


def test_sort_is_stable_for_ties_in_both_directions():
    items = [_prop(1, price=300), _prop(2, price=100), _prop(3, price=300), _prop(4, price=100)]
    assert _ids(sort_properties(items, "price", "asc")) == [2, 4, 1, 3]
    assert _ids(sort_properties(items, "price", "desc")) == [1, 3, 2, 4]


def test_sort_direction_defaults_to_descending():
    items = [_prop(1), _prop(2), _prop(3)]
    assert _ids(sort_properties(items, "sqft", None)) == [3, 2, 1]
    assert _ids(sort_properties(items, "sqft", "ASC")) == [1, 2, 3]


def test_created_at_sort_orders_by_timestamp():
    items = [_prop(2), _prop(1), _prop(3)]
    assert _ids(sort_properties(items, "createdAt", "desc")) == [1, 2, 3]
    assert _ids(sort_properties(items, "createdAt", "asc")) == [3, 2, 1]


def test_paginate_reports_bounds():
    items = [_prop(pid) for pid in range(1, 13)]
    first = paginate(items, 1, 5)
    assert _ids(first.items) == [1, 2, 3, 4, 5]
    assert first.total_pages == 3
    assert first.has_next_page and not first.has_previous_page
    last = paginate(items, 3, 5)
    assert _ids(last.items) == [11, 12]
    assert not last.has_next_page and last.has_previous_page


def test_paginate_empty_sequence_has_one_page():
    result = paginate([], 1, 10)
    assert result.total_count == 0
    assert result.total_pages == 1
    assert result.items == []
    assert not result.has_next_page


def test_run_query_normalizes_paging():
    items = [_prop(pid) for pid in range(1, 4)]
    result = run_query(items, FilterCriteria(page=-1, page_size=1000))
    assert result.page == 1
    assert result.page_size == 100
    assert _ids(result.items) == [1, 2, 3]


def test_run_search_returns_everything_matching():
    items = [_prop(pid) for pid in range(1, 25)]
    results = run_search(items, FilterCriteria(min_price=1000000, sort_by="price", sort_order="asc"))
    assert _ids(results) == list(range(10, 25))
