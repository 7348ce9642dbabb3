"""Filter, sort and paginate listings.

This module is shared by the API service and the Streamlit favorites view so
both apply identical ordering. Nothing here raises for odd criteria: unknown
sort fields fall back to creation time, unknown directions sort descending and
page values are clamped by ``FilterCriteria.normalized``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Literal, Optional, Sequence, Union

from ..models.property import DEFAULT_SORT_BY, FilterCriteria, PaginatedResult, Property

SortValue = Union[float, str, datetime]


@dataclass(frozen=True)
class SortKey:
    """A sortable listing attribute tagged with how its values compare."""

    name: str
    kind: Literal["numeric", "text", "date"]
    getter: Callable[[Property], SortValue]

    def value(self, prop: Property) -> SortValue:
        raw = self.getter(prop)
        if self.kind == "numeric":
            return float(raw)
        if self.kind == "text":
            return fold(str(raw))
        return raw


SORT_KEYS: Dict[str, SortKey] = {
    key.name.lower(): key
    for key in (
        SortKey("price", "numeric", lambda p: p.price),
        SortKey("bedrooms", "numeric", lambda p: p.bedrooms),
        SortKey("bathrooms", "numeric", lambda p: p.bathrooms),
        SortKey("sqft", "numeric", lambda p: p.sqft),
        SortKey("title", "text", lambda p: p.title),
        SortKey("createdAt", "date", lambda p: p.created_at),
    )
}


def fold(value: str) -> str:
    return value.casefold()


def resolve_sort_key(sort_by: Optional[str]) -> SortKey:
    return SORT_KEYS.get((sort_by or "").lower(), SORT_KEYS[DEFAULT_SORT_BY.lower()])


def is_ascending(sort_order: Optional[str]) -> bool:
    return (sort_order or "").lower() == "asc"


def _in_range(value: float, minimum: Optional[float], maximum: Optional[float]) -> bool:
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def matches(prop: Property, criteria: FilterCriteria) -> bool:
    """True when ``prop`` satisfies every criterion that is set."""

    if not _in_range(prop.price, criteria.min_price, criteria.max_price):
        return False
    if not _in_range(prop.bedrooms, criteria.min_bedrooms, criteria.max_bedrooms):
        return False
    if not _in_range(prop.bathrooms, criteria.min_bathrooms, criteria.max_bathrooms):
        return False
    if not _in_range(prop.sqft, criteria.min_sqft, criteria.max_sqft):
        return False
    if criteria.property_type and fold(prop.property_type) != fold(criteria.property_type):
        return False
    if criteria.status and fold(prop.status) != fold(criteria.status):
        return False
    if criteria.is_featured is not None and prop.is_featured != criteria.is_featured:
        return False
    if criteria.search_term:
        term = fold(criteria.search_term)
        if not any(term in fold(text) for text in (prop.title, prop.description, prop.address)):
            return False
    return True


def filter_properties(items: Iterable[Property], criteria: FilterCriteria) -> List[Property]:
    return [prop for prop in items if matches(prop, criteria)]


def sort_properties(items: Sequence[Property], sort_by: Optional[str], sort_order: Optional[str]) -> List[Property]:
    key = resolve_sort_key(sort_by)
    if is_ascending(sort_order):
        return sorted(items, key=key.value)
    # reverse=True keeps equal keys in their original order
    return sorted(items, key=key.value, reverse=True)


def total_pages_for(total_count: int, page_size: int) -> int:
    return max(1, math.ceil(total_count / page_size))


def paginate(items: Sequence[Property], page: int, page_size: int) -> PaginatedResult[Property]:
    total_count = len(items)
    total_pages = total_pages_for(total_count, page_size)
    start = (page - 1) * page_size
    return PaginatedResult[Property](
        items=list(items[start:start + page_size]),
        total_count=total_count,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_previous_page=page > 1,
    )


def run_search(items: Iterable[Property], criteria: FilterCriteria) -> List[Property]:
    matched = filter_properties(items, criteria)
    return sort_properties(matched, criteria.sort_by, criteria.sort_order)


def run_query(items: Iterable[Property], criteria: FilterCriteria) -> PaginatedResult[Property]:
    criteria = criteria.normalized()
    ordered = run_search(items, criteria)
    return paginate(ordered, criteria.page, criteria.page_size)


__all__ = [
    "SortKey",
    "SORT_KEYS",
    "resolve_sort_key",
    "is_ascending",
    "matches",
    "filter_properties",
    "sort_properties",
    "total_pages_for",
    "paginate",
    "run_search",
    "run_query",
]
