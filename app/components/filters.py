"""Filter sidebar and quick sort controls.

Both write their state into URL query params, which are the single source of
truth for what the listings grid shows.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

import streamlit as st

from app.listing_view import SORT_OPTIONS
from backend.utils.coerce import to_int

PRICE_SLIDER_MAX = 2_000_000
PRICE_SLIDER_STEP = 10_000
ROOM_CHOICES = ["any", "1", "2", "3", "4", "5"]


def _get(params: Mapping[str, object], key: str, default: str = "") -> str:
    value = params.get(key)
    if isinstance(value, list):
        value = value[0] if value else None
    return default if value in (None, "") else str(value)


def build_filter_params(
    min_price: Optional[int],
    max_price: Optional[int],
    bedrooms: str,
    bathrooms: str,
    sort_value: str,
    favorites_only: bool,
) -> Dict[str, str]:
    """Query params for an applied filter set; always resets to page 1."""

    params: Dict[str, str] = {}
    if min_price:
        params["minPrice"] = str(min_price)
    if max_price:
        params["maxPrice"] = str(max_price)
    if bedrooms != "any":
        params["bedrooms"] = bedrooms
    if bathrooms != "any":
        params["bathrooms"] = bathrooms
    if sort_value != "createdAt-desc":
        sort_by, sort_order = sort_value.split("-", 1)
        params["sortBy"] = sort_by
        params["sortOrder"] = sort_order
    if favorites_only:
        params["favoritesOnly"] = "true"
    params["page"] = "1"
    return params


def with_sort(params: Mapping[str, object], sort_value: str) -> Dict[str, str]:
    """Copy of ``params`` with a new sort, back on page 1."""

    updated = {key: _get(params, key) for key in params}
    sort_by, sort_order = sort_value.split("-", 1)
    updated["sortBy"] = sort_by
    updated["sortOrder"] = sort_order
    updated["page"] = "1"
    return updated


def current_sort_value(params: Mapping[str, object]) -> str:
    value = f"{_get(params, 'sortBy', 'createdAt')}-{_get(params, 'sortOrder', 'desc')}"
    return value if value in SORT_OPTIONS else "createdAt-desc"


def render_filter_sidebar(params: Mapping[str, object], favorites_count: int) -> Optional[Dict[str, str]]:
    """Draw the sidebar; return new query params when the user applies or resets."""

    sort_keys = list(SORT_OPTIONS)
    with st.sidebar:
        st.header("Filter Properties")
        with st.form("filters"):
            sort_value = st.selectbox(
                "Sort By",
                sort_keys,
                index=sort_keys.index(current_sort_value(params)),
                format_func=SORT_OPTIONS.get,
            )
            min_default = to_int(_get(params, "minPrice")) or 0
            max_default = to_int(_get(params, "maxPrice")) or PRICE_SLIDER_MAX
            price_range = st.slider(
                "Price Range",
                min_value=0,
                max_value=PRICE_SLIDER_MAX,
                value=(min(min_default, PRICE_SLIDER_MAX), min(max_default, PRICE_SLIDER_MAX)),
                step=PRICE_SLIDER_STEP,
                format="$%d",
            )
            bedrooms = st.selectbox(
                "Bedrooms",
                ROOM_CHOICES,
                index=ROOM_CHOICES.index(_get(params, "bedrooms", "any")) if _get(params, "bedrooms", "any") in ROOM_CHOICES else 0,
                format_func=lambda v: "Any" if v == "any" else f"{v}+",
            )
            bathrooms = st.selectbox(
                "Bathrooms",
                ROOM_CHOICES,
                index=ROOM_CHOICES.index(_get(params, "bathrooms", "any")) if _get(params, "bathrooms", "any") in ROOM_CHOICES else 0,
                format_func=lambda v: "Any" if v == "any" else f"{v}+",
            )
            favorites_only = st.checkbox(
                f"Show favorites only ({favorites_count})",
                value=_get(params, "favoritesOnly") == "true",
            )
            apply_col, reset_col = st.columns(2)
            applied = apply_col.form_submit_button("Apply Filters", type="primary")
            reset = reset_col.form_submit_button("Reset")

    if reset:
        return {}
    if applied:
        min_price, max_price = price_range
        return build_filter_params(
            min_price or None,
            max_price if max_price < PRICE_SLIDER_MAX else None,
            bedrooms,
            bathrooms,
            sort_value,
            favorites_only,
        )
    return None


def render_quick_sort(params: Mapping[str, object]) -> Optional[Dict[str, str]]:
    sort_keys = list(SORT_OPTIONS)
    current = current_sort_value(params)
    choice = st.selectbox(
        "Sort",
        sort_keys,
        index=sort_keys.index(current),
        format_func=SORT_OPTIONS.get,
        key="quick-sort",
        label_visibility="collapsed",
    )
    if choice != current:
        return with_sort(params, choice)
    return None
