"""Streamlit components for property listing cards."""

from __future__ import annotations

import html
from typing import Callable, Optional

import streamlit as st

from backend.models.property import Property


def format_price(price: float) -> str:
    return f"${price:,.0f}"


def status_badge(status: Optional[str]) -> str:
    label = (status or "Available").strip().lower().replace(" ", "-")
    return f"status-badge status-{label}"


def card_html(prop: Property) -> str:
    """Card markup with every listing field HTML-escaped."""

    featured = "<span class='featured-pill'>Featured</span>" if prop.is_featured else ""
    title = html.escape(prop.title)
    status = html.escape(prop.status)
    return f"""
        <div class="property-card">
            <img class="property-card__image" src="{html.escape(prop.image_url, quote=True)}" alt="{title}" />
            <div class="property-card__header">
                <span class="{html.escape(status_badge(prop.status), quote=True)}">{status}</span>
                {featured}
            </div>
            <h3>{title}</h3>
            <p class="property-card__address">{html.escape(prop.address)}</p>
            <p class="property-card__value">{format_price(prop.price)}</p>
            <p class="property-card__meta">{prop.bedrooms} bd · {prop.bathrooms} ba · {prop.sqft:,} sqft · {html.escape(prop.property_type or 'Property')}</p>
        </div>
    """


def render_property_card(
    prop: Property,
    is_favorite: bool,
    on_open: Callable[[], None],
    on_toggle_favorite: Callable[[], None],
    key: Optional[str] = None,
) -> None:
    key = key or str(prop.id)
    with st.container():
        st.markdown(card_html(prop), unsafe_allow_html=True)
        open_col, fav_col = st.columns([3, 1])
        with open_col:
            st.button("View details", key=f"open-{key}", on_click=on_open)
        with fav_col:
            st.button(
                "♥" if is_favorite else "♡",
                key=f"fav-{key}",
                on_click=on_toggle_favorite,
                help="Remove from favorites" if is_favorite else "Add to favorites",
            )
