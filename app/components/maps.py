"""Plotly map helpers for Streamlit UI."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import plotly.graph_objects as go

from backend.models.property import Property

BASE_LATITUDE = 40.7128
BASE_LONGITUDE = -74.006


def demo_coordinates(property_id: int, spread: int = 200) -> Tuple[float, float]:
    """Stable fake coordinates around New York derived from the listing id.

    Listings carry no coordinates, so the map spreads them deterministically.
    ``spread`` of 200 gives +/-0.1 degrees, 100 gives +/-0.05.
    """

    lat_offset = ((property_id * 7) % spread) / 1000 - spread / 2000
    lng_offset = ((property_id * 11) % spread) / 1000 - spread / 2000
    return BASE_LATITUDE + lat_offset, BASE_LONGITUDE + lng_offset


def _marker_series(properties: Sequence[Property], spread: int) -> tuple[list[float], list[float], list[str], list[int]]:
    lats: List[float] = []
    lngs: List[float] = []
    labels: List[str] = []
    ids: List[int] = []
    for prop in properties:
        lat, lng = demo_coordinates(prop.id, spread)
        lats.append(lat)
        lngs.append(lng)
        labels.append(f"{prop.title}<br>${prop.price:,.0f} · {prop.bedrooms} bd · {prop.bathrooms} ba")
        ids.append(prop.id)
    return lats, lngs, labels, ids


def render_listings_map(properties: Sequence[Property], height: int = 560, zoom: float = 10.5, spread: int = 200) -> go.Figure:
    lats, lngs, labels, ids = _marker_series(properties, spread)
    fig = go.Figure(
        go.Scattermap(
            lat=lats,
            lon=lngs,
            mode="markers",
            marker=dict(size=14, color="#1565C0"),
            text=labels,
            customdata=ids,
            hoverinfo="text",
            name="Listings",
        )
    )
    center_lat = sum(lats) / len(lats) if lats else BASE_LATITUDE
    center_lng = sum(lngs) / len(lngs) if lngs else BASE_LONGITUDE
    fig.update_layout(
        map=dict(style="open-street-map", center=dict(lat=center_lat, lon=center_lng), zoom=zoom),
        margin=dict(l=0, r=0, t=0, b=0),
        height=height,
        showlegend=False,
    )
    return fig


def render_property_map(prop: Property) -> go.Figure:
    return render_listings_map([prop], height=300, zoom=15, spread=100)
