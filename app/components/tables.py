"""Tabular components for listing details."""

from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from backend.models.property import Property


def _fmt_currency(value: float) -> str:
    return f"${value:,.0f}"


def _fmt_number(value: int) -> str:
    return f"{value:,}"


def listing_facts(prop: Property) -> List[dict]:
    return [
        {"Fact": "Price", "Value": _fmt_currency(prop.price)},
        {"Fact": "Bedrooms", "Value": _fmt_number(prop.bedrooms)},
        {"Fact": "Bathrooms", "Value": _fmt_number(prop.bathrooms)},
        {"Fact": "Square Feet", "Value": _fmt_number(prop.sqft)},
        {"Fact": "Property Type", "Value": prop.property_type or "—"},
        {"Fact": "Status", "Value": prop.status or "—"},
        {"Fact": "Listed", "Value": prop.created_at.date().isoformat()},
        {"Fact": "Updated", "Value": prop.updated_at.date().isoformat()},
    ]


def render_facts_table(prop: Property) -> None:
    df = pd.DataFrame(listing_facts(prop))
    st.dataframe(df, hide_index=True, width="stretch")


def render_features(features: List[str]) -> None:
    if not features:
        st.info("No features listed for this property.")
        return
    columns = st.columns(2)
    for idx, feature in enumerate(features):
        with columns[idx % 2]:
            st.markdown(f"- {feature}")
