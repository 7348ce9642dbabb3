"""Streamlit UI for browsing property listings."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping

import sys

import streamlit as st
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

load_dotenv(dotenv_path=ROOT_DIR / ".env", override=False)

from app.backend_client import ApiError, BackendClient
from app.components.about import render_about_page
from app.components.cards import format_price, render_property_card
from app.components.filters import render_filter_sidebar, render_quick_sort
from app.components.maps import render_listings_map, render_property_map
from app.components.pagination import render_pagination
from app.components.tables import render_facts_table, render_features
from app.favorites import FavoritesStore
from app.listing_view import favorites_only, filters_from_params, load_listing_page, page_from_params, sort_label
from backend.models.property import FilterCriteria, Property

st.set_page_config(page_title="Property Listings", layout="wide", page_icon="🏠")

MAP_LISTING_LIMIT = 50
FOOTER_HTML = "<p class='disclaimer'>Demo listings for illustration only. Coordinates are approximate.</p>"


@st.cache_resource(show_spinner=False)
def get_backend_client() -> BackendClient:
    return BackendClient()


def get_favorites() -> FavoritesStore:
    if "favorites" not in st.session_state:
        st.session_state["favorites"] = FavoritesStore()
    return st.session_state["favorites"]


def load_styles() -> None:
    css_path = Path(__file__).resolve().parent / "assets" / "styles.css"
    if css_path.exists():
        st.markdown(f"<style>{css_path.read_text()}</style>", unsafe_allow_html=True)


def current_params() -> Dict[str, str]:
    return {key: st.query_params.get(key) for key in st.query_params.keys()}


def set_params(params: Mapping[str, str]) -> None:
    st.query_params.from_dict(dict(params))


def navigate_to(property_id: int) -> None:
    set_params({"property_id": str(property_id)})


def navigate_view(view: str) -> None:
    set_params({"view": view} if view != "home" else {})


def set_page(page: int) -> None:
    params = current_params()
    params["page"] = str(page)
    set_params(params)


def show_error(error: ApiError, retry_key: str) -> None:
    st.error(error.message)
    for detail in error.errors:
        st.caption(detail)
    st.button("Try Again", key=retry_key)


def render_nav() -> None:
    cols = st.columns([1, 1, 1, 1, 4])
    cols[0].button("Home", on_click=navigate_view, args=("home",))
    cols[1].button("Listings", on_click=navigate_view, args=("listings",))
    cols[2].button("Map View", on_click=navigate_view, args=("map",))
    cols[3].button("About", on_click=navigate_view, args=("about",))


def render_grid(properties: List[Property], favorites: FavoritesStore, columns: int = 3) -> None:
    cols = st.columns(columns)
    for idx, prop in enumerate(properties):
        with cols[idx % columns]:
            render_property_card(
                prop,
                favorites.contains(prop.id),
                on_open=lambda pid=prop.id: navigate_to(pid),
                on_toggle_favorite=lambda pid=prop.id: favorites.toggle(pid),
                key=str(prop.id),
            )


def render_home_page() -> None:
    st.title("Find Your Dream Home")
    st.caption("Browse our curated selection of properties and save the ones you love.")
    st.subheader("Featured Properties")
    backend = get_backend_client()
    try:
        featured = backend.get_featured_listings()
    except ApiError as exc:
        show_error(exc, "retry-featured")
        return
    if not featured:
        st.info("No featured properties found.")
        return
    render_grid(featured, get_favorites())


def render_listing_page() -> None:
    backend = get_backend_client()
    favorites = get_favorites()
    params = current_params()

    updated = render_filter_sidebar(params, len(favorites))
    if updated is not None:
        set_params({"view": "listings", **updated})
        st.rerun()

    title_col, sort_col = st.columns([3, 1])
    with title_col:
        st.title("Property Listings")
    with sort_col:
        resorted = render_quick_sort(params)
        if resorted is not None:
            set_params(resorted)
            st.rerun()

    filters = filters_from_params(params)
    showing_favorites = favorites_only(params)
    requested_page = page_from_params(params)
    try:
        with st.spinner("Loading listings..."):
            page = load_listing_page(backend, filters, requested_page, favorites.ids(), showing_favorites)
    except ApiError as exc:
        show_error(exc, "retry-listings")
        return

    if page.page_corrected:
        params["page"] = str(page.current_page)
        set_params(params)

    if not page.items:
        if showing_favorites:
            st.subheader("No favorite properties")
            st.write(
                "You haven't saved any properties as favorites yet. "
                "Browse our listings and click the heart icon to save your favorites."
            )
        else:
            st.subheader("No properties found")
            st.write("Try adjusting your filters to find more properties.")
        return

    info_col, sort_info_col = st.columns([3, 1])
    info_col.caption(f"Showing {len(page.items)} of {page.total_count} properties")
    sort_info_col.caption(f"Sorted by: {sort_label(filters.sort_by, filters.sort_order)}")

    render_grid(page.items, favorites)
    render_pagination(page.current_page, page.total_pages, set_page)


def render_detail_page(property_id: int) -> None:
    backend = get_backend_client()
    favorites = get_favorites()
    st.button("← Back to listings", on_click=navigate_view, args=("listings",))
    try:
        prop = backend.get_listing(property_id)
    except ApiError as exc:
        if exc.status == 404:
            st.subheader("Property Not Found")
            st.write("Sorry, we couldn't find the property you're looking for.")
            return
        show_error(exc, "retry-detail")
        return

    header_col, price_col = st.columns([3, 1])
    with header_col:
        st.markdown(f"## {prop.title}")
        st.caption(prop.address)
    with price_col:
        st.metric("Price", format_price(prop.price))
        is_favorite = favorites.contains(prop.id)
        st.button(
            "♥ Saved" if is_favorite else "♡ Save",
            key=f"detail-fav-{prop.id}",
            on_click=favorites.toggle,
            args=(prop.id,),
        )

    gallery = prop.image_urls or ([prop.image_url] if prop.image_url else [])
    if gallery:
        image_index = st.slider("Photo", 1, len(gallery), 1) if len(gallery) > 1 else 1
        st.image(gallery[image_index - 1], width="stretch")

    info_col, map_col = st.columns([3, 2])
    with info_col:
        st.subheader("Description")
        st.write(prop.description)
        st.subheader("Features")
        render_features(prop.features)
    with map_col:
        st.subheader("Details")
        render_facts_table(prop)
        st.subheader("Location")
        st.plotly_chart(render_property_map(prop), width="stretch")


def render_not_found_page() -> None:
    st.title("Page Not Found")
    st.write("Sorry, we couldn't find the page you're looking for.")
    st.button("Back to Listings", on_click=navigate_view, args=("listings",))


def render_map_page() -> None:
    st.title("Map View")
    backend = get_backend_client()
    try:
        result = backend.get_listings(FilterCriteria(page_size=MAP_LISTING_LIMIT))
    except ApiError as exc:
        show_error(exc, "retry-map")
        return
    st.plotly_chart(render_listings_map(result.items), width="stretch")
    st.caption(f"{len(result.items)} properties shown")
    for prop in result.items:
        st.button(f"{prop.title} · {format_price(prop.price)}", key=f"map-open-{prop.id}", on_click=navigate_to, args=(prop.id,))


load_styles()
render_nav()
params = st.query_params
property_id = params.get("property_id")
view = params.get("view", "home")

if property_id is not None:
    if property_id.isdigit() and int(property_id) > 0:
        render_detail_page(int(property_id))
    else:
        render_not_found_page()
elif view == "listings":
    render_listing_page()
elif view == "map":
    render_map_page()
elif view == "about":
    render_about_page()
elif view == "home":
    render_home_page()
else:
    render_not_found_page()

st.markdown(FOOTER_HTML, unsafe_allow_html=True)
