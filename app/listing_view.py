"""Turn URL query params into the page of listings the grid shows.

Normal browsing is paginated by the API. Favorites-only browsing cannot be,
because favorites live on the client: one oversized page is fetched with the
regular filters and the favorites subset is sorted and paginated locally with
the same query helpers the API uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

from backend.models.property import DEFAULT_SORT_BY, DEFAULT_SORT_ORDER, MAX_PAGE_SIZE, FilterCriteria, Property
from backend.services.query import paginate, sort_properties, total_pages_for
from backend.utils.coerce import to_int
from backend.utils.logging import get_logger

LOGGER = get_logger("app.listing_view")

GRID_PAGE_SIZE = 6

SORT_OPTIONS = {
    "createdAt-desc": "Newest First",
    "createdAt-asc": "Oldest First",
    "price-asc": "Price: Low to High",
    "price-desc": "Price: High to Low",
    "bedrooms-desc": "Most Bedrooms",
    "bedrooms-asc": "Fewest Bedrooms",
    "bathrooms-desc": "Most Bathrooms",
    "bathrooms-asc": "Fewest Bathrooms",
    "sqft-desc": "Largest First",
    "sqft-asc": "Smallest First",
}


@dataclass
class ListingPage:
    items: List[Property] = field(default_factory=list)
    total_count: int = 0
    total_pages: int = 1
    current_page: int = 1
    page_corrected: bool = False


def sort_label(sort_by: Optional[str], sort_order: Optional[str]) -> str:
    return SORT_OPTIONS.get(f"{sort_by}-{sort_order}", SORT_OPTIONS["createdAt-desc"])


def _param(params: Mapping[str, object], key: str) -> Optional[str]:
    value = params.get(key)
    if isinstance(value, list):
        value = value[0] if value else None
    if value is None or value == "":
        return None
    return str(value)


def page_from_params(params: Mapping[str, object]) -> int:
    page = to_int(_param(params, "page"))
    return page if page and page > 0 else 1


def favorites_only(params: Mapping[str, object]) -> bool:
    return _param(params, "favoritesOnly") == "true"


def filters_from_params(params: Mapping[str, object]) -> FilterCriteria:
    """Criteria as written by the filter sidebar; bedrooms/bathrooms are minimums."""

    bedrooms = _param(params, "bedrooms")
    bathrooms = _param(params, "bathrooms")
    return FilterCriteria(
        min_price=to_int(_param(params, "minPrice")),
        max_price=to_int(_param(params, "maxPrice")),
        min_bedrooms=to_int(bedrooms) if bedrooms and bedrooms != "any" else None,
        min_bathrooms=to_int(bathrooms) if bathrooms and bathrooms != "any" else None,
        sort_by=_param(params, "sortBy") or DEFAULT_SORT_BY,
        sort_order=_param(params, "sortOrder") or DEFAULT_SORT_ORDER,
    )


def load_listing_page(
    client,
    filters: FilterCriteria,
    page: int,
    favorite_ids: Iterable[int],
    favorites_only: bool = False,
    page_size: int = GRID_PAGE_SIZE,
) -> ListingPage:
    """Fetch one grid page, mirroring the API's sort/paginate for favorites.

    In favorites mode a requested page past the end is clamped to the last
    page and ``page_corrected`` is set so the caller can rewrite the URL.
    """

    favorites = set(favorite_ids)
    if not favorites_only:
        result = client.get_listings(filters.model_copy(update={"page": page, "page_size": page_size}))
        return ListingPage(
            items=result.items,
            total_count=result.total_count,
            total_pages=result.total_pages,
            current_page=result.page,
        )

    if not favorites:
        return ListingPage()

    batch = client.get_listings(filters.model_copy(update={"page": 1, "page_size": MAX_PAGE_SIZE}))
    saved = [prop for prop in batch.items if prop.id in favorites]
    ordered = sort_properties(saved, filters.sort_by, filters.sort_order)

    total_pages = total_pages_for(len(ordered), page_size)
    valid_page = min(max(1, page), total_pages)
    result = paginate(ordered, valid_page, page_size)
    if valid_page != page:
        LOGGER.debug("favorites_page_clamped requested=%s valid=%s", page, valid_page)
    return ListingPage(
        items=result.items,
        total_count=result.total_count,
        total_pages=result.total_pages,
        current_page=valid_page,
        page_corrected=valid_page != page,
    )
