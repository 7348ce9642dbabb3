"""Pydantic models representing listing domain objects and API envelopes."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

DEFAULT_SORT_BY = "createdAt"
DEFAULT_SORT_ORDER = "desc"
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PropertyDraft(CamelModel):
    title: str = ""
    price: float = 0
    bedrooms: int = 0
    bathrooms: int = 0
    sqft: int = 0
    description: str = ""
    address: str = ""
    image_url: str = ""
    image_urls: List[str] = Field(default_factory=list)
    is_featured: bool = False
    features: List[str] = Field(default_factory=list)
    property_type: str = ""
    status: str = "Available"


class Property(PropertyDraft):
    id: int
    created_at: datetime
    updated_at: datetime


class FilterCriteria(CamelModel):
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    min_bedrooms: Optional[int] = None
    max_bedrooms: Optional[int] = None
    min_bathrooms: Optional[int] = None
    max_bathrooms: Optional[int] = None
    min_sqft: Optional[int] = None
    max_sqft: Optional[int] = None
    property_type: Optional[str] = None
    status: Optional[str] = None
    search_term: Optional[str] = None
    is_featured: Optional[bool] = None
    sort_by: Optional[str] = DEFAULT_SORT_BY
    sort_order: Optional[str] = DEFAULT_SORT_ORDER
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def normalized(self) -> "FilterCriteria":
        """Copy with page >= 1 and page size clamped into [1, MAX_PAGE_SIZE]."""

        page = max(1, self.page)
        page_size = min(MAX_PAGE_SIZE, max(1, self.page_size))
        return self.model_copy(update={"page": page, "page_size": page_size})

    def to_query_params(self) -> dict:
        """camelCase query parameters, skipping unset and empty values."""

        params = {}
        for key, value in self.model_dump(by_alias=True).items():
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[key] = value
        return params


class PaginatedResult(CamelModel, Generic[T]):
    items: List[T]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class ApiResponse(CamelModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = Field(default_factory=list)
