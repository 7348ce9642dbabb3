"""Listing queries and mutations on top of the repository."""

from __future__ import annotations

from typing import List, Optional

from ..db.repo import PropertyRepository
from ..models.property import FilterCriteria, PaginatedResult, Property, PropertyDraft
from ..utils.logging import get_logger
from .query import run_query, run_search

LOGGER = get_logger("services.listings")


class ListingService:
    def __init__(self, repository: PropertyRepository) -> None:
        self.repository = repository

    def get_listings(self, criteria: FilterCriteria) -> PaginatedResult[Property]:
        result = run_query(self.repository.list(), criteria)
        LOGGER.debug(
            "listings_query page=%s page_size=%s total=%s sort=%s/%s",
            result.page,
            result.page_size,
            result.total_count,
            criteria.sort_by,
            criteria.sort_order,
        )
        return result

    def get_listing(self, property_id: int) -> Optional[Property]:
        return self.repository.get_by_id(property_id)

    def search_listings(self, criteria: FilterCriteria) -> List[Property]:
        results = run_search(self.repository.list(), criteria)
        LOGGER.debug("listings_search term=%r matched=%s", criteria.search_term, len(results))
        return results

    def get_featured_listings(self) -> List[Property]:
        return self.search_listings(FilterCriteria(is_featured=True, sort_by="createdAt", sort_order="desc"))

    def create_listing(self, draft: PropertyDraft) -> Property:
        created = self.repository.create(draft)
        LOGGER.info("Created listing id=%s title=%r", created.id, created.title)
        return created

    def update_listing(self, property_id: int, draft: PropertyDraft) -> Optional[Property]:
        updated = self.repository.update(property_id, draft)
        if updated is None:
            LOGGER.info("Update skipped, listing id=%s not found", property_id)
        else:
            LOGGER.info("Updated listing id=%s", property_id)
        return updated

    def delete_listing(self, property_id: int) -> bool:
        deleted = self.repository.delete(property_id)
        LOGGER.info("Delete listing id=%s deleted=%s", property_id, deleted)
        return deleted
