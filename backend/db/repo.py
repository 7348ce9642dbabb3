"""In-memory listing repository."""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from ..models.property import Property, PropertyDraft
from ..utils.logging import get_logger
from .seed import load_seed_properties

LOGGER = get_logger("db.repo")

# Fields an update never overwrites.
UPDATE_KEEPS = {"image_urls"}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PropertyRepository:
    """Owns the listing collection for the lifetime of the process.

    Every read and write goes through one lock because FastAPI runs sync
    endpoints on a thread pool. Records are copied on the way in and out so
    callers never hold a reference to stored state.
    """

    def __init__(self, properties: Optional[Iterable[Property]] = None) -> None:
        self._lock = threading.Lock()
        self._properties: List[Property] = [prop.model_copy(deep=True) for prop in properties or []]

    # ------------------------------------------------------------------
    # Reads
    def list(self) -> List[Property]:
        with self._lock:
            return [prop.model_copy(deep=True) for prop in self._properties]

    def get_by_id(self, property_id: int) -> Optional[Property]:
        with self._lock:
            found = self._find(property_id)
            return found.model_copy(deep=True) if found else None

    # ------------------------------------------------------------------
    # Writes
    def create(self, draft: PropertyDraft) -> Property:
        with self._lock:
            next_id = max((prop.id for prop in self._properties), default=0) + 1
            now = _utcnow()
            created = Property(
                **draft.model_dump(),
                id=next_id,
                created_at=now,
                updated_at=now,
            )
            self._properties.append(created)
            LOGGER.debug("listing_created id=%s", next_id)
            return created.model_copy(deep=True)

    def update(self, property_id: int, draft: PropertyDraft) -> Optional[Property]:
        with self._lock:
            existing = self._find(property_id)
            if existing is None:
                return None
            for field, value in draft.model_dump(exclude=UPDATE_KEEPS).items():
                setattr(existing, field, value)
            now = _utcnow()
            if now <= existing.updated_at:
                now = existing.updated_at + timedelta(microseconds=1)
            existing.updated_at = now
            LOGGER.debug("listing_updated id=%s", property_id)
            return existing.model_copy(deep=True)

    def delete(self, property_id: int) -> bool:
        with self._lock:
            existing = self._find(property_id)
            if existing is None:
                return False
            self._properties.remove(existing)
            LOGGER.debug("listing_deleted id=%s", property_id)
            return True

    # ------------------------------------------------------------------
    def _find(self, property_id: int) -> Optional[Property]:
        for prop in self._properties:
            if prop.id == property_id:
                return prop
        return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._properties)


_repo_singleton: PropertyRepository | None = None
_singleton_lock = threading.Lock()


def get_repository() -> PropertyRepository:
    global _repo_singleton
    with _singleton_lock:
        if _repo_singleton is None:
            _repo_singleton = PropertyRepository(load_seed_properties())
            LOGGER.info("Repository seeded with %d listings", len(_repo_singleton))
        return _repo_singleton


def reset_repository() -> None:
    global _repo_singleton
    with _singleton_lock:
        _repo_singleton = None
