"""Favorited listing ids, persisted to a small JSON file between sessions."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterator, Optional, Set, Union

from backend.utils.logging import get_logger

LOGGER = get_logger("app.favorites")

STORAGE_KEY = "property-favorites"
FAVORITES_PATH = os.getenv("FAVORITES_PATH", str(Path.home() / ".property-listings" / "favorites.json"))


class FavoritesStore:
    """Set of listing ids the user has saved.

    The whole set is written out after every change. Storage problems are
    logged and otherwise ignored; the in-memory set stays authoritative for
    the running session.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path or FAVORITES_PATH).expanduser()
        self._ids: Set[int] = set()
        self._load()

    def add(self, property_id: int) -> None:
        if property_id not in self._ids:
            self._ids.add(property_id)
            self._save()

    def remove(self, property_id: int) -> None:
        if property_id in self._ids:
            self._ids.discard(property_id)
            self._save()

    def contains(self, property_id: int) -> bool:
        return property_id in self._ids

    def toggle(self, property_id: int) -> bool:
        """Flip membership and return whether the id is now a favorite."""

        if self.contains(property_id):
            self.remove(property_id)
            return False
        self.add(property_id)
        return True

    def ids(self) -> Set[int]:
        return set(self._ids)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._ids

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    # ------------------------------------------------------------------
    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            stored = json.loads(self.path.read_text(encoding="utf-8"))
            raw_ids = stored.get(STORAGE_KEY, []) if isinstance(stored, dict) else stored
            self._ids = {int(value) for value in raw_ids}
            LOGGER.debug("favorites_loaded count=%s path=%s", len(self._ids), self.path)
        except (OSError, ValueError, TypeError) as exc:
            LOGGER.error("Error loading favorites from %s: %s", self.path, exc)

    def _save(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({STORAGE_KEY: sorted(self._ids)}), encoding="utf-8")
        except OSError as exc:
            LOGGER.error("Error saving favorites to %s: %s", self.path, exc)
