"""Load the demo listings from CSV seed data."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import List, Optional

from ..models.property import Property
from ..utils.io import load_csv
from ..utils.logging import get_logger
from .mappers import map_property_row

LOGGER = get_logger("db.seed")

SEED_FILE = os.getenv("LISTINGS_SEED_FILE", "properties.csv")
SEED_COLUMNS = ("id", "title", "price", "address")


def load_seed_properties(name: Optional[str] = None, now: Optional[datetime] = None) -> List[Property]:
    """Read the seed CSV and map each row to a ``Property``.

    Creation times are stored relative to start-up (``created_days_ago``) so the
    demo data always looks recent.
    """

    name = name or SEED_FILE
    now = now or datetime.now(timezone.utc)
    df = load_csv(name, required=SEED_COLUMNS)
    properties = [map_property_row(row, now) for row in df.to_dict(orient="records")]
    LOGGER.info("Loaded %d seed listings from %s", len(properties), name)
    return properties
