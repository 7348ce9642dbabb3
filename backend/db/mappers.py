from datetime import datetime, timedelta
from typing import Any, Dict

from ..models.property import Property
from ..utils.coerce import to_bool, to_float, to_int, to_list, to_str


def map_property_row(r: Dict[str, Any], now: datetime) -> Property:
    days_ago = to_float(r.get("created_days_ago")) or 0.0
    created = now - timedelta(days=days_ago)
    image_url = to_str(r.get("image_url"))
    image_urls = to_list(r.get("image_urls")) or ([image_url] if image_url else [])
    return Property(
        id=to_int(r.get("id")) or 0,
        title=to_str(r.get("title")),
        price=to_float(r.get("price")) or 0.0,
        bedrooms=to_int(r.get("bedrooms")) or 0,
        bathrooms=to_int(r.get("bathrooms")) or 0,
        sqft=to_int(r.get("sqft")) or 0,
        description=to_str(r.get("description")),
        address=to_str(r.get("address")),
        image_url=image_url,
        image_urls=image_urls,
        is_featured=bool(to_bool(r.get("is_featured"))),
        features=to_list(r.get("features")),
        property_type=to_str(r.get("property_type")),
        status=to_str(r.get("status")) or "Available",
        created_at=created,
        updated_at=created,
    )
