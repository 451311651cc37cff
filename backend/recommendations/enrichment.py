from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Sequence

from .geo import distance_km
from .models import EnrichedItem, GeoPoint, MenuItem, Vendor

logger = logging.getLogger(__name__)


def _lookup_vendor(vendors: Any, vendor_id: str) -> Vendor | None:
    try:
        return vendors.get_vendor(vendor_id)
    except Exception:
        logger.warning("Vendor lookup failed for %r", vendor_id, exc_info=True)
        return None


def _vendor_distance(vendor: Vendor | None, user_location: GeoPoint | None) -> float | None:
    # Zero coordinates count as missing on either side
    if not (vendor and vendor.latitude and vendor.longitude):
        return None
    if not (user_location and user_location.latitude and user_location.longitude):
        return None
    try:
        return distance_km(
            user_location,
            GeoPoint(latitude=vendor.latitude, longitude=vendor.longitude),
        )
    except Exception:
        logger.warning("Distance calculation failed for vendor %r", vendor.id, exc_info=True)
        return None


def enrich_item(item: MenuItem, user_location: GeoPoint | None, vendors: Any) -> EnrichedItem:
    vendor = _lookup_vendor(vendors, item.vendor_id)
    return EnrichedItem(
        **item.model_dump(),
        vendor_name=(vendor.name if vendor and vendor.name else item.vendor_id),
        distance=_vendor_distance(vendor, user_location),
    )


def enrich_items(
    items: Sequence[MenuItem],
    user_location: GeoPoint | None,
    vendors: Any,
    max_workers: int = 8,
) -> list[EnrichedItem]:
    """
    Attach vendor name and distance to each item.

    ``vendors`` is any object with ``get_vendor(vendor_id) -> Vendor | None``.
    Lookups run concurrently; the result keeps the order and length of
    ``items``. A failing lookup or distance calculation only degrades that
    one item.
    """
    if not items:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(items)))) as pool:
        return list(pool.map(lambda item: enrich_item(item, user_location, vendors), items))
