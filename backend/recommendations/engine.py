"""
Recommendation engine.

Responsibilities:
- Pick menu items for a query, a meal type, or neither, by walking an
  ordered chain of strategies until one of them yields something.
- Attach vendor names and user distances to the picked items.
- Rank vendors by distance from the user.
- List the catalog's best-rated items.
"""
from __future__ import annotations

import logging
import random
import time
from typing import Any, Callable, Sequence

from . import strategies
from .config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .enrichment import enrich_items
from .geo import distance_km
from .models import EnrichedItem, GeoPoint, MenuItem, NearbyVendor

logger = logging.getLogger(__name__)

Strategy = Callable[[Sequence[MenuItem]], list[MenuItem]]


class RecommendationEngine:
    """
    Orchestrates the recommendation strategies.

    Collaborators are passed in explicitly:

    - ``catalog``: ``list_menu_items() -> list[MenuItem]``
    - ``vendors``: ``get_vendor(id) -> Vendor | None`` and ``list_vendors()``
    - ``ranker``: ``recommend(menu, query=..., meal_type=...) -> list[MenuItem]``
      (see ``backend.llm.ranking.RankingClient``)
    - ``rng``: source of randomness for shuffling and sampling
    """

    def __init__(
        self,
        catalog: Any,
        vendors: Any,
        ranker: Any,
        rng: random.Random | None = None,
        config: EngineConfig = DEFAULT_ENGINE_CONFIG,
    ) -> None:
        self.catalog = catalog
        self.vendors = vendors
        self.ranker = ranker
        self.rng = rng or random.Random()
        self.config = config

    # ── Strategy chain ───────────────────────────────────────────────────

    def _run_chain(
        self,
        chain: list[tuple[str, Strategy]],
        user_location: GeoPoint | None,
    ) -> list[EnrichedItem]:
        start_time = time.time()
        menu = self.catalog.list_menu_items()

        picked: list[MenuItem] = []
        used = "none"
        for name, strategy in chain:
            picked = strategy(menu)
            if picked:
                used = name
                break
            logger.debug("Strategy %s returned nothing, moving on", name)

        picked = picked[: self.config.max_results]
        enriched = enrich_items(
            picked, user_location, self.vendors, max_workers=self.config.enrichment_workers,
        )

        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        logger.info(
            "Recommended %d of %d menu items via %s in %sms",
            len(enriched), len(menu), used, elapsed_ms,
        )
        return enriched

    def _lexical(self, query: str, include_description: bool) -> Strategy:
        return lambda menu: strategies.lexical_match(
            query, menu, limit=self.config.max_results, include_description=include_description,
        )

    def _meal_type(self, meal_type: str) -> Strategy:
        return lambda menu: strategies.meal_type_filter(
            meal_type, menu, self.rng, limit=self.config.max_results,
        )

    def _random(self) -> Strategy:
        return lambda menu: strategies.random_sample(menu, self.rng, limit=self.config.max_results)

    def _model(self, query: str | None, meal_type: str | None) -> Strategy:
        return lambda menu: self.ranker.recommend(menu, query=query, meal_type=meal_type)

    # ── Entry points ─────────────────────────────────────────────────────

    def recommend_by_chat(
        self,
        message: str | None = None,
        meal_type: str | None = None,
        user_location: GeoPoint | None = None,
    ) -> list[EnrichedItem]:
        """Title match first, then always the ranking model; never random."""
        chain: list[tuple[str, Strategy]] = []
        if message:
            chain.append(("lexical", self._lexical(message, include_description=False)))
            chain.append(("model", self._model(message, None)))
        else:
            chain.append(("model", self._model(None, meal_type or None)))
        return self._run_chain(chain, user_location)

    def recommend_by_query(
        self,
        query: str | None = None,
        meal_type: str | None = None,
        user_location: GeoPoint | None = None,
    ) -> list[EnrichedItem]:
        """Title/description match or meal-type filter, falling back to a random sample."""
        chain: list[tuple[str, Strategy]] = []
        if query:
            chain.append(("lexical", self._lexical(query, include_description=True)))
        elif meal_type:
            chain.append(("meal_type", self._meal_type(meal_type)))
        chain.append(("random", self._random()))
        return self._run_chain(chain, user_location)

    def nearby_vendors(self, user_location: GeoPoint, limit: int = 5) -> list[NearbyVendor]:
        nearby: list[NearbyVendor] = []
        for vendor in self.vendors.list_vendors():
            if vendor.latitude is None or vendor.longitude is None:
                continue
            try:
                distance = distance_km(
                    user_location,
                    GeoPoint(latitude=vendor.latitude, longitude=vendor.longitude),
                )
            except ValueError:
                logger.warning("Error calculating distance for vendor %s", vendor.id, exc_info=True)
                continue
            nearby.append(NearbyVendor(
                id=vendor.id,
                name=vendor.name or "Unnamed Vendor",
                address=vendor.address or "Address not available",
                phone=vendor.phone or "Phone not available",
                category=vendor.category or "restaurant",
                latitude=vendor.latitude,
                longitude=vendor.longitude,
                distance=distance,
            ))

        nearby.sort(key=lambda v: v.distance)
        return nearby[:limit]

    def popular_items(self, limit: int = 5) -> list[MenuItem]:
        rated = [
            item for item in self.catalog.list_menu_items()
            if item.rating is not None and item.rating >= self.config.popular_min_rating
        ]
        rated.sort(key=lambda item: item.rating, reverse=True)
        return rated[:limit]
