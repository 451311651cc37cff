"""
Non-model recommendation strategies.

Each strategy returns a plain list; an empty list means "nothing usable",
which lets the engine move on to the next strategy in its chain.
"""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

from .models import MenuItem

MAX_RESULTS = 5

T = TypeVar("T")


def shuffle(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a uniformly permuted copy of ``items`` (Fisher–Yates)."""
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled


def lexical_match(
    query: str,
    menu: Sequence[MenuItem],
    limit: int = MAX_RESULTS,
    include_description: bool = False,
) -> list[MenuItem]:
    """Case-insensitive substring match over titles, in catalog order."""
    needle = query.strip().lower()
    if not needle:
        return []

    matches: list[MenuItem] = []
    for item in menu:
        if needle in item.title.lower() or (
            include_description and item.description and needle in item.description.lower()
        ):
            matches.append(item)
            if len(matches) >= limit:
                break
    return matches


def meal_type_filter(
    meal_type: str,
    menu: Sequence[MenuItem],
    rng: random.Random,
    limit: int = MAX_RESULTS,
) -> list[MenuItem]:
    wanted = meal_type.strip().lower()
    matching = [
        item for item in menu if item.avail_time and item.avail_time.strip().lower() == wanted
    ]
    return shuffle(matching, rng)[:limit]


def random_sample(
    menu: Sequence[MenuItem],
    rng: random.Random,
    limit: int = MAX_RESULTS,
) -> list[MenuItem]:
    return rng.sample(list(menu), min(limit, len(menu)))
