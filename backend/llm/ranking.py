from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from pydantic import ValidationError

from ..recommendations.models import MenuItem, RankedCandidate

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()

FORMAT_INSTRUCTION = (
    "Format the response as a JSON array of objects with 'id' and 'relevance' "
    "properties, where 'relevance' is a number from 0 to 1 indicating how closely "
    "the item matches the query or meal type. Do not include any additional text "
    "or formatting."
)


def build_prompt(
    menu: Sequence[MenuItem],
    query: str | None = None,
    meal_type: str | None = None,
) -> str:
    serialized = json.dumps([item.model_dump(exclude_none=True) for item in menu])
    parts = [
        "You are an AI assistant for a food ordering platform.",
        f"Given the following menu items: {serialized},",
    ]
    if query:
        parts.append(
            "provide a list of up to 5 recommended items that closely match the "
            f'user\'s search query: "{query}". Prioritize items that contain the query words.'
        )
    elif meal_type:
        parts.append(f"provide a list of 5 recommended {meal_type} items.")
    else:
        parts.append("provide a list of 5 generally recommended items.")
    parts.append(FORMAT_INSTRUCTION)
    return " ".join(parts)


def extract_json_array(text: str) -> list[Any] | None:
    """Return the first substring of ``text`` that parses as a JSON array."""
    start = text.find("[")
    while start != -1:
        try:
            value, _ = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            value = None
        if isinstance(value, list):
            return value
        start = text.find("[", start + 1)
    return None


def parse_candidates(raw: list[Any]) -> list[RankedCandidate]:
    """Validate raw entries, skipping any that are not ``{id, relevance}`` objects."""
    candidates: list[RankedCandidate] = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        try:
            candidates.append(RankedCandidate.model_validate(entry))
        except ValidationError:
            logger.debug("Skipping malformed ranking entry %r", entry)
    # sorted() is stable, so ties keep the model's order
    return sorted(candidates, key=lambda c: c.relevance, reverse=True)


class RankingClient:
    """
    Ranks menu items with a generative text model.

    ``model`` is any object exposing ``complete(prompt) -> str``. Every
    failure on the model side (API error, timeout, prose without a JSON
    array, invalid JSON) results in an empty ranking instead of an error.
    """

    def __init__(self, model: Any) -> None:
        self.model = model

    def rank(self, prompt: str) -> list[RankedCandidate]:
        try:
            content = self.model.complete(prompt)
        except Exception:
            logger.warning("Ranking model call failed, returning no candidates", exc_info=True)
            return []

        if not content:
            logger.debug("Ranking model returned no content")
            return []

        raw = extract_json_array(content)
        if raw is None:
            logger.warning("No JSON array found in ranking model response: %.200s", content)
            return []
        return parse_candidates(raw)

    @staticmethod
    def resolve(
        candidates: Sequence[RankedCandidate],
        menu: Sequence[MenuItem],
    ) -> list[MenuItem]:
        by_id = {item.id: item for item in menu}
        resolved: list[MenuItem] = []
        seen: set[str] = set()
        for candidate in candidates:
            item = by_id.get(candidate.id)
            if item is None:
                logger.debug("Ranking model returned unknown item id %r", candidate.id)
                continue
            if item.id in seen:
                continue
            seen.add(item.id)
            resolved.append(item)
        return resolved

    def recommend(
        self,
        menu: Sequence[MenuItem],
        query: str | None = None,
        meal_type: str | None = None,
    ) -> list[MenuItem]:
        if not menu:
            return []
        prompt = build_prompt(menu, query=query, meal_type=meal_type)
        return self.resolve(self.rank(prompt), menu)
