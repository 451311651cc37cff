from __future__ import annotations

import random

import pytest

from backend.llm.ranking import RankingClient
from backend.recommendations.engine import RecommendationEngine
from backend.tests.fakes import SAMPLE_MENU, SAMPLE_VENDORS, FakeCatalog, FakeModel, FakeVendors


@pytest.fixture
def fake_model() -> FakeModel:
    return FakeModel()


@pytest.fixture
def fake_vendors() -> FakeVendors:
    return FakeVendors(SAMPLE_VENDORS)


@pytest.fixture
def engine(fake_model: FakeModel, fake_vendors: FakeVendors) -> RecommendationEngine:
    return RecommendationEngine(
        catalog=FakeCatalog(SAMPLE_MENU),
        vendors=fake_vendors,
        ranker=RankingClient(fake_model),
        rng=random.Random(42),
    )
