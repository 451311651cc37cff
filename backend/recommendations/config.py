from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class EngineConfig:
    menu_csv: Path = Path(os.getenv("MENU_CSV", str(_DATA_DIR / "menu_items.csv")))
    vendors_csv: Path = Path(os.getenv("VENDORS_CSV", str(_DATA_DIR / "vendors.csv")))
    max_results: int = 5
    popular_min_rating: float = 4.0
    enrichment_workers: int = 8


DEFAULT_ENGINE_CONFIG = EngineConfig()
