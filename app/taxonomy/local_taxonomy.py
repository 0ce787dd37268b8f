from __future__ import annotations

import json
from pathlib import Path

from .provider import TaxonomyProvider


class LocalTaxonomy(TaxonomyProvider):
    def __init__(self, categories_path: str | Path | None = None) -> None:
        path = Path(categories_path) if categories_path else Path(__file__).with_name("skill_categories.json")
        self._categories = self._load_categories(path)

    @staticmethod
    def _load_categories(path: Path) -> dict[str, tuple[str, ...]]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid skill taxonomy '{path}': expected a top-level mapping.")
        categories: dict[str, tuple[str, ...]] = {}
        for category, keywords in raw.items():
            if not isinstance(keywords, list):
                raise RuntimeError(f"Invalid skill taxonomy '{path}': '{category}' must map to a list.")
            categories[str(category)] = tuple(str(keyword) for keyword in keywords if str(keyword).strip())
        return categories

    def categories(self) -> dict[str, tuple[str, ...]]:
        return dict(self._categories)
