from __future__ import annotations

from typing import Protocol


class TaxonomyProvider(Protocol):
    def categories(self) -> dict[str, tuple[str, ...]]:
        """Return category name -> keywords, both in taxonomy order."""
