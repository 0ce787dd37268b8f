from __future__ import annotations

from dataclasses import dataclass, field

from app.taxonomy import TaxonomyProvider, get_default_taxonomy_provider

FALLBACK_CATEGORY = "General"
FALLBACK_SKILL = "General fresher stack"


@dataclass(slots=True)
class SkillExtraction:
    category_matches: dict[str, list[str]] = field(default_factory=dict)
    detected_skills: list[str] = field(default_factory=list)
    detected_category_count: int = 0


def extract_skills(text: str, taxonomy_provider: TaxonomyProvider | None = None) -> SkillExtraction:
    """Case-insensitive substring scan of ``text`` for every taxonomy keyword.

    Matches keep taxonomy order. When nothing matches, the result carries the
    ``General`` placeholder category and an empty flat skill list.
    """
    provider = taxonomy_provider or get_default_taxonomy_provider()
    haystack = (text or "").lower()

    category_matches: dict[str, list[str]] = {}
    detected: list[str] = []
    for category, keywords in provider.categories().items():
        found = [keyword for keyword in keywords if keyword.lower() in haystack]
        if found:
            category_matches[category] = found
            detected.extend(found)

    detected_category_count = len(category_matches)
    if not category_matches:
        category_matches[FALLBACK_CATEGORY] = [FALLBACK_SKILL]

    return SkillExtraction(
        category_matches=category_matches,
        detected_skills=detected,
        detected_category_count=detected_category_count,
    )
