from __future__ import annotations

from typing import Mapping

from app.core.config.scoring import get_scoring_number

SKILL_KNOW = "know"
SKILL_PRACTICE = "practice"


def _clamp(value: float) -> float:
    lower = get_scoring_number("readiness.min", 0)
    upper = get_scoring_number("readiness.max", 100)
    return max(lower, min(upper, value))


def compute_base_score(detected_category_count: int, company: str, role: str, jd_text_length: int) -> float:
    """Readiness score from extraction breadth and input completeness.

    35 + min(categories * 5, 30) + 10 per filled company / role + 10 for a
    description longer than 800 characters, clamped to [0, 100].
    """
    score = get_scoring_number("readiness.base", 35)
    per_category = get_scoring_number("readiness.per_category", 5)
    category_cap = get_scoring_number("readiness.category_cap", 30)
    score += min(max(detected_category_count, 0) * per_category, category_cap)

    if company:
        score += get_scoring_number("readiness.bonuses.company", 10)
    if role:
        score += get_scoring_number("readiness.bonuses.role", 10)
    if jd_text_length > get_scoring_number("readiness.long_description_threshold", 800):
        score += get_scoring_number("readiness.bonuses.long_description", 10)

    return _clamp(score)


def compute_current_score(base_score: float, skill_confidence: Mapping[str, str]) -> float:
    step = get_scoring_number("readiness.feedback_step", 2)
    known = sum(1 for status in skill_confidence.values() if status == SKILL_KNOW)
    practice = sum(1 for status in skill_confidence.values() if status == SKILL_PRACTICE)
    return _clamp(base_score + step * known - step * practice)


def readiness_band(score: float) -> str:
    if score > get_scoring_number("readiness.bands.strong", 70):
        return "Excellent! Keep polishing."
    if score > get_scoring_number("readiness.bands.fair", 40):
        return "Good start. Focus on weak areas."
    return "Needs significant preparation."
