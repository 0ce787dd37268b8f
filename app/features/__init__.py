from .content_generator import (
    QUESTION_RULES,
    PreparationContent,
    build_checklist,
    build_plan,
    build_questions,
    generate_content,
)
from .readiness_score import compute_base_score, compute_current_score, readiness_band
from .skill_extractor import SkillExtraction, extract_skills

__all__ = [
    "SkillExtraction",
    "extract_skills",
    "PreparationContent",
    "QUESTION_RULES",
    "build_checklist",
    "build_plan",
    "build_questions",
    "generate_content",
    "compute_base_score",
    "compute_current_score",
    "readiness_band",
]
