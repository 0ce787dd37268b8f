from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from app.core.config import settings
from app.features.content_generator import generate_content
from app.features.readiness_score import SKILL_KNOW, SKILL_PRACTICE, compute_base_score, readiness_band
from app.features.skill_extractor import extract_skills
from app.schemas.analysis import AnalysisRecord, AnalysisResponse, AnalysisSummary
from app.taxonomy import TaxonomyProvider

logger = logging.getLogger(__name__)

_WEAK_SKILL_LIMIT = 3


class UnknownSkillError(ValueError):
    def __init__(self, skill: str) -> None:
        super().__init__(f"Skill '{skill}' was not detected in this analysis.")
        self.skill = skill


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def analyze(
    company: str,
    role: str,
    jd_text: str,
    *,
    taxonomy_provider: TaxonomyProvider | None = None,
    id_factory: Callable[[], str] = _new_id,
    clock: Callable[[], datetime] = _utc_now,
) -> AnalysisRecord:
    """Build a fresh analysis record for one job description.

    Callers are expected to reject empty descriptions; an empty text still
    yields a valid record with the ``General`` fallback category.
    """
    company = company or ""
    role = role or ""
    jd_text = jd_text or ""

    extraction = extract_skills(jd_text, taxonomy_provider)
    content = generate_content(extraction.detected_skills, len(jd_text))
    base_score = compute_base_score(extraction.detected_category_count, company, role, len(jd_text))
    skill_confidence = {skill: SKILL_PRACTICE for skill in extraction.detected_skills}

    record = AnalysisRecord(
        id=id_factory(),
        created_at=clock(),
        company=company,
        role=role,
        jd_text=jd_text,
        extracted_skills=extraction.category_matches,
        checklist=content.checklist,
        plan=content.plan,
        questions=content.questions,
        base_score=base_score,
        skill_confidence=skill_confidence,
    )
    logger.info(
        json.dumps(
            {
                "event": "analysis_created",
                "analysis_id": record.id,
                "categories": extraction.detected_category_count,
                "skills": len(extraction.detected_skills),
                "base_score": base_score,
                "jd_len": len(jd_text),
            }
        )
    )
    return record


def toggle_skill_confidence(record: AnalysisRecord, skill: str, *, strict: bool | None = None) -> AnalysisRecord:
    """Flip ``skill`` between "practice" and "know" and return the updated record.

    Unknown skill names are added to the feedback map unless strict mode is on,
    in which case :class:`UnknownSkillError` is raised. Persisting the result is
    up to the caller.
    """
    strict_mode = settings.strict_skill_toggle if strict is None else strict
    if strict_mode and skill not in record.skill_confidence:
        raise UnknownSkillError(skill)

    current = record.skill_confidence.get(skill, SKILL_PRACTICE)
    updated = dict(record.skill_confidence)
    updated[skill] = SKILL_KNOW if current == SKILL_PRACTICE else SKILL_PRACTICE

    logger.info(
        json.dumps(
            {
                "event": "skill_confidence_toggled",
                "analysis_id": record.id,
                "skill": skill,
                "status": updated[skill],
            }
        )
    )
    return record.model_copy(update={"skill_confidence": updated})


def weak_skills(record: AnalysisRecord, limit: int = _WEAK_SKILL_LIMIT) -> list[str]:
    practice = [skill for skill, status in record.skill_confidence.items() if status == SKILL_PRACTICE]
    return practice[:limit]


def build_analysis_response(record: AnalysisRecord) -> AnalysisResponse:
    score = record.current_score
    return AnalysisResponse(
        analysis=record,
        current_score=score,
        weak_skills=weak_skills(record),
        readiness_band=readiness_band(score),
    )


def summarize_history(records: list[AnalysisRecord]) -> list[AnalysisSummary]:
    return [
        AnalysisSummary(
            id=record.id,
            created_at=record.created_at,
            company=record.company,
            role=record.role,
            current_score=record.current_score,
        )
        for record in records
    ]
