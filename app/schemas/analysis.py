from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from app.features.readiness_score import compute_current_score

SkillStatus = Literal["know", "practice"]


class AnalysisRecord(BaseModel):
    """One stored job-description analysis.

    The model is frozen; feedback changes produce a copy with a new
    ``skill_confidence`` map. The payload produced by :meth:`to_payload`
    uses the camelCase field names of the history file format.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(min_length=1)
    created_at: datetime = Field(alias="createdAt")
    company: str = ""
    role: str = ""
    jd_text: str = Field(alias="jdText")
    extracted_skills: dict[str, list[str]] = Field(alias="extractedSkills", min_length=1)
    checklist: list[str] = Field(min_length=6, max_length=6)
    plan: list[str] = Field(min_length=5, max_length=5)
    questions: list[str] = Field(min_length=10, max_length=10)
    base_score: float = Field(alias="baseScore", ge=0, le=100)
    skill_confidence: dict[str, SkillStatus] = Field(default_factory=dict, alias="skillConfidence")

    @property
    def current_score(self) -> float:
        return compute_current_score(self.base_score, self.skill_confidence)

    @property
    def detected_skills(self) -> list[str]:
        return [skill for skills in self.extracted_skills.values() for skill in skills]

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> AnalysisRecord:
        return cls.model_validate(payload)


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    company: str = Field(default="", max_length=200)
    role: str = Field(default="", max_length=200)
    jd_text: str = Field(alias="jdText", max_length=120000)


class SkillToggleRequest(BaseModel):
    skill: str = Field(min_length=1, max_length=200)


class AnalysisResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    analysis: AnalysisRecord
    current_score: float = Field(alias="currentScore")
    weak_skills: list[str] = Field(default_factory=list, alias="weakSkills")
    readiness_band: str = Field(alias="readinessBand")


class AnalysisSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: datetime = Field(alias="createdAt")
    company: str
    role: str
    current_score: float = Field(alias="currentScore")
