from __future__ import annotations

from app.schemas.analysis import AnalysisRecord

_SEPARATOR = "\n----------------------------------------\n"


def plan_copy_text(record: AnalysisRecord) -> str:
    return "\n".join(record.plan)


def checklist_copy_text(record: AnalysisRecord) -> str:
    return "\n".join(record.checklist)


def questions_copy_text(record: AnalysisRecord) -> str:
    return "\n".join(record.questions)


def render_report(record: AnalysisRecord) -> str:
    """Plain-text readiness report; sections always appear in the same order."""
    created = record.created_at
    lines: list[str] = [
        "PLACEMENT READINESS REPORT",
        f"Generated: {created:%b} {created.day}, {created:%Y}",
        f"Company: {record.company}",
        f"Role: {record.role}",
        f"Readiness Score: {record.current_score:.1f}/100",
        _SEPARATOR,
        "SKILLS ANALYSIS:",
    ]
    for category, skills in record.extracted_skills.items():
        lines.append(f"{category}: {', '.join(skills)}")
    lines.append(_SEPARATOR)

    lines.append("7-DAY PREPARATION PLAN:")
    lines.extend(f"- {item}" for item in record.plan)
    lines.append(_SEPARATOR)

    lines.append("ROUND CHECKLIST:")
    lines.extend(f"- {item}" for item in record.checklist)
    lines.append(_SEPARATOR)

    lines.append("INTERVIEW QUESTIONS:")
    lines.extend(f"{index}. {question}" for index, question in enumerate(record.questions, start=1))

    return "\n".join(lines) + "\n"
