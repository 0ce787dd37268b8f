from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

QUESTION_COUNT = 10
FRONTEND_SKILLS = frozenset({"React", "Next.js", "Vue"})
FRONTEND_PLAN_SUFFIX = " (Focus on Frontend Lifecycle)"
_PROJECT_REVIEW_INDEX = 2

ROUND_CHECKLIST: tuple[str, ...] = (
    "Round 1: Aptitude / Basics - Focus on quantitative aptitude and logical reasoning.",
    "Round 2: DSA + Core CS - Prepare for coding problems and core CS concepts.",
    "Round 3: Tech Interview - Deep dive into projects and technical stack.",
    "Round 4: Managerial / HR - Behavioral questions and culture fit.",
    "Review resume and ensure all listed projects are well-understood.",
    "Practice explaining your thought process clearly during coding.",
)

SEVEN_DAY_PLAN: tuple[str, ...] = (
    "Day 1-2: Basics + Core CS (OS, DBMS, Networks)",
    "Day 3-4: DSA + Coding Practice (Arrays, Strings, Trees)",
    "Day 5: Project Review + Resume Alignment",
    "Day 6: Mock Interview Questions (Behavioral + Technical)",
    "Day 7: Final Revision + Weak Areas Focus",
)

BEHAVIORAL_QUESTIONS: tuple[str, ...] = (
    "Tell me about a challenging project you worked on.",
    "How do you handle tight deadlines?",
    "Explain a time you had a conflict with a team member.",
    "What are your strengths and weaknesses?",
    "Where do you see yourself in 5 years?",
)

SkillPredicate = Callable[[frozenset[str]], bool]


def _mentions_sql(skills: frozenset[str]) -> bool:
    return any("sql" in skill.lower() for skill in skills)


def _has_any(*names: str) -> SkillPredicate:
    wanted = frozenset(names)

    def predicate(skills: frozenset[str]) -> bool:
        return not wanted.isdisjoint(skills)

    return predicate


# Evaluated top to bottom; each satisfied rule contributes one question.
QUESTION_RULES: tuple[tuple[SkillPredicate, str], ...] = (
    (_mentions_sql, "Explain indexing and when it helps in SQL."),
    (_has_any("React", "Next.js"), "Explain state management options in React."),
    (_has_any("Java", "C++", "OOP"), "Explain the four pillars of OOP with examples."),
    (_has_any("Python"), "Explain the difference between list and tuple in Python."),
)


@dataclass(slots=True)
class PreparationContent:
    checklist: list[str] = field(default_factory=list)
    plan: list[str] = field(default_factory=list)
    questions: list[str] = field(default_factory=list)


def build_checklist() -> list[str]:
    return list(ROUND_CHECKLIST)


def build_plan(detected_skills: Iterable[str]) -> list[str]:
    plan = list(SEVEN_DAY_PLAN)
    if not FRONTEND_SKILLS.isdisjoint(detected_skills):
        plan[_PROJECT_REVIEW_INDEX] += FRONTEND_PLAN_SUFFIX
    return plan


def build_questions(
    detected_skills: Iterable[str],
    rules: Iterable[tuple[SkillPredicate, str]] = QUESTION_RULES,
) -> list[str]:
    skills = frozenset(detected_skills)
    questions: list[str] = []
    for predicate, question in rules:
        if predicate(skills) and question not in questions:
            questions.append(question)

    if len(questions) < QUESTION_COUNT:
        questions.extend(BEHAVIORAL_QUESTIONS)
        while len(questions) < QUESTION_COUNT:
            questions.append(f"General technical question #{len(questions) + 1}")

    return questions[:QUESTION_COUNT]


def generate_content(detected_skills: list[str], jd_text_length: int) -> PreparationContent:
    # No content rule depends on description length yet.
    _ = jd_text_length
    return PreparationContent(
        checklist=build_checklist(),
        plan=build_plan(detected_skills),
        questions=build_questions(detected_skills),
    )
