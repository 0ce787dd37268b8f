import sys
import unittest
from datetime import datetime, timezone
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.services.analysis_service import (  # noqa: E402
    UnknownSkillError,
    analyze,
    build_analysis_response,
    summarize_history,
    toggle_skill_confidence,
    weak_skills,
)

FIXED_TIME = datetime(2026, 3, 4, 9, 30, tzinfo=timezone.utc)


def _analyze(company: str, role: str, jd_text: str):
    return analyze(company, role, jd_text, id_factory=lambda: "analysis-1", clock=lambda: FIXED_TIME)


class AnalysisServiceTests(unittest.TestCase):
    def setUp(self):
        self.jd_text = "Java SQL " + "x" * 891
        self.record = _analyze("Acme", "", self.jd_text)

    def test_java_sql_scenario(self):
        record = self.record
        self.assertEqual(len(self.jd_text), 900)
        self.assertEqual(record.extracted_skills, {"Languages": ["Java"], "Data": ["SQL"]})
        self.assertEqual(record.base_score, 65)
        self.assertEqual(record.skill_confidence, {"Java": "practice", "SQL": "practice"})
        self.assertEqual(record.current_score, 61)
        self.assertIn("Explain indexing and when it helps in SQL.", record.questions)
        self.assertIn("Explain the four pillars of OOP with examples.", record.questions)
        self.assertEqual(len(record.questions), 10)
        self.assertEqual(len(record.plan), 5)
        self.assertEqual(len(record.checklist), 6)
        self.assertEqual(record.id, "analysis-1")
        self.assertEqual(record.created_at, FIXED_TIME)

    def test_empty_description_uses_general_fallback(self):
        record = _analyze("", "", "")
        self.assertEqual(record.extracted_skills, {"General": ["General fresher stack"]})
        self.assertEqual(record.skill_confidence, {})
        self.assertEqual(record.base_score, 35)
        self.assertEqual(record.current_score, 35)
        self.assertEqual(_analyze("Acme", "SDE", "").base_score, 55)

    def test_analyze_is_deterministic_for_fixed_id_and_clock(self):
        self.assertEqual(_analyze("Acme", "", self.jd_text), self.record)

    def test_fresh_ids_by_default(self):
        first = analyze("", "", "Java")
        second = analyze("", "", "Java")
        self.assertNotEqual(first.id, second.id)
        self.assertIsNotNone(first.created_at.tzinfo)

    def test_toggle_round_trip_restores_score(self):
        original = self.record.current_score
        known = toggle_skill_confidence(self.record, "Java")
        self.assertEqual(known.skill_confidence["Java"], "know")
        self.assertEqual(known.current_score, original + 4)
        self.assertEqual(self.record.skill_confidence["Java"], "practice")

        back = toggle_skill_confidence(known, "Java")
        self.assertEqual(back.skill_confidence["Java"], "practice")
        self.assertEqual(back.current_score, original)
        self.assertEqual(back.base_score, self.record.base_score)

    def test_toggle_unknown_skill_is_permissive_by_default(self):
        updated = toggle_skill_confidence(self.record, "Rust", strict=False)
        self.assertEqual(updated.skill_confidence["Rust"], "know")

    def test_toggle_unknown_skill_in_strict_mode(self):
        with self.assertRaises(UnknownSkillError):
            toggle_skill_confidence(self.record, "Rust", strict=True)
        updated = toggle_skill_confidence(self.record, "SQL", strict=True)
        self.assertEqual(updated.skill_confidence["SQL"], "know")

    def test_strict_mode_rejects_general_placeholder(self):
        record = _analyze("", "", "zzz")
        self.assertEqual(record.extracted_skills, {"General": ["General fresher stack"]})
        with self.assertRaises(UnknownSkillError):
            toggle_skill_confidence(record, "General fresher stack", strict=True)
        self.assertEqual(record.current_score, record.base_score)

    def test_weak_skills_and_response(self):
        record = _analyze("Acme", "SDE", "Java Python SQL Docker")
        # "C" matches inside "docker".
        self.assertEqual(weak_skills(record), ["Java", "Python", "C"])
        record = toggle_skill_confidence(record, "Python")
        self.assertEqual(weak_skills(record), ["Java", "C", "SQL"])

        response = build_analysis_response(record)
        self.assertEqual(response.current_score, record.current_score)
        self.assertEqual(response.analysis, record)
        self.assertTrue(response.readiness_band)

    def test_summarize_history(self):
        summaries = summarize_history([self.record])
        self.assertEqual(len(summaries), 1)
        self.assertEqual(summaries[0].id, "analysis-1")
        self.assertEqual(summaries[0].company, "Acme")
        self.assertEqual(summaries[0].current_score, 61)


if __name__ == "__main__":
    unittest.main()
