import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.features.skill_extractor import extract_skills  # noqa: E402


class _StaticTaxonomy:
    def __init__(self, categories):
        self._categories = categories

    def categories(self):
        return dict(self._categories)


class SkillExtractorTests(unittest.TestCase):
    def test_detects_keywords_by_category(self):
        result = extract_skills("Java SQL")
        self.assertEqual(result.category_matches, {"Languages": ["Java"], "Data": ["SQL"]})
        self.assertEqual(result.detected_skills, ["Java", "SQL"])
        self.assertEqual(result.detected_category_count, 2)

    def test_matching_is_case_insensitive(self):
        for text in ("redis", "REDIS", "ReDiS"):
            result = extract_skills(text)
            self.assertEqual(result.category_matches, {"Data": ["Redis"]}, text)

    def test_matches_follow_taxonomy_order_not_text_order(self):
        result = extract_skills("JAVASCRIPT")
        # "C" is a plain substring of "javascript".
        self.assertEqual(result.category_matches, {"Languages": ["Java", "JavaScript", "C"]})

    def test_no_match_falls_back_to_general(self):
        for text in ("", "zzz", "   "):
            result = extract_skills(text)
            self.assertEqual(result.category_matches, {"General": ["General fresher stack"]})
            self.assertEqual(result.detected_skills, [])
            self.assertEqual(result.detected_category_count, 0)

    def test_duplicate_keywords_across_categories_are_kept(self):
        taxonomy = _StaticTaxonomy({"Backend": ("Kafka",), "Data": ("Kafka", "Spark")})
        result = extract_skills("we stream with kafka", taxonomy)
        self.assertEqual(result.category_matches, {"Backend": ["Kafka"], "Data": ["Kafka"]})
        self.assertEqual(result.detected_skills, ["Kafka", "Kafka"])


if __name__ == "__main__":
    unittest.main()
