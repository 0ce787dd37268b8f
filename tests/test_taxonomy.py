import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.taxonomy.local_taxonomy import LocalTaxonomy  # noqa: E402


class TaxonomyTests(unittest.TestCase):
    def test_default_categories_keep_file_order(self):
        categories = LocalTaxonomy().categories()
        self.assertEqual(
            list(categories),
            ["Core CS", "Languages", "Web", "Data", "Cloud/DevOps", "Testing"],
        )
        self.assertEqual(categories["Languages"][:2], ("Java", "Python"))
        self.assertIn("CI/CD", categories["Cloud/DevOps"])

    def test_categories_returns_a_copy(self):
        taxonomy = LocalTaxonomy()
        taxonomy.categories().pop("Web")
        self.assertIn("Web", taxonomy.categories())

    def test_custom_taxonomy_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "skills.json"
            path.write_text(json.dumps({"Mobile": ["Kotlin", "Swift", " "]}), encoding="utf-8")
            categories = LocalTaxonomy(path).categories()
        self.assertEqual(categories, {"Mobile": ("Kotlin", "Swift")})

    def test_rejects_non_mapping_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "skills.json"
            path.write_text(json.dumps(["Kotlin"]), encoding="utf-8")
            with self.assertRaises(RuntimeError):
                LocalTaxonomy(path)


if __name__ == "__main__":
    unittest.main()
