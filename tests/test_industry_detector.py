import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from services.industry_detector import IndustryDetector  # noqa: E402
from services.keyword_taxonomy import INDUSTRY_ORDER, ROADMAP_TEMPLATES, ROLE_TEMPLATES  # noqa: E402


class IndustryDetectorTests(unittest.TestCase):
    def setUp(self):
        self.detector = IndustryDetector()

    def test_healthcare_terms_select_healthcare(self):
        profile = self.detector.detect(["nurs", "clinic", "patient", "care"])
        self.assertEqual(profile.name, "healthcare")
        self.assertEqual(profile.roadmap, ROADMAP_TEMPLATES["healthcare"])
        self.assertEqual(profile.roles, ROLE_TEMPLATES["healthcare"])

    def test_ties_go_to_first_industry(self):
        self.assertEqual(self.detector.detect(["softwar", "market"]).name, "technology")
        self.assertEqual(self.detector.detect(["market", "softwar"]).name, "technology")

    def test_later_industry_wins_with_more_matches(self):
        self.assertEqual(self.detector.detect(["softwar", "lawyer", "court"]).name, "legal")

    def test_falls_back_to_general(self):
        self.assertEqual(self.detector.detect([]).name, "general")
        profile = self.detector.detect(["zzz"])
        self.assertEqual(profile.name, "general")
        self.assertEqual(profile.roadmap, ROADMAP_TEMPLATES["general"])

    def test_industry_matches_follow_detection_order(self):
        matches = self.detector.industry_matches(["nurs"])
        self.assertEqual(tuple(matches), INDUSTRY_ORDER)
        self.assertEqual(matches["healthcare"], 1)


if __name__ == "__main__":
    unittest.main()
