import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from models.resume_models import Priority  # noqa: E402
from services.recommendation_engine import RecommendationEngine  # noqa: E402

ALL_GOOD = {
    "skills": 100, "experience": 100, "education": 100,
    "projects": 100, "achievements": 100, "formatting": 100,
}
ALL_BAD = {name: 0 for name in ALL_GOOD}
COVERED_TOKENS = [
    "javascript", "react", "python", "java", "sql", "pandas",
    "docker", "kubernetes", "flutter", "swift",
]


class RecommendationEngineTests(unittest.TestCase):
    def setUp(self):
        self.engine = RecommendationEngine()

    def test_missing_quantification_comes_first(self):
        text = "Experienced gardener who enjoys planting flowers and caring for community parks."
        recommendations = self.engine.generate(text, [], ALL_GOOD)
        self.assertEqual(len(recommendations), 2)
        self.assertEqual(recommendations[0].problem, "Resume lacks quantified achievements")
        self.assertEqual(recommendations[0].priority, Priority.HIGH)
        self.assertEqual(recommendations[1].priority, Priority.MEDIUM)
        self.assertEqual(
            recommendations[1].solution,
            "Include relevant technical terms like: javascript, react, vue, python, java",
        )

    def test_missing_keyword_pool_is_not_deduplicated(self):
        pool = self.engine.missing_keywords([])
        self.assertEqual(len(pool), 15)
        self.assertEqual(pool.count("python"), 2)

    def test_covered_keywords_and_strong_sections_produce_nothing(self):
        text = "Improved deployment speed by 40% across 12 services."
        self.assertEqual(self.engine.generate(text, COVERED_TOKENS, ALL_GOOD), [])

    def test_generation_order_not_priority_order(self):
        text = "Gardener who enjoys planting flowers and caring for parks."
        recommendations = self.engine.generate(text, [], ALL_BAD)
        self.assertEqual(len(recommendations), 6)
        self.assertEqual(
            [recommendation.problem for recommendation in recommendations],
            [
                "Resume lacks quantified achievements",
                "Missing industry-standard keywords",
                "Experience section needs improvement",
                "Skills section is underdeveloped",
                "Limited quantified achievements",
                "Formatting and structure need improvement",
            ],
        )
        self.assertEqual(
            [recommendation.priority for recommendation in recommendations],
            [Priority.HIGH, Priority.MEDIUM, Priority.HIGH, Priority.HIGH, Priority.MEDIUM, Priority.MEDIUM],
        )

    def test_section_thresholds(self):
        text = "Improved deployment speed by 40%."
        sections = dict(ALL_GOOD, experience=60, skills=50, achievements=40, formatting=50)
        self.assertEqual(self.engine.generate(text, COVERED_TOKENS, sections), [])

        sections = dict(ALL_GOOD, experience=59)
        recommendations = self.engine.generate(text, COVERED_TOKENS, sections)
        self.assertEqual([r.problem for r in recommendations], ["Experience section needs improvement"])

    def test_serializes_expected_impact_by_alias(self):
        recommendation = self.engine.generate("no metrics here", COVERED_TOKENS, ALL_GOOD)[0]
        dumped = recommendation.model_dump(by_alias=True)
        self.assertIn("expectedImpact", dumped)
        self.assertEqual(dumped["priority"], Priority.HIGH)


if __name__ == "__main__":
    unittest.main()
