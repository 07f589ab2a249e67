import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from unittest.mock import patch  # noqa: E402

from models.resume_models import ExperienceTier  # noqa: E402
from services.exceptions import AnalysisError, ValidationError  # noqa: E402
from services.keyword_matching import round_half_up  # noqa: E402
from services.keyword_taxonomy import ROADMAP_TEMPLATES  # noqa: E402
from services.resume_analyzer import ResumeAnalyzer, calculate_overall_score  # noqa: E402

TECH_RESUME = """Jane Doe
Software Engineer | jane@example.com | github.com/janedoe

SUMMARY:
Full stack developer with 4 years of experience building web applications.

SKILLS:
- Languages: Python, JavaScript, Java, SQL
- Frameworks: React, Django, Express
- Tools: Docker, Kubernetes, AWS, Git, Jenkins

EXPERIENCE:
Senior Developer, Acme Corp (2020 - Present)
- Developed microservices with Python and PostgreSQL, reducing latency by 35%
- Led a team of 5 engineers and improved deployment frequency by 3x
- Built CI/CD pipelines with Jenkins and Docker

Developer, Beta Labs (2018 - 2020)
- Created React dashboards used by 10k customers
- Designed REST APIs consumed by mobile apps

PROJECTS:
- Portfolio site built with Vue and Node.js
- Open source contributor to a data analysis library

EDUCATION:
Bachelor of Science in Computer Science, State University
Award: Dean's List
"""

HEALTHCARE_RESUME = """Registered Nurse
EXPERIENCE:
Registered nurse at City Hospital providing patient care on a busy clinical ward.
- Delivered bedside nursing care and clinical assessments for patients.
- Documented patient care plans with the medical team.
CERTIFICATIONS:
Licensed registered nurse, basic life support.
"""

SENIOR_RESUME = """Operations lead with 12 years of work history.
- 6 years work at Acme leading work on logistics
- 4 years work at Beta on supply work
- 3 years work at Gamma on vendor work
- 2 years work at Delta
- 1 year work at Epsilon
Work references available.
"""

NO_METRICS_RESUME = (
    "Experienced gardener who enjoys planting flowers and caring for community parks. "
    "Friendly, reliable and punctual worker with a love of nature and outdoor spaces."
)


class OverallScoreTests(unittest.TestCase):
    def test_fixed_weight_combination(self):
        sections = {
            "skills": 80, "experience": 60, "education": 40,
            "projects": 20, "achievements": 10, "formatting": 90,
        }
        self.assertEqual(calculate_overall_score(sections), 54)

    def test_bounds(self):
        names = ("skills", "experience", "education", "projects", "achievements", "formatting")
        self.assertEqual(calculate_overall_score({name: 0 for name in names}), 0)
        self.assertEqual(calculate_overall_score({name: 100 for name in names}), 100)


class ResumeAnalyzerTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.analyzer = ResumeAnalyzer()

    def test_rejects_empty_or_short_input(self):
        for text in ("", "   ", "too short", " " * 50 + "x" * 99 + " " * 50, None):
            with self.assertRaises(ValidationError):
                self.analyzer.analyze(text)

    def test_exactly_one_hundred_characters_succeeds(self):
        text = ("Software developer with Python experience. " * 3)[:100]
        self.assertEqual(len(text.strip()), 100)
        report = self.analyzer.analyze(text)
        self.assertGreaterEqual(report.scores.overall, 0)

    def test_scores_are_bounded_and_overall_matches_weights(self):
        report = self.analyzer.analyze(TECH_RESUME)
        sections = report.scores.model_dump()
        overall = sections.pop("overall")
        for score in sections.values():
            self.assertGreaterEqual(score, 0)
            self.assertLessEqual(score, 100)
        self.assertEqual(overall, calculate_overall_score(sections))

    def test_caps_hold_for_large_input(self):
        report = self.analyzer.analyze(TECH_RESUME * 40)
        self.assertLessEqual(len(report.primary_skills), 8)
        self.assertLessEqual(len(report.detailed_recommendations), 6)
        self.assertLessEqual(len(report.roadmap), 6)
        self.assertLessEqual(len(report.target_roles), 8)
        self.assertEqual(len(report.target_roles), len(set(report.target_roles)))

    def test_is_deterministic(self):
        first = self.analyzer.analyze(TECH_RESUME).model_dump_json(by_alias=True)
        second = self.analyzer.analyze(TECH_RESUME).model_dump_json(by_alias=True)
        self.assertEqual(first, second)

    def test_technology_resume(self):
        report = self.analyzer.analyze(TECH_RESUME)
        self.assertIn("python", report.primary_skills)
        self.assertEqual(report.roadmap[:3], list(ROADMAP_TEMPLATES["technology"]))
        self.assertTrue(report.executive_summary.startswith("This is a "))

    def test_missing_metrics_flagged(self):
        report = self.analyzer.analyze(NO_METRICS_RESUME)
        problems = [recommendation.problem for recommendation in report.detailed_recommendations]
        self.assertIn("Resume lacks quantified achievements", problems)

    def test_senior_resume_salary_within_scaled_band(self):
        report = self.analyzer.analyze(SENIOR_RESUME)
        self.assertGreaterEqual(report.scores.experience, 80)
        self.assertEqual(report.experience_level, ExperienceTier.SENIOR)

        multiplier = min(1, report.scores.overall / 100 + 0.2)
        expected = f"${round_half_up(125000 * multiplier):,} - ${round_half_up(185000 * multiplier):,}"
        self.assertEqual(report.salary_expectation.range, expected)

    def test_healthcare_resume_uses_healthcare_roadmap(self):
        report = self.analyzer.analyze(HEALTHCARE_RESUME)
        self.assertEqual(report.roadmap[:3], list(ROADMAP_TEMPLATES["healthcare"]))
        self.assertTrue(any("Healthcare Professional" in role for role in report.target_roles))

    def test_unexpected_failure_is_wrapped(self):
        with patch.object(self.analyzer.section_scorer, "score_sections", side_effect=KeyError("boom")):
            with self.assertRaises(AnalysisError) as context:
                self.analyzer.analyze(TECH_RESUME)
        self.assertIn("Failed to analyze resume", str(context.exception))
        self.assertIn("boom", str(context.exception))
        self.assertIsInstance(context.exception.__cause__, KeyError)


if __name__ == "__main__":
    unittest.main()
