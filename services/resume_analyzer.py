import logging
from typing import Dict, List, Sequence

from models.resume_models import AnalysisReport, ExperienceTier, Scores
from services.exceptions import AnalysisError, ValidationError
from services.experience_classifier import ExperienceClassifier
from services.feature_extractor import FeatureExtractor
from services.industry_detector import IndustryDetector
from services.keyword_matching import clean_keyword, round_half_up
from services.keyword_taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy
from services.recommendation_engine import RecommendationEngine
from services.roadmap_generator import RoadmapGenerator
from services.role_suggester import RoleSuggester
from services.salary_estimator import SalaryEstimator
from services.section_scorer import SectionScorer
from services.text_preprocessor import TextPreprocessor

logger = logging.getLogger(__name__)

MIN_RESUME_LENGTH = 100
MAX_PRIMARY_SKILLS = 8

SECTION_WEIGHTS = {
    'skills': 0.25,
    'experience': 0.25,
    'education': 0.15,
    'projects': 0.15,
    'achievements': 0.10,
    'formatting': 0.10,
}


def calculate_overall_score(sections: Dict[str, int]) -> int:
    """Fixed-weight combination of the section scores"""
    return round_half_up(sum(sections[name] * weight for name, weight in SECTION_WEIGHTS.items()))


class ResumeAnalyzer:
    """
    Rule-based resume analysis. Holds only read-only collaborators, so a
    single instance can serve concurrent calls.
    """

    def __init__(self, taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy
        self.preprocessor = TextPreprocessor(taxonomy=taxonomy)
        self.feature_extractor = FeatureExtractor(taxonomy)
        self.section_scorer = SectionScorer(taxonomy)
        self.experience_classifier = ExperienceClassifier()
        self.industry_detector = IndustryDetector(taxonomy)
        self.recommendation_engine = RecommendationEngine(taxonomy)
        self.roadmap_generator = RoadmapGenerator(self.industry_detector)
        self.role_suggester = RoleSuggester(self.industry_detector)
        self.salary_estimator = SalaryEstimator(taxonomy)

    def analyze(self, text: str) -> AnalysisReport:
        """
        Analyze resume text and return the full assessment report
        """
        if not isinstance(text, str) or len(text.strip()) < MIN_RESUME_LENGTH:
            raise ValidationError("Resume content is too short or empty")

        logger.info(f"Starting analysis of {len(text)} characters")

        try:
            report = self._run_pipeline(text)
        except Exception as e:
            logger.error(f"Resume analysis failed: {str(e)}")
            raise AnalysisError(f"Failed to analyze resume: {str(e)}") from e

        return report

    def _run_pipeline(self, text: str) -> AnalysisReport:
        tokens = self.preprocessor.preprocess(text)

        features = self.feature_extractor.extract(tokens, text)
        logger.debug(f"Feature vector: {features}")

        sections = self.section_scorer.score_sections(text, tokens)
        overall_score = calculate_overall_score(sections)

        experience_level = self.experience_classifier.classify(sections['experience'], text)
        profile = self.industry_detector.detect(tokens)
        primary_skills = self.detect_primary_skills(tokens)

        recommendations = self.recommendation_engine.generate(text, tokens, sections)
        roadmap = self.roadmap_generator.generate(tokens, sections, profile)
        target_roles = self.role_suggester.suggest(tokens, sections, profile)
        salary = self.salary_estimator.estimate(overall_score, experience_level)

        logger.info(
            f"Analysis completed: overall={overall_score}, "
            f"level={experience_level.value}, industry={profile.name}"
        )

        return AnalysisReport(
            executive_summary=self.generate_summary(text, overall_score, experience_level, primary_skills),
            scores=Scores(overall=overall_score, **sections),
            strengths=self.identify_strengths(sections, primary_skills),
            weaknesses=self.identify_weaknesses(sections),
            experience_level=experience_level,
            primary_skills=primary_skills,
            detailed_recommendations=recommendations,
            roadmap=roadmap,
            target_roles=target_roles,
            salary_expectation=salary,
        )

    def detect_primary_skills(self, tokens: Sequence[str]) -> List[str]:
        """Skill keywords ranked by how many tokens mention them"""
        skill_counts: Dict[str, int] = {}

        for keywords in self.taxonomy.skill_categories.values():
            for keyword in keywords:
                cleaned = clean_keyword(keyword)
                matches = sum(1 for token in tokens if cleaned in token or token in cleaned)
                if matches > 0:
                    skill_counts[keyword] = skill_counts.get(keyword, 0) + matches

        # Stable sort keeps first-seen order among equal counts
        ranked = sorted(skill_counts.items(), key=lambda item: item[1], reverse=True)
        return [skill for skill, _ in ranked[:MAX_PRIMARY_SKILLS]]

    def generate_summary(self, text: str, score: int, experience_level: ExperienceTier,
                         primary_skills: List[str]) -> str:
        word_count = len(text.split())
        skills_list = ', '.join(primary_skills[:3]) or 'a range of transferable skills'
        strength = 'strong' if score >= 80 else 'solid' if score >= 60 else 'developing'
        potential = 'clear' if score >= 70 else 'emerging'

        return (
            f"This is a {experience_level.value.lower()} resume ({strength}) with approximately "
            f"{word_count} words. The candidate demonstrates proficiency in {skills_list} "
            f"and shows {potential} potential for professional growth."
        )

    def identify_strengths(self, sections: Dict[str, int], primary_skills: List[str]) -> List[str]:
        strengths = []

        if sections['skills'] >= 80:
            strengths.append(f"Strong technical skills including {', '.join(primary_skills[:3])}")
        if sections['experience'] >= 75:
            strengths.append('Extensive professional experience with clear career progression')
        if sections['achievements'] >= 70:
            strengths.append('Quantified achievements demonstrating measurable impact')
        if sections['formatting'] >= 80:
            strengths.append('Well-structured and professionally formatted resume')
        if sections['projects'] >= 60:
            strengths.append('Solid project portfolio and hands-on experience')

        return strengths or ['Shows potential for development and learning']

    def identify_weaknesses(self, sections: Dict[str, int]) -> List[str]:
        weaknesses = []

        if sections['skills'] < 50:
            weaknesses.append('Technical skills section needs more detail and specificity')
        if sections['experience'] < 50:
            weaknesses.append('Limited work experience documentation')
        if sections['achievements'] < 40:
            weaknesses.append('Could include more quantified results and achievements')
        if sections['formatting'] < 50:
            weaknesses.append('Formatting and structure could be improved for better readability')

        return weaknesses or ['Minor improvements needed for optimal impact']
