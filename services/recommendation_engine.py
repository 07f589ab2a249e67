import re
from typing import Dict, List, Sequence

from models.resume_models import Priority, Recommendation
from services.keyword_matching import count_matched_keywords
from services.keyword_taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy

MAX_RECOMMENDATIONS = 6


class RecommendationEngine:
    """Improvement suggestions, in generation order and capped at six"""

    QUANTIFICATION_PATTERN = re.compile(
        r'[\d+%$]|increase|decrease|improve|reduce|save|generate', re.IGNORECASE
    )

    def __init__(self, taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy

    def generate(self, text: str, tokens: Sequence[str], sections: Dict[str, int]) -> List[Recommendation]:
        recommendations = []

        if not self.QUANTIFICATION_PATTERN.search(text):
            recommendations.append(Recommendation(
                problem="Resume lacks quantified achievements",
                solution=("Add specific metrics to describe your accomplishments (e.g., 'Increased sales by 25%', "
                          "'Managed team of 5 developers', 'Reduced processing time by 40%')"),
                priority=Priority.HIGH,
                expected_impact="Makes your contributions measurable and more impactful to employers",
            ))

        missing_keywords = self.missing_keywords(tokens)
        if missing_keywords:
            recommendations.append(Recommendation(
                problem="Missing industry-standard keywords",
                solution=f"Include relevant technical terms like: {', '.join(missing_keywords[:5])}",
                priority=Priority.MEDIUM,
                expected_impact="Improves ATS compatibility and keyword matching",
            ))

        # Section-specific recommendations
        if sections['experience'] < 60:
            recommendations.append(Recommendation(
                problem="Experience section needs improvement",
                solution=("Add more detailed descriptions of your roles, responsibilities, and achievements "
                          "with specific examples"),
                priority=Priority.HIGH,
                expected_impact="Better demonstrates your professional value and career progression",
            ))

        if sections['skills'] < 50:
            recommendations.append(Recommendation(
                problem="Skills section is underdeveloped",
                solution=("List specific technologies, tools, methodologies, and frameworks you're proficient in "
                          "with proficiency levels"),
                priority=Priority.HIGH,
                expected_impact="Helps recruiters quickly assess your technical fit for positions",
            ))

        if sections['achievements'] < 40:
            recommendations.append(Recommendation(
                problem="Limited quantified achievements",
                solution=("Include specific metrics and results from your work (e.g., 'Delivered project 2 weeks "
                          "ahead of schedule', 'Improved system performance by 35%')"),
                priority=Priority.MEDIUM,
                expected_impact="Demonstrates measurable impact and results-oriented mindset",
            ))

        if sections['formatting'] < 50:
            recommendations.append(Recommendation(
                problem="Formatting and structure need improvement",
                solution="Use consistent formatting, bullet points, clear section headings, and professional layout",
                priority=Priority.MEDIUM,
                expected_impact="Improves readability and makes your resume more scanner-friendly",
            ))

        return recommendations[:MAX_RECOMMENDATIONS]

    def missing_keywords(self, tokens: Sequence[str]) -> List[str]:
        """
        First three keywords of every industry with fewer than two matches.
        Not deduplicated: a keyword shared by several industries repeats.
        """
        missing = []
        for keywords in self.taxonomy.industry_keywords.values():
            if count_matched_keywords(tokens, keywords) < 2:
                missing.extend(keywords[:3])
        return missing
