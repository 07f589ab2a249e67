import logging
from typing import Dict, Sequence

from services.keyword_matching import count_bidirectional, count_containing
from services.keyword_taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy

logger = logging.getLogger(__name__)


class FeatureExtractor:
    """Builds a normalized feature vector from preprocessed tokens"""

    INDUSTRY_DENOMINATOR = 10
    SKILL_DENOMINATOR = 5

    # feature name -> (patterns, denominator)
    INDICATOR_FAMILIES = {
        'experience_indicators': (
            ('year', 'yr', 'experience', 'exp', 'intern', 'internship', 'work'), 20
        ),
        'education_indicators': (
            ('bachelor', 'master', 'phd', 'degree', 'university', 'college', 'bs', 'ms'), 10
        ),
        'achievement_indicators': (
            ('achieve', 'award', 'recognition', 'certification', 'certified', 'accomplishment'), 5
        ),
        'quantification_indicators': (
            ('increase', 'decrease', 'improve', 'reduce', 'save', 'generate', 'boost'), 10
        ),
        'project_indicators': (
            ('project', 'portfolio', 'built', 'developed', 'created', 'designed'), 15
        ),
    }

    def __init__(self, taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy

    def extract(self, tokens: Sequence[str], raw_text: str = "") -> Dict[str, float]:
        """
        Every declared feature is always present, clamped to [0, 1].
        Taxonomy keywords use the bidirectional match; indicator families
        only check that a token contains a pattern. The vector is
        diagnostic only: no score or report field is derived from it, and
        raw_text is accepted for interface parity but not read.
        """
        features: Dict[str, float] = {}

        for industry, keywords in self.taxonomy.industry_keywords.items():
            matches = count_bidirectional(tokens, keywords)
            features[f'industry_{industry}'] = self._normalize(matches, self.INDUSTRY_DENOMINATOR)

        for category, keywords in self.taxonomy.skill_categories.items():
            matches = count_bidirectional(tokens, keywords)
            features[f'skills_{category}'] = self._normalize(matches, self.SKILL_DENOMINATOR)

        for name, (patterns, denominator) in self.INDICATOR_FAMILIES.items():
            features[name] = self._normalize(count_containing(tokens, patterns), denominator)

        logger.debug(f"Extracted {len(features)} features from {len(tokens)} tokens")
        return features

    @staticmethod
    def _normalize(count: int, denominator: int) -> float:
        return max(0.0, min(1.0, count / denominator))
