import logging
from typing import Dict, Sequence

from models.resume_models import IndustryProfile
from services.keyword_matching import count_matched_keywords
from services.keyword_taxonomy import DEFAULT_TAXONOMY, GENERAL_INDUSTRY, KeywordTaxonomy

logger = logging.getLogger(__name__)


class IndustryDetector:
    def __init__(self, taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy

    def industry_matches(self, tokens: Sequence[str]) -> Dict[str, int]:
        """How many indicator keywords of each industry appear in the tokens"""
        return {
            industry: count_matched_keywords(tokens, self.taxonomy.industry_indicators.get(industry, ()))
            for industry in self.taxonomy.industry_order
        }

    def detect(self, tokens: Sequence[str]) -> IndustryProfile:
        """
        Pick the industry with the most matched indicators. Ties go to the
        industry that comes first in the detection order; no matches at
        all yields the general profile.
        """
        primary_industry = GENERAL_INDUSTRY
        max_matches = 0

        for industry, matches in self.industry_matches(tokens).items():
            if matches > max_matches:
                max_matches = matches
                primary_industry = industry

        logger.debug(f"Detected industry {primary_industry} with {max_matches} indicator matches")
        return self.taxonomy.industry_profile(primary_industry)
