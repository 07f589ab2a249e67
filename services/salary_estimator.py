from models.resume_models import ExperienceTier, SalaryExpectation
from services.keyword_matching import round_half_up
from services.keyword_taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy


class SalaryEstimator:
    SCORE_BUFFER = 0.2

    def __init__(self, taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy

    def estimate(self, overall_score: int, tier: ExperienceTier) -> SalaryExpectation:
        """
        Scale the tier's salary band by the overall score plus a flat
        buffer. The multiplier is capped at 1 so the band max is never exceeded.
        """
        band_min, band_max = self.taxonomy.salary_bands.get(
            tier, self.taxonomy.salary_bands[ExperienceTier.ENTRY]
        )
        multiplier = min(1.0, overall_score / 100 + self.SCORE_BUFFER)

        low = round_half_up(band_min * multiplier)
        high = round_half_up(band_max * multiplier)
        label = tier.value if isinstance(tier, ExperienceTier) else str(tier)

        return SalaryExpectation(
            range=f"${low:,} - ${high:,}",
            justification=(
                f"Based on {label.lower()} experience and comprehensive "
                f"skill assessment score of {overall_score}"
            ),
        )
