import re

from models.resume_models import ExperienceTier


class ExperienceClassifier:
    """Seniority from explicit "N years" mentions or the experience score"""

    YEARS_PATTERN = re.compile(r'\b(\d+)\s*(?:year|yr)s?\b', re.IGNORECASE)

    def extract_years(self, text: str) -> int:
        """Largest "N years" / "N yrs" value found, 0 when none"""
        return max((int(years) for years in self.YEARS_PATTERN.findall(text)), default=0)

    def classify(self, experience_score: int, text: str) -> ExperienceTier:
        years = self.extract_years(text)

        # Either signal alone can promote the tier
        if years >= 5 or experience_score >= 80:
            return ExperienceTier.SENIOR
        if years >= 2 or experience_score >= 60:
            return ExperienceTier.MID
        return ExperienceTier.ENTRY
