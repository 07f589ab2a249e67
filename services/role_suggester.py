from typing import Dict, List, Optional, Sequence

from models.resume_models import IndustryProfile
from services.industry_detector import IndustryDetector

MAX_ROLES = 8
BASE_ROLE_LIMIT = 3
GENERAL_ROLES = ('Professional', 'Specialist')


class RoleSuggester:
    def __init__(self, detector: Optional[IndustryDetector] = None):
        self.detector = detector or IndustryDetector()
        self.taxonomy = self.detector.taxonomy

    @staticmethod
    def seniority(experience_score: int) -> str:
        """Title seniority, mapped separately from the experience tier"""
        if experience_score >= 70:
            return 'senior'
        if experience_score >= 40:
            return 'mid'
        return 'entry'

    def suggest(self, tokens: Sequence[str], sections: Dict[str, int],
                profile: Optional[IndustryProfile] = None) -> List[str]:
        if profile is None:
            profile = self.detector.detect(tokens)

        level = self.seniority(sections['experience'])
        prefixes = self.taxonomy.seniority_prefixes.get(level, self.taxonomy.seniority_prefixes['entry'])

        roles = []
        for index, base_role in enumerate(profile.roles[:BASE_ROLE_LIMIT]):
            if level != 'entry' and index < len(prefixes):
                roles.append(f"{prefixes[index]} {base_role}")
            else:
                roles.append(base_role)

        roles.extend(GENERAL_ROLES)

        # Deduplicate, keeping first occurrence order
        return list(dict.fromkeys(roles))[:MAX_ROLES]
