from typing import Dict, List, Optional, Sequence

from models.resume_models import IndustryProfile, RoadmapItem, RoadmapStepType
from services.industry_detector import IndustryDetector

MAX_ROADMAP_ITEMS = 6

LEADERSHIP_STEP = RoadmapItem(
    title="Develop Leadership and Management Skills",
    type=RoadmapStepType.LEARN,
    description="Build team leadership, strategic planning, and decision-making capabilities",
)
CERTIFICATION_STEP = RoadmapItem(
    title="Pursue Professional Certifications",
    type=RoadmapStepType.MILESTONE,
    description="Obtain industry-recognized credentials to validate your expertise",
)
CONTINUOUS_DEVELOPMENT_STEP = RoadmapItem(
    title="Continuous Professional Development",
    type=RoadmapStepType.LEARN,
    description="Commit to lifelong learning and skill enhancement in your field",
)


class RoadmapGenerator:
    def __init__(self, detector: Optional[IndustryDetector] = None):
        self.detector = detector or IndustryDetector()

    def generate(self, tokens: Sequence[str], sections: Dict[str, int],
                 profile: Optional[IndustryProfile] = None) -> List[RoadmapItem]:
        """
        Industry template first, then experience-conditioned steps, then the
        closing step. Truncation happens last, so a long list drops the closer.
        """
        if profile is None:
            profile = self.detector.detect(tokens)

        roadmap = list(profile.roadmap)

        if sections['experience'] > 70:
            roadmap.append(LEADERSHIP_STEP)
        if sections['skills'] > 60:
            roadmap.append(CERTIFICATION_STEP)

        roadmap.append(CONTINUOUS_DEVELOPMENT_STEP)
        return roadmap[:MAX_ROADMAP_ITEMS]
