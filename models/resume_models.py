from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Priority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RoadmapStepType(str, Enum):
    LEARN = "learn"
    PROJECT = "project"
    MILESTONE = "milestone"


class ExperienceTier(str, Enum):
    ENTRY = "Entry Level"
    MID = "Mid Level"
    SENIOR = "Senior Level"


class Recommendation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    problem: str
    solution: str
    priority: Priority
    expected_impact: str = Field(alias="expectedImpact")


class RoadmapItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    type: RoadmapStepType
    description: str


class IndustryProfile(BaseModel):
    """A detectable industry with the templates used for its advice"""
    model_config = ConfigDict(frozen=True)

    name: str
    keywords: Tuple[str, ...] = ()
    roadmap: Tuple[RoadmapItem, ...]
    roles: Tuple[str, ...]


class Scores(BaseModel):
    overall: int = Field(ge=0, le=100)
    skills: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    education: int = Field(ge=0, le=100)
    projects: int = Field(ge=0, le=100)
    achievements: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)


class SalaryExpectation(BaseModel):
    range: str
    justification: str


class AnalysisReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    executive_summary: str = Field(alias="executiveSummary")
    scores: Scores
    strengths: List[str]
    weaknesses: List[str]
    experience_level: ExperienceTier = Field(alias="experienceLevel")
    primary_skills: List[str] = Field(alias="primarySkills", max_length=8)
    detailed_recommendations: List[Recommendation] = Field(
        alias="detailedRecommendations", max_length=6
    )
    roadmap: List[RoadmapItem] = Field(max_length=6)
    target_roles: List[str] = Field(alias="targetRoles", max_length=8)
    salary_expectation: SalaryExpectation = Field(alias="salaryExpectation")


class AnalyzeTextRequest(BaseModel):
    text: str
