from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from models.resume_models import ExperienceTier, IndustryProfile, RoadmapItem, RoadmapStepType

LEARN = RoadmapStepType.LEARN
PROJECT = RoadmapStepType.PROJECT
MILESTONE = RoadmapStepType.MILESTONE

GENERAL_INDUSTRY = "general"

# Detection order matters: the first industry to reach a match count wins ties
INDUSTRY_ORDER: Tuple[str, ...] = (
    "technology", "business", "healthcare", "education", "engineering",
    "creative", "service", "legal", "government", "finance",
)


def _freeze(table: dict) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({key: tuple(values) for key, values in table.items()})


def _step(title: str, step_type: RoadmapStepType, description: str) -> RoadmapItem:
    return RoadmapItem(title=title, type=step_type, description=description)


INDUSTRY_KEYWORDS = _freeze({
    "frontend": ["javascript", "react", "vue", "angular", "html", "css", "typescript", "nodejs", "webpack", "bootstrap"],
    "backend": ["python", "java", "nodejs", "express", "mongodb", "postgresql", "api", "rest", "microservices", "spring"],
    "data_science": ["python", "r", "sql", "pandas", "numpy", "machine learning", "tensorflow", "scikit-learn", "data analysis"],
    "devops": ["docker", "kubernetes", "aws", "jenkins", "ci/cd", "terraform", "ansible", "linux", "bash"],
    "mobile": ["react native", "flutter", "swift", "kotlin", "android", "ios", "mobile development"],
})

SKILL_CATEGORIES = _freeze({
    "programming_languages": ["javascript", "python", "java", "c++", "c#", "go", "rust", "php"],
    "frameworks": ["react", "vue", "angular", "express", "django", "spring", "laravel"],
    "databases": ["mysql", "postgresql", "mongodb", "redis", "oracle", "sql server"],
    "tools": ["git", "docker", "kubernetes", "aws", "azure", "jenkins", "webpack"],
    "soft_skills": ["communication", "leadership", "teamwork", "problem solving", "agile"],
})

INDUSTRY_INDICATORS = _freeze({
    "technology": ["software", "developer", "programmer", "coding", "web", "app", "mobile", "frontend", "backend",
                   "fullstack", "react", "angular", "vue", "node", "python", "java", "javascript"],
    "business": ["manager", "marketing", "sales", "business", "finance", "accounting", "hr", "human resources",
                 "operations", "project management", "strategy", "consulting"],
    "healthcare": ["doctor", "nurse", "medical", "healthcare", "hospital", "pharmacy", "pharmacist", "clinical",
                   "patient care", "therapy", "dentist"],
    "education": ["teacher", "professor", "educator", "teaching", "school", "university", "training", "instruction",
                  "curriculum", "academic"],
    "engineering": ["engineer", "civil", "mechanical", "electrical", "chemical", "design", "construction",
                    "manufacturing", "technical"],
    "creative": ["designer", "artist", "creative", "graphic", "content", "writer", "photographer", "video", "media",
                 "advertising"],
    "service": ["customer service", "hospitality", "hotel", "restaurant", "retail", "sales", "support",
                "call center", "client"],
    "legal": ["lawyer", "legal", "attorney", "court", "judge", "paralegal", "law", "juris", "advocate"],
    "government": ["government", "public", "police", "fire", "military", "defense", "civil service",
                   "administration", "public service"],
    "finance": ["banking", "investment", "finance", "accountant", "financial", "insurance", "audit", "tax",
                "wealth management"],
})

ROADMAP_TEMPLATES = MappingProxyType({
    "technology": (
        _step("Master Core Technical Skills", LEARN, "Strengthen programming fundamentals and core technologies"),
        _step("Build Practical Projects", PROJECT, "Create real-world applications to demonstrate expertise"),
        _step("Learn Industry Best Practices", LEARN, "Study modern development methodologies and standards"),
    ),
    "business": (
        _step("Develop Business Acumen", LEARN, "Understand market dynamics and business operations"),
        _step("Enhance Communication Skills", LEARN, "Build strong presentation and negotiation abilities"),
        _step("Gain Leadership Experience", PROJECT, "Lead initiatives and manage team projects"),
    ),
    "healthcare": (
        _step("Advance Clinical Knowledge", LEARN, "Stay updated with latest medical practices and technologies"),
        _step("Develop Patient Care Skills", PROJECT, "Enhance bedside manner and patient communication"),
        _step("Pursue Specialization", LEARN, "Focus on specific medical areas of interest"),
    ),
    "education": (
        _step("Enhance Teaching Methodologies", LEARN, "Learn modern pedagogical approaches and techniques"),
        _step("Develop Curriculum Skills", PROJECT, "Create engaging educational content and materials"),
        _step("Build Educational Technology Skills", LEARN, "Master digital tools for modern education"),
    ),
    "engineering": (
        _step("Strengthen Technical Foundation", LEARN, "Master core engineering principles and mathematics"),
        _step("Gain Practical Experience", PROJECT, "Work on hands-on engineering projects and designs"),
        _step("Learn Industry Standards", LEARN, "Understand safety protocols and engineering best practices"),
    ),
    "creative": (
        _step("Develop Creative Portfolio", PROJECT, "Build a strong portfolio showcasing diverse creative work"),
        _step("Master Design Tools", LEARN, "Become proficient in industry-standard creative software"),
        _step("Understand Market Trends", LEARN, "Stay current with design trends and creative industry developments"),
    ),
    "service": (
        _step("Enhance Customer Service Skills", LEARN,
              "Develop exceptional client interaction and problem-solving abilities"),
        _step("Learn Service Industry Best Practices", LEARN,
              "Understand hospitality and service excellence standards"),
        _step("Build Management Skills", PROJECT, "Gain experience in team coordination and service operations"),
    ),
    "legal": (
        _step("Deepen Legal Knowledge", LEARN, "Study relevant laws, regulations, and legal precedents"),
        _step("Develop Analytical Skills", LEARN, "Enhance legal research and case analysis capabilities"),
        _step("Gain Practical Legal Experience", PROJECT, "Participate in real legal cases and client interactions"),
    ),
    "government": (
        _step("Understand Public Policy", LEARN, "Study governance structures and public administration"),
        _step("Develop Civic Engagement Skills", LEARN, "Learn community outreach and public service delivery"),
        _step("Build Leadership in Public Service", PROJECT, "Lead initiatives that benefit communities and citizens"),
    ),
    "finance": (
        _step("Master Financial Analysis", LEARN, "Develop skills in financial modeling and market analysis"),
        _step("Understand Regulatory Framework", LEARN, "Study financial regulations and compliance requirements"),
        _step("Gain Investment Experience", PROJECT, "Work on portfolio management and investment strategies"),
    ),
    GENERAL_INDUSTRY: (
        _step("Develop Professional Skills", LEARN, "Enhance communication, organization, and time management"),
        _step("Build Industry Knowledge", LEARN, "Gain expertise in your chosen field through continuous learning"),
        _step("Create Professional Network", PROJECT, "Connect with industry professionals and mentors"),
    ),
})

ROLE_TEMPLATES = _freeze({
    "technology": ["Software Developer", "IT Specialist", "Technical Consultant", "Systems Analyst", "Web Developer"],
    "business": ["Business Analyst", "Marketing Manager", "Sales Executive", "Operations Manager",
                 "Project Coordinator"],
    "healthcare": ["Healthcare Professional", "Medical Assistant", "Clinical Specialist", "Healthcare Administrator",
                   "Patient Care Coordinator"],
    "education": ["Educator", "Training Specialist", "Instructional Designer", "Academic Advisor",
                  "Learning Consultant"],
    "engineering": ["Engineer", "Technical Specialist", "Design Engineer", "Project Engineer", "Technical Consultant"],
    "creative": ["Creative Professional", "Content Creator", "Media Specialist", "Design Consultant",
                 "Creative Director"],
    "service": ["Customer Service Professional", "Hospitality Manager", "Service Coordinator",
                "Client Relations Specialist", "Operations Associate"],
    "legal": ["Legal Professional", "Paralegal", "Legal Assistant", "Compliance Specialist", "Legal Consultant"],
    "government": ["Public Service Professional", "Administrative Officer", "Government Specialist",
                   "Public Policy Assistant", "Civil Service Professional"],
    "finance": ["Financial Professional", "Accounting Specialist", "Financial Analyst", "Banking Professional",
                "Investment Associate"],
    GENERAL_INDUSTRY: ["Professional", "Specialist", "Coordinator", "Associate", "Consultant"],
})

SENIORITY_PREFIXES = _freeze({
    "senior": ["Senior", "Lead", "Manager", "Director", "Head"],
    "mid": ["Specialist", "Coordinator", "Analyst", "Professional", "Consultant"],
    "entry": ["Associate", "Assistant", "Junior", "Trainee", "Coordinator"],
})

# (min, max) annual salary in USD
SALARY_BANDS: Mapping[ExperienceTier, Tuple[int, int]] = MappingProxyType({
    ExperienceTier.ENTRY: (45000, 75000),
    ExperienceTier.MID: (75000, 125000),
    ExperienceTier.SENIOR: (125000, 185000),
})


@dataclass(frozen=True)
class KeywordTaxonomy:
    """Read-only keyword tables and templates shared by every pipeline stage"""
    industry_keywords: Mapping[str, Tuple[str, ...]]
    skill_categories: Mapping[str, Tuple[str, ...]]
    industry_indicators: Mapping[str, Tuple[str, ...]]
    roadmap_templates: Mapping[str, Tuple[RoadmapItem, ...]]
    role_templates: Mapping[str, Tuple[str, ...]]
    seniority_prefixes: Mapping[str, Tuple[str, ...]]
    salary_bands: Mapping[ExperienceTier, Tuple[int, int]]
    industry_order: Tuple[str, ...] = INDUSTRY_ORDER

    def industry_profile(self, name: str) -> IndustryProfile:
        """Build the profile for an industry, falling back to the general templates"""
        if name not in self.roadmap_templates:
            name = GENERAL_INDUSTRY
        return IndustryProfile(
            name=name,
            keywords=self.industry_indicators.get(name, ()),
            roadmap=self.roadmap_templates[name],
            roles=self.role_templates.get(name, self.role_templates[GENERAL_INDUSTRY]),
        )


DEFAULT_TAXONOMY = KeywordTaxonomy(
    industry_keywords=INDUSTRY_KEYWORDS,
    skill_categories=SKILL_CATEGORIES,
    industry_indicators=INDUSTRY_INDICATORS,
    roadmap_templates=ROADMAP_TEMPLATES,
    role_templates=ROLE_TEMPLATES,
    seniority_prefixes=SENIORITY_PREFIXES,
    salary_bands=SALARY_BANDS,
)
