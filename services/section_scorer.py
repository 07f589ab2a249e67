import re
from typing import Dict, Sequence

from services.keyword_matching import count_bidirectional, count_containing
from services.keyword_taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy

SECTION_NAMES = ('skills', 'experience', 'education', 'projects', 'formatting', 'achievements')


class SectionScorer:
    """Scores the six resume sections, each independently capped at 100"""

    def __init__(self, taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY):
        self.taxonomy = taxonomy

        # Word mentions: a token counts when it contains one of these
        self.section_patterns = {
            'skills': ('skill', 'competency', 'proficiency', 'expertise', 'knowledge', 'ability'),
            'experience': ('experience', 'work', 'position', 'role', 'responsibility', 'duty', 'task'),
            'education': ('education', 'degree', 'university', 'college', 'bachelor', 'master', 'phd',
                          'bs', 'ms', 'ba', 'ma'),
            'projects': ('project', 'portfolio', 'built', 'developed', 'created', 'designed', 'implemented'),
            'achievements': ('achieve', 'award', 'recognition', 'certification', 'certified',
                             'accomplishment', 'success'),
        }

        # Applied to raw text so digits survive
        self.time_expression = re.compile(r'\d+\s*(?:year|yr)s?|month|present|current', re.IGNORECASE)
        self.quantified_result = re.compile(r'\d+[%kmg]|increase|decrease|improve|reduce', re.IGNORECASE)

        self.format_indicators = {
            'newlines': re.compile(r'\n'),
            'bullets': re.compile(r'[-•*]'),
            'colons': re.compile(r':'),
            'capitalized_words': re.compile(r'[A-Z][a-z]+'),
        }

    def score_sections(self, text: str, tokens: Sequence[str]) -> Dict[str, int]:
        return {
            'skills': self.score_skills_section(tokens),
            'experience': self.score_experience_section(text, tokens),
            'education': self.score_education_section(tokens),
            'projects': self.score_projects_section(tokens),
            'formatting': self.score_formatting(text),
            'achievements': self.score_achievements_section(text, tokens),
        }

    def score_skills_section(self, tokens: Sequence[str]) -> int:
        """Skill mentions plus the best single technical category"""
        mentions = count_containing(tokens, self.section_patterns['skills'])
        # Max, not sum: keywords overlap across categories
        technical = max(
            (count_bidirectional(tokens, keywords) for keywords in self.taxonomy.skill_categories.values()),
            default=0,
        )
        return min(100, mentions * 8 + technical * 6)

    def score_experience_section(self, text: str, tokens: Sequence[str]) -> int:
        mentions = count_containing(tokens, self.section_patterns['experience'])
        time_mentions = len(self.time_expression.findall(text))
        return min(100, mentions * 10 + time_mentions * 5)

    def score_education_section(self, tokens: Sequence[str]) -> int:
        return min(100, count_containing(tokens, self.section_patterns['education']) * 15)

    def score_projects_section(self, tokens: Sequence[str]) -> int:
        return min(100, count_containing(tokens, self.section_patterns['projects']) * 20)

    def score_achievements_section(self, text: str, tokens: Sequence[str]) -> int:
        mentions = count_containing(tokens, self.section_patterns['achievements'])
        quantified = len(self.quantified_result.findall(text))
        return min(100, mentions * 10 + quantified * 5)

    def score_formatting(self, text: str) -> int:
        """Analyze structural signals of the raw layout"""
        def count(name: str) -> int:
            return len(self.format_indicators[name].findall(text))

        score = 25 if count('newlines') > 10 else 10
        score += 25 if count('bullets') > 5 else 10
        score += 20 if count('colons') > 3 else 5
        score += 20 if count('capitalized_words') > 20 else 10
        return min(100, score)
