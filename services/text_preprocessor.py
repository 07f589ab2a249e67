import re
from typing import FrozenSet, List, Optional

from nltk.stem import PorterStemmer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from services.keyword_taxonomy import DEFAULT_TAXONOMY, KeywordTaxonomy


def taxonomy_words(taxonomy: KeywordTaxonomy) -> FrozenSet[str]:
    """Every word used by a taxonomy keyword or indicator"""
    tables = (taxonomy.industry_keywords, taxonomy.skill_categories, taxonomy.industry_indicators)
    return frozenset(
        word
        for table in tables
        for keywords in table.values()
        for keyword in keywords
        for word in keyword.lower().split()
    )


def default_stop_words(taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY) -> FrozenSet[str]:
    """English stopwords, minus words the taxonomy matches on (go, fire, call)"""
    return frozenset(ENGLISH_STOP_WORDS - taxonomy_words(taxonomy))


class TextPreprocessor:
    """Turns raw resume text into a sequence of stemmed tokens"""

    # Keeps tokens such as c++, c#, node.js and ci/cd intact
    DISALLOWED_CHARACTERS = re.compile(r"[^a-z0-9\s\-/+#.@_()]")

    def __init__(self, stop_words: Optional[FrozenSet[str]] = None,
                 taxonomy: KeywordTaxonomy = DEFAULT_TAXONOMY):
        self.stop_words = default_stop_words(taxonomy) if stop_words is None else stop_words
        self.stemmer = PorterStemmer()

    def preprocess(self, text: str) -> List[str]:
        """
        Lower-case, filter characters, split on whitespace, drop stopwords
        and stem. Duplicates are kept since callers count occurrences.
        """
        processed = self.DISALLOWED_CHARACTERS.sub(" ", text.lower())
        tokens = [token for token in processed.split() if token not in self.stop_words]
        return [self.stemmer.stem(token) for token in tokens]
