import math
import re
from typing import Iterable, Sequence

_WHITESPACE = re.compile(r"\s+")


def clean_keyword(keyword: str) -> str:
    """Lower-case a taxonomy keyword and drop its internal whitespace"""
    return _WHITESPACE.sub("", keyword.lower())


def matches_bidirectional(token: str, keyword: str) -> bool:
    """
    Loose match used against taxonomy keywords: either side may contain
    the other. Stemmed tokens are often truncated, so this favors recall.
    """
    cleaned = clean_keyword(keyword)
    return cleaned in token or token in cleaned


def count_bidirectional(tokens: Sequence[str], keywords: Iterable[str]) -> int:
    """Number of tokens matching at least one keyword"""
    cleaned = [clean_keyword(keyword) for keyword in keywords]
    return sum(
        1 for token in tokens
        if any(keyword in token or token in keyword for keyword in cleaned)
    )


def count_matched_keywords(tokens: Sequence[str], keywords: Iterable[str]) -> int:
    """Number of keywords matched by at least one token"""
    return sum(
        1 for keyword in keywords
        if any(matches_bidirectional(token, keyword) for token in tokens)
    )


def count_containing(tokens: Sequence[str], patterns: Iterable[str]) -> int:
    """Number of tokens containing any of the patterns (one direction only)"""
    patterns = tuple(patterns)
    return sum(
        1 for token in tokens
        if any(pattern in token for pattern in patterns)
    )


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
