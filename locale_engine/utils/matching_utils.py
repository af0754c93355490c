"""
Matching utilities for place-name comparison.

Kept (3 functions):
- banded_score(): deterministic 100/90/80/70/60/50/0 autocomplete bands
- levenshtein_normalized(): edit-distance similarity for data-quality checks
- token_sort_ratio(): order-invariant similarity for "did you mean" hints
"""
from functools import lru_cache
import logging

import Levenshtein
from rapidfuzz import fuzz

from ..config import (
    CACHE_MAX_SIZE,
    PARTIAL_WORD_CREDIT,
    SCORE_BANDS,
    WORD_MATCH_THRESHOLD,
)
from .text_utils import split_words

logger = logging.getLogger(__name__)


# === Autocomplete scoring ===

@lru_cache(maxsize=CACHE_MAX_SIZE)
def banded_score(entry: str, query: str) -> int:
    """
    Score a gazetteer entry against a query. Both must already be normalized.

    Bands (first applicable wins):
    - 100: exact equality
    - 90:  entry starts with query (an empty query is a prefix of everything)
    - 80:  every query word credited and one credit hit the entry's first word
    - 70:  every query word credited
    - 60:  credited words >= 70% of query words
    - 50:  query is a raw substring of entry
    - 0:   no match

    Word credit: every query word is checked against every entry word; an
    entry word starting with the query word earns 1, an entry word merely
    containing it earns 0.5. Credits accumulate over all entry words, so a
    query word hitting two entry words counts twice and then no longer equals
    the query word count.

    Args:
        entry: Normalized gazetteer entry
        query: Normalized query text

    Returns:
        Integer score (0-100)

    Example:
        >>> banded_score("downtown charleston, sc", "dow")
        90
        >>> banded_score("old village mount pleasant, sc", "mount pleasant")
        70
    """
    if entry == query:
        return SCORE_BANDS['exact']

    if entry.startswith(query):
        return SCORE_BANDS['prefix']

    query_words = split_words(query)
    entry_words = split_words(entry)

    matched_words = 0.0
    first_word_hit = False

    for query_word in query_words:
        for index, entry_word in enumerate(entry_words):
            if entry_word.startswith(query_word):
                matched_words += 1
                if index == 0:
                    first_word_hit = True
            elif query_word in entry_word:
                matched_words += PARTIAL_WORD_CREDIT

    word_count = len(query_words)

    if matched_words == word_count and first_word_hit:
        return SCORE_BANDS['all_words_first']
    if matched_words == word_count:
        return SCORE_BANDS['all_words']
    if matched_words >= word_count * WORD_MATCH_THRESHOLD:
        return SCORE_BANDS['most_words']

    if query in entry:
        return SCORE_BANDS['substring']

    return SCORE_BANDS['none']


# === Similarity (data-quality tooling) ===

@lru_cache(maxsize=CACHE_MAX_SIZE)
def levenshtein_normalized(s1: str, s2: str) -> float:
    """
    Calculate normalized Levenshtein similarity (0-1 scale).
    1.0 = identical, 0.0 = completely different.

    Args:
        s1: First string
        s2: Second string

    Returns:
        Normalized similarity score (0.0-1.0)

    Example:
        >>> levenshtein_normalized("sullivans island", "sullivan's island")
        0.941...
    """
    if not s1 or not s2:
        return 0.0

    s1_norm = s1.lower().strip()
    s2_norm = s2.lower().strip()

    if s1_norm == s2_norm:
        return 1.0

    distance = Levenshtein.distance(s1_norm, s2_norm)
    max_len = max(len(s1_norm), len(s2_norm))

    return 1.0 - (distance / max_len) if max_len > 0 else 0.0


@lru_cache(maxsize=CACHE_MAX_SIZE)
def token_sort_ratio(s1: str, s2: str) -> float:
    """
    Order-invariant similarity (0-100), wrapper around rapidfuzz.

    Example:
        >>> token_sort_ratio("island james", "James Island")
        100.0
    """
    if not s1 or not s2:
        return 0.0

    return fuzz.token_sort_ratio(s1.lower().strip(), s2.lower().strip())


def get_cache_stats() -> dict:
    """
    Get statistics about cache usage.

    Returns:
        Dictionary with cache statistics
    """
    return {
        'banded_score': banded_score.cache_info()._asdict(),
        'levenshtein_normalized': levenshtein_normalized.cache_info()._asdict(),
        'token_sort_ratio': token_sort_ratio.cache_info()._asdict(),
    }
