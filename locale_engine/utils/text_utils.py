"""
Text processing utilities for address normalization.
"""
import re
from functools import lru_cache
from typing import Tuple

from ..config import CACHE_MAX_SIZE, HOUSE_NUMBER_PATTERN


# Precompiled regex patterns for performance
WHITESPACE_PATTERN = re.compile(r'\s+')
HOUSE_NUMBER_RE = re.compile(HOUSE_NUMBER_PATTERN)

# Street / geographic abbreviations (whole words only)
ADDRESS_ABBREVIATIONS = {
    'mt': 'mount',
    'st': 'street',
    'ave': 'avenue',
    'blvd': 'boulevard',
    'dr': 'drive',
    'rd': 'road',
    'ln': 'lane',
    'ct': 'court',
}

# One pattern per key, applied in table order; expansions are never re-expanded
ABBREVIATION_PATTERNS = [
    (re.compile(r'\b' + re.escape(abbr) + r'\b', re.IGNORECASE), full)
    for abbr, full in ADDRESS_ABBREVIATIONS.items()
]


@lru_cache(maxsize=CACHE_MAX_SIZE)
def expand_abbreviations(text: str) -> str:
    """
    Expand common street and geographic abbreviations.

    Each abbreviation is a single independent pass, so several abbreviations
    in one string are all expanded but an expansion is never expanded again.

    Args:
        text: Input text (any case)

    Returns:
        Text with abbreviations replaced by full words

    Example:
        >>> expand_abbreviations("12 mt pleasant st")
        '12 mount pleasant street'
    """
    if not text:
        return text

    result = text
    for pattern, replacement in ABBREVIATION_PATTERNS:
        result = pattern.sub(replacement, result)

    return result


@lru_cache(maxsize=CACHE_MAX_SIZE)
def normalize_text(text: str) -> str:
    """
    Normalize text so queries and gazetteer entries compare on equal footing.

    Pipeline steps:
    1. Lowercase + trim
    2. Abbreviation expansion (word boundary, case-insensitive)

    Punctuation and inner whitespace are kept as-is: word splitting in the
    scorer treats "charleston," as one word.

    Args:
        text: Raw text

    Returns:
        Normalized text, possibly empty

    Example:
        >>> normalize_text("  Mt Pleasant, SC ")
        'mount pleasant, sc'
    """
    if not text or not isinstance(text, str):
        return ''

    return expand_abbreviations(text.lower().strip())


def extract_text_query(query: str) -> str:
    """
    Strip a leading house number from a query.

    Args:
        query: Raw query as typed

    Returns:
        The text after the leading digits (trimmed), or the query unchanged
        when it does not start with a number

    Example:
        >>> extract_text_query("123 King")
        'King'
        >>> extract_text_query("42")
        ''
    """
    if not query:
        return ''

    match = HOUSE_NUMBER_RE.match(query)
    if match:
        return query[match.end():].strip()

    return query


def split_words(text: str) -> Tuple[str, ...]:
    """Split normalized text on runs of whitespace."""
    if not text:
        return ()
    return tuple(WHITESPACE_PATTERN.split(text.strip()))


def get_cache_stats() -> dict:
    """
    Get statistics about cache usage.

    Returns:
        Dictionary with cache statistics
    """
    return {
        'expand_abbr': expand_abbreviations.cache_info()._asdict(),
        'normalize_text': normalize_text.cache_info()._asdict(),
    }
