"""
Address suggestions

Input: Partial address as typed (every keystroke, debounced by the caller)
Output: Up to MAX_SUGGESTIONS gazetteer entries, best first
"""
from typing import Dict, List, Sequence, Tuple, Union
import time
import logging

from ..config import DEBUG_SCORING, MAX_SUGGESTIONS
from ..gazetteer import POPULAR_LOCATIONS, SC_LOCATIONS
from ..utils.matching_utils import banded_score
from ..utils.text_utils import extract_text_query, normalize_text

logger = logging.getLogger(__name__)


def score_candidates(
    text_query: str,
    gazetteer: Sequence[str] = SC_LOCATIONS
) -> List[Dict[str, Union[str, int]]]:
    """
    Score every gazetteer entry against the text portion of a query.

    Args:
        text_query: Query with any house number already removed
        gazetteer: Place names in declaration order

    Returns:
        List of {'name', 'score'} with score > 0, sorted by score descending.
        Equal scores keep gazetteer order (stable sort).

    Example:
        >>> score_candidates("Dow")[0]
        {'name': 'Downtown Charleston, SC', 'score': 90}
    """
    normalized_query = normalize_text(text_query)

    scored = []
    for entry in gazetteer:
        score = banded_score(normalize_text(entry), normalized_query)
        if DEBUG_SCORING == 'FULL':
            logger.debug(f"[SCORE] '{entry}' vs '{normalized_query}' → {score}")
        if score > 0:
            scored.append({'name': entry, 'score': score})

    return sorted(scored, key=lambda candidate: -candidate['score'])


def suggest(
    query: str,
    gazetteer: Sequence[str] = SC_LOCATIONS,
    popular: Sequence[str] = POPULAR_LOCATIONS,
    limit: int = MAX_SUGGESTIONS
) -> List[str]:
    """
    Rank gazetteer entries for an autocomplete query.

    Steps:
    1. Empty query → no suggestions (caller decides what to show)
    2. Strip a leading house number; nothing left → popular locations
    3. Score all entries, keep positives, stable sort by score
    4. Take the first `limit`; nothing matched → popular locations

    Args:
        query: Raw query as typed
        gazetteer: Place names to rank
        popular: Curated defaults, returned verbatim (not sliced)
        limit: Maximum number of ranked suggestions

    Returns:
        Ordered list of place names

    Example:
        >>> suggest("Dow")[0]
        'Downtown Charleston, SC'
        >>> suggest("42") == list(POPULAR_LOCATIONS)
        True
    """
    if not query or not isinstance(query, str):
        return []

    start_time = time.time()

    text_query = extract_text_query(query)
    if not text_query:
        logger.debug(f"[SUGGEST] '{query}' is a house number only → popular locations")
        return list(popular)

    candidates = score_candidates(text_query, gazetteer)[:limit]

    if not candidates:
        logger.debug(f"[SUGGEST] '{query}' matched nothing → popular locations")
        return list(popular)

    processing_time = (time.time() - start_time) * 1000
    if DEBUG_SCORING in ('WINNERS', 'FULL'):
        top = candidates[0]
        logger.debug(
            f"[SUGGEST] '{query}' → {len(candidates)} suggestions, "
            f"top '{top['name']}' ({top['score']}) | {processing_time:.3f}ms"
        )

    return [candidate['name'] for candidate in candidates]


def highlight_match(text: str, query: str) -> Tuple[str, str, str]:
    """
    Split a suggestion around the part that matches the typed text.

    The house number is ignored; matching is case-insensitive on the first
    occurrence. Without a match the whole text is returned as the first part.

    Args:
        text: Suggestion to display
        query: Raw query as typed

    Returns:
        (before, match, after) with before + match + after == text

    Example:
        >>> highlight_match("Mount Pleasant, SC", "12 pleas")
        ('Mount ', 'Pleas', 'ant, SC')
    """
    if not query:
        return text, '', ''

    text_query = extract_text_query(query)
    if not text_query:
        return text, '', ''

    index = text.lower().find(text_query.lower())
    if index == -1:
        return text, '', ''

    end = index + len(text_query)
    return text[:index], text[index:end], text[end:]
