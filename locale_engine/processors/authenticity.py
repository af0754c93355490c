"""
Local-authenticity scoring

Input: Generated listing description
Output: AuthenticityResult dict {'score', 'has_local_terms',
        'has_neighborhood_mention', 'suggestions'}

Display-only feedback; the result never blocks or retries generation.
"""
from typing import Any, Dict, Sequence
import logging

from ..config import (
    AUTHENTICITY_SUGGESTIONS,
    GENERIC_PORCH_TERM,
    LOCAL_TERMS,
    PIAZZA_TERM,
)
from ..utils.directory_utils import NeighborhoodRecord, load_directory

logger = logging.getLogger(__name__)


def score_authenticity(
    description: str,
    directory: Sequence[NeighborhoodRecord] = None
) -> Dict[str, Any]:
    """
    Classify how strongly a description reads as local copy.

    Steps:
    1. Lowercase the description
    2. has_local_terms: any locale-marker term present
    3. has_neighborhood_mention: any canonical neighborhood name present
       (aliases are not checked)
    4. Suggestions, in fixed order, every one that applies:
       porch without piazza → use "piazza"; no local terms → add them;
       no neighborhood → reference it
    5. Score: both flags 'high', one 'medium', none 'low'

    Args:
        description: Generated prose (any string, may be empty)
        directory: Neighborhood records (default: bundled)

    Returns:
        AuthenticityResult dict

    Example:
        >>> score_authenticity("Nice porch and big yard.")['score']
        'low'
    """
    if not isinstance(description, str):
        description = ''

    if directory is None:
        directory = load_directory()

    description_lower = description.lower()

    has_local_terms = any(term in description_lower for term in LOCAL_TERMS)
    has_neighborhood_mention = any(
        record.name.lower() in description_lower for record in directory
    )

    suggestions = []
    if GENERIC_PORCH_TERM in description_lower and PIAZZA_TERM not in description_lower:
        suggestions.append(AUTHENTICITY_SUGGESTIONS['use_piazza'])
    if not has_local_terms:
        suggestions.append(AUTHENTICITY_SUGGESTIONS['add_local_terms'])
    if not has_neighborhood_mention:
        suggestions.append(AUTHENTICITY_SUGGESTIONS['mention_neighborhood'])

    if has_local_terms and has_neighborhood_mention:
        score = 'high'
    elif has_local_terms or has_neighborhood_mention:
        score = 'medium'
    else:
        score = 'low'

    logger.debug(
        f"[AUTHENTICITY] score={score} local_terms={has_local_terms} "
        f"neighborhood={has_neighborhood_mention} suggestions={len(suggestions)}"
    )

    return {
        'score': score,
        'has_local_terms': has_local_terms,
        'has_neighborhood_mention': has_neighborhood_mention,
        'suggestions': suggestions,
    }
