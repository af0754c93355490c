"""
Vocabulary & amenity projection.

Pure read-only views over a resolved NeighborhoodRecord, consumed by the
amenities defaults layer and by the external text generator.
"""
import random
from typing import List, Optional

from ..config import HISTORIC_DOWNTOWN_NAME, PIAZZA_TERM, PROXIMITY_SENTENCE
from ..utils.directory_utils import NeighborhoodRecord


def typical_amenities(record: NeighborhoodRecord) -> List[str]:
    """Default amenity display-labels, in record order."""
    return list(record.typical_amenities)


def proximity_terms(record: NeighborhoodRecord) -> List[str]:
    return list(record.vocabulary.proximity_terms)


def landmarks(record: NeighborhoodRecord) -> List[str]:
    return list(record.landmarks)


def selling_points(record: NeighborhoodRecord) -> List[str]:
    return list(record.selling_points)


def neighborhood_vibe(record: NeighborhoodRecord) -> str:
    return record.vocabulary.neighborhood_vibe_phrase


def architectural_style(record: NeighborhoodRecord) -> str:
    return record.vocabulary.architectural_style


def should_use_piazza(record: NeighborhoodRecord) -> bool:
    """
    Whether copy for this neighborhood should say "piazza" rather than "porch".

    True for the historic downtown by name, or for any record whose porch
    term is "piazza". The downtown rule is a named special case, not a
    general historic-district rule.
    """
    return (
        record.name == HISTORIC_DOWNTOWN_NAME or
        record.vocabulary.porch_term == PIAZZA_TERM
    )


def compose_context(
    record: NeighborhoodRecord,
    proximity_index: Optional[int] = None
) -> str:
    """
    Description plus, when an index is given, one proximity sentence.

    Deterministic counterpart of build_context().

    Args:
        record: Neighborhood record
        proximity_index: Index into the record's proximity terms, taken modulo
                         their count so any int picks a term; None leaves
                         the sentence out

    Returns:
        Context paragraph for the text generator

    Example:
        >>> compose_context(record, 0)
        '... Located steps from King Street.'
    """
    parts = [record.description]

    terms = record.vocabulary.proximity_terms
    if proximity_index is not None and terms:
        term = terms[proximity_index % len(terms)]
        parts.append(PROXIMITY_SENTENCE.format(term=term))

    return ' '.join(parts)


def build_context(
    record: NeighborhoodRecord,
    include_proximity: bool = True,
    rng: Optional[random.Random] = None
) -> str:
    """
    Description plus one proximity sentence picked uniformly at random.

    Args:
        record: Neighborhood record
        include_proximity: Append a proximity sentence when the record has terms
        rng: Random source; pass a seeded random.Random for reproducible output

    Returns:
        Context paragraph for the text generator
    """
    terms = record.vocabulary.proximity_terms
    if not include_proximity or not terms:
        return compose_context(record)

    chooser = rng if rng is not None else random
    return compose_context(record, chooser.randrange(len(terms)))
