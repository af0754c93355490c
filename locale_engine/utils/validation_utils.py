"""
Data-quality checks for the neighborhood directory and gazetteer.

Matching functions never raise on bad data; integrity problems are caught
here instead, at load or review time.

Errors (directory is wrong):
- duplicate canonical names
- zip code registered to more than one neighborhood
- zip code that is not 5 digits
- inverted bounds
- popular location missing from the gazetteer, duplicate gazetteer entries

Warnings (directory works but resolves by declaration order):
- name/alias identical to another neighborhood's name/alias
- earlier name/alias contained in a later one (later one can never win)
- near-duplicate aliases across neighborhoods
- missing typical amenities or proximity terms
"""
from typing import Any, Dict, List, Sequence, Tuple
import re
import logging

from ..config import ALIAS_SIMILARITY_WARN
from ..gazetteer import POPULAR_LOCATIONS, SC_LOCATIONS
from .directory_utils import NeighborhoodRecord, load_directory
from .matching_utils import levenshtein_normalized

logger = logging.getLogger(__name__)

ZIP_FORMAT_RE = re.compile(r'^\d{5}$')


def _match_terms(directory: Sequence[NeighborhoodRecord]) -> List[Tuple[int, str, str]]:
    """(record index, record name, lowercased term) for every name and alias."""
    terms = []
    for index, record in enumerate(directory):
        terms.append((index, record.name, record.name.lower()))
        for alias in record.aliases:
            terms.append((index, record.name, alias.lower()))
    return terms


def check_names(directory: Sequence[NeighborhoodRecord]) -> List[str]:
    errors = []
    seen = {}
    for record in directory:
        key = record.name.casefold()
        if key in seen:
            errors.append(f"name: '{record.name}' duplicates '{seen[key]}'")
        else:
            seen[key] = record.name
    return errors


def check_zip_codes(directory: Sequence[NeighborhoodRecord]) -> List[str]:
    errors = []
    owners: Dict[str, str] = {}
    for record in directory:
        for zip_code in record.zip_codes:
            if not ZIP_FORMAT_RE.match(zip_code):
                errors.append(f"zip: '{zip_code}' on '{record.name}' is not 5 digits")
                continue
            if zip_code in owners and owners[zip_code] != record.name:
                errors.append(f"zip: {zip_code} registered to both '{owners[zip_code]}' and '{record.name}'")
            else:
                owners[zip_code] = record.name
    return errors


def check_bounds(directory: Sequence[NeighborhoodRecord]) -> List[str]:
    errors = []
    for record in directory:
        bounds = record.bounds
        if bounds.north <= bounds.south:
            errors.append(f"bounds: '{record.name}' north {bounds.north} <= south {bounds.south}")
        if bounds.east <= bounds.west:
            errors.append(f"bounds: '{record.name}' east {bounds.east} <= west {bounds.west}")
    return errors


def check_gazetteer(gazetteer: Sequence[str], popular: Sequence[str]) -> List[str]:
    errors = []
    seen = set()
    for entry in gazetteer:
        if entry in seen:
            errors.append(f"gazetteer: duplicate entry '{entry}'")
        seen.add(entry)
    for entry in popular:
        if entry not in seen:
            errors.append(f"gazetteer: popular location '{entry}' is not in the gazetteer")
    return errors


def check_term_collisions(directory: Sequence[NeighborhoodRecord]) -> List[str]:
    """
    Name/alias collisions across neighborhoods.

    Exact collisions and containment both mean the earlier neighborhood
    always wins in resolution; near-duplicates are usually spelling variants
    that belong to one neighborhood.
    """
    warnings = []
    terms = _match_terms(directory)

    for i, (index_a, name_a, term_a) in enumerate(terms):
        for index_b, name_b, term_b in terms[i + 1:]:
            if index_a == index_b:
                continue
            if term_a == term_b:
                warnings.append(f"alias: '{term_a}' used by both '{name_a}' and '{name_b}'")
            elif term_a in term_b:
                warnings.append(
                    f"alias: '{term_a}' ('{name_a}') is contained in '{term_b}' ('{name_b}'), "
                    f"so '{name_b}' can never match on it"
                )
            elif term_b in term_a:
                # later term inside an earlier one: only reachable if the earlier term is absent
                continue
            elif levenshtein_normalized(term_a, term_b) >= ALIAS_SIMILARITY_WARN:
                warnings.append(f"alias: '{term_a}' ('{name_a}') looks like '{term_b}' ('{name_b}')")

    return warnings


def check_completeness(directory: Sequence[NeighborhoodRecord]) -> List[str]:
    warnings = []
    for record in directory:
        if not record.typical_amenities:
            warnings.append(f"record: '{record.name}' has no typical amenities")
        if not record.vocabulary.proximity_terms:
            warnings.append(f"record: '{record.name}' has no proximity terms")
    return warnings


def validate_directory(
    directory: Sequence[NeighborhoodRecord] = None,
    gazetteer: Sequence[str] = SC_LOCATIONS,
    popular: Sequence[str] = POPULAR_LOCATIONS
) -> Dict[str, Any]:
    """
    Run all data-quality checks.

    Args:
        directory: Neighborhood records (default: bundled)
        gazetteer: Suggestion place names
        popular: Curated popular subset

    Returns:
        Dictionary containing:
        - valid: True when there are no errors
        - errors: List of error messages
        - warnings: List of warning messages
        - stats: counts of neighborhoods, aliases, zip codes, gazetteer entries
    """
    if directory is None:
        directory = load_directory()

    errors = []
    errors.extend(check_names(directory))
    errors.extend(check_zip_codes(directory))
    errors.extend(check_bounds(directory))
    errors.extend(check_gazetteer(gazetteer, popular))

    warnings = []
    warnings.extend(check_term_collisions(directory))
    warnings.extend(check_completeness(directory))

    for message in errors:
        logger.warning(f"[VALIDATE] ERROR {message}")
    for message in warnings:
        logger.info(f"[VALIDATE] {message}")

    return {
        'valid': not errors,
        'errors': errors,
        'warnings': warnings,
        'stats': {
            'neighborhoods': len(directory),
            'aliases': sum(len(record.aliases) for record in directory),
            'zip_codes': sum(len(record.zip_codes) for record in directory),
            'gazetteer_entries': len(gazetteer),
            'popular_entries': len(popular),
        }
    }
