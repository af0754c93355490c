"""
Utility modules for place-name matching and the neighborhood directory.
"""
from .text_utils import (
    normalize_text,
    expand_abbreviations,
    extract_text_query,
)

from .matching_utils import (
    banded_score,
    levenshtein_normalized,
    token_sort_ratio,
)

from .directory_utils import (
    NeighborhoodRecord,
    load_directory,
    get_neighborhood_by_name,
    find_by_zip,
)

__all__ = [
    # Text utilities
    'normalize_text',
    'expand_abbreviations',
    'extract_text_query',
    # Matching utilities
    'banded_score',
    'levenshtein_normalized',
    'token_sort_ratio',
    # Directory
    'NeighborhoodRecord',
    'load_directory',
    'get_neighborhood_by_name',
    'find_by_zip',
]
