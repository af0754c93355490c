"""
Lowcountry Locale Engine - address suggestion, neighborhood resolution and
local-authenticity scoring for Charleston-area listings.
"""
from .engine import LocaleEngine
from .gazetteer import POPULAR_LOCATIONS, SC_LOCATIONS
from .processors.authenticity import score_authenticity
from .processors.projection import build_context, compose_context, should_use_piazza
from .processors.resolution import resolve
from .processors.suggestion import highlight_match, suggest
from .utils.directory_utils import (
    NeighborhoodRecord,
    get_neighborhood_by_name,
    load_directory,
)
from .utils.validation_utils import validate_directory

__version__ = '1.0.0'

__all__ = [
    'LocaleEngine',
    'SC_LOCATIONS',
    'POPULAR_LOCATIONS',
    'suggest',
    'highlight_match',
    'resolve',
    'build_context',
    'compose_context',
    'should_use_piazza',
    'score_authenticity',
    'NeighborhoodRecord',
    'get_neighborhood_by_name',
    'load_directory',
    'validate_directory',
]
