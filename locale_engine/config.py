"""
Configuration settings for address suggestion, neighborhood resolution and
authenticity scoring.
"""
from pathlib import Path


# Base paths
BASE_DIR = Path(__file__).parent
DATA_DIR = BASE_DIR / 'data'

# Neighborhood directory (read once per process, read-only afterwards)
NEIGHBORHOODS_FILE = DATA_DIR / 'charleston_neighborhoods.json'

# Suggestion settings
MAX_SUGGESTIONS = 8
HOUSE_NUMBER_PATTERN = r'^\d+\s*'

# Banded scoring (integer bands, 0-100 scale)
# These values drive ranking ties and must stay exact
SCORE_BANDS = {
    'exact': 100,            # normalized entry == normalized query
    'prefix': 90,            # entry starts with query
    'all_words_first': 80,   # every query word credited, one hit on entry's first word
    'all_words': 70,         # every query word credited
    'most_words': 60,        # credited words >= WORD_MATCH_THRESHOLD of query words
    'substring': 50,         # raw substring anywhere in entry
    'none': 0
}
WORD_MATCH_THRESHOLD = 0.7   # 70% of query words
PARTIAL_WORD_CREDIT = 0.5    # entry word contains (but does not start with) query word

# Resolution settings
ZIP_CODE_PATTERN = r'\b(\d{5})\b'
RESOLVE_MIN_ADDRESS_LENGTH = 10  # UI resolves only once address is longer than this
REGION_MARKERS = ('charleston', 'sc')
CONFIDENCE_LEVELS = ('high', 'medium', 'low')
RESOLUTION_METHODS = ('zip', 'name', 'coordinates', 'none')  # 'coordinates' reserved, never produced

# Vocabulary projection
# Named special case: the historic downtown always gets "piazza" wording
HISTORIC_DOWNTOWN_NAME = 'Downtown Charleston'
PIAZZA_TERM = 'piazza'
PROXIMITY_SENTENCE = 'Located {term}.'

# Authenticity scoring
LOCAL_TERMS = (
    'lowcountry',
    'holy city',
    'piazza',
    'charleston',
    'marsh',
    'live oak',
    'peninsula',
    'harbor',
)
GENERIC_PORCH_TERM = 'porch'
AUTHENTICITY_SUGGESTIONS = {
    'use_piazza': 'Consider using "piazza" instead of "porch" for historic properties',
    'add_local_terms': 'Add Charleston-specific terminology like "Lowcountry" or "Holy City"',
    'mention_neighborhood': 'Reference the specific neighborhood for added local context',
}

# Directory validation
ALIAS_SIMILARITY_WARN = 0.9  # normalized Levenshtein similarity for near-duplicate aliases
CLOSE_NAME_MIN_SCORE = 60    # rapidfuzz token_sort_ratio floor for "did you mean" hints
CLOSE_NAME_LIMIT = 3

# Cache settings
CACHE_MAX_SIZE = 10000

# Debug logging flags (can be toggled independently)
# Format: 'OFF' | 'WINNERS' | 'FULL'
DEBUG_SCORING = 'WINNERS'   # WINNERS: log returned suggestions only | FULL: every entry score
DEBUG_RESOLUTION = True     # Log which resolution rule fired
