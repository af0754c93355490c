"""
Locale Engine - binds the gazetteer and neighborhood directory once and
exposes every operation the listing UI and text generator need:

suggest → (user picks an address) → resolve / locale_profile
        → build_context → (text generator) → score_authenticity
"""
from typing import Any, Dict, List, Optional, Sequence
import random
import time
import logging

from .config import RESOLVE_MIN_ADDRESS_LENGTH
from .gazetteer import POPULAR_LOCATIONS, SC_LOCATIONS
from .processors import authenticity, projection, resolution, suggestion
from .utils import matching_utils, text_utils
from .utils.directory_utils import (
    NeighborhoodRecord,
    get_neighborhood_by_name,
    load_directory,
)

logger = logging.getLogger(__name__)


class LocaleEngine:
    """
    Orchestrator for suggestion, resolution, projection and scoring.

    The engine is caller-owned and holds no mutable state beyond the injected
    random source; two engines over the same data give the same answers.
    """

    def __init__(
        self,
        directory: Sequence[NeighborhoodRecord] = None,
        gazetteer: Sequence[str] = SC_LOCATIONS,
        popular: Sequence[str] = POPULAR_LOCATIONS,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize engine.

        Args:
            directory: Neighborhood records in priority order (default: bundled)
            gazetteer: Place names for autocomplete
            popular: Curated defaults for empty or unmatched queries
            rng: Random source for build_context (default: module random)
        """
        self.directory = tuple(directory) if directory is not None else load_directory()
        self.gazetteer = tuple(gazetteer)
        self.popular = tuple(popular)
        self.rng = rng

    # === Suggestion ===

    def suggest(self, query: str) -> List[str]:
        """Up to 8 gazetteer entries for a partial address, best first."""
        return suggestion.suggest(query, self.gazetteer, self.popular)

    def highlight(self, text: str, query: str):
        return suggestion.highlight_match(text, query)

    # === Resolution ===

    def should_resolve(self, address: str) -> bool:
        """
        Whether an address is long enough to be worth resolving.

        The listing form resolves only once the typed address is longer than
        RESOLVE_MIN_ADDRESS_LENGTH characters.
        """
        return isinstance(address, str) and len(address) > RESOLVE_MIN_ADDRESS_LENGTH

    def resolve(self, address: str) -> Dict[str, Any]:
        return resolution.resolve(address, self.directory)

    def get_neighborhood(self, name: str) -> Optional[NeighborhoodRecord]:
        return get_neighborhood_by_name(name, self.directory)

    def locale_profile(self, address: str) -> Dict[str, Any]:
        """
        Resolve an address and project everything consumers need from it.

        Args:
            address: Free-text address

        Returns:
            Dictionary containing:
            - neighborhood: canonical name or None
            - confidence / method: from resolution
            - typical_amenities: default amenity labels ([] when unresolved)
            - use_piazza: whether copy should say "piazza"
            - architectural_style, neighborhood_vibe: vocabulary (None when unresolved)
            - proximity_terms, landmarks, selling_points: lists ([] when unresolved)

        Example:
            >>> engine = LocaleEngine()
            >>> engine.locale_profile("12 Meeting St, Charleston, SC 29401")['use_piazza']
            True
        """
        start_time = time.time()

        detection = self.resolve(address)
        record = detection['neighborhood']

        profile = {
            'neighborhood': record.name if record else None,
            'confidence': detection['confidence'],
            'method': detection['method'],
            'typical_amenities': [],
            'use_piazza': False,
            'architectural_style': None,
            'neighborhood_vibe': None,
            'proximity_terms': [],
            'landmarks': [],
            'selling_points': [],
        }

        if record is not None:
            profile.update({
                'typical_amenities': projection.typical_amenities(record),
                'use_piazza': projection.should_use_piazza(record),
                'architectural_style': projection.architectural_style(record),
                'neighborhood_vibe': projection.neighborhood_vibe(record),
                'proximity_terms': projection.proximity_terms(record),
                'landmarks': projection.landmarks(record),
                'selling_points': projection.selling_points(record),
            })

        processing_time = (time.time() - start_time) * 1000
        logger.debug(
            f"[PROFILE] '{address}' → {profile['neighborhood']} "
            f"({profile['method']}) | {processing_time:.3f}ms"
        )

        return profile

    # === Text generation support ===

    def build_context(self, record: NeighborhoodRecord, include_proximity: bool = True) -> str:
        return projection.build_context(record, include_proximity, self.rng)

    def score_authenticity(self, description: str) -> Dict[str, Any]:
        return authenticity.score_authenticity(description, self.directory)

    # === Diagnostics ===

    def get_stats(self) -> Dict[str, Any]:
        """
        Directory sizes and cache usage.

        Returns:
            Statistics dictionary
        """
        return {
            'neighborhoods': len(self.directory),
            'gazetteer_entries': len(self.gazetteer),
            'popular_entries': len(self.popular),
            'cache': {
                **text_utils.get_cache_stats(),
                **matching_utils.get_cache_stats(),
            }
        }
