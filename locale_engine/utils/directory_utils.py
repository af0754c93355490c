"""
Neighborhood directory: record schema, loading and lookups.

The directory is a tuple of frozen records in declaration order. Order is
significant: name/alias resolution returns the first record that matches.
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..config import NEIGHBORHOODS_FILE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Geographic bounding box (metadata only, not used for matching)."""
    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True)
class Vocabulary:
    """Locale-specific word substitutions handed to the text generator."""
    architectural_style: str
    neighborhood_vibe_phrase: str
    proximity_terms: Tuple[str, ...] = ()
    porch_term: Optional[str] = None
    balcony_term: Optional[str] = None


@dataclass(frozen=True)
class NeighborhoodRecord:
    """One named locale. `name` is unique across the directory."""
    name: str
    aliases: Tuple[str, ...]
    zip_codes: Tuple[str, ...]
    bounds: Bounds
    description: str
    vocabulary: Vocabulary
    typical_amenities: Tuple[str, ...] = ()
    landmarks: Tuple[str, ...] = ()
    selling_points: Tuple[str, ...] = ()
    vibes: str = ''
    attractions: Tuple[str, ...] = ()
    scenery: Tuple[str, ...] = ()
    proximities: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict, ready for jsonify."""
        return asdict(self)


REQUIRED_KEYS = ('name', 'aliases', 'zip_codes', 'bounds', 'description', 'vocabulary')
LIST_KEYS = ('aliases', 'zip_codes', 'typical_amenities', 'landmarks', 'selling_points', 'attractions', 'scenery')
BOUND_KEYS = ('north', 'south', 'east', 'west')


def _string_list(name: str, key: str, value: Any) -> Tuple[str, ...]:
    """JSON list of strings as a tuple. A bare string is rejected, not split into characters."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"Neighborhood '{name}' field '{key}' must be a list, got {type(value).__name__}")
    return tuple(str(item) for item in value)


def record_from_dict(raw: Dict[str, Any]) -> NeighborhoodRecord:
    """
    Build a NeighborhoodRecord from its JSON form.

    Args:
        raw: Dict with at least name, aliases, zip_codes, bounds, description
             and vocabulary

    Returns:
        NeighborhoodRecord

    Raises:
        ValueError: if a required key is missing, a list field is not a list,
                    or vocabulary/bounds are malformed
    """
    missing = [key for key in REQUIRED_KEYS if key not in raw]
    if missing:
        raise ValueError(f"Neighborhood '{raw.get('name', '?')}' missing keys: {', '.join(missing)}")

    name = raw['name']
    lists = {key: _string_list(name, key, raw.get(key)) for key in LIST_KEYS}

    vocab = raw['vocabulary']
    try:
        vocabulary = Vocabulary(
            architectural_style=vocab['architectural_style'],
            neighborhood_vibe_phrase=vocab['neighborhood_vibe_phrase'],
            proximity_terms=_string_list(name, 'proximity_terms', vocab.get('proximity_terms')),
            porch_term=vocab.get('porch_term'),
            balcony_term=vocab.get('balcony_term'),
        )
        bounds = Bounds(**{key: float(raw['bounds'][key]) for key in BOUND_KEYS})
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Neighborhood '{name}' has malformed vocabulary/bounds: {e}") from e

    return NeighborhoodRecord(
        name=name,
        bounds=bounds,
        description=raw['description'],
        vocabulary=vocabulary,
        vibes=raw.get('vibes') or '',
        proximities=dict(raw.get('proximities') or {}),
        **lists,
    )


@lru_cache(maxsize=8)
def load_directory(path: Path = NEIGHBORHOODS_FILE) -> Tuple[NeighborhoodRecord, ...]:
    """
    Load the neighborhood directory from JSON. Cached per path.

    Args:
        path: JSON file with a top-level "neighborhoods" list

    Returns:
        Tuple of NeighborhoodRecord in file order

    Raises:
        ValueError: if the file is missing, not valid JSON, or a record is
                    malformed

    Example:
        >>> load_directory()[0].name
        'Charleston Historic District'
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding='utf-8'))
    except FileNotFoundError as e:
        raise ValueError(f"Neighborhood directory not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Neighborhood directory is not valid JSON: {path} ({e})") from e

    records = tuple(record_from_dict(raw) for raw in payload.get('neighborhoods', []))
    logger.debug(f"[DIRECTORY] Loaded {len(records)} neighborhoods from {path.name}")
    return records


def get_neighborhood_by_name(
    name: str,
    directory: Sequence[NeighborhoodRecord] = None
) -> Optional[NeighborhoodRecord]:
    """
    Find a record whose canonical name or any alias equals `name`
    (case-insensitive). First match in directory order wins.

    Example:
        >>> get_neighborhood_by_name("IOP").name
        'Isle of Palms'
    """
    if not name:
        return None

    if directory is None:
        directory = load_directory()

    key = name.strip().lower()
    for record in directory:
        if record.name.lower() == key:
            return record
        if any(alias.lower() == key for alias in record.aliases):
            return record

    return None


def find_by_zip(
    zip_code: str,
    directory: Sequence[NeighborhoodRecord] = None
) -> Optional[NeighborhoodRecord]:
    """Return the record that lists `zip_code`, or None."""
    if not zip_code:
        return None

    if directory is None:
        directory = load_directory()

    for record in directory:
        if zip_code in record.zip_codes:
            return record

    return None


def neighborhood_names(directory: Sequence[NeighborhoodRecord] = None) -> List[str]:
    """Canonical names in directory order."""
    if directory is None:
        directory = load_directory()
    return [record.name for record in directory]
