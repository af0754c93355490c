"""
Neighborhood resolution

Input: Full address string
Output: DetectionResult dict {'neighborhood', 'confidence', 'method'}

Rules (first applicable wins):
1. Zip code: first standalone 5-digit run registered to a neighborhood
2. Name/alias: substring of the lowercased address, directory order
3. Region fallback: address mentions the region but no neighborhood
4. No match

Rules 3 and 4 return the same shape. The region check only changes the log
line; whether it should ever raise confidence is undecided upstream.
"""
from typing import Any, Dict, Optional, Sequence
import re
import time
import logging

from ..config import DEBUG_RESOLUTION, REGION_MARKERS, ZIP_CODE_PATTERN
from ..utils.directory_utils import NeighborhoodRecord, find_by_zip, load_directory

logger = logging.getLogger(__name__)

ZIP_CODE_RE = re.compile(ZIP_CODE_PATTERN)


def _detection(
    neighborhood: Optional[NeighborhoodRecord],
    confidence: str,
    method: str
) -> Dict[str, Any]:
    return {
        'neighborhood': neighborhood,
        'confidence': confidence,
        'method': method,
    }


def extract_zip_code(address: str) -> Optional[str]:
    """
    First standalone 5-digit run in the address, or None.

    Example:
        >>> extract_zip_code("123 Main St, Charleston, SC 29401")
        '29401'
    """
    if not address:
        return None
    match = ZIP_CODE_RE.search(address)
    return match.group(1) if match else None


def match_by_name(
    address_lower: str,
    directory: Sequence[NeighborhoodRecord]
) -> Optional[NeighborhoodRecord]:
    """
    First neighborhood (directory order) whose name or any alias occurs in
    the lowercased address. The name is checked before the aliases, and
    aliases in list order.
    """
    for record in directory:
        if record.name.lower() in address_lower:
            return record
        for alias in record.aliases:
            if alias.lower() in address_lower:
                return record
    return None


def resolve(
    address: str,
    directory: Sequence[NeighborhoodRecord] = None
) -> Dict[str, Any]:
    """
    Resolve a free-text address to a neighborhood.

    Never raises; a None neighborhood with 'low' confidence is an ordinary
    outcome.

    Args:
        address: Free-text address
        directory: Neighborhood records in priority order (default: bundled)

    Returns:
        Dictionary containing:
        - neighborhood: NeighborhoodRecord or None
        - confidence: 'high' | 'low'
        - method: 'zip' | 'name' | 'none'

    Example:
        >>> resolve("123 Main St, Charleston, SC 29401")['method']
        'zip'
        >>> resolve("100 Rifle Range Rd, Mount Pleasant, SC")['neighborhood'].name
        'Mount Pleasant'
    """
    if not isinstance(address, str):
        address = ''

    if directory is None:
        directory = load_directory()

    start_time = time.time()

    # Rule 1: zip code
    zip_code = extract_zip_code(address)
    if zip_code:
        record = find_by_zip(zip_code, directory)
        if record is not None:
            if DEBUG_RESOLUTION:
                logger.debug(f"[RESOLVE] '{address}' → {record.name} (zip {zip_code})")
            return _detection(record, 'high', 'zip')
        if DEBUG_RESOLUTION:
            logger.debug(f"[RESOLVE] zip {zip_code} not registered, trying names")

    # Rule 2: canonical name, then aliases
    address_lower = address.lower()
    record = match_by_name(address_lower, directory)
    if record is not None:
        if DEBUG_RESOLUTION:
            logger.debug(f"[RESOLVE] '{address}' → {record.name} (name/alias)")
        return _detection(record, 'high', 'name')

    processing_time = (time.time() - start_time) * 1000

    # Rule 3: region fallback
    if any(marker in address_lower for marker in REGION_MARKERS):
        if DEBUG_RESOLUTION:
            logger.debug(f"[RESOLVE] '{address}' → region only, no neighborhood | {processing_time:.3f}ms")
        return _detection(None, 'low', 'none')

    # Rule 4: nothing recognised
    if DEBUG_RESOLUTION:
        logger.debug(f"[RESOLVE] '{address}' → no match | {processing_time:.3f}ms")
    return _detection(None, 'low', 'none')
