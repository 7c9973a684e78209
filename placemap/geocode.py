import logging
from typing import Optional, Tuple

import requests
from requests import RequestException

from placemap.settings import HEADERS, NOMINATIM_URL, REQUEST_TIMEOUT, RESULT_LIMIT

logger = logging.getLogger(__name__)


def geocode(place_name: str, session=None, timeout=REQUEST_TIMEOUT) -> Optional[Tuple[float, float]]:
    """Return (lat, lon) for a place name using Nominatim, or None when nothing usable comes back.

    Network errors, HTTP errors and malformed payloads all collapse to None.
    """
    if not place_name:
        return None

    http = session if session is not None else requests
    params = {"format": "json", "q": place_name, "limit": RESULT_LIMIT}
    logger.debug("Nominatim lookup for %r", place_name)
    try:
        r = http.get(NOMINATIM_URL, params=params, headers=HEADERS, timeout=timeout)
    except RequestException as exc:
        logger.warning("Nominatim request for %r failed: %s", place_name, exc)
        return None
    if not r.ok:
        logger.warning("Nominatim returned HTTP %s for %r", r.status_code, place_name)
        return None

    try:
        js = r.json()
    except ValueError:
        logger.warning("Nominatim sent a non-JSON body for %r", place_name)
        return None
    if not isinstance(js, list) or not js:
        return None

    location = js[0]
    # lat / lon arrive as strings
    try:
        return float(location["lat"]), float(location["lon"])
    except (KeyError, TypeError, ValueError):
        logger.warning("Unparsable coordinates in Nominatim result for %r: %r", place_name, location)
        return None
