"""
Location Resolver

Turns a free-text query into coordinates and a bounding box:
1. "lat, lon" pairs are parsed directly.
2. Known hotspot names are looked up in the static gazetteer.
3. Anything else goes to Nominatim (OpenStreetMap), first result only.

Bounding boxes are always [west, south, east, north].
"""

import logging
import re
from typing import List, Optional

import requests

from . import config, tables
from .errors import LocationNotFound
from .http_client import SESSION
from .models import Location

log = logging.getLogger(__name__)

COORD_PATTERN = re.compile(r"^(-?\d+\.?\d*),\s*(-?\d+\.?\d*)$")


def bbox_around(lat: float, lon: float, half_width: float = tables.BBOX_HALF_WIDTH_DEG) -> List[float]:
    return [lon - half_width, lat - half_width, lon + half_width, lat + half_width]


def parse_coordinates(query: str) -> Optional[Location]:
    m = COORD_PATTERN.match(query.strip())
    if not m:
        return None
    lat_s, lon_s = m.group(1), m.group(2)
    lat, lon = float(lat_s), float(lon_s)
    return Location(lat=lat, lon=lon, name=f"Location ({lat_s}, {lon_s})", bbox=bbox_around(lat, lon))


def lookup_gazetteer(query: str) -> Optional[Location]:
    q = query.lower()
    for key, place in tables.GAZETTEER.items():
        if key in q:
            return Location(lat=place.lat, lon=place.lon, name=place.name,
                            bbox=bbox_around(place.lat, place.lon), active=place.active)
    return None


def geocode(query: str) -> Optional[Location]:
    """Nominatim lookup. Returns None on no match or any request failure."""
    params = {"q": query, "format": "json", "limit": 1}
    try:
        resp = SESSION.get(config.NOMINATIM_URL, params=params, timeout=config.GEOCODE_TIMEOUT_SEC)
        resp.raise_for_status()
        results = resp.json()
    except (requests.RequestException, ValueError) as e:
        log.error(f"Geocoding error for {query!r}: {e}")
        return None

    if not isinstance(results, list) or not results:
        if isinstance(results, dict) and results.get("error"):
            log.error(f"Geocoder error for {query!r}: {results['error']}")
        return None

    r = results[0]
    try:
        lat, lon = float(r["lat"]), float(r["lon"])
        # Nominatim order is [south, north, west, east]
        south, north, west, east = (float(v) for v in r["boundingbox"])
    except (KeyError, TypeError, ValueError) as e:
        log.error(f"Unexpected geocoder payload for {query!r}: {e}")
        return None

    return Location(lat=lat, lon=lon, name=r.get("display_name") or query,
                    bbox=[west, south, east, north])


def resolve_location(query: str) -> Location:
    query = query.strip()
    location = parse_coordinates(query) or lookup_gazetteer(query) or geocode(query)
    if location is None:
        raise LocationNotFound(query)
    log.info(f"📍 Resolved {query!r} -> {location.name} ({location.lat:.4f}, {location.lon:.4f})")
    return location
