"""
NASA FIRMS active-fire detections.

Rungs: FIRMS area API (map key) -> public 24h CSV mirror, filtered to the
neighbourhood of the query point -> demo detections -> empty list.
"""

import io
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .. import config, tables
from ..errors import MalformedUpstreamData
from ..http_client import SESSION
from ..models import DataSource, FireDetection, FireReading, Location
from .base import Attempt, ProviderAdapter

log = logging.getLogger(__name__)

DEMO_JITTER_DEG = 0.05
DEMO_MAX_AGE_HOURS = 48


def _find_column(columns: Sequence[str], *needles: str) -> Optional[str]:
    """First header containing any of the needles (case-insensitive)."""
    for col in columns:
        low = col.lower()
        if any(n in low for n in needles):
            return col
    return None


def parse_firms_csv(text: str, satellite: str = "MODIS") -> List[FireDetection]:
    """
    Parse a FIRMS CSV payload into detections.

    Headers are matched by substring, so column order does not matter. Rows
    with the wrong number of fields or non-numeric coordinates are dropped.
    """
    lines = (text or "").strip().splitlines()
    if not lines:
        return []

    header = [h.strip() for h in lines[0].split(",")]
    if _find_column(header, "latitude") is None or _find_column(header, "longitude") is None:
        raise MalformedUpstreamData(f"FIRMS CSV has no latitude/longitude header: {lines[0][:80]!r}")

    # a row must have exactly as many fields as the header
    rows = [line for line in lines[1:] if len(line.split(",")) == len(header)]
    total = len(lines) - 1
    if not rows:
        if total:
            log.debug(f"Dropped {total} malformed FIRMS rows")
        return []

    df = pd.read_csv(io.StringIO("\n".join([lines[0]] + rows)), dtype=str, keep_default_na=False,
                     skipinitialspace=True)
    df.columns = [c.strip() for c in df.columns]

    lat_col = _find_column(df.columns, "latitude")
    lon_col = _find_column(df.columns, "longitude")

    bright_col = _find_column(df.columns, "brightness", "bright_t")
    conf_col = _find_column(df.columns, "confidence")
    frp_col = _find_column(df.columns, "frp")
    date_col = _find_column(df.columns, "acq_date")
    time_col = _find_column(df.columns, "acq_time")

    def column(name: Optional[str]) -> pd.Series:
        if name is None:
            return pd.Series("", index=df.index, dtype=str)
        return df[name].astype(str).str.strip()

    out = pd.DataFrame({
        "lat": pd.to_numeric(column(lat_col), errors="coerce"),
        "lon": pd.to_numeric(column(lon_col), errors="coerce"),
        "brightness": pd.to_numeric(column(bright_col), errors="coerce").fillna(tables.FIRMS_DEFAULT_BRIGHTNESS),
        "confidence": column(conf_col).replace("", "nominal"),
        "frp": pd.to_numeric(column(frp_col), errors="coerce").fillna(0.0),
        "detection_time": column(date_col) + " " + column(time_col),
    }).dropna(subset=["lat", "lon"])

    dropped = total - len(out)
    if dropped:
        log.debug(f"Dropped {dropped} malformed FIRMS rows")

    fires = []
    for n, row in enumerate(out.itertuples(index=False), start=1):
        fires.append(FireDetection(
            id=f"FIRE_{n}",
            lat=float(row.lat),
            lon=float(row.lon),
            brightness=float(row.brightness),
            confidence=row.confidence,
            frp=float(row.frp),
            satellite=satellite,
            detection_time=row.detection_time.strip(),
        ))
    return fires


def within_radius(fires: List[FireDetection], location: Location,
                  radius_deg: float = tables.FIRMS_PUBLIC_RADIUS_DEG) -> List[FireDetection]:
    """Euclidean distance on raw lat/lon degrees, strictly inside the radius."""
    if not fires:
        return []
    lats = np.array([f.lat for f in fires])
    lons = np.array([f.lon for f in fires])
    dist = np.hypot(lats - location.lat, lons - location.lon)
    return [f for f, d in zip(fires, dist) if d < radius_deg]


def tag(fires: List[FireDetection], source: DataSource) -> FireReading:
    fires = [f.model_copy(update={"data_source": source}) for f in fires]
    return FireReading(fires=fires, count=len(fires), data_source=source)


def is_firms_demo_fire_zone(location: Location) -> bool:
    name = location.name or ""
    return any(marker in name for marker in tables.FIRMS_DEMO_FIRE_ZONES)


class FireAdapter(ProviderAdapter):
    name = "FIRMS"
    credential = "NASA_FIRMS_MAP_KEY"
    emoji = "🔥"

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng or np.random.default_rng()

    def unavailable_message(self) -> str:
        return "FIRMS data unavailable: NASA_FIRMS_MAP_KEY not configured or failing"

    def attempts(self) -> Sequence[Attempt]:
        keyed = lambda: bool(config.NASA_FIRMS_MAP_KEY)
        return (
            Attempt(DataSource.REAL, self.fetch_real, keyed),
            Attempt(DataSource.PUBLIC, self.fetch_public, keyed),
            Attempt(DataSource.DEMO, self.fetch_demo, lambda: not keyed()),
            Attempt(DataSource.FALLBACK, self.fetch_fallback),
        )

    def fetch_real(self, location: Location) -> FireReading:
        bbox = ",".join(f"{v:g}" for v in location.bbox)
        url = (f"{config.FIRMS_API_BASE}/{config.NASA_FIRMS_MAP_KEY}/"
               f"{config.FIRMS_SOURCE}/{bbox}/{config.FIRMS_DAY_RANGE}")
        resp = SESSION.get(url, timeout=config.FIRMS_TIMEOUT_SEC)
        resp.raise_for_status()
        fires = parse_firms_csv(resp.text)
        log.info(f"✅ Real FIRMS data: {len(fires)} fires detected")
        return tag(fires, DataSource.REAL)

    def fetch_public(self, location: Location) -> FireReading:
        resp = SESSION.get(config.FIRMS_PUBLIC_CSV_URL, timeout=config.FIRMS_PUBLIC_TIMEOUT_SEC)
        resp.raise_for_status()
        nearby = within_radius(parse_firms_csv(resp.text), location)
        return tag(nearby, DataSource.PUBLIC)

    def fetch_demo(self, location: Location) -> FireReading:
        fire_zone = is_firms_demo_fire_zone(location)
        now = datetime.now(timezone.utc)
        rng = self.rng
        fires = []
        for i in range(tables.FIRMS_DEMO_COUNT[fire_zone]):
            age = timedelta(hours=float(rng.uniform(0, DEMO_MAX_AGE_HOURS)))
            fires.append(FireDetection(
                id=f"DEMO_FIRE_{i + 1}",
                lat=location.lat + float(rng.uniform(-0.5, 0.5)) * DEMO_JITTER_DEG,
                lon=location.lon + float(rng.uniform(-0.5, 0.5)) * DEMO_JITTER_DEG,
                brightness=300 + float(rng.uniform(0, 100)),
                confidence="high" if fire_zone else "nominal",
                frp=50 + float(rng.uniform(0, 200)),
                satellite="MODIS",
                detection_time=(now - age).isoformat().replace("+00:00", "Z"),
            ))
        return tag(fires, DataSource.DEMO)

    def fetch_fallback(self, location: Location) -> FireReading:
        return FireReading(fires=[], count=0, data_source=DataSource.FALLBACK)
