"""
Sentinel-1 SAR backscatter (VV/VH) around the query point via Earth Engine.
"""

import datetime as dt
from typing import Sequence

from .. import earth_engine, tables
from ..models import DataSource, Location, SarReading
from .base import Attempt, ProviderAdapter

LOOKBACK_DAYS = 10
BUFFER_M = 5000
SCALE_M = 10


def is_fire_zone(location: Location) -> bool:
    return tables.FIRE_ZONE_MARKER in (location.name or "")


class SarAdapter(ProviderAdapter):
    name = "Sentinel-1"
    credential = "EE_PRIVATE_KEY"
    emoji = "📡"

    def __init__(self, ee_session: earth_engine.EarthEngineSession | None = None):
        self.ee_session = ee_session or earth_engine.session

    def attempts(self) -> Sequence[Attempt]:
        return (
            Attempt(DataSource.REAL, self.fetch_real, lambda: self.ee_session.ready),
            Attempt(DataSource.DEMO, self.fetch_demo, lambda: not self.ee_session.ready),
            Attempt(DataSource.FALLBACK, self.fetch_fallback),
        )

    def fetch_real(self, location: Location) -> SarReading:
        import ee

        point = ee.Geometry.Point([location.lon, location.lat])
        end = ee.Date(dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%S"))
        start = end.advance(-LOOKBACK_DAYS, "day")

        image = (ee.ImageCollection("COPERNICUS/S1_GRD")
                 .filterBounds(point)
                 .filterDate(start, end)
                 .filter(ee.Filter.listContains("transmitterReceiverPolarisation", "VV"))
                 .filter(ee.Filter.listContains("transmitterReceiverPolarisation", "VH"))
                 .select(["VV", "VH"])
                 .sort("system:time_start", False)
                 .first())

        stats = image.reduceRegion(
            reducer=ee.Reducer.mean(),
            geometry=point.buffer(BUFFER_M),
            scale=SCALE_M,
            maxPixels=1e9,
        ).getInfo() or {}

        vv = stats.get("VV")
        vh = stats.get("VH")
        vv = float(vv) if vv is not None else tables.SAR_DEFAULT_VV
        vh = float(vh) if vh is not None else tables.SAR_DEFAULT_VH

        extra = {}
        millis = image.get("system:time_start").getInfo()
        if millis:
            acquired = dt.datetime.fromtimestamp(millis / 1000, tz=dt.timezone.utc)
            extra["last_update"] = acquired.isoformat().replace("+00:00", "Z")

        return SarReading(vv=vv, vh=vh, vh_vv_ratio=vh - vv, coherence=tables.SAR_COHERENCE,
                          data_source=DataSource.REAL, **extra)

    def fetch_demo(self, location: Location) -> SarReading:
        return SarReading(**tables.SAR_DEMO[is_fire_zone(location)], data_source=DataSource.DEMO)

    def fetch_fallback(self, location: Location) -> SarReading:
        return SarReading(**tables.SAR_FALLBACK, data_source=DataSource.FALLBACK)
