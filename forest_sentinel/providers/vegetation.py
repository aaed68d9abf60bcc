"""
MODIS MOD13Q1 vegetation indices (NDVI/EVI) via Earth Engine.
"""

from datetime import datetime, timezone
from typing import Sequence

from .. import earth_engine, tables
from ..errors import UpstreamError
from ..models import DataSource, Location, VegetationReading
from .base import Attempt, ProviderAdapter
from .sar import is_fire_zone

LOOKBACK_DAYS = 30
BUFFER_M = 5000
SCALE_M = 250


def health_for(ndvi: float) -> str:
    if ndvi > 0.6:
        return "Good"
    if ndvi > 0.3:
        return "Moderate"
    return "Poor"


def scale_modis(raw, default_raw: int) -> float:
    """MODIS stores indices as integers scaled by 10^4."""
    if raw is None:
        raw = default_raw
    return float(raw) * tables.MODIS_SCALE_FACTOR


class VegetationAdapter(ProviderAdapter):
    name = "MODIS"
    credential = "EE_PRIVATE_KEY"
    emoji = "🌱"

    def __init__(self, ee_session: earth_engine.EarthEngineSession | None = None):
        self.ee_session = ee_session or earth_engine.session

    def attempts(self) -> Sequence[Attempt]:
        return (
            Attempt(DataSource.REAL, self.fetch_real, lambda: self.ee_session.ready),
            Attempt(DataSource.DEMO, self.fetch_demo, lambda: not self.ee_session.ready),
            Attempt(DataSource.FALLBACK, self.fetch_fallback),
        )

    def fetch_real(self, location: Location) -> VegetationReading:
        import ee

        point = ee.Geometry.Point([location.lon, location.lat])
        end = ee.Date(datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S"))
        start = end.advance(-LOOKBACK_DAYS, "day")

        collection = (ee.ImageCollection("MODIS/061/MOD13Q1")
                      .filterBounds(point)
                      .filterDate(start, end)
                      .select(["NDVI", "EVI"]))

        if not collection.size().getInfo():
            raise UpstreamError(self.name, "No MODIS imagery available for this location/timeframe")

        stats = collection.sort("system:time_start", False).first().reduceRegion(
            reducer=ee.Reducer.mean(),
            geometry=point.buffer(BUFFER_M),
            scale=SCALE_M,
            maxPixels=1e9,
        ).getInfo() or {}

        ndvi = scale_modis(stats.get("NDVI"), tables.MODIS_DEFAULT_NDVI_RAW)
        evi = scale_modis(stats.get("EVI"), tables.MODIS_DEFAULT_EVI_RAW)
        return VegetationReading(ndvi=ndvi, evi=evi, health=health_for(ndvi), trend="Stable",
                                 data_source=DataSource.REAL)

    def fetch_demo(self, location: Location) -> VegetationReading:
        return VegetationReading(**tables.VEGETATION_DEMO[is_fire_zone(location)], data_source=DataSource.DEMO)

    def fetch_fallback(self, location: Location) -> VegetationReading:
        return VegetationReading(**tables.VEGETATION_FALLBACK, data_source=DataSource.FALLBACK)
