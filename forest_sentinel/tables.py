"""
Fixed lookup tables: risk tiers, level cutoffs, the hotspot gazetteer,
alert action lists and the canned readings served by the demo/fallback rungs.

Everything here is immutable so threshold edits stay in one auditable place.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional, Tuple


class Tier(NamedTuple):
    threshold: float
    points: int


class WeatherTier(NamedTuple):
    max_humidity: float           # humidity must be strictly below
    min_wind_kmh: Optional[float]  # wind must be strictly above (None = ignored)
    points: int


# Fire activity: fire count strictly above threshold -> points (first match wins)
FIRE_ACTIVITY_TIERS: Tuple[Tier, ...] = (
    Tier(10, 40),
    Tier(5, 30),
    Tier(2, 20),
    Tier(0, 10),
)
FIRE_ACTIVITY_NONE = 0

# Vegetation stress: NDVI strictly below threshold -> points
VEGETATION_STRESS_TIERS: Tuple[Tier, ...] = (
    Tier(0.2, 25),
    Tier(0.4, 20),
    Tier(0.6, 10),
)
VEGETATION_STRESS_HEALTHY = 5

# Weather conditions: humidity (%) and wind (km/h)
WEATHER_TIERS: Tuple[WeatherTier, ...] = (
    WeatherTier(20, 30, 30),
    WeatherTier(30, 20, 25),
    WeatherTier(40, None, 15),
)
WEATHER_NORMAL = 5

# Structural change: SAR VH-VV (dB) strictly below threshold -> points
STRUCTURAL_CHANGE_TIERS: Tuple[Tier, ...] = (
    Tier(-8, 25),
    Tier(-6, 20),
    Tier(-4, 10),
)
STRUCTURAL_CHANGE_STABLE = 5

ACCESSIBILITY_POINTS = 5

# Total score at or above cutoff -> level (first match wins, else LOW)
LEVEL_CUTOFFS: Tuple[Tuple[int, str], ...] = (
    (70, "EXTREME"),
    (50, "HIGH"),
    (30, "MODERATE"),
)

CONFIDENCE_BASE = 70
CONFIDENCE_PER_FIRE = 2
CONFIDENCE_CAP = 95


# ---------- Gazetteer ----------

class KnownPlace(NamedTuple):
    lat: float
    lon: float
    name: str
    active: bool


GAZETTEER = MappingProxyType({
    "palisades": KnownPlace(34.0459, -118.5275, "Palisades Fire, Los Angeles", True),
    "eaton":     KnownPlace(34.1901, -118.1310, "Eaton Fire, Altadena", True),
    "paradise":  KnownPlace(39.7596, -121.6219, "Paradise, CA", False),
    "amazon":    KnownPlace(-3.4653, -62.2159, "Amazon Rainforest, Brazil", False),
})

BBOX_HALF_WIDTH_DEG = 0.1


# ---------- Demo zone detection ----------

# SAR / vegetation / weather demo readings switch on this marker in the name
FIRE_ZONE_MARKER = "Fire"
# The FIRMS demo only treats the two active LA incidents as burning
FIRMS_DEMO_FIRE_ZONES: Tuple[str, ...] = ("Palisades", "Eaton")


# ---------- Canned readings (demo / fallback) ----------

SAR_DEMO = MappingProxyType({
    True:  MappingProxyType({"vv": -12.5, "vh": -28.7, "vh_vv_ratio": -2.3, "coherence": 0.32}),
    False: MappingProxyType({"vv": -15.2, "vh": -22.4, "vh_vv_ratio": -1.47, "coherence": 0.71}),
})
SAR_FALLBACK = MappingProxyType({"vv": -15.0, "vh": -22.0, "vh_vv_ratio": -7.0, "coherence": 0.7})
SAR_DEFAULT_VV = -15.0
SAR_DEFAULT_VH = -22.0
SAR_COHERENCE = 0.7  # needs interferometry for a measured value

VEGETATION_DEMO = MappingProxyType({
    True:  MappingProxyType({"ndvi": 0.25, "evi": 0.18, "health": "Poor", "trend": "Declining"}),
    False: MappingProxyType({"ndvi": 0.65, "evi": 0.52, "health": "Good", "trend": "Stable"}),
})
VEGETATION_FALLBACK = MappingProxyType({"ndvi": 0.5, "evi": 0.4, "health": "Moderate", "trend": "Stable"})
MODIS_SCALE_FACTOR = 0.0001
MODIS_DEFAULT_NDVI_RAW = 5000
MODIS_DEFAULT_EVI_RAW = 3000

WEATHER_DEMO = MappingProxyType({
    True:  MappingProxyType({"temperature": 32.0, "humidity": 12.0, "wind_speed": 45.0,
                             "wind_direction": "NE", "precipitation": 0.0, "drought_index": 4.5}),
    False: MappingProxyType({"temperature": 22.0, "humidity": 45.0, "wind_speed": 15.0,
                             "wind_direction": "NE", "precipitation": 0.0, "drought_index": 2.0}),
})
WEATHER_FALLBACK = MappingProxyType({"temperature": 25.0, "humidity": 40.0, "wind_speed": 20.0,
                                     "wind_direction": "N", "precipitation": 0.0, "drought_index": 2.5})
COMPASS_POINTS: Tuple[str, ...] = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
MS_TO_KMH = 3.6

FIRMS_DEMO_COUNT = MappingProxyType({True: 8, False: 2})
FIRMS_PUBLIC_RADIUS_DEG = 0.5  # roughly 50 km
FIRMS_DEFAULT_BRIGHTNESS = 330.0


# ---------- Alerts ----------

CRITICAL_ACTIONS: Tuple[str, ...] = (
    "Deploy emergency resources immediately",
    "Initiate evacuation procedures",
    "Alert all local authorities",
    "Activate emergency response teams",
)
FIRE_ACTIONS: Tuple[str, ...] = (
    "Monitor fire spread patterns",
    "Prepare suppression resources",
    "Establish containment lines",
)
WEATHER_ACTIONS: Tuple[str, ...] = (
    "Issue red flag warning",
    "Suspend outdoor activities",
    "Position resources for rapid deployment",
)
FIRE_ALERT_MIN_POINTS = 20     # factor strictly above
WEATHER_ALERT_MIN_POINTS = 20  # factor strictly above
