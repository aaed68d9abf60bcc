"""
Request/response schemas for the search endpoint.

Field names are snake_case in Python and camelCase on the wire
(``vh_vv_ratio`` <-> ``vhVvRatio``) so the JSON envelope matches what the
dashboard front end renders.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DataSource(str, Enum):
    REAL = "real"
    PUBLIC = "public"
    DEMO = "demo"
    FALLBACK = "fallback"

    @property
    def synthetic(self) -> bool:
        return self in (DataSource.DEMO, DataSource.FALLBACK)


class RiskLevel(str, Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    EXTREME = "EXTREME"


class AlertType(str, Enum):
    CRITICAL = "CRITICAL"
    FIRE = "FIRE"
    WEATHER = "WEATHER"
    # Rendered by the dashboard; no alert rule produces it yet.
    VEGETATION = "VEGETATION"


# ---------- Location ----------

class Location(CamelModel):
    lat: float
    lon: float
    name: str
    bbox: List[float] = Field(min_length=4, max_length=4)  # [west, south, east, north]
    active: Optional[bool] = None


# ---------- Provider readings ----------

class SarReading(CamelModel):
    vv: float
    vh: float
    vh_vv_ratio: float
    coherence: float
    last_update: str = Field(default_factory=utc_now_iso)
    data_source: DataSource


class VegetationReading(CamelModel):
    ndvi: float
    evi: float
    health: str
    trend: str = "Stable"
    last_update: str = Field(default_factory=utc_now_iso)
    data_source: DataSource


class FireDetection(CamelModel):
    id: str
    lat: float
    lon: float
    brightness: float
    confidence: str
    frp: float
    satellite: str = "MODIS"
    detection_time: str
    data_source: Optional[DataSource] = None


class FireReading(CamelModel):
    fires: List[FireDetection] = Field(default_factory=list)
    count: int
    last_update: str = Field(default_factory=utc_now_iso)
    data_source: DataSource


class WeatherReading(CamelModel):
    temperature: float
    humidity: float
    wind_speed: float  # km/h
    wind_direction: str
    precipitation: float
    drought_index: float
    data_source: DataSource


# ---------- Analysis ----------

class RiskFactors(CamelModel):
    fire_activity: int
    vegetation_stress: int
    weather_conditions: int
    structural_change: int
    accessibility: int = 5

    def total(self) -> int:
        return (self.fire_activity + self.vegetation_stress + self.weather_conditions
                + self.structural_change + self.accessibility)


class RiskAnalysis(CamelModel):
    score: int
    level: RiskLevel
    factors: RiskFactors
    confidence: int
    timestamp: str = Field(default_factory=utc_now_iso)


class ForecastDay(CamelModel):
    day: int
    date: str
    score: int
    level: RiskLevel
    confidence: int


class Alert(CamelModel):
    id: str
    type: AlertType
    title: str
    message: str
    timestamp: str = Field(default_factory=utc_now_iso)
    actions: List[str]


class ZoneCenter(CamelModel):
    lat: float
    lon: float


class RiskZone(CamelModel):
    id: str
    center: ZoneCenter
    radius: float  # meters
    risk_score: int
    risk_level: RiskLevel
    synthetic: bool = True


# ---------- HTTP envelope ----------

class SearchRequest(BaseModel):
    query: str

    @field_validator("query")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("query must not be blank")
        return v


class SatelliteData(CamelModel):
    sar: SarReading
    modis: VegetationReading
    firms: FireReading
    weather: WeatherReading
    timestamp: str = Field(default_factory=utc_now_iso)


class SearchResponse(CamelModel):
    success: bool = True
    data_mode: str
    location: Location
    satellite_data: SatelliteData
    risk_analysis: RiskAnalysis
    forecast: List[ForecastDay]
    alerts: List[Alert]
    fires: List[FireDetection]
    risk_zones: List[RiskZone]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: Optional[str] = None
    details: Optional[Any] = None
    missing: Optional[List[str]] = None

    def payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
