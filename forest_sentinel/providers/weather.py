"""
Current weather from OpenWeather (metric units).

Wind arrives in m/s and is converted to km/h; the drought index is a 0-5
heuristic from humidity, temperature and last-hour rain.
"""

import logging
from typing import Sequence

from .. import config, tables
from ..http_client import SESSION
from ..models import DataSource, Location, WeatherReading
from .base import Attempt, ProviderAdapter
from .sar import is_fire_zone

log = logging.getLogger(__name__)


def wind_direction(degrees) -> str:
    if degrees is None:
        return "N"
    return tables.COMPASS_POINTS[int(round(float(degrees) / 45)) % 8]


def drought_index(temp_c: float, humidity: float, rain_mm: float) -> int:
    index = 0
    if humidity < 30:
        index += 2
    if humidity < 20:
        index += 1
    if temp_c > 30:
        index += 1
    if temp_c > 35:
        index += 1
    if rain_mm == 0:
        index += 1
    return min(index, 5)


def reading_from_openweather(data: dict) -> WeatherReading:
    main = data["main"]
    wind = data.get("wind") or {}
    temp = float(main["temp"])
    humidity = float(main["humidity"])
    rain = float((data.get("rain") or {}).get("1h", 0) or 0)
    return WeatherReading(
        temperature=temp,
        humidity=humidity,
        wind_speed=float(wind.get("speed", 0)) * tables.MS_TO_KMH,
        wind_direction=wind_direction(wind.get("deg")),
        precipitation=rain,
        drought_index=drought_index(temp, humidity, rain),
        data_source=DataSource.REAL,
    )


class WeatherAdapter(ProviderAdapter):
    name = "OpenWeather"
    credential = "OPENWEATHER_API_KEY"
    emoji = "⛅"

    def unavailable_message(self) -> str:
        return "Weather data unavailable: OPENWEATHER_API_KEY not configured or failing"

    def attempts(self) -> Sequence[Attempt]:
        keyed = lambda: bool(config.OPENWEATHER_API_KEY)
        return (
            Attempt(DataSource.REAL, self.fetch_real, keyed),
            Attempt(DataSource.DEMO, self.fetch_demo, lambda: not keyed()),
            Attempt(DataSource.FALLBACK, self.fetch_fallback),
        )

    def fetch_real(self, location: Location) -> WeatherReading:
        params = {
            "lat": location.lat,
            "lon": location.lon,
            "appid": config.OPENWEATHER_API_KEY,
            "units": "metric",
        }
        resp = SESSION.get(config.OPENWEATHER_URL, params=params, timeout=config.WEATHER_TIMEOUT_SEC)
        resp.raise_for_status()
        return reading_from_openweather(resp.json())

    def fetch_demo(self, location: Location) -> WeatherReading:
        return WeatherReading(**tables.WEATHER_DEMO[is_fire_zone(location)], data_source=DataSource.DEMO)

    def fetch_fallback(self, location: Location) -> WeatherReading:
        return WeatherReading(**tables.WEATHER_FALLBACK, data_source=DataSource.FALLBACK)
