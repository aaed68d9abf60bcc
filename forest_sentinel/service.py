"""
Search orchestration: resolve the location, fetch the four providers in
parallel, score, then derive forecast, alerts and map zones.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

import numpy as np

from . import config, earth_engine
from .alerts import generate_alerts
from .errors import ServiceUnavailable
from .forecast import generate_forecast
from .location import resolve_location
from .models import SatelliteData, SearchResponse
from .providers import FireAdapter, SarAdapter, VegetationAdapter, WeatherAdapter
from .scoring import calculate_risk
from .zones import generate_risk_zones

log = logging.getLogger(__name__)


class SearchService:
    def __init__(self, ee_session: Optional[earth_engine.EarthEngineSession] = None,
                 rng: Optional[np.random.Generator] = None):
        self.ee_session = ee_session or earth_engine.session
        self.rng = rng
        self.sar = SarAdapter(self.ee_session)
        self.modis = VegetationAdapter(self.ee_session)
        self.firms = FireAdapter(rng)
        self.weather = WeatherAdapter()

    def check_production_preconditions(self) -> None:
        if not config.PRODUCTION:
            return
        missing = config.missing_credentials()
        if missing:
            raise ServiceUnavailable(missing)

    def search(self, query: str) -> SearchResponse:
        self.check_production_preconditions()

        if not self.ee_session.ensure():
            if config.PRODUCTION:
                raise ServiceUnavailable(
                    ["EE_PRIVATE_KEY"],
                    "Earth Engine initialization failed. Please verify EE_PRIVATE_KEY is configured correctly.",
                )
            log.info("⚠️ Running in demo mode - Earth Engine not available")

        location = resolve_location(query)

        with ThreadPoolExecutor(max_workers=4, thread_name_prefix="provider") as pool:
            futures = {
                "sar": pool.submit(self.sar.fetch, location),
                "modis": pool.submit(self.modis.fetch, location),
                "firms": pool.submit(self.firms.fetch, location),
                "weather": pool.submit(self.weather.fetch, location),
            }
            # result() re-raises ServiceUnavailable from production-mode ladders
            readings = {key: fut.result()[0] for key, fut in futures.items()}

        risk = calculate_risk(readings["sar"], readings["modis"], readings["firms"], readings["weather"])
        log.info(f"🔥 {location.name}: risk {risk.score} ({risk.level.value}), "
                 f"{readings['firms'].count} fires, confidence {risk.confidence}%")

        return SearchResponse(
            data_mode="REAL" if self.ee_session.ready else "DEMO",
            location=location,
            satellite_data=SatelliteData(**readings),
            risk_analysis=risk,
            forecast=generate_forecast(risk, readings["weather"], rng=self.rng),
            alerts=generate_alerts(risk, location),
            fires=readings["firms"].fires,
            risk_zones=generate_risk_zones(location, risk, rng=self.rng),
        )
