"""
7-day risk outlook.

The projection is a linear trend (rising while the air is dry, easing
otherwise) plus uniform jitter in [-5, +5], so two calls with the same inputs
give different numbers. Scores stay in [0, 100] and confidence never rises
with the horizon.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import numpy as np

from .models import ForecastDay, RiskAnalysis, WeatherReading
from .scoring import level_for_score

FORECAST_DAYS = 7
DRY_HUMIDITY_PCT = 30
DRY_TREND_PER_DAY = 2
WET_TREND_PER_DAY = -1
JITTER = 5.0


def forecast_confidence(day: int) -> int:
    return max(50, 95 - 5 * day)


def generate_forecast(risk: RiskAnalysis, weather: WeatherReading,
                      rng: Optional[np.random.Generator] = None,
                      now: Optional[datetime] = None) -> List[ForecastDay]:
    rng = rng or np.random.default_rng()
    now = now or datetime.now(timezone.utc)
    per_day = DRY_TREND_PER_DAY if weather.humidity < DRY_HUMIDITY_PCT else WET_TREND_PER_DAY

    days = []
    for day in range(1, FORECAST_DAYS + 1):
        projected = min(100.0, max(0.0, risk.score + day * per_day + rng.uniform(-JITTER, JITTER)))
        days.append(ForecastDay(
            day=day,
            date=(now + timedelta(days=day)).isoformat().replace("+00:00", "Z"),
            score=int(round(projected)),
            level=level_for_score(projected),
            confidence=forecast_confidence(day),
        ))
    return days
