"""
Synthetic risk zones for map decoration.

Five circles are scattered at 72 degree steps around the queried point. They
are not measurements: every zone carries ``synthetic=True``.
"""

import math
from typing import List, Optional

import numpy as np

from .models import Location, RiskAnalysis, RiskZone, ZoneCenter
from .scoring import level_for_score

ZONE_COUNT = 5
ZONE_STEP_DEG = 72
OFFSET_RANGE_DEG = (0.02, 0.05)
RADIUS_RANGE_M = (1000.0, 5000.0)
SCORE_SPREAD = 15.0


def generate_risk_zones(location: Location, risk: RiskAnalysis,
                        rng: Optional[np.random.Generator] = None) -> List[RiskZone]:
    rng = rng or np.random.default_rng()
    zones = []
    for i in range(ZONE_COUNT):
        angle = math.radians(i * ZONE_STEP_DEG)
        offset = rng.uniform(*OFFSET_RANGE_DEG)
        zone_risk = min(100.0, max(0.0, risk.score + rng.uniform(-SCORE_SPREAD, SCORE_SPREAD)))
        zones.append(RiskZone(
            id=f"ZONE_{i + 1}",
            center=ZoneCenter(lat=location.lat + offset * math.cos(angle),
                              lon=location.lon + offset * math.sin(angle)),
            radius=float(rng.uniform(*RADIUS_RANGE_M)),
            risk_score=int(round(zone_risk)),
            risk_level=level_for_score(zone_risk),
        ))
    return zones
