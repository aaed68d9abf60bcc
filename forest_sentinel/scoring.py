# ============================================================
# Forest fire risk score: fixed linear rules over four readings
# Fire activity (0-40) + vegetation stress (5-25) + weather (5-30)
# + structural change (5-25) + accessibility (5)
# ============================================================

from typing import Sequence

from . import tables
from .models import (
    FireReading, RiskAnalysis, RiskFactors, RiskLevel,
    SarReading, VegetationReading, WeatherReading,
)


# ---------- 1. FACTOR TIERS ----------

def fire_activity_points(fire_count: int) -> int:
    """0 fires -> 0, 1-2 -> 10, 3-5 -> 20, 6-10 -> 30, >10 -> 40"""
    for tier in tables.FIRE_ACTIVITY_TIERS:
        if fire_count > tier.threshold:
            return tier.points
    return tables.FIRE_ACTIVITY_NONE


def _below(value: float, tiers: Sequence[tables.Tier], default: int) -> int:
    for tier in tiers:
        if value < tier.threshold:
            return tier.points
    return default


def vegetation_stress_points(ndvi: float) -> int:
    """NDVI >=0.6 -> 5, 0.4-0.6 -> 10, 0.2-0.4 -> 20, <0.2 -> 25"""
    return _below(ndvi, tables.VEGETATION_STRESS_TIERS, tables.VEGETATION_STRESS_HEALTHY)


def weather_points(humidity: float, wind_kmh: float) -> int:
    """Dry and windy scores highest; humidity below 40% alone scores 15."""
    for tier in tables.WEATHER_TIERS:
        if humidity < tier.max_humidity and (tier.min_wind_kmh is None or wind_kmh > tier.min_wind_kmh):
            return tier.points
    return tables.WEATHER_NORMAL


def structural_change_points(vh_vv_ratio: float) -> int:
    """SAR VH-VV (dB): >=-4 -> 5, -6..-4 -> 10, -8..-6 -> 20, <-8 -> 25"""
    return _below(vh_vv_ratio, tables.STRUCTURAL_CHANGE_TIERS, tables.STRUCTURAL_CHANGE_STABLE)


# ---------- 2. LEVEL & CONFIDENCE ----------

def level_for_score(score: float) -> RiskLevel:
    for cutoff, level in tables.LEVEL_CUTOFFS:
        if score >= cutoff:
            return RiskLevel(level)
    return RiskLevel.LOW


def confidence_for(fire_count: int) -> int:
    return min(tables.CONFIDENCE_CAP, tables.CONFIDENCE_BASE + tables.CONFIDENCE_PER_FIRE * fire_count)


# ---------- 3. ANALYSIS ----------

def calculate_risk(sar: SarReading, modis: VegetationReading,
                   firms: FireReading, weather: WeatherReading) -> RiskAnalysis:
    factors = RiskFactors(
        fire_activity=fire_activity_points(firms.count),
        vegetation_stress=vegetation_stress_points(modis.ndvi),
        weather_conditions=weather_points(weather.humidity, weather.wind_speed),
        structural_change=structural_change_points(sar.vh_vv_ratio),
        accessibility=tables.ACCESSIBILITY_POINTS,
    )
    score = factors.total()
    return RiskAnalysis(
        score=score,
        level=level_for_score(score),
        factors=factors,
        confidence=confidence_for(firms.count),
    )
