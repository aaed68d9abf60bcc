import pytest

from forest_sentinel.models import (
    DataSource, FireReading, RiskLevel, SarReading, VegetationReading, WeatherReading,
)
from forest_sentinel.scoring import (
    calculate_risk, confidence_for, fire_activity_points, level_for_score,
    structural_change_points, vegetation_stress_points, weather_points,
)


@pytest.mark.parametrize("count,points", [
    (0, 0), (1, 10), (2, 10), (3, 20), (5, 20), (6, 30), (10, 30), (11, 40), (250, 40),
])
def test_fire_activity_tiers(count, points):
    assert fire_activity_points(count) == points


def test_fire_activity_is_monotonic():
    values = [fire_activity_points(n) for n in range(0, 60)]
    assert set(values) <= {0, 10, 20, 30, 40}
    assert values == sorted(values)


@pytest.mark.parametrize("ndvi,points", [
    (0.0, 25), (0.19, 25), (0.2, 20), (0.39, 20), (0.4, 10), (0.59, 10), (0.6, 5), (1.0, 5),
])
def test_vegetation_stress_tiers(ndvi, points):
    assert vegetation_stress_points(ndvi) == points


def test_vegetation_stress_is_non_increasing():
    values = [vegetation_stress_points(i / 100) for i in range(0, 101)]
    assert set(values) <= {5, 10, 20, 25}
    assert values == sorted(values, reverse=True)


@pytest.mark.parametrize("humidity,wind,points", [
    (50, 80, 5),
    (40, 0, 5),
    (39, 0, 15),
    (29, 20, 15),   # wind must be strictly above 20
    (29, 21, 25),
    (19, 30, 25),   # wind must be strictly above 30
    (19, 31, 30),
    (10, 5, 15),
])
def test_weather_tiers(humidity, wind, points):
    assert weather_points(humidity, wind) == points


@pytest.mark.parametrize("ratio,points", [
    (-2.0, 5), (-4.0, 5), (-4.1, 10), (-6.0, 10), (-6.5, 20), (-8.0, 20), (-8.01, 25),
])
def test_structural_change_tiers(ratio, points):
    assert structural_change_points(ratio) == points


@pytest.mark.parametrize("score,level", [
    (0, RiskLevel.LOW), (29, RiskLevel.LOW),
    (30, RiskLevel.MODERATE), (49, RiskLevel.MODERATE),
    (50, RiskLevel.HIGH), (69, RiskLevel.HIGH),
    (70, RiskLevel.EXTREME), (125, RiskLevel.EXTREME),
])
def test_level_boundaries(score, level):
    assert level_for_score(score) == level


@pytest.mark.parametrize("count,confidence", [(0, 70), (5, 80), (12, 94), (13, 95), (20, 95)])
def test_confidence(count, confidence):
    assert confidence_for(count) == confidence


def _readings(ratio=-2.0, ndvi=0.7, fires=0, humidity=50.0, wind=10.0):
    sar = SarReading(vv=-15, vh=-15 + ratio, vh_vv_ratio=ratio, coherence=0.7, data_source=DataSource.DEMO)
    modis = VegetationReading(ndvi=ndvi, evi=0.5, health="Good", data_source=DataSource.DEMO)
    firms = FireReading(fires=[], count=fires, data_source=DataSource.DEMO)
    weather = WeatherReading(temperature=20, humidity=humidity, wind_speed=wind, wind_direction="N",
                             precipitation=0, drought_index=1, data_source=DataSource.DEMO)
    return sar, modis, firms, weather


def test_calm_conditions_score_low():
    risk = calculate_risk(*_readings())
    assert risk.score == 5 + 5 + 5 + 0 + 5
    assert risk.level == RiskLevel.LOW
    assert risk.confidence == 70
    assert risk.factors.accessibility == 5


def test_worst_case_conditions_score_extreme():
    risk = calculate_risk(*_readings(ratio=-9, ndvi=0.1, fires=12, humidity=10, wind=40))
    assert risk.factors.fire_activity == 40
    assert risk.factors.vegetation_stress == 25
    assert risk.factors.weather_conditions == 30
    assert risk.factors.structural_change == 25
    assert risk.score == 125
    assert risk.level == RiskLevel.EXTREME
    assert risk.confidence == 94
