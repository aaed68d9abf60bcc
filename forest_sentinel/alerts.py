from typing import List

from . import tables
from .models import Alert, AlertType, Location, RiskAnalysis, RiskLevel


def generate_alerts(risk: RiskAnalysis, location: Location) -> List[Alert]:
    """
    Evaluate each alert rule independently; zero or more may fire.
    """
    alerts = []

    if risk.level == RiskLevel.EXTREME:
        alerts.append(Alert(
            id="ALERT_001",
            type=AlertType.CRITICAL,
            title="Extreme Fire Risk Detected",
            message=f"Immediate action required at {location.name}. Multiple critical risk factors detected.",
            actions=list(tables.CRITICAL_ACTIONS),
        ))

    if risk.factors.fire_activity > tables.FIRE_ALERT_MIN_POINTS:
        alerts.append(Alert(
            id="ALERT_002",
            type=AlertType.FIRE,
            title="Active Fires Detected",
            message="Multiple active fires detected within operational area.",
            actions=list(tables.FIRE_ACTIONS),
        ))

    if risk.factors.weather_conditions > tables.WEATHER_ALERT_MIN_POINTS:
        alerts.append(Alert(
            id="ALERT_003",
            type=AlertType.WEATHER,
            title="Critical Weather Conditions",
            message="Extreme fire weather conditions present.",
            actions=list(tables.WEATHER_ACTIONS),
        ))

    return alerts
