"""
Serviço de domínio para alertas de vento
"""
from __future__ import annotations

from typing import List

from domain.alerts.primitives import AlertSeverity, WeatherAlert
from domain.constants import Alerts, Thresholds
from domain.entities.observation import Observation
from domain.services.base_alert_service import BaseAlertService

MESSAGE_TEMPLATE = "High Wind Speed Alert for {name}: {value:.2f} m/s"


class WindAlertService(BaseAlertService):
    """Gera alerta quando o vento a 10m passa do limite (m/s)."""

    @staticmethod
    def generate_alerts(data: Observation) -> List[WeatherAlert]:
        alerts: List[WeatherAlert] = []

        if data.wind_speed_10m > Thresholds.WIND_SPEED:
            alerts.append(BaseAlertService.create_alert(
                code=Alerts.HIGH_WIND,
                severity=AlertSeverity.WARNING,
                message=BaseAlertService.format_message(
                    MESSAGE_TEMPLATE,
                    name=data.location_name,
                    value=data.wind_speed_10m
                ),
                location_name=data.location_name,
                details=BaseAlertService.round_details({
                    "windSpeedMs": data.wind_speed_10m,
                    "thresholdMs": Thresholds.WIND_SPEED
                })
            ))

        return alerts
