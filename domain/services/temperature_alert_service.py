"""
Serviço de domínio para alertas de temperatura alta
"""
from __future__ import annotations

from typing import List

from domain.alerts.primitives import AlertSeverity, WeatherAlert
from domain.constants import Alerts, Thresholds
from domain.entities.observation import Observation
from domain.services.base_alert_service import BaseAlertService

MESSAGE_TEMPLATE = "High Temperature Alert for {name}: {value:.2f} °C"


class TemperatureAlertService(BaseAlertService):
    """Gera alerta quando a temperatura a 2m passa do limite (°C)."""

    @staticmethod
    def generate_alerts(data: Observation) -> List[WeatherAlert]:
        alerts: List[WeatherAlert] = []

        if data.temperature_2m > Thresholds.TEMPERATURE:
            alerts.append(BaseAlertService.create_alert(
                code=Alerts.HIGH_TEMPERATURE,
                severity=AlertSeverity.WARNING,
                message=BaseAlertService.format_message(
                    MESSAGE_TEMPLATE,
                    name=data.location_name,
                    value=data.temperature_2m
                ),
                location_name=data.location_name,
                details=BaseAlertService.round_details({
                    "temperatureC": data.temperature_2m,
                    "thresholdC": Thresholds.TEMPERATURE
                })
            ))

        return alerts
