"""
Threshold Alert Orchestrator - Reúne os alertas de limite de uma observação
"""
from typing import List

from domain.alerts.primitives import WeatherAlert
from domain.entities.observation import Observation
from domain.services.wind_alert_service import WindAlertService
from domain.services.temperature_alert_service import TemperatureAlertService


class ThresholdAlertOrchestrator:
    """
    Orquestra a geração de alertas de limite
    
    Design Pattern: Facade
    - Condições independentes: zero, um ou dois alertas
    - Ordem fixa: vento antes de temperatura
    - Função pura: não dispara notificações nem altera a observação
    """
    
    @staticmethod
    def generate_alerts(observation: Observation) -> List[WeatherAlert]:
        """
        Avalia uma observação contra os limites fixos
        
        Args:
            observation: Observação já normalizada
        
        Returns:
            Lista de alertas na ordem vento, temperatura (vazia se nenhum limite foi excedido)
        """
        alerts: List[WeatherAlert] = []
        alerts.extend(WindAlertService.generate_alerts(observation))
        alerts.extend(TemperatureAlertService.generate_alerts(observation))
        return alerts
