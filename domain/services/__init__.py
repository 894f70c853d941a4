"""Domain Services"""
from .threshold_alert_orchestrator import ThresholdAlertOrchestrator
from .wind_speed_aggregator import aggregate_wind_speed, total_wind_speed

__all__ = ['ThresholdAlertOrchestrator', 'aggregate_wind_speed', 'total_wind_speed']
