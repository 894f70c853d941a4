"""Output Ports - Interfaces para adapters externos"""
from .location_repository_port import ILocationRepository
from .weather_provider_port import IWeatherProvider
from .notifier_port import INotifier, NotificationResult
from .observation_sink_port import IObservationSink

__all__ = [
    'ILocationRepository',
    'IWeatherProvider',
    'INotifier',
    'NotificationResult',
    'IObservationSink',
]
