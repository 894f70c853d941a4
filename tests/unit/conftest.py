"""
Configurações e fixtures compartilhadas para testes unitários
"""
import os

os.environ.setdefault('DD_TRACE_ENABLED', 'false')

import pytest

from domain.entities.location import Location
from domain.entities.observation import Observation


@pytest.fixture
def make_observation():
    """
    Factory fixture para criar Observation com valores padrão
    
    Usage:
        def test_something(make_observation):
            obs = make_observation(wind_speed_10m=25.0)
    """
    def _make(
        location_name: str = 'Karachi',
        wind_speed_10m: float = 10.0,
        temperature_2m: float = 15.0,
        is_day: int = 1
    ) -> Observation:
        return Observation(
            location_name=location_name,
            wind_speed_10m=wind_speed_10m,
            temperature_2m=temperature_2m,
            is_day=is_day
        )
    
    return _make


@pytest.fixture
def make_location():
    """Factory fixture para criar Location"""
    def _make(name: str = 'Karachi', latitude: float = 24.8608, longitude: float = 67.0104) -> Location:
        return Location.from_values(name, latitude, longitude)
    
    return _make
