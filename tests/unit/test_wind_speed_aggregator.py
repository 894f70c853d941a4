"""
Testes da agregação da velocidade do vento
"""
import pytest

from domain.entities.observation import Observation
from domain.services.wind_speed_aggregator import aggregate_wind_speed, total_wind_speed


class TestWindSpeedAggregator:
    
    def test_mean_of_three(self, make_observation):
        observations = [
            make_observation(location_name="A", wind_speed_10m=10.0),
            make_observation(location_name="B", wind_speed_10m=30.0),
            make_observation(location_name="C", wind_speed_10m=5.0),
        ]
        
        result = aggregate_wind_speed(observations, location_count=3)
        
        assert result.mean_wind_speed == pytest.approx(15.0)
        assert result.location_count == 3
    
    def test_failed_locations_pull_mean_down(self, make_observation):
        observations = [
            make_observation(wind_speed_10m=12.0),
            Observation.default_for("Lahore"),
            Observation.default_for("Quetta"),
        ]
        
        result = aggregate_wind_speed(observations, location_count=3)
        
        assert result.mean_wind_speed == pytest.approx(4.0)
    
    def test_all_defaults_average_zero(self):
        observations = [Observation.default_for(name) for name in ("A", "B", "C", "D", "E")]
        
        assert aggregate_wind_speed(observations, 5).mean_wind_speed == 0.0
    
    def test_empty_registry_guard(self):
        result = aggregate_wind_speed([], location_count=0)
        
        assert result.mean_wind_speed == 0.0
        assert result.location_count == 0
    
    def test_total_is_a_fold(self, make_observation):
        observations = (make_observation(wind_speed_10m=w) for w in (1.5, 2.5, 3.0))
        
        assert total_wind_speed(observations) == pytest.approx(7.0)
    
    def test_total_of_empty_sequence(self):
        assert total_wind_speed([]) == 0.0
