"""
Testes para entidades Location e Observation
"""
import pytest

from domain.entities.location import Location
from domain.entities.observation import Observation


class TestLocation:
    
    def test_from_values(self):
        location = Location.from_values("Lahore", 31.5580, 74.3507)
        
        assert location.name == "Lahore"
        assert location.latitude == 31.5580
        assert location.longitude == 74.3507
    
    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValueError, match="não pode ser vazio"):
            Location.from_values(name, 0.0, 0.0)
    
    def test_invalid_coordinates_rejected(self):
        with pytest.raises(ValueError):
            Location.from_values("Nowhere", 95.0, 0.0)
    
    def test_to_dict(self):
        location = Location.from_values("Quetta", 30.1841, 67.0014)
        
        assert location.to_dict() == {'name': 'Quetta', 'latitude': 30.1841, 'longitude': 67.0014}


class TestObservation:
    
    def test_default_for(self):
        obs = Observation.default_for("Karachi")
        
        assert obs.location_name == "Karachi"
        assert obs.wind_speed_10m == 0.0
        assert obs.temperature_2m == 0.0
        assert obs.precipitation == 0.0
        assert obs.is_day == 0
    
    def test_precipitation_always_zero_by_default(self, make_observation):
        obs = make_observation(wind_speed_10m=12.0, temperature_2m=30.0)
        
        assert obs.precipitation == 0.0
    
    def test_long_name_is_truncated(self):
        long_name = "X" * 80
        
        obs = Observation(location_name=long_name)
        
        assert len(obs.location_name) == Observation.NAME_MAX_LENGTH
        assert obs.location_name == "X" * 49
    
    def test_name_at_limit_is_kept(self):
        name = "Y" * Observation.NAME_MAX_LENGTH
        
        assert Observation(location_name=name).location_name == name
    
    def test_immutability(self, make_observation):
        obs = make_observation()
        
        with pytest.raises(Exception):  # FrozenInstanceError
            obs.wind_speed_10m = 99.0
    
    def test_to_dict(self, make_observation):
        obs = make_observation(location_name="Lahore", wind_speed_10m=5.5, temperature_2m=31.2, is_day=1)
        
        assert obs.to_dict() == {
            'location_name': 'Lahore',
            'wind_speed_10m': 5.5,
            'temperature_2m': 31.2,
            'precipitation': 0.0,
            'is_day': 1
        }
