"""
Testes para Value Objects (Coordinates e AggregateResult)
"""
import pytest

from domain.value_objects.coordinates import Coordinates
from domain.value_objects.aggregate_result import AggregateResult


class TestCoordinates:
    """Testes para Value Object Coordinates"""
    
    def test_valid_coordinates(self):
        coords = Coordinates(latitude=24.8608, longitude=67.0104)
        assert coords.latitude == 24.8608
        assert coords.longitude == 67.0104
    
    def test_invalid_latitude(self):
        with pytest.raises(ValueError, match="Latitude inválida"):
            Coordinates(latitude=100.0, longitude=0.0)
        
        with pytest.raises(ValueError, match="Latitude inválida"):
            Coordinates(latitude=-100.0, longitude=0.0)
    
    def test_invalid_longitude(self):
        with pytest.raises(ValueError, match="Longitude inválida"):
            Coordinates(latitude=0.0, longitude=200.0)
    
    def test_immutability(self):
        coords = Coordinates(latitude=24.8608, longitude=67.0104)
        
        with pytest.raises(Exception):  # FrozenInstanceError
            coords.latitude = 0.0
    
    def test_query_params_use_four_decimals(self):
        """Peshawar (34.008) precisa sair como 34.0080"""
        params = Coordinates(latitude=34.008, longitude=71.5785).to_query_params()
        
        assert params == {'latitude': '34.0080', 'longitude': '71.5785'}
    
    def test_query_params_round_extra_precision(self):
        params = Coordinates(latitude=-22.757249, longitude=-49.94386).to_query_params()
        
        assert params == {'latitude': '-22.7572', 'longitude': '-49.9439'}
    
    def test_str_representation(self):
        assert str(Coordinates(-23.5505, -46.6333)) == "23.5505°S, 46.6333°W"
        assert str(Coordinates(24.8608, 67.0104)) == "24.8608°N, 67.0104°E"


class TestAggregateResult:
    
    def test_to_dict(self):
        result = AggregateResult(mean_wind_speed=15.0, location_count=3)
        
        assert result.to_dict() == {'mean_wind_speed': 15.0, 'location_count': 3}
