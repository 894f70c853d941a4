"""
Value Object com o resultado agregado de um batch
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class AggregateResult:
    """Velocidade média do vento sobre todas as observações do batch"""
    mean_wind_speed: float  # m/s
    location_count: int
    
    def to_dict(self) -> dict:
        return {
            'mean_wind_speed': self.mean_wind_speed,
            'location_count': self.location_count
        }
