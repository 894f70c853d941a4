"""
Location Entity - Ponto geográfico nomeado usado como alvo de coleta
"""
from dataclasses import dataclass

from domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class Location:
    """Entidade Localização (imutável durante toda a execução)"""
    name: str
    coordinates: Coordinates
    
    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Nome da localização não pode ser vazio")
    
    @property
    def latitude(self) -> float:
        return self.coordinates.latitude
    
    @property
    def longitude(self) -> float:
        return self.coordinates.longitude
    
    @classmethod
    def from_values(cls, name: str, latitude: float, longitude: float) -> 'Location':
        """Factory method a partir de valores soltos"""
        return cls(name=name, coordinates=Coordinates(latitude=latitude, longitude=longitude))
    
    def to_dict(self) -> dict:
        """Converte para dicionário"""
        return {
            'name': self.name,
            'latitude': self.latitude,
            'longitude': self.longitude
        }
