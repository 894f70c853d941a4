"""
Static Location Repository - Registro fixo de localizações do batch
"""
from typing import List, Tuple

from application.ports.output.location_repository_port import ILocationRepository
from domain.entities.location import Location

# (nome, latitude, longitude) em ordem de processamento
DEFAULT_LOCATIONS: Tuple[Tuple[str, float, float], ...] = (
    ("Karachi", 24.8608, 67.0104),
    ("Lahore", 31.5580, 74.3507),
    ("Islamabad", 33.7215, 73.0433),
    ("Quetta", 30.1841, 67.0014),
    ("Peshawar", 34.008, 71.5785),
)


class StaticLocationRepository(ILocationRepository):
    """
    Registro imutável durante a execução
    
    A ordem de definição é a ordem de processamento; get_all()
    devolve uma lista nova para que o chamador não altere o registro.
    """
    
    def __init__(self, locations: Tuple[Tuple[str, float, float], ...] = DEFAULT_LOCATIONS):
        self._locations: Tuple[Location, ...] = tuple(
            Location.from_values(name, latitude, longitude)
            for name, latitude, longitude in locations
        )
    
    def get_all(self) -> List[Location]:
        return list(self._locations)
    
    def count(self) -> int:
        return len(self._locations)
    


def get_location_repository() -> StaticLocationRepository:
    """Factory para o registro padrão"""
    return StaticLocationRepository()
