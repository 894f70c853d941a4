"""
Output Port: Location Repository
Interface para o registro de localizações
"""
from abc import ABC, abstractmethod
from typing import List

from domain.entities.location import Location


class ILocationRepository(ABC):
    """Interface para acesso às localizações, em ordem fixa"""
    
    @abstractmethod
    def get_all(self) -> List[Location]:
        """Retorna todas as localizações na ordem do registro"""
        pass
    
    @abstractmethod
    def count(self) -> int:
        """Número de localizações no registro"""
        pass
