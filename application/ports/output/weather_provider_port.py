"""Weather Provider Port - Interface para o serviço de previsão"""
from abc import ABC, abstractmethod

from domain.entities.location import Location


class IWeatherProvider(ABC):
    """
    Interface para provedores de dados meteorológicos.
    A aplicação usa apenas Open-Meteo, mas mantemos a interface
    para isolar o transporte HTTP nos testes.
    """

    @abstractmethod
    def fetch_current_weather(self, location: Location) -> bytes:
        """
        Busca o tempo atual de uma localização
        
        Args:
            location: Localização alvo
        
        Returns:
            Corpo bruto da resposta
        
        Raises:
            FetchError: Se o transporte falhar
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'OpenMeteo')"""
        pass
