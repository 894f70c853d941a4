"""Open-Meteo Provider - Implementação do provider para Open-Meteo API"""
from typing import Optional
from urllib.parse import urlencode

import requests
from ddtrace.trace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import API
from domain.entities.location import Location
from domain.exceptions import TransportCallError, TransportInitError
from domain.value_objects.coordinates import Coordinates
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class OpenMeteoProvider(IWeatherProvider):
    """
    Provider para Open-Meteo Forecast API
    
    Características:
    - API gratuita, sem chave
    - Uma chamada GET síncrona por localização
    - Sem retry e sem timeout próprio (padrões do transporte)
    - Status HTTP não-2xx não é falha de transporte: o corpo segue para o mapper
    """
    
    def __init__(self, session: Optional[requests.Session] = None):
        """
        Inicializa provider
        
        Args:
            session: Sessão HTTP (cria uma por chamada se None)
        """
        self.base_url = API.OPENMETEO_FORECAST_URL
        self.session = session
    
    @property
    def provider_name(self) -> str:
        return "OpenMeteo"
    
    def build_url(self, coordinates: Coordinates) -> str:
        """
        Monta a URL de consulta com latitude/longitude em 4 casas decimais
        
        Example:
            https://api.open-meteo.com/v1/forecast?latitude=24.8608&longitude=67.0104
            &hourly=windspeed_10m,temperature_2m&current_weather=true
        """
        params = coordinates.to_query_params()
        params['hourly'] = ','.join(API.HOURLY_VARIABLES)
        params['current_weather'] = 'true'
        return f"{self.base_url}?{urlencode(params, safe=',')}"
    
    def _open_session(self) -> requests.Session:
        if self.session is not None:
            return self.session
        try:
            return requests.Session()
        except Exception as e:
            raise TransportInitError(
                f"Falha ao inicializar transporte HTTP: {e}",
                details={'error': str(e)}
            ) from e
    
    @tracer.wrap(resource="openmeteo.fetch_current_weather")
    def fetch_current_weather(self, location: Location) -> bytes:
        """
        Busca o bloco current_weather de uma localização
        
        Args:
            location: Localização alvo
        
        Returns:
            Corpo bruto da resposta
        
        Raises:
            TransportInitError: Se a sessão HTTP não puder ser criada
            TransportCallError: Em falhas de DNS, conexão, TLS etc.
        """
        url = self.build_url(location.coordinates)
        session = self._open_session()
        owns_session = session is not self.session
        
        try:
            logger.info(
                "Buscando tempo atual no Open-Meteo",
                city=location.name,
                coordinates=str(location.coordinates),
                url=url
            )
            response = session.get(url)
        except requests.RequestException as e:
            raise TransportCallError(
                f"Requisição falhou para {location.name}: {e}",
                details={'city': location.name, 'url': url}
            ) from e
        finally:
            if owns_session:
                session.close()
        
        if not response.ok:
            logger.warning(
                "Open-Meteo retornou status de erro",
                city=location.name,
                status_code=response.status_code
            )
        
        return response.content


def get_openmeteo_provider(session: Optional[requests.Session] = None) -> OpenMeteoProvider:
    """
    Factory para criar provider Open-Meteo
    
    Args:
        session: Sessão HTTP opcional (reutilizada entre localizações)
    
    Returns:
        Instância configurada do OpenMeteoProvider
    """
    return OpenMeteoProvider(session=session)
