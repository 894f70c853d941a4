"""
OpenMeteo Data Mapper - Transforma a resposta da API Open-Meteo em Observation
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
import json
import math
from numbers import Real
from typing import Any, Dict, Optional

from domain.entities.observation import Observation
from domain.exceptions import MalformedResponseError, MissingCurrentWeatherError
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


def _reject_constant(name: str):
    raise ValueError(f"Constante não suportada: {name}")


def _read_number(container: Dict[str, Any], key: str) -> Optional[float]:
    """
    Retorna o valor como float se for numérico JSON finito, senão None

    bool não conta como número. Inteiros grandes demais para float e
    valores infinitos (ex: 1e400) também assumem o padrão.
    """
    value = container.get(key)
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


class OpenMeteoDataMapper:
    """
    Mapper para transformar respostas da API Open-Meteo em entities de domínio
    
    Responsabilidade: Traduzir formato Open-Meteo → Observation
    
    Regras:
    - Documento inválido: MalformedResponseError
    - Documento válido sem "current_weather": MissingCurrentWeatherError
    - Container presente: cada campo ausente ou não numérico assume o padrão
    """
    
    CONTAINER_KEY = 'current_weather'
    
    @staticmethod
    def decode(raw: bytes) -> Any:
        """
        Decodifica o corpo bruto em JSON
        
        Raises:
            MalformedResponseError: Se o corpo não for JSON válido
        """
        try:
            if isinstance(raw, (bytes, bytearray)):
                raw = raw.decode('utf-8')
            return json.loads(raw, parse_constant=_reject_constant)
        except (UnicodeDecodeError, ValueError) as e:
            raise MalformedResponseError(
                f"JSON inválido: {e}",
                details={'error': str(e)}
            ) from e
    
    @staticmethod
    def map_current_weather(raw: bytes, location_name: str) -> Observation:
        """
        Mapeia o bloco current_weather para uma Observation
        
        Args:
            raw: Corpo bruto da resposta
            location_name: Nome da localização de origem
        
        Returns:
            Observation normalizada
        
        Raises:
            MalformedResponseError: Corpo não é JSON
            MissingCurrentWeatherError: JSON sem o objeto current_weather
        """
        data = OpenMeteoDataMapper.decode(raw)
        
        if not isinstance(data, dict) or OpenMeteoDataMapper.CONTAINER_KEY not in data:
            raise MissingCurrentWeatherError(
                f"Dados de tempo atual ausentes para {location_name}",
                details={'city': location_name}
            )
        
        current = data[OpenMeteoDataMapper.CONTAINER_KEY]
        if not isinstance(current, dict):
            current = {}
        
        wind_speed = _read_number(current, 'windspeed')
        temperature = _read_number(current, 'temperature')
        is_day = _read_number(current, 'is_day')
        
        observation = Observation(
            location_name=location_name,
            wind_speed_10m=float(wind_speed) if wind_speed is not None else 0.0,
            temperature_2m=float(temperature) if temperature is not None else 0.0,
            is_day=int(is_day) if is_day is not None else 0
        )
        
        logger.info(
            "Dados interpretados",
            city=observation.location_name,
            wind_speed=round(observation.wind_speed_10m, 2),
            temperature=round(observation.temperature_2m, 2),
            is_day=observation.is_day
        )
        
        return observation
