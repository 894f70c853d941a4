"""
Observation Entity - Retrato do tempo atual de uma localização em uma execução
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Observation:
    """
    Entidade Observação

    Criada uma vez por tentativa de coleta e nunca alterada depois.
    Campos ausentes na resposta assumem os valores padrão abaixo.

    O nome da localização é limitado a NAME_MAX_LENGTH caracteres;
    nomes maiores são truncados (não é erro).
    """
    NAME_MAX_LENGTH = 49

    location_name: str
    wind_speed_10m: float = 0.0  # m/s
    temperature_2m: float = 0.0  # °C
    precipitation: float = 0.0  # mm (declarado, nunca preenchido pelo pipeline)
    is_day: int = 0  # 1 = dia, 0 = noite

    def __post_init__(self):
        if len(self.location_name) > self.NAME_MAX_LENGTH:
            object.__setattr__(self, 'location_name', self.location_name[:self.NAME_MAX_LENGTH])

    @classmethod
    def default_for(cls, location_name: str) -> 'Observation':
        """Observação com todos os campos no valor padrão (falha de coleta/parse)"""
        return cls(location_name=location_name)

    def to_dict(self) -> dict:
        """Converte para dicionário"""
        return {
            'location_name': self.location_name,
            'wind_speed_10m': self.wind_speed_10m,
            'temperature_2m': self.temperature_2m,
            'precipitation': self.precipitation,
            'is_day': self.is_day
        }
