"""
Value Object para coordenadas geográficas
Garante imutabilidade e validação no domínio
"""
from dataclasses import dataclass
from typing import Dict

from domain.constants import API


@dataclass(frozen=True)
class Coordinates:
    """
    Value Object para coordenadas geográficas
    
    Características:
    - Imutável (frozen=True)
    - Auto-validação no __post_init__
    - Formatação fixa para a query do Open-Meteo
    """
    latitude: float
    longitude: float
    
    def __post_init__(self):
        """Valida coordenadas no momento da criação"""
        if not (-90 <= self.latitude <= 90):
            raise ValueError(
                f"Latitude inválida: {self.latitude}. "
                f"Deve estar entre -90 e 90 graus."
            )
        if not (-180 <= self.longitude <= 180):
            raise ValueError(
                f"Longitude inválida: {self.longitude}. "
                f"Deve estar entre -180 e 180 graus."
            )
    
    def to_query_params(self) -> Dict[str, str]:
        """
        Retorna latitude/longitude formatadas com 4 casas decimais
        
        Example:
            >>> Coordinates(34.008, 71.5785).to_query_params()
            {'latitude': '34.0080', 'longitude': '71.5785'}
        """
        precision = API.COORDINATE_PRECISION
        return {
            'latitude': f"{self.latitude:.{precision}f}",
            'longitude': f"{self.longitude:.{precision}f}",
        }
    
    def __str__(self) -> str:
        """String representation amigável"""
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.4f}°{lat_dir}, {abs(self.longitude):.4f}°{lon_dir}"
    
