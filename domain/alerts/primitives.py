"""
Primitivos de alertas (tipos) compartilhados pelo domínio.
Separados para evitar ciclos entre serviços e entidades.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AlertSeverity(Enum):
    """Níveis de severidade de alertas climáticos"""
    WARNING = "warning"  # Atenção


@dataclass(frozen=True)
class WeatherAlert:
    """Alerta de limite disparado para uma observação"""
    code: str  # Código do alerta (ex: "HIGH_WIND")
    severity: AlertSeverity
    message: str  # Texto entregue ao notificador
    location_name: str
    details: Optional[dict] = None  # Valor medido e limite
    
    def to_dict(self) -> dict:
        result = {
            'code': self.code,
            'severity': self.severity.value,
            'message': self.message,
            'location_name': self.location_name
        }
        if self.details is not None:
            result['details'] = self.details
        return result
