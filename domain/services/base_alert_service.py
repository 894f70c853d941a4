"""
Classe base abstrata para serviços de alerta
Reduz duplicação de código e padroniza interface
"""
from abc import ABC, abstractmethod
from typing import List, Dict, Any

from domain.alerts.primitives import WeatherAlert, AlertSeverity
from domain.constants import Alerts


class BaseAlertService(ABC):
    """
    Classe base para todos os serviços de alerta
    
    Define interface comum e fornece métodos utilitários compartilhados.
    Cada serviço concreto implementa apenas a regra de limite.
    """
    
    @abstractmethod
    def generate_alerts(self, data: Any) -> List[WeatherAlert]:
        """
        Método abstrato para gerar alertas
        
        Args:
            data: Observação avaliada
        
        Returns:
            Lista de WeatherAlert gerados
        """
        pass
    
    @staticmethod
    def create_alert(
        code: str,
        severity: AlertSeverity,
        message: str,
        location_name: str,
        details: Dict[str, Any]
    ) -> WeatherAlert:
        """
        Factory method para criar alertas de forma padronizada
        
        Args:
            code: Código único do alerta (ex: "HIGH_WIND")
            severity: Severidade do alerta
            message: Texto já formatado
            location_name: Localização de origem
            details: Detalhes adicionais (dict)
        
        Returns:
            WeatherAlert configurado
        """
        return WeatherAlert(
            code=code,
            severity=severity,
            message=message,
            location_name=location_name,
            details=details
        )
    
    @staticmethod
    def format_message(template: str, max_length: int = Alerts.MAX_MESSAGE_LENGTH, **values: Any) -> str:
        """
        Formata a mensagem do alerta limitando o tamanho
        
        Mensagens acima de max_length são truncadas, nunca rejeitadas.
        
        Args:
            template: Template no formato str.format
            max_length: Tamanho máximo da mensagem
            **values: Valores do template
        
        Returns:
            Mensagem formatada com no máximo max_length caracteres
        """
        return template.format(**values)[:max_length]
    
    @staticmethod
    def round_details(details: Dict[str, Any], precision: int = 2) -> Dict[str, Any]:
        """
        Arredonda valores numéricos em details
        
        Args:
            details: Dicionário de detalhes
            precision: Casas decimais
        
        Returns:
            Dict com valores arredondados
        """
        rounded = {}
        for key, value in details.items():
            if isinstance(value, float):
                rounded[key] = round(value, precision)
            else:
                rounded[key] = value
        return rounded
