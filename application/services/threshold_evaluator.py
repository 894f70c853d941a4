"""
Threshold Evaluator - Dispara os alertas de limite de uma observação
"""
from typing import List

from application.ports.output.notifier_port import INotifier
from domain.alerts.primitives import WeatherAlert
from domain.entities.observation import Observation
from domain.services.threshold_alert_orchestrator import ThresholdAlertOrchestrator
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class ThresholdEvaluator:
    """
    Avalia limites e chama o notificador uma vez por alerta
    
    A falha de entrega é registrada em log e nunca propagada.
    """
    
    def __init__(self, notifier: INotifier):
        self.notifier = notifier
    
    def evaluate(self, observation: Observation) -> List[WeatherAlert]:
        """Decisão pura: alertas que a observação dispara (vento, depois temperatura)"""
        return ThresholdAlertOrchestrator.generate_alerts(observation)
    
    def check(self, observation: Observation) -> List[WeatherAlert]:
        """
        Avalia a observação e notifica cada alerta disparado
        
        Args:
            observation: Observação normalizada
        
        Returns:
            Alertas disparados (apenas para observabilidade)
        """
        alerts = self.evaluate(observation)
        
        for alert in alerts:
            result = self.notifier.notify(alert.message)
            if result.success:
                logger.info(
                    "Alerta enviado",
                    alert=alert.to_dict()
                )
            else:
                logger.warning(
                    "Falha ao enviar alerta",
                    alert=alert.to_dict(),
                    error=result.detail
                )
        
        return alerts
