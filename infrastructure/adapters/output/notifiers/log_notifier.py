"""
Log Notifier - Registra alertas no log (hosts sem desktop)
"""
from application.ports.output.notifier_port import INotifier, NotificationResult
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


class LogNotifier(INotifier):
    """Escreve o alerta como warning no logger estruturado"""
    
    def notify(self, message: str) -> NotificationResult:
        logger.warning("ALERTA", alert_message=message)
        return NotificationResult(success=True)
