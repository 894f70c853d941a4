"""
Recording Notifier - Guarda as mensagens em memória
"""
from typing import List

from application.ports.output.notifier_port import INotifier, NotificationResult


class RecordingNotifier(INotifier):
    """Notificador para testes; pode simular falhas de entrega"""
    
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.messages: List[str] = []
    
    def notify(self, message: str) -> NotificationResult:
        self.messages.append(message)
        if self.fail:
            return NotificationResult(success=False, detail="falha simulada")
        return NotificationResult(success=True)
