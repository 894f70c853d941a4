"""Notifier Port - Interface para exibir alertas ao usuário"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class NotificationResult:
    """Resultado da entrega de um alerta (apenas registrado em log)"""
    success: bool
    detail: str = ""


class INotifier(ABC):
    """Capacidade de notificação: recebe a mensagem pronta e a exibe"""

    @abstractmethod
    def notify(self, message: str) -> NotificationResult:
        pass
