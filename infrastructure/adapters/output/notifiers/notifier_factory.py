"""
Notifier Factory - Seleciona o notificador pelo ambiente (ALERT_NOTIFIER)
"""
from typing import Optional

from application.ports.output.notifier_port import INotifier
from infrastructure.adapters.output.notifiers.log_notifier import LogNotifier
from infrastructure.adapters.output.notifiers.zenity_notifier import ZenityNotifier
from shared.config import settings

_NOTIFIERS = {
    "zenity": ZenityNotifier,
    "log": LogNotifier,
}


def get_notifier(kind: Optional[str] = None) -> INotifier:
    """
    Retorna o notificador configurado
    
    Args:
        kind: "zenity" ou "log" (se None, usa ALERT_NOTIFIER)
    
    Raises:
        ValueError: Se o tipo for desconhecido
    """
    kind = (kind or settings.ALERT_NOTIFIER).lower()
    try:
        notifier_cls = _NOTIFIERS[kind]
    except KeyError:
        raise ValueError(
            f"Notificador desconhecido: {kind}. Opções: {', '.join(sorted(_NOTIFIERS))}"
        ) from None
    return notifier_cls()
