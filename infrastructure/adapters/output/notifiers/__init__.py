"""Notificadores de alerta"""
from infrastructure.adapters.output.notifiers.zenity_notifier import ZenityNotifier
from infrastructure.adapters.output.notifiers.log_notifier import LogNotifier
from infrastructure.adapters.output.notifiers.recording_notifier import RecordingNotifier
from infrastructure.adapters.output.notifiers.notifier_factory import get_notifier

__all__ = ['ZenityNotifier', 'LogNotifier', 'RecordingNotifier', 'get_notifier']
