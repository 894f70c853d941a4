"""Shared configuration"""
from .settings import RAW_DATA_FILE, PROCESSED_DATA_FILE, ALERT_NOTIFIER
from .logger_config import get_logger, logger

__all__ = ['RAW_DATA_FILE', 'PROCESSED_DATA_FILE', 'ALERT_NOTIFIER', 'get_logger', 'logger']
