"""
Configurações centralizadas do batch
"""
import os

# Logs append-only (criados se ausentes, nunca truncados)
RAW_DATA_FILE = os.environ.get('RAW_DATA_FILE', 'raw_data.txt')
PROCESSED_DATA_FILE = os.environ.get('PROCESSED_DATA_FILE', 'processed_data.txt')

# Alertas
ALERT_NOTIFIER = os.environ.get('ALERT_NOTIFIER', 'zenity').lower()
ALERT_DISPLAY = os.environ.get('ALERT_DISPLAY', ':0')
