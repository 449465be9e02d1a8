"""
Пакет конфигурации генератора разметки LocalBusiness
"""

from .settings import DATA_DIR, LOGS_DIR, Settings, settings

__all__ = ["settings", "Settings", "DATA_DIR", "LOGS_DIR"]
