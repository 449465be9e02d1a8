"""
Настройки конфигурации для генератора разметки LocalBusiness
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Загружаем переменные окружения
load_dotenv()

# Базовые пути
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
LOGS_DIR = BASE_DIR / "logs"


def _env_flag(name: str, default: str) -> bool:
    """Прочитать булев флаг из окружения"""
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


class Settings:
    """Класс настроек приложения"""

    # Основные настройки
    DEBUG: bool = _env_flag("DEBUG", "False")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = _env_flag("LOG_TO_FILE", "True")

    # Настройки вывода
    OUTPUT_PATH: str = os.getenv("OUTPUT_PATH", str(DATA_DIR))
    EXPORT_INCLUDE_METADATA: bool = _env_flag("EXPORT_INCLUDE_METADATA", "True")

    # Rate limiting для внешнего геокодера (запросов в секунду)
    GEOCODER_RATE_LIMIT: int = int(os.getenv("GEOCODER_RATE_LIMIT", "1"))


# Создаем экземпляр настроек
settings = Settings()
