"""
Система логирования для генератора разметки LocalBusiness
"""

import sys
from collections import Counter
from typing import List, Optional

from loguru import logger

from config.settings import LOGS_DIR, settings


def setup_logger():
    """Настройка системы логирования"""

    # Удаляем стандартные обработчики
    logger.remove()

    # Формат логов
    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    # Консольный вывод
    logger.add(
        sys.stdout,
        format=log_format,
        level=settings.LOG_LEVEL,
        colorize=True,
    )

    if not settings.LOG_TO_FILE:
        return

    LOGS_DIR.mkdir(exist_ok=True)

    # Основной лог файл
    logger.add(
        LOGS_DIR / "schemasnap.log",
        format=log_format,
        level="DEBUG",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        enqueue=True,
    )

    # Файл только для ошибок
    logger.add(
        LOGS_DIR / "errors.log",
        format=log_format,
        level="ERROR",
        rotation="5 MB",
        retention="90 days",
        compression="zip",
        enqueue=True,
    )

    # Файл для статистики генерации
    logger.add(
        LOGS_DIR / "generation_stats.log",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
        level="INFO",
        filter=lambda record: "STATS" in record["extra"],
        rotation="1 day",
        retention="365 days",
        enqueue=True,
    )


def get_logger(name: str = __name__):
    """
    Получить именованный логгер

    Args:
        name: Имя логгера

    Returns:
        Logger: Настроенный логгер
    """
    return logger.bind(name=name)


def log_generation_stats(
    business_name: Optional[str],
    is_valid: bool,
    processing_time: float,
    errors_count: int = 0,
    warnings_count: int = 0,
    completeness: int = 0,
):
    """
    Логирование статистики генерации разметки

    Args:
        business_name: Название предприятия из документа
        is_valid: Прошел ли документ валидацию
        processing_time: Время обработки в секундах
        errors_count: Количество ошибок валидации
        warnings_count: Количество предупреждений
        completeness: Оценка полноты (0-100)
    """
    stats_logger = logger.bind(STATS=True)

    stats_data = {
        "business_name": business_name,
        "is_valid": is_valid,
        "processing_time": processing_time,
        "errors_count": errors_count,
        "warnings_count": warnings_count,
        "completeness": completeness,
    }

    if is_valid:
        stats_logger.info(f"GENERATION_VALID: {stats_data}")
    else:
        stats_logger.warning(f"GENERATION_INVALID: {stats_data}")


class GenerationMetrics:
    """Класс для сбора метрик генерации"""

    def __init__(self):
        self.total_documents = 0
        self.valid_documents = 0
        self.invalid_documents = 0
        self.total_processing_time = 0.0
        self.completeness_total = 0
        self.errors: List[str] = []

    def record_document(
        self,
        is_valid: bool,
        processing_time: float,
        completeness: int = 0,
        errors: Optional[List[str]] = None,
    ):
        """Записать результат генерации документа"""
        self.total_documents += 1
        self.total_processing_time += processing_time
        self.completeness_total += completeness

        if is_valid:
            self.valid_documents += 1
        else:
            self.invalid_documents += 1
            if errors:
                self.errors.extend(errors)

    def get_valid_rate(self) -> float:
        """Получить процент валидных документов"""
        if self.total_documents == 0:
            return 0.0
        return (self.valid_documents / self.total_documents) * 100

    def get_average_completeness(self) -> float:
        """Получить среднюю оценку полноты"""
        if self.total_documents == 0:
            return 0.0
        return self.completeness_total / self.total_documents

    def log_summary(self):
        """Вывести сводную статистику"""
        stats_logger = logger.bind(STATS=True)

        summary = {
            "total_documents": self.total_documents,
            "valid_documents": self.valid_documents,
            "invalid_documents": self.invalid_documents,
            "valid_rate": round(self.get_valid_rate(), 2),
            "average_completeness": round(self.get_average_completeness(), 2),
            "total_errors": len(self.errors),
            "unique_errors": len(set(self.errors)),
        }

        stats_logger.info(f"GENERATION_SUMMARY: {summary}")

        # Логируем наиболее частые ошибки валидации
        if self.errors:
            common_errors = Counter(self.errors).most_common(5)
            stats_logger.info(f"COMMON_ERRORS: {common_errors}")


# Инициализируем логгер при импорте модуля
setup_logger()

# Глобальный экземпляр метрик
generation_metrics = GenerationMetrics()
