"""
Ядро сервиса: логирование и метрики
"""

from .logger import (
    GenerationMetrics,
    generation_metrics,
    get_logger,
    log_generation_stats,
)

__all__ = [
    "get_logger",
    "log_generation_stats",
    "generation_metrics",
    "GenerationMetrics",
]
