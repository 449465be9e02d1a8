"""
Очистка текста и разбор числовых значений для разметки JSON-LD
"""

import math
import re
from typing import Any, Optional

# Управляющие символы C0 и C1
CONTROL_CHARS_PATTERN = re.compile(r"[\u0000-\u001F\u007F-\u009F]")
WHITESPACE_PATTERN = re.compile(r"\s+")
# Числовой префикс строки: "40.7128°" -> 40.7128, "1_000" -> 1
LEADING_FLOAT_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def sanitize_text(text: Any) -> str:
    """
    Очистка текста для JSON-LD

    Удаляет управляющие символы, схлопывает пробельные последовательности
    в один пробел и обрезает края. Повторное применение результат не меняет.

    Args:
        text: Исходный текст

    Returns:
        str: Очищенный текст (пустая строка для пустого ввода)
    """
    if not text:
        return ""

    if not isinstance(text, str):
        text = str(text)

    result = CONTROL_CHARS_PATTERN.sub("", text)
    result = WHITESPACE_PATTERN.sub(" ", result)

    return result.strip()


def parse_coordinate(value: Any) -> Optional[float]:
    """
    Разбор координаты в число с плавающей точкой

    Args:
        value: Строка (учитывается числовой префикс) или число

    Returns:
        Optional[float]: Конечное число или None, если разобрать не удалось
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        match = LEADING_FLOAT_PATTERN.match(value.lstrip())
        if not match:
            return None
        value = match.group()

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(number):
        return None

    return number
