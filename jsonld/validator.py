"""
Валидация сгенерированного документа LocalBusiness
"""

import math
from collections.abc import Mapping
from typing import Any

from models import ValidationResult

REQUIRED_ADDRESS_FIELDS = [
    "streetAddress",
    "addressLocality",
    "addressRegion",
    "postalCode",
]


def _is_coordinate(value: Any, limit: float) -> bool:
    """Конечное число в диапазоне [-limit, limit]"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and -limit <= value <= limit


def validate(document: Any) -> ValidationResult:
    """
    Валидация документа JSON-LD

    Ошибки блокируют публикацию, предупреждения носят рекомендательный
    характер. Исключения для отсутствующих данных не выбрасываются.

    Args:
        document: Документ, полученный из generate()

    Returns:
        ValidationResult: Накопленные ошибки и предупреждения
    """
    result = ValidationResult()
    if not isinstance(document, Mapping):
        document = {}

    # Обязательные поля
    name = document.get("name")
    if not name or not isinstance(name, str) or not name.strip():
        result.add_error("Business name is required")

    address = document.get("address")
    if not isinstance(address, Mapping):
        address = None

    if not address or not address.get("streetAddress"):
        result.add_error("Street address is required")

    if not document.get("telephone"):
        result.add_error("Business phone number is required")

    # Рекомендуемые поля
    if not document.get("url"):
        result.add_warning("Website URL is recommended for better SEO")

    if not document.get("openingHoursSpecification"):
        result.add_warning("Opening hours help customers find you")

    if not document.get("geo"):
        result.add_warning("Geographic coordinates improve local search")

    # Полнота адреса
    if address:
        for field in REQUIRED_ADDRESS_FIELDS:
            if not address.get(field):
                result.add_error(f"Address {field} is required")

    # Координаты
    geo = document.get("geo")
    if geo:
        if not isinstance(geo, Mapping):
            geo = {}
        if not _is_coordinate(geo.get("latitude"), 90):
            result.add_error("Invalid latitude coordinate")
        if not _is_coordinate(geo.get("longitude"), 180):
            result.add_error("Invalid longitude coordinate")

    # Часы работы: строки HH:MM сравниваются лексикографически
    specifications = document.get("openingHoursSpecification")
    if specifications:
        if not isinstance(specifications, (list, tuple)):
            specifications = [specifications]

        for index, spec in enumerate(specifications, start=1):
            if not isinstance(spec, Mapping):
                spec = {}

            opens, closes = spec.get("opens"), spec.get("closes")
            if not opens or not closes:
                result.add_error(
                    f"Opening hours specification {index} missing opens/closes times"
                )

            if (
                isinstance(opens, str)
                and isinstance(closes, str)
                and opens
                and closes
                and opens >= closes
            ):
                result.add_error(
                    f"Opening hours specification {index}: "
                    "opening time must be before closing time"
                )

    return result
