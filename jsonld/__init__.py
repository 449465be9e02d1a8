"""
Генератор разметки Schema.org LocalBusiness в формате JSON-LD

Чистые функции без ввода-вывода и без состояния между вызовами:
словарь полей -> построители -> документ -> валидация и оценка полноты.
"""

from typing import Any, Dict, List, Optional

from models import ValidationResult, WeeklyHours

from .assembler import (
    SUPPORTED_BUSINESS_TYPES,
    generate,
    generate_example,
    get_empty_schema,
    get_supported_business_types,
)
from .builders import build_address, build_geo_coordinates
from .opening_hours import OpeningHoursGroup, build_opening_hours, group_consecutive_days
from .sanitizer import parse_coordinate, sanitize_text
from .scoring import get_completeness_score
from .serialization import format_document, minify_document, to_html_script
from .validator import validate

__all__ = [
    "JsonLdGenerator",
    "OpeningHoursGroup",
    "SUPPORTED_BUSINESS_TYPES",
    "build_address",
    "build_geo_coordinates",
    "build_opening_hours",
    "format_document",
    "generate",
    "generate_example",
    "get_completeness_score",
    "get_empty_schema",
    "get_supported_business_types",
    "group_consecutive_days",
    "minify_document",
    "parse_coordinate",
    "sanitize_text",
    "to_html_script",
    "validate",
]


class JsonLdGenerator:
    """Единая точка доступа ко всем операциям генератора"""

    @staticmethod
    def generate(field_map: Any) -> Dict[str, Any]:
        return generate(field_map)

    @staticmethod
    def validate(document: Any) -> ValidationResult:
        return validate(document)

    @staticmethod
    def get_completeness_score(document: Any) -> int:
        return get_completeness_score(document)

    @staticmethod
    def format(document: Dict[str, Any]) -> str:
        return format_document(document)

    @staticmethod
    def minify(document: Dict[str, Any]) -> str:
        return minify_document(document)

    @staticmethod
    def to_html_script(document: Dict[str, Any]) -> str:
        return to_html_script(document)

    @staticmethod
    def sanitize_text(text: Any) -> str:
        return sanitize_text(text)

    @staticmethod
    def build_address(data: Any) -> Dict[str, Any]:
        return build_address(data)

    @staticmethod
    def build_geo_coordinates(data: Any) -> Optional[Dict[str, Any]]:
        return build_geo_coordinates(data)

    @staticmethod
    def build_opening_hours(data: Any) -> List[Dict[str, Any]]:
        return build_opening_hours(data)

    @staticmethod
    def group_consecutive_days(weekly_hours: WeeklyHours) -> List[OpeningHoursGroup]:
        return group_consecutive_days(weekly_hours)

    @staticmethod
    def get_empty_schema() -> Dict[str, Any]:
        return get_empty_schema()

    @staticmethod
    def generate_example() -> Dict[str, Any]:
        return generate_example()

    @staticmethod
    def get_supported_business_types() -> List[str]:
        return get_supported_business_types()
