"""
Модели данных генератора разметки LocalBusiness

Этот модуль содержит Pydantic модели для приведения входного словаря
полей к типизированному профилю и для результатов валидации.
"""

from typing import Any, Dict

from .business_profile import BusinessProfile, SchemaInputError
from .validation_result import ValidationResult
from .validators import FieldCheck, FieldValidators
from .working_hours import DayHours, Weekday, WeeklyHours

# Версия схемы данных
SCHEMA_VERSION = "1.0"

__all__ = [
    "BusinessProfile",
    "SchemaInputError",
    "ValidationResult",
    "FieldCheck",
    "FieldValidators",
    "DayHours",
    "Weekday",
    "WeeklyHours",
    "SCHEMA_VERSION",
]

# Примеры использования и валидации


def create_sample_field_map() -> Dict[str, Any]:
    """Создать пример словаря полей для тестирования"""
    return {
        "businessName": "Acme Coffee Shop",
        "businessType": "Restaurant",
        "description": "Artisanal coffee and fresh pastries in downtown",
        "phone": "(555) 123-4567",
        "website": "https://acmecoffee.com",
        "email": "hello@acmecoffee.com",
        "streetAddress": "123 Main Street",
        "city": "Anytown",
        "state": "CA",
        "postalCode": "90210",
        "country": "US",
        "latitude": "34.0522",
        "longitude": "-118.2437",
        "priceRange": "$$",
        "openingHours": {
            "monday": {"open": "07:00", "close": "19:00"},
            "tuesday": {"open": "07:00", "close": "19:00"},
            "wednesday": {"open": "07:00", "close": "19:00"},
            "thursday": {"open": "07:00", "close": "19:00"},
            "friday": {"open": "07:00", "close": "20:00"},
            "saturday": {"open": "08:00", "close": "20:00"},
            "sunday": {"open": "08:00", "close": "18:00"},
        },
    }
