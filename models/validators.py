"""
Валидаторы отдельных полей формы профиля предприятия
"""

import html
import re
from collections.abc import Mapping
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel

from .business_profile import parse_flag
from .validation_result import ValidationResult


class FieldCheck(BaseModel):
    """Результат проверки одного поля"""

    is_valid: bool = True
    message: str = ""
    normalized_value: Any = None


class FieldValidators:
    """Утилиты для валидации полей формы"""

    EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
    TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")
    HOSTNAME_PATTERN = re.compile(r"^[\w\-]+(\.[\w\-]+)+(:\d+)?$", re.UNICODE)

    POSTAL_CODE_PATTERNS: Dict[str, re.Pattern] = {
        "US": re.compile(r"^\d{5}(-\d{4})?$"),
        "CA": re.compile(r"^[A-Za-z]\d[A-Za-z] ?\d[A-Za-z]\d$"),
        "UK": re.compile(r"^[A-Z]{1,2}\d[A-Z\d]? ?\d[A-Z]{2}$"),
    }

    @classmethod
    def required(cls, value: Any) -> FieldCheck:
        """Обязательное поле"""
        text = "" if value is None else str(value).strip()
        return FieldCheck(is_valid=len(text) > 0, message="This field is required")

    @classmethod
    def email(cls, value: Optional[str]) -> FieldCheck:
        """Формат электронной почты"""
        if not value:
            return FieldCheck()

        return FieldCheck(
            is_valid=bool(cls.EMAIL_PATTERN.match(value)),
            message="Please enter a valid email address",
        )

    @classmethod
    def url(cls, value: Optional[str]) -> FieldCheck:
        """
        Формат URL, схема https:// добавляется при отсутствии

        Args:
            value: Адрес сайта

        Returns:
            FieldCheck: Результат с нормализованным URL
        """
        if not value:
            return FieldCheck()

        normalized = cls.normalize_url(value)
        parsed = urlparse(normalized)
        if not parsed.netloc or " " in normalized:
            return FieldCheck(is_valid=False, message="Please enter a valid URL")

        if not cls.HOSTNAME_PATTERN.match(parsed.netloc):
            return FieldCheck(is_valid=False, message="Please enter a valid URL")

        return FieldCheck(normalized_value=normalized)

    @classmethod
    def phone(cls, value: Optional[str]) -> FieldCheck:
        """Номер телефона: от 7 до 15 цифр (международный стандарт)"""
        if not value:
            return FieldCheck()

        digits = cls.extract_phone_digits(value)
        if len(digits) < 7 or len(digits) > 15:
            return FieldCheck(is_valid=False, message="Please enter a valid phone number")

        return FieldCheck(normalized_value=cls.format_phone_number(value))

    @classmethod
    def extract_phone_digits(cls, phone: str) -> str:
        """Извлечь только цифры из номера телефона"""
        if not phone:
            return ""
        return re.sub(r"\D", "", phone)

    @classmethod
    def format_phone_number(cls, value: str) -> str:
        """
        Форматирование номера для отображения

        Десять цифр оформляются как (XXX) XXX-XXXX, более длинные номера
        получают префикс +.
        """
        digits = cls.extract_phone_digits(value)

        if len(digits) == 10:
            return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"

        if len(digits) > 10:
            return f"+{digits}"

        return value

    @classmethod
    def _coordinate(cls, value: Any, name: str, limit: float) -> FieldCheck:
        if value is None or value == "":
            return FieldCheck()

        try:
            number = float(value)
        except (TypeError, ValueError):
            return FieldCheck(is_valid=False, message=f"{name} must be a number")

        if number != number:
            return FieldCheck(is_valid=False, message=f"{name} must be a number")

        if number < -limit or number > limit:
            return FieldCheck(
                is_valid=False,
                message=f"{name} must be between -{limit:g} and {limit:g}",
            )

        return FieldCheck(normalized_value=round(number, 6))

    @classmethod
    def latitude(cls, value: Any) -> FieldCheck:
        """Широта в диапазоне [-90, 90]"""
        return cls._coordinate(value, "Latitude", 90)

    @classmethod
    def longitude(cls, value: Any) -> FieldCheck:
        """Долгота в диапазоне [-180, 180]"""
        return cls._coordinate(value, "Longitude", 180)

    @classmethod
    def postal_code(cls, value: Optional[str], country: str = "US") -> FieldCheck:
        """Почтовый индекс по шаблону страны (по умолчанию US)"""
        if not value:
            return FieldCheck()

        pattern = cls.POSTAL_CODE_PATTERNS.get(
            (country or "US").upper(), cls.POSTAL_CODE_PATTERNS["US"]
        )
        return FieldCheck(
            is_valid=bool(pattern.match(value.strip())),
            message="Please enter a valid postal code",
        )

    @classmethod
    def max_length(cls, value: Optional[str], max_length: int) -> FieldCheck:
        """Ограничение длины текста"""
        if not value:
            return FieldCheck()

        return FieldCheck(
            is_valid=len(value) <= max_length,
            message=f"Maximum {max_length} characters allowed",
        )

    @classmethod
    def time(cls, value: Optional[str]) -> FieldCheck:
        """Время в формате HH:MM (24 часа)"""
        if not value:
            return FieldCheck()

        return FieldCheck(
            is_valid=bool(cls.TIME_PATTERN.match(value)),
            message="Please enter time in HH:MM format",
        )

    @classmethod
    def time_range(cls, open_time: Optional[str], close_time: Optional[str]) -> FieldCheck:
        """Время открытия раньше времени закрытия (сравнение в минутах)"""
        if not open_time or not close_time:
            return FieldCheck()

        def to_minutes(value: str) -> int:
            hours, minutes = value.split(":")
            return int(hours) * 60 + int(minutes)

        try:
            is_valid = to_minutes(open_time) < to_minutes(close_time)
        except ValueError:
            is_valid = False

        return FieldCheck(
            is_valid=is_valid, message="Opening time must be before closing time"
        )

    @classmethod
    def normalize_url(cls, value: Optional[str]) -> str:
        """Добавить протокол к URL при отсутствии"""
        if not value:
            return ""

        trimmed = value.strip()
        if not trimmed.startswith(("http://", "https://")):
            return f"https://{trimmed}"

        return trimmed

    @classmethod
    def sanitize_html_text(cls, value: Optional[str]) -> str:
        """Экранирование HTML-символов в пользовательском тексте"""
        if not value:
            return ""

        return html.escape(value.strip(), quote=True).replace("/", "&#x2F;")

    @classmethod
    def validate_profile(cls, field_map: Any) -> ValidationResult:
        """
        Проверка полей формы до генерации разметки

        Args:
            field_map: Словарь полей формы

        Returns:
            ValidationResult: Ошибки с указанием поля
        """
        result = ValidationResult()
        if not isinstance(field_map, Mapping):
            result.add_error("Form data must be a mapping")
            return result

        checks = [
            ("businessName", cls.required(field_map.get("businessName"))),
            ("phone", cls.required(_text(field_map.get("phone")))),
            ("phone", cls.phone(_text(field_map.get("phone")))),
            ("email", cls.email(_text(field_map.get("email")))),
            ("website", cls.url(_text(field_map.get("website")))),
            ("latitude", cls.latitude(field_map.get("latitude"))),
            ("longitude", cls.longitude(field_map.get("longitude"))),
            (
                "postalCode",
                cls.postal_code(
                    _text(field_map.get("postalCode")),
                    _text(field_map.get("country")) or "US",
                ),
            ),
            ("description", cls.max_length(_text(field_map.get("description")), 500)),
        ]

        opening_hours = field_map.get("openingHours")
        if isinstance(opening_hours, Mapping) and not parse_flag(
            field_map.get("open24Hours")
        ):
            for day, hours in opening_hours.items():
                if not isinstance(hours, Mapping):
                    continue
                open_time = _text(hours.get("open"))
                close_time = _text(hours.get("close"))
                checks.append((f"{day}.open", cls.time(open_time)))
                checks.append((f"{day}.close", cls.time(close_time)))
                checks.append((str(day), cls.time_range(open_time, close_time)))

        for field, check in checks:
            if not check.is_valid:
                result.add_error(f"{field}: {check.message}")

        return result


def _text(value: Any) -> Optional[str]:
    """Значение поля формы как строка (нестроковые значения отбрасываются)"""
    return value if isinstance(value, str) else None
