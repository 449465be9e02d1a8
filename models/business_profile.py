"""
Типизированный профиль предприятия

Входной словарь полей (форма, CLI, фикстура) приводится к модели
BusinessProfile в одной точке. Все построители разметки работают уже
с моделью и не проверяют форму входных данных.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .working_hours import WeeklyHours


class SchemaInputError(TypeError):
    """Входные данные генератора не являются словарем полей"""


TEXT_FIELDS = (
    "business_name",
    "business_type",
    "description",
    "phone",
    "website",
    "email",
    "street_address",
    "city",
    "state",
    "postal_code",
    "country",
    "price_range",
)

TRUE_STRINGS = {"true", "1", "yes", "on"}


def parse_flag(value: Any) -> bool:
    """Булев флаг формы: строки true/1/yes/on, иначе истинность значения"""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


class BusinessProfile(BaseModel):
    """Модель данных профиля предприятия"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # Основные поля
    business_name: Optional[str] = Field(
        None, alias="businessName", description="Название предприятия"
    )
    business_type: Optional[str] = Field(
        None, alias="businessType", description="Тип Schema.org (Restaurant, Store...)"
    )
    description: Optional[str] = Field(None, description="Описание предприятия")

    # Контакты
    phone: Optional[str] = Field(None, description="Номер телефона")
    website: Optional[str] = Field(None, description="Официальный сайт")
    email: Optional[str] = Field(None, description="Электронная почта")

    # Адрес
    street_address: Optional[str] = Field(
        None, alias="streetAddress", description="Улица и дом"
    )
    city: Optional[str] = Field(None, description="Город")
    state: Optional[str] = Field(None, description="Регион/штат")
    postal_code: Optional[str] = Field(
        None, alias="postalCode", description="Почтовый индекс"
    )
    country: Optional[str] = Field(None, description="Код страны")

    # Координаты хранятся как пришли: разбор выполняет построитель geo
    latitude: Optional[Union[str, float]] = Field(None, description="Широта")
    longitude: Optional[Union[str, float]] = Field(None, description="Долгота")

    price_range: Optional[str] = Field(
        None, alias="priceRange", description="Ценовой диапазон ($$)"
    )

    # График работы
    open_24_hours: bool = Field(
        False, alias="open24Hours", description="Работает круглосуточно"
    )
    opening_hours: WeeklyHours = Field(
        default_factory=WeeklyHours,
        alias="openingHours",
        description="Часы работы по дням недели",
    )

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        """Текстовые поля: строки как есть, числа в строку, прочее отбрасываем"""
        if v is None or isinstance(v, str):
            return v

        if isinstance(v, bool):
            return None

        if isinstance(v, (int, float)):
            return str(v)

        return None

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def validate_coordinate(cls, v: Any) -> Optional[Union[str, float]]:
        """Координата: строка или число, прочее отбрасываем"""
        if isinstance(v, bool):
            return None

        if isinstance(v, (int, float)):
            return float(v)

        if isinstance(v, str):
            return v

        return None

    @field_validator("open_24_hours", mode="before")
    @classmethod
    def validate_open_24_hours(cls, v: Any) -> bool:
        """Флаг круглосуточной работы"""
        return parse_flag(v)

    @field_validator("opening_hours", mode="before")
    @classmethod
    def validate_opening_hours(cls, v: Any) -> WeeklyHours:
        """Часы работы: словарь по дням приводится к недельному графику"""
        return WeeklyHours.from_day_map(v)

    @classmethod
    def from_field_map(cls, field_map: Any) -> "BusinessProfile":
        """
        Привести словарь полей к профилю предприятия

        Args:
            field_map: Словарь полей формы или уже готовый профиль

        Returns:
            BusinessProfile: Типизированный профиль

        Raises:
            SchemaInputError: Если входные данные не являются словарем
        """
        if isinstance(field_map, BusinessProfile):
            return field_map

        if not isinstance(field_map, Mapping):
            raise SchemaInputError(
                f"Field map must be a mapping, got {type(field_map).__name__}"
            )

        data = {key: value for key, value in field_map.items() if isinstance(key, str)}
        return cls.model_validate(data)

    @property
    def is_empty(self) -> bool:
        """Профиль создан без единого поля"""
        return not self.model_fields_set
