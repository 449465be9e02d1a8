"""
Сборка документа LocalBusiness JSON-LD из словаря полей
"""

from typing import Any, Dict, List

from models import BusinessProfile, create_sample_field_map

from .builders import build_address, build_geo_coordinates
from .opening_hours import build_opening_hours
from .sanitizer import sanitize_text

SCHEMA_CONTEXT = "https://schema.org"
DEFAULT_BUSINESS_TYPE = "LocalBusiness"

SUPPORTED_BUSINESS_TYPES = [
    "LocalBusiness",
    "Restaurant",
    "Store",
    "AutoDealer",
    "AutoRepair",
    "BeautySalon",
    "DentistOffice",
    "DryCleaningBusiness",
    "FinancialService",
    "FoodEstablishment",
    "GasStation",
    "HealthAndBeautyBusiness",
    "HomeAndConstructionBusiness",
    "LegalService",
    "Library",
    "LodgingBusiness",
    "MedicalBusiness",
    "ProfessionalService",
    "RealEstateAgent",
    "TravelAgency",
    "VeterinaryCare",
]


def generate(field_map: Any) -> Dict[str, Any]:
    """
    Генерация документа LocalBusiness из словаря полей

    Необязательные поля и вложенные структуры включаются только при наличии
    данных. Для полностью пустого словаря возвращается документ-заглушка
    (см. get_empty_schema).

    Args:
        field_map: Словарь полей формы или BusinessProfile

    Returns:
        Dict[str, Any]: Документ JSON-LD

    Raises:
        SchemaInputError: Если field_map не является словарем
    """
    profile = BusinessProfile.from_field_map(field_map)

    if isinstance(field_map, BusinessProfile):
        is_empty = profile.is_empty
    else:
        is_empty = len(field_map) == 0

    # TODO: вынести подстановку заглушки на сторону вызывающего кода
    if is_empty:
        return get_empty_schema()

    document: Dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": profile.business_type or DEFAULT_BUSINESS_TYPE,
    }

    # Обязательные поля
    if profile.business_name:
        document["name"] = sanitize_text(profile.business_name)

    address = build_address(profile)
    if len(address) > 1:  # Не только "@type"
        document["address"] = address

    # Контакты переносятся как есть: формат проверяют валидаторы формы
    if profile.phone:
        document["telephone"] = profile.phone

    if profile.website:
        document["url"] = profile.website

    if profile.email:
        document["email"] = profile.email

    # Необязательные поля
    if profile.description:
        document["description"] = sanitize_text(profile.description)

    if profile.price_range:
        document["priceRange"] = profile.price_range

    geo = build_geo_coordinates(profile)
    if geo:
        document["geo"] = geo

    opening_hours = build_opening_hours(profile)
    if opening_hours:
        document["openingHoursSpecification"] = opening_hours

    return document


def get_empty_schema() -> Dict[str, Any]:
    """Документ-заглушка для пустой формы"""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": DEFAULT_BUSINESS_TYPE,
        "name": "Your Business Name",
        "address": {
            "@type": "PostalAddress",
            "streetAddress": "123 Main Street",
            "addressLocality": "City",
            "addressRegion": "State",
            "postalCode": "12345",
            "addressCountry": "US",
        },
        "telephone": "(555) 123-4567",
    }


def generate_example() -> Dict[str, Any]:
    """Пример словаря полей (кофейня с полным графиком)"""
    return create_sample_field_map()


def get_supported_business_types() -> List[str]:
    """Поддерживаемые типы Schema.org"""
    return list(SUPPORTED_BUSINESS_TYPES)
