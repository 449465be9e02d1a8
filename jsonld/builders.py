"""
Построители вложенных структур PostalAddress и GeoCoordinates
"""

from typing import Any, Dict, Optional

from models import BusinessProfile

from .sanitizer import parse_coordinate, sanitize_text


def build_address(data: Any) -> Dict[str, Any]:
    """
    Построение объекта PostalAddress

    Улица, город и регион проходят через sanitize_text, индекс и страна
    переносятся как есть. Объект возвращается всегда, даже если в нем
    только "@type": решение о включении принимает сборщик документа.

    Args:
        data: Словарь полей формы или BusinessProfile

    Returns:
        Dict[str, Any]: Объект адреса
    """
    profile = BusinessProfile.from_field_map(data)

    address: Dict[str, Any] = {"@type": "PostalAddress"}

    if profile.street_address:
        address["streetAddress"] = sanitize_text(profile.street_address)

    if profile.city:
        address["addressLocality"] = sanitize_text(profile.city)

    if profile.state:
        address["addressRegion"] = sanitize_text(profile.state)

    if profile.postal_code:
        address["postalCode"] = profile.postal_code

    if profile.country:
        address["addressCountry"] = profile.country

    return address


def build_geo_coordinates(data: Any) -> Optional[Dict[str, Any]]:
    """
    Построение объекта GeoCoordinates

    Диапазоны широты и долготы здесь не проверяются, это делает валидатор.

    Args:
        data: Словарь полей формы или BusinessProfile

    Returns:
        Optional[Dict[str, Any]]: Координаты или None, если хотя бы одна
        из них отсутствует или не является конечным числом
    """
    profile = BusinessProfile.from_field_map(data)

    latitude = parse_coordinate(profile.latitude)
    longitude = parse_coordinate(profile.longitude)

    if latitude is None or longitude is None:
        return None

    return {
        "@type": "GeoCoordinates",
        "latitude": latitude,
        "longitude": longitude,
    }
