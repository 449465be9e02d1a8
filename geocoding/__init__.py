"""
Геокодирование адресов (внешний сервис, подключается через BaseGeocoder)
"""

from .base_geocoder import (
    BaseGeocoder,
    Coordinates,
    GeocodingError,
    apply_coordinates,
    build_address_string,
    calculate_distance,
    normalize_address,
    validate_coordinates,
)

__all__ = [
    "BaseGeocoder",
    "Coordinates",
    "GeocodingError",
    "apply_coordinates",
    "build_address_string",
    "calculate_distance",
    "normalize_address",
    "validate_coordinates",
]
