"""
Интерфейс геокодера и вспомогательные функции для координат

Генератор разметки геокодер не вызывает: координаты попадают в словарь
полей снаружи (см. apply_coordinates). HTTP-провайдеры в пакет не входят,
их реализуют наследники BaseGeocoder.
"""

import math
import re
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from config.settings import settings
from core.logger import get_logger

EARTH_RADIUS_KM = 6371

ADDRESS_FIELDS = ["streetAddress", "city", "state", "postalCode", "country"]


class GeocodingError(RuntimeError):
    """Не удалось получить координаты для адреса"""


class Coordinates(BaseModel):
    """Результат геокодирования"""

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    formatted_address: Optional[str] = None
    provider: Optional[str] = None
    accuracy: Optional[str] = None


class BaseGeocoder(ABC):
    """Базовый класс геокодера с кешем и ограничением частоты запросов"""

    provider_name = "base"

    def __init__(self, rate_limit: Optional[int] = None):
        self.logger = get_logger(__name__)
        self.cache: Dict[str, Coordinates] = {}
        self.rate_limits: Dict[str, Dict[str, float]] = {
            self.provider_name: {
                "requests": 0,
                "reset_time": 0.0,
                "limit": rate_limit or settings.GEOCODER_RATE_LIMIT,
            }
        }

    @abstractmethod
    def _lookup(self, address: str) -> Optional[Coordinates]:
        """Запрос к провайдеру (должен быть переопределен в дочерних классах)"""
        pass

    def geocode(self, address: str) -> Coordinates:
        """
        Геокодирование адреса

        Args:
            address: Адрес одной строкой

        Returns:
            Coordinates: Координаты адреса

        Raises:
            GeocodingError: Адрес пуст, превышен лимит или ничего не найдено
        """
        if not address or not isinstance(address, str):
            raise GeocodingError("Valid address string is required")

        normalized = normalize_address(address)

        if normalized in self.cache:
            return self.cache[normalized]

        if not self.check_rate_limit(self.provider_name):
            raise GeocodingError(f"Rate limit exceeded for {self.provider_name}")

        result = self._lookup(normalized)
        if result is None:
            self.logger.warning(f"Адрес не найден: {normalized}")
            raise GeocodingError("Unable to geocode address with any available provider")

        self.cache[normalized] = result
        return result

    def check_rate_limit(self, provider_name: str) -> bool:
        """Проверка лимита запросов в секунду (неизвестные провайдеры без лимита)"""
        limit = self.rate_limits.get(provider_name)
        if not limit:
            return True

        now = time.monotonic()
        if now > limit["reset_time"]:
            limit["requests"] = 0
            limit["reset_time"] = now + 1.0

        if limit["requests"] >= limit["limit"]:
            return False

        limit["requests"] += 1
        return True

    def clear_cache(self):
        """Очистить кеш геокодирования"""
        self.cache.clear()

    def get_cache_stats(self) -> Dict[str, Any]:
        """Статистика кеша"""
        return {"size": len(self.cache), "entries": list(self.cache.keys())}


def normalize_address(address: str) -> str:
    """Нормализация адреса: нижний регистр, без спецсимволов, одиночные пробелы"""
    result = address.lower().strip()
    result = re.sub(r"\s+", " ", result)
    return re.sub(r"[^\w\s]", "", result)


def build_address_string(field_map: Mapping) -> str:
    """Адрес одной строкой из полей формы"""
    parts = [
        str(field_map.get(field)) for field in ADDRESS_FIELDS if field_map.get(field)
    ]
    return ", ".join(parts)


def validate_coordinates(latitude: Any, longitude: Any) -> Dict[str, Any]:
    """
    Проверка пары координат

    Args:
        latitude: Широта (строка или число)
        longitude: Долгота (строка или число)

    Returns:
        Dict[str, Any]: is_valid, errors и coordinates (None при ошибках)
    """
    errors: List[str] = []

    def parse(value: Any) -> Optional[float]:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return None if math.isnan(number) else number

    lat = parse(latitude)
    lng = parse(longitude)

    if lat is None:
        errors.append("Latitude must be a valid number")
    elif lat < -90 or lat > 90:
        errors.append("Latitude must be between -90 and 90")

    if lng is None:
        errors.append("Longitude must be a valid number")
    elif lng < -180 or lng > 180:
        errors.append("Longitude must be between -180 and 180")

    return {
        "is_valid": not errors,
        "errors": errors,
        "coordinates": None if errors else {"latitude": lat, "longitude": lng},
    }


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Расстояние между двумя точками в километрах (формула гаверсинусов)"""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = math.sin(d_lat / 2) ** 2 + math.cos(math.radians(lat1)) * math.cos(
        math.radians(lat2)
    ) * math.sin(d_lon / 2) ** 2

    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def apply_coordinates(field_map: Mapping, geocoder: BaseGeocoder) -> Dict[str, Any]:
    """
    Дополнить словарь полей координатами от геокодера

    Args:
        field_map: Словарь полей формы
        geocoder: Реализация BaseGeocoder

    Returns:
        Dict[str, Any]: Новый словарь с latitude/longitude в виде строк

    Raises:
        GeocodingError: Если адрес пуст или геокодер ничего не нашел
    """
    address = build_address_string(field_map)
    coordinates = geocoder.geocode(address)

    updated = dict(field_map)
    updated["latitude"] = str(coordinates.latitude)
    updated["longitude"] = str(coordinates.longitude)
    return updated
