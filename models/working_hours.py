"""
Модель данных графика работы предприятия

Недельный график хранится как упорядоченная структура из семи слотов,
индексируемая перечислением Weekday (понедельник -> воскресенье).
"""

import re
from collections.abc import Mapping
from datetime import time
from enum import IntEnum
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Weekday(IntEnum):
    """Дни недели в каноническом порядке"""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def key(self) -> str:
        """Ключ дня во входном словаре полей ("monday")"""
        return self.name.lower()

    @property
    def label(self) -> str:
        """Название дня в словаре Schema.org ("Monday")"""
        return self.name.capitalize()

    @classmethod
    def from_key(cls, key: Any) -> Optional["Weekday"]:
        """
        Нормализация названия дня недели

        Args:
            key: Ключ дня из входных данных ("monday", "Mon", "tues")

        Returns:
            Optional[Weekday]: День недели или None, если ключ не распознан
        """
        if not isinstance(key, str):
            return None

        day = key.strip().lower()
        if not day:
            return None

        # Прямое соответствие
        for weekday in cls:
            if weekday.key == day:
                return weekday

        # Поиск по алиасам
        alias = WEEKDAY_ALIASES.get(day)
        if alias is not None:
            return cls[alias.upper()]

        return None


# Альтернативные названия дней недели
WEEKDAY_ALIASES: Dict[str, str] = {
    "mon": "monday",
    "tue": "tuesday",
    "tues": "tuesday",
    "wed": "wednesday",
    "thu": "thursday",
    "thur": "thursday",
    "thurs": "thursday",
    "fri": "friday",
    "sat": "saturday",
    "sun": "sunday",
}


class DayHours(BaseModel):
    """Часы работы за один день"""

    model_config = ConfigDict(frozen=True)

    open: Optional[str] = Field(None, description="Время открытия HH:MM")
    close: Optional[str] = Field(None, description="Время закрытия HH:MM")

    CLOSED_PATTERNS: ClassVar[Tuple[str, ...]] = ("closed", "off", "day off")
    ALWAYS_OPEN_PATTERNS: ClassVar[Set[str]] = {
        "24/7",
        "24h",
        "24 hours",
        "open 24 hours",
        "always open",
    }

    # Паттерны времени
    TIME_RANGE_PATTERNS: ClassVar[List[str]] = [
        r"^(\d{1,2}):(\d{2})\s*[-–—]\s*(\d{1,2}):(\d{2})$",  # 09:00-21:00
        r"^(\d{1,2})\s*[-–—]\s*(\d{1,2})$",  # 9-21
    ]

    @field_validator("open", "close", mode="before")
    @classmethod
    def validate_time(cls, v: Any) -> Optional[str]:
        """Приведение времени к строке"""
        if isinstance(v, time):
            return v.strftime("%H:%M")

        if not isinstance(v, str):
            return None

        v = v.strip()
        return v or None

    @property
    def signature(self) -> str:
        """Сигнатура дня для группировки одинаковых интервалов"""
        return f"{self.open}-{self.close}"

    @classmethod
    def from_entry(cls, entry: Any) -> Optional["DayHours"]:
        """
        Построить часы работы из записи входного словаря

        Args:
            entry: {"open": ..., "close": ...} или строка "09:00-17:00"

        Returns:
            Optional[DayHours]: Часы работы или None для выходного/мусора
        """
        if isinstance(entry, DayHours):
            return entry

        if isinstance(entry, Mapping):
            return cls(open=entry.get("open"), close=entry.get("close"))

        if isinstance(entry, str):
            return cls._parse_hours_text(entry)

        return None

    @classmethod
    def _parse_hours_text(cls, hours: str) -> Optional["DayHours"]:
        """Разбор интервала вида 09:00-17:00 или 9-17"""
        hours = hours.strip()
        if not hours:
            return None

        lowered = hours.lower()
        if lowered in cls.CLOSED_PATTERNS:
            return None

        if lowered in cls.ALWAYS_OPEN_PATTERNS:
            return cls(open="00:00", close="23:59")

        for pattern in cls.TIME_RANGE_PATTERNS:
            match = re.match(pattern, hours)
            if not match:
                continue

            groups = match.groups()
            if len(groups) == 4:
                start_h, start_m, end_h, end_m = map(int, groups)
            else:
                start_h, end_h = map(int, groups)
                start_m = end_m = 0

            if (
                0 <= start_h <= 23
                and 0 <= start_m <= 59
                and 0 <= end_h <= 23
                and 0 <= end_m <= 59
            ):
                return cls(
                    open=f"{start_h:02d}:{start_m:02d}",
                    close=f"{end_h:02d}:{end_m:02d}",
                )

        return None


class WeeklyHours(BaseModel):
    """Недельный график: семь слотов в порядке Weekday"""

    model_config = ConfigDict(frozen=True)

    days: Tuple[Optional[DayHours], ...] = Field(
        default=(None,) * len(Weekday), description="Часы работы по дням недели"
    )

    @field_validator("days")
    @classmethod
    def validate_days(
        cls, v: Tuple[Optional[DayHours], ...]
    ) -> Tuple[Optional[DayHours], ...]:
        """График всегда содержит ровно семь слотов"""
        if len(v) != len(Weekday):
            raise ValueError(f"Ожидалось {len(Weekday)} дней, получено {len(v)}")
        return v

    @classmethod
    def from_day_map(cls, day_map: Any) -> "WeeklyHours":
        """
        Построить график из словаря {"monday": {"open": ..., "close": ...}}

        Нераспознанные дни и записи без часов работы пропускаются.

        Args:
            day_map: Словарь часов работы по дням

        Returns:
            WeeklyHours: Недельный график
        """
        if isinstance(day_map, WeeklyHours):
            return day_map

        slots: List[Optional[DayHours]] = [None] * len(Weekday)
        if not isinstance(day_map, Mapping):
            return cls(days=tuple(slots))

        for key, entry in day_map.items():
            weekday = Weekday.from_key(key)
            if weekday is None:
                continue

            hours = DayHours.from_entry(entry)
            if hours is not None:
                slots[weekday] = hours

        return cls(days=tuple(slots))

    def __getitem__(self, weekday: Weekday) -> Optional[DayHours]:
        return self.days[weekday]

    def items(self) -> Iterator[Tuple[Weekday, Optional[DayHours]]]:
        """Дни недели в каноническом порядке вместе с часами работы"""
        for weekday in Weekday:
            yield weekday, self.days[weekday]

    def present_days(self) -> List[Weekday]:
        """Дни, для которых заданы часы работы"""
        return [weekday for weekday, hours in self.items() if hours is not None]

    def get_working_days_count(self) -> int:
        """Получить количество рабочих дней в неделю"""
        return len(self.present_days())

    def format_schedule_display(self) -> List[str]:
        """Отформатировать расписание для отображения"""
        return [
            f"{weekday.label}: {hours.open or '?'}-{hours.close or '?'}"
            for weekday, hours in self.items()
            if hours is not None
        ]
