"""
Компилятор часов работы в OpeningHoursSpecification

Дни недели проходятся один раз в каноническом порядке (понедельник ->
воскресенье). Подряд идущие дни с одинаковыми часами работы объединяются
в одну спецификацию. Переход с воскресенья на понедельник не учитывается.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from models import BusinessProfile, Weekday, WeeklyHours

ALWAYS_OPEN_FROM = "00:00"
ALWAYS_OPEN_UNTIL = "23:59"


class OpeningHoursGroup(BaseModel):
    """Группа подряд идущих дней с одинаковыми часами работы"""

    days: List[Weekday] = Field(default_factory=list)
    opens: Optional[str] = None
    closes: Optional[str] = None

    @property
    def day_of_week(self) -> Union[str, List[str]]:
        """Одно название для одного дня, иначе упорядоченный список"""
        labels = [day.label for day in self.days]
        return labels[0] if len(labels) == 1 else labels

    def to_specification(self) -> Dict[str, Any]:
        """Объект OpeningHoursSpecification (отсутствующее время не выводится)"""
        specification: Dict[str, Any] = {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": self.day_of_week,
        }

        if self.opens is not None:
            specification["opens"] = self.opens

        if self.closes is not None:
            specification["closes"] = self.closes

        return specification


def group_consecutive_days(weekly_hours: WeeklyHours) -> List[OpeningHoursGroup]:
    """
    Группировка подряд идущих дней с одинаковыми часами работы

    Args:
        weekly_hours: Недельный график

    Returns:
        List[OpeningHoursGroup]: Группы в порядке первого дня группы
    """
    groups: List[OpeningHoursGroup] = []
    consumed = [False] * len(Weekday)

    for weekday, hours in weekly_hours.items():
        if consumed[weekday] or hours is None:
            continue

        group = OpeningHoursGroup(days=[weekday], opens=hours.open, closes=hours.close)
        consumed[weekday] = True

        # Расширяем группу вперед, пока сигнатура совпадает
        next_index = weekday + 1
        while next_index < len(Weekday):
            next_hours = weekly_hours.days[next_index]
            if (
                next_hours is None
                or consumed[next_index]
                or next_hours.signature != hours.signature
            ):
                break

            group.days.append(Weekday(next_index))
            consumed[next_index] = True
            next_index += 1

        groups.append(group)

    return groups


def build_opening_hours(data: Any) -> List[Dict[str, Any]]:
    """
    Построение массива OpeningHoursSpecification

    При open24Hours возвращается одна спецификация на все семь дней
    00:00-23:59, часы по дням при этом игнорируются.

    Args:
        data: Словарь полей формы или BusinessProfile

    Returns:
        List[Dict[str, Any]]: Спецификации (пустой список, если часов нет)
    """
    profile = BusinessProfile.from_field_map(data)

    if profile.open_24_hours:
        always_open = OpeningHoursGroup(
            days=list(Weekday), opens=ALWAYS_OPEN_FROM, closes=ALWAYS_OPEN_UNTIL
        )
        return [always_open.to_specification()]

    return [
        group.to_specification()
        for group in group_consecutive_days(profile.opening_hours)
    ]
