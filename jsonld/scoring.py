"""
Оценка полноты документа LocalBusiness
"""

import math
from collections.abc import Mapping
from typing import Any

REQUIRED_FIELDS = ["name", "address", "telephone"]
RECOMMENDED_FIELDS = [
    "url",
    "email",
    "description",
    "geo",
    "openingHoursSpecification",
    "priceRange",
]
SCORED_ADDRESS_FIELDS = ["streetAddress", "addressLocality", "addressRegion", "postalCode"]

REQUIRED_FIELD_POINTS = 20
RECOMMENDED_FIELD_POINTS = 10


def get_completeness_score(document: Any) -> int:
    """
    Взвешенная оценка полноты документа (0-100)

    Обязательные поля дают по 20 баллов (адрес пропорционально заполненным
    полям), рекомендуемые по 10. Итог округляется до целого процента.

    Args:
        document: Документ JSON-LD

    Returns:
        int: Процент полноты
    """
    if not isinstance(document, Mapping):
        document = {}

    max_score = (
        len(REQUIRED_FIELDS) * REQUIRED_FIELD_POINTS
        + len(RECOMMENDED_FIELDS) * RECOMMENDED_FIELD_POINTS
    )
    score = 0.0

    for field in REQUIRED_FIELDS:
        value = document.get(field)
        if not value:
            continue

        if field == "address":
            address = value if isinstance(value, Mapping) else {}
            completed = sum(1 for f in SCORED_ADDRESS_FIELDS if address.get(f))
            score += completed / len(SCORED_ADDRESS_FIELDS) * REQUIRED_FIELD_POINTS
        else:
            score += REQUIRED_FIELD_POINTS

    for field in RECOMMENDED_FIELDS:
        if document.get(field):
            score += RECOMMENDED_FIELD_POINTS

    # Округление половины вверх
    return int(math.floor(score / max_score * 100 + 0.5))
