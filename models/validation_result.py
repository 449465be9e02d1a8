"""
Результат валидации документа JSON-LD
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ValidationResult(BaseModel):
    """Результат валидации: ошибки блокируют, предупреждения нет"""

    model_config = ConfigDict(populate_by_name=True)

    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    @computed_field(alias="isValid")
    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, error: str):
        """Добавить ошибку"""
        self.errors.append(error)

    def add_warning(self, warning: str):
        """Добавить предупреждение"""
        self.warnings.append(warning)

    def to_dict(self) -> dict:
        """Словарь вида {"isValid": ..., "errors": [...], "warnings": [...]}"""
        return self.model_dump(by_alias=True)
