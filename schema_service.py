#!/usr/bin/env python3
"""
Главный класс генератора разметки LocalBusiness
Объединяет генерацию, валидацию, оценку полноты и экспорт в единый интерфейс
"""

import json
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from core.logger import generation_metrics, get_logger, log_generation_stats
from exporters import UnifiedExporter
from jsonld import generate, get_completeness_score, validate
from models import SchemaInputError


class LocalBusinessSchemaService:
    """
    Высокоуровневый API генератора разметки

    Принимает словарь полей (форма, CLI, файл), строит документ JSON-LD,
    валидирует его, оценивает полноту и при необходимости экспортирует.
    """

    def __init__(self, output_dir: Optional[Union[str, Path]] = None):
        """
        Инициализация сервиса

        Args:
            output_dir: Директория для экспорта (по умолчанию из настроек)
        """
        self.logger = get_logger(__name__)
        self.output_dir = output_dir
        self._exporter: Optional[UnifiedExporter] = None

        # Статистика сессии
        self.session_stats = {
            "total_documents": 0,
            "valid_documents": 0,
            "invalid_documents": 0,
            "failed_documents": 0,
            "total_processing_time": 0.0,
            "session_start": datetime.now(),
        }

        self.logger.debug("LocalBusinessSchemaService инициализирован")

    @property
    def exporter(self) -> UnifiedExporter:
        """Экспортер создается при первом экспорте"""
        if self._exporter is None:
            self._exporter = UnifiedExporter(self.output_dir)
        return self._exporter

    def process(
        self,
        field_map: Any,
        export_formats: Optional[List[str]] = None,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Dict[str, Any]:
        """
        Генерация, валидация и экспорт документа

        Args:
            field_map: Словарь полей формы
            export_formats: Форматы экспорта ['json', 'json-min', 'html']
            output_dir: Директория для сохранения файлов

        Returns:
            Dict: Результат с документом, валидацией, оценкой и путями к файлам
        """
        start_time = time.time()
        self.session_stats["total_documents"] += 1

        if output_dir:
            self._exporter = UnifiedExporter(output_dir)

        try:
            document = generate(field_map)
        except SchemaInputError as e:
            self.session_stats["failed_documents"] += 1
            self.logger.error(f"Некорректные входные данные: {e}")
            return self._error_result(str(e), start_time)

        validation = validate(document)
        completeness = get_completeness_score(document)

        if validation.is_valid:
            self.session_stats["valid_documents"] += 1
        else:
            self.session_stats["invalid_documents"] += 1
            self.logger.warning(
                f"Документ не прошел валидацию: {len(validation.errors)} ошибок"
            )

        # Экспорт в указанные форматы
        export_results: Dict[str, str] = {}
        for format_type in export_formats or []:
            try:
                file_path = self.exporter.export_by_format(document, format_type)
                export_results[format_type] = file_path
            except (ValueError, OSError) as e:
                export_results[f"{format_type}_error"] = str(e)
                self.logger.error(f"Ошибка экспорта в {format_type}: {e}")

        processing_time = time.time() - start_time
        self.session_stats["total_processing_time"] += processing_time

        log_generation_stats(
            business_name=document.get("name"),
            is_valid=validation.is_valid,
            processing_time=round(processing_time, 4),
            errors_count=len(validation.errors),
            warnings_count=len(validation.warnings),
            completeness=completeness,
        )
        generation_metrics.record_document(
            validation.is_valid, processing_time, completeness, validation.errors
        )

        return {
            "success": True,
            "document": document,
            "validation": {
                "is_valid": validation.is_valid,
                "errors": validation.errors,
                "warnings": validation.warnings,
            },
            "completeness": completeness,
            "export_paths": export_results,
            "processing_time": round(processing_time, 4),
            "timestamp": datetime.now().isoformat(),
        }

    def process_file(
        self,
        file_path: Union[str, Path],
        export_formats: Optional[List[str]] = None,
        output_dir: Optional[Union[str, Path]] = None,
    ) -> Dict[str, Any]:
        """
        Генерация документа из JSON файла со словарем полей

        Args:
            file_path: Путь к JSON файлу
            export_formats: Форматы экспорта
            output_dir: Директория для сохранения файлов

        Returns:
            Dict: Результат обработки (см. process)
        """
        start_time = time.time()

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                field_map = json.load(f)
        except (OSError, ValueError) as e:
            self.session_stats["total_documents"] += 1
            self.session_stats["failed_documents"] += 1
            self.logger.error(f"Не удалось прочитать {file_path}: {e}")
            return self._error_result(str(e), start_time)

        self.logger.info(f"Загружен словарь полей из файла {file_path}")
        return self.process(field_map, export_formats, output_dir)

    def get_session_statistics(self) -> Dict[str, Any]:
        """Статистика текущей сессии"""
        total = self.session_stats["total_documents"]
        session_duration = datetime.now() - self.session_stats["session_start"]

        return {
            **self.session_stats,
            "valid_rate": round(
                self.session_stats["valid_documents"] / total * 100, 2
            )
            if total
            else 0.0,
            "session_duration": round(session_duration.total_seconds(), 2),
        }

    def _error_result(self, error: str, start_time: float) -> Dict[str, Any]:
        return {
            "success": False,
            "error": error,
            "processing_time": round(time.time() - start_time, 4),
            "timestamp": datetime.now().isoformat(),
        }


# Convenience функции для быстрого использования
def generate_schema(field_map: Any, **kwargs) -> Dict[str, Any]:
    """Быстрая генерация и проверка документа"""
    service = LocalBusinessSchemaService()
    return service.process(field_map, **kwargs)


def generate_schema_from_file(file_path: Union[str, Path], **kwargs) -> Dict[str, Any]:
    """Быстрая генерация документа из файла"""
    service = LocalBusinessSchemaService()
    return service.process_file(file_path, **kwargs)
