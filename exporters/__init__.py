"""
Модуль экспорта разметки LocalBusiness

Поддерживает экспорт в форматы: JSON (отформатированный и минифицированный), HTML
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from config.settings import settings
from core.logger import get_logger
from jsonld import format_document, minify_document, to_html_script

from .base_exporter import EXPORTERS_VERSION, BaseExporter, ExportMetadata
from .html_exporter import HTMLExporter, generate_full_html
from .json_exporter import JSONExporter

__all__ = [
    "BaseExporter",
    "JSONExporter",
    "HTMLExporter",
    "UnifiedExporter",
    "ExportMetadata",
    "EXPORTERS_VERSION",
    "SUPPORTED_FORMATS",
    "format_bytes",
    "generate_full_html",
    "get_export_stats",
    "has_content",
]

SUPPORTED_FORMATS = ("json", "json-min", "html")


def has_content(document: Any) -> bool:
    """В документе есть данные помимо @context и @type"""
    return isinstance(document, dict) and len(document) > 2


def format_bytes(size: int) -> str:
    """Размер в байтах в человекочитаемом виде"""
    if size == 0:
        return "0 B"

    units = ["B", "KB", "MB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1

    return f"{round(value, 2):g} {units[index]}"


def get_export_stats(document: Dict[str, Any]) -> Dict[str, Any]:
    """
    Статистика экспорта документа

    Args:
        document: Документ JSON-LD

    Returns:
        Dict[str, Any]: Количество полей, размеры форматов и процент сжатия
    """
    formatted = format_document(document)
    minified = minify_document(document)
    html = to_html_script(document)

    return {
        "fields": len(document),
        "formatted_size": format_bytes(len(formatted.encode("utf-8"))),
        "minified_size": format_bytes(len(minified.encode("utf-8"))),
        "html_size": format_bytes(len(html.encode("utf-8"))),
        "compression": round((1 - len(minified) / len(formatted)) * 100),
    }


class UnifiedExporter:
    """Унифицированный экспортер для всех форматов"""

    def __init__(self, output_dir: Optional[Union[str, Path]] = None):
        self.output_dir = Path(output_dir or settings.OUTPUT_PATH)
        self.logger = get_logger(__name__)

        self.json_exporter = JSONExporter(self.output_dir)
        self.html_exporter = HTMLExporter(self.output_dir)

    def export_by_format(
        self, document: Dict[str, Any], format_type: str, **kwargs
    ) -> str:
        """
        Экспорт в указанном формате

        Args:
            document: Документ JSON-LD
            format_type: 'json', 'json-min' или 'html'
            **kwargs: Параметры конкретного экспортера

        Returns:
            str: Путь к созданному файлу
        """
        if not isinstance(format_type, str):
            raise ValueError(f"Формат экспорта должен быть строкой: {format_type!r}")

        format_type = format_type.lower()

        if format_type == "json":
            return self.json_exporter.export(document, **kwargs)
        elif format_type == "json-min":
            return self.json_exporter.export(document, minified=True, **kwargs)
        elif format_type == "html":
            return self.html_exporter.export(document, **kwargs)
        else:
            raise ValueError(f"Неподдерживаемый формат: {format_type}")
