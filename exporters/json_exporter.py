"""
JSON экспортер для документов LocalBusiness
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from config.settings import settings
from core.logger import get_logger
from jsonld import format_document, minify_document

from .base_exporter import BaseExporter


class JSONExporter(BaseExporter):
    """Экспортер разметки в JSON файл (отформатированный или минифицированный)"""

    def __init__(self, output_dir: Union[str, Path] = "data"):
        super().__init__(output_dir)
        self.logger = get_logger(__name__)

    def export(
        self,
        document: Dict[str, Any],
        filename: str = None,
        minified: bool = False,
        include_metadata: Optional[bool] = None,
        **kwargs,
    ) -> str:
        """
        Экспорт документа в JSON файл

        Args:
            document: Документ JSON-LD
            filename: Имя файла (генерируется автоматически если не указан)
            minified: Компактный JSON без отступов
            include_metadata: Сохранить рядом файл метаданных
                (по умолчанию из настроек)
            **kwargs: Дополнительные параметры, попадают в метаданные

        Returns:
            str: Путь к сохраненному файлу
        """
        if include_metadata is None:
            include_metadata = settings.EXPORT_INCLUDE_METADATA

        variant = "minified" if minified else "formatted"
        if not filename:
            filename = self.generate_filename(f"schema-{variant}", "json")

        content = minify_document(document) if minified else format_document(document)
        file_path = self.write_text(filename, content)

        metadata = self.create_metadata(
            document, "json", file_path, minified=minified, **kwargs
        )

        if include_metadata:
            self.save_metadata_file(file_path, metadata)

        self.logger.info(f"JSON-LD ({variant}) сохранен: {file_path}")
        return str(file_path)

    def load_json(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Загрузка документа из JSON файла"""

        with open(file_path, "r", encoding="utf-8") as f:
            return json.load(f)
