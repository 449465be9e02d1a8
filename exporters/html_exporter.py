"""
HTML экспортер: тег script с разметкой или полная страница
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from config.settings import settings
from core.logger import get_logger
from jsonld import to_html_script

from .base_exporter import BaseExporter

FULL_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Local Business Schema</title>
    {script}
</head>
<body>
    <h1>Local Business Structured Data</h1>
    <p>This page contains JSON-LD structured data for a local business.</p>
    <p>Use Google's <a href="https://search.google.com/test/rich-results" target="_blank">Rich Results Test</a> to validate the structured data.</p>
</body>
</html>"""


def generate_full_html(document: Dict[str, Any]) -> str:
    """Полная HTML-страница со встроенной разметкой"""
    return FULL_PAGE_TEMPLATE.format(script=to_html_script(document))


class HTMLExporter(BaseExporter):
    """Экспортер разметки в HTML файл"""

    def __init__(self, output_dir: Union[str, Path] = "data"):
        super().__init__(output_dir)
        self.logger = get_logger(__name__)

    def export(
        self,
        document: Dict[str, Any],
        filename: str = None,
        full_page: bool = True,
        include_metadata: Optional[bool] = None,
        **kwargs,
    ) -> str:
        """
        Экспорт документа в HTML файл

        Args:
            document: Документ JSON-LD
            filename: Имя файла (генерируется автоматически если не указан)
            full_page: Полная страница вместо одного тега script
            include_metadata: Сохранить рядом файл метаданных
                (по умолчанию из настроек)

        Returns:
            str: Путь к сохраненному файлу
        """
        if include_metadata is None:
            include_metadata = settings.EXPORT_INCLUDE_METADATA

        if not filename:
            filename = self.generate_filename("schema-snippet", "html")

        content = generate_full_html(document) if full_page else to_html_script(document)
        file_path = self.write_text(filename, content)

        metadata = self.create_metadata(
            document, "html", file_path, full_page=full_page, **kwargs
        )

        if include_metadata:
            self.save_metadata_file(file_path, metadata)

        self.logger.info(f"HTML сохранен: {file_path}")
        return str(file_path)
