"""
Базовые классы для экспортеров разметки
"""

import hashlib
import json
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field

EXPORTERS_VERSION = "1.0"


class ExportMetadata(BaseModel):
    """Метаданные экспорта"""

    export_timestamp: datetime
    exporter_version: str = EXPORTERS_VERSION
    business_name: Optional[str] = None
    schema_type: Optional[str] = None
    export_format: str
    file_size_bytes: Optional[int] = None
    checksum: Optional[str] = None
    export_options: Dict[str, Any] = Field(default_factory=dict)


class BaseExporter(ABC):
    """Базовый класс для всех экспортеров"""

    def __init__(self, output_dir: Union[str, Path] = "data"):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(exist_ok=True, parents=True)
        self.metadata: Optional[ExportMetadata] = None

    @abstractmethod
    def export(self, document: Dict[str, Any], filename: str = None, **kwargs) -> str:
        """Экспорт документа (должен быть реализован в дочерних классах)"""
        pass

    @staticmethod
    def get_timestamp() -> str:
        """Метка времени для имени файла: 2024-01-31T09-15-00"""
        return datetime.now().strftime("%Y-%m-%dT%H-%M-%S")

    def generate_filename(self, prefix: str, format_ext: str) -> str:
        """Генерация имени файла"""
        return f"{prefix}-{self.get_timestamp()}.{format_ext}"

    def write_text(self, filename: str, content: str) -> Path:
        """Запись текста в файл внутри output_dir"""
        file_path = self.output_dir / filename
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)
        return file_path

    def create_metadata(
        self,
        document: Dict[str, Any],
        export_format: str,
        file_path: Union[str, Path] = None,
        **kwargs,
    ) -> ExportMetadata:
        """Создание метаданных экспорта"""

        # Размер файла
        file_size = None
        if file_path and Path(file_path).exists():
            file_size = Path(file_path).stat().st_size

        name = document.get("name")
        schema_type = document.get("@type")

        metadata = ExportMetadata(
            export_timestamp=datetime.now(),
            business_name=name if isinstance(name, str) else None,
            schema_type=schema_type if isinstance(schema_type, str) else None,
            export_format=export_format,
            file_size_bytes=file_size,
            checksum=(
                self.calculate_checksum(file_path) if file_size is not None else None
            ),
            export_options=kwargs,
        )

        self.metadata = metadata
        return metadata

    def save_metadata_file(self, data_file_path: Path, metadata: ExportMetadata) -> Path:
        """Сохранение метаданных рядом с файлом: <имя файла>.meta.json"""

        metadata_path = data_file_path.with_name(f"{data_file_path.name}.meta.json")

        with open(metadata_path, "w", encoding="utf-8") as f:
            json.dump(
                metadata.model_dump(mode="json"),
                f,
                ensure_ascii=False,
                indent=2,
            )

        return metadata_path

    @staticmethod
    def calculate_checksum(file_path: Union[str, Path]) -> str:
        """Вычисление MD5 чексуммы файла"""

        hash_md5 = hashlib.md5()
        with open(file_path, "rb") as f:
            for chunk in iter(lambda: f.read(4096), b""):
                hash_md5.update(chunk)
        return hash_md5.hexdigest()
