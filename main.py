#!/usr/bin/env python3
"""
Главный скрипт генератора разметки Schema.org LocalBusiness (JSON-LD)
"""

import argparse
import sys
from pathlib import Path

# Добавляем корневую директорию в Python path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from core.logger import generation_metrics, get_logger, setup_logger
from exporters import SUPPORTED_FORMATS, get_export_stats
from jsonld import (
    format_document,
    get_supported_business_types,
    minify_document,
    to_html_script,
)
from models import create_sample_field_map
from schema_service import LocalBusinessSchemaService

OUTPUT_RENDERERS = {
    "formatted": format_document,
    "minified": minify_document,
    "html": to_html_script,
}


def print_generation_summary(result):
    """Вывод результатов генерации"""
    print("\n" + "=" * 60)
    print("📊 РЕЗУЛЬТАТЫ ГЕНЕРАЦИИ")
    print("=" * 60)

    if not result["success"]:
        print(f"❌ Ошибка генерации: {result['error']}")
        print("=" * 60)
        return

    document = result["document"]
    validation = result["validation"]

    print(f"🏢 Предприятие: {document.get('name', 'Не указано')}")
    print(f"🏷️  Тип: {document.get('@type')}")
    print(f"⏱️  Время обработки: {result['processing_time']:.4f}s")
    print(f"📈 Полнота: {result['completeness']}%")
    print(f"✅ Валидно: {'да' if validation['is_valid'] else 'нет'}")

    if validation["errors"]:
        print("\n❌ Ошибки:")
        for error in validation["errors"]:
            print(f"   • {error}")

    if validation["warnings"]:
        print("\n⚠️  Рекомендации:")
        for warning in validation["warnings"]:
            print(f"   • {warning}")

    stats = get_export_stats(document)
    print("\n📦 Размер:")
    print(f"   • Полей: {stats['fields']}")
    print(f"   • JSON: {stats['formatted_size']}")
    print(f"   • Минифицированный: {stats['minified_size']} (-{stats['compression']}%)")
    print(f"   • HTML: {stats['html_size']}")

    if result.get("export_paths"):
        print("\n📁 Файлы результатов:")
        for format_type, path in result["export_paths"].items():
            if not format_type.endswith("_error"):
                print(f"   • {format_type.upper()}: {path}")
            else:
                print(f"   ❌ {format_type}: {path}")

    print("=" * 60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="🏪 Генератор разметки Schema.org LocalBusiness",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
🚀 Примеры использования:

  # Документ из JSON файла со словарем полей
  python main.py --input business.json

  # Пример документа в виде тега script
  python main.py --example --format html

  # Экспорт во все форматы
  python main.py --input business.json --export json json-min html --output out

  # Список поддерживаемых типов
  python main.py --types

📋 Поддерживаемые форматы экспорта: json, json-min, html
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", type=str, help="JSON файл со словарем полей")
    source.add_argument(
        "--example", action="store_true", help="Сгенерировать пример документа"
    )

    parser.add_argument(
        "--format",
        choices=sorted(OUTPUT_RENDERERS),
        default="formatted",
        help="Формат вывода документа в stdout",
    )
    parser.add_argument(
        "--export",
        nargs="+",
        choices=SUPPORTED_FORMATS,
        help="Форматы экспорта в файлы (можно указать несколько)",
    )
    parser.add_argument(
        "--output", type=str, help="Директория для сохранения результатов"
    )

    parser.add_argument(
        "--types", action="store_true", help="Показать поддерживаемые типы предприятий"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Завершиться с кодом 1, если документ не прошел валидацию",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Включить отладочный режим"
    )
    return parser


def main(argv=None):
    """Главная функция"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Настройка отладки
    if args.debug:
        settings.DEBUG = True
        settings.LOG_LEVEL = "DEBUG"
        setup_logger()

    logger = get_logger(__name__)

    if args.types:
        print("🏷️  Поддерживаемые типы предприятий:")
        for business_type in get_supported_business_types():
            print(f"   • {business_type}")
        return

    if not args.input and not args.example:
        print("❌ Необходимо указать --input или --example")
        parser.print_help()
        sys.exit(1)

    service = LocalBusinessSchemaService(args.output)

    try:
        if args.example:
            result = service.process(create_sample_field_map(), args.export)
        else:
            if not Path(args.input).exists():
                print(f"❌ Файл не найден: {args.input}")
                sys.exit(1)
            result = service.process_file(args.input, args.export)
    except KeyboardInterrupt:
        print("\n⚠️  Прерывание пользователем")
        sys.exit(1)

    if not result["success"]:
        print_generation_summary(result)
        sys.exit(1)

    print(OUTPUT_RENDERERS[args.format](result["document"]))
    print_generation_summary(result)

    if settings.DEBUG:
        generation_metrics.log_summary()

    if args.strict and not result["validation"]["is_valid"]:
        logger.error("Документ не прошел валидацию в строгом режиме")
        sys.exit(1)


if __name__ == "__main__":
    main()
