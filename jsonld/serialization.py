"""
Сериализация документа JSON-LD
"""

import json
from typing import Any, Dict

SCRIPT_TEMPLATE = '<script type="application/ld+json">\n{body}\n</script>'

# Символы, которые могут закрыть тег script; в JSON они встречаются только в строках
SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
}


def format_document(document: Dict[str, Any]) -> str:
    """JSON с отступом в два пробела для отображения"""
    return json.dumps(document, indent=2, ensure_ascii=False)


def minify_document(document: Dict[str, Any]) -> str:
    """Компактный JSON для продакшена"""
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False)


def to_html_script(document: Dict[str, Any]) -> str:
    """
    HTML-тег script с разметкой

    Внутрь тега попадает отформатированный (не минифицированный) JSON.
    Символы < > & заменяются escape-последовательностями JSON, значение
    документа при этом не меняется.
    """
    body = format_document(document).translate(SCRIPT_ESCAPES)
    return SCRIPT_TEMPLATE.format(body=body)
