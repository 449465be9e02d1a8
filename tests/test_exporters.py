import json
from pathlib import Path

import pytest

from config.settings import settings
from exporters import (
    HTMLExporter,
    JSONExporter,
    UnifiedExporter,
    format_bytes,
    get_export_stats,
    has_content,
)
from jsonld import generate, get_empty_schema


@pytest.fixture
def document(sample_field_map):
    return generate(sample_field_map)


def test_json_export_formatted(document, output_dir):
    path = Path(JSONExporter(output_dir).export(document, include_metadata=False))

    assert path.parent == output_dir
    assert path.name.startswith("schema-formatted-")
    assert json.loads(path.read_text(encoding="utf-8")) == document
    assert not path.with_suffix(".json.meta.json").exists()


def test_json_export_minified_with_metadata(document, output_dir):
    exporter = JSONExporter(output_dir)
    path = Path(exporter.export(document, minified=True, include_metadata=True))

    assert path.name.startswith("schema-minified-")
    assert "\n" not in path.read_text(encoding="utf-8")

    metadata = json.loads(path.with_suffix(".json.meta.json").read_text(encoding="utf-8"))
    assert metadata["business_name"] == "Acme Coffee Shop"
    assert metadata["schema_type"] == "Restaurant"
    assert metadata["export_options"] == {"minified": True}
    assert metadata["checksum"] == exporter.calculate_checksum(path)


def test_load_json_round_trip(document, output_dir):
    exporter = JSONExporter(output_dir)

    for minified in (False, True):
        path = exporter.export(document, minified=minified, include_metadata=False)
        assert exporter.load_json(path) == document


def test_metadata_default_comes_from_settings(document, output_dir, monkeypatch):
    monkeypatch.setattr(settings, "EXPORT_INCLUDE_METADATA", False)

    path = Path(JSONExporter(output_dir).export(document, filename="acme.json"))

    assert path.name == "acme.json"
    assert list(output_dir.iterdir()) == [path]


def test_html_export_full_page_and_snippet(document, output_dir):
    exporter = HTMLExporter(output_dir)

    page = Path(exporter.export(document, filename="page.html"))
    snippet = Path(exporter.export(document, filename="snippet.html", full_page=False))

    assert page.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")
    assert '<script type="application/ld+json">' in page.read_text(encoding="utf-8")
    assert snippet.read_text(encoding="utf-8").startswith("<script")
    assert exporter.metadata.export_options == {"full_page": False}


def test_html_export_writes_metadata_sidecar(document, output_dir):
    exporter = HTMLExporter(output_dir)
    path = Path(exporter.export(document, include_metadata=True))

    sidecar = path.with_name(f"{path.name}.meta.json")
    metadata = json.loads(sidecar.read_text(encoding="utf-8"))

    assert path.name.startswith("schema-snippet-")
    assert metadata["export_format"] == "html"
    assert metadata["export_options"] == {"full_page": True}
    assert metadata["checksum"] == exporter.calculate_checksum(path)


def test_html_export_metadata_follows_settings(document, output_dir, monkeypatch):
    monkeypatch.setattr(settings, "EXPORT_INCLUDE_METADATA", False)

    path = Path(HTMLExporter(output_dir).export(document, filename="page.html"))

    assert list(output_dir.iterdir()) == [path]


def test_unified_exporter_formats(document, output_dir, monkeypatch):
    monkeypatch.setattr(settings, "EXPORT_INCLUDE_METADATA", False)
    exporter = UnifiedExporter(output_dir)

    paths = [exporter.export_by_format(document, fmt) for fmt in ("json", "JSON-MIN", "html")]

    assert [Path(path).suffix for path in paths] == [".json", ".json", ".html"]
    assert "minified" in Path(paths[1]).name


def test_unified_exporter_rejects_unknown_format(document, output_dir):
    with pytest.raises(ValueError):
        UnifiedExporter(output_dir).export_by_format(document, "csv")


@pytest.mark.parametrize("format_type", [None, 1, ["json"]])
def test_unified_exporter_rejects_non_string_format(document, output_dir, format_type):
    with pytest.raises(ValueError):
        UnifiedExporter(output_dir).export_by_format(document, format_type)


def test_unified_exporter_defaults_to_settings_path(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "OUTPUT_PATH", str(tmp_path / "default"))

    assert UnifiedExporter().output_dir == tmp_path / "default"


def test_has_content():
    assert has_content(get_empty_schema())
    assert not has_content({"@context": "https://schema.org", "@type": "LocalBusiness"})
    assert not has_content(None)


@pytest.mark.parametrize(
    "size, expected",
    [(0, "0 B"), (512, "512 B"), (1024, "1 KB"), (1536, "1.5 KB"), (5 * 1024 * 1024, "5 MB")],
)
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected


def test_export_stats(document):
    stats = get_export_stats(document)

    assert stats["fields"] == len(document)
    assert 0 < stats["compression"] < 100
    assert stats["formatted_size"].endswith("B")
