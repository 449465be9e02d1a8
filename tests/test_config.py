import importlib

import pytest

# Атрибут config.settings перекрыт экземпляром настроек, берем сам модуль
settings_module = importlib.import_module("config.settings")


@pytest.fixture
def reload_settings(monkeypatch):
    # load_dotenv не должен перетирать переменные из monkeypatch
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    yield lambda: importlib.reload(settings_module).settings
    monkeypatch.undo()
    importlib.reload(settings_module)


def test_settings_read_env(monkeypatch, reload_settings):
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("OUTPUT_PATH", "/tmp/schemas")
    monkeypatch.setenv("EXPORT_INCLUDE_METADATA", "0")
    monkeypatch.setenv("GEOCODER_RATE_LIMIT", "5")

    settings = reload_settings()

    assert settings.DEBUG is True
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.OUTPUT_PATH == "/tmp/schemas"
    assert settings.EXPORT_INCLUDE_METADATA is False
    assert settings.GEOCODER_RATE_LIMIT == 5


def test_settings_defaults(monkeypatch, reload_settings):
    for name in ("DEBUG", "LOG_LEVEL", "OUTPUT_PATH", "EXPORT_INCLUDE_METADATA", "GEOCODER_RATE_LIMIT"):
        monkeypatch.delenv(name, raising=False)

    settings = reload_settings()

    assert settings.DEBUG is False
    assert settings.LOG_LEVEL == "INFO"
    assert settings.OUTPUT_PATH == str(settings_module.DATA_DIR)
    assert settings.EXPORT_INCLUDE_METADATA is True
    assert settings.GEOCODER_RATE_LIMIT == 1
