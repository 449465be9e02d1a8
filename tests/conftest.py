import os
import sys
from pathlib import Path

import pytest

# Логи в файлы во время тестов не пишем
os.environ.setdefault("LOG_TO_FILE", "false")

# Корень репозитория должен быть в sys.path при запуске pytest из любой директории
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models import create_sample_field_map  # noqa: E402


@pytest.fixture
def sample_field_map():
    return create_sample_field_map()


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "export"


@pytest.fixture
def nine_to_five():
    return {"open": "09:00", "close": "17:00"}
