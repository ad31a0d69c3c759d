import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from status_api.core.settings import get_settings  # noqa: E402

DB_ENV = {
    "DB_HOST": "db.internal",
    "DB_PORT": "5432",
    "DB_USER": "status",
    "DB_PASSWORD": "s3cret",
    "DB_NAME": "appdb",
}


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def db_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "missing.json"))
    for key in ("PORT", "HOST"):
        monkeypatch.delenv(key, raising=False)
    for key, value in DB_ENV.items():
        monkeypatch.setenv(key, value)
    return DB_ENV
