import sys
from pathlib import Path

import pytest

# Ensure `import catalogdesk` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    from catalogdesk.config import get_settings

    for name in (
        "CATALOG_API_BASE_URL",
        "CATALOG_HTTP_TIMEOUT",
        "CATALOG_HTTP_RETRIES",
        "CATALOG_CURRENCY",
        "DEBUG",
        "LOG_VERBOSITY",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
