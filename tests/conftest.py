import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Ensure `import pimshift` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from pimshift.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path) -> Iterator[None]:
    for name in ("PIMSHIFT_DEBUG", "PIMSHIFT_LOG_VERBOSITY", "PIMSHIFT_DEFAULT_LOCALE"):
        # setenv first so teardown also drops values a test loads from a .env file.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep a developer's .env out of the tests.
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
