import pathlib
import sys

import pytest

p = str(pathlib.Path(__file__).resolve().parents[1])
sys.path.insert(0, p) if p not in sys.path else None

from spendshare.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep saved sessions and logs out of the real home directory."""
    monkeypatch.setenv("SPENDSHARE_SESSION_DIR", str(tmp_path / "session"))
    monkeypatch.setenv("SPENDSHARE_LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
