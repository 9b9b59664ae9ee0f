import pytest
from pydantic import ValidationError

from spendshare.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.data_year == 2024
    assert settings.default_filing_status == "single"
    assert settings.file_logging is False
    assert settings.session_path.name == "session.toml"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SPENDSHARE_DEFAULT_FILING_STATUS", "MFJ")
    monkeypatch.setenv("SPENDSHARE_FILE_LOGGING", "yes")
    monkeypatch.setenv("SPENDSHARE_SESSION_DIR", str(tmp_path))
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.default_filing_status == "married"
    assert settings.file_logging is True
    assert settings.session_path == tmp_path / "session.toml"


def test_unsupported_data_year_rejected(monkeypatch):
    monkeypatch.setenv("SPENDSHARE_DATA_YEAR", "1999")
    with pytest.raises(ValidationError):
        Settings()


def test_unknown_filing_status_rejected(monkeypatch):
    monkeypatch.setenv("SPENDSHARE_DEFAULT_FILING_STATUS", "widowed")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.data_year = 2023
