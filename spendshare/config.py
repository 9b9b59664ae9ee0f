from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spendshare.core.errors import UnknownFilingStatusError
from spendshare.core.filing import FilingStatus, resolve_filing_status
from spendshare.core.tables import DEFAULT_DATA_YEAR, SUPPORTED_DATA_YEARS

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}
DEFAULT_HOME = Path.home() / ".spendshare"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


class Settings(BaseModel):
    data_year: int = Field(default_factory=lambda: _env_int("SPENDSHARE_DATA_YEAR", DEFAULT_DATA_YEAR))
    default_filing_status: FilingStatus = Field(
        default_factory=lambda: os.getenv("SPENDSHARE_DEFAULT_FILING_STATUS", "single")
    )
    session_dir: str = Field(default_factory=lambda: os.getenv("SPENDSHARE_SESSION_DIR", str(DEFAULT_HOME)))
    log_dir: str = Field(default_factory=lambda: os.getenv("SPENDSHARE_LOG_DIR", "logs"))
    file_logging: bool = Field(default_factory=lambda: _env_bool("SPENDSHARE_FILE_LOGGING", False))
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("data_year")
    @classmethod
    def _validate_year(cls, value: int) -> int:
        if value not in SUPPORTED_DATA_YEARS:
            supported = ", ".join(str(y) for y in SUPPORTED_DATA_YEARS)
            raise ValueError(f"SPENDSHARE_DATA_YEAR must be one of {supported}, got {value}")
        return value

    @field_validator("default_filing_status", mode="before")
    @classmethod
    def _normalize_filing_status(cls, value: str | None) -> str:
        try:
            return resolve_filing_status(value)
        except UnknownFilingStatusError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def session_path(self) -> Path:
        return Path(self.session_dir).expanduser() / "session.toml"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
