"""
Application configuration.

Load order (each layer overrides the previous):
  1. Field defaults on ``Settings``
  2. ``.env``                 - local overrides (gitignored)
  3. Environment variables    - ``STOCK_ADVISOR_*`` prefix

Entry point: ``load_settings(env=None) -> Settings``. Entrypoints receive a
``Settings`` instance; nothing else reads environment variables directly.
"""

import os
from typing import Literal, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "STOCK_ADVISOR_"


class Settings(BaseModel):
    """Data-source selection, fetch limits and scoring defaults."""

    model_config = ConfigDict(frozen=True)

    provider: Literal["yfinance", "proxy"] = "yfinance"
    proxy_url: str = "http://localhost:8000/fetch-stock"
    yahoo_base_url: str = "https://query1.finance.yahoo.com"
    fetch_timeout_seconds: float = 10.0
    history_period: str = "1y"
    history_interval: str = "1d"
    risk_pct: float = 50.0
    log_level: str = "INFO"

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("fetch_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"fetch_timeout_seconds must be positive, got {v}.")
        return v

    @field_validator("risk_pct")
    @classmethod
    def validate_risk(cls, v: float) -> float:
        if not 0.0 <= v <= 100.0:
            raise ValueError(f"risk_pct must be in [0, 100], got {v}.")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


def load_settings(env: Optional[Mapping[str, str]] = None, **overrides) -> Settings:
    """Build Settings from the environment.

    Args:
        env:       Mapping to read instead of ``os.environ``. When given,
                   ``.env`` is not loaded.
        overrides: Field values that win over the environment (None is ignored).

    Raises:
        pydantic.ValidationError: if a value fails validation.
    """
    if env is None:
        load_dotenv(override=False)
        env = os.environ

    values = {
        key[len(ENV_PREFIX):].lower(): value
        for key, value in env.items()
        if key.startswith(ENV_PREFIX)
    }
    values = {k: v for k, v in values.items() if k in Settings.model_fields}
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
