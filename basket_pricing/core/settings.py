# basket_pricing/core/settings.py
from __future__ import annotations

import decimal
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ROUNDING_MODES = frozenset(
    {
        decimal.ROUND_HALF_UP,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_UP,
        decimal.ROUND_DOWN,
        decimal.ROUND_CEILING,
        decimal.ROUND_FLOOR,
        decimal.ROUND_05UP,
    }
)


class BasketSettings(BaseSettings):
    # --- Pricing ---
    ROUNDING: str = decimal.ROUND_HALF_UP

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # --- Demo output ---
    CURRENCY_SYMBOL: str = "$"

    model_config = SettingsConfigDict(
        env_prefix="BASKET_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("ROUNDING")
    @classmethod
    def _known_rounding_mode(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ROUNDING_MODES:
            raise ValueError(f"unknown rounding mode {v!r}; expected one of {sorted(ROUNDING_MODES)}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> BasketSettings:
    return BasketSettings()
