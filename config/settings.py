# config/settings.py
# ============================================================
# Centralized Configuration for DocDeck
# ============================================================
# All settings are loaded from environment variables (or .env file).
# Pydantic validates types and provides sensible defaults.
#
# Usage:
#   from config.settings import settings
#   allocator = make_allocator(settings.id_strategy)
# ============================================================

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings. Values are loaded from environment variables
    or a .env file. Every setting has a typed default so the library works
    out-of-the-box with zero configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Item Identity ---
    id_strategy: Literal["uuid", "counter"] = Field(
        default="uuid",
        description="How new item ids are issued: uuid (random 128-bit) | counter.",
    )
    id_prefix: str = Field(
        default="item",
        description="Prefix for counter-issued ids, e.g. 'item-1'.",
    )

    # --- Image → PDF Layout ---
    margin_small_mm: float = Field(
        default=10.0,
        ge=0,
        description="Page margin (mm) used for the 'small' margin option.",
    )
    margin_big_mm: float = Field(
        default=20.0,
        ge=0,
        description="Page margin (mm) used for the 'big' margin option.",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG | INFO | WARNING | ERROR.",
    )


# ============================================================
# Singleton instance — import this everywhere:
#   from config.settings import settings
# ============================================================
settings = Settings()
