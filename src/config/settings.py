"""Application-wide configuration loading and validation."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = Field(default="INFO")

    default_law: Literal["alaw", "ulaw"] = Field(
        default="ulaw",
        description="Companding law used by the CLI when --law is not given.",
    )
    chunk_bytes: int = Field(
        default=65536,
        ge=2,
        description="Source bytes handed to one buffer transform by the CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("chunk_bytes")
    @classmethod
    def ensure_even_chunk(cls, value: int) -> int:
        # PCM16 chunks must not split a sample.
        if value % 2:
            raise ValueError("chunk_bytes must be even")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
