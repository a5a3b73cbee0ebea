"""Pydantic models describing filehash runtime settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileHashConfig(BaseModel):
    """Settings that shape a single hashing run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    chunk_size: int = Field(default=64 * 1024, ge=1)
    strict: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


__all__ = ["FileHashConfig"]
