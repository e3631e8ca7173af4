"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, gunghap.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    min_name_length: int = Field(default=2, ge=1)
    max_name_length: int = Field(default=4, ge=1)
    max_name_diff: int = Field(default=2, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> ValidationConfig:
        if self.min_name_length > self.max_name_length:
            msg = "min_name_length must not exceed max_name_length"
            raise ValueError(msg)
        return self


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    show_strokes: bool = True
    show_process: bool = True
