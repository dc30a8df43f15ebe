"""Presentational pacing configuration model."""

from pydantic import BaseModel, Field


class PacingConfig(BaseModel, frozen=True):
    answer_delay_seconds: float = Field(default=0.4, ge=0.0)
