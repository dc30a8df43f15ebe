"""Booking link configuration model."""

from pydantic import BaseModel, Field


class BookingConfig(BaseModel, frozen=True):
    suitable_url: str = Field(min_length=1)
    alternative_url: str = Field(min_length=1)
