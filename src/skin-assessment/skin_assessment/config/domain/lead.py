"""Lead tagging configuration model."""

from pydantic import BaseModel, Field


class LeadConfig(BaseModel, frozen=True):
    """Labels attached to every dispatched lead so the lead system can route it."""

    source: str = Field(default="Fitzpatrick Skin Type Quiz", min_length=1)
    tag_suitable: str = Field(default="CO2 Laser - Qualified", min_length=1)
    tag_not_suitable: str = Field(default="CO2 Laser - Not Suitable", min_length=1)
