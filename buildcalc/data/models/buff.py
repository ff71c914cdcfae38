"""Objective buff state."""

from pydantic import BaseModel, Field


class BuffState(BaseModel):
    """Externally toggled map objective buffs."""
    baron: bool = Field(default=False, description="Hand of Baron active")
    dragon_stacks: int = Field(default=0, ge=0, description="Dragon kills; the caller caps the count")

    model_config = {"frozen": True}
