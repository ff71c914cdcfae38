"""Rune data models."""

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

MAX_PRIMARY_RUNES = 3
MAX_SECONDARY_RUNES = 2


class OffenseShard(StrEnum):
    ADAPTIVE_FORCE = "adaptive_force"
    ATTACK_SPEED = "attack_speed"
    ABILITY_HASTE = "ability_haste"


class FlexShard(StrEnum):
    ADAPTIVE_FORCE = "adaptive_force"
    MOVEMENT_SPEED = "movement_speed"
    HEALTH_SCALING = "health_scaling"


class DefenseShard(StrEnum):
    HEALTH = "health"
    ARMOR = "armor"
    MAGIC_RESIST = "magic_resist"


class Rune(BaseModel):
    """Rune record. Its stats are informational; the engine does not fold them."""
    id: int
    key: str
    name: str
    short_desc: str = ""
    long_desc: str = ""
    icon: str = ""
    stats: dict[str, float] = Field(default_factory=dict)


class RuneSelection(BaseModel):
    """Rune page of a build.

    Keystone and minor runes are carried as opaque ids; only the three stat
    shards change numbers.
    """
    keystone: Optional[int] = None
    primary_runes: tuple[int, ...] = Field(default=(), max_length=MAX_PRIMARY_RUNES)
    secondary_runes: tuple[int, ...] = Field(default=(), max_length=MAX_SECONDARY_RUNES)
    offense: Optional[OffenseShard] = None
    flex: Optional[FlexShard] = None
    defense: Optional[DefenseShard] = None

    model_config = {"frozen": True, "use_enum_values": True}
