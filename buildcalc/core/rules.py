"""Versionable rule tables for the stat pipelines.

Every pipeline receives its tables through the constructor so a new game
patch can be described by a JSON file instead of a code change.
"""

import json
from enum import StrEnum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field

from . import constants as c


class ShardSlot(StrEnum):
    """Stat shard rows."""
    OFFENSE = "offense"
    FLEX = "flex"
    DEFENSE = "defense"


class ShardEffect(BaseModel):
    """Effect of a single stat shard choice.

    kind:
        adaptive      +ad or +ap, whichever stat is currently higher (AD wins only if strictly higher)
        flat          +value to stat
        multiply      stat *= factor
        level_scaled  +value + max_bonus * (level - 1) / (max_level - 1)
        per_level     +per_level * (level - 1)
    """
    kind: Literal["adaptive", "flat", "multiply", "level_scaled", "per_level"]
    stat: Optional[str] = None
    value: float = 0.0
    factor: float = 1.0
    max_bonus: float = 0.0
    per_level: float = 0.0
    ad: float = 0.0
    ap: float = 0.0

    model_config = {"frozen": True}


class StatMappingRules(BaseModel):
    """Vendor stat vocabulary -> canonical vocabulary."""
    mappings: dict[str, str] = Field(default_factory=lambda: dict(c.VENDOR_STAT_MAPPINGS))
    champion_mappings: dict[str, str] = Field(default_factory=lambda: dict(c.CHAMPION_STAT_MAPPINGS))
    rescale_markers: tuple[str, ...] = c.RESCALE_MARKERS
    unmapped_prefix: str = c.UNMAPPED_PREFIX

    model_config = {"frozen": True}


class ItemRules(BaseModel):
    """Item fold configuration."""
    percent_suffix: str = c.PERCENT_SUFFIX
    multiplicative_stats: tuple[str, ...] = c.MULTIPLICATIVE_ITEM_STATS
    passive_effects: dict[str, dict[str, float]] = Field(
        default_factory=lambda: {name: dict(bonus) for name, bonus in c.ITEM_PASSIVE_EFFECTS.items()}
    )
    max_items: int = Field(default=c.MAX_ITEMS, ge=1)

    model_config = {"frozen": True}


def _default_shards() -> dict[ShardSlot, dict[str, ShardEffect]]:
    adaptive = ShardEffect(kind="adaptive", ad=c.ADAPTIVE_AD, ap=c.ADAPTIVE_AP)
    return {
        ShardSlot.OFFENSE: {
            "adaptive_force": adaptive,
            "attack_speed": ShardEffect(
                kind="multiply", stat="attack_speed", factor=c.SHARD_ATTACK_SPEED_MULTIPLIER
            ),
            "ability_haste": ShardEffect(kind="flat", stat="ability_haste", value=c.SHARD_ABILITY_HASTE),
        },
        ShardSlot.FLEX: {
            "adaptive_force": adaptive,
            "movement_speed": ShardEffect(kind="flat", stat="movement_speed", value=c.SHARD_MOVEMENT_SPEED),
            "health_scaling": ShardEffect(
                kind="per_level", stat="health", per_level=c.SHARD_HEALTH_SCALING_PER_LEVEL
            ),
        },
        ShardSlot.DEFENSE: {
            "health": ShardEffect(
                kind="level_scaled",
                stat="health",
                value=c.SHARD_HEALTH_BASE,
                max_bonus=c.SHARD_HEALTH_MAX_BONUS,
            ),
            "armor": ShardEffect(kind="flat", stat="armor", value=c.SHARD_ARMOR),
            "magic_resist": ShardEffect(kind="flat", stat="magic_resist", value=c.SHARD_MAGIC_RESIST),
        },
    }


class ShardRules(BaseModel):
    """Stat shard decision table, per slot."""
    shards: dict[ShardSlot, dict[str, ShardEffect]] = Field(default_factory=_default_shards)

    model_config = {"frozen": True}

    def effect(self, slot: ShardSlot, choice: Optional[str]) -> Optional[ShardEffect]:
        if choice is None:
            return None
        return self.shards.get(slot, {}).get(choice)

    def choices(self, slot: ShardSlot) -> list[str]:
        return list(self.shards.get(slot, {}))


class BuffRules(BaseModel):
    """Objective buff tables."""
    baron: dict[str, float] = Field(default_factory=lambda: dict(c.BARON_BONUS))
    dragon_per_stack: dict[str, float] = Field(default_factory=lambda: dict(c.DRAGON_BONUS_PER_STACK))

    model_config = {"frozen": True}


class GameRules(BaseModel):
    """All tables the engine reads, for one game data revision."""
    version: str = "15.18.1"
    stat_mapping: StatMappingRules = Field(default_factory=StatMappingRules)
    items: ItemRules = Field(default_factory=ItemRules)
    shards: ShardRules = Field(default_factory=ShardRules)
    buffs: BuffRules = Field(default_factory=BuffRules)
    stat_gold_values: dict[str, float] = Field(default_factory=lambda: dict(c.STAT_GOLD_VALUES))

    model_config = {"frozen": True}


DEFAULT_RULES = GameRules()


def load_rules(path: Path) -> GameRules:
    """Load a rules revision from JSON. Missing sections keep their defaults."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return GameRules.model_validate(data)
