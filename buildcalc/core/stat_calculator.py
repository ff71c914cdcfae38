"""Stat Calculator for League of Legends champions.

Level-scale champion base stats and hold the final stat snapshot of a build.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Mapping

from .constants import (
    BASE_CRIT_DAMAGE,
    DEFAULT_ATTACK_SPEED,
    GROWTH_BASE,
    GROWTH_RAMP,
    GROWTH_STATS,
    RESISTANCE_CONSTANT,
    clamp_level,
)

# Stats that only exist through items, runes and buffs
ZERO_START_STATS = (
    "ability_power",
    "ability_haste",
    "lethality",
    "armor_penetration_percent",
    "magic_penetration_flat",
    "magic_penetration_percent",
    "life_steal",
    "omnivamp",
    "heal_and_shield_power",
)


def growth_multiplier(level: int) -> float:
    """Fraction of the per-level growth gained by a given level (0 at level 1)."""
    level = clamp_level(level)
    return (level - 1) * (GROWTH_BASE + GROWTH_RAMP * (level - 1))


def level_scale(base: float, growth: float, level: int) -> float:
    """
    Scale a base stat to a champion level.

    result = base + growth * (level - 1) * (0.7025 + 0.0175 * (level - 1))

    Args:
        base: Level 1 value.
        growth: Per-level growth coefficient.
        level: Champion level, clamped to [1, 18].

    Returns:
        Stat value at that level.
    """
    return base + growth * growth_multiplier(level)


def scale_attack_speed(
    base: float,
    growth_percent: float,
    level: int,
    bonus_percent: float = 0.0,
) -> float:
    """
    Attacks per second at a level with bonus attack speed.

    Bonuses are ratios of the base attack speed, not flat stats:
    base * (1 + level bonus / 100 + item bonus / 100).

    Args:
        base: Base attacks per second. 0 falls back to 0.625.
        growth_percent: Attack speed growth per level, in percent.
        level: Champion level, clamped to [1, 18].
        bonus_percent: Sum of percent attack speed bonuses.

    Returns:
        Attacks per second.
    """
    base = base or DEFAULT_ATTACK_SPEED
    level_bonus = growth_percent * growth_multiplier(level) / 100
    return base * (1 + level_bonus + bonus_percent / 100)


def ability_haste_to_cdr(ability_haste: float) -> float:
    """Cooldown reduction percent granted by ability haste."""
    if ability_haste <= -100:
        return 0.0
    return ability_haste / (ability_haste + 100) * 100


def cooldown_after_haste(base_cooldown: float, ability_haste: float) -> float:
    """Cooldown in seconds after ability haste."""
    if ability_haste <= -100:
        return base_cooldown
    return base_cooldown * (100 / (100 + ability_haste))


def healing_with_power(base_heal: float, heal_and_shield_power: float) -> float:
    """Heal or shield amount after heal and shield power."""
    return base_heal * (1 + heal_and_shield_power / 100)


def effective_health(health: float, resistance: float) -> float:
    """Raw damage needed to kill: HP * (1 + resistance / 100)."""
    return health * (1 + resistance / RESISTANCE_CONSTANT)


@dataclass
class FinalStats:
    """Fully resolved stats of a build (level, items, runes, buffs)."""

    # Core stats
    health: float = 0.0
    mana: float = 0.0
    armor: float = 0.0
    magic_resist: float = 0.0
    attack_damage: float = 0.0
    attack_speed: float = 0.0
    crit_chance: float = 0.0
    health_regen: float = 0.0
    mana_regen: float = 0.0
    movement_speed: float = 0.0
    attack_range: float = 0.0

    # Item / rune stats
    ability_power: float = 0.0
    ability_haste: float = 0.0
    crit_damage: float = BASE_CRIT_DAMAGE
    lethality: float = 0.0
    armor_penetration_percent: float = 0.0
    magic_penetration_flat: float = 0.0
    magic_penetration_percent: float = 0.0
    life_steal: float = 0.0
    omnivamp: float = 0.0
    heal_and_shield_power: float = 0.0

    # Derived stats
    cooldown_reduction: float = 0.0
    effective_health_physical: float = 0.0
    effective_health_magical: float = 0.0

    # Anything else the items carried (energy, movement_speed_percent leftovers, ...)
    extra: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_stats(cls, stats: Mapping[str, float]) -> "FinalStats":
        """Build the snapshot from a resolved stat set and derive CDR and EHP."""
        derived = {"cooldown_reduction", "effective_health_physical", "effective_health_magical", "extra"}
        known = {f.name for f in fields(cls)} - derived

        values = {name: float(stats[name]) for name in known if name in stats}
        extra = {
            k: float(v) for k, v in stats.items()
            if k not in known and k not in derived and not k.endswith("_per_level")
        }
        final = cls(**values, extra=extra)

        final.cooldown_reduction = ability_haste_to_cdr(final.ability_haste)
        final.effective_health_physical = effective_health(final.health, final.armor)
        final.effective_health_magical = effective_health(final.health, final.magic_resist)
        return final

    def get(self, name: str, default: float = 0.0) -> float:
        if name != "extra" and hasattr(self, name):
            return getattr(self, name)
        return self.extra.get(name, default)

    def to_dict(self) -> dict:
        return asdict(self)


class StatAggregator:
    """
    Scale a champion's level 1 stats to its current level.

    Usage:
        stats = StatAggregator().scale_base_stats(champion.stats, level=6)
    """

    def scale_base_stats(
        self,
        base_stats: Mapping[str, float],
        level: int,
        bonus_attack_speed: float = 0.0,
    ) -> dict[str, float]:
        """
        Level-scaled base stats.

        Args:
            base_stats: Canonical champion stats including *_per_level growth.
            level: Champion level, clamped to [1, 18].
            bonus_attack_speed: Percent attack speed from items.

        Returns:
            Stat set without growth coefficients, ready for the item fold.
        """
        level = clamp_level(level)
        stats: dict[str, float] = {}

        for stat in GROWTH_STATS:
            stats[stat] = level_scale(
                base_stats.get(stat, 0.0),
                base_stats.get(f"{stat}_per_level", 0.0),
                level,
            )

        stats["attack_speed"] = scale_attack_speed(
            base_stats.get("attack_speed", 0.0),
            base_stats.get("attack_speed_per_level", 0.0),
            level,
            bonus_attack_speed,
        )
        stats["movement_speed"] = base_stats.get("movement_speed", 0.0)
        stats["attack_range"] = base_stats.get("attack_range", 0.0)

        for stat in ZERO_START_STATS:
            stats[stat] = 0.0
        stats["crit_damage"] = BASE_CRIT_DAMAGE

        return stats
