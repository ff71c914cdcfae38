"""Penetration Resolver.

Effective armor and magic resist after penetration, and the damage multiplier
of a resistance value.
"""

from dataclasses import dataclass
from typing import Sequence

from buildcalc.core.constants import (
    LETHALITY_BASE_RATIO,
    LETHALITY_LEVEL_RATIO,
    MAX_LEVEL,
    RESISTANCE_CONSTANT,
    clamp_level,
)
from buildcalc.data.models import Item


@dataclass
class Penetration:
    """Penetration of a build after aggregation across items."""

    lethality: float = 0.0  # Flat, summed
    armor_penetration_percent: float = 0.0  # Largest single source
    magic_penetration_flat: float = 0.0  # Flat, summed
    magic_penetration_percent: float = 0.0  # Largest single source

    def to_dict(self) -> dict[str, float]:
        return {
            "lethality": self.lethality,
            "armor_penetration_percent": self.armor_penetration_percent,
            "magic_penetration_flat": self.magic_penetration_flat,
            "magic_penetration_percent": self.magic_penetration_percent,
        }


def resolve_penetration(items: Sequence[Item]) -> Penetration:
    """
    Aggregate penetration across items.

    Percent penetration does not stack: only the largest value applies.
    Flat penetration (lethality, flat magic pen) is additive.

    Args:
        items: Equipped items.

    Returns:
        Aggregated penetration.
    """
    return Penetration(
        lethality=sum(item.stat("lethality") for item in items),
        armor_penetration_percent=max(
            (item.stat("armor_penetration_percent") for item in items), default=0.0
        ),
        magic_penetration_flat=sum(item.stat("magic_penetration_flat") for item in items),
        magic_penetration_percent=max(
            (item.stat("magic_penetration_percent") for item in items), default=0.0
        ),
    )


def lethality_at_level(lethality: float, target_level: int) -> float:
    """Flat armor reduction of lethality against a target of a given level."""
    level = clamp_level(target_level)
    return lethality * (LETHALITY_BASE_RATIO + LETHALITY_LEVEL_RATIO * level / MAX_LEVEL)


def damage_multiplier(resistance: float) -> float:
    """Fraction of damage dealt through a resistance: 100 / (100 + resistance)."""
    return RESISTANCE_CONSTANT / (RESISTANCE_CONSTANT + resistance)


class PenetrationResolver:
    """
    Resolve target resistances against attacker penetration.

    The physical path order is fixed: percent reduction, percent penetration,
    lethality, flat penetration. Each subtraction is clamped at 0.

    Usage:
        resolver = PenetrationResolver()
        armor = resolver.effective_armor(100, lethality=18, target_level=11)
        multiplier = resolver.damage_multiplier(armor)
    """

    def effective_armor(
        self,
        armor: float,
        flat_penetration: float = 0.0,
        percent_penetration: float = 0.0,
        percent_reduction: float = 0.0,
        lethality: float = 0.0,
        target_level: int = 1,
    ) -> float:
        """
        Target armor after penetration.

        Args:
            armor: Target armor.
            flat_penetration: Flat armor penetration (not lethality).
            percent_penetration: Percent armor penetration.
            percent_reduction: Percent armor reduction.
            lethality: Lethality, scaled by target level.
            target_level: Level of the target.

        Returns:
            Effective armor, never negative.
        """
        effective = max(0.0, armor * (1 - percent_reduction / 100))
        effective *= 1 - percent_penetration / 100
        effective = max(0.0, effective - lethality_at_level(lethality, target_level))
        effective = max(0.0, effective - flat_penetration)
        return effective

    def effective_magic_resist(
        self,
        magic_resist: float,
        flat_penetration: float = 0.0,
        percent_penetration: float = 0.0,
    ) -> float:
        """Target magic resist after percent then flat penetration, never negative."""
        effective = magic_resist * (1 - percent_penetration / 100)
        return max(0.0, effective - flat_penetration)

    def damage_multiplier(self, resistance: float) -> float:
        return damage_multiplier(resistance)
