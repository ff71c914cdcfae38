"""Rune Modifier Pipeline.

Stat shards resolve through the shard table. Keystone and minor runes are
carried on the selection but do not change stats.
"""

from typing import Mapping, Optional

from buildcalc.data.models import RuneSelection

from .constants import MAX_LEVEL, clamp_level
from .rules import DEFAULT_RULES, ShardEffect, ShardRules, ShardSlot


class RuneModifierPipeline:
    """
    Apply the three stat shards of a rune page.

    Adaptive force compares AD and AP on the stats handed in, before any
    shard of this call is applied, so offense and flex resolve independently.
    AD is chosen only when strictly higher; a tie goes to AP.

    Usage:
        pipeline = RuneModifierPipeline()
        stats = pipeline.apply_runes(stats, selection, level=11)
    """

    def __init__(self, rules: ShardRules = DEFAULT_RULES.shards):
        self.rules = rules

    def apply_runes(
        self,
        stats: Mapping[str, float],
        selection: RuneSelection,
        level: int,
    ) -> dict[str, float]:
        """
        Apply shards onto a copy of stats.

        Args:
            stats: Stat set after items.
            selection: Rune page.
            level: Champion level, clamped to [1, 18].

        Returns:
            New stat set with the shard bonuses.
        """
        level = clamp_level(level)
        snapshot = dict(stats)
        result = dict(stats)

        for slot, choice in (
            (ShardSlot.OFFENSE, selection.offense),
            (ShardSlot.FLEX, selection.flex),
            (ShardSlot.DEFENSE, selection.defense),
        ):
            effect = self.rules.effect(slot, choice)
            if effect is not None:
                self._apply_effect(result, snapshot, effect, level)

        return result

    def _apply_effect(
        self,
        stats: dict[str, float],
        snapshot: Mapping[str, float],
        effect: ShardEffect,
        level: int,
    ) -> None:
        if effect.kind == "adaptive":
            if prefers_attack_damage(snapshot):
                stats["attack_damage"] = stats.get("attack_damage", 0.0) + effect.ad
            else:
                stats["ability_power"] = stats.get("ability_power", 0.0) + effect.ap
            return

        stat = effect.stat
        if stat is None:
            return

        if effect.kind == "multiply":
            if stat in stats:
                stats[stat] *= effect.factor
        else:
            stats[stat] = stats.get(stat, 0.0) + shard_amount(effect, level)

    def shard_bonus(self, slot: ShardSlot, choice: Optional[str], level: int = 1) -> dict[str, float]:
        """
        Nominal bonus of one shard, for display.

        Multiplicative shards are reported as a *_percent bonus and adaptive
        shards as adaptive_force (the AP amount).
        """
        effect = self.rules.effect(slot, choice)
        if effect is None:
            return {}
        if effect.kind == "adaptive":
            return {"adaptive_force": effect.ap}
        if effect.stat is None:
            return {}
        if effect.kind == "multiply":
            return {f"{effect.stat}_percent": round((effect.factor - 1) * 100, 6)}
        return {effect.stat: shard_amount(effect, clamp_level(level))}


def prefers_attack_damage(stats: Mapping[str, float]) -> bool:
    """Adaptive force goes to AD only when AD is strictly higher than AP."""
    return stats.get("attack_damage", 0.0) > stats.get("ability_power", 0.0)


def shard_amount(effect: ShardEffect, level: int) -> float:
    """Additive amount of a flat, level scaled or per level shard."""
    if effect.kind == "level_scaled":
        return effect.value + effect.max_bonus * (level - 1) / (MAX_LEVEL - 1)
    if effect.kind == "per_level":
        return effect.value + effect.per_level * (level - 1)
    return effect.value
