"""Item Modifier Pipeline.

Fold equipped items onto a stat set. Items are folded in list order and each
item is applied whole before the next one, so a later percent modifier sees
the flat total of every earlier item.
"""

from typing import Mapping, Sequence

from buildcalc.data.models import Item

from .rules import DEFAULT_RULES, ItemRules


class ItemModifierPipeline:
    """
    Apply item stat deltas and named passives.

    Usage:
        pipeline = ItemModifierPipeline()
        stats = pipeline.apply_items(stats, items)
    """

    def __init__(
        self,
        rules: ItemRules = DEFAULT_RULES.items,
        unmapped_prefix: str = DEFAULT_RULES.stat_mapping.unmapped_prefix,
    ):
        self.rules = rules
        self.unmapped_prefix = unmapped_prefix

    def apply_items(self, stats: Mapping[str, float], items: Sequence[Item]) -> dict[str, float]:
        """
        Fold items onto a copy of stats.

        Args:
            stats: Level-scaled stat set.
            items: Equipped items, in slot order.

        Returns:
            New stat set with every item applied.
        """
        result = dict(stats)
        for item in items:
            self._apply_item(result, item)
        return result

    def _apply_item(self, stats: dict[str, float], item: Item) -> None:
        for key, value in item.stats.items():
            if key.startswith(self.unmapped_prefix):
                continue
            if key in self.rules.multiplicative_stats:
                continue

            if self.rules.percent_suffix in key:
                # Percent of a stat that does not exist yet does nothing
                base_key = key.replace(self.rules.percent_suffix, "")
                if base_key in stats:
                    stats[base_key] *= 1 + value / 100
            else:
                stats[key] = stats.get(key, 0.0) + value

        self._apply_passives(stats, item)

    def _apply_passives(self, stats: dict[str, float], item: Item) -> None:
        """Add the fixed bonus of every recognized passive; others are ignored."""
        for passive in item.passives:
            bonus = self.rules.passive_effects.get(passive.name)
            if not bonus:
                continue
            for stat, value in bonus.items():
                stats[stat] = stats.get(stat, 0.0) + value

    def bonus_attack_speed(self, items: Sequence[Item]) -> float:
        """Sum of percent attack speed on items, consumed by the attack speed formula."""
        return sum(item.stat("attack_speed") for item in items)
