"""Build cost, gold efficiency and stat comparison."""

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from buildcalc.data.models import Item

from .rules import DEFAULT_RULES, GameRules
from .stat_calculator import FinalStats

# FinalStats fields shown when comparing two builds
COMPARED_STATS = (
    "health",
    "mana",
    "armor",
    "magic_resist",
    "attack_damage",
    "attack_speed",
    "crit_chance",
    "crit_damage",
    "ability_power",
    "ability_haste",
    "lethality",
    "armor_penetration_percent",
    "magic_penetration_flat",
    "magic_penetration_percent",
    "life_steal",
    "omnivamp",
    "movement_speed",
    "cooldown_reduction",
    "effective_health_physical",
    "effective_health_magical",
)


@dataclass
class StatDifference:
    """Change of one stat from build A to build B."""

    stat: str
    before: float
    after: float
    difference: float
    percent: Optional[float] = None  # None when before is 0


@dataclass
class BuildSummary:
    """Cost overview of an item set."""

    item_count: int
    total_cost: int
    gold_efficiency: int
    stat_totals: dict[str, float] = field(default_factory=dict)


def total_cost(items: Sequence[Item]) -> int:
    """Sum of item total costs."""
    return sum(item.total_cost for item in items)


def item_stat_totals(items: Sequence[Item]) -> dict[str, float]:
    """Sum of stat deltas over items, in canonical stat units."""
    totals: dict[str, float] = {}
    for item in items:
        for stat, value in item.stats.items():
            totals[stat] = totals.get(stat, 0.0) + value
    return totals


def gold_value(stats: Mapping[str, float], rules: GameRules = DEFAULT_RULES) -> float:
    """Gold worth of a stat set; stats without a gold value count as 0."""
    return sum(
        value * rules.stat_gold_values.get(stat, 0.0)
        for stat, value in stats.items()
    )


def gold_efficiency(items: Sequence[Item], rules: GameRules = DEFAULT_RULES) -> int:
    """
    Stat value in gold as a rounded percent of what the items cost.

    Args:
        items: Item set.
        rules: Gold values per stat.

    Returns:
        Percent efficiency; 0 for an empty or free item set.
    """
    cost = total_cost(items)
    if not items or cost <= 0:
        return 0
    return round(gold_value(item_stat_totals(items), rules) / cost * 100)


def summarize_build(items: Sequence[Item], rules: GameRules = DEFAULT_RULES) -> BuildSummary:
    return BuildSummary(
        item_count=len(items),
        total_cost=total_cost(items),
        gold_efficiency=gold_efficiency(items, rules),
        stat_totals=item_stat_totals(items),
    )


def compare_stats(stats1: FinalStats, stats2: FinalStats) -> dict[str, StatDifference]:
    """
    Compare two stat blocks.

    Args:
        stats1: First stat block.
        stats2: Second stat block.

    Returns:
        Dict of stat name to difference (positive = stats2 is higher). Equal
        stats are left out.
    """
    differences = {}

    for stat in COMPARED_STATS:
        val1 = stats1.get(stat)
        val2 = stats2.get(stat)
        if val1 == val2:
            continue
        differences[stat] = StatDifference(
            stat=stat,
            before=val1,
            after=val2,
            difference=val2 - val1,
            percent=(val2 - val1) / val1 * 100 if val1 else None,
        )

    return differences
