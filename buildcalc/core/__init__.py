# Core calculation modules
# BuildSession and the reducer live in .session, which depends on buildcalc.combat
from .constants import (
    MIN_LEVEL,
    MAX_LEVEL,
    MAX_ITEMS,
    BASE_CRIT_DAMAGE,
    DEFAULT_ATTACK_SPEED,
    clamp_level,
)

from .rules import GameRules, DEFAULT_RULES, ShardSlot, ShardEffect, load_rules
from .stat_converter import StatConverter, validate_stats, fill_default_stats
from .stat_calculator import (
    FinalStats,
    StatAggregator,
    level_scale,
    scale_attack_speed,
    ability_haste_to_cdr,
    cooldown_after_haste,
    healing_with_power,
    effective_health,
)
from .item_pipeline import ItemModifierPipeline
from .rune_pipeline import RuneModifierPipeline
from .buff_pipeline import BuffModifierPipeline
from .build_summary import (
    BuildSummary,
    StatDifference,
    total_cost,
    gold_efficiency,
    summarize_build,
    compare_stats,
)
