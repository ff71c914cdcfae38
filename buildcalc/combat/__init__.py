"""Combat math for League of Legends builds.

This module provides:
- Armor and magic resist penetration
- Auto attack damage, DPS and time to kill
- Approximate ability damage from tooltips
"""

# Penetration
from .penetration import (
    Penetration,
    PenetrationResolver,
    resolve_penetration,
    lethality_at_level,
    damage_multiplier,
)

# Abilities
from .ability_estimator import (
    AbilityEstimate,
    AbilityDamageEstimator,
    TooltipAbilityEstimator,
)

# Damage
from .damage import (
    CombatResult,
    DamageEngine,
    average_crit_multiplier,
    calculate_dps,
    time_to_kill,
)
