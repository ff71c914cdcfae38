"""Damage Engine.

Combine an attacker and a target final stat snapshot into auto attack
damage, DPS, time to kill and sustain, plus approximate ability damage.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from buildcalc.core.stat_calculator import FinalStats, effective_health
from buildcalc.data.models import ChampionSpell

from .ability_estimator import AbilityDamageEstimator, TooltipAbilityEstimator
from .penetration import PenetrationResolver, damage_multiplier


@dataclass
class CombatResult:
    """Attacker versus target combat numbers."""

    auto_attack_damage: float  # One mitigated, non-critical hit
    critical_damage: float  # One mitigated critical hit
    average_crit_multiplier: float
    dps: float
    time_to_kill: float  # math.inf when dps is 0
    sustain_per_second: float
    attack_speed: float

    # Percent of damage blocked by the target's own resistances
    physical_reduction: float = 0.0
    magic_reduction: float = 0.0

    target_effective_health_physical: float = 0.0
    target_effective_health_magical: float = 0.0

    # Approximate, by spell id
    ability_damage: dict[str, float] = field(default_factory=dict)
    total_burst: float = 0.0

    @property
    def can_kill(self) -> bool:
        return math.isfinite(self.time_to_kill)


def average_crit_multiplier(crit_chance: float, crit_damage: float) -> float:
    """
    Expected damage multiplier from critical strikes.

    Args:
        crit_chance: Critical strike chance in percent.
        crit_damage: Critical strike damage in percent (175 = 1.75x).

    Returns:
        1 + chance * (damage - 1), both as ratios.
    """
    return 1 + crit_chance / 100 * (crit_damage / 100 - 1)


def calculate_dps(
    hit_damage: float,
    attack_speed: float,
    crit_chance: float,
    crit_damage: float,
) -> float:
    """
    Calculate expected DPS.

    Args:
        hit_damage: Mitigated damage of one non-critical hit.
        attack_speed: Attacks per second.
        crit_chance: Critical strike chance in percent.
        crit_damage: Critical strike damage in percent.

    Returns:
        Expected damage per second.
    """
    return hit_damage * average_crit_multiplier(crit_chance, crit_damage) * attack_speed


def time_to_kill(health: float, dps: float) -> float:
    """Seconds to deal health worth of damage; math.inf when dps is not positive."""
    if dps <= 0:
        return math.inf
    return health / dps


def resistance_reduction(resistance: float) -> float:
    """Percent of damage blocked by a resistance value."""
    return (1 - damage_multiplier(resistance)) * 100


class DamageEngine:
    """
    Attacker versus target calculator.

    Penetration comes from the attacker snapshot; resistances and health from
    the target snapshot. Nothing is cached between calls.

    Usage:
        engine = DamageEngine()
        result = engine.compute_combat(attacker_stats, target_stats, target_level=11)
    """

    def __init__(
        self,
        resolver: Optional[PenetrationResolver] = None,
        estimator: Optional[AbilityDamageEstimator] = None,
    ):
        self.resolver = resolver or PenetrationResolver()
        self.estimator = estimator or TooltipAbilityEstimator()

    def physical_damage(
        self,
        raw_damage: float,
        attacker: FinalStats,
        target: FinalStats,
        target_level: int,
    ) -> float:
        armor = self.resolver.effective_armor(
            target.armor,
            percent_penetration=attacker.armor_penetration_percent,
            lethality=attacker.lethality,
            target_level=target_level,
        )
        return raw_damage * self.resolver.damage_multiplier(armor)

    def magic_damage(self, raw_damage: float, attacker: FinalStats, target: FinalStats) -> float:
        magic_resist = self.resolver.effective_magic_resist(
            target.magic_resist,
            flat_penetration=attacker.magic_penetration_flat,
            percent_penetration=attacker.magic_penetration_percent,
        )
        return raw_damage * self.resolver.damage_multiplier(magic_resist)

    def ability_damage(
        self,
        spell: ChampionSpell,
        attacker: FinalStats,
        target: FinalStats,
        target_level: int,
    ) -> float:
        """Approximate mitigated damage of one cast; 0 when nothing can be read."""
        estimate = self.estimator.estimate(spell)
        if estimate is None:
            return 0.0

        raw = estimate.raw_damage(attacker.ability_power, attacker.attack_damage)
        if estimate.damage_type == "magic":
            return self.magic_damage(raw, attacker, target)
        if estimate.damage_type == "physical":
            return self.physical_damage(raw, attacker, target, target_level)
        return raw

    def compute_combat(
        self,
        attacker: FinalStats,
        target: FinalStats,
        target_level: int,
        spells: Sequence[ChampionSpell] = (),
    ) -> CombatResult:
        """
        Compute combat numbers of attacker against target.

        Args:
            attacker: Attacker final stats, including resolved penetration.
            target: Target final stats.
            target_level: Target level, for lethality scaling.
            spells: Attacker spells to estimate.

        Returns:
            CombatResult.
        """
        hit = self.physical_damage(attacker.attack_damage, attacker, target, target_level)
        crit_multiplier = average_crit_multiplier(attacker.crit_chance, attacker.crit_damage)
        dps = calculate_dps(hit, attacker.attack_speed, attacker.crit_chance, attacker.crit_damage)

        abilities = {
            spell.id: self.ability_damage(spell, attacker, target, target_level)
            for spell in spells
        }

        return CombatResult(
            auto_attack_damage=hit,
            critical_damage=hit * attacker.crit_damage / 100,
            average_crit_multiplier=crit_multiplier,
            dps=dps,
            time_to_kill=time_to_kill(target.health, dps),
            sustain_per_second=dps * attacker.life_steal / 100,
            attack_speed=attacker.attack_speed,
            physical_reduction=resistance_reduction(target.armor),
            magic_reduction=resistance_reduction(target.magic_resist),
            target_effective_health_physical=effective_health(target.health, target.armor),
            target_effective_health_magical=effective_health(target.health, target.magic_resist),
            ability_damage=abilities,
            total_burst=sum(abilities.values()) + hit,
        )
