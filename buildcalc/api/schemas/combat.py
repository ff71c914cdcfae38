"""
Combat-related API schemas.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .build import BuildRequest


class CombatRequest(BaseModel):
    """Attacker versus target calculation request."""

    attacker: BuildRequest
    target: BuildRequest
    spell_ids: List[str] = Field(default_factory=list, description="Attacker spells to estimate")


class CombatResultSchema(BaseModel):
    """Combat result schema."""

    auto_attack_damage: float
    critical_damage: float
    average_crit_multiplier: float
    dps: float
    time_to_kill: Optional[float] = Field(None, description="Seconds; null when the attacker deals no damage")
    sustain_per_second: float
    attack_speed: float
    physical_reduction: float
    magic_reduction: float
    target_effective_health_physical: float
    target_effective_health_magical: float
    ability_damage: Dict[str, float] = Field(
        default_factory=dict, description="Approximate damage per spell id"
    )
    total_burst: float
