"""
Combat calculation service.
"""

import math
from typing import Any, Dict, List, Optional

from buildcalc.combat.damage import DamageEngine
from buildcalc.core.session import calculate_final_stats
from buildcalc.data.models import ChampionSpell

from ..schemas.combat import CombatRequest
from .build_service import BuildService


class CombatService:
    """Attacker versus target calculations."""

    def __init__(self, build_service: BuildService, engine: Optional[DamageEngine] = None):
        self.build_service = build_service
        self.engine = engine or DamageEngine()

    def calculate(self, request: CombatRequest) -> Dict[str, Any]:
        """
        Compute combat numbers of the attacker build against the target build.

        The target level is the level of the target build.

        Raises:
            LookupError: Unknown champion, item or spell id.
            ValueError: Invalid item list on either build.
        """
        attacker = self.build_service.build_session(request.attacker)
        target = self.build_service.build_session(request.target)

        spells: List[ChampionSpell] = []
        for spell_id in request.spell_ids:
            spell = attacker.champion.spell(spell_id)
            if spell is None:
                raise LookupError(f"Spell not found for {attacker.champion.id}: {spell_id}")
            spells.append(spell)

        rules = self.build_service.rules
        result = self.engine.compute_combat(
            calculate_final_stats(attacker, rules),
            calculate_final_stats(target, rules),
            target_level=target.level,
            spells=spells,
        )

        data = vars(result).copy()
        if not math.isfinite(result.time_to_kill):
            data["time_to_kill"] = None
        return data
