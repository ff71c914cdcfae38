"""Buff Modifier Pipeline.

Map objective buffs add flat stats. Dragon stacks scale linearly and are not
capped here.
"""

from typing import Mapping

from buildcalc.data.models import BuffState

from .rules import DEFAULT_RULES, BuffRules


class BuffModifierPipeline:
    """
    Apply Baron and dragon buffs.

    Usage:
        pipeline = BuffModifierPipeline()
        stats = pipeline.apply_buffs(stats, BuffState(baron=True))
    """

    def __init__(self, rules: BuffRules = DEFAULT_RULES.buffs):
        self.rules = rules

    def apply_buffs(self, stats: Mapping[str, float], buffs: BuffState) -> dict[str, float]:
        result = dict(stats)

        if buffs.baron:
            for stat, value in self.rules.baron.items():
                result[stat] = result.get(stat, 0.0) + value

        if buffs.dragon_stacks > 0:
            for stat, value in self.rules.dragon_per_stack.items():
                result[stat] = result.get(stat, 0.0) + value * buffs.dragon_stacks

        return result
