"""Approximate ability damage from tooltip text.

Game data ships ability numbers as free text, so this estimator reads the
first "<base> (+<ratio> AP|AD)" pattern it can find. Results are a rough
order of magnitude for display, not ground truth. Anything implementing
AbilityDamageEstimator can replace it, e.g. a structured data source.
"""

import re
from dataclasses import dataclass
from typing import Optional, Protocol

from buildcalc.data.models import ChampionSpell

TAG_PATTERN = re.compile(r"<[^>]+>")
SCALING_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?)[^\d()]{0,40}?\(?\s*(?:\+|plus)\s*(\d+(?:\.\d+)?)\s*(%?)\s*"
    r"(?:of\s+)?(?:bonus\s+)?(AP|AD|ability power|attack damage)\b",
    re.IGNORECASE,
)
NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")

AP_NAMES = ("ap", "ability power")


@dataclass
class AbilityEstimate:
    """Base damage plus AP/AD ratios read from an ability."""

    base_damage: float = 0.0
    ap_ratio: float = 0.0
    ad_ratio: float = 0.0

    @property
    def damage_type(self) -> str:
        """magic when AP scaled, physical when AD scaled, otherwise true."""
        if self.ap_ratio > 0:
            return "magic"
        if self.ad_ratio > 0:
            return "physical"
        return "true"

    def raw_damage(self, ability_power: float, attack_damage: float) -> float:
        return self.base_damage + ability_power * self.ap_ratio + attack_damage * self.ad_ratio


class AbilityDamageEstimator(Protocol):
    """Anything that can turn a spell into an AbilityEstimate."""

    def estimate(self, spell: ChampionSpell) -> Optional[AbilityEstimate]:
        ...


class TooltipAbilityEstimator:
    """
    Regex heuristic over spell tooltips (falls back to the description).

    Usage:
        estimate = TooltipAbilityEstimator().estimate(spell)
    """

    def estimate(self, spell: ChampionSpell) -> Optional[AbilityEstimate]:
        text = strip_tags(spell.tooltip or spell.description)
        if not text:
            return None

        match = SCALING_PATTERN.search(text)
        if match:
            base, ratio, percent, stat = match.groups()
            ratio_value = float(ratio) / 100 if percent else float(ratio)
            if stat.lower() in AP_NAMES:
                return AbilityEstimate(base_damage=float(base), ap_ratio=ratio_value)
            return AbilityEstimate(base_damage=float(base), ad_ratio=ratio_value)

        number = NUMBER_PATTERN.search(text)
        if number:
            return AbilityEstimate(base_damage=float(number.group()))
        return None


def strip_tags(text: str) -> str:
    return TAG_PATTERN.sub(" ", text or "").strip()
