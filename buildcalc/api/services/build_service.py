"""
Build service.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from buildcalc.core.build_summary import compare_stats, summarize_build, total_cost
from buildcalc.core.rules import DEFAULT_RULES, GameRules, ShardSlot
from buildcalc.core.rune_pipeline import RuneModifierPipeline
from buildcalc.core.session import (
    AddItem,
    BuildSession,
    SetBaron,
    SetDragonStacks,
    SetKeystone,
    SetPrimaryRunes,
    SetSecondaryRunes,
    SetStatShards,
    apply_event,
    calculate_final_stats,
    debug_info,
    reduce_session,
)
from buildcalc.data.loaders import load_champions, load_items, require_champion
from buildcalc.data.loaders.champion_loader import CHAMPIONS_FILE
from buildcalc.data.loaders.item_loader import ITEMS_FILE
from buildcalc.data.models import Champion, Item

from ..schemas.build import BuildRequest

logger = logging.getLogger(__name__)


class BuildService:
    """Resolve build requests into sessions and final stats."""

    def __init__(
        self,
        rules: GameRules = DEFAULT_RULES,
        champions_file: Path = CHAMPIONS_FILE,
        items_file: Path = ITEMS_FILE,
    ):
        self.rules = rules
        self.champions_file = champions_file
        self.items_file = items_file

    # === Data ===

    def list_champions(self, tag: Optional[str] = None) -> List[Champion]:
        champions = list(load_champions(self.champions_file).values())
        if tag is not None:
            champions = [c for c in champions if tag in c.tags]
        return champions

    def get_champion(self, champion_id: str) -> Champion:
        """Raises ChampionNotFoundError for an unknown id."""
        return require_champion(champion_id, self.champions_file)

    def list_items(self, tag: Optional[str] = None) -> List[Item]:
        items = list(load_items(self.items_file).values())
        if tag is not None:
            items = [i for i in items if tag in i.tags]
        return items

    def get_item(self, item_id: str) -> Optional[Item]:
        return load_items(self.items_file).get(item_id)

    def list_shards(self, level: int = 1) -> Dict[str, Dict[str, Dict[str, float]]]:
        """Nominal bonus of every stat shard choice, per slot."""
        pipeline = RuneModifierPipeline(self.rules.shards)
        return {
            slot.value: {
                choice: pipeline.shard_bonus(slot, choice, level)
                for choice in self.rules.shards.choices(slot)
            }
            for slot in ShardSlot
        }

    # === Builds ===

    def build_session(self, request: BuildRequest) -> BuildSession:
        """
        Create a session from a build request.

        Args:
            request: Champion, level, items, runes and buffs.

        Returns:
            BuildSession.

        Raises:
            LookupError: Unknown champion or item id.
            ValueError: Duplicate item, or more items than a build holds.
        """
        champion = self.get_champion(request.champion_id)
        session = BuildSession.for_champion(champion, request.level)

        for item_id in request.item_ids:
            item = self.get_item(item_id)
            if item is None:
                raise LookupError(f"Item not found: {item_id}")
            if session.has_item(item.id):
                logger.info("Refused duplicate item %s for %s", item.id, champion.id)
                raise ValueError(f"Duplicate item: {item.id}")

            result = apply_event(session, AddItem(item), self.rules)
            if not result.accepted:
                logger.info("Refused item %s for %s: build is full", item.id, champion.id)
                raise ValueError(f"Cannot add more than {self.rules.items.max_items} items")
            session = result.session

        runes = request.runes
        return reduce_session(
            session,
            [
                SetKeystone(runes.keystone),
                SetPrimaryRunes(runes.primary_runes),
                SetSecondaryRunes(runes.secondary_runes),
                SetStatShards(runes.offense, runes.flex, runes.defense),
                SetBaron(request.buffs.baron),
                SetDragonStacks(request.buffs.dragon_stacks),
            ],
            self.rules,
        )

    def calculate_stats(self, request: BuildRequest) -> Dict[str, Any]:
        session = self.build_session(request)
        stats = calculate_final_stats(session, self.rules)
        return {
            "champion_id": session.champion.id,
            "champion_name": session.champion.name,
            "level": session.level,
            "item_ids": session.item_ids,
            "stats": stats.to_dict(),
        }

    def summarize(self, request: BuildRequest) -> Dict[str, Any]:
        session = self.build_session(request)
        summary = summarize_build(session.items, self.rules)
        info = debug_info(session, self.rules)
        return {
            "champion_name": info["champion"],
            "level": info["level"],
            "items": info["items"],
            "total_cost": summary.total_cost,
            "gold_efficiency": summary.gold_efficiency,
            "stat_totals": summary.stat_totals,
            "penetration": info["penetration"],
        }

    def compare(self, build_a: BuildRequest, build_b: BuildRequest) -> Dict[str, Any]:
        session_a = self.build_session(build_a)
        session_b = self.build_session(build_b)
        differences = compare_stats(
            calculate_final_stats(session_a, self.rules),
            calculate_final_stats(session_b, self.rules),
        )
        return {
            "differences": {stat: vars(diff) for stat, diff in differences.items()},
            "cost_difference": total_cost(session_b.items) - total_cost(session_a.items),
        }
