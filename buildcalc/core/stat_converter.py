"""Stat Converter.

Normalizes vendor (Data Dragon) champion, item and rune records into the
canonical stat vocabulary used by the pipelines. Runs once per record at the
data-load boundary.
"""

import logging
import re
from typing import Any, Mapping, Optional

from buildcalc.data.models import (
    Champion,
    ChampionSpell,
    Item,
    ItemEffect,
    ItemGold,
    NamedEffect,
    ResourceType,
    Rune,
)

from .constants import CANONICAL_STATS, REQUIRED_STATS
from .rules import DEFAULT_RULES, StatMappingRules

logger = logging.getLogger(__name__)

PASSIVE_PATTERN = re.compile(r"<passive>([^<]+)</passive>")
ACTIVE_PATTERN = re.compile(r"<active>([^<]+)</active>")
MAX_EFFECTS = 10


class StatConverter:
    """
    Convert vendor records to engine records.

    Usage:
        converter = StatConverter()
        item = converter.convert_item(raw_item)
    """

    def __init__(self, rules: StatMappingRules = DEFAULT_RULES.stat_mapping):
        self.rules = rules

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------
    def convert_stats(self, raw_stats: Mapping[str, float]) -> dict[str, float]:
        """
        Convert a vendor stat block to canonical names.

        Fractions are rescaled to percent units for keys carrying a percent or
        crit marker. Zero values are dropped. Unknown keys are kept under the
        unmapped prefix and reported with a warning.

        Args:
            raw_stats: Vendor stat block, e.g. {"FlatCritChanceMod": 0.25}.

        Returns:
            Canonical stat deltas, e.g. {"crit_chance": 25.0}.
        """
        converted: dict[str, float] = {}

        for vendor_key, value in raw_stats.items():
            if value == 0:
                continue

            mapped = self.rules.mappings.get(vendor_key)
            if mapped is None:
                logger.warning("Unmapped stat: %s", vendor_key)
                converted[f"{self.rules.unmapped_prefix}{vendor_key}"] = value
                continue

            if self._is_rescaled(vendor_key):
                converted[mapped] = value * 100
            else:
                converted[mapped] = value

        return converted

    def convert_to_vendor_format(self, stats: Mapping[str, float]) -> dict[str, float]:
        """Reverse mapping of canonical stats, for debugging against raw data."""
        reverse: dict[str, str] = {}
        for vendor_key, canonical in self.rules.mappings.items():
            reverse.setdefault(canonical, vendor_key)

        vendor: dict[str, float] = {}
        for stat, value in stats.items():
            vendor_key = reverse.get(stat)
            if vendor_key is None:
                continue
            vendor[vendor_key] = value / 100 if self._is_rescaled(vendor_key) else value
        return vendor

    def _is_rescaled(self, vendor_key: str) -> bool:
        return any(marker in vendor_key for marker in self.rules.rescale_markers)

    # ------------------------------------------------------------------
    # Champions
    # ------------------------------------------------------------------
    def convert_champion_stats(self, raw_stats: Optional[Mapping[str, float]]) -> dict[str, float]:
        """Map a champion stat block; absent values default to 0."""
        raw_stats = raw_stats or {}
        return {
            canonical: float(raw_stats.get(vendor_key) or 0)
            for vendor_key, canonical in self.rules.champion_mappings.items()
        }

    def convert_champion(self, raw: Optional[Mapping[str, Any]]) -> Optional[Champion]:
        """
        Convert a vendor champion record.

        Args:
            raw: Champion entry from champion.json or champion/<Key>.json.

        Returns:
            Champion, or None when no record was given or it has no id.
        """
        if not raw:
            return None
        if not raw.get("id"):
            logger.warning("Champion record without id: %s", raw.get("name", "<unnamed>"))
            return None

        partype = raw.get("partype") or "Mana"
        spells = [
            ChampionSpell(
                id=spell.get("id", ""),
                name=spell.get("name", ""),
                description=spell.get("description", ""),
                tooltip=spell.get("tooltip", ""),
            )
            for spell in raw.get("spells", [])
        ]

        return Champion(
            id=raw["id"],
            key=str(raw.get("key", "")),
            name=raw.get("name", raw["id"]),
            title=raw.get("title", ""),
            tags=list(raw.get("tags", [])),
            stats=self.convert_champion_stats(raw.get("stats")),
            partype=partype,
            resource_type=_resource_type(partype),
            spells=spells,
        )

    def convert_all_champions(self, raw_champions: Mapping[str, Mapping[str, Any]]) -> dict[str, Champion]:
        converted = {}
        for key, data in raw_champions.items():
            champion = self.convert_champion(data)
            if champion is not None:
                converted[key] = champion
        return converted

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def convert_item(self, raw: Optional[Mapping[str, Any]], item_id: Optional[str] = None) -> Optional[Item]:
        """
        Convert a vendor item record.

        Args:
            raw: Item entry from item.json.
            item_id: Id to use when the record does not carry one (item.json
                keys items by id).

        Returns:
            Item, or None when no record was given.
        """
        if not raw:
            return None

        gold = raw.get("gold") or {}
        description = raw.get("description", "")

        return Item(
            id=str(item_id or raw.get("id") or raw.get("itemId", "")),
            name=raw.get("name", ""),
            description=description,
            plaintext=raw.get("plaintext", ""),
            gold=ItemGold(
                base=gold.get("base", 0),
                total=gold.get("total", 0),
                sell=gold.get("sell", 0),
                purchasable=gold.get("purchasable", True),
            ),
            stats=self.convert_stats(raw.get("stats") or {}),
            builds_from=list(raw.get("from", [])),
            builds_into=list(raw.get("into", [])),
            tags=list(raw.get("tags", [])),
            depth=raw.get("depth", 1),
            effects=convert_effects(raw.get("effect") or {}),
            passives=extract_passives(description),
            actives=extract_actives(description),
        )

    def convert_all_items(self, raw_items: Mapping[str, Mapping[str, Any]]) -> dict[str, Item]:
        """Convert an item dataset, skipping unpurchasable and hidden items."""
        converted = {}
        for item_id, data in raw_items.items():
            gold = data.get("gold")
            if gold and not gold.get("purchasable", True):
                continue
            if data.get("hideFromAll"):
                continue
            item = self.convert_item(data, item_id=item_id)
            if item is not None:
                converted[item_id] = item
        return converted

    # ------------------------------------------------------------------
    # Runes
    # ------------------------------------------------------------------
    def convert_rune(self, raw: Optional[Mapping[str, Any]]) -> Optional[Rune]:
        if not raw:
            return None
        if raw.get("id") is None:
            logger.warning("Rune record without id: %s", raw.get("name", "<unnamed>"))
            return None
        return Rune(
            id=raw["id"],
            key=raw.get("key", ""),
            name=raw.get("name", ""),
            short_desc=raw.get("shortDesc", ""),
            long_desc=raw.get("longDesc", ""),
            icon=raw.get("icon", ""),
            stats=self.convert_stats(raw.get("stats") or {}),
        )


def _resource_type(partype: str) -> ResourceType:
    normalized = partype.strip().lower()
    if normalized == "mana":
        return ResourceType.MANA
    if normalized == "energy":
        return ResourceType.ENERGY
    return ResourceType.NONE


def convert_effects(effects: Mapping[str, Any]) -> list[ItemEffect]:
    """Collect Effect1Amount..Effect10Amount in order."""
    converted = []
    for index in range(1, MAX_EFFECTS + 1):
        amount = effects.get(f"Effect{index}Amount")
        if amount is None:
            continue
        try:
            value = float(amount)
        except (TypeError, ValueError):
            value = 0.0
        converted.append(ItemEffect(index=index, value=value))
    return converted


def _extract_named(pattern: re.Pattern, description: str) -> list[NamedEffect]:
    if not description:
        return []
    return [
        NamedEffect(name=text.split(":")[0].strip(), description=text)
        for text in pattern.findall(description)
    ]


def extract_passives(description: str) -> list[NamedEffect]:
    """Named <passive> tags of an item description."""
    return _extract_named(PASSIVE_PATTERN, description)


def extract_actives(description: str) -> list[NamedEffect]:
    """Named <active> tags of an item description."""
    return _extract_named(ACTIVE_PATTERN, description)


def validate_stats(stats: Mapping[str, float]) -> dict[str, Any]:
    """
    Check that a stat set carries every required stat.

    Returns:
        Dict with is_valid, missing_stats and present_stats.
    """
    missing = [stat for stat in REQUIRED_STATS if stats.get(stat) is None]
    present = [stat for stat in REQUIRED_STATS if stats.get(stat) is not None]
    return {
        "is_valid": not missing,
        "missing_stats": missing,
        "present_stats": present,
    }


def fill_default_stats(stats: Mapping[str, float]) -> dict[str, float]:
    """Fill every canonical stat missing from stats with 0."""
    filled = {stat: 0.0 for stat in CANONICAL_STATS}
    filled.update(stats)
    return filled
