# Data Models
from .champion import Champion, ChampionSpell, ResourceType
from .item import Item, ItemEffect, ItemGold, NamedEffect
from .rune import Rune, RuneSelection, OffenseShard, FlexShard, DefenseShard
from .buff import BuffState

__all__ = [
    "Champion",
    "ChampionSpell",
    "ResourceType",
    "Item",
    "ItemEffect",
    "ItemGold",
    "NamedEffect",
    "Rune",
    "RuneSelection",
    "OffenseShard",
    "FlexShard",
    "DefenseShard",
    "BuffState",
]
