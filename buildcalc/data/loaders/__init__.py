# Data Loaders
from .champion_loader import (
    ChampionNotFoundError,
    load_champions,
    get_champion_by_id,
    require_champion,
    get_champions_by_tag,
)
from .item_loader import (
    load_items,
    get_item_by_id,
    get_items_by_tag,
)

__all__ = [
    # Champion loaders
    "ChampionNotFoundError",
    "load_champions",
    "get_champion_by_id",
    "require_champion",
    "get_champions_by_tag",
    # Item loaders
    "load_items",
    "get_item_by_id",
    "get_items_by_tag",
]
