"""Item data loader for Data Dragon item files."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from buildcalc.core.stat_converter import StatConverter

from ..models.item import Item

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent
ITEMS_FILE = DATA_DIR / "items" / "items.json"


@lru_cache(maxsize=1)
def load_items(path: Path = ITEMS_FILE) -> dict[str, Item]:
    """Load purchasable, visible items from an item.json file.

    Args:
        path: Data Dragon item file ({"data": {id: record}}).

    Returns:
        Dict of item id to Item.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    items = StatConverter().convert_all_items(data.get("data", {}))
    logger.debug("Loaded %d items from %s", len(items), path)
    return items


def get_item_by_id(item_id: str, path: Path = ITEMS_FILE) -> Optional[Item]:
    """Get an item by id.

    Args:
        item_id: Item id, e.g. "3031".
        path: Item file to look in.

    Returns:
        Item object if found, None otherwise.
    """
    return load_items(path).get(str(item_id))


def get_items_by_tag(tag: str, path: Path = ITEMS_FILE) -> list[Item]:
    """Get all items with a shop tag (Damage, CriticalStrike, ...)."""
    return [item for item in load_items(path).values() if tag in item.tags]


def clear_cache() -> None:
    """Clear the item cache. Useful for testing or hot-reloading data."""
    load_items.cache_clear()
