"""Champion data loader for Data Dragon champion files."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from buildcalc.core.stat_converter import StatConverter

from ..models.champion import Champion

logger = logging.getLogger(__name__)

# Get the data directory path
DATA_DIR = Path(__file__).parent.parent
CHAMPIONS_FILE = DATA_DIR / "champions" / "champions.json"


class ChampionNotFoundError(LookupError):
    """Requested champion key is not in the loaded dataset."""

    def __init__(self, champion_id: str):
        super().__init__(f"Champion not found: {champion_id}")
        self.champion_id = champion_id


@lru_cache(maxsize=1)
def load_champions(path: Path = CHAMPIONS_FILE) -> dict[str, Champion]:
    """Load and convert every champion of a champion.json file.

    Args:
        path: Data Dragon champion file ({"data": {key: record}}).

    Returns:
        Dict of champion id to Champion.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    champions = StatConverter().convert_all_champions(data.get("data", {}))
    logger.debug("Loaded %d champions from %s", len(champions), path)
    return champions


def get_champion_by_id(champion_id: str, path: Path = CHAMPIONS_FILE) -> Optional[Champion]:
    """Get a champion by id, falling back to a case-insensitive id or name match.

    Args:
        champion_id: Champion id, e.g. "MissFortune".
        path: Champion file to look in.

    Returns:
        Champion object if found, None otherwise.
    """
    champions = load_champions(path)
    if champion_id in champions:
        return champions[champion_id]

    wanted = champion_id.lower()
    for champion in champions.values():
        if champion.id.lower() == wanted or champion.name.lower() == wanted:
            return champion
    return None


def require_champion(champion_id: str, path: Path = CHAMPIONS_FILE) -> Champion:
    """Like get_champion_by_id, but a missing champion raises ChampionNotFoundError."""
    champion = get_champion_by_id(champion_id, path)
    if champion is None:
        raise ChampionNotFoundError(champion_id)
    return champion


def get_champions_by_tag(tag: str, path: Path = CHAMPIONS_FILE) -> list[Champion]:
    """Get all champions with a class tag (Fighter, Mage, Marksman, ...)."""
    return [c for c in load_champions(path).values() if tag in c.tags]


def clear_cache() -> None:
    """Clear the champion cache. Useful for testing or hot-reloading data."""
    load_champions.cache_clear()
