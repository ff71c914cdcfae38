"""
Dependency injection for API services.
"""

from functools import lru_cache

from buildcalc.core.rules import DEFAULT_RULES, GameRules, load_rules
from buildcalc.data.loaders.champion_loader import CHAMPIONS_FILE
from buildcalc.data.loaders.item_loader import ITEMS_FILE

from .config import Settings, settings
from .services.build_service import BuildService
from .services.combat_service import CombatService


def rules_from_settings(config: Settings) -> GameRules:
    """Rule tables from RULES_FILE, with the MAX_ITEMS override applied."""
    rules = load_rules(config.RULES_FILE) if config.RULES_FILE else DEFAULT_RULES
    if rules.items.max_items != config.MAX_ITEMS:
        items = rules.items.model_copy(update={"max_items": config.MAX_ITEMS})
        rules = rules.model_copy(update={"items": items})
    return rules


@lru_cache()
def get_build_service() -> BuildService:
    """Get BuildService singleton."""
    champions_file, items_file = CHAMPIONS_FILE, ITEMS_FILE
    if settings.DATA_DIR:
        champions_file = settings.DATA_DIR / "champions" / "champions.json"
        items_file = settings.DATA_DIR / "items" / "items.json"
    return BuildService(
        rules=rules_from_settings(settings),
        champions_file=champions_file,
        items_file=items_file,
    )


@lru_cache()
def get_combat_service() -> CombatService:
    """Get CombatService singleton."""
    return CombatService(get_build_service())
