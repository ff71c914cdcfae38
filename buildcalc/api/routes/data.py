"""
Static data API routes.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from buildcalc.data.loaders import ChampionNotFoundError

from ..dependencies import get_build_service
from ..services.build_service import BuildService

router = APIRouter()


# === Champions ===


@router.get("/champions")
async def get_all_champions(
    tag: Optional[str] = None,
    service: BuildService = Depends(get_build_service),
) -> List[Dict[str, Any]]:
    """Get all champions, optionally filtered by class tag."""
    return [c.model_dump() for c in service.list_champions(tag)]


@router.get("/champions/{champion_id}")
async def get_champion(
    champion_id: str,
    service: BuildService = Depends(get_build_service),
) -> Dict[str, Any]:
    """Get specific champion by ID."""
    try:
        return service.get_champion(champion_id).model_dump()
    except ChampionNotFoundError:
        raise HTTPException(status_code=404, detail="Champion not found")


# === Items ===


@router.get("/items")
async def get_all_items(
    tag: Optional[str] = None,
    service: BuildService = Depends(get_build_service),
) -> List[Dict[str, Any]]:
    """Get all purchasable items, optionally filtered by shop tag."""
    return [i.model_dump() for i in service.list_items(tag)]


@router.get("/items/{item_id}")
async def get_item(
    item_id: str,
    service: BuildService = Depends(get_build_service),
) -> Dict[str, Any]:
    """Get specific item by ID."""
    item = service.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return item.model_dump()


# === Runes ===


@router.get("/shards")
async def get_stat_shards(
    level: int = 1,
    service: BuildService = Depends(get_build_service),
) -> Dict[str, Dict[str, Dict[str, float]]]:
    """Stat shard choices per slot with their bonus at a level."""
    return service.list_shards(level)
