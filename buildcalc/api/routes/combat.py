"""
Combat calculation API routes.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_combat_service
from ..schemas.combat import CombatRequest, CombatResultSchema
from ..services.combat_service import CombatService

router = APIRouter()


@router.post("/calculate", response_model=CombatResultSchema)
async def calculate_combat(
    request: CombatRequest,
    service: CombatService = Depends(get_combat_service),
):
    """
    Damage, DPS and time to kill of the attacker against the target.

    Ability damage is a rough tooltip estimate.
    """
    try:
        return service.calculate(request)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
