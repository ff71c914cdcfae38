"""API services."""

from .build_service import BuildService
from .combat_service import CombatService

__all__ = [
    "BuildService",
    "CombatService",
]
