"""
Build-related API schemas.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from buildcalc.data.models import BuffState, RuneSelection


class BuildRequest(BaseModel):
    """A champion build to resolve."""

    champion_id: str = Field(..., description="Champion id, e.g. 'Garen'")
    level: int = Field(default=1, description="Clamped to 1-18")
    item_ids: List[str] = Field(default_factory=list, description="Equipped item ids, in slot order")
    runes: RuneSelection = Field(default_factory=RuneSelection)
    buffs: BuffState = Field(default_factory=BuffState)


class BuildStatsResponse(BaseModel):
    """Final stats of a build."""

    champion_id: str
    champion_name: str
    level: int
    item_ids: List[str]
    stats: Dict[str, Any]


class BuildSummaryResponse(BaseModel):
    """Cost and penetration overview of a build."""

    champion_name: str
    level: int
    items: List[str]
    total_cost: int
    gold_efficiency: int
    stat_totals: Dict[str, float]
    penetration: Dict[str, float]


class CompareRequest(BaseModel):
    """Two builds to compare."""

    build_a: BuildRequest
    build_b: BuildRequest


class StatDifferenceSchema(BaseModel):
    """Change of one stat from build A to build B."""

    stat: str
    before: float
    after: float
    difference: float
    percent: Optional[float] = None


class CompareResponse(BaseModel):
    """Stat differences between two builds (positive = build B is higher)."""

    differences: Dict[str, StatDifferenceSchema]
    cost_difference: int
