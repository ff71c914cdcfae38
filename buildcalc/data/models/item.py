"""Item data model."""

from typing import Optional

from pydantic import BaseModel, Field


class ItemGold(BaseModel):
    """Item cost."""
    base: int = 0
    total: int = 0
    sell: int = 0
    purchasable: bool = True


class ItemEffect(BaseModel):
    """Numbered effect amount (Effect1Amount, Effect2Amount, ...)."""
    index: int
    value: float


class NamedEffect(BaseModel):
    """Named passive or active parsed from the item description."""
    name: str
    description: str = ""


class Item(BaseModel):
    """Item record in canonical stat vocabulary. Read-only to the engine."""
    id: str = Field(..., description="Item id, e.g. '3031'")
    name: str = Field(..., description="Display name")
    description: str = ""
    plaintext: str = ""
    gold: ItemGold = Field(default_factory=ItemGold)
    stats: dict[str, float] = Field(default_factory=dict, description="Flat or *_percent stat deltas")
    builds_from: list[str] = Field(default_factory=list)
    builds_into: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    depth: int = 1
    effects: list[ItemEffect] = Field(default_factory=list)
    passives: list[NamedEffect] = Field(default_factory=list)
    actives: list[NamedEffect] = Field(default_factory=list)

    model_config = {"frozen": True}

    def stat(self, key: str) -> float:
        return self.stats.get(key, 0.0)

    @property
    def total_cost(self) -> int:
        return self.gold.total

    @property
    def is_purchasable(self) -> bool:
        return self.gold.purchasable

    def passive(self, name: str) -> Optional[NamedEffect]:
        for passive in self.passives:
            if passive.name == name:
                return passive
        return None
