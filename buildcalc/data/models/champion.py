"""Champion data model."""

from enum import StrEnum

from pydantic import BaseModel, Field


class ResourceType(StrEnum):
    """Champion resource bar."""
    MANA = "mana"
    ENERGY = "energy"
    NONE = "none"


class ChampionSpell(BaseModel):
    """Champion ability as shipped by the game data files."""
    id: str
    name: str
    description: str = ""
    tooltip: str = ""


class Champion(BaseModel):
    """Champion record in canonical stat vocabulary. Read-only to the engine."""
    id: str = Field(..., description="Data key, e.g. 'MonkeyKing'")
    key: str = Field(default="", description="Numeric key as a string")
    name: str = Field(..., description="Display name")
    title: str = ""
    tags: list[str] = Field(default_factory=list)
    stats: dict[str, float] = Field(default_factory=dict, description="Level 1 stats and per-level growth")
    partype: str = Field(default="Mana", description="Resource name as shipped")
    resource_type: ResourceType = ResourceType.MANA
    spells: list[ChampionSpell] = Field(default_factory=list)

    model_config = {"frozen": True, "use_enum_values": True}

    def stat(self, name: str) -> float:
        return self.stats.get(name, 0.0)

    def spell(self, spell_id: str) -> ChampionSpell | None:
        for spell in self.spells:
            if spell.id == spell_id:
                return spell
        return None
