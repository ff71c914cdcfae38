"""Build Session.

A build is an immutable BuildSession value. Mutations are events folded by
apply_event; final stats are always recomputed in full from a session.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Optional, Union

from buildcalc.combat.penetration import resolve_penetration
from buildcalc.data.models import BuffState, Champion, Item, RuneSelection
from buildcalc.data.models.rune import MAX_PRIMARY_RUNES, MAX_SECONDARY_RUNES

from .buff_pipeline import BuffModifierPipeline
from .constants import MIN_LEVEL, clamp_level
from .item_pipeline import ItemModifierPipeline
from .rules import DEFAULT_RULES, GameRules
from .rune_pipeline import RuneModifierPipeline
from .stat_calculator import FinalStats, StatAggregator


@dataclass(frozen=True)
class BuildSession:
    """One champion with its level, items, runes and buffs."""

    champion: Champion
    level: int = MIN_LEVEL
    items: tuple[Item, ...] = ()
    runes: RuneSelection = field(default_factory=RuneSelection)
    buffs: BuffState = field(default_factory=BuffState)

    @classmethod
    def for_champion(cls, champion: Champion, level: int = MIN_LEVEL) -> "BuildSession":
        """Fresh session for a newly selected champion."""
        return cls(champion=champion, level=clamp_level(level))

    @property
    def item_ids(self) -> list[str]:
        return [item.id for item in self.items]

    def has_item(self, item_id: str) -> bool:
        return any(item.id == item_id for item in self.items)


# =============================================================================
# EVENTS
# =============================================================================
@dataclass(frozen=True)
class SetLevel:
    level: int


@dataclass(frozen=True)
class AddItem:
    item: Item


@dataclass(frozen=True)
class RemoveItem:
    item_id: str


@dataclass(frozen=True)
class ClearItems:
    pass


@dataclass(frozen=True)
class SetKeystone:
    keystone: Optional[int]


@dataclass(frozen=True)
class SetPrimaryRunes:
    rune_ids: tuple[int, ...]


@dataclass(frozen=True)
class SetSecondaryRunes:
    rune_ids: tuple[int, ...]


@dataclass(frozen=True)
class SetStatShards:
    offense: Optional[str] = None
    flex: Optional[str] = None
    defense: Optional[str] = None


@dataclass(frozen=True)
class SetBaron:
    active: bool


@dataclass(frozen=True)
class SetDragonStacks:
    stacks: int


SessionEvent = Union[
    SetLevel,
    AddItem,
    RemoveItem,
    ClearItems,
    SetKeystone,
    SetPrimaryRunes,
    SetSecondaryRunes,
    SetStatShards,
    SetBaron,
    SetDragonStacks,
]


@dataclass(frozen=True)
class EventResult:
    """New session plus whether the event took effect."""

    session: BuildSession
    accepted: bool = True


# =============================================================================
# REDUCER
# =============================================================================
def apply_event(
    session: BuildSession,
    event: SessionEvent,
    rules: GameRules = DEFAULT_RULES,
) -> EventResult:
    """
    Apply one event to a session.

    Out of range levels are clamped. Adding past item capacity, or removing an
    item that is not equipped, returns the session unchanged with
    accepted=False. Duplicate items are not checked here.

    Args:
        session: Current session.
        event: Mutation to apply.
        rules: Rule tables (item capacity).

    Returns:
        EventResult with the new session.
    """
    if isinstance(event, SetLevel):
        return EventResult(replace(session, level=clamp_level(event.level)))

    if isinstance(event, AddItem):
        if len(session.items) >= rules.items.max_items:
            return EventResult(session, accepted=False)
        return EventResult(replace(session, items=session.items + (event.item,)))

    if isinstance(event, RemoveItem):
        for index, item in enumerate(session.items):
            if item.id == event.item_id:
                items = session.items[:index] + session.items[index + 1:]
                return EventResult(replace(session, items=items))
        return EventResult(session, accepted=False)

    if isinstance(event, ClearItems):
        return EventResult(replace(session, items=()))

    if isinstance(event, SetKeystone):
        return EventResult(_with_runes(session, keystone=event.keystone))

    if isinstance(event, SetPrimaryRunes):
        return EventResult(
            _with_runes(session, primary_runes=tuple(event.rune_ids[:MAX_PRIMARY_RUNES]))
        )

    if isinstance(event, SetSecondaryRunes):
        return EventResult(
            _with_runes(session, secondary_runes=tuple(event.rune_ids[:MAX_SECONDARY_RUNES]))
        )

    if isinstance(event, SetStatShards):
        runes = RuneSelection.model_validate({
            **session.runes.model_dump(),
            "offense": event.offense,
            "flex": event.flex,
            "defense": event.defense,
        })
        return EventResult(replace(session, runes=runes))

    if isinstance(event, SetBaron):
        return EventResult(_with_buffs(session, baron=event.active))

    if isinstance(event, SetDragonStacks):
        return EventResult(_with_buffs(session, dragon_stacks=max(0, event.stacks)))

    raise TypeError(f"Unknown session event: {event!r}")


def reduce_session(
    session: BuildSession,
    events: Iterable[SessionEvent],
    rules: GameRules = DEFAULT_RULES,
) -> BuildSession:
    """Fold a sequence of events; refused events leave the session as it was."""
    for event in events:
        session = apply_event(session, event, rules).session
    return session


def _with_runes(session: BuildSession, **changes: Any) -> BuildSession:
    return replace(session, runes=session.runes.model_copy(update=changes))


def _with_buffs(session: BuildSession, **changes: Any) -> BuildSession:
    return replace(session, buffs=session.buffs.model_copy(update=changes))


# =============================================================================
# FINAL STATS
# =============================================================================
def calculate_final_stats(session: BuildSession, rules: GameRules = DEFAULT_RULES) -> FinalStats:
    """
    Run the full pipeline: level scaling, items, penetration, runes, buffs.

    Args:
        session: Build to resolve.
        rules: Rule tables for every pipeline.

    Returns:
        FinalStats snapshot.
    """
    items = list(session.items)
    item_pipeline = ItemModifierPipeline(rules.items, rules.stat_mapping.unmapped_prefix)

    stats = StatAggregator().scale_base_stats(
        session.champion.stats,
        session.level,
        bonus_attack_speed=item_pipeline.bonus_attack_speed(items),
    )
    stats = item_pipeline.apply_items(stats, items)
    stats.update(resolve_penetration(items).to_dict())
    stats = RuneModifierPipeline(rules.shards).apply_runes(stats, session.runes, session.level)
    stats = BuffModifierPipeline(rules.buffs).apply_buffs(stats, session.buffs)

    return FinalStats.from_stats(stats)


def debug_info(session: BuildSession, rules: GameRules = DEFAULT_RULES) -> dict[str, Any]:
    """Champion, level, item names, final stats and penetration of a session."""
    return {
        "champion": session.champion.name,
        "level": session.level,
        "items": [item.name for item in session.items],
        "stats": calculate_final_stats(session, rules).to_dict(),
        "penetration": resolve_penetration(session.items).to_dict(),
    }
