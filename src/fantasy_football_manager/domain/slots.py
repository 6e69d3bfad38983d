from __future__ import annotations

from dataclasses import dataclass, field

from fantasy_football_manager.domain.player import Position

_NON_STARTING_SLOTS: frozenset[str] = frozenset({"BN", "IR"})

FLEX_POSITIONS: frozenset[Position] = frozenset({Position.RB, Position.WR, Position.TE})


@dataclass(frozen=True)
class RosterSlot:
    position: str
    count: int


@dataclass(frozen=True)
class SlotSchema:
    """Starting lineup requirements.

    Fixed slots are filled in order, flex slots narrowest-first. A slot whose
    position is a key of ``flex_eligibility`` is a flex slot and accepts any
    of the mapped positions; every other slot accepts exactly the position it
    names.
    """

    slots: tuple[RosterSlot, ...]
    flex_eligibility: dict[str, frozenset[Position]] = field(default_factory=lambda: {"FLEX": FLEX_POSITIONS})

    def is_flex(self, slot: str) -> bool:
        return slot in self.flex_eligibility

    def eligible_positions(self, slot: str) -> frozenset[Position]:
        if slot in self.flex_eligibility:
            return self.flex_eligibility[slot]
        try:
            return frozenset({Position(slot)})
        except ValueError:
            return frozenset()

    def starting_slots(self) -> list[RosterSlot]:
        return [s for s in self.slots if s.position not in _NON_STARTING_SLOTS and s.count > 0]

    def same_family(self, a: Position, b: Position) -> bool:
        """Two positions share a slot family when they are equal or some flex slot admits both."""
        if a == b:
            return True
        return any(a in eligible and b in eligible for eligible in self.flex_eligibility.values())

    def cache_key(self) -> tuple[object, ...]:
        flex = tuple(sorted((name, tuple(sorted(positions))) for name, positions in self.flex_eligibility.items()))
        return (tuple((s.position, s.count) for s in self.slots), flex)


DEFAULT_SLOT_SCHEMA: SlotSchema = SlotSchema(
    slots=(
        RosterSlot(position="QB", count=1),
        RosterSlot(position="RB", count=2),
        RosterSlot(position="WR", count=2),
        RosterSlot(position="TE", count=1),
        RosterSlot(position="FLEX", count=1),
        RosterSlot(position="K", count=1),
        RosterSlot(position="DEF", count=1),
    )
)
