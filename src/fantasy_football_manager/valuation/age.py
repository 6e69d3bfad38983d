from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from fantasy_football_manager.domain.player import Position

if TYPE_CHECKING:
    from fantasy_football_manager.domain.player import Player


class AgePolicy(Protocol):
    def multiplier(self, player: Player) -> float: ...

    def cache_key(self) -> tuple[object, ...]: ...


class RedraftAgePolicy:
    """Single-season leagues: age never matters."""

    def multiplier(self, player: Player) -> float:
        return 1.0

    def cache_key(self) -> tuple[object, ...]:
        return ("redraft",)


DEFAULT_PEAK_AGES: dict[Position, int] = {
    Position.QB: 30,
    Position.RB: 26,
    Position.WR: 27,
    Position.TE: 28,
}


@dataclass(frozen=True)
class DynastyAgePolicy:
    """Dynasty and keeper leagues reward youth and discount players past their peak."""

    peak_ages: dict[Position, int] = field(default_factory=lambda: dict(DEFAULT_PEAK_AGES))
    default_peak_age: int = 28
    youth_premium: float = 0.04
    max_premium: float = 0.25
    decline_rate: float = 0.08
    floor: float = 0.5

    def peak_age(self, position: Position) -> int:
        return self.peak_ages.get(position, self.default_peak_age)

    def multiplier(self, player: Player) -> float:
        if player.age is None:
            return 1.0
        years = self.peak_age(player.position) - player.age
        if years >= 0:
            return 1.0 + min(self.max_premium, years * self.youth_premium)
        return max(self.floor, 1.0 + years * self.decline_rate)

    def cache_key(self) -> tuple[object, ...]:
        return (
            "dynasty",
            tuple(sorted((str(p), a) for p, a in self.peak_ages.items())),
            self.default_peak_age,
            self.youth_premium,
            self.max_premium,
            self.decline_rate,
            self.floor,
        )
