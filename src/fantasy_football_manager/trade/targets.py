"""Find players on other rosters worth pursuing, with a value-matched offer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fantasy_football_manager.trade.models import TradeTarget
from fantasy_football_manager.valuation.valuator import PlayerValuator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fantasy_football_manager.domain.player import Player, Position
    from fantasy_football_manager.domain.scoring import ScoringConfig
    from fantasy_football_manager.domain.team import Team
    from fantasy_football_manager.valuation.models import Valuator

logger = logging.getLogger(__name__)

BASE_TARGETABILITY: float = 0.5
MIN_TARGETABILITY: float = 0.3
MAX_TARGETS: int = 10
SINGLE_PLAYER_BAND: float = 0.2
PACKAGE_FLOOR: float = 0.9


class TradeTargetFinder:
    def __init__(self, valuator: Valuator | None = None) -> None:
        self._valuator: Valuator = valuator or PlayerValuator()

    def _value(self, player: Player, scoring_config: ScoringConfig) -> float:
        return self._valuator.value(player, scoring_config).final_value

    def targetability(self, player: Player, owner: Team, scoring_config: ScoringConfig) -> float:
        """0..1 estimate of how willing the owner is to move the player."""
        score = BASE_TARGETABILITY
        same_position = sorted(
            owner.players_at(player.position), key=lambda p: self._value(p, scoring_config), reverse=True
        )
        rank = next(i for i, p in enumerate(same_position) if p.player_id == player.player_id)
        if rank > 2:
            score += 0.2
        if len(same_position) > 4:
            score += 0.15
        record = owner.record
        if record is not None and record.wins > record.losses * 1.5:
            score -= 0.1
        if player.fantasy_points > player.projected_points:
            score -= 0.15
        return max(0.0, min(1.0, score))

    def fair_offer(self, target: Player, my_team: Team, scoring_config: ScoringConfig) -> tuple[Player, ...]:
        """A single player within 20% of the target's value, else a package worth at least 90% of it."""
        target_value = self._value(target, scoring_config)
        ranked = sorted(my_team.players, key=lambda p: self._value(p, scoring_config), reverse=True)

        offer: list[Player] = []
        offer_value = 0.0
        for player in ranked:
            value = self._value(player, scoring_config)
            if abs(value - target_value) < target_value * SINGLE_PLAYER_BAND:
                return (player,)
            if offer_value < target_value:
                offer.append(player)
                offer_value += value
                if offer_value >= target_value * PACKAGE_FLOOR:
                    return tuple(offer)
        return tuple(offer)

    @staticmethod
    def reasoning(player: Player, owner: Team, targetability: float) -> str:
        reasons: list[str] = []
        if targetability > 0.7:
            reasons.append("Owner likely willing to trade")
        if player.fantasy_points > 15:
            reasons.append("Strong producer")
        if owner.record is not None and owner.record.losses > owner.record.wins:
            reasons.append("Owner may be in sell mode")
        if len(owner.players_at(player.position)) > 3:
            reasons.append(f"Owner has depth at {player.position}")
        return ". ".join(reasons) or "Potential trade candidate"

    def find(
        self,
        my_team: Team,
        league_teams: Iterable[Team],
        position: Position,
        scoring_config: ScoringConfig,
        limit: int = MAX_TARGETS,
    ) -> list[TradeTarget]:
        targets: list[TradeTarget] = []
        for team in league_teams:
            if team.team_id == my_team.team_id:
                continue
            for player in team.players_at(position):
                score = self.targetability(player, team, scoring_config)
                if score <= MIN_TARGETABILITY:
                    continue
                targets.append(
                    TradeTarget(
                        player=player,
                        owner=team,
                        targetability=score,
                        value=self._value(player, scoring_config),
                        suggested_offer=self.fair_offer(player, my_team, scoring_config),
                        reasoning=self.reasoning(player, team, score),
                    )
                )
        targets.sort(key=lambda t: t.targetability * t.player.fantasy_points, reverse=True)
        logger.debug("Found %d %s targets, keeping %d", len(targets), position, min(limit, len(targets)))
        return targets[:limit]


def find_trade_targets(
    my_team: Team,
    league_teams: Iterable[Team],
    position: Position,
    scoring_config: ScoringConfig,
    valuator: Valuator | None = None,
    limit: int = MAX_TARGETS,
) -> list[TradeTarget]:
    return TradeTargetFinder(valuator).find(my_team, league_teams, position, scoring_config, limit)
