from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.trade.models import TradeProposal

if TYPE_CHECKING:
    from fantasy_football_manager.domain.player import Player
    from fantasy_football_manager.domain.scoring import ScoringConfig
    from fantasy_football_manager.domain.team import Team
    from fantasy_football_manager.valuation.models import Valuator

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDED_POSITIONS: frozenset[Position] = frozenset({Position.QB, Position.K, Position.DEF})
EXPENDABLE_DEPTH: int = 3


class CounterProposalGenerator:
    """Search for a single added player that rebalances an unfair proposal.

    A negative fairness score means the trade favors the partner, so a player
    is requested from the partner roster. A positive score means it favors us,
    so one of our own expendable players is offered. ``None`` means no
    candidate landed within tolerance of the deficit.
    """

    def __init__(
        self,
        valuator: Valuator,
        deficit_scale: float = 0.5,
        tolerance: float = 0.3,
        max_candidates: int = 50,
        excluded_positions: frozenset[Position] = DEFAULT_EXCLUDED_POSITIONS,
    ) -> None:
        self._valuator = valuator
        self._deficit_scale = deficit_scale
        self._tolerance = tolerance
        self._max_candidates = max_candidates
        self._excluded_positions = excluded_positions

    def counter(
        self,
        proposal: TradeProposal,
        my_team: Team,
        fairness_score: float,
        scoring_config: ScoringConfig,
    ) -> TradeProposal | None:
        if fairness_score == 0:
            return None
        deficit = self._deficit_scale * abs(fairness_score)
        in_proposal = proposal.player_ids()

        if fairness_score < 0:
            if proposal.partner_team is None:
                logger.debug("No partner roster to request a balancing player from")
                return None
            candidates = self._request_candidates(proposal.partner_team, in_proposal)
        else:
            candidates = self._offer_candidates(my_team, in_proposal, scoring_config)

        match = self._find_match(candidates, deficit, scoring_config)
        if match is None:
            logger.debug("No counter candidate within %.0f%% of deficit %.1f", self._tolerance * 100, deficit)
            return None

        note = f"Counter-proposal to balance trade (original fairness: {fairness_score:.0f})"
        if fairness_score < 0:
            return TradeProposal(
                sending=proposal.sending,
                receiving=(*proposal.receiving, match),
                partner_team=proposal.partner_team,
                notes=(*proposal.notes, note),
            )
        return TradeProposal(
            sending=(*proposal.sending, match),
            receiving=proposal.receiving,
            partner_team=proposal.partner_team,
            notes=(*proposal.notes, note),
        )

    def _eligible(self, player: Player, in_proposal: set[str]) -> bool:
        return player.position not in self._excluded_positions and player.player_id not in in_proposal

    def _request_candidates(self, partner: Team, in_proposal: set[str]) -> list[Player]:
        return [p for p in partner.players if self._eligible(p, in_proposal)]

    def _offer_candidates(self, my_team: Team, in_proposal: set[str], scoring_config: ScoringConfig) -> list[Player]:
        """Our lowest-valued player at each position where we hold more than three."""
        by_position: dict[Position, list[Player]] = {}
        for p in my_team.players:
            by_position.setdefault(p.position, []).append(p)

        expendable: list[Player] = []
        for players in by_position.values():
            if len(players) <= EXPENDABLE_DEPTH:
                continue
            pool = [p for p in players if self._eligible(p, in_proposal)]
            if pool:
                expendable.append(min(pool, key=lambda p: self._value(p, scoring_config)))
        return expendable

    def _value(self, player: Player, scoring_config: ScoringConfig) -> float:
        return self._valuator.value(player, scoring_config).final_value

    def _find_match(self, candidates: list[Player], deficit: float, scoring_config: ScoringConfig) -> Player | None:
        if len(candidates) > self._max_candidates:
            logger.debug("Capping counter search at %d of %d candidates", self._max_candidates, len(candidates))
            candidates = candidates[: self._max_candidates]

        scored = sorted(
            ((self._value(p, scoring_config), i, p) for i, p in enumerate(candidates)),
            key=lambda t: (t[0], t[1]),
        )
        band = self._tolerance * deficit
        for value, _, player in scored:
            if abs(value - deficit) < band:
                logger.debug("Counter candidate %s value=%.1f for deficit %.1f", player.player_id, value, deficit)
                return player
        return None
