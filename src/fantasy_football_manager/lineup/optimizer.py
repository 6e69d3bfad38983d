"""Risk-adjusted starting lineup selection.

Each risk mode scores players by ``projection + w * volatility`` and fills the
slot schema greedily: fixed-position slots first, in schema order, then flex
slots narrowest-first from whatever eligible players remain, reseating flex
players when that is the only way to fill a seat. The same procedure with
``utility = projection`` gives the risk-neutral baseline, and the difference
between the two lineups is reported as a list of explained changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fantasy_football_manager.analytics.trend import analyze_trend
from fantasy_football_manager.domain.slots import DEFAULT_SLOT_SCHEMA
from fantasy_football_manager.lineup.models import LineupChange, LineupSlot, RiskMode, RosterAdvice
from fantasy_football_manager.lineup.presets import DEFAULT_VOLATILITY, FALLBACK_VOLATILITY, RISK_PRESETS

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from fantasy_football_manager.domain.player import Player
    from fantasy_football_manager.domain.slots import SlotSchema

logger = logging.getLogger(__name__)

MIN_WEEKS_FOR_VOLATILITY: int = 2


def player_volatility(player: Player) -> float:
    """Supplied volatility, else spread of weekly scores, else a positional default."""
    if player.volatility is not None:
        return player.volatility
    if len(player.weekly_points) >= MIN_WEEKS_FOR_VOLATILITY:
        return analyze_trend(player.weekly_points).std_dev
    return DEFAULT_VOLATILITY.get(player.position, FALLBACK_VOLATILITY)


def utility_score(player: Player, risk_mode: RiskMode) -> float:
    weight = RISK_PRESETS[risk_mode].volatility_weight
    return player.projected_points + weight * player_volatility(player)


def median_utility(player: Player) -> float:
    return player.projected_points


@dataclass(frozen=True)
class FilledLineup:
    starters: tuple[LineupSlot, ...]
    unfilled_slots: tuple[str, ...]

    @property
    def players(self) -> list[Player]:
        return [s.player for s in self.starters if s.player is not None]


def fill_lineup(
    roster: Sequence[Player],
    slot_schema: SlotSchema,
    utility: Callable[[Player], float],
) -> FilledLineup:
    """Fill fixed slots greedily, then seat flex slots narrowest-first.

    Ties on utility go to higher projection, then to earlier roster position.
    A flex seat left empty by the greedy pass is repaired with an augmenting
    path, so a wide flex slot never strands a narrower one that could be filled.
    """
    ranked = sorted(
        ((i, p, utility(p)) for i, p in enumerate(roster) if p.is_active),
        key=lambda t: (-t[2], -t[1].projected_points, t[0]),
    )
    used: set[int] = set()
    filled: dict[int, list[LineupSlot]] = {}
    slots = slot_schema.starting_slots()

    for idx, slot in enumerate(slots):
        if slot_schema.is_flex(slot.position):
            continue
        eligible = slot_schema.eligible_positions(slot.position)
        chosen: list[LineupSlot] = []
        for i, player, score in ranked:
            if len(chosen) == slot.count:
                break
            if i in used or player.position not in eligible:
                continue
            used.add(i)
            chosen.append(LineupSlot(slot=slot.position, player=player, utility=score))
        chosen.extend(LineupSlot(slot=slot.position, player=None) for _ in range(slot.count - len(chosen)))
        filled[idx] = chosen

    flex = sorted(
        (idx for idx, slot in enumerate(slots) if slot_schema.is_flex(slot.position)),
        key=lambda idx: len(slot_schema.eligible_positions(slots[idx].position)),
    )
    seats = [idx for idx in flex for _ in range(slots[idx].count)]
    seated: dict[int, int] = {}
    holder: dict[int, int] = {}

    def accepts(seat: int, player: Player) -> bool:
        return player.position in slot_schema.eligible_positions(slots[seats[seat]].position)

    def seat_player(seat: int, visited: set[int]) -> bool:
        for i, player, _ in ranked:
            if i in used or i in visited or not accepts(seat, player):
                continue
            visited.add(i)
            if i not in holder or seat_player(holder[i], visited):
                seated[seat] = i
                holder[i] = seat
                return True
        return False

    for seat in range(len(seats)):
        best = next((i for i, p, _ in ranked if i not in used and i not in holder and accepts(seat, p)), None)
        if best is not None:
            seated[seat] = best
            holder[best] = seat
    for seat in range(len(seats)):
        if seat not in seated and seat_player(seat, set()):
            logger.debug("Reseated flex players to fill %s", slots[seats[seat]].position)

    by_index = {i: (p, score) for i, p, score in ranked}
    for idx in flex:
        position = slots[idx].position
        entries = [
            LineupSlot(slot=position, player=by_index[seated[seat]][0], utility=by_index[seated[seat]][1])
            for seat, seat_idx in enumerate(seats)
            if seat_idx == idx and seat in seated
        ]
        entries.sort(key=lambda s: -(s.utility or 0.0))
        entries.extend(LineupSlot(slot=position, player=None) for _ in range(slots[idx].count - len(entries)))
        filled[idx] = entries

    starters = tuple(entry for idx in range(len(slots)) for entry in filled[idx])
    unfilled = tuple(s.slot for s in starters if s.player is None)
    return FilledLineup(starters=starters, unfilled_slots=unfilled)


def build_median_lineup(roster: Sequence[Player], slot_schema: SlotSchema = DEFAULT_SLOT_SCHEMA) -> FilledLineup:
    return fill_lineup(roster, slot_schema, median_utility)


def _change_reason(player_in: Player, player_out: Player, risk_mode: RiskMode) -> str:
    vol_in = player_volatility(player_in)
    vol_out = player_volatility(player_out)
    if risk_mode is RiskMode.SAFE:
        return f"{player_in.name} has lower volatility ({vol_in:.1f} vs {vol_out:.1f}) with comparable projection."
    if risk_mode is RiskMode.AGGRESSIVE:
        opponent = player_in.opponent or "opp"
        return (
            f"{player_in.name} offers higher ceiling given volatility "
            f"(+{vol_in - vol_out:.1f} std) and upside vs {opponent}."
        )
    delta = player_in.projected_points - player_out.projected_points
    return f"{player_in.name} yields a stronger median outcome (proj {delta:+.1f})."


def diff_lineups(
    chosen: Sequence[Player],
    baseline: Sequence[Player],
    slot_schema: SlotSchema,
    risk_mode: RiskMode,
) -> list[LineupChange]:
    """Pair each baseline starter that lost its spot with the starter who took it.

    Replacements are matched within a slot family first (positions that some
    flex slot admits together), falling back to any unmatched newcomer.
    """
    chosen_ids = {p.player_id for p in chosen}
    baseline_ids = {p.player_id for p in baseline}
    newcomers = [p for p in chosen if p.player_id not in baseline_ids]

    used: set[str] = set()
    seen: set[tuple[str, str]] = set()
    changes: list[LineupChange] = []
    for out in baseline:
        if out.player_id in chosen_ids:
            continue
        available = [p for p in newcomers if p.player_id not in used]
        replacement = next(
            (p for p in available if slot_schema.same_family(p.position, out.position)),
            available[0] if available else None,
        )
        if replacement is None:
            continue
        pair = (replacement.player_id, out.player_id)
        if pair in seen:
            continue
        seen.add(pair)
        used.add(replacement.player_id)
        changes.append(
            LineupChange(player_in=replacement, player_out=out, reason=_change_reason(replacement, out, risk_mode))
        )
    return changes


def optimize_lineup(
    roster: Sequence[Player],
    risk_mode: RiskMode = RiskMode.BALANCED,
    slot_schema: SlotSchema = DEFAULT_SLOT_SCHEMA,
) -> RosterAdvice:
    chosen = fill_lineup(roster, slot_schema, lambda p: utility_score(p, risk_mode))
    baseline = build_median_lineup(roster, slot_schema)

    if chosen.unfilled_slots:
        logger.warning("No eligible players for slot(s): %s", ", ".join(chosen.unfilled_slots))

    starting_ids = {p.player_id for p in chosen.players}
    bench = tuple(p for p in roster if p.player_id not in starting_ids)
    changes = diff_lineups(chosen.players, baseline.players, slot_schema, risk_mode)

    logger.debug(
        "Lineup (%s): %d starters, %d bench, %d changes vs median",
        risk_mode,
        len(starting_ids),
        len(bench),
        len(changes),
    )
    return RosterAdvice(
        starters=chosen.starters,
        bench=bench,
        changes=tuple(changes),
        risk_mode=risk_mode,
        unfilled_slots=chosen.unfilled_slots,
    )
