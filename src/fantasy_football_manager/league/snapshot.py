"""Load a point-in-time roster snapshot from YAML.

Example::

    week: 6
    team:
      id: t1
      name: Gridiron Gang
      record: {wins: 3, losses: 2}
      players:
        - {id: p1, name: A. Back, position: RB, team: KC, projected_points: 16.5,
           weekly_points: [12, 18, 22]}
        - {id: p2, name: B. Catcher, position: WR, team: BUF,
           stats: {rec: 6, rec_yd: 84, rec_td: 1}}
    partner: {id: t2, name: Rivals, players: [...]}
    league: [{id: t3, name: Others, players: [...]}]
    trade: {send: [p1], receive: [p9]}
    schedule: {KC: {6: 0.7, 7: 0.4}}

A player may give ``stats`` instead of ``projected_points``; the projection is
then rebuilt from the league's per-stat point values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import yaml

from fantasy_football_manager.domain.player import InjuryStatus, Player, Position
from fantasy_football_manager.domain.scoring import ScoringConfig
from fantasy_football_manager.domain.team import Team, TeamRecord
from fantasy_football_manager.exceptions import FfmException
from fantasy_football_manager.trade.models import TradeProposal
from fantasy_football_manager.trade.schedule import StaticScheduleSource
from fantasy_football_manager.valuation.points import points_from_stats

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class SnapshotError(FfmException):
    """Raised when a snapshot file is missing or malformed."""


@dataclass(frozen=True)
class Snapshot:
    team: Team
    partner: Team | None = None
    league_teams: tuple[Team, ...] = ()
    trade: TradeProposal | None = None
    schedule: StaticScheduleSource | None = None
    week: int | None = None

    def all_teams(self) -> list[Team]:
        teams = [self.team]
        if self.partner is not None:
            teams.append(self.partner)
        teams.extend(t for t in self.league_teams if t.team_id not in {x.team_id for x in teams})
        return teams


def _require(raw: dict[str, Any], key: str, context: str) -> Any:
    if key not in raw:
        raise SnapshotError(f"{context}: missing required field '{key}'")
    return raw[key]


def _number(raw: Any, key: str, context: str, kind: type[float] | type[int] = float) -> float:
    try:
        return kind(raw)
    except (TypeError, ValueError):
        raise SnapshotError(f"{context}: '{key}' expected a number, got {raw!r}") from None


def parse_player(raw: dict[str, Any], stat_points: dict[str, float]) -> Player:
    player_id = str(_require(raw, "id", "player"))
    context = f"Player '{player_id}'"
    raw_position = str(_require(raw, "position", context))
    try:
        position = Position(raw_position.upper())
    except ValueError:
        raise SnapshotError(f"{context}: invalid position '{raw_position}'") from None

    injury: InjuryStatus | None = None
    if raw.get("injury_status") is not None:
        try:
            injury = InjuryStatus(str(raw["injury_status"]).lower())
        except ValueError:
            raise SnapshotError(f"{context}: invalid injury_status '{raw['injury_status']}'") from None

    if "projected_points" in raw:
        projected = _number(raw["projected_points"], "projected_points", context)
    elif "stats" in raw:
        raw_stats = raw["stats"]
        if not isinstance(raw_stats, dict):
            raise SnapshotError(f"{context}: 'stats' must be a mapping")
        stat_line = {str(k): _number(v, f"stats.{k}", context) for k, v in raw_stats.items()}
        projected = points_from_stats(stat_line, stat_points)
        logger.debug("%s: projection %.1f rebuilt from stats", context, projected)
    else:
        projected = 0.0

    return Player(
        player_id=player_id,
        name=str(raw.get("name", player_id)),
        position=position,
        team=str(raw.get("team", "")),
        fantasy_points=_number(raw.get("fantasy_points", 0.0), "fantasy_points", context),
        projected_points=projected,
        weekly_points=tuple(_number(p, "weekly_points", context) for p in raw.get("weekly_points") or ()),
        injury_status=injury,
        age=int(_number(raw["age"], "age", context, int)) if raw.get("age") is not None else None,
        volatility=_number(raw["volatility"], "volatility", context) if raw.get("volatility") is not None else None,
        opponent=str(raw["opponent"]) if raw.get("opponent") is not None else None,
    )


def parse_team(raw: dict[str, Any], stat_points: dict[str, float]) -> Team:
    team_id = str(_require(raw, "id", "team"))
    context = f"Team '{team_id}' record"
    raw_record = raw.get("record")
    record = None
    if raw_record is not None:
        record = TeamRecord(
            wins=int(_number(raw_record.get("wins", 0), "wins", context, int)),
            losses=int(_number(raw_record.get("losses", 0), "losses", context, int)),
            ties=int(_number(raw_record.get("ties", 0), "ties", context, int)),
            points_for=_number(raw_record.get("points_for", 0.0), "points_for", context),
        )
    players = tuple(parse_player(p, stat_points) for p in raw.get("players", ()))
    return Team(team_id=team_id, name=str(raw.get("name", team_id)), players=players, record=record)


def _lookup(ids: list[Any], teams: list[Team], side: str) -> tuple[Player, ...]:
    found: list[Player] = []
    for raw_id in ids:
        matches = (t.find_player(str(raw_id)) for t in teams)
        player = next((p for p in matches if p is not None), None)
        if player is None:
            raise SnapshotError(f"Trade {side}: unknown player id '{raw_id}'")
        found.append(player)
    return tuple(found)


def parse_snapshot(data: dict[str, Any], scoring_config: ScoringConfig | None = None) -> Snapshot:
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a mapping")
    if scoring_config is None:
        scoring_config = ScoringConfig()
    stat_points = scoring_config.points_table()

    team = parse_team(_require(data, "team", "snapshot"), stat_points)
    partner = parse_team(data["partner"], stat_points) if data.get("partner") is not None else None
    league_teams = tuple(parse_team(t, stat_points) for t in data.get("league", ()))

    trade = None
    raw_trade = data.get("trade")
    if raw_trade is not None:
        others = [partner] if partner is not None else []
        others.extend(league_teams)
        trade = TradeProposal(
            sending=_lookup(list(raw_trade.get("send", ())), [team], "send"),
            receiving=_lookup(list(raw_trade.get("receive", ())), others, "receive"),
            partner_team=partner,
        )

    schedule = None
    raw_schedule = data.get("schedule")
    if raw_schedule is not None:
        schedule = StaticScheduleSource(
            {
                str(nfl): {
                    int(_number(w, "week", f"Schedule '{nfl}'", int)): _number(v, str(w), f"Schedule '{nfl}'")
                    for w, v in weeks.items()
                }
                for nfl, weeks in raw_schedule.items()
            }
        )

    week = int(_number(data["week"], "week", "snapshot", int)) if data.get("week") is not None else None
    return Snapshot(
        team=team,
        partner=partner,
        league_teams=league_teams,
        trade=trade,
        schedule=schedule,
        week=week,
    )


def load_snapshot(path: Path, scoring_config: ScoringConfig | None = None) -> Snapshot:
    if not path.exists():
        raise SnapshotError(f"Snapshot file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise SnapshotError(f"Could not parse {path}: {e}") from e
    return parse_snapshot(data, scoring_config)
