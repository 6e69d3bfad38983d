import json

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.domain.scoring import ScoringConfig
from fantasy_football_manager.lineup.optimizer import optimize_lineup
from fantasy_football_manager.serialization import to_dict, to_json
from fantasy_football_manager.trade.analyzer import analyze_trade
from fantasy_football_manager.trade.models import TradeProposal
from tests.fakes.players import make_player, make_team, standard_roster


class TestToDict:
    def test_player_reference(self) -> None:
        player = make_player("p1", Position.WR, name="Catcher")
        assert to_dict(player) == {"player_id": "p1", "name": "Catcher", "position": "WR"}

    def test_team_reference(self) -> None:
        assert to_dict(make_team([make_player()], team_id="t9", name="Nine")) == {"team_id": "t9", "name": "Nine"}

    def test_enum_keys_and_tuples(self) -> None:
        assert to_dict({Position.RB: (1, 2)}) == {"RB": [1, 2]}

    def test_lineup_advice(self) -> None:
        payload = to_dict(optimize_lineup(standard_roster()))
        assert payload["risk_mode"] == "balanced"
        assert payload["starters"][0]["slot"] == "QB"
        assert payload["starters"][0]["player"]["player_id"] == "qb1"
        assert payload["unfilled_slots"] == []


class TestToJson:
    def test_trade_analysis_round_trips_through_json(self) -> None:
        roster = standard_roster()
        proposal = TradeProposal(sending=(roster[1],), receiving=(make_player("x", Position.WR, 18.0),))
        analysis = analyze_trade(proposal, make_team(roster), ScoringConfig())
        payload = json.loads(to_json(analysis, indent=2))
        assert payload["recommendation"] in {"accept", "reject", "counter", "consider"}
        assert payload["proposal"]["sending"] == [{"player_id": "rb1", "name": "Player rb1", "position": "RB"}]
        assert set(payload["immediate_impact"]["position_strength"]) == {"QB", "RB", "WR", "TE"}
        assert payload["counter_proposal"] is None
