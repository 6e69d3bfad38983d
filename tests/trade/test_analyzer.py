import logging

import pytest

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.domain.scoring import ScoringConfig
from fantasy_football_manager.exceptions import InvalidProposalError
from fantasy_football_manager.trade.analyzer import (
    TradeAnalyzer,
    analyze_trade,
    confidence_score,
    fairness_score,
    recommend,
    validate_proposal,
)
from fantasy_football_manager.trade.history import InMemoryTradeHistory
from fantasy_football_manager.trade.models import (
    FairnessWeights,
    HistoricalTrade,
    Recommendation,
    ScheduleImpact,
    SimilarTrade,
    TradeProposal,
    TradeReasoning,
)
from tests.fakes.players import CountingValuator, make_player, make_team, standard_roster

CONFIG = ScoringConfig()
NO_SCHEDULE = ScheduleImpact(remaining_delta=0.0, playoff_delta=0.0)


def _wr_swap(sent_value: float, received_value: float, other_value: float = 50.0):
    sent = make_player("s1", Position.WR)
    received = make_player("r1", Position.WR)
    my_team = make_team([sent, make_player("w2", Position.WR)])
    valuator = CountingValuator({"s1": sent_value, "r1": received_value, "w2": other_value})
    return TradeProposal(sending=(sent,), receiving=(received,)), my_team, valuator


class TestValidateProposal:
    def test_empty_sending(self) -> None:
        with pytest.raises(InvalidProposalError, match="send"):
            validate_proposal(TradeProposal(sending=(), receiving=(make_player(),)))

    def test_empty_receiving(self) -> None:
        with pytest.raises(InvalidProposalError, match="receive"):
            validate_proposal(TradeProposal(sending=(make_player(),), receiving=()))

    def test_valid(self) -> None:
        validate_proposal(TradeProposal(sending=(make_player("a"),), receiving=(make_player("b"),)))


class TestFairnessScore:
    def test_even_values(self) -> None:
        assert fairness_score(100.0, 100.0, {}, NO_SCHEDULE) == 0.0

    def test_value_gain(self) -> None:
        assert fairness_score(0.0, 100.0, {}, NO_SCHEDULE) == pytest.approx(50.0)

    def test_value_loss_is_negative(self) -> None:
        assert fairness_score(100.0, 50.0, {}, NO_SCHEDULE) == pytest.approx(-25.0)

    def test_both_zero(self) -> None:
        assert fairness_score(0.0, 0.0, {}, NO_SCHEDULE) == 0.0

    def test_position_and_schedule_terms(self) -> None:
        schedule = ScheduleImpact(remaining_delta=0.2, playoff_delta=0.4)
        score = fairness_score(100.0, 100.0, {Position.WR: 0.5, Position.RB: -0.2}, schedule)
        assert score == pytest.approx(10 * 0.3 + 5 * 0.2 + 10 * 0.4)

    def test_clamped(self) -> None:
        weights = FairnessWeights(value_differential=500.0)
        assert fairness_score(0.0, 10.0, {}, NO_SCHEDULE, weights) == 100.0
        assert fairness_score(10.0, 0.0, {}, NO_SCHEDULE, weights) == -100.0


class TestRecommend:
    @pytest.mark.parametrize(
        ("fairness", "playoff_delta", "expected"),
        [
            (31.0, 0.0, Recommendation.ACCEPT),
            (31.0, -1.0, Recommendation.CONSIDER),
            (40.0, -15.0, Recommendation.REJECT),
            (-31.0, 0.0, Recommendation.REJECT),
            (0.0, -11.0, Recommendation.REJECT),
            (-20.0, 0.0, Recommendation.COUNTER),
            (-10.0, 0.0, Recommendation.CONSIDER),
            (-30.0, 0.0, Recommendation.CONSIDER),
            (30.0, 5.0, Recommendation.CONSIDER),
            (0.0, 0.0, Recommendation.CONSIDER),
        ],
    )
    def test_decision_table(self, fairness: float, playoff_delta: float, expected: Recommendation) -> None:
        assert recommend(fairness, playoff_delta) is expected


class TestConfidenceScore:
    def _reasoning(self, factors: int) -> TradeReasoning:
        return TradeReasoning(pros=tuple(f"p{i}" for i in range(factors)), cons=(), key_factors=())

    def test_base(self) -> None:
        assert confidence_score([], self._reasoning(2)) == pytest.approx(0.5)

    def test_history_and_reasons(self) -> None:
        similar = [SimilarTrade(trade=HistoricalTrade("h1", (), ()), similarity=0.8)]
        assert confidence_score(similar, self._reasoning(4)) == pytest.approx(0.76)

    def test_capped(self) -> None:
        similar = [SimilarTrade(trade=HistoricalTrade("h1", (), ()), similarity=5.0)]
        assert confidence_score(similar, self._reasoning(4)) == pytest.approx(0.95)


class TestTradeAnalyzer:
    def test_identity_trade_is_even(self) -> None:
        roster = standard_roster()
        twin = make_player("x_rb2", Position.RB, 13.0, volatility=7.0)
        proposal = TradeProposal(sending=(roster[2],), receiving=(twin,))
        analysis = analyze_trade(proposal, make_team(roster), CONFIG)
        assert analysis.fairness_score == pytest.approx(0.0)
        assert analysis.recommendation is Recommendation.CONSIDER
        assert analysis.counter_proposal is None
        assert "Trade is relatively even in value" in analysis.reasoning.key_factors

    def test_value_gain_is_favorable(self) -> None:
        proposal, my_team, valuator = _wr_swap(100.0, 150.0)
        analysis = TradeAnalyzer(valuator=valuator).analyze_trade(proposal, my_team, CONFIG)
        assert analysis.fairness_score > 0
        assert analysis.recommendation is not Recommendation.REJECT
        assert analysis.sending_value == 100.0
        assert analysis.receiving_value == 150.0
        assert analysis.immediate_impact.position_strength[Position.WR] == pytest.approx(50.0 / 150.0)
        assert "Getting 50% more value" in analysis.reasoning.pros

    def test_each_player_valued_once(self) -> None:
        proposal, my_team, valuator = _wr_swap(100.0, 150.0)
        TradeAnalyzer(valuator=valuator).analyze_trade(proposal, my_team, CONFIG)
        assert valuator.calls == ["s1", "r1", "w2"]

    def test_empty_side_rejected_before_valuation(self) -> None:
        valuator = CountingValuator()
        proposal = TradeProposal(sending=(), receiving=(make_player("r1"),))
        with pytest.raises(InvalidProposalError):
            TradeAnalyzer(valuator=valuator).analyze_trade(proposal, make_team(standard_roster()), CONFIG)
        assert valuator.calls == []

    def test_accept(self) -> None:
        proposal, my_team, valuator = _wr_swap(50.0, 150.0)
        analysis = TradeAnalyzer(valuator=valuator).analyze_trade(proposal, my_team, CONFIG)
        assert analysis.fairness_score == pytest.approx(50 * 100 / 150 + 10 * 1.0)
        assert analysis.recommendation is Recommendation.ACCEPT

    def test_reject(self) -> None:
        proposal, my_team, valuator = _wr_swap(150.0, 50.0)
        analysis = TradeAnalyzer(valuator=valuator).analyze_trade(proposal, my_team, CONFIG)
        assert analysis.recommendation is Recommendation.REJECT
        assert analysis.counter_proposal is None

    def test_counter_requests_partner_player(self) -> None:
        sent = make_player("s1", Position.WR)
        received = make_player("r1", Position.WR)
        partner = make_team(
            [received, make_player("pq", Position.QB), make_player("p3", Position.RB), make_player("p4")],
            team_id="t2",
        )
        my_team = make_team([sent, make_player("w2", Position.WR)])
        valuator = CountingValuator({"s1": 130.0, "r1": 100.0, "w2": 60.0, "pq": 6.5, "p3": 6.5, "p4": 30.0})
        proposal = TradeProposal(sending=(sent,), receiving=(received,), partner_team=partner)

        analysis = TradeAnalyzer(valuator=valuator).analyze_trade(proposal, my_team, CONFIG)

        assert analysis.recommendation is Recommendation.COUNTER
        assert analysis.counter_proposal is not None
        assert [p.player_id for p in analysis.counter_proposal.receiving] == ["r1", "p3"]
        assert analysis.counter_proposal.sending == proposal.sending

    def test_overlap_warns_but_analyzes(self, caplog: pytest.LogCaptureFixture) -> None:
        roster = standard_roster()
        proposal = TradeProposal(sending=(roster[1],), receiving=(roster[1],))
        with caplog.at_level(logging.WARNING, logger="fantasy_football_manager.trade.analyzer"):
            analysis = analyze_trade(proposal, make_team(roster), CONFIG)
        assert "rb1" in caplog.text
        assert analysis.fairness_score == pytest.approx(0.0)

    def test_similar_trades_raise_confidence(self) -> None:
        proposal, my_team, valuator = _wr_swap(100.0, 100.0)
        history = InMemoryTradeHistory([HistoricalTrade("h1", (Position.WR,), (Position.WR,), "won")])
        analysis = TradeAnalyzer(valuator=valuator, history=history).analyze_trade(proposal, my_team, CONFIG)
        assert len(analysis.similar_trades) == 1
        assert analysis.confidence == pytest.approx(0.7)

    def test_deterministic(self) -> None:
        roster = standard_roster()
        proposal = TradeProposal(sending=(roster[1],), receiving=(make_player("x", Position.WR, 18.0),))
        first = analyze_trade(proposal, make_team(roster), CONFIG)
        second = analyze_trade(proposal, make_team(roster), CONFIG)
        assert first == second
