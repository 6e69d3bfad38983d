import pytest

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.valuation.age import DynastyAgePolicy, RedraftAgePolicy
from tests.fakes.players import make_player


class TestRedraftAgePolicy:
    def test_always_neutral(self) -> None:
        policy = RedraftAgePolicy()
        assert policy.multiplier(make_player(age=22)) == 1.0
        assert policy.multiplier(make_player(age=35)) == 1.0


class TestDynastyAgePolicy:
    def test_unknown_age_is_neutral(self) -> None:
        assert DynastyAgePolicy().multiplier(make_player(age=None)) == 1.0

    def test_at_peak_is_neutral(self) -> None:
        assert DynastyAgePolicy().multiplier(make_player(position=Position.RB, age=26)) == pytest.approx(1.0)

    def test_youth_premium(self) -> None:
        assert DynastyAgePolicy().multiplier(make_player(position=Position.RB, age=23)) == pytest.approx(1.12)

    def test_youth_premium_capped(self) -> None:
        assert DynastyAgePolicy().multiplier(make_player(position=Position.QB, age=20)) == pytest.approx(1.25)

    def test_decline(self) -> None:
        assert DynastyAgePolicy().multiplier(make_player(position=Position.RB, age=29)) == pytest.approx(0.76)

    def test_decline_floor(self) -> None:
        assert DynastyAgePolicy().multiplier(make_player(position=Position.RB, age=40)) == pytest.approx(0.5)

    def test_unlisted_position_uses_default_peak(self) -> None:
        assert DynastyAgePolicy().multiplier(make_player(position=Position.K, age=28)) == pytest.approx(1.0)

    def test_cache_keys_differ_between_policies(self) -> None:
        assert DynastyAgePolicy().cache_key() != RedraftAgePolicy().cache_key()
