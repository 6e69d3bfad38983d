from __future__ import annotations

from typing import TYPE_CHECKING, cast

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from fantasy_football_manager.analytics.models import TrendSettings
from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.domain.scoring import ScoringConfig, ScoringFormat
from fantasy_football_manager.exceptions import ConfigError
from fantasy_football_manager.lineup.models import RiskMode
from fantasy_football_manager.trade.models import RecommendationThresholds
from fantasy_football_manager.valuation.age import DynastyAgePolicy, RedraftAgePolicy

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fantasy_football_manager.valuation.age import AgePolicy

_DEFAULTS: dict[str, object] = {
    "league": {
        "scoring_format": "ppr",
        "team_count": 12,
        "current_week": 1,
        "regular_season_weeks": 14,
        "playoff_weeks": [15, 16, 17],
        "playoff_win_threshold": 7.0,
    },
    "trade": {
        "accept_fairness": 30.0,
        "accept_min_playoff_delta": 0.0,
        "reject_fairness": -30.0,
        "reject_playoff_delta": -10.0,
        "counter_upper_fairness": -10.0,
    },
    "trend": {
        "window": 3,
        "hot_floor": 15.0,
        "hot_ratio": 1.3,
        "cold_floor": 10.0,
        "cold_ratio": 0.6,
    },
    "valuation": {
        "age_policy": "redraft",
    },
    "lineup": {
        "risk_mode": "balanced",
    },
}


def create_config(
    yaml_path: str = "config.yaml",
    env_prefix: str = "FANTASY",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    Values read from the environment arrive as strings; the ``load_*`` helpers coerce them.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))
    return ConfigurationSet(*layers)


def _float(cfg: ConfigurationSet, key: str) -> float:
    raw = cfg[key]
    try:
        return float(str(raw))
    except ValueError:
        raise ConfigError(f"{key}: expected a number, got {raw!r}") from None


def _int(cfg: ConfigurationSet, key: str) -> int:
    raw = cfg[key]
    try:
        return int(str(raw))
    except ValueError:
        raise ConfigError(f"{key}: expected an integer, got {raw!r}") from None


def _int_tuple(cfg: ConfigurationSet, key: str) -> tuple[int, ...]:
    raw = cfg[key]
    items = raw.split(",") if isinstance(raw, str) else list(cast("Iterable[object]", raw))
    try:
        return tuple(int(str(item).strip()) for item in items if str(item).strip())
    except ValueError:
        raise ConfigError(f"{key}: expected a list of integers, got {raw!r}") from None


def load_scoring_config(cfg: ConfigurationSet | None = None) -> ScoringConfig:
    if cfg is None:
        cfg = create_config()
    raw_format = str(cfg["league.scoring_format"])
    try:
        scoring_format = ScoringFormat(raw_format.lower())
    except ValueError:
        raise ConfigError(f"league.scoring_format: invalid format '{raw_format}'") from None
    return ScoringConfig(
        scoring_format=scoring_format,
        league_size=_int(cfg, "league.team_count"),
        current_week=_int(cfg, "league.current_week"),
        regular_season_weeks=_int(cfg, "league.regular_season_weeks"),
        playoff_weeks=_int_tuple(cfg, "league.playoff_weeks"),
        playoff_win_threshold=_float(cfg, "league.playoff_win_threshold"),
    )


def load_thresholds(cfg: ConfigurationSet | None = None) -> RecommendationThresholds:
    if cfg is None:
        cfg = create_config()
    return RecommendationThresholds(
        accept_fairness=_float(cfg, "trade.accept_fairness"),
        accept_min_playoff_delta=_float(cfg, "trade.accept_min_playoff_delta"),
        reject_fairness=_float(cfg, "trade.reject_fairness"),
        reject_playoff_delta=_float(cfg, "trade.reject_playoff_delta"),
        counter_upper_fairness=_float(cfg, "trade.counter_upper_fairness"),
    )


def load_trend_settings(cfg: ConfigurationSet | None = None) -> TrendSettings:
    if cfg is None:
        cfg = create_config()
    return TrendSettings(
        window=_int(cfg, "trend.window"),
        hot_floor=_float(cfg, "trend.hot_floor"),
        hot_ratio=_float(cfg, "trend.hot_ratio"),
        cold_floor=_float(cfg, "trend.cold_floor"),
        cold_ratio=_float(cfg, "trend.cold_ratio"),
    )


def load_age_policy(cfg: ConfigurationSet | None = None) -> AgePolicy:
    if cfg is None:
        cfg = create_config()
    name = str(cfg["valuation.age_policy"]).lower()
    if name == "redraft":
        return RedraftAgePolicy()
    if name in ("dynasty", "keeper"):
        return DynastyAgePolicy()
    raise ConfigError(f"valuation.age_policy: unknown policy '{name}'")


def load_default_risk_mode(cfg: ConfigurationSet | None = None) -> RiskMode:
    if cfg is None:
        cfg = create_config()
    raw = str(cfg["lineup.risk_mode"])
    try:
        return RiskMode(raw.lower())
    except ValueError:
        raise ConfigError(f"lineup.risk_mode: invalid risk mode '{raw}'") from None


def parse_position(raw: str) -> Position:
    try:
        return Position(raw.upper())
    except ValueError:
        raise ConfigError(f"Unknown position '{raw}'") from None
