from dataclasses import dataclass

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.lineup.models import RiskMode


@dataclass(frozen=True)
class RiskPreset:
    """Mean-variance weighting: utility = projection + volatility_weight * volatility."""

    mode: RiskMode
    volatility_weight: float


RISK_PRESETS: dict[RiskMode, RiskPreset] = {
    RiskMode.SAFE: RiskPreset(mode=RiskMode.SAFE, volatility_weight=-0.7),
    RiskMode.BALANCED: RiskPreset(mode=RiskMode.BALANCED, volatility_weight=-0.25),
    RiskMode.AGGRESSIVE: RiskPreset(mode=RiskMode.AGGRESSIVE, volatility_weight=0.5),
}

DEFAULT_VOLATILITY: dict[Position, float] = {
    Position.QB: 6.0,
    Position.RB: 7.0,
    Position.WR: 8.0,
    Position.TE: 6.0,
    Position.K: 5.0,
    Position.DEF: 5.0,
}
FALLBACK_VOLATILITY: float = 6.0
