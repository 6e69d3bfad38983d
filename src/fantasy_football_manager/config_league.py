import tomllib
from pathlib import Path
from typing import Any

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.domain.scoring import DEFAULT_SCARCITY, PositionScarcityTable, ScoringConfig, ScoringFormat
from fantasy_football_manager.domain.slots import DEFAULT_SLOT_SCHEMA, FLEX_POSITIONS, RosterSlot, SlotSchema
from fantasy_football_manager.exceptions import ConfigError

_CONFIG_FILENAME = "ffm.toml"
_BENCH_SLOTS = frozenset({"BN", "IR"})


class LeagueConfigError(ConfigError):
    """Raised when league configuration is invalid or missing."""


# -- Validation --------------------------------------------------------------


def validate_league(name: str, config: ScoringConfig) -> None:
    context = f"League '{name}'"
    if config.league_size <= 0:
        raise LeagueConfigError(f"{context}: teams must be > 0, got {config.league_size}")
    if config.regular_season_weeks <= 0:
        raise LeagueConfigError(f"{context}: regular_season_weeks must be > 0, got {config.regular_season_weeks}")
    if not 1 <= config.current_week <= config.regular_season_weeks + len(config.playoff_weeks):
        raise LeagueConfigError(f"{context}: current_week out of range, got {config.current_week}")
    for week in config.playoff_weeks:
        if week <= config.regular_season_weeks:
            raise LeagueConfigError(f"{context}: playoff week {week} falls inside the regular season")
    if config.playoff_win_threshold < 0:
        raise LeagueConfigError(f"{context}: playoff_win_threshold must be >= 0")

    slot_names = [s.position for s in config.slot_schema.slots]
    if len(slot_names) != len(set(slot_names)):
        raise LeagueConfigError(f"{context}: duplicate slot names")
    for slot in config.slot_schema.slots:
        if slot.count < 0:
            raise LeagueConfigError(f"{context}: slot '{slot.position}' count must be >= 0")
        if slot.position in _BENCH_SLOTS or config.slot_schema.is_flex(slot.position):
            continue
        if not config.slot_schema.eligible_positions(slot.position):
            raise LeagueConfigError(f"{context}: slot '{slot.position}' is not a position or flex slot")


# -- Parsing -----------------------------------------------------------------


def _require_field(raw: dict[str, Any], field: str, context: str) -> Any:
    if field not in raw:
        raise LeagueConfigError(f"{context}: missing required field '{field}'")
    return raw[field]


def _parse_position(raw: str, context: str) -> Position:
    try:
        return Position(str(raw).upper())
    except ValueError:
        raise LeagueConfigError(f"{context}: invalid position '{raw}'")


def parse_slot_schema(raw_slots: dict[str, Any] | None, raw_flex: dict[str, Any] | None, context: str) -> SlotSchema:
    if raw_slots is None and raw_flex is None:
        return DEFAULT_SLOT_SCHEMA
    slots = (
        tuple(RosterSlot(position=str(name).upper(), count=int(count)) for name, count in raw_slots.items())
        if raw_slots is not None
        else DEFAULT_SLOT_SCHEMA.slots
    )
    if raw_flex is None:
        flex = {"FLEX": FLEX_POSITIONS}
    else:
        flex = {
            str(name).upper(): frozenset(_parse_position(p, context) for p in positions)
            for name, positions in raw_flex.items()
        }
    return SlotSchema(slots=slots, flex_eligibility=flex)


def parse_scarcity(raw: dict[str, Any] | None, context: str) -> PositionScarcityTable:
    multipliers = dict(DEFAULT_SCARCITY)
    for pos, value in (raw or {}).items():
        multipliers[_parse_position(pos, context)] = float(value)
    return PositionScarcityTable(multipliers=multipliers)


def parse_league(name: str, raw: dict[str, Any]) -> ScoringConfig:
    context = f"League '{name}'"

    raw_format = _require_field(raw, "format", context)
    try:
        scoring_format = ScoringFormat(str(raw_format).lower())
    except ValueError:
        raise LeagueConfigError(f"{context}: invalid format '{raw_format}'")

    teams: int = _require_field(raw, "teams", context)
    raw_stat_points = raw.get("stat_points")

    config = ScoringConfig(
        scoring_format=scoring_format,
        league_size=teams,
        scarcity=parse_scarcity(raw.get("scarcity"), context),
        slot_schema=parse_slot_schema(raw.get("slots"), raw.get("flex"), context),
        stat_points={str(k): float(v) for k, v in raw_stat_points.items()} if raw_stat_points is not None else None,
        current_week=raw.get("current_week", 1),
        regular_season_weeks=raw.get("regular_season_weeks", 14),
        playoff_weeks=tuple(raw.get("playoff_weeks", (15, 16, 17))),
        playoff_win_threshold=float(raw.get("playoff_win_threshold", 7.0)),
    )

    validate_league(name, config)
    return config


# -- TOML loading ------------------------------------------------------------


def _read_leagues(config_dir: Path) -> dict[str, Any] | None:
    toml_path = config_dir / _CONFIG_FILENAME
    if not toml_path.exists():
        return None
    with toml_path.open("rb") as f:
        data = tomllib.load(f)
    return data.get("leagues")


def load_league(name: str, config_dir: Path) -> ScoringConfig:
    if not (config_dir / _CONFIG_FILENAME).exists():
        raise LeagueConfigError(f"{_CONFIG_FILENAME} not found in {config_dir}")

    leagues = _read_leagues(config_dir)
    if leagues is None:
        raise LeagueConfigError(f"No [leagues] section in {_CONFIG_FILENAME}")

    if name not in leagues:
        raise LeagueConfigError(f"League '{name}' not found in {_CONFIG_FILENAME}")

    return parse_league(name, leagues[name])


def list_leagues(config_dir: Path) -> list[str]:
    leagues = _read_leagues(config_dir)
    if leagues is None:
        return []
    return sorted(leagues.keys())
