"""Shared plumbing for CLI commands: configuration, snapshot loading and error exits."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from fantasy_football_manager.config import (
    create_config,
    load_age_policy,
    load_scoring_config,
    load_thresholds,
    load_trend_settings,
)
from fantasy_football_manager.config_league import load_league
from fantasy_football_manager.engine import DecisionEngine
from fantasy_football_manager.league.snapshot import load_snapshot

if TYPE_CHECKING:
    from config import ConfigurationSet

    from fantasy_football_manager.domain.scoring import ScoringConfig
    from fantasy_football_manager.league.snapshot import Snapshot

logger = logging.getLogger(__name__)


def fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def resolve_scoring_config(cfg: ConfigurationSet, league: str | None, config_dir: Path | None) -> ScoringConfig:
    if league is None:
        return load_scoring_config(cfg)
    return load_league(league, config_dir if config_dir is not None else Path.cwd())


def load_session(
    snapshot_path: Path,
    league: str | None = None,
    config_dir: Path | None = None,
    config_file: str = "config.yaml",
) -> tuple[Snapshot, DecisionEngine]:
    """Load a snapshot and build an engine for it; the snapshot's ``week`` wins over configuration."""
    cfg = create_config(yaml_path=config_file)
    scoring_config = resolve_scoring_config(cfg, league, config_dir)
    snapshot = load_snapshot(snapshot_path, scoring_config)
    if snapshot.week is not None:
        scoring_config = replace(scoring_config, current_week=snapshot.week)

    logger.debug("Session: %s, week %d", scoring_config.scoring_format, scoring_config.current_week)
    engine = DecisionEngine(
        scoring_config,
        schedule=snapshot.schedule,
        age_policy=load_age_policy(cfg),
        trend_settings=load_trend_settings(cfg),
        thresholds=load_thresholds(cfg),
    )
    return snapshot, engine
