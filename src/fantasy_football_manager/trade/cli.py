from __future__ import annotations

from pathlib import Path  # noqa: TC003 (typer resolves it at runtime)
from typing import Annotated

import typer

from fantasy_football_manager.command_helpers import fail, load_session
from fantasy_football_manager.config import parse_position
from fantasy_football_manager.display import print_targets_table, print_trade_analysis
from fantasy_football_manager.exceptions import FfmException
from fantasy_football_manager.serialization import to_json
from fantasy_football_manager.trade.targets import MAX_TARGETS

trade_app = typer.Typer(help="Trade analysis commands.")


@trade_app.command(name="analyze")
def analyze(
    snapshot: Annotated[Path, typer.Argument(help="Snapshot YAML file with a 'trade' section.")],
    league: Annotated[str | None, typer.Option("--league", help="League name from ffm.toml.")] = None,
    config_dir: Annotated[Path | None, typer.Option("--config-dir", help="Directory containing ffm.toml.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
) -> None:
    """Score a proposed trade for fairness and season impact."""
    try:
        snap, engine = load_session(snapshot, league, config_dir)
        if snap.trade is None:
            fail(f"{snapshot} has no 'trade' section")
        analysis = engine.analyze_trade(snap.trade, snap.team)
    except FfmException as e:
        fail(str(e))

    if as_json:
        typer.echo(to_json(analysis, indent=2))
        return
    print_trade_analysis(analysis)


@trade_app.command(name="targets")
def targets(
    snapshot: Annotated[Path, typer.Argument(help="Snapshot YAML file with 'league' teams.")],
    position: Annotated[str, typer.Option("--position", "-p", help="Position to target.")],
    limit: Annotated[int, typer.Option("--limit", help="Maximum number of targets.")] = MAX_TARGETS,
    league: Annotated[str | None, typer.Option("--league", help="League name from ffm.toml.")] = None,
    config_dir: Annotated[Path | None, typer.Option("--config-dir", help="Directory containing ffm.toml.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
) -> None:
    """Find players on other rosters worth trading for."""
    try:
        snap, engine = load_session(snapshot, league, config_dir)
        found = engine.find_trade_targets(snap.team, snap.all_teams(), parse_position(position), limit)
    except FfmException as e:
        fail(str(e))

    if as_json:
        typer.echo(to_json(found, indent=2))
        return
    if not found:
        typer.echo(f"No {position.upper()} trade targets found.")
        return
    print_targets_table(found)
