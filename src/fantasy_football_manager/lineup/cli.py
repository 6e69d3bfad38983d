from __future__ import annotations

from pathlib import Path  # noqa: TC003 (typer resolves it at runtime)
from typing import Annotated

import typer

from fantasy_football_manager.command_helpers import fail, load_session
from fantasy_football_manager.config import create_config, load_default_risk_mode
from fantasy_football_manager.display import print_lineup
from fantasy_football_manager.exceptions import FfmException
from fantasy_football_manager.lineup.models import RiskMode
from fantasy_football_manager.serialization import to_json

lineup_app = typer.Typer(help="Lineup optimization commands.")


@lineup_app.command(name="optimize")
def optimize(
    snapshot: Annotated[Path, typer.Argument(help="Roster snapshot YAML file.")],
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="Risk mode: safe, balanced or aggressive.")
    ] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Fail when any starting slot is left empty.")] = False,
    league: Annotated[str | None, typer.Option("--league", help="League name from ffm.toml.")] = None,
    config_dir: Annotated[Path | None, typer.Option("--config-dir", help="Directory containing ffm.toml.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
) -> None:
    """Pick starters for a risk posture and explain changes from the projection-only lineup."""
    try:
        risk_mode = load_default_risk_mode(create_config()) if mode is None else RiskMode(mode.lower())
    except ValueError:
        fail(f"Unknown risk mode: {mode}")
    except FfmException as e:
        fail(str(e))

    try:
        snap, engine = load_session(snapshot, league, config_dir)
        advice = engine.optimize_lineup(snap.team.players, risk_mode)
        if strict:
            advice.raise_for_gaps()
    except FfmException as e:
        fail(str(e))

    if as_json:
        typer.echo(to_json(advice, indent=2))
        return
    print_lineup(advice)
