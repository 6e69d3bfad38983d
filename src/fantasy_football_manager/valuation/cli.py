from __future__ import annotations

from pathlib import Path  # noqa: TC003 (typer resolves it at runtime)
from typing import Annotated

import typer

from fantasy_football_manager.command_helpers import fail, load_session
from fantasy_football_manager.config import parse_position
from fantasy_football_manager.display import print_values_table
from fantasy_football_manager.exceptions import FfmException
from fantasy_football_manager.serialization import to_json


def values(
    snapshot: Annotated[Path, typer.Argument(help="Roster snapshot YAML file.")],
    position: Annotated[str | None, typer.Option("--position", "-p", help="Only show this position.")] = None,
    include_league: Annotated[
        bool, typer.Option("--league-wide", help="Value every rostered player, not just your team.")
    ] = False,
    top: Annotated[int, typer.Option("--top", help="Number of players to display.")] = 25,
    league: Annotated[str | None, typer.Option("--league", help="League name from ffm.toml.")] = None,
    config_dir: Annotated[Path | None, typer.Option("--config-dir", help="Directory containing ffm.toml.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
) -> None:
    """Rank players by trade value."""
    try:
        snap, engine = load_session(snapshot, league, config_dir)
        teams = snap.all_teams() if include_league else [snap.team]
        players = [p for t in teams for p in t.players]
        if position is not None:
            wanted = parse_position(position)
            players = [p for p in players if p.position == wanted]
        results = engine.value_players(players)[:top]
    except FfmException as e:
        fail(str(e))

    if as_json:
        typer.echo(to_json(results, indent=2))
        return
    print_values_table(results)
