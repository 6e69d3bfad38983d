from __future__ import annotations

from pathlib import Path  # noqa: TC003 (typer resolves it at runtime)
from typing import Annotated

import typer

from fantasy_football_manager.analytics.outlook import build_outlook, suggest_swaps
from fantasy_football_manager.command_helpers import fail, load_session
from fantasy_football_manager.display import print_trends_table
from fantasy_football_manager.exceptions import FfmException
from fantasy_football_manager.serialization import to_json


def trends(
    snapshot: Annotated[Path, typer.Argument(help="Roster snapshot YAML file.")],
    league: Annotated[str | None, typer.Option("--league", help="League name from ffm.toml.")] = None,
    config_dir: Annotated[Path | None, typer.Option("--config-dir", help="Directory containing ffm.toml.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
) -> None:
    """Show hot/cold trends, consistency and start/sit swaps for your roster."""
    try:
        snap, engine = load_session(snapshot, league, config_dir)
    except FfmException as e:
        fail(str(e))

    outlooks = {p.player_id: build_outlook(p, engine.trend(p)) for p in snap.team.players}
    advice = engine.optimize_lineup(snap.team.players)
    starters = [outlooks[p.player_id] for p in advice.starting_players]
    bench = [outlooks[p.player_id] for p in advice.bench]
    swaps = suggest_swaps(starters, bench, engine.scoring_config.slot_schema.eligible_positions("FLEX"))

    if as_json:
        typer.echo(to_json({"players": list(outlooks.values()), "swaps": swaps}, indent=2))
        return
    print_trends_table(list(outlooks.values()))
    for swap in swaps:
        typer.echo(f"Swap: {swap.reason}")
