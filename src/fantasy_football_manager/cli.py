import logging

import typer

from fantasy_football_manager.lineup.cli import lineup_app
from fantasy_football_manager.players.cli import players_app
from fantasy_football_manager.trade.cli import trade_app

app = typer.Typer(help="Fantasy football manager.")
app.add_typer(players_app, name="players")
app.add_typer(trade_app, name="trade")
app.add_typer(lineup_app, name="lineup")


@app.callback()
def main_callback(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity (-v debug)."),
) -> None:
    if verbose >= 1:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def main() -> None:
    app()
