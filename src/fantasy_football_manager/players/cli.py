import typer

from fantasy_football_manager.analytics.cli import trends
from fantasy_football_manager.valuation.cli import values

players_app = typer.Typer(help="Player valuation and trend commands.")
players_app.command(name="values")(values)
players_app.command(name="trends")(trends)
