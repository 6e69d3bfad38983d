"""Display functions for CLI output.

This module contains Rich table formatting for valuations, trends, trade
analyses and lineup advice.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from fantasy_football_manager.analytics.models import PlayerOutlook
    from fantasy_football_manager.lineup.models import RosterAdvice
    from fantasy_football_manager.trade.models import TradeAnalysis, TradeProposal, TradeTarget
    from fantasy_football_manager.valuation.models import ValuationResult

console = Console()


def print_values_table(results: list[ValuationResult]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Rk", justify="right")
    table.add_column("Name")
    table.add_column("Pos")
    table.add_column("Base", justify="right")
    table.add_column("Fmt", justify="right")
    table.add_column("Trend", justify="right")
    table.add_column("Age", justify="right")
    table.add_column("Value", justify="right")

    for i, r in enumerate(results, start=1):
        table.add_row(
            str(i),
            r.player.name,
            str(r.player.position),
            f"{r.base_value:.1f}",
            f"{r.format_multiplier:.2f}",
            f"{r.trend_multiplier:.3f}",
            f"{r.age_multiplier:.2f}",
            f"{r.final_value:.1f}",
        )

    console.print(table)


def print_trends_table(outlooks: list[PlayerOutlook]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name")
    table.add_column("Pos")
    table.add_column("GP", justify="right")
    table.add_column("Avg", justify="right")
    table.add_column("Last N", justify="right")
    table.add_column("Std", justify="right")
    table.add_column("Trend")
    table.add_column("Risk")
    table.add_column("Rating", justify="right")
    table.add_column("Notes")

    for o in outlooks:
        m = o.metrics
        table.add_row(
            o.player.name,
            str(o.player.position),
            str(m.games_played),
            f"{m.season_average:.1f}",
            f"{m.last_n_average:.1f}",
            f"{m.std_dev:.1f}",
            str(m.trend),
            str(o.risk),
            f"{o.performance_rating:.0f}",
            "; ".join(o.recommendations),
        )

    console.print(table)


def _names(proposal: TradeProposal) -> tuple[str, str]:
    return ", ".join(p.name for p in proposal.sending), ", ".join(p.name for p in proposal.receiving)


def print_trade_analysis(analysis: TradeAnalysis) -> None:
    sending, receiving = _names(analysis.proposal)
    console.print(f"\n[bold]Send:[/bold] {sending}  [bold]Receive:[/bold] {receiving}")
    console.print(
        f"[bold]{analysis.recommendation.value.upper()}[/bold]  "
        f"fairness {analysis.fairness_score:+.1f}  confidence {analysis.confidence:.2f}\n"
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    season = analysis.season_impact
    table.add_row("Value sent", f"{analysis.sending_value:.1f}")
    table.add_row("Value received", f"{analysis.receiving_value:.1f}")
    table.add_row("Weekly points", f"{analysis.immediate_impact.weekly_point_differential:+.1f}")
    for pos, delta in analysis.immediate_impact.position_strength.items():
        table.add_row(f"{pos} strength", f"{delta:+.2f}")
    table.add_row("Schedule", f"{season.schedule_strength_delta:+.2f}")
    table.add_row("Playoff schedule", f"{season.playoff_schedule_delta:+.2f}")
    table.add_row("Playoff odds", f"{season.playoff_probability_delta:+.1f}")
    table.add_row("Title odds", f"{season.championship_probability_delta:+.1f}")
    console.print(table)

    for label, items in (
        ("Pros", analysis.reasoning.pros),
        ("Cons", analysis.reasoning.cons),
        ("Key factors", analysis.reasoning.key_factors),
    ):
        if items:
            console.print(f"[bold]{label}:[/bold]")
            for item in items:
                console.print(f"  - {item}")

    if analysis.counter_proposal is not None:
        c_sending, c_receiving = _names(analysis.counter_proposal)
        console.print(f"[bold]Counter:[/bold] send {c_sending}; receive {c_receiving}")


def print_targets_table(targets: list[TradeTarget]) -> None:
    table = Table(show_header=True, header_style="bold")
    table.add_column("Rk", justify="right")
    table.add_column("Name")
    table.add_column("Owner")
    table.add_column("Value", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Offer")
    table.add_column("Why")

    for i, t in enumerate(targets, start=1):
        table.add_row(
            str(i),
            t.player.name,
            t.owner.name,
            f"{t.value:.1f}",
            f"{t.targetability:.2f}",
            ", ".join(p.name for p in t.suggested_offer) or "-",
            t.reasoning,
        )

    console.print(table)


def print_lineup(advice: RosterAdvice) -> None:
    table = Table(show_header=True, header_style="bold", title=f"Lineup ({advice.risk_mode})")
    table.add_column("Slot")
    table.add_column("Name")
    table.add_column("Proj", justify="right")
    table.add_column("Utility", justify="right")

    for s in advice.starters:
        if s.player is None:
            table.add_row(s.slot, "[red]EMPTY[/red]", "-", "-")
            continue
        table.add_row(
            s.slot,
            s.player.name,
            f"{s.player.projected_points:.1f}",
            f"{s.utility:.1f}" if s.utility is not None else "-",
        )

    console.print(table)
    if advice.bench:
        console.print(f"[bold]Bench:[/bold] {', '.join(p.name for p in advice.bench)}")
    for change in advice.changes:
        console.print(f"  {change.player_in.name} over {change.player_out.name}: {change.reason}")
