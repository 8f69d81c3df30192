"""CLI entry point for the trading journal."""

from __future__ import annotations

import json
from datetime import date as Date
from datetime import datetime

import click

from .core.config import Settings, load_settings
from .core.errors import JournalError
from .observability.logger import get_logger

logger = get_logger(__name__)


def _parse_date(ctx, param, value: str | None) -> Date | None:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise click.BadParameter("expected YYYY-MM-DD") from exc


def _settings(ctx: click.Context, capital: float | None = None) -> Settings:
    overrides: dict = {}
    if capital is not None:
        overrides["analytics"] = {"initial_capital": capital}
    try:
        return load_settings(ctx.obj["config"], overrides)
    except JournalError as exc:
        raise click.ClickException(str(exc)) from exc


def _load(path: str, start: Date | None = None, end: Date | None = None, pairs=()):
    from .journal.filters import TradeFilter
    from .journal.loader import load_trades
    from .observability.logger import bind_source

    bind_source(path)
    try:
        trades = load_trades(path)
    except JournalError as exc:
        raise click.ClickException(str(exc)) from exc
    selection = TradeFilter(start_date=start, end_date=end, pairs=frozenset(pairs))
    if selection.is_empty:
        return trades
    selected = selection.apply(trades)
    logger.info("trades_selected", total=len(trades), selected=len(selected))
    return selected


@click.group()
@click.option("--config", default=None, help="TOML config file path")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """Trading journal analytics."""
    from .observability.logger import setup_logging

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    settings = _settings(ctx)
    setup_logging(settings.observability.log_level, settings.observability.log_format)


@main.command()
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--capital", type=float, default=None, help="Initial capital override")
@click.option("--from", "start", default=None, callback=_parse_date, help="First date (YYYY-MM-DD)")
@click.option("--to", "end", default=None, callback=_parse_date, help="Last date (YYYY-MM-DD)")
@click.option("--pair", "pairs", multiple=True, help="Only include these pairs")
@click.option("--week", default=None, callback=_parse_date, help="Add a weekly recap for this date")
@click.option("--goals", "goals_file", default=None, type=click.Path(exists=True, dir_okay=False),
              help="JSON file with monthly goals")
@click.pass_context
def report(
    ctx: click.Context,
    trades_file: str,
    capital: float | None,
    start: Date | None,
    end: Date | None,
    pairs: tuple[str, ...],
    week: Date | None,
    goals_file: str | None,
) -> None:
    """Print the full analytics report as JSON."""
    from .journal.loader import load_goals
    from .journal.report import build_report

    settings = _settings(ctx, capital)
    trades = _load(trades_file, start, end, pairs)
    goals = []
    if goals_file:
        try:
            goals = load_goals(goals_file)
        except JournalError as exc:
            raise click.ClickException(str(exc)) from exc

    result = build_report(trades, settings.analytics, reference_date=week, goals=goals)
    click.echo(json.dumps(result, indent=2, ensure_ascii=False))


@main.command()
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--capital", type=float, default=None, help="Initial capital override")
@click.pass_context
def summary(ctx: click.Context, trades_file: str, capital: float | None) -> None:
    """Show headline metrics."""
    from .journal.equity import max_drawdown
    from .journal.metrics import summarize
    from .journal.streaks import detect_streaks

    settings = _settings(ctx, capital)
    cfg = settings.analytics
    trades = _load(trades_file)
    s = summarize(trades, cfg.initial_capital, cfg.notional_per_unit)
    dd = max_drawdown(trades, cfg.notional_per_unit)
    streaks = detect_streaks(trades)

    pf = "inf" if s.profit_factor is None else f"{s.profit_factor:.2f}"
    click.echo(f"Trades:         {s.total_trades} ({s.wins}W / {s.losses}L)")
    click.echo(f"Win rate:       {s.win_rate * 100:.1f}%")
    click.echo(f"Profit factor:  {pf}")
    click.echo(f"Expectancy:     {s.expectancy:.2f}%")
    click.echo(f"Net PnL:        {s.net_pnl:+.2f}")
    click.echo(f"Equity:         {s.final_equity:.2f}")
    click.echo(f"Max drawdown:   {dd.max_drawdown:.2f} ({dd.max_drawdown_pct:.2f}%)")
    click.echo(
        f"Streaks:        current {streaks.current_streak} {streaks.current_type.value}, "
        f"best {streaks.max_win_streak}W, worst {streaks.max_loss_streak}L"
    )


@main.command()
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--from", "start", default=None, callback=_parse_date, help="First date (YYYY-MM-DD)")
@click.option("--to", "end", default=None, callback=_parse_date, help="Last date (YYYY-MM-DD)")
@click.pass_context
def export(
    ctx: click.Context, trades_file: str, output: str, start: Date | None, end: Date | None
) -> None:
    """Export trades to OUTPUT (.csv or .json)."""
    from .journal.export import TradeExporter

    settings = _settings(ctx)
    trades = _load(trades_file, start, end)
    exporter = TradeExporter(notional_per_unit=settings.analytics.notional_per_unit)
    try:
        path = exporter.write(trades, output)
    except JournalError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Exported {len(trades)} trades to {path}")


@main.command()
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--risk", "risks", type=float, multiple=True, help="Risk per trade in percent")
@click.pass_context
def ruin(ctx: click.Context, trades_file: str, risks: tuple[float, ...]) -> None:
    """Show the risk-of-ruin table."""
    from .journal.risk_of_ruin import risk_of_ruin

    settings = _settings(ctx)
    levels = list(risks) or settings.analytics.risk_levels
    if any(r <= 0 for r in levels):
        raise click.BadParameter("risk levels must be positive", param_hint="--risk")
    table = risk_of_ruin(_load(trades_file), levels)

    click.echo(
        f"Sample: {table.sample_size} trades, p={table.win_probability:.2f}, "
        f"payoff={table.payoff_ratio:.2f}, edge={table.edge:.2f}"
    )
    click.echo(f"{'Risk %':>8}  {'Ruin %':>10}")
    for level in table.levels:
        click.echo(f"{level.risk_pct:>8.2f}  {level.ruin_pct:>10.4f}")
    click.echo(table.disclaimer)


@main.command()
@click.argument("trades_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--capital", type=float, default=None, help="Initial capital override")
@click.pass_context
def monthly(ctx: click.Context, trades_file: str, capital: float | None) -> None:
    """Show the month-by-month comparison."""
    from .journal.session_analysis import monthly_breakdown

    settings = _settings(ctx, capital)
    cfg = settings.analytics
    months = monthly_breakdown(_load(trades_file), cfg.initial_capital, cfg.notional_per_unit)
    if not months:
        click.echo("No trades found.")
        return
    click.echo(f"{'Month':<8} {'Trades':>6} {'Win %':>7} {'PnL':>10} {'Equity':>12}")
    for m in months:
        click.echo(
            f"{m.label:<8} {m.trades:>6} {m.win_rate * 100:>7.1f} "
            f"{m.pnl:>+10.2f} {m.equity:>12.2f}"
        )


if __name__ == "__main__":
    main()
