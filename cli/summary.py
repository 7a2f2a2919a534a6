#!/usr/bin/env python3

from cli.transactions import parse_period
from tools.formatting import format_currency, bar
from tools.views import (
    available_periods,
    budget_overview,
    category_breakdown,
    filter_by_period,
    monthly_series,
    next_period,
    previous_period,
    totals,
)
from logger import get_logger

logger = get_logger()


def cmd_show(args, services):
    """Show income, expenses, balance and spending by category for a month."""
    period = parse_period(args.period)
    all_transactions = services.ledger.transactions()
    transactions = filter_by_period(all_transactions, period)
    symbol = services.config.currency_symbol

    summary = totals(transactions)
    logger.info(f"\nSummary for {period}")
    logger.info("=" * 80)
    logger.info(f"Income:   {format_currency(summary.income, symbol):>14}")
    logger.info(f"Expenses: {format_currency(summary.expense, symbol):>14}")
    logger.info(f"Balance:  {format_currency(summary.balance, symbol):>14}")

    shares = category_breakdown(transactions)
    logger.info("\nSpending by category:")
    if not shares:
        logger.info("  No expenses recorded for this period")
    else:
        largest = shares[0].amount
        for share in shares:
            logger.info(
                f"  {share.category:<16} {format_currency(share.amount, symbol):>12} "
                f"{share.percentage:5.1f}%  {bar(share.amount, largest)}"
            )

    overview = budget_overview(services.ledger.budgets())
    if overview.budgets:
        logger.info("\nBudgets:")
        for budget in overview.budgets:
            logger.info(
                f"  {budget.category:<16} {format_currency(budget.spent, symbol):>12} "
                f"of {format_currency(budget.amount, symbol):>12}  "
                f"{budget.progress:3.0f}% {budget.status}"
            )
        logger.info(
            f"  Remaining overall: {format_currency(overview.total_remaining, symbol)}"
        )
        for budget in overview.over_budget:
            logger.warning(f"  Over budget: {budget.category}")

    periods = available_periods(all_transactions)
    older = previous_period(periods, period)
    newer = next_period(periods, period)
    logger.info("-" * 80)
    logger.info(
        f"Previous: {older.label if older else '-'}    "
        f"Next: {newer.label if newer else '-'}"
    )


def cmd_trend(args, services):
    """Show income and expenses per month, oldest first."""
    series = monthly_series(services.ledger.transactions())

    if not series:
        logger.info("No transactions recorded yet.")
        return

    symbol = services.config.currency_symbol
    largest = max(max(m.income, m.expense) for m in series)

    logger.info("\nMonthly trend:")
    logger.info("=" * 80)
    for month in series:
        logger.info(f"{month.period.label}")
        logger.info(
            f"  Income   {format_currency(month.income, symbol):>12}  "
            f"{bar(month.income, largest)}"
        )
        logger.info(
            f"  Expenses {format_currency(month.expense, symbol):>12}  "
            f"{bar(month.expense, largest)}"
        )


def cmd_periods(args, services):
    """List the months available for selection, most recent first."""
    for period in available_periods(services.ledger.transactions()):
        logger.info(f"{period.label}")


def setup_parser(subparsers):
    """Setup summary subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "summary",
        help="Monthly summaries and charts",
        description="Summaries, category breakdowns and monthly trends",
    )

    summary_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available summary commands",
        dest="subcommand",
        required=True,
    )

    # summary show
    show_parser = summary_subparsers.add_parser(
        "show", help="Show the summary for a month"
    )
    show_parser.add_argument(
        "--period", help="Month to show, e.g. 'March 2024' or 2024-03 (default: current)"
    )
    show_parser.set_defaults(func=cmd_show)

    # summary trend
    trend_parser = summary_subparsers.add_parser(
        "trend", help="Show income and expenses per month"
    )
    trend_parser.set_defaults(func=cmd_trend)

    # summary periods
    periods_parser = summary_subparsers.add_parser(
        "periods", help="List selectable months"
    )
    periods_parser.set_defaults(func=cmd_periods)
