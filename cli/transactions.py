#!/usr/bin/env python3

import sys
from datetime import date
from dateutil.parser import isoparse
from models.category import default_categories
from models.transaction import TransactionDraft, TRANSACTION_TYPES, EXPENSE
from services.errors import ValidationError
from tools.formatting import format_currency, format_date
from tools.views import (
    Period,
    SORT_ORDERS,
    filter_by_period,
    search_transactions,
    sort_transactions,
)
from logger import get_logger

logger = get_logger()


def parse_period(text):
    """Parse a --period argument, exiting with an error if invalid."""
    if not text:
        return Period.current()
    try:
        return Period.parse(text)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def cmd_add(args, services):
    """Record a new income or expense transaction."""
    try:
        transaction_date = isoparse(args.date).date() if args.date else date.today()
    except ValueError:
        logger.error(f"Invalid date '{args.date}'. Use YYYY-MM-DD.")
        sys.exit(1)

    category = args.category
    known = default_categories(args.type)
    if category not in known:
        logger.warning(
            f"'{category}' is not a default {args.type} category "
            f"({', '.join(known)}); recording it anyway."
        )

    draft = TransactionDraft(
        amount=args.amount,
        type=args.type,
        category=category,
        description=args.description or "",
        date=transaction_date,
    )

    try:
        transaction = services.ledger.add_transaction(draft)
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    services.persist()

    symbol = services.config.currency_symbol
    logger.info(f"✓ Recorded {transaction.type} with ID: {transaction.id}")
    logger.info(
        f"  {format_date(transaction.date)}  {transaction.category}  "
        f"{format_currency(transaction.amount, symbol)}"
    )

    if transaction.type == EXPENSE:
        budget = services.ledger.find_budget_by_category(transaction.category)
        if budget:
            logger.info(
                f"  Budget {budget.category}: {format_currency(budget.spent, symbol)} "
                f"of {format_currency(budget.amount, symbol)} "
                f"({budget.percent_used:.0f}%)"
            )
            if budget.spent > budget.amount:
                logger.warning(f"  Over budget for {budget.category}.")


def cmd_list(args, services):
    """List transactions for a period, optionally searched and sorted."""
    period = parse_period(args.period)
    transactions = search_transactions(
        filter_by_period(services.ledger.transactions(), period), args.search
    )

    if not transactions:
        if args.search:
            logger.info(f"No transactions matching '{args.search}' in {period}.")
        else:
            logger.info(f"No transactions found for {period}.")
        return

    symbol = services.config.currency_symbol
    logger.info(f"\nTransactions for {period}:")
    logger.info("=" * 80)
    for t in sort_transactions(transactions, args.sort):
        sign = "+" if t.type == "income" else "-"
        logger.info(
            f"{format_date(t.date):<12} {t.category:<16} "
            f"{sign}{format_currency(t.amount, symbol):>12}  {t.description}"
        )
        logger.info(f"  ID: {t.id}")
    logger.info("-" * 80)
    logger.info(f"Total transactions: {len(transactions)}")


def cmd_delete(args, services):
    """Delete a transaction by ID."""
    transaction = services.ledger.delete_transaction(args.transaction_id)

    if transaction is None:
        logger.info(f"Transaction {args.transaction_id} not found; nothing deleted.")
        return

    services.persist()
    logger.info(
        f"✓ Deleted {transaction.type} of "
        f"{format_currency(transaction.amount, services.config.currency_symbol)} "
        f"({transaction.category}, {format_date(transaction.date)})"
    )


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Record and manage transactions",
        description="Record, list and delete income and expense transactions",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions add
    add_parser = transactions_subparsers.add_parser(
        "add", help="Record a new transaction"
    )
    add_parser.add_argument(
        "--type", choices=TRANSACTION_TYPES, default=EXPENSE, help="Transaction type"
    )
    add_parser.add_argument("--amount", required=True, help="Positive amount")
    add_parser.add_argument("--category", required=True, help="Category label")
    add_parser.add_argument("--description", default="", help="Optional description")
    add_parser.add_argument(
        "--date", help="Transaction date in YYYY-MM-DD format (default: today)"
    )
    add_parser.set_defaults(func=cmd_add)

    # transactions list
    list_parser = transactions_subparsers.add_parser(
        "list", help="List transactions for a month"
    )
    list_parser.add_argument(
        "--period", help="Month to list, e.g. 'March 2024' or 2024-03 (default: current)"
    )
    list_parser.add_argument(
        "--search", help="Only show entries whose description or category contains this"
    )
    list_parser.add_argument(
        "--sort", choices=SORT_ORDERS, default="newest", help="Sort order"
    )
    list_parser.set_defaults(func=cmd_list)

    # transactions delete
    delete_parser = transactions_subparsers.add_parser(
        "delete", help="Delete a transaction"
    )
    delete_parser.add_argument("transaction_id", help="Transaction ID")
    delete_parser.set_defaults(func=cmd_delete)
