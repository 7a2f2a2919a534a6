#!/usr/bin/env python3

import sys
from services.errors import BudgetExistsError, ValidationError
from tools.formatting import format_currency, bar
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all budgets with their progress."""
    budgets = services.ledger.budgets()

    if not budgets:
        logger.info("No budgets set.")
        return

    symbol = services.config.currency_symbol
    logger.info("\nBudgets:")
    logger.info("=" * 80)
    for budget in budgets:
        logger.info(f"ID: {budget.id}")
        logger.info(f"Category: {budget.category}")
        logger.info(
            f"Spent: {format_currency(budget.spent, symbol)} of "
            f"{format_currency(budget.amount, symbol)} "
            f"({budget.progress:.0f}%, {budget.status})"
        )
        logger.info(f"[{bar(budget.progress, 100, width=40):<40}]")
        logger.info("-" * 80)

    logger.info(f"\nTotal budgets: {len(budgets)}")


def cmd_add(args, services):
    """Create a budget for an expense category."""
    try:
        budget = services.ledger.add_budget(args.category, args.amount)
    except BudgetExistsError as e:
        logger.error(str(e))
        available = services.ledger.available_budget_categories()
        if available:
            logger.info(f"Categories without a budget: {', '.join(available)}")
        sys.exit(1)
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    services.persist()
    logger.info(f"✓ Budget created successfully with ID: {budget.id}")
    logger.info(f"  Category: {budget.category}")
    logger.info(
        f"  Amount: {format_currency(budget.amount, services.config.currency_symbol)}"
    )


def cmd_delete(args, services):
    """Delete a budget by ID. Transactions are kept."""
    budget = services.ledger.delete_budget(args.budget_id)

    if budget is None:
        logger.info(f"Budget {args.budget_id} not found; nothing deleted.")
        return

    services.persist()
    logger.info(f"✓ Budget for '{budget.category}' deleted successfully.")


def cmd_categories(args, services):
    """List default expense categories that do not have a budget yet."""
    available = services.ledger.available_budget_categories()

    if not available:
        logger.info("All categories already have budgets.")
        return

    logger.info("\nCategories available for a budget:")
    for category in available:
        logger.info(f"  {category}")


def setup_parser(subparsers):
    """Setup budgets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budgets",
        help="Manage budgets",
        description="Create, list and delete category budgets",
    )

    budgets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    # budgets list
    list_parser = budgets_subparsers.add_parser("list", help="List all budgets")
    list_parser.set_defaults(func=cmd_list)

    # budgets add
    add_parser = budgets_subparsers.add_parser(
        "add", help="Create a budget for a category"
    )
    add_parser.add_argument("--category", required=True, help="Expense category")
    add_parser.add_argument("--amount", required=True, help="Budget amount")
    add_parser.set_defaults(func=cmd_add)

    # budgets delete
    delete_parser = budgets_subparsers.add_parser("delete", help="Delete a budget")
    delete_parser.add_argument("budget_id", help="Budget ID")
    delete_parser.set_defaults(func=cmd_delete)

    # budgets categories
    categories_parser = budgets_subparsers.add_parser(
        "categories", help="List categories that can still get a budget"
    )
    categories_parser.set_defaults(func=cmd_categories)
