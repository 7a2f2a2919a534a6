#!/usr/bin/env python3
"""
Tally CLI - Command-line interface for recording transactions and budgets.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    transactions Record, list and delete income and expenses
    budgets      Manage category budgets
    summary      Monthly summaries and charts

Examples:
    python -m cli transactions add --type expense --amount 500 --category Food
    python -m cli transactions list --period "March 2024"
    python -m cli budgets add --category Food --amount 2000
    python -m cli summary show
    python -m cli summary trend
"""

import sys
import argparse
from cli import transactions, budgets, summary
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="tally",
        description="Tally - Personal income, expense and budget tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    transactions.setup_parser(subparsers)
    budgets.setup_parser(subparsers)
    summary.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Loads the ledger once; commands persist after each mutation
            services = Services(config)

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
