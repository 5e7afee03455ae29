#!/usr/bin/env python3
"""
Passbook CLI - Command-line interface for managing personal accounts.

Usage:
    python -m cli [--owner NAME] <command> <subcommand> [options]

Commands:
    accounts     Open, close and configure accounts
    transactions Deposit, withdraw, transfer and view history

Examples:
    python -m cli --owner alice accounts list
    python -m cli --owner alice accounts create-checking "Bills" --overdraft-limit 100
    python -m cli --owner alice transactions deposit Bills 250
    python -m cli --owner alice transactions transfer Bills Rainy 75.50
    python -m cli --owner alice transactions history Bills --last 5
"""

import sys
import argparse
from cli import accounts, transactions
from config import load_config
from services.base import Services
from logger import setup_logging
from validation import is_valid_username, username_errors


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Passbook - Personal checking and savings ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--owner",
        help="Username whose accounts to use (defaults to session.default_owner)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    # Register each command's subparser
    accounts.setup_parser(subparsers)
    transactions.setup_parser(subparsers)

    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        try:
            config = load_config()
            owner = args.owner or config.default_owner
            setup_logging(config, owner)

            if not is_valid_username(owner):
                print("Error: a valid --owner is required")
                for error in username_errors(owner):
                    print(f"  - {error}")
                sys.exit(1)

            services = Services(config, owner)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
