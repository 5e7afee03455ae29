#!/usr/bin/env python3

import sys
from errors import ValidationError
from logger import get_logger
from services.transfers import transfer
from validation import parse_amount

logger = get_logger()


def _parse_amount_or_exit(text):
    try:
        return parse_amount(text)
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)


def _require_account(services, name):
    account = services.accounts.get_account_by_name(name)
    if not account:
        logger.error(f"Account '{name}' not found.")
        logger.info("Use 'python -m cli accounts list' to see available accounts.")
        sys.exit(1)
    return account


def cmd_deposit(args, services):
    """Deposit money into an account.

    Args:
        args: Parsed command-line arguments with account_name and amount
        services: Services container for the current owner
    """
    amount = _parse_amount_or_exit(args.amount)
    account = _require_account(services, args.account_name)

    if account.frozen:
        logger.error("This account is frozen. Unfreeze it first to make deposits.")
        sys.exit(1)

    if not services.accounts.deposit(account.name, amount):
        sys.exit(1)
    logger.info(f"✓ Deposited ${amount:.2f}. New balance: ${account.balance:.2f}")


def cmd_deposit_check(args, services):
    """Deposit a check into an account."""
    amount = _parse_amount_or_exit(args.amount)
    account = _require_account(services, args.account_name)

    if account.frozen:
        logger.error("This account is frozen. Unfreeze it first to deposit checks.")
        sys.exit(1)

    if not services.accounts.deposit_check(account.name, amount, args.check_number):
        sys.exit(1)
    logger.info(
        f"✓ Deposited check #{args.check_number} for ${amount:.2f}. "
        f"New balance: ${account.balance:.2f}"
    )


def cmd_withdraw(args, services):
    """Withdraw money from an account."""
    amount = _parse_amount_or_exit(args.amount)
    account = _require_account(services, args.account_name)

    if account.frozen:
        logger.error("This account is frozen. Unfreeze it first to make withdrawals.")
        sys.exit(1)

    logger.info(f"(Per-transaction limit: ${account.withdrawal_limit:.2f})")
    if account.overdraft_limit > 0:
        logger.info(
            f"Available funds (including overdraft): ${account.available_funds:.2f}"
        )

    if not services.accounts.withdraw(account.name, amount):
        logger.error(
            f"Insufficient funds or limit exceeded. Current balance: ${account.balance:.2f}"
        )
        sys.exit(1)
    logger.info(f"✓ Withdrew ${amount:.2f}. New balance: ${account.balance:.2f}")


def cmd_transfer(args, services):
    """Transfer money between two of the owner's accounts."""
    amount = _parse_amount_or_exit(args.amount)
    source = _require_account(services, args.source)

    logger.info(
        f"From: {source.name} (Current Balance: ${source.balance:.2f}, "
        f"Transfer Limit: ${source.transfer_limit:.2f})"
    )

    if not transfer(services.accounts, source, args.target, amount):
        logger.error("Transfer failed.")
        sys.exit(1)


def cmd_history(args, services):
    """Show an account's transaction history."""
    account = _require_account(services, args.account_name)

    entries = services.accounts.history(account.name, args.last)
    if not entries:
        logger.info(f"No transactions recorded for '{account.name}'.")
        return

    logger.info(f"\nTransactions for {account.name}:")
    logger.info("=" * 80)
    for entry in entries:
        logger.info(entry)
    logger.info("=" * 80)


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Move money and view history",
        description="Deposit, withdraw, transfer and view account history",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions deposit
    deposit_parser = transactions_subparsers.add_parser(
        "deposit", help="Deposit into an account"
    )
    deposit_parser.add_argument("account_name", help="Account name")
    deposit_parser.add_argument("amount", help="Amount to deposit")
    deposit_parser.set_defaults(func=cmd_deposit)

    # transactions deposit-check
    check_parser = transactions_subparsers.add_parser(
        "deposit-check", help="Deposit a check into an account"
    )
    check_parser.add_argument("account_name", help="Account name")
    check_parser.add_argument("amount", help="Check amount")
    check_parser.add_argument("--check-number", required=True, help="Check number")
    check_parser.set_defaults(func=cmd_deposit_check)

    # transactions withdraw
    withdraw_parser = transactions_subparsers.add_parser(
        "withdraw", help="Withdraw from an account"
    )
    withdraw_parser.add_argument("account_name", help="Account name")
    withdraw_parser.add_argument("amount", help="Amount to withdraw")
    withdraw_parser.set_defaults(func=cmd_withdraw)

    # transactions transfer
    transfer_parser = transactions_subparsers.add_parser(
        "transfer", help="Transfer between two accounts"
    )
    transfer_parser.add_argument("source", help="Account to transfer from")
    transfer_parser.add_argument("target", help="Account to transfer to")
    transfer_parser.add_argument("amount", help="Amount to transfer")
    transfer_parser.set_defaults(func=cmd_transfer)

    # transactions history
    history_parser = transactions_subparsers.add_parser(
        "history", help="Show an account's transaction history"
    )
    history_parser.add_argument("account_name", help="Account name")
    history_parser.add_argument(
        "--last", type=int, default=None, help="Only show the N most recent entries"
    )
    history_parser.set_defaults(func=cmd_history)
