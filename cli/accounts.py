#!/usr/bin/env python3

import sys
from errors import ValidationError
from logger import get_logger
from validation import parse_limit

logger = get_logger()

_LIMIT_SETTERS = {
    "overdraft": "set_overdraft_limit",
    "overdraft-rate": "set_overdraft_interest_rate",
    "withdrawal": "set_withdrawal_limit",
    "transfer": "set_transfer_limit",
}


def _parse_limit_or_exit(text):
    try:
        return parse_limit(text)
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)


def _describe(account):
    status = " [FROZEN]" if account.frozen else ""
    if account.is_savings:
        return (
            f"- {account.name}: ${account.balance:.2f} "
            f"(Interest Rate: {account.interest_rate:.2f}%){status}"
        )
    overdraft = ""
    if account.overdraft_limit > 0:
        overdraft = (
            f" (Overdraft Limit: ${account.overdraft_limit:.2f}, "
            f"Rate: {account.overdraft_interest_rate:.2f}%)"
        )
    return f"- {account.name}: ${account.balance:.2f}{overdraft}{status}"


def cmd_list(args, services):
    """List all accounts for the owner."""
    manager = services.accounts

    if not manager.all_accounts():
        logger.info("You don't have any accounts yet.")
        return

    logger.info(f"\nAccounts for {manager.owner}:")
    logger.info("=" * 80)
    if manager.checking_accounts:
        logger.info("Checking Accounts:")
        for account in manager.checking_accounts:
            logger.info(_describe(account))
    if manager.savings_accounts:
        logger.info("Savings Accounts:")
        for account in manager.savings_accounts:
            logger.info(_describe(account))
    logger.info("=" * 80)


def cmd_create_checking(args, services):
    """Open a new checking account."""
    overdraft_limit = _parse_limit_or_exit(args.overdraft_limit)
    if not services.accounts.add_checking(args.name, overdraft_limit):
        logger.error(f"Could not create checking account '{args.name}'.")
        sys.exit(1)
    logger.info(f"✓ Checking account '{args.name}' created")


def cmd_create_savings(args, services):
    """Open a new savings account."""
    interest_rate = _parse_limit_or_exit(args.interest_rate)
    if not services.accounts.add_savings(args.name, interest_rate):
        logger.error(f"Could not create savings account '{args.name}'.")
        sys.exit(1)
    logger.info(f"✓ Savings account '{args.name}' created")


def cmd_close(args, services):
    """Close an account after confirmation."""
    account = services.accounts.get_account_by_name(args.name)
    if not account:
        logger.error(f"Account '{args.name}' not found.")
        sys.exit(1)

    if not account.can_close():
        logger.error(
            f"Cannot close account '{account.name}'. Balance is ${account.balance:.2f}"
            " - please deposit funds to cover the overdraft first."
        )
        sys.exit(1)

    if not args.yes:
        response = input(
            "Are you sure you want to close this account? "
            "This action cannot be undone. (yes/no): "
        )
        if response.strip().lower() != "yes":
            logger.info("Account closure canceled.")
            return

    if not services.accounts.close_account(account.name):
        logger.error("Error closing account.")
        sys.exit(1)
    logger.info("✓ Account closed successfully.")


def cmd_freeze(args, services):
    """Freeze an account."""
    if not services.accounts.freeze_account(args.name):
        sys.exit(1)
    logger.info(f"✓ Account '{args.name}' frozen")


def cmd_unfreeze(args, services):
    """Unfreeze an account."""
    if not services.accounts.unfreeze_account(args.name):
        sys.exit(1)
    logger.info(f"✓ Account '{args.name}' unfrozen")


def cmd_set_limit(args, services):
    """Change one of an account's limits or rates."""
    value = _parse_limit_or_exit(args.value)
    setter = getattr(services.accounts, _LIMIT_SETTERS[args.kind])
    if not setter(args.name, value):
        logger.error(f"Could not update {args.kind} for '{args.name}'.")
        sys.exit(1)
    logger.info(f"✓ {args.kind} for '{args.name}' set to {value:.2f}")


def cmd_apply_interest(args, services):
    """Apply savings interest to one account, or all savings accounts."""
    if args.name:
        interest = services.accounts.apply_interest(args.name)
        if interest is None:
            sys.exit(1)
        logger.info(f"✓ Interest of ${interest:.2f} applied to '{args.name}'")
        return

    total = services.accounts.apply_interest_to_all_savings()
    logger.info(f"✓ Interest of ${total:.2f} applied across savings accounts")


def cmd_charge_overdraft(args, services):
    """Charge overdraft interest on every overdrawn account."""
    total = services.accounts.apply_overdraft_interest_to_all()
    logger.info(f"✓ Overdraft interest charged: ${total:.2f}")


def cmd_order_checks(args, services):
    """Order checks for a checking account."""
    order_id = services.accounts.order_checks(args.name)
    if order_id is None:
        sys.exit(1)
    logger.info(f"✓ Checks ordered (reference {order_id})")


def cmd_order_debit_card(args, services):
    """Order a debit card for a checking account."""
    card = services.accounts.order_debit_card(args.name)
    if card is None:
        sys.exit(1)
    logger.info("✓ Debit card ordered. Please allow 5-7 business days for delivery.")
    logger.info(f"  Card number: {card.number}")
    logger.info(f"  Expiration: {card.expiration}")


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Manage accounts",
        description="Open, close and configure checking and savings accounts",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts list
    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)

    # accounts create-checking
    checking_parser = accounts_subparsers.add_parser(
        "create-checking", help="Open a checking account"
    )
    checking_parser.add_argument("name", help="Account name")
    checking_parser.add_argument(
        "--overdraft-limit", default="0", help="Overdraft limit (default: 0)"
    )
    checking_parser.set_defaults(func=cmd_create_checking)

    # accounts create-savings
    savings_parser = accounts_subparsers.add_parser(
        "create-savings", help="Open a savings account"
    )
    savings_parser.add_argument("name", help="Account name")
    savings_parser.add_argument(
        "--interest-rate", required=True, help="Interest rate in percent"
    )
    savings_parser.set_defaults(func=cmd_create_savings)

    # accounts close
    close_parser = accounts_subparsers.add_parser("close", help="Close an account")
    close_parser.add_argument("name", help="Account name")
    close_parser.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )
    close_parser.set_defaults(func=cmd_close)

    # accounts freeze / unfreeze
    freeze_parser = accounts_subparsers.add_parser("freeze", help="Freeze an account")
    freeze_parser.add_argument("name", help="Account name")
    freeze_parser.set_defaults(func=cmd_freeze)

    unfreeze_parser = accounts_subparsers.add_parser(
        "unfreeze", help="Unfreeze an account"
    )
    unfreeze_parser.add_argument("name", help="Account name")
    unfreeze_parser.set_defaults(func=cmd_unfreeze)

    # accounts set-limit
    limit_parser = accounts_subparsers.add_parser(
        "set-limit", help="Change a limit or overdraft rate"
    )
    limit_parser.add_argument("name", help="Account name")
    limit_parser.add_argument("kind", choices=sorted(_LIMIT_SETTERS))
    limit_parser.add_argument("value", help="New value")
    limit_parser.set_defaults(func=cmd_set_limit)

    # accounts apply-interest
    interest_parser = accounts_subparsers.add_parser(
        "apply-interest", help="Apply savings interest"
    )
    interest_parser.add_argument(
        "name", nargs="?", help="Savings account (default: all savings accounts)"
    )
    interest_parser.set_defaults(func=cmd_apply_interest)

    # accounts charge-overdraft
    overdraft_parser = accounts_subparsers.add_parser(
        "charge-overdraft", help="Charge overdraft interest on overdrawn accounts"
    )
    overdraft_parser.set_defaults(func=cmd_charge_overdraft)

    # accounts order-checks / order-debit-card
    checks_parser = accounts_subparsers.add_parser(
        "order-checks", help="Order checks for a checking account"
    )
    checks_parser.add_argument("name", help="Account name")
    checks_parser.set_defaults(func=cmd_order_checks)

    card_parser = accounts_subparsers.add_parser(
        "order-debit-card", help="Order a debit card for a checking account"
    )
    card_parser.add_argument("name", help="Account name")
    card_parser.set_defaults(func=cmd_order_debit_card)
