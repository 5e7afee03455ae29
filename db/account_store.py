"""Flat-file codec for an owner's account collection.

Each account type lives in its own file with one comma-separated line per
account::

    name,balance,frozen,overdraftLimit,overdraftInterestRate,withdrawalLimit[,interestRate]

The trailing interest rate is only written for savings accounts. Older files
may carry shorter lines; missing optional fields fall back to the account
defaults.
"""

import logging
from typing import List, Optional, Tuple

from db.manager import StorageManager
from models.account import Account, CHECKING, SAVINGS

logger = logging.getLogger("passbook.db.account_store")

_BASE_FIELD_COUNT = 6
_SAVINGS_FIELD_COUNT = 7
_MIN_FIELDS = {CHECKING: 2, SAVINGS: 3}


def _format_number(value: float) -> str:
    # repr round-trips floats exactly
    return repr(float(value))


def account_to_line(account: Account) -> str:
    """Serialize an account to one collection-file line."""
    fields = [
        account.name,
        _format_number(account.balance),
        "true" if account.frozen else "false",
        _format_number(account.overdraft_limit),
        _format_number(account.overdraft_interest_rate),
        _format_number(account.withdrawal_limit),
    ]
    if account.is_savings:
        fields.append(_format_number(account.interest_rate))
    return ",".join(fields)


def line_to_account(line: str, account_type: str) -> Optional[Account]:
    """Parse one collection-file line.

    Args:
        line: A line from checking.txt or savings.txt.
        account_type: Which file the line came from.

    Returns:
        The Account, or None if the line has too few fields to be an account.

    Raises:
        ValueError: If the balance (or a savings interest rate) is not a number.
    """
    parts = line.split(",")
    if len(parts) < _MIN_FIELDS[account_type]:
        return None

    name = parts[0]
    balance = float(parts[1])

    if account_type == SAVINGS:
        # Legacy savings lines were name,balance,interestRate
        rate_field = parts[6] if len(parts) >= _SAVINGS_FIELD_COUNT else parts[2]
        account = Account.savings(name, float(rate_field))
    else:
        account = Account.checking(name)
    account.balance = balance

    if len(parts) >= _BASE_FIELD_COUNT:
        try:
            overdraft_limit = float(parts[3])
            overdraft_rate = float(parts[4])
            withdrawal_limit = float(parts[5])
        except ValueError as e:
            logger.warning(f"Ignoring malformed settings for account '{name}': {e}")
        else:
            account.frozen = parts[2].strip().lower() == "true"
            account.set_overdraft_limit(overdraft_limit)
            account.set_overdraft_interest_rate(overdraft_rate)
            account.set_withdrawal_limit(withdrawal_limit)

    return account


class AccountStore:
    """Reads and writes whole account collections for one owner at a time.

    Every save rewrites both files in full. Errors surface as
    PersistenceError from the storage manager.

    Args:
        storage: Storage manager resolving per-owner file paths.
    """

    def __init__(self, storage: StorageManager):
        self.storage = storage

    def save(
        self, owner: str, checking: List[Account], savings: List[Account]
    ) -> None:
        """Write both collections for ``owner``.

        Raises:
            PersistenceError: If either file cannot be written.
        """
        for account_type, accounts in ((CHECKING, checking), (SAVINGS, savings)):
            path = self.storage.collection_path(owner, account_type)
            self.storage.atomic_write(path, [account_to_line(a) for a in accounts])
        logger.debug(
            f"Saved {len(checking)} checking and {len(savings)} savings "
            f"account(s) for {owner}"
        )

    def load(self, owner: str) -> Tuple[List[Account], List[Account]]:
        """Read both collections for ``owner``.

        Lines that cannot be parsed are logged and skipped. Missing files
        produce empty collections.

        Returns:
            (checking accounts, savings accounts) in file order.

        Raises:
            PersistenceError: If a file exists but cannot be read.
        """
        loaded = {}
        for account_type in (CHECKING, SAVINGS):
            path = self.storage.collection_path(owner, account_type)
            accounts = []
            for line_num, line in enumerate(self.storage.read_lines(path), start=1):
                if not line.strip():
                    continue
                try:
                    account = line_to_account(line, account_type)
                except ValueError as e:
                    logger.error(f"Error parsing {path.name} line {line_num}: {e}")
                    continue
                if account is None:
                    logger.warning(f"Skipping malformed line {line_num} in {path.name}")
                    continue
                accounts.append(account)
            loaded[account_type] = accounts

        return loaded[CHECKING], loaded[SAVINGS]
