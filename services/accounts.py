"""Account manager for one owner's checking and savings accounts."""

from typing import List, Optional

from db.account_store import AccountStore
from errors import PersistenceError
from logger import get_logger
from models.account import Account, DebitCard, CHECKING, SAVINGS
from services.ledger import TransactionLedger
from validation import is_valid_account_name

logger = get_logger()

MAX_CHECKING_ACCOUNTS = 2
MAX_SAVINGS_ACCOUNTS = 3

_MAX_ACCOUNTS = {CHECKING: MAX_CHECKING_ACCOUNTS, SAVINGS: MAX_SAVINGS_ACCOUNTS}


class AccountManager:
    """Owns the accounts of a single user for the length of a session.

    Rejected operations (unknown account, frozen account, capacity reached,
    duplicate name, negative setting) return False and leave the accounts
    untouched. Every successful change rewrites the owner's whole collection
    through the AccountStore. A failed write is logged. Lifecycle and settings
    operations then report False; deposits and withdrawals still report True
    because the balance has already moved. The in-memory change is kept for
    the next save either way.

    Args:
        owner: Username the accounts belong to.
        store: Collection codec used for loading and saving.
        ledger: Transaction history the manager appends to.
    """

    def __init__(self, owner: str, store: AccountStore, ledger: TransactionLedger):
        self.owner = owner
        self.store = store
        self.ledger = ledger
        self.checking_accounts: List[Account] = []
        self.savings_accounts: List[Account] = []

    # Persistence

    def load_accounts(self) -> bool:
        """Replace the in-memory accounts with what is on disk.

        Returns:
            True on success, False if the files could not be read (the
            collections are left empty).
        """
        self.checking_accounts = []
        self.savings_accounts = []
        try:
            checking, savings = self.store.load(self.owner)
        except PersistenceError as e:
            logger.error(f"Error loading accounts for {self.owner}: {e}")
            return False

        self.checking_accounts = checking
        self.savings_accounts = savings
        logger.debug(
            f"Loaded {len(checking)} checking and {len(savings)} savings "
            f"account(s) for {self.owner}"
        )
        return True

    def save_accounts(self) -> bool:
        """Write both collections to disk.

        Returns:
            True if the write succeeded, False otherwise.
        """
        try:
            self.store.save(self.owner, self.checking_accounts, self.savings_accounts)
        except PersistenceError as e:
            logger.error(f"Error saving accounts for {self.owner}: {e}")
            return False
        return True

    # Lookup

    def all_accounts(self) -> List[Account]:
        """Checking accounts first, then savings, each in creation order."""
        return self.checking_accounts + self.savings_accounts

    def _collection(self, account_type: str) -> List[Account]:
        if account_type == CHECKING:
            return self.checking_accounts
        return self.savings_accounts

    def get_account_by_name(self, name: str) -> Optional[Account]:
        """Find an account of either type by case-insensitive name.

        Returns:
            Account if found, None otherwise.
        """
        for account in self.all_accounts():
            if account.matches(name):
                return account
        return None

    def _require_account(self, name: str) -> Optional[Account]:
        account = self.get_account_by_name(name)
        if account is None:
            logger.info(f"Account not found: {name}")
        return account

    def is_account_name_taken(self, name: str) -> bool:
        return self.get_account_by_name(name) is not None

    def _has_capacity(self, account_type: str) -> bool:
        limit = _MAX_ACCOUNTS[account_type]
        if len(self._collection(account_type)) >= limit:
            logger.info(f"Maximum number of {account_type} accounts ({limit}) reached.")
            return False
        return True

    # Lifecycle

    def _add_account(self, account: Account) -> bool:
        if not is_valid_account_name(account.name):
            logger.info(f"Invalid account name: '{account.name}'")
            return False
        if not self._has_capacity(account.type):
            return False
        if self.is_account_name_taken(account.name):
            logger.info(f"Account name '{account.name}' is already in use.")
            return False

        self._collection(account.type).append(account)
        logger.info(f"Created {account.type} account '{account.name}' for {self.owner}")
        return self.save_accounts()

    def add_checking(self, name: str, overdraft_limit: float = 0.0) -> bool:
        """Open a checking account.

        Args:
            name: Account name, unique across both account types.
            overdraft_limit: How far below zero the balance may go.

        Returns:
            True if the account was created, False if it was rejected.
        """
        if overdraft_limit < 0:
            logger.info("Overdraft limit cannot be negative.")
            return False
        return self._add_account(Account.checking(name, overdraft_limit))

    def add_savings(self, name: str, interest_rate: float) -> bool:
        """Open a savings account earning ``interest_rate`` percent."""
        if interest_rate < 0:
            logger.info("Interest rate cannot be negative.")
            return False
        return self._add_account(Account.savings(name, interest_rate))

    def remove_account(self, name: str) -> bool:
        """Remove an account regardless of its balance."""
        account = self.get_account_by_name(name)
        if account is None:
            return False
        self._collection(account.type).remove(account)
        return self.save_accounts()

    def close_account(self, name: str) -> bool:
        """Close an account whose balance is zero or positive.

        Returns:
            True if the account was removed, False if it does not exist or is
            overdrawn.
        """
        account = self._require_account(name)
        if account is None:
            return False
        if not account.can_close():
            logger.info(
                f"Cannot close account '{account.name}': balance must be zero or positive."
            )
            return False

        logger.info(f"Closing account '{account.name}' for {self.owner}")
        return self.remove_account(account.name)

    def migrate_existing_account(self, existing: Optional[Account]) -> bool:
        """Bring a single pre-existing account into this collection.

        The account gets a generated name ("Primary Checking", "Primary Savings",
        with a numeric suffix if that is taken) and goes through the same
        capacity check as a new account. Balance and overdraft settings carry
        over.
        """
        if existing is None:
            return False

        base_name = f"Primary {existing.type.capitalize()}"
        name = base_name
        suffix = 1
        while self.is_account_name_taken(name):
            name = f"{base_name} {suffix}"
            suffix += 1

        if existing.is_savings:
            account = Account.savings(name, existing.interest_rate)
        else:
            account = Account.checking(name)
        account.balance = existing.balance
        account.set_overdraft_limit(existing.overdraft_limit)
        account.set_overdraft_interest_rate(existing.overdraft_interest_rate)

        return self._add_account(account)

    # Account settings

    def freeze_account(self, name: str) -> bool:
        account = self._require_account(name)
        if account is None:
            return False
        account.freeze()
        return self.save_accounts()

    def unfreeze_account(self, name: str) -> bool:
        account = self._require_account(name)
        if account is None:
            return False
        account.unfreeze()
        return self.save_accounts()

    def set_overdraft_limit(self, name: str, overdraft_limit: float) -> bool:
        if overdraft_limit < 0:
            logger.info("Overdraft limit cannot be negative.")
            return False
        account = self._require_account(name)
        if account is None:
            return False
        account.set_overdraft_limit(overdraft_limit)
        return self.save_accounts()

    def set_overdraft_interest_rate(self, name: str, interest_rate: float) -> bool:
        if interest_rate < 0:
            logger.info("Interest rate cannot be negative.")
            return False
        account = self._require_account(name)
        if account is None:
            return False
        account.set_overdraft_interest_rate(interest_rate)
        return self.save_accounts()

    def set_withdrawal_limit(self, name: str, withdrawal_limit: float) -> bool:
        if withdrawal_limit < 0:
            logger.info("Withdrawal limit cannot be negative.")
            return False
        account = self._require_account(name)
        if account is None:
            return False
        account.set_withdrawal_limit(withdrawal_limit)
        return self.save_accounts()

    def set_transfer_limit(self, name: str, transfer_limit: float) -> bool:
        """Change an account's per-transfer cap.

        The transfer limit is not part of the collection file, so a reloaded
        account starts again from its type's default.
        """
        account = self._require_account(name)
        if account is None:
            return False
        if not account.set_transfer_limit(transfer_limit):
            return False
        return self.save_accounts()

    # Money movement

    def deposit(self, name: str, amount: float) -> bool:
        """Deposit into an account and record it in the history."""
        return self._deposit(name, amount, f"Deposit: ${amount:.2f}")

    def deposit_check(self, name: str, amount: float, check_number: str) -> bool:
        """Deposit a check, recording its number in the history."""
        return self._deposit(
            name, amount, f"Deposited Check #{check_number}: ${amount:.2f}"
        )

    def _deposit(self, name: str, amount: float, description: str) -> bool:
        if amount <= 0:
            logger.info("Deposit amount must be positive.")
            return False
        account = self._require_account(name)
        if account is None or not account.deposit(amount):
            return False

        self.ledger.record_transaction(self.owner, account.name, description)
        self.save_accounts()
        logger.info(f"Deposited ${amount:.2f}. New balance: ${account.balance:.2f}")
        return True

    def withdraw(self, name: str, amount: float) -> bool:
        """Withdraw from an account and record it in the history."""
        if amount <= 0:
            logger.info("Withdrawal amount must be positive.")
            return False
        account = self._require_account(name)
        if account is None or not account.withdraw(amount):
            return False

        self.ledger.record_transaction(
            self.owner, account.name, f"Withdraw: ${amount:.2f}"
        )
        self.save_accounts()
        logger.info(f"Withdrew ${amount:.2f}. New balance: ${account.balance:.2f}")
        if account.balance < 0:
            logger.warning(
                f"Account '{account.name}' is now in overdraft by "
                f"${account.overdraft_amount:.2f} and will be charged "
                f"{account.overdraft_interest_rate:.2f}% interest until repaid."
            )
        return True

    # Interest

    def apply_interest(self, name: str) -> Optional[float]:
        """Credit interest to one savings account.

        Returns:
            The interest credited, or None if the account is missing, frozen,
            or not a savings account.
        """
        account = self._require_account(name)
        if account is None:
            return None
        if account.frozen:
            logger.info(f"Account '{account.name}' is frozen. Unfreeze it first to apply interest.")
            return None
        if not account.is_savings:
            logger.info(f"Account '{account.name}' does not earn interest.")
            return None

        interest = account.apply_interest()
        self.ledger.record_transaction(
            self.owner, account.name, f"Interest Applied: ${interest:.2f}"
        )
        self.save_accounts()
        return interest

    def apply_interest_to_all_savings(self) -> float:
        """Credit interest to every savings account that is not frozen.

        Returns:
            Total interest credited.
        """
        total = 0.0
        for account in self.savings_accounts:
            if not account.frozen:
                total += account.apply_interest()
        self.save_accounts()
        return total

    def apply_overdraft_interest_to_all(self) -> float:
        """Charge overdraft interest on every overdrawn account that is not frozen.

        Each non-zero charge is recorded in that account's history.

        Returns:
            Total interest charged.
        """
        total = 0.0
        for account in self.all_accounts():
            if account.frozen or account.balance >= 0:
                continue
            interest = account.apply_overdraft_interest()
            total += interest
            if interest > 0:
                self.ledger.record_transaction(
                    self.owner,
                    account.name,
                    f"Overdraft Interest Charged: ${interest:.2f}",
                )
        self.save_accounts()
        return total

    # Checking extras

    def order_checks(self, name: str) -> Optional[str]:
        """Order checks for a checking account.

        Returns:
            The order reference, or None if the order was refused.
        """
        account = self._require_checking_extras(name)
        if account is None:
            return None
        order_id = account.order_checks()
        self.ledger.record_transaction(self.owner, account.name, "Ordered checks")
        return order_id

    def order_debit_card(self, name: str) -> Optional[DebitCard]:
        account = self._require_checking_extras(name)
        if account is None:
            return None
        card = account.order_debit_card()
        self.ledger.record_transaction(
            self.owner, account.name, f"Ordered debit card ending in {card.last_four}"
        )
        return card

    def _require_checking_extras(self, name: str) -> Optional[Account]:
        account = self._require_account(name)
        if account is None:
            return None
        if account.frozen:
            logger.info(f"Account '{account.name}' is frozen. Unfreeze it first to place orders.")
            return None
        if not account.is_checking:
            logger.info("Checks and debit cards are only available for checking accounts.")
            return None
        return account

    # History

    def history(self, name: str, n: Optional[int] = None) -> List[str]:
        """Get an account's history, or only its ``n`` most recent entries."""
        account = self.get_account_by_name(name)
        account_name = account.name if account else name
        if n is None:
            return self.ledger.get_history(self.owner, account_name)
        return self.ledger.get_last_n(self.owner, account_name, n)
