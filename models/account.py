import random
from dataclasses import dataclass
from typing import Optional

from logger import get_logger

logger = get_logger()

CHECKING = "checking"
SAVINGS = "savings"
ACCOUNT_TYPES = (CHECKING, SAVINGS)

DEFAULT_WITHDRAWAL_LIMIT = 10000.0
DEFAULT_OVERDRAFT_LIMIT = 0.0
DEFAULT_OVERDRAFT_INTEREST_RATE = 15.0
DEFAULT_TRANSFER_LIMITS = {CHECKING: 2000.0, SAVINGS: 1000.0}

DEBIT_CARD_PREFIX = "2025"
DEBIT_CARD_EXPIRATION_YEAR = 2028


@dataclass
class DebitCard:
    number: str  # e.g. "2025-1234-5678-9012"
    expiration: str  # MM/YYYY

    @property
    def last_four(self) -> str:
        return self.number[-4:]


@dataclass
class Account:
    """A checking or savings account owned by a single user.

    Balances are plain floats. Both account types share every field except
    ``interest_rate``, which only savings accounts carry. Behaviour that
    differs by type switches on ``type``.
    """

    name: str
    type: str  # 'checking' or 'savings'
    balance: float = 0.0
    withdrawal_limit: float = DEFAULT_WITHDRAWAL_LIMIT  # per withdrawal
    overdraft_limit: float = DEFAULT_OVERDRAFT_LIMIT  # how far below zero
    overdraft_interest_rate: float = DEFAULT_OVERDRAFT_INTEREST_RATE  # percent
    frozen: bool = False
    transfer_limit: Optional[float] = None  # per transfer, defaults by type
    interest_rate: Optional[float] = None  # percent, savings only

    def __post_init__(self):
        if self.type not in ACCOUNT_TYPES:
            raise ValueError(f"Unknown account type: {self.type}")
        if self.type == SAVINGS and self.interest_rate is None:
            raise ValueError("Savings accounts require an interest rate")
        if self.type == CHECKING and self.interest_rate is not None:
            raise ValueError("Checking accounts do not earn interest")
        if self.transfer_limit is None:
            self.transfer_limit = DEFAULT_TRANSFER_LIMITS[self.type]

    @classmethod
    def checking(cls, name: str, overdraft_limit: float = 0.0) -> "Account":
        """Create an empty checking account."""
        return cls(name=name, type=CHECKING, overdraft_limit=overdraft_limit)

    @classmethod
    def savings(cls, name: str, interest_rate: float) -> "Account":
        """Create an empty savings account."""
        return cls(name=name, type=SAVINGS, interest_rate=interest_rate)

    @property
    def is_checking(self) -> bool:
        return self.type == CHECKING

    @property
    def is_savings(self) -> bool:
        return self.type == SAVINGS

    @property
    def overdraft_amount(self) -> float:
        """How far the balance currently sits below zero."""
        return max(0.0, -self.balance)

    @property
    def available_funds(self) -> float:
        """Largest amount a withdrawal could take, ignoring the withdrawal limit."""
        return self.balance + self.overdraft_limit

    def matches(self, name: str) -> bool:
        """Account names compare case-insensitively."""
        return self.name.lower() == name.lower()

    def deposit(self, amount: float) -> bool:
        """Add ``amount`` to the balance.

        The amount is not checked here; callers reject non-positive amounts
        before calling.

        Returns:
            False if the account is frozen and nothing changed, True otherwise.
        """
        if self.frozen:
            logger.info(f"Cannot deposit to frozen account '{self.name}'.")
            return False
        self.balance += amount
        return True

    def withdraw(self, amount: float) -> bool:
        """Take ``amount`` out of the account if every rule allows it.

        A withdrawal is refused when the account is frozen, when it exceeds the
        per-transaction withdrawal limit, or when it would leave the balance
        below ``-overdraft_limit``. A refused withdrawal leaves the balance
        unchanged.
        """
        if self.frozen:
            logger.info(f"Cannot withdraw from frozen account '{self.name}'.")
            return False

        if amount > self.withdrawal_limit:
            logger.info(
                f"Withdrawal exceeds the limit of ${self.withdrawal_limit:.2f} "
                f"per transaction."
            )
            return False

        if self.balance >= amount or self.balance - amount >= -self.overdraft_limit:
            self.balance -= amount
            return True

        logger.info(
            f"Insufficient funds. Your maximum withdrawal amount is "
            f"${self.available_funds:.2f}."
        )
        return False

    def apply_overdraft_interest(self) -> float:
        """Charge overdraft interest on a negative balance.

        Returns:
            The interest charged, 0.0 when the balance is not negative.
        """
        if self.balance >= 0:
            return 0.0
        interest = abs(self.balance) * (self.overdraft_interest_rate / 100)
        self.balance -= interest
        return interest

    def apply_interest(self) -> float:
        """Credit savings interest on the current balance.

        A negative balance is credited negative interest, which pushes it
        further below zero.

        Returns:
            The interest credited (0.0 for checking accounts).
        """
        if self.type != SAVINGS:
            logger.info(f"Account '{self.name}' does not earn interest.")
            return 0.0
        interest = self.balance * (self.interest_rate / 100)
        self.balance += interest
        logger.info(
            f"Interest of {interest:.2f} applied. New balance: {self.balance:.2f}"
        )
        return interest

    def can_close(self) -> bool:
        return self.balance >= 0

    def freeze(self) -> None:
        self.frozen = True

    def unfreeze(self) -> None:
        self.frozen = False

    def set_withdrawal_limit(self, limit: float) -> None:
        self.withdrawal_limit = limit

    def set_overdraft_limit(self, limit: float) -> None:
        self.overdraft_limit = limit

    def set_overdraft_interest_rate(self, rate: float) -> None:
        self.overdraft_interest_rate = rate

    def set_transfer_limit(self, limit: float) -> bool:
        if limit <= 0:
            logger.info("Transfer limit must be positive.")
            return False
        self.transfer_limit = limit
        return True

    def order_checks(self) -> Optional[str]:
        """Place a check order.

        Returns:
            An order reference, or None for savings accounts.
        """
        if self.type != CHECKING:
            return None
        order_id = f"CHK-{random.randint(0, 999999):06d}"
        logger.info(f"Checks ordered for '{self.name}' ({order_id}).")
        return order_id

    def order_debit_card(self) -> Optional[DebitCard]:
        """Issue a new debit card number. Checking accounts only."""
        if self.type != CHECKING:
            return None

        number = DEBIT_CARD_PREFIX
        for i in range(12):
            if i % 4 == 0:
                number += "-"
            number += str(random.randint(0, 9))
        expiration = f"{random.randint(1, 12):02d}/{DEBIT_CARD_EXPIRATION_YEAR}"

        card = DebitCard(number=number, expiration=expiration)
        logger.info(f"Debit card ending in {card.last_four} ordered for '{self.name}'.")
        return card

    def to_dict(self) -> dict:
        """Convert account to dictionary for display."""
        return {
            "name": self.name,
            "type": self.type,
            "balance": self.balance,
            "frozen": self.frozen,
            "withdrawal_limit": self.withdrawal_limit,
            "overdraft_limit": self.overdraft_limit,
            "overdraft_interest_rate": self.overdraft_interest_rate,
            "transfer_limit": self.transfer_limit,
            "interest_rate": self.interest_rate,
        }
