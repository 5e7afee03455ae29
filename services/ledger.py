"""Append-only transaction history per account."""

from datetime import datetime
from typing import Callable, List, Optional

from db.manager import StorageManager
from errors import PersistenceError
from logger import get_logger

logger = get_logger()

TIMESTAMP_FORMAT = "%m-%d-%Y %H:%M:%S"
DEFAULT_RECENT_COUNT = 5


class TransactionLedger:
    """Records and reads the history of each (owner, account) pair.

    Entries are single lines of the form ``<description>, MM-dd-yyyy HH:mm:ss``.
    Lines are only ever appended, never rewritten. History is independent of
    account state, so it outlives a closed account.

    Args:
        storage: Storage manager resolving history file paths.
        clock: Callable returning the current datetime (injectable for tests).
    """

    def __init__(
        self,
        storage: StorageManager,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.storage = storage
        self.clock = clock or datetime.now

    def format_entry(self, description: str) -> str:
        """Build the history line for ``description`` stamped with the current time."""
        return f"{description}, {self.clock().strftime(TIMESTAMP_FORMAT)}"

    def record_transaction(self, owner: str, account_name: str, description: str) -> bool:
        """Append one entry to an account's history.

        Returns:
            True if the entry was written, False if the write failed.
        """
        try:
            path = self.storage.history_path(owner, account_name)
            self.storage.append_line(path, self.format_entry(description))
        except PersistenceError as e:
            logger.error(f"Error recording transaction for {account_name}: {e}")
            return False
        return True

    def get_history(self, owner: str, account_name: str) -> List[str]:
        """Get every history entry for an account, oldest first.

        Returns:
            List of entry lines; empty if the account has no history yet or the
            file could not be read.
        """
        try:
            path = self.storage.history_path(owner, account_name)
            return self.storage.read_lines(path)
        except PersistenceError as e:
            logger.error(f"Error reading history for {account_name}: {e}")
            return []

    def get_last_n(
        self, owner: str, account_name: str, n: int = DEFAULT_RECENT_COUNT
    ) -> List[str]:
        """Get the ``n`` most recent entries, still in oldest-first order."""
        if n <= 0:
            return []
        return self.get_history(owner, account_name)[-n:]
