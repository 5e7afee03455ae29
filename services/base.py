"""Base services container for dependency injection."""

from typing import Optional

from config import Config
from db.manager import StorageManager


class Services:
    """Container for all services of one owner's session.

    This class provides a centralized way to access all services and makes
    it easy to inject a different storage manager for testing.

    Args:
        config: Application configuration object.
        owner: Username whose accounts are loaded.
        storage: Optional storage manager for testing. If None, one is
                 created from config.
    """

    def __init__(
        self, config: Config, owner: str, storage: Optional[StorageManager] = None
    ):
        self.config = config
        self.owner = owner
        self.storage = storage or StorageManager(config)

        # Lazy import to avoid circular dependencies
        from db.account_store import AccountStore
        from services.accounts import AccountManager
        from services.ledger import TransactionLedger

        self.store = AccountStore(self.storage)
        self.ledger = TransactionLedger(self.storage)
        self.accounts = AccountManager(owner, self.store, self.ledger)
        self.accounts.load_accounts()
