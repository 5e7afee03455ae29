"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from db.account_store import AccountStore
from db.manager import StorageManager
from services.accounts import AccountManager
from services.base import Services
from services.ledger import TransactionLedger
from tests.helpers import FIXED_NOW, OWNER


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration rooted in a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "passbook",
        accounts_dir=tmp_path / "passbook" / "accounts",
        history_dir=tmp_path / "passbook" / "history",
        log_level="DEBUG",
        log_dir=tmp_path / "passbook" / "logs",
        default_owner="",
    )


@pytest.fixture
def storage(test_config):
    return StorageManager(test_config)


@pytest.fixture
def store(storage):
    return AccountStore(storage)


@pytest.fixture
def ledger(storage):
    """Ledger whose clock always reads FIXED_NOW."""
    return TransactionLedger(storage, clock=lambda: FIXED_NOW)


@pytest.fixture
def manager(store, ledger):
    """AccountManager for OWNER with nothing on disk yet."""
    account_manager = AccountManager(OWNER, store, ledger)
    account_manager.load_accounts()
    return account_manager


@pytest.fixture
def services(test_config):
    """Services container for OWNER backed by the temporary directory."""
    return Services(test_config, OWNER)
