from datetime import datetime, timedelta

from services.ledger import TransactionLedger
from tests.helpers import FailingStorageManager


class TestTransactionLedger:
    """Tests for TransactionLedger."""

    def test_history_empty_when_no_file(self, ledger):
        assert ledger.get_history("alice", "Bills") == []

    def test_record_transaction_format(self, ledger, storage):
        """Test entries are the description followed by a timestamp."""
        assert ledger.record_transaction("alice", "Bills", "Deposit: $100.00") is True

        assert ledger.get_history("alice", "Bills") == [
            "Deposit: $100.00, 01-15-2025 09:30:00"
        ]
        assert storage.history_path("alice", "Bills").exists()

    def test_history_is_append_only(self, ledger):
        ledger.record_transaction("alice", "Bills", "first")
        ledger.record_transaction("alice", "Bills", "second")
        ledger.record_transaction("alice", "Bills", "third")

        history = ledger.get_history("alice", "Bills")

        assert [entry.split(",")[0] for entry in history] == ["first", "second", "third"]

    def test_histories_are_per_account(self, ledger):
        ledger.record_transaction("alice", "Bills", "bills entry")
        ledger.record_transaction("alice", "Rainy Day", "savings entry")
        ledger.record_transaction("bob_smith", "Bills", "bob entry")

        assert len(ledger.get_history("alice", "Bills")) == 1
        assert ledger.get_history("alice", "Rainy Day")[0].startswith("savings entry")
        assert ledger.get_history("bob_smith", "Bills")[0].startswith("bob entry")

    def test_timestamp_uses_clock(self, storage):
        times = iter([datetime(2024, 12, 31, 23, 59, 59), datetime(2025, 1, 1, 0, 0, 1)])
        ledger = TransactionLedger(storage, clock=lambda: next(times))

        ledger.record_transaction("alice", "Bills", "a")
        ledger.record_transaction("alice", "Bills", "b")

        assert ledger.get_history("alice", "Bills") == [
            "a, 12-31-2024 23:59:59",
            "b, 01-01-2025 00:00:01",
        ]

    def test_get_last_n_returns_most_recent_in_order(self, storage):
        """Test 7 entries with n=5 returns the last 5, oldest first."""
        start = datetime(2025, 3, 1, 8, 0, 0)
        times = iter([start + timedelta(minutes=i) for i in range(7)])
        ledger = TransactionLedger(storage, clock=lambda: next(times))
        for i in range(7):
            ledger.record_transaction("alice", "Bills", f"entry {i}")

        recent = ledger.get_last_n("alice", "Bills", 5)

        assert [entry.split(",")[0] for entry in recent] == [
            "entry 2",
            "entry 3",
            "entry 4",
            "entry 5",
            "entry 6",
        ]

    def test_get_last_n_with_short_history(self, ledger):
        ledger.record_transaction("alice", "Bills", "only entry")

        assert ledger.get_last_n("alice", "Bills") == [
            "only entry, 01-15-2025 09:30:00"
        ]

    def test_get_last_n_defaults_to_five(self, ledger):
        for i in range(8):
            ledger.record_transaction("alice", "Bills", f"entry {i}")

        assert len(ledger.get_last_n("alice", "Bills")) == 5

    def test_get_last_n_zero(self, ledger):
        ledger.record_transaction("alice", "Bills", "entry")

        assert ledger.get_last_n("alice", "Bills", 0) == []

    def test_record_failure_returns_false(self, test_config):
        ledger = TransactionLedger(FailingStorageManager(test_config))

        assert ledger.record_transaction("alice", "Bills", "Deposit: $1.00") is False
        assert ledger.get_history("alice", "Bills") == []
