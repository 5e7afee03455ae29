import pytest

from services.transfers import transfer


@pytest.fixture
def funded(manager):
    """Manager with Bills holding $200 and an empty Rainy Day savings account."""
    manager.add_checking("Bills")
    manager.add_savings("Rainy Day", 1.0)
    manager.deposit("Bills", 200.0)
    return manager


class TestTransfer:
    """Tests for transfer between accounts."""

    def test_transfer_moves_money(self, funded):
        source = funded.get_account_by_name("Bills")
        target = funded.get_account_by_name("Rainy Day")

        assert transfer(funded, source, "Rainy Day", 75.50) is True

        assert source.balance == pytest.approx(124.50)
        assert target.balance == pytest.approx(75.50)
        assert source.balance + target.balance == pytest.approx(200.0)

    def test_transfer_records_both_sides(self, funded):
        source = funded.get_account_by_name("Bills")

        transfer(funded, source, "rainy day", 75.50)

        assert funded.history("Bills", 1) == [
            "Transfer to Rainy Day: $75.50, 01-15-2025 09:30:00"
        ]
        assert funded.history("Rainy Day") == [
            "Transfer from Bills: $75.50, 01-15-2025 09:30:00"
        ]

    def test_transfer_persists_balances(self, funded):
        transfer(funded, funded.get_account_by_name("Bills"), "Rainy Day", 50.0)

        funded.load_accounts()

        assert funded.get_account_by_name("Bills").balance == 150.0
        assert funded.get_account_by_name("Rainy Day").balance == 50.0

    def test_transfer_to_same_account(self, funded):
        source = funded.get_account_by_name("Bills")

        assert transfer(funded, source, "BILLS", 10.0) is False
        assert source.balance == 200.0

    def test_transfer_to_missing_account(self, funded):
        source = funded.get_account_by_name("Bills")

        assert transfer(funded, source, "ghost", 10.0) is False
        assert source.balance == 200.0

    def test_transfer_to_frozen_account(self, funded):
        funded.freeze_account("Rainy Day")
        source = funded.get_account_by_name("Bills")

        assert transfer(funded, source, "Rainy Day", 10.0) is False
        assert source.balance == 200.0
        assert funded.history("Rainy Day") == []

    @pytest.mark.parametrize("amount", [0.0, -25.0])
    def test_transfer_non_positive_amount(self, funded, amount):
        source = funded.get_account_by_name("Bills")

        assert transfer(funded, source, "Rainy Day", amount) is False
        assert source.balance == 200.0

    def test_transfer_over_transfer_limit(self, funded):
        funded.deposit("Bills", 5000.0)
        source = funded.get_account_by_name("Bills")

        assert transfer(funded, source, "Rainy Day", 2000.01) is False
        assert transfer(funded, source, "Rainy Day", 2000.0) is True

    def test_savings_transfer_limit(self, funded):
        funded.deposit("Rainy Day", 3000.0)
        source = funded.get_account_by_name("Rainy Day")

        assert transfer(funded, source, "Bills", 1500.0) is False
        assert source.balance == 3000.0

    def test_transfer_insufficient_funds_leaves_target_untouched(self, funded):
        source = funded.get_account_by_name("Bills")
        target = funded.get_account_by_name("Rainy Day")

        assert transfer(funded, source, "Rainy Day", 200.01) is False
        assert source.balance == 200.0
        assert target.balance == 0.0
        assert funded.history("Rainy Day") == []

    def test_transfer_from_frozen_source(self, funded):
        funded.freeze_account("Bills")
        source = funded.get_account_by_name("Bills")

        assert transfer(funded, source, "Rainy Day", 10.0) is False
        assert funded.get_account_by_name("Rainy Day").balance == 0.0

    def test_transfer_into_overdraft(self, funded):
        funded.set_overdraft_limit("Bills", 100.0)
        source = funded.get_account_by_name("Bills")

        assert transfer(funded, source, "Rainy Day", 250.0) is True
        assert source.balance == pytest.approx(-50.0)
