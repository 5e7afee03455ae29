"""Moving money between two accounts of the same owner."""

from logger import get_logger
from models.account import Account

logger = get_logger()


def transfer(manager, source: Account, target_name: str, amount: float) -> bool:
    """Transfer ``amount`` from ``source`` to the account named ``target_name``.

    The transfer is refused, with no side effects, when the target is missing,
    frozen, or the source itself, when the amount is not positive or exceeds
    the source's transfer limit, or when the source withdrawal fails. Once the
    withdrawal succeeds the deposit cannot fail.

    The two history entries are written after the balances change and are not
    part of the same unit of work: if recording fails the balances are still
    correct but the history is incomplete.

    Args:
        manager: AccountManager owning both accounts.
        source: Account the money leaves.
        target_name: Name of the receiving account (case-insensitive).
        amount: Amount to move.

    Returns:
        True if the money moved, False if the transfer was refused.
    """
    target = manager.get_account_by_name(target_name)
    if target is None:
        logger.info(f"Account not found: {target_name}")
        return False
    if target is source or target.matches(source.name):
        logger.info("Cannot transfer to the same account.")
        return False
    if target.frozen:
        logger.info(f"Target account '{target.name}' is frozen. Cannot transfer funds to it.")
        return False

    if amount <= 0:
        logger.info("Transfer amount must be positive.")
        return False
    if amount > source.transfer_limit:
        logger.info(
            f"Transfer exceeds the limit of ${source.transfer_limit:.2f} for this account."
        )
        return False

    if not source.withdraw(amount):
        return False
    target.deposit(amount)

    manager.save_accounts()
    manager.ledger.record_transaction(
        manager.owner, source.name, f"Transfer to {target.name}: ${amount:.2f}"
    )
    manager.ledger.record_transaction(
        manager.owner, target.name, f"Transfer from {source.name}: ${amount:.2f}"
    )

    logger.info(
        f"Successfully transferred ${amount:.2f} from {source.name} to {target.name}."
    )
    logger.info(f"New balance in {source.name}: ${source.balance:.2f}")
    logger.info(f"New balance in {target.name}: ${target.balance:.2f}")
    return True
