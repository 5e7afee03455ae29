"""Exception types shared across Passbook."""


class PassbookError(Exception):
    """Base class for all Passbook errors."""


class ValidationError(PassbookError, ValueError):
    """User-supplied input was rejected before reaching the ledger engine."""


class PersistenceError(PassbookError):
    """Reading or writing an account collection or history file failed."""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path
