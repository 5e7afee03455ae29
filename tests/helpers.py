"""Helper utilities for tests."""

from datetime import datetime
from pathlib import Path
from typing import List

from db.manager import StorageManager
from errors import PersistenceError

OWNER = "alice"
FIXED_NOW = datetime(2025, 1, 15, 9, 30, 0)


def write_collection(storage: StorageManager, owner: str, account_type: str, lines: List[str]) -> Path:
    """Write raw lines to an owner's collection file.

    Args:
        storage: Storage manager resolving the file path.
        owner: Owner whose file to write.
        account_type: "checking" or "savings".
        lines: Lines to write, without newlines.

    Returns:
        Path of the written file.
    """
    path = storage.collection_path(owner, account_type)
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    return path


class FailingStorageManager(StorageManager):
    """Storage manager whose writes always fail, as on a read-only disk."""

    def atomic_write(self, path, lines):
        raise PersistenceError(f"Failed to write {path}: read-only", path=path)

    def append_line(self, path, line):
        raise PersistenceError(f"Failed to append to {path}: read-only", path=path)
