"""Storage manager for per-owner file paths and safe file writes."""

import os
import tempfile
from pathlib import Path
from typing import Iterable, List

from config import Config
from errors import PersistenceError

HISTORY_SUFFIX = "_history.txt"


class StorageManager:
    """Manages on-disk locations for account collections and histories.

    Layout::

        <accounts_dir>/<owner>/checking.txt
        <accounts_dir>/<owner>/savings.txt
        <history_dir>/<owner>/<account name>_history.txt

    Directories are created on first use. Every OSError is re-raised as
    PersistenceError.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        self.config = config

    def _ensure_dir(self, directory: Path) -> Path:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            raise PersistenceError(
                f"Failed to create directory {directory}: {e}", path=directory
            ) from e
        return directory

    def owner_accounts_dir(self, owner: str) -> Path:
        """Get (and create) the directory holding an owner's collection files."""
        return self._ensure_dir(self.config.accounts_dir / owner)

    def owner_history_dir(self, owner: str) -> Path:
        """Get (and create) the directory holding an owner's history files."""
        return self._ensure_dir(self.config.history_dir / owner)

    def collection_path(self, owner: str, account_type: str) -> Path:
        """Get the collection file for one account type, e.g. checking.txt."""
        return self.owner_accounts_dir(owner) / f"{account_type}.txt"

    def history_path(self, owner: str, account_name: str) -> Path:
        return self.owner_history_dir(owner) / f"{account_name}{HISTORY_SUFFIX}"

    def read_lines(self, path: Path) -> List[str]:
        """Read a text file into lines without trailing newlines.

        Returns:
            The file's lines, or an empty list if the file does not exist.
        """
        if not path.exists():
            return []
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read().splitlines()
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Failed to read {path}: {e}", path=path) from e

    def append_line(self, path: Path, line: str) -> None:
        """Append a single line to a file, creating it if needed."""
        try:
            with open(path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Failed to append to {path}: {e}", path=path) from e

    def atomic_write(self, path: Path, lines: Iterable[str]) -> None:
        """Replace a file's contents with ``lines``.

        The data is written to a temporary file in the same directory and then
        renamed over the target, so readers see either the old or the new file,
        never a truncated one.
        """
        fd, tmp_name = None, None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                fd = None
                for line in lines:
                    f.write(line + "\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Failed to write {path}: {e}", path=path) from e
        finally:
            if fd is not None:
                os.close(fd)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
