"""Record store - plaintext JSON persistence of account entries."""

import json
import logging
from typing import Iterable, List, Optional

from .config import config
from .models import AccountEntry

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base exception for record store errors."""

    pass


class StoreReadError(StoreError):
    """Raised when the database file cannot be read."""

    pass


class StoreCorruptedError(StoreError):
    """Raised when the database file is readable but not a valid entry list."""

    pass


class StoreWriteError(StoreError):
    """Raised when the database file cannot be written."""

    pass


def encode_entries(entries: Iterable[AccountEntry]) -> str:
    """Encode entries as a JSON array. The array is the top-level value."""
    return json.dumps(
        [entry.to_dict() for entry in entries], indent=2, ensure_ascii=False
    )


def decode_entries(text: str) -> List[AccountEntry]:
    """Decode a JSON array of entry objects.

    Raises:
        StoreCorruptedError: If the text is not JSON, is not an array, or
            holds an item that is not a valid entry object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StoreCorruptedError(f"Database is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise StoreCorruptedError(
            f"Database must hold a list of entries, got {type(data).__name__}"
        )

    entries = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise StoreCorruptedError(f"Entry #{index} is not an object")
        try:
            entries.append(AccountEntry.from_dict(item))
        except KeyError as e:
            raise StoreCorruptedError(f"Entry #{index} is missing field {e}") from e
        except TypeError as e:
            raise StoreCorruptedError(f"Entry #{index} is invalid: {e}") from e
    return entries


def find_account(entries: List[AccountEntry], name: str) -> Optional[int]:
    """Index of the first entry whose account matches name, ignoring case."""
    wanted = name.lower()
    return next(
        (i for i, entry in enumerate(entries) if entry.account.lower() == wanted),
        None,
    )


class RecordStore:
    """Flat-file store of account entries.

    Holds no entries itself: every call to load() reads the whole file and
    every call to save() rewrites it. There is no locking, so concurrent
    invocations against one file follow last-writer-wins.
    """

    def __init__(self, file_path: Optional[str] = None):
        self.file_path = file_path or config.database_path

    def ensure_initialized(self) -> None:
        """Write an empty entry list if the file is missing, unreadable or empty."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.info("Initializing database at %s (%s)", self.file_path, e)
            self.save([])
            return

        if not content.strip():
            logger.info("Initializing empty database at %s", self.file_path)
            self.save([])

    def load(self) -> List[AccountEntry]:
        """Read and decode every entry from the database file."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise StoreCorruptedError(f"Database file has invalid encoding: {e}") from e
        except OSError as e:
            raise StoreReadError(f"Failed to read database file: {e}") from e

        entries = decode_entries(content)
        logger.debug("Loaded %d entries from %s", len(entries), self.file_path)
        return entries

    def save(self, entries: List[AccountEntry]) -> None:
        """Overwrite the database file with the full entry list."""
        content = encode_entries(entries)
        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise StoreWriteError(f"Failed to save database file: {e}") from e
        logger.debug("Saved %d entries to %s", len(entries), self.file_path)
