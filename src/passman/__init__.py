"""passman - a plaintext command-line credential store."""

__version__ = "0.1.0"

# ruff: noqa: E402
from .config import config
from .models import AccountEntry
from .store import (
    RecordStore,
    StoreCorruptedError,
    StoreError,
    StoreReadError,
    StoreWriteError,
    decode_entries,
    encode_entries,
    find_account,
)

__all__ = [
    "AccountEntry",
    "RecordStore",
    "config",
    "StoreError",
    "StoreReadError",
    "StoreCorruptedError",
    "StoreWriteError",
    "decode_entries",
    "encode_entries",
    "find_account",
]
