"""Password generator and clipboard utilities."""

import logging
import random
import string
from typing import Optional

import pyperclip

from .config import Config

logger = logging.getLogger(__name__)

SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>?"
DEFAULT_LEN = Config.PASSWORD_LENGTH

# Order matters: the first pass draws one character from each pool in turn.
POOLS = (
    string.ascii_lowercase,
    string.ascii_uppercase,
    string.digits,
    SYMBOLS,
)


class ClipboardError(Exception):
    """Raised when the system clipboard cannot be written."""

    pass


def generate_password(
    length: int = DEFAULT_LEN, rng: Optional[random.Random] = None
) -> str:
    """Generate a password with at least one character from every pool.

    Each extra character picks a pool uniformly, then a character uniformly
    within that pool. The result is shuffled so the guaranteed characters
    do not sit at the front.
    """
    if length < len(POOLS):
        raise ValueError(
            f"Password length ({length}) must be at least {len(POOLS)} "
            "to include one character from each character class."
        )

    source = rng if rng is not None else random

    chars = [source.choice(pool) for pool in POOLS]
    while len(chars) < length:
        chars.append(source.choice(source.choice(POOLS)))

    source.shuffle(chars)
    return "".join(chars)


def copy_to_clipboard(text: str) -> None:
    """Copy text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available or the copy fails.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Clipboard unavailable: {e}") from e
    logger.debug("Copied %d characters to clipboard", len(text))
