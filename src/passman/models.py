"""Data models for stored credentials."""

from dataclasses import dataclass

FIELDS = ("account", "username", "email", "password")


@dataclass(frozen=True)
class AccountEntry:
    """One saved credential. Entries are replaced, never edited in place."""

    account: str
    username: str
    email: str
    password: str

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON storage."""
        return {
            "account": self.account,
            "username": self.username,
            "email": self.email,
            "password": self.password,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AccountEntry":
        """Create AccountEntry from dictionary.

        Unknown keys are ignored. Raises KeyError for a missing field and
        TypeError for a field that is not a string.
        """
        values = {}
        for name in FIELDS:
            value = data[name]
            if not isinstance(value, str):
                raise TypeError(
                    f"Field '{name}' must be a string, got {type(value).__name__}"
                )
            values[name] = value
        return cls(**values)
