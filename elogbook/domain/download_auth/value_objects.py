"""
Download Authorization Value Objects

Immutable value objects for type safety and validation.
"""

import secrets
import string
from dataclasses import dataclass

TOKEN_ALPHABET = string.ascii_letters + string.digits
DEFAULT_TOKEN_LENGTH = 30
MIN_TOKEN_LENGTH = 24


class InvalidDownloadTokenError(ValueError):
    """Raised when a download token is invalid."""
    pass


@dataclass(frozen=True)
class DownloadToken:
    """
    Value object representing a validated download token.

    Tokens are opaque alphanumeric strings of at least 24 characters.
    They only need to be unguessable for the few minutes they are alive.
    """
    value: str

    def __post_init__(self):
        if not self._is_valid():
            raise InvalidDownloadTokenError(
                f"Invalid download token: must be at least {MIN_TOKEN_LENGTH} "
                f"alphanumeric characters"
            )

    def _is_valid(self) -> bool:
        if not self.value or not isinstance(self.value, str):
            return False

        if len(self.value) < MIN_TOKEN_LENGTH:
            return False

        return all(c in TOKEN_ALPHABET for c in self.value)

    @classmethod
    def generate(cls, length: int = DEFAULT_TOKEN_LENGTH) -> 'DownloadToken':
        """
        Generate a new random download token.

        Args:
            length: Number of characters (raised to the minimum if lower)

        Returns:
            New DownloadToken instance with generated value
        """
        length = max(length, MIN_TOKEN_LENGTH)
        token_value = "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))
        return cls(token_value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DownloadDescriptor:
    """
    What a token resolves to: the real path on disk and the name shown to the user.

    The on-disk name is a hash; original_name is what ends up in the
    Content-Disposition header.
    """
    file_path: str
    original_name: str

    def __post_init__(self):
        if not self.file_path:
            raise ValueError("Download descriptor requires a file path")
        if not self.original_name:
            raise ValueError("Download descriptor requires an original name")
