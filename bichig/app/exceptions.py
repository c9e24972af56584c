"""
Exception hierarchy for bichig.

The transliteration engine itself never raises; these cover the
surrounding configuration and setup code.
"""


class BichigException(Exception):
    """Base exception for all bichig errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(BichigException):
    """Configuration validation errors (invalid settings, unreadable files)."""

    pass
