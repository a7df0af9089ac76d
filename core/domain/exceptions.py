"""
Domain errors and the provider error taxonomy used by the standings route.
"""

from enum import Enum
from typing import Optional

UNIQUE_VIOLATION_CODE = "23505"


class ConfigurationError(RuntimeError):
    """Required configuration is missing; raised before any work starts."""


class ProviderError(Exception):
    """Football data provider call failed."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class NewsInsertError(Exception):
    """Insert into the news table was rejected by the database."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details
        self.hint = hint

    @property
    def is_unique_violation(self) -> bool:
        return self.code == UNIQUE_VIOLATION_CODE


class ProviderErrorKind(str, Enum):
    NETWORK = "network"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    GENERIC = "generic"


def classify_provider_error(error: object) -> ProviderErrorKind:
    """
    Map a provider failure to the message shown to the user.
    Only real exceptions are inspected; anything else thrown is generic.
    """
    if not isinstance(error, BaseException):
        return ProviderErrorKind.GENERIC

    message = str(error).lower()
    if "network" in message:
        return ProviderErrorKind.NETWORK
    if "429" in message or "rate limit" in message:
        return ProviderErrorKind.RATE_LIMIT
    if "timeout" in message:
        return ProviderErrorKind.TIMEOUT
    return ProviderErrorKind.GENERIC
