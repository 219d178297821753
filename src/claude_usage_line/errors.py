"""Exceptions raised while producing the usage line.

Every failure is a subclass of UsageLineError so the CLI driver can turn
all of them into the same "N/A" placeholder in one place.
"""

from typing import Optional


class UsageLineError(Exception):
    """Base class for all usage line failures."""


class CredentialUnavailable(UsageLineError):
    """No OAuth access token could be found."""


class NetworkError(UsageLineError):
    """The usage request failed or returned a non-200 status."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class RequestTimeoutError(UsageLineError):
    """The usage endpoint did not answer within the timeout."""


class ParseError(UsageLineError):
    """The usage response was not JSON or had an unexpected shape."""


class InvalidArgumentsError(UsageLineError):
    """The command line could not be parsed."""
