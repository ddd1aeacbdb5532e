from __future__ import annotations

from typing import Any, List, Optional


class RelayError(Exception):
    """Base class for all apmc-relay errors."""


class ConfigurationError(RelayError):
    """Raised when a required setting is missing at startup."""


class BackendTransportError(RelayError):
    """
    The backend could not be reached or answered with a non-success status.

    `body` carries the raw response text when the backend produced one.
    """

    def __init__(self, message: str, *, body: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.body = body
        self.status_code = status_code


class BackendGraphQLError(RelayError):
    """
    The backend executed the request but reported GraphQL-level errors.
    """

    def __init__(self, errors: List[Any]) -> None:
        super().__init__(f"GraphQL returned {len(errors)} error(s)")
        self.errors = errors
