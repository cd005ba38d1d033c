"""Exception hierarchy for the gagara client."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Coarse classification shared by all client errors."""
    GENERIC = "generic"
    NOT_FOUND = "not_found"
    QUERY = "query"


class GagaraError(Exception):
    """
    Base exception for gagara client errors.

    Attributes:
        message: Human-readable description
        status: HTTP status code, or None when the request never got a response
        body: Parsed JSON error body, or None if it was empty or not JSON
    """
    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status: int | None = None,
        body: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status={self.status!r})"


class DatasetNotFoundError(GagaraError):
    """The server does not know the dataset token (deleted, expired, or never issued)."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, token: str, body: dict[str, Any] | None = None):
        super().__init__(f"Dataset not found: {token}", 404, body)
        self.token = token


class QueryError(GagaraError):
    """The server rejected or failed to execute a SQL query."""
    kind = ErrorKind.QUERY

    def __init__(
        self,
        message: str,
        body: dict[str, Any] | None = None,
        status: int = 400,
    ):
        super().__init__(message, status, body)
