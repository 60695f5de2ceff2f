"""
Error taxonomy and the tagged result returned by every gateway call.

Gateways (database, model provider) never raise: they return a ``Result``
carrying either ``data`` or a ``GatewayError``. Route handlers branch on
the result and raise an ``ApiError``, which the app turns into a JSON
response with a matching status code.
"""

from dataclasses import dataclass
from typing import Any


# --- Gateway errors ---


class GatewayError(Exception):
    """Base class for failures reported by an external service."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Raw, JSON-serialisable error detail."""
        return {"name": type(self).__name__, "message": self.message, **self.details}


class DatabaseError(GatewayError):
    """The database rejected or failed an operation."""


class NoRowsError(DatabaseError):
    """A single-row operation matched no rows."""

    def __init__(self, table: str) -> None:
        super().__init__(
            "The result contains 0 rows",
            {"table": table},
        )


class GenerationError(GatewayError):
    """The model provider failed to produce a response."""


@dataclass(frozen=True)
class Result:
    """Outcome of a gateway call: a payload or an error, never both."""

    data: Any = None
    error: GatewayError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_empty(self) -> bool:
        """True when nothing matched, as opposed to the call failing."""
        if isinstance(self.error, NoRowsError):
            return True
        return self.error is None and not self.data


# --- HTTP errors ---


class ApiError(Exception):
    """An error that maps directly onto an HTTP response."""

    status: int = 500

    def __init__(self, message: str | None = None, error: Any = None) -> None:
        self.message = message
        self.error = error
        super().__init__(message or str(error))


class ValidationError(ApiError):
    """Malformed path parameter or request body."""

    status = 400


class NotFoundError(ApiError):
    """No resource matched the request."""

    status = 404


class InternalError(ApiError):
    """Database, model provider or unexpected failure."""

    status = 500

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalError":
        if isinstance(exc, GatewayError):
            return cls(error=exc.to_dict())
        return cls(error={"name": type(exc).__name__, "message": str(exc)})
