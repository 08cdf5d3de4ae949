"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class HorizonError(Exception):
    """Base exception for all library errors."""

    pass


class MalformedRequest(HorizonError):
    """Endpoint parameters and host cannot form a valid request.

    Raised while converting an endpoint into a request. Never retried; the
    caller must supply corrected input.
    """

    def __init__(
        self,
        message: str,
        host: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.host = host
        self.path = path


class DecodeError(HorizonError):
    """Response body does not match the expected resource shape.

    Carries the offending field (dotted location), the operation
    discriminator when one was read, and the record index when the body
    was a list of records.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        type_i: int | None = None,
        index: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.type_i = type_i
        self.index = index
        self.errors = errors or []

    def at_index(self, index: int) -> DecodeError:
        """Return a copy of this error located at a list position."""
        return DecodeError(
            f"record {index}: {self}",
            field=self.field,
            type_i=self.type_i,
            index=index,
            errors=self.errors,
        )


class UnknownVariantError(HorizonError):
    """Operation discriminator matches no known variant.

    Parsing never raises this; it is raised only when a caller asks for a
    known variant explicitly (``Operation.require_known``).
    """

    def __init__(self, type_i: int, type_name: str | None = None) -> None:
        label = f" ({type_name})" if type_name else ""
        super().__init__(f"Unknown operation type_i={type_i}{label}")
        self.type_i = type_i
        self.type_name = type_name


class ProviderError(HorizonError):
    """Error response from the Horizon server."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        problem: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.problem = problem or {}


class NotFoundError(ProviderError):
    """Requested resource does not exist."""

    def __init__(self, message: str, problem: dict[str, Any] | None = None) -> None:
        super().__init__(message, status_code=404, problem=problem)


class RateLimitError(ProviderError):
    """Horizon rate limit exceeded."""

    def __init__(
        self,
        message: str,
        retry_after: int = 60,
        problem: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, status_code=429, problem=problem)
        self.retry_after = retry_after
