"""Endpoint contract.

Architecture:
    Every Horizon call is described by an immutable endpoint value. The value
    knows how to turn itself into a Request for a given host, and names the
    resource type its response body parses into. The transport stays generic
    (HorizonClient.execute) because all per-endpoint logic lives here.

Design Decisions:
    - Frozen dataclass subclasses: construction is plain field assignment and
      never fails; all validation happens in into_request()
    - Static response binding: ``response`` is a class attribute, known at the
      call site, not negotiated at runtime
    - parse() defaults to validating the body against ``response``; endpoints
      returning lists of polymorphic records override it

See Also:
    - laakhay.horizon.endpoints: Concrete endpoints
    - HorizonClient: Executes endpoints over HTTP
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from .decoding import load_json, validate
from .request import Request, build_url

ResponseT = TypeVar("ResponseT")


class EndPoint(ABC, Generic[ResponseT]):
    """Base class for typed endpoint values."""

    method: ClassVar[str] = "GET"
    response: ClassVar[type]

    @abstractmethod
    def path_segments(self) -> tuple[str, ...]:
        """Unencoded path segments below the host."""

    def query(self) -> dict[str, str] | None:
        """Query parameters, if the endpoint takes any."""
        return None

    def into_request(self, host: str) -> Request:
        """Build the request for this endpoint against ``host``.

        Raises:
            MalformedRequest: If host and parameters cannot form a valid URL.
        """
        url = build_url(host, self.path_segments(), self.query())
        return Request(method=self.method, url=url)

    def parse(self, body: Any) -> ResponseT:
        """Parse a response body into this endpoint's response type.

        Raises:
            DecodeError: If the body does not match the response shape.
        """
        return validate(self.response, load_json(body))
