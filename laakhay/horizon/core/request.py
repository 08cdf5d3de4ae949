"""HTTP request value produced by endpoints.

Architecture:
    A Request is the transport-facing description of one API call: method,
    absolute URL and optional body. Endpoints build it through build_url(),
    which owns every rule about what makes a valid Horizon URL, so individual
    endpoints only describe their path segments and query parameters.

Design Decisions:
    - Frozen dataclass: a request is a value, converting an endpoint twice
      yields equal requests
    - yarl.URL: the same URL type aiohttp sends, so the transport never
      re-parses strings
    - Path segments are percent-encoded with no safe characters, so an
      identifier always stays exactly one segment
"""

from __future__ import annotations

import ipaddress
import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from urllib.parse import quote

from yarl import URL

from .exceptions import MalformedRequest

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: tuple[tuple[str, str], ...] = (("Accept", "application/json"),)

_ALLOWED_SCHEMES = ("http", "https")

# RFC 3986 reg-name restricted to DNS labels; IDNs arrive punycoded from yarl.
_HOST_LABEL = re.compile(r"^[A-Za-z0-9-]+$")


@dataclass(frozen=True)
class Request:
    """A fully formed HTTP request."""

    method: str
    url: URL
    body: bytes | None = None
    headers: tuple[tuple[str, str], ...] = DEFAULT_HEADERS

    @property
    def uri(self) -> str:
        """The request URL as sent on the wire."""
        return str(self.url)

    @property
    def header_dict(self) -> dict[str, str]:
        return dict(self.headers)


def _is_valid_host(raw_host: str) -> bool:
    if ":" in raw_host:
        # IP-literal; yarl strips the brackets.
        try:
            ipaddress.ip_address(raw_host)
        except ValueError:
            return False
        return True
    return all(_HOST_LABEL.match(label) for label in raw_host.split("."))


def _validate_host(host: str) -> URL:
    if not isinstance(host, str) or not host:
        raise MalformedRequest("Host must be a non-empty string", host=host)
    if any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in host):
        raise MalformedRequest("Host contains whitespace or control characters", host=host)

    try:
        base = URL(host.rstrip("/"))
        # Port parsing is where yarl reports a bad authority.
        base.port
    except (ValueError, TypeError) as e:
        raise MalformedRequest(f"Host is not a valid URL: {e}", host=host) from e

    if not base.is_absolute() or base.scheme not in _ALLOWED_SCHEMES:
        raise MalformedRequest(
            f"Host must be an absolute http(s) URL, got {host!r}", host=host
        )
    if not base.host:
        raise MalformedRequest(f"Host has no authority: {host!r}", host=host)
    if not _is_valid_host(base.raw_host):
        raise MalformedRequest(f"Host has an invalid authority: {host!r}", host=host)
    if base.raw_path not in ("", "/") or base.raw_query_string or base.raw_fragment:
        raise MalformedRequest(
            f"Host must be scheme and authority only, got {host!r}", host=host
        )
    return base


def encode_path(segments: Sequence[str]) -> str:
    """Join raw segments into a percent-encoded absolute path."""
    return "/" + "/".join(quote(segment, safe="") for segment in segments)


def build_url(
    host: str,
    segments: Sequence[str],
    query: Mapping[str, str] | None = None,
) -> URL:
    """Join a base host with raw path segments and optional query parameters.

    Args:
        host: Scheme and authority, e.g. ``https://horizon.stellar.org``.
            A trailing slash is tolerated.
        segments: Unencoded path segments, e.g. ``("accounts", account_id)``.
        query: Optional query parameters.

    Returns:
        Absolute URL with every segment percent-encoded.

    Raises:
        MalformedRequest: If the host is not a valid absolute http(s) URL, or
            a segment is empty.
    """
    base = _validate_host(host)

    for segment in segments:
        if not isinstance(segment, str) or not segment:
            raise MalformedRequest(
                f"Path segment must be a non-empty string, got {segment!r}",
                host=host,
                path="/".join(str(s) for s in segments),
            )

    path = encode_path(segments)
    url = URL(f"{str(base).rstrip('/')}{path}", encoded=True)
    if query:
        url = url.with_query(dict(query))

    logger.debug("Built request URL", extra={"url": str(url)})
    return url
