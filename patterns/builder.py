"""Builder pattern: fluent construction of immutable HTTP requests.

The request has one mandatory field (url) and several optional ones. The
builder collects options in any order and validates once, at build().
A director bundles the configurations callers ask for most often.

Example domain: requests against a users API.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from core.narration import narrate

DEFAULT_METHOD = "GET"
DEFAULT_TIMEOUT_MS = 30000


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class HttpRequest:
    """Immutable HTTP request. Build it with HttpRequestBuilder."""

    url: str
    method: str = DEFAULT_METHOD
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self):
        # Copy so the caller's dict cannot mutate the request afterwards
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    def describe(self) -> str:
        return (
            f"HttpRequest[{self.method} {self.url}, headers={dict(self.headers)}, "
            f"body={self.body if self.body is not None else 'none'}, timeout={self.timeout}ms]"
        )

    def show(self) -> None:
        narrate(self.describe())


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

class HttpRequestBuilder:
    """Fluent builder; every ``with_*`` returns the builder.

    Usage::

        request = (
            HttpRequestBuilder()
            .with_url("https://api.zerotechdebt.com/users")
            .with_method("POST")
            .with_header("Content-Type", "application/json")
            .with_timeout(5000)
            .build()
        )
    """

    def __init__(self):
        self._url: Optional[str] = None
        self._method = DEFAULT_METHOD
        self._headers: dict[str, str] = {}
        self._body: Optional[str] = None
        self._timeout = DEFAULT_TIMEOUT_MS

    def with_url(self, url: str) -> "HttpRequestBuilder":
        self._url = url
        return self

    def with_method(self, method: str) -> "HttpRequestBuilder":
        self._method = method
        return self

    def with_header(self, key: str, value: str) -> "HttpRequestBuilder":
        self._headers[key] = value
        return self

    def with_body(self, body: str) -> "HttpRequestBuilder":
        self._body = body
        return self

    def with_timeout(self, ms: int) -> "HttpRequestBuilder":
        self._timeout = ms
        return self

    def build(self) -> HttpRequest:
        """Validate and create the request.

        Raises ValueError if no URL was given.
        """
        if not self._url:
            raise ValueError("URL is required")
        return HttpRequest(
            url=self._url,
            method=self._method,
            headers=self._headers,
            body=self._body,
            timeout=self._timeout,
        )


# ---------------------------------------------------------------------------
# Director
# ---------------------------------------------------------------------------

class RequestDirector:
    """Common request configurations."""

    def simple_get(self, url: str) -> HttpRequest:
        return HttpRequestBuilder().with_url(url).build()

    def json_post(self, url: str, json: str) -> HttpRequest:
        return (
            HttpRequestBuilder()
            .with_url(url)
            .with_method("POST")
            .with_header("Content-Type", "application/json")
            .with_body(json)
            .build()
        )

    def authenticated_request(self, url: str, token: str) -> HttpRequest:
        return (
            HttpRequestBuilder()
            .with_url(url)
            .with_header("Authorization", f"Bearer {token}")
            .build()
        )
