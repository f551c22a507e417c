"""Without builder: a mutable request with positional optional parameters.

Problems on display:
- Positional calls are unreadable (what is None? what is 5000?)
- Callers cannot skip a middle parameter
- The request can be changed after creation
- Nothing validates it, so a request without a URL exists happily
"""

from __future__ import annotations

from typing import Optional


class HttpRequest:
    def __init__(
        self,
        url: Optional[str],
        method: str = "GET",
        body: Optional[str] = None,
        timeout: int = 30000,
    ):
        self.url = url
        self.method = method
        self.headers: dict[str, str] = {}
        self.body = body
        self.timeout = timeout

    def add_header(self, key: str, value: str) -> None:
        self.headers[key] = value

    def set_url(self, url: Optional[str]) -> None:
        self.url = url

    def __str__(self) -> str:
        return f"HttpRequest[{self.method} {self.url}, body={self.body}, timeout={self.timeout}ms]"
