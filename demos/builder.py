"""Builder scenarios: telescoping constructors vs a fluent, validating builder."""

from __future__ import annotations

from core.narration import narrate
from core.registry import register_demo
from naive import builder as naive
from patterns.builder import HttpRequestBuilder, RequestDirector
from patterns.domain_config import DemoConfig

BASE_URL = "https://api.zerotechdebt.com"
USER_JSON = '{"name": "Akshit Singla", "age": 25}'

_ROLES = ["Product: HttpRequest", "Builder: HttpRequestBuilder", "Director: RequestDirector"]


@register_demo(
    "builder", "without",
    title="Telescoping constructors",
    summary="Positional optional arguments, mutable fields and no validation.",
    roles=_ROLES,
)
def run_without(config: DemoConfig) -> None:
    narrate("=== WITHOUT BUILDER ===")

    narrate("Problem 1: unreadable positional arguments (what is None? what is 5000?)")
    req1 = naive.HttpRequest(BASE_URL, "POST", None, 5000)
    narrate(str(req1))

    narrate("Problem 2: cannot skip middle parameters to set a timeout")
    req2 = naive.HttpRequest(BASE_URL, "GET", None, 3000)
    narrate(str(req2))

    narrate("Problem 3: mutable after creation")
    req3 = naive.HttpRequest(BASE_URL)
    req3.set_url("https://evil.com")
    narrate(str(req3))

    narrate("Problem 4: no validation, a request without a URL exists")
    req4 = naive.HttpRequest(None)
    narrate(str(req4))


@register_demo(
    "builder", "with",
    title="Fluent builder with director",
    summary="Readable, order-independent construction of immutable requests, validated at build().",
    roles=_ROLES,
)
def run_with(config: DemoConfig) -> None:
    narrate("=== WITH BUILDER ===")

    req1 = (
        HttpRequestBuilder()
        .with_url(f"{BASE_URL}/users")
        .with_method("POST")
        .with_header("Content-Type", "application/json")
        .with_body(USER_JSON)
        .with_timeout(5000)
        .build()
    )
    req1.show()

    # Order doesn't matter
    req2 = (
        HttpRequestBuilder()
        .with_timeout(5000)
        .with_body(USER_JSON)
        .with_method("POST")
        .with_url(f"{BASE_URL}/users")
        .build()
    )
    req2.show()

    narrate("")
    narrate("--- Director presets ---")
    director = RequestDirector()
    director.simple_get(f"{BASE_URL}/users").show()
    director.json_post(f"{BASE_URL}/users", '{"id": 1}').show()
    director.authenticated_request(f"{BASE_URL}/me", "demo-token").show()

    narrate("")
    narrate("--- Validation at build() ---")
    try:
        HttpRequestBuilder().with_method("GET").build()
    except ValueError as exc:
        narrate(f"Caught: {exc}")
