"""Test HTTP request builder and director."""
import pytest
from core.narration import capture_narration
from naive import builder as naive
from patterns.builder import HttpRequestBuilder, RequestDirector


def test_build_with_defaults():
    request = HttpRequestBuilder().with_url("https://api.example.com").build()
    assert request.method == "GET"
    assert dict(request.headers) == {}
    assert request.body is None
    assert request.timeout == 30000


def test_build_without_url_fails():
    with pytest.raises(ValueError, match="URL is required"):
        HttpRequestBuilder().with_method("GET").build()


def test_build_with_empty_url_fails():
    with pytest.raises(ValueError):
        HttpRequestBuilder().with_url("").build()


def test_option_order_does_not_matter():
    a = (
        HttpRequestBuilder()
        .with_url("https://api.example.com/users")
        .with_method("POST")
        .with_body("{}")
        .with_timeout(5000)
        .build()
    )
    b = (
        HttpRequestBuilder()
        .with_timeout(5000)
        .with_body("{}")
        .with_method("POST")
        .with_url("https://api.example.com/users")
        .build()
    )
    assert a == b


def test_request_is_immutable():
    request = HttpRequestBuilder().with_url("https://api.example.com").build()
    with pytest.raises(AttributeError):
        request.url = "https://evil.com"
    with pytest.raises(TypeError):
        request.headers["X-Injected"] = "1"


def test_builder_changes_do_not_leak_into_built_request():
    builder = HttpRequestBuilder().with_url("https://api.example.com").with_header("A", "1")
    request = builder.build()
    builder.with_header("B", "2")
    assert dict(request.headers) == {"A": "1"}


def test_director_json_post():
    request = RequestDirector().json_post("https://api.example.com/users", '{"id": 1}')
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/json"
    assert request.body == '{"id": 1}'


def test_director_authenticated_request():
    request = RequestDirector().authenticated_request("https://api.example.com/me", "abc")
    assert request.headers["Authorization"] == "Bearer abc"
    assert request.method == "GET"


def test_show_format():
    request = RequestDirector().simple_get("https://api.example.com/users")
    with capture_narration() as transcript:
        request.show()
    assert transcript.lines == [
        "HttpRequest[GET https://api.example.com/users, headers={}, body=none, timeout=30000ms]"
    ]


def test_naive_request_accepts_missing_url_and_mutation():
    request = naive.HttpRequest(None)
    assert request.url is None
    request.set_url("https://evil.com")
    assert str(request) == "HttpRequest[GET https://evil.com, body=None, timeout=30000ms]"
