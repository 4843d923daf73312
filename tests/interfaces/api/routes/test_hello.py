"""Integration tests for the greeting endpoint."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
import anyio
import httpx
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from helloworld.config import reset_settings_cache  # noqa: E402
from main import create_app  # noqa: E402

EXPECTED_BODY = b'{"message":"Hello World"}'


@pytest.fixture()
def app(monkeypatch, tmp_path):
    """Return a freshly composed application with default settings."""

    for name in ("PORT", "HOST", "LOG_LEVEL", "APP_NAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    yield create_app()
    reset_settings_cache()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _assert_greeting(response: httpx.Response) -> None:
    assert response.status_code == 200
    assert "application/json" in response.headers["content-type"]
    assert response.json() == {"message": "Hello World"}
    assert response.content == EXPECTED_BODY


def test_get_hello_with_json_accept_header(client):
    response = client.get("/hello", headers={"Accept": "application/json"})

    _assert_greeting(response)


@pytest.mark.parametrize(
    "accept",
    [
        "*/*",
        "application/*",
        "application/json;charset=UTF-8",
        "text/plain, application/json;q=0.5",
        "text/html,application/xhtml+xml,*/*;q=0.8",
    ],
)
def test_get_hello_with_compatible_accept_headers(client, accept):
    response = client.get("/hello", headers={"Accept": accept})

    _assert_greeting(response)


def test_get_hello_without_accept_header(client):
    del client.headers["accept"]

    response = client.get("/hello")

    _assert_greeting(response)


@pytest.mark.parametrize("accept", ["text/plain", "text/html", "application/xml", "image/*"])
def test_get_hello_with_accept_excluding_json_returns_404(client, accept):
    response = client.get("/hello", headers={"Accept": accept})

    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"])
def test_other_methods_on_hello_return_404(client, method):
    response = client.request(method, "/hello", headers={"Accept": "application/json"})

    assert response.status_code == 404
    assert "allow" not in response.headers


@pytest.mark.parametrize(
    "path",
    ["/", "/hello/", "/Hello", "/hello/world", "/hell", "/docs", "/redoc", "/openapi.json"],
)
def test_unknown_paths_return_404(client, path):
    response = client.get(path, headers={"Accept": "application/json"})

    assert response.status_code == 404


def test_response_does_not_depend_on_request_contents(client):
    response = client.request(
        "GET",
        "/hello",
        params={"name": "Alice", "lang": "fr"},
        headers={"Accept": "application/json", "X-Custom": "value"},
        content=b'{"ignored": true}',
    )

    _assert_greeting(response)


def test_repeated_requests_return_identical_bodies(client):
    bodies = {
        client.get("/hello", headers={"Accept": "application/json"}).content
        for _ in range(10)
    }

    assert bodies == {EXPECTED_BODY}


def test_concurrent_requests_are_independent(app):
    request_count = 50
    responses: list[httpx.Response] = []

    async def fire(http: httpx.AsyncClient) -> None:
        responses.append(await http.get("/hello", headers={"Accept": "application/json"}))

    async def main() -> None:
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
            async with anyio.create_task_group() as tg:
                for _ in range(request_count):
                    tg.start_soon(fire, http)

    anyio.run(main)

    assert len(responses) == request_count
    for response in responses:
        _assert_greeting(response)
