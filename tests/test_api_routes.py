"""Regression tests for the fixed route table, info and landing page endpoints."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api import RouteEntry, api_build_route_table
from app.api.application import create_api_application
from app.api.routes import api_register_route_table
from app.config import AppSettings, config_load_settings
from app.lifecycle import ProcessLifecycle
from app.web import LandingPageRenderer


def _build_client(settings: AppSettings) -> TestClient:
    return TestClient(create_api_application(settings, ProcessLifecycle(settings=settings)))


def test_api_default_environment_scenario() -> None:
    """Serve documented defaults when the process starts without configuration."""

    client = _build_client(config_load_settings())

    health_payload = client.get("/health").json()
    info_payload = client.get("/api/info").json()
    missing_response = client.get("/does-not-exist")

    assert health_payload["environment"] == "development"
    assert health_payload["version"] == "1.0.0"
    assert info_payload["pod"] == {"name": "unknown", "namespace": "default"}
    assert missing_response.status_code == 404
    assert missing_response.json()["message"] == "Route /does-not-exist not found"


def test_api_info_returns_service_metadata() -> None:
    """Return message, version, environment, timestamp and pod identity."""

    client = _build_client(
        AppSettings(
            environment_name="staging",
            application_version="5.0.1",
            pod_name="web-app-abc",
            pod_namespace="apps",
        )
    )

    response = client.get("/api/info")

    assert response.status_code == 200
    payload = response.json()
    assert set(payload) == {"message", "version", "environment", "timestamp", "pod"}
    assert payload["message"] == "Welcome to K8s Web App API"
    assert payload["version"] == "5.0.1"
    assert payload["environment"] == "staging"
    assert payload["timestamp"].endswith("Z")
    assert payload["pod"] == {"name": "web-app-abc", "namespace": "apps"}


def test_api_landing_page_renders_runtime_values() -> None:
    """Render the HTML landing page with environment, version and port."""

    client = _build_client(AppSettings(environment_name="qa", application_version="7.7.7", application_port=8081))

    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Welcome to K8s Web App" in response.text
    assert ">qa<" in response.text
    assert ">7.7.7<" in response.text
    assert ">8081<" in response.text


@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("GET", "/does-not-exist"),
        ("GET", "/api/info/extra"),
        ("GET", "/api"),
        ("POST", "/health"),
        ("DELETE", "/ready"),
        ("PUT", "/"),
        ("POST", "/nothing/here"),
    ],
)
def test_api_unmatched_routes_return_not_found(method: str, path: str) -> None:
    """Return 404 with the path echoed for any method and path outside the table."""

    client = _build_client(AppSettings(environment_name="test"))

    response = client.request(method, path)

    assert response.status_code == 404
    assert response.json()["error"] == "Not Found"
    assert response.json()["kind"] == "not_found"
    assert response.json()["message"] == f"Route {path} not found"


def test_api_not_found_echoes_query_string() -> None:
    """Echo the full request target including its query string."""

    client = _build_client(AppSettings(environment_name="test"))

    response = client.get("/missing?page=2")

    assert response.json()["message"] == "Route /missing?page=2 not found"


def test_api_responses_carry_security_headers() -> None:
    """Attach security headers to success and not-found responses."""

    client = _build_client(AppSettings(environment_name="test"))

    for response in (client.get("/health"), client.get("/nope")):
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["x-frame-options"] == "SAMEORIGIN"
        assert "content-security-policy" in response.headers


def test_api_cors_allows_configured_origin() -> None:
    """Answer CORS requests for the configured origins."""

    client = _build_client(AppSettings(environment_name="test", cors_allow_origins="https://example.com"))

    allowed_response = client.get("/api/info", headers={"Origin": "https://example.com"})
    denied_response = client.get("/api/info", headers={"Origin": "https://other.example"})

    assert allowed_response.headers["access-control-allow-origin"] == "https://example.com"
    assert "access-control-allow-origin" not in denied_response.headers


def test_api_serves_static_files_when_directory_exists(tmp_path) -> None:
    """Serve files under `/static` from the configured directory."""

    static_directory = tmp_path / "public"
    static_directory.mkdir()
    (static_directory / "hello.txt").write_text("hello", encoding="utf-8")
    client = _build_client(AppSettings(environment_name="test", static_directory=str(static_directory)))

    found_response = client.get("/static/hello.txt")
    missing_response = client.get("/static/missing.txt")

    assert found_response.status_code == 200
    assert found_response.text == "hello"
    assert missing_response.status_code == 404
    assert missing_response.json()["message"] == "Route /static/missing.txt not found"


def test_api_route_table_is_ordered_and_fixed() -> None:
    """Register the table in priority order and keep it immutable on the app."""

    settings = AppSettings(environment_name="test")
    lifecycle = ProcessLifecycle(settings=settings)

    route_table = api_build_route_table(settings, lifecycle, LandingPageRenderer())
    application = create_api_application(settings, lifecycle)

    assert [(entry.method, entry.path) for entry in route_table] == [
        ("GET", "/health"),
        ("GET", "/ready"),
        ("GET", "/"),
        ("GET", "/api/info"),
    ]
    assert isinstance(application.state.route_table, tuple)
    assert [entry.path for entry in application.state.route_table] == ["/health", "/ready", "/", "/api/info"]


def test_api_register_route_table_first_match_wins() -> None:
    """Dispatch to the earliest entry when two patterns match one path."""

    application = FastAPI()
    api_register_route_table(
        application,
        [
            RouteEntry(method="GET", path="/items/special", handler=lambda: {"matched": "exact"}, name="exact"),
            RouteEntry(
                method="GET",
                path="/items/{item_id}",
                handler=lambda item_id: {"matched": item_id},
                name="pattern",
            ),
        ],
    )
    client = TestClient(application)

    assert client.get("/items/special").json() == {"matched": "exact"}
    assert client.get("/items/other").json() == {"matched": "other"}


def test_api_register_route_table_rejects_duplicates() -> None:
    """Refuse ambiguous tables with repeated method and path pairs."""

    def handler() -> dict[str, str]:
        return {}

    with pytest.raises(ValueError):
        api_register_route_table(
            FastAPI(),
            [
                RouteEntry(method="GET", path="/health", handler=handler, name="first"),
                RouteEntry(method="get", path="/health", handler=handler, name="second"),
            ],
        )


def test_api_not_found_echoes_percent_encoded_path_verbatim() -> None:
    """Echo the raw request target without decoding percent-escapes."""

    client = _build_client(AppSettings(environment_name="test"))

    spaced_response = client.get("/a%20b")
    query_response = client.get("/files%2Fnested?name=a%26b")

    assert spaced_response.status_code == 404
    assert spaced_response.json()["message"] == "Route /a%20b not found"
    assert query_response.json()["message"] == "Route /files%2Fnested?name=a%26b not found"


def test_api_get_routes_also_answer_head() -> None:
    """Serve HEAD on every GET route and keep unmatched HEAD requests at 404."""

    client = _build_client(AppSettings(environment_name="test"))

    for path in ("/health", "/ready", "/", "/api/info"):
        assert client.head(path).status_code == 200
    assert client.head("/does-not-exist").status_code == 404


def test_api_register_route_table_rejects_head_entry_shadowed_by_get() -> None:
    """Refuse an explicit HEAD entry on a path whose GET entry already answers HEAD."""

    def handler() -> dict[str, str]:
        return {}

    with pytest.raises(ValueError):
        api_register_route_table(
            FastAPI(),
            [
                RouteEntry(method="GET", path="/health", handler=handler, name="health"),
                RouteEntry(method="HEAD", path="/health", handler=handler, name="health_head"),
            ],
        )
