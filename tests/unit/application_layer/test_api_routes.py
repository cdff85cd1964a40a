"""
Unit Tests for API Routes

Tests the HTTP surface through FastAPI's TestClient: the SSE search
endpoint, health, metrics and the demo page.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ai_search.application.api.middleware import ErrorHandlingMiddleware
from ai_search.application.app import create_app
from ai_search.core.exceptions import ConfigurationError
from tests.test_fixtures import message_payloads, parse_sse_events


@pytest.mark.unit
class TestSearchEndpoint:
    def test_response_headers(self, client):
        response = client.get("/api/ai-search", params={"q": "dotnet"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["x-accel-buffering"] == "no"

    def test_cached_query(self, client):
        response = client.get("/api/ai-search", params={"q": "dotnet"})

        events = parse_sse_events(response.text)
        assert [name for name, _ in events] == ["message", "done"]
        assert events[-1] == ("done", "")
        payload = message_payloads(response.text)[0]
        assert payload["status"] == "cached"
        assert payload["sources"] == [
            "https://dotnet.microsoft.com/",
            "https://docs.microsoft.com",
        ]

    def test_rejected_query(self, client):
        response = client.get("/api/ai-search", params={"q": "My password is 12345"})

        assert message_payloads(response.text) == [
            {
                "status": "no_ai",
                "message": "Query potentially contains sensitive information (password).",
            }
        ]
        assert response.text.endswith("event: done\ndata: \n\n")

    def test_guid_query(self, client):
        response = client.get(
            "/api/ai-search",
            params={"q": "Look up record with id 00000000-0000-0000-0000-000000000000"},
        )

        assert message_payloads(response.text)[0]["status"] == "no_ai"

    def test_streamed_query(self, client):
        response = client.get("/api/ai-search", params={"q": "hello world"})

        payloads = message_payloads(response.text)
        assert [p["content"] for p in payloads] == [
            "hello is an interesting term. ",
            "world is an interesting term. ",
            "\nYour query was: 'hello world'. This is a simulated AI response.",
        ]
        assert parse_sse_events(response.text)[-1] == ("done", "")

    def test_non_ascii_query(self, client):
        response = client.get("/api/ai-search", params={"q": "café"})

        assert message_payloads(response.text)[0]["content"] == "café is an interesting term. "

    def test_alias_route(self, client):
        response = client.get("/api/aisearch", params={"q": "sse"})

        assert response.status_code == 200
        assert message_payloads(response.text)[0]["status"] == "cached"

    def test_missing_query_parameter(self, client):
        response = client.get("/api/ai-search")

        assert response.status_code == 422

    def test_alias_not_in_openapi_schema(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        assert "/api/ai-search" in paths
        assert "/api/aisearch" not in paths

    def test_request_log_carries_length_not_text(self, client, monkeypatch):
        from ai_search.application.api.routes import search as search_routes

        route_logger = MagicMock()
        monkeypatch.setattr(search_routes, "logger", route_logger)

        client.get("/api/ai-search", params={"q": "My password is 12345"})

        route_logger.info.assert_called_once()
        event, = route_logger.info.call_args.args
        fields = route_logger.info.call_args.kwargs
        assert event == "search_request_received"
        assert fields["query_length"] == len("My password is 12345")
        assert "password" not in repr(fields)


@pytest.mark.unit
class TestThreadId:
    def test_thread_id_generated(self, client):
        response = client.get("/api/health")

        assert len(response.headers["x-thread-id"]) == 36

    def test_thread_id_echoed(self, client):
        response = client.get("/api/ai-search", params={"q": "sse"}, headers={"X-Thread-ID": "t-42"})

        assert response.headers["x-thread-id"] == "t-42"


@pytest.mark.unit
class TestHealthAndMetrics:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert set(body) == {"status", "version", "environment", "timestamp"}

    def test_metrics_after_search(self, client):
        client.get("/api/ai-search", params={"q": "dotnet"})

        response = client.get("/api/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'ai_search_requests_total{outcome="cached"}' in response.text
        assert "ai_search_cache_hits_total" in response.text


@pytest.mark.unit
class TestDemoPage:
    def test_demo_page_served(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/api/ai-search?q=" in response.text
        assert "__SEARCH_URL__" not in response.text

    def test_demo_page_can_be_disabled(self, reset_settings, monkeypatch):
        monkeypatch.setenv("ENABLE_DEMO_PAGE", "false")
        reset_settings()

        response = TestClient(create_app()).get("/")

        assert response.status_code == 404

    def test_custom_base_path(self, reset_settings, monkeypatch, search_service):
        from ai_search.application.api.dependencies import get_search_service

        monkeypatch.setenv("API_BASE_PATH", "/search/v2/")
        reset_settings()
        app = create_app()
        app.dependency_overrides[get_search_service] = lambda: search_service
        client = TestClient(app)

        assert client.get("/search/v2/ai-search", params={"q": "sse"}).status_code == 200
        assert "/search/v2/ai-search?q=" in client.get("/").text


@pytest.mark.unit
class TestErrorHandling:
    def test_unhandled_exception_returns_json_500(self, app):
        async def boom():
            raise RuntimeError("kaboom")

        app.add_api_route("/boom", boom)

        response = TestClient(app).get("/boom")

        assert response.status_code == 500
        assert response.json()["error"] == "internal_server_error"

    def test_error_middleware_registered(self):
        app = create_app()

        assert ErrorHandlingMiddleware in [m.cls for m in app.user_middleware]

    def test_traceback_hidden_outside_development(self, reset_settings, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        reset_settings()
        app = create_app()

        async def boom():
            raise RuntimeError("kaboom")

        app.add_api_route("/boom", boom)

        body = TestClient(app).get("/boom").json()

        assert body["error_type"] == "RuntimeError"
        assert "traceback" not in body
        assert "detail" not in body

    def test_traceback_included_in_development(self, reset_settings, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        reset_settings()
        app = create_app()

        async def boom():
            raise RuntimeError("kaboom")

        app.add_api_route("/boom", boom)

        body = TestClient(app).get("/boom").json()

        assert "RuntimeError: kaboom" in body["traceback"]
        assert body["detail"] == "kaboom"

    def test_ai_search_error_handler(self, app):
        async def misconfigured():
            raise ConfigurationError("bad config", thread_id="t-1")

        app.add_api_route("/misconfigured", misconfigured)

        response = TestClient(app).get("/misconfigured")

        assert response.status_code == 500
        assert response.json()["error_type"] == "ConfigurationError"
        assert response.json()["thread_id"] == "t-1"


@pytest.mark.unit
class TestLifespan:
    def test_lifespan_builds_search_service(self, reset_settings, monkeypatch):
        monkeypatch.setenv("GENERATOR_CHUNK_DELAY_MIN", "0")
        monkeypatch.setenv("GENERATOR_CHUNK_DELAY_MAX", "0")
        monkeypatch.setenv("GENERATOR_SUMMARY_DELAY_MIN", "0")
        monkeypatch.setenv("GENERATOR_SUMMARY_DELAY_MAX", "0")
        reset_settings()
        app = create_app()

        with TestClient(app) as client:
            assert app.state.search_service is not None
            response = client.get("/api/ai-search", params={"q": "hi"})

        assert [name for name, _ in parse_sse_events(response.text)][-1] == "done"
