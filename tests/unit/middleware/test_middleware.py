"""Unit tests for middleware."""

import httpx
import pytest
from fastapi import FastAPI, Response
from httpx import ASGITransport, AsyncClient

from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from core.config import settings


def _create_app_with_middleware() -> FastAPI:
    """Minimal app wrapped in the security and request id middleware."""
    app = FastAPI()
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/ping")
    async def _ping() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/framed")
    async def _framed() -> Response:
        return Response("ok", headers={"X-Frame-Options": "SAMEORIGIN"})

    return app


async def _get(path: str = "/ping", **headers: str) -> httpx.Response:
    transport = ASGITransport(app=_create_app_with_middleware())
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path, headers=headers)


class TestSecurityHeadersMiddleware:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("header", "value"),
        [
            ("x-content-type-options", "nosniff"),
            ("x-frame-options", "DENY"),
            ("referrer-policy", "strict-origin-when-cross-origin"),
        ],
    )
    async def test_adds_browser_headers(self, header: str, value: str):
        response = await _get()

        assert response.headers[header] == value

    @pytest.mark.asyncio
    async def test_keeps_headers_set_by_the_route(self):
        response = await _get("/framed")

        assert response.headers["x-frame-options"] == "SAMEORIGIN"
        assert response.headers["x-content-type-options"] == "nosniff"

    @pytest.mark.asyncio
    async def test_no_hsts_outside_production(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, "app_env", "development")

        response = await _get()

        assert "strict-transport-security" not in response.headers

    @pytest.mark.asyncio
    async def test_hsts_in_production(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, "app_env", "production")

        response = await _get()

        assert response.headers["strict-transport-security"] == (
            "max-age=31536000; includeSubDomains"
        )


class TestRequestIDMiddleware:
    @pytest.mark.asyncio
    async def test_generates_distinct_ids(self):
        first = await _get()
        second = await _get()

        assert len(first.headers["x-request-id"]) == 36
        assert first.headers["x-request-id"] != second.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_propagates_safe_caller_id(self):
        response = await _get(**{"X-Request-ID": "custom-req-123"})

        assert response.headers["x-request-id"] == "custom-req-123"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("incoming", ["bad id with spaces", "x" * 65, ""])
    async def test_replaces_unsafe_caller_id(self, incoming: str):
        response = await _get(**{"X-Request-ID": incoming})

        assert response.headers["x-request-id"] != incoming
        assert len(response.headers["x-request-id"]) == 36
