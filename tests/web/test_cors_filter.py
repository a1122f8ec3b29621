# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for CorsFilter running inside WebFilterChainMiddleware."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from corsheaders.adapters.starlette import CorsFilter, WebFilterChainMiddleware
from corsheaders.builder import CorsBuilder
from corsheaders.configuration import CorsConfiguration
from corsheaders.holder import default_holder

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _ok_handler(request: Request) -> PlainTextResponse:
    return PlainTextResponse("OK")


async def _preset_handler(request: Request) -> PlainTextResponse:
    """Response that already carries CORS headers set by the application."""
    response = PlainTextResponse("OK")
    response.raw_headers.append((b"access-control-allow-methods", b"GET"))
    response.raw_headers.append((b"access-control-allow-headers", b"A, B"))
    response.raw_headers.append((b"access-control-expose-headers", b"X-One"))
    response.raw_headers.append((b"access-control-expose-headers", b"X-Two"))
    return response


def _make_client(*filters, handler=_ok_handler) -> TestClient:
    app = Starlette(
        routes=[Route("/api/items", handler), Route("/health", handler)],
        middleware=[Middleware(WebFilterChainMiddleware, filters=list(filters))],
    )
    return TestClient(app)


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------


class TestCorsFilterModes:
    def test_lazy_default_headers(self):
        client = _make_client(CorsFilter())
        resp = client.get("/api/items")

        assert resp.status_code == 200
        assert resp.text == "OK"
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert resp.headers["Access-Control-Allow-Methods"] == "GET,POST,PUT,DELETE,OPTIONS,HEAD,PATCH"
        assert resp.headers["Access-Control-Allow-Headers"] == "Origin,Accept,Content-Type"
        assert resp.headers["Access-Control-Allow-Credentials"] == "true"
        assert resp.headers["Access-Control-Max-Age"] == "86400"
        assert resp.headers["X-CORS-Headers"] == "Powered-by-CorsHeaders"
        assert "Access-Control-Expose-Headers" not in resp.headers
        assert default_holder.get() == CorsConfiguration.default()

    def test_disabled(self):
        CorsBuilder.get_disabled_cors().build()
        client = _make_client(CorsFilter())
        resp = client.get("/api/items")

        assert resp.status_code == 200
        assert not any(name.lower().startswith("access-control-") for name in resp.headers)
        assert "X-CORS-Headers" not in resp.headers

    def test_custom_built_before_requests(self):
        (
            CorsBuilder.get_builder()
            .set_allow_origin("https://example.com")
            .set_allow_methods("GET,POST")
            .set_allow_credentials(True)
            .build()
        )
        client = _make_client(CorsFilter())
        resp = client.get("/api/items")

        cors = {k: v for k, v in resp.headers.items() if k.startswith("access-control-")}
        assert cors == {
            "access-control-allow-origin": "https://example.com",
            "access-control-allow-methods": "GET,POST",
            "access-control-allow-credentials": "true",
        }

    def test_reconfiguration_applies_to_next_request(self):
        client = _make_client(CorsFilter())
        assert client.get("/api/items").headers["Access-Control-Allow-Origin"] == "*"

        CorsBuilder.get_builder().set_allow_origin("https://later.example").build()
        assert client.get("/api/items").headers["Access-Control-Allow-Origin"] == "https://later.example"

    def test_injected_configuration(self):
        cfg = CorsBuilder.get_builder().set_expose_headers("X-Total").freeze()
        client = _make_client(CorsFilter(configuration=cfg))
        resp = client.get("/api/items")

        assert resp.headers["Access-Control-Expose-Headers"] == "X-Total"
        assert "Access-Control-Allow-Origin" not in resp.headers
        assert default_holder.get() is None


# ---------------------------------------------------------------------------
# Existing headers
# ---------------------------------------------------------------------------


class TestCorsFilterExistingHeaders:
    def test_overwrite_and_merge(self):
        cfg = (
            CorsBuilder.get_builder()
            .set_allow_methods("POST")
            .append_allow_headers("B,C")
            .append_expose_headers("X-Three")
            .freeze()
        )
        client = _make_client(CorsFilter(configuration=cfg), handler=_preset_handler)
        resp = client.get("/api/items")

        assert resp.headers.get_list("Access-Control-Allow-Methods") == ["POST"]
        assert resp.headers.get_list("Access-Control-Allow-Headers") == ["A,B,C"]
        assert resp.headers.get_list("Access-Control-Expose-Headers") == ["X-One,X-Two,X-Three"]


# ---------------------------------------------------------------------------
# URL patterns
# ---------------------------------------------------------------------------


class TestCorsFilterPatterns:
    def test_only_matching_paths(self):
        client = _make_client(CorsFilter(url_patterns=["/api/*"]))

        assert client.get("/api/items").headers["Access-Control-Allow-Origin"] == "*"
        assert "Access-Control-Allow-Origin" not in client.get("/health").headers

    def test_excluded_paths(self):
        client = _make_client(CorsFilter(exclude_patterns=["/health"]))

        assert "Access-Control-Allow-Origin" in client.get("/api/items").headers
        assert "Access-Control-Allow-Origin" not in client.get("/health").headers
