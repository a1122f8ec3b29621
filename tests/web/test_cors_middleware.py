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
"""Tests for CorsHeadersMiddleware — pure ASGI CORS headers."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, StreamingResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from corsheaders.adapters.starlette import CorsHeadersMiddleware
from corsheaders.builder import CorsBuilder
from corsheaders.configuration import CorsConfiguration
from corsheaders.holder import CorsConfigurationHolder, default_holder


async def _hello(request: Request) -> PlainTextResponse:
    return PlainTextResponse("hello")


async def _preset(request: Request) -> PlainTextResponse:
    return PlainTextResponse(
        "hello",
        headers={
            "Access-Control-Allow-Origin": "https://app.example",
            "Access-Control-Allow-Methods": "GET,PUT",
            "Access-Control-Max-Age": "5",
        },
    )


async def _stream(request: Request) -> StreamingResponse:
    async def chunks():
        yield b"one,"
        yield b"two"

    return StreamingResponse(chunks(), media_type="text/plain")


def _make_client(**options) -> TestClient:
    app = Starlette(
        routes=[
            Route("/hello", _hello),
            Route("/preset", _preset),
            Route("/stream", _stream),
            Route("/static/app.js", _hello),
        ],
        middleware=[Middleware(CorsHeadersMiddleware, **options)],
    )
    return TestClient(app)


class TestCorsHeadersMiddleware:
    def test_default_headers_applied(self):
        resp = _make_client().get("/hello")

        assert resp.status_code == 200
        assert resp.text == "hello"
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert resp.headers["Access-Control-Allow-Methods"] == "GET,POST,PUT,DELETE,OPTIONS,HEAD,PATCH"
        assert resp.headers["Access-Control-Allow-Headers"] == "Origin,Accept,Content-Type"
        assert resp.headers["Access-Control-Allow-Credentials"] == "true"
        assert resp.headers["Access-Control-Max-Age"] == "86400"
        assert resp.headers["X-CORS-Headers"] == "Powered-by-CorsHeaders"
        assert default_holder.get() == CorsConfiguration.default()

    def test_disabled(self):
        resp = _make_client(configuration=CorsConfiguration.disabled()).get("/preset")

        assert resp.headers["Access-Control-Allow-Origin"] == "https://app.example"
        assert resp.headers["Access-Control-Allow-Methods"] == "GET,PUT"
        assert resp.headers["Access-Control-Max-Age"] == "5"
        assert "X-CORS-Headers" not in resp.headers

    def test_existing_headers(self):
        cfg = (
            CorsBuilder.get_builder()
            .set_allow_origin("*")
            .append_allow_methods("PUT,DELETE")
            .set_max_age(60)
            .freeze()
        )
        resp = _make_client(configuration=cfg).get("/preset")

        assert resp.headers.get_list("Access-Control-Allow-Origin") == ["*"]
        assert resp.headers.get_list("Access-Control-Allow-Methods") == ["GET,PUT,DELETE"]
        assert resp.headers.get_list("Access-Control-Max-Age") == ["60"]

    def test_streaming_body_untouched(self):
        resp = _make_client().get("/stream")
        assert resp.text == "one,two"
        assert resp.headers["Access-Control-Allow-Origin"] == "*"

    def test_explicit_holder(self):
        holder = CorsConfigurationHolder()
        CorsBuilder.get_builder().set_allow_origin("https://holder.example").build(holder)
        resp = _make_client(holder=holder).get("/hello")

        assert resp.headers["Access-Control-Allow-Origin"] == "https://holder.example"
        assert default_holder.get() is None

    def test_exclude_patterns(self):
        client = _make_client(exclude_patterns=["/static/*"])
        assert "Access-Control-Allow-Origin" not in client.get("/static/app.js").headers
        assert "Access-Control-Allow-Origin" in client.get("/hello").headers

    def test_url_patterns(self):
        client = _make_client(url_patterns=["/hello"])
        assert "Access-Control-Allow-Origin" in client.get("/hello").headers
        preset = client.get("/preset")
        assert preset.headers["Access-Control-Allow-Origin"] == "https://app.example"
        assert "X-CORS-Headers" not in preset.headers

    def test_not_found_still_gets_headers(self):
        resp = _make_client().get("/missing")
        assert resp.status_code == 404
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
