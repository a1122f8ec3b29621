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
"""Tests for the WebFilter protocol and OncePerRequestFilter path matching."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from starlette.responses import PlainTextResponse

from corsheaders.adapters.starlette import CorsFilter
from corsheaders.filters import OncePerRequestFilter, path_matches
from corsheaders.ports.filter import WebFilter


def _make_request(path: str) -> MagicMock:
    req = MagicMock()
    req.url.path = path
    return req


class _PassThrough(OncePerRequestFilter):
    async def do_filter(self, request, call_next):
        return await call_next(request)


class TestWebFilterProtocol:
    def test_cors_filter_is_webfilter(self):
        assert isinstance(CorsFilter(), WebFilter)

    def test_duck_typed_filter_is_webfilter(self):
        class _Duck:
            async def do_filter(self, request, call_next):
                return await call_next(request)

            def should_not_filter(self, request) -> bool:
                return False

        assert isinstance(_Duck(), WebFilter)

    def test_non_filter(self):
        assert not isinstance(object(), WebFilter)

    def test_abstract_base_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            OncePerRequestFilter()  # type: ignore[abstract]


class TestPathMatches:
    @pytest.mark.parametrize(
        ("path", "url_patterns", "exclude_patterns", "expected"),
        [
            ("/anything", [], [], True),
            ("/api/users", ["/api/*"], [], True),
            ("/health", ["/api/*"], [], False),
            ("/index.html", ["*.html"], [], True),
            ("/api/internal/x", ["/api/*"], ["/api/internal/*"], False),
            ("/static/app.js", [], ["/static/*"], False),
        ],
    )
    def test_matching(self, path, url_patterns, exclude_patterns, expected):
        assert path_matches(path, url_patterns, exclude_patterns) is expected


class TestOncePerRequestFilter:
    def test_no_patterns_matches_all(self):
        f = _PassThrough()
        assert not f.should_not_filter(_make_request("/anything"))

    def test_url_patterns(self):
        f = _PassThrough()
        f.url_patterns = ["/resources/*"]
        assert not f.should_not_filter(_make_request("/resources/a"))
        assert f.should_not_filter(_make_request("/other"))

    def test_exclude_patterns(self):
        f = _PassThrough()
        f.exclude_patterns = ["/health"]
        assert f.should_not_filter(_make_request("/health"))
        assert not f.should_not_filter(_make_request("/api"))

    def test_cors_filter_patterns_from_constructor(self):
        f = CorsFilter(url_patterns=["/api/*"], exclude_patterns=["/api/health"])
        assert not f.should_not_filter(_make_request("/api/items"))
        assert f.should_not_filter(_make_request("/api/health"))
        assert f.should_not_filter(_make_request("/"))

    def test_cors_filter_patterns_not_shared(self):
        CorsFilter(url_patterns=["/api/*"])
        assert CorsFilter().url_patterns == []


class TestCorsFilterDoFilter:
    @pytest.mark.asyncio
    async def test_calls_next_once_and_writes_headers(self):
        response = PlainTextResponse("OK")
        calls: list[object] = []

        async def call_next(request):
            calls.append(request)
            return response

        request = _make_request("/api/items")
        result = await CorsFilter().do_filter(request, call_next)

        assert result is response
        assert calls == [request]
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["x-cors-headers"] == "Powered-by-CorsHeaders"
