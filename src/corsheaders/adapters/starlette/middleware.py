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
"""CorsHeadersMiddleware — CORS headers as a pure ASGI middleware."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Receive, Scope, Send

from corsheaders.adapters.starlette.headers import StarletteHeaders
from corsheaders.configuration import CorsConfiguration
from corsheaders.filters import path_matches
from corsheaders.holder import CorsConfigurationHolder
from corsheaders.interceptor import CorsInterceptor


class CorsHeadersMiddleware:
    """Writes CORS headers onto the ``http.response.start`` message.

    Streams the response body untouched, unlike ``CorsFilter`` which runs
    inside a buffering filter chain. Headers already set by the application
    count as pre-existing for the add/overwrite/merge decision.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` to avoid the
    ``anyio`` dependency that causes ``ModuleNotFoundError`` with Granian.
    """

    def __init__(
        self,
        app: ASGIApp,
        configuration: CorsConfiguration | None = None,
        holder: CorsConfigurationHolder | None = None,
        url_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        self.app = app
        self._interceptor = CorsInterceptor(configuration, holder)
        self._url_patterns = list(url_patterns)
        self._exclude_patterns = list(exclude_patterns)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not path_matches(scope["path"], self._url_patterns, self._exclude_patterns):
            await self.app(scope, receive, send)
            return

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                self._interceptor.apply(StarletteHeaders(MutableHeaders(scope=message)))
            await send(message)

        await self.app(scope, receive, send_with_cors)
