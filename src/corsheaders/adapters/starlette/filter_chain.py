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
"""WebFilterChainMiddleware — pure ASGI middleware running a list of WebFilters."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, cast

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from corsheaders.ports.filter import CallNext, WebFilter


class WebFilterChainMiddleware:
    """Runs *filters* in list order around the downstream application.

    The application's response is buffered into a Starlette
    :class:`~starlette.responses.Response` so filters can read and change its
    headers after ``call_next`` returns. Bodies sent in several chunks or by
    path (the ASGI ``http.response.pathsend`` extension) are collected into
    one body, and ``content-length`` is rewritten to its size. A filter
    whose ``should_not_filter()`` returns ``True`` is bypassed for that
    request.
    """

    def __init__(self, app: ASGIApp, filters: Sequence[WebFilter] = ()) -> None:
        self.app = app
        self._filters = list(filters)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def run_app(request: Any) -> Response:
            start: Message = {"status": 200, "headers": []}
            body = bytearray()

            async def capture(message: Message) -> None:
                if message["type"] == "http.response.start":
                    start.update(message)
                elif message["type"] == "http.response.body":
                    body.extend(message.get("body", b""))
                elif message["type"] == "http.response.pathsend":
                    body.extend(Path(message["path"]).read_bytes())

            await self.app(scope, receive, capture)

            response = Response(content=bytes(body), status_code=start["status"])
            headers = list(start.get("headers", []))
            if body:
                # HEAD and 304 responses keep the length the app declared.
                headers = [(k, v) for k, v in headers if k.lower() != b"content-length"]
                headers.append((b"content-length", str(len(body)).encode("latin-1")))
            response.raw_headers[:] = headers
            return response

        chain: CallNext = run_app
        for web_filter in reversed(self._filters):
            chain = _link(web_filter, chain)

        response = cast(Response, await chain(Request(scope, receive, send)))
        await response(scope, receive, send)


def _link(web_filter: WebFilter, next_call: CallNext) -> CallNext:
    async def call(request: Request) -> Response:
        if web_filter.should_not_filter(request):
            return cast(Response, await next_call(request))
        return cast(Response, await web_filter.do_filter(request, next_call))

    return call
