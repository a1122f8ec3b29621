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
"""CORS filter — writes CORS headers on responses passing through a filter chain."""

from __future__ import annotations

from collections.abc import Sequence
from typing import cast

from starlette.requests import Request
from starlette.responses import Response

from corsheaders.adapters.starlette.headers import StarletteHeaders
from corsheaders.configuration import CorsConfiguration
from corsheaders.filters import OncePerRequestFilter
from corsheaders.holder import CorsConfigurationHolder
from corsheaders.interceptor import CorsInterceptor
from corsheaders.ports.filter import CallNext


class CorsFilter(OncePerRequestFilter):
    """Adds the active CORS headers to every response it sees.

    Without an explicit *configuration* the filter follows the process-wide
    slot, so a later ``CorsBuilder...build()`` takes effect on the next
    request.
    """

    def __init__(
        self,
        configuration: CorsConfiguration | None = None,
        holder: CorsConfigurationHolder | None = None,
        url_patterns: Sequence[str] | None = None,
        exclude_patterns: Sequence[str] | None = None,
    ) -> None:
        self._interceptor = CorsInterceptor(configuration, holder)
        if url_patterns is not None:
            self.url_patterns = list(url_patterns)
        if exclude_patterns is not None:
            self.exclude_patterns = list(exclude_patterns)

    async def do_filter(self, request: Request, call_next: CallNext) -> Response:
        response = cast(Response, await call_next(request))
        self._interceptor.apply(StarletteHeaders(response.headers))
        return response
