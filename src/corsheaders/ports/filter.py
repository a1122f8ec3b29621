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
"""WebFilter protocol — the pipeline stage the CORS filter plugs into.

Request and response are typed ``Any`` here; the Starlette types stay in
``corsheaders.adapters.starlette``.
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from typing import Any, Protocol, runtime_checkable

# Continues the pipeline: the next filter, or the application itself.
# Concrete type: Callable[[Request], Coroutine[Any, Any, Response]]
CallNext = Callable[..., Coroutine[Any, Any, Any]]


@runtime_checkable
class WebFilter(Protocol):
    """A request/response stage run by ``WebFilterChainMiddleware``.

    A filter may short-circuit by returning its own response, but the CORS
    filter always calls ``call_next`` exactly once.
    """

    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        """Run the stage.

        Args:
            request: The incoming HTTP request.
            call_next: Continues with the rest of the pipeline.

        Returns:
            The HTTP response.
        """
        ...

    def should_not_filter(self, request: Any) -> bool:
        """Return ``True`` to pass *request* straight to ``call_next``."""
        ...
