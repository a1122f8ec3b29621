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
"""OncePerRequestFilter — WebFilter base class with URL-pattern matching.

Patterns restrict which resources get CORS headers, e.g. ``["/api/*"]``
for an API mounted next to static content, or ``["*.html"]``.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from fnmatch import fnmatch
from typing import Any

from corsheaders.ports.filter import CallNext


def path_matches(path: str, url_patterns: Sequence[str], exclude_patterns: Sequence[str]) -> bool:
    """Return ``True`` if *path* is selected by *url_patterns* and not excluded.

    An empty *url_patterns* selects every path.
    """
    if url_patterns and not any(fnmatch(path, p) for p in url_patterns):
        return False
    return not (exclude_patterns and any(fnmatch(path, p) for p in exclude_patterns))


class OncePerRequestFilter(abc.ABC):
    """Abstract base for :class:`WebFilter` implementations.

    Attributes:
        url_patterns: Glob patterns this filter applies to; empty means all paths.
        exclude_patterns: Glob patterns skipped even when ``url_patterns`` match.
    """

    url_patterns: list[str] = []
    exclude_patterns: list[str] = []

    def should_not_filter(self, request: Any) -> bool:
        """Return ``True`` if ``request.url.path`` falls outside this filter's patterns."""
        return not path_matches(request.url.path, self.url_patterns, self.exclude_patterns)

    @abc.abstractmethod
    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        """Run the filter; must ``await call_next(request)`` to continue."""
        ...
