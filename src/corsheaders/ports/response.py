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
"""HeaderResponse protocol — what the interceptor needs from a response.

Framework adapters wrap their own response/header types to satisfy it, so
the header decision logic never imports a web framework.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class HeaderResponse(Protocol):
    """Mutable view over the headers of an outgoing HTTP response."""

    def has_header(self, name: str) -> bool:
        """Return ``True`` if at least one header named *name* is present."""
        ...

    def get_header_values(self, name: str) -> Sequence[str]:
        """Return every raw value of header *name*, in order."""
        ...

    def add_header(self, name: str, value: str) -> None:
        """Add a header line, keeping any existing lines of the same name."""
        ...

    def set_header(self, name: str, value: str) -> None:
        """Replace every existing line of header *name* with a single *value*."""
        ...
