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
"""StarletteHeaders — HeaderResponse over Starlette's MutableHeaders."""

from __future__ import annotations

from starlette.datastructures import MutableHeaders


class StarletteHeaders:
    """Adapts :class:`~starlette.datastructures.MutableHeaders` to ``HeaderResponse``.

    Header names are matched case-insensitively, as Starlette stores them
    lower-cased.
    """

    def __init__(self, headers: MutableHeaders) -> None:
        self._headers = headers

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def get_header_values(self, name: str) -> list[str]:
        return self._headers.getlist(name)

    def add_header(self, name: str, value: str) -> None:
        self._headers.append(name, value)

    def set_header(self, name: str, value: str) -> None:
        # MutableHeaders drops every other line of the same name.
        self._headers[name] = value
