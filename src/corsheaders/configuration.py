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
"""Immutable CORS configuration model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from corsheaders.enums import CorsHeader, HttpHeader, HttpMethod

DEFAULT_INFO_HEADER_NAME = "X-CORS-Headers"
DEFAULT_INFO_HEADER_VALUE = "Powered-by-CorsHeaders"
DEFAULT_MAX_AGE_SECONDS = 24 * 60 * 60

DEFAULT_ALLOW_METHODS = ",".join(
    [
        HttpMethod.GET,
        HttpMethod.POST,
        HttpMethod.PUT,
        HttpMethod.DELETE,
        HttpMethod.OPTIONS,
        HttpMethod.HEAD,
        HttpMethod.PATCH,
    ]
)
DEFAULT_ALLOW_HEADERS = ",".join([HttpHeader.ORIGIN, HttpHeader.ACCEPT, HttpHeader.CONTENT_TYPE])


class CorsMode(StrEnum):
    """Whether CORS headers are emitted, and where their values came from."""

    DEFAULT = "default"
    CUSTOM = "custom"
    DISABLED = "disabled"


@dataclass(frozen=True)
class CorsConfiguration:
    """The resolved set of CORS headers to write on every response.

    String fields hold the header value verbatim (comma-separated for the
    list-valued headers). ``None`` or ``""`` means the header is not written.
    Each ``append_*`` flag decides what happens when the response already
    carries the header: ``False`` overwrites it, ``True`` merges the tokens.
    ``allow_credentials`` and ``max_age`` always overwrite.
    """

    mode: CorsMode = CorsMode.CUSTOM
    allow_origin: str | None = None
    allow_methods: str | None = None
    allow_headers: str | None = None
    expose_headers: str | None = None
    allow_credentials: bool | None = None
    max_age: int | None = None  # seconds
    info_header_name: str | None = None
    info_header_value: str | None = None
    append_allow_origin: bool = False
    append_allow_methods: bool = False
    append_allow_headers: bool = False
    append_expose_headers: bool = False
    append_info_header: bool = False

    @classmethod
    def default(cls) -> CorsConfiguration:
        """The header set used when nothing else has been configured."""
        return cls(
            mode=CorsMode.DEFAULT,
            allow_origin="*",
            allow_methods=DEFAULT_ALLOW_METHODS,
            allow_headers=DEFAULT_ALLOW_HEADERS,
            allow_credentials=True,
            max_age=DEFAULT_MAX_AGE_SECONDS,
            info_header_name=DEFAULT_INFO_HEADER_NAME,
            info_header_value=DEFAULT_INFO_HEADER_VALUE,
        )

    @classmethod
    def disabled(cls) -> CorsConfiguration:
        return cls(mode=CorsMode.DISABLED)

    @property
    def is_disabled(self) -> bool:
        return self.mode is CorsMode.DISABLED

    def header_values(self) -> list[tuple[str | None, str | None, bool]]:
        """Mergeable headers as ``(name, value, append)`` in write order."""
        return [
            (CorsHeader.ALLOW_ORIGIN, self.allow_origin, self.append_allow_origin),
            (CorsHeader.ALLOW_METHODS, self.allow_methods, self.append_allow_methods),
            (CorsHeader.ALLOW_HEADERS, self.allow_headers, self.append_allow_headers),
            (CorsHeader.EXPOSE_HEADERS, self.expose_headers, self.append_expose_headers),
            (self.info_header_name, self.info_header_value, self.append_info_header),
        ]

    def value_headers(self) -> list[tuple[str, bool | int | None]]:
        """Overwrite-only headers as ``(name, value)`` in write order."""
        return [
            (CorsHeader.ALLOW_CREDENTIALS, self.allow_credentials),
            (CorsHeader.MAX_AGE, self.max_age),
        ]
