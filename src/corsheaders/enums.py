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
"""Standard HTTP header and method names, and max-age time units."""

from __future__ import annotations

from enum import Enum, StrEnum


class HttpMethod(StrEnum):
    """HTTP request methods accepted by ``Access-Control-Allow-Methods``."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"


class HttpHeader(StrEnum):
    """Common request and response header names."""

    ACCEPT = "Accept"
    ACCEPT_CHARSET = "Accept-Charset"
    ACCEPT_ENCODING = "Accept-Encoding"
    ACCEPT_LANGUAGE = "Accept-Language"
    AUTHORIZATION = "Authorization"
    CACHE_CONTROL = "Cache-Control"
    CONTENT_DISPOSITION = "Content-Disposition"
    CONTENT_ENCODING = "Content-Encoding"
    CONTENT_LANGUAGE = "Content-Language"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    COOKIE = "Cookie"
    DATE = "Date"
    ETAG = "ETag"
    EXPIRES = "Expires"
    IF_MATCH = "If-Match"
    IF_MODIFIED_SINCE = "If-Modified-Since"
    IF_NONE_MATCH = "If-None-Match"
    LAST_MODIFIED = "Last-Modified"
    LOCATION = "Location"
    ORIGIN = "Origin"
    PRAGMA = "Pragma"
    RANGE = "Range"
    REFERER = "Referer"
    USER_AGENT = "User-Agent"
    X_REQUESTED_WITH = "X-Requested-With"


class CorsHeader(StrEnum):
    """Response header names written by the CORS interceptor."""

    ALLOW_ORIGIN = "Access-Control-Allow-Origin"
    ALLOW_METHODS = "Access-Control-Allow-Methods"
    ALLOW_HEADERS = "Access-Control-Allow-Headers"
    EXPOSE_HEADERS = "Access-Control-Expose-Headers"
    ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
    MAX_AGE = "Access-Control-Max-Age"


class TimeUnit(Enum):
    """Units accepted by ``CorsStage.set_max_age``, valued in seconds."""

    SECONDS = 1
    MINUTES = 60
    HOURS = 3600
    DAYS = 86400

    @property
    def seconds(self) -> int:
        return self.value

    @classmethod
    def parse(cls, name: str) -> TimeUnit:
        """Look up a unit by case-insensitive name (``"minutes"`` -> ``MINUTES``)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown time unit '{name}'") from None
