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
"""CorsInterceptor — decides, per header, whether to add, overwrite or merge."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import structlog

from corsheaders.configuration import CorsConfiguration
from corsheaders.holder import CorsConfigurationHolder, default_holder
from corsheaders.merge import merge_header_values
from corsheaders.ports.response import HeaderResponse

logger = structlog.get_logger("corsheaders.interceptor")

T = TypeVar("T")


def header_text(value: bool | int | str) -> str:
    """Render a configuration value the way it appears on the wire."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def set_or_append_header(response: HeaderResponse, name: str, value: str, append: bool) -> None:
    """Write a mergeable header.

    Absent on the response: add it. Present: overwrite it, or, with
    *append*, replace it with the union of the existing and new tokens.
    """
    if not response.has_header(name):
        response.add_header(name, value)
        logger.debug("cors_header_added", header=name, value=value)
    elif not append:
        response.set_header(name, value)
        logger.debug("cors_header_overwritten", header=name, value=value)
    else:
        merged = merge_header_values(response.get_header_values(name), value)
        response.set_header(name, merged)
        logger.debug("cors_header_merged", header=name, value=merged)


def set_header(response: HeaderResponse, name: str, value: bool | int) -> None:
    """Write an overwrite-only header."""
    text = header_text(value)
    if response.has_header(name):
        response.set_header(name, text)
    else:
        response.add_header(name, text)
    logger.debug("cors_header_set", header=name, value=text)


class CorsInterceptor:
    """Writes the active CORS configuration onto outgoing responses.

    With *configuration* given, that configuration is used for every
    response. Otherwise the configuration is read from *holder* (the
    process-wide slot by default) on each call, and the default
    configuration is installed there on first use unless *lazy_default*
    is ``False``.
    """

    def __init__(
        self,
        configuration: CorsConfiguration | None = None,
        holder: CorsConfigurationHolder | None = None,
        lazy_default: bool = True,
    ) -> None:
        self._configuration = configuration
        self._holder = holder
        self._lazy_default = lazy_default

    def resolve(self) -> CorsConfiguration | None:
        """Return the configuration the next response will be written with."""
        if self._configuration is not None:
            return self._configuration
        holder = self._holder or default_holder
        if self._lazy_default:
            return holder.get_or_install_default()
        return holder.get()

    def apply(self, response: HeaderResponse) -> None:
        """Write CORS headers onto *response*.

        Never raises: a failure is logged and the response is left with
        whatever headers were written before it.
        """
        try:
            config = self.resolve()
            if config is None or config.is_disabled:
                return

            for name, value, append in config.header_values():
                if not name or not value:
                    continue
                set_or_append_header(response, name, value, append)

            for name, typed_value in config.value_headers():
                if typed_value is None:
                    continue
                set_header(response, name, typed_value)
        except Exception:
            logger.exception("cors_headers_failed")

    def intercept(self, response: HeaderResponse, proceed: Callable[[], T]) -> T:
        """Write CORS headers, then continue the pipeline exactly once."""
        self.apply(response)
        return proceed()
