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
"""Fluent builder for CORS configurations.

Three entry points on :class:`CorsBuilder` start a :class:`CorsStage`:

* ``CorsBuilder.get_default_cors()`` — the default header set,
* ``CorsBuilder.get_builder()`` — an empty custom header set,
* ``CorsBuilder.get_disabled_cors()`` — no CORS headers at all.

Example::

    CorsBuilder.get_builder() \\
        .set_allow_origin("*") \\
        .set_allow_methods(HttpMethod.GET, HttpMethod.POST) \\
        .set_allow_headers(HttpHeader.ORIGIN, HttpHeader.ACCEPT, HttpHeader.CONTENT_TYPE) \\
        .set_expose_headers("X-My-Header1, X-My-Header2") \\
        .set_allow_credentials(True) \\
        .set_max_age(12, TimeUnit.HOURS) \\
        .set_info_header("X-My-Header", "My_Info") \\
        .build()

``build()`` installs the configuration process-wide; every response
intercepted afterwards carries::

    Access-Control-Allow-Origin: *
    Access-Control-Allow-Methods: GET,POST
    Access-Control-Allow-Headers: Origin,Accept,Content-Type
    Access-Control-Expose-Headers: X-My-Header1, X-My-Header2
    Access-Control-Allow-Credentials: true
    Access-Control-Max-Age: 43200
    X-My-Header: My_Info

Run it once at application startup, before requests are served.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from corsheaders.configuration import CorsConfiguration, CorsMode
from corsheaders.enums import TimeUnit
from corsheaders.exceptions import CorsConfigurationException
from corsheaders.holder import CorsConfigurationHolder, default_holder
from corsheaders.merge import merge_header_values

if TYPE_CHECKING:
    from corsheaders.properties import CorsProperties

Tokens = str | Iterable[str]


def _join_tokens(field_name: str, values: tuple[Tokens, ...]) -> str:
    """Join raw strings and enum members into one comma-separated value."""
    tokens: list[str] = []
    for value in values:
        if isinstance(value, str):
            tokens.append(value)
            continue
        try:
            items = list(value)
        except TypeError:
            raise CorsConfigurationException(
                f"{field_name} expects strings, got {type(value).__name__}",
                code="CORS_CONFIG_TOKEN",
                context={"field": field_name, "value": repr(value)},
            ) from None
        tokens.append(_join_tokens(field_name, tuple(items)))
    return ",".join(tokens)


class CorsStage:
    """Accumulates CORS settings until :meth:`build` freezes and installs them.

    List-valued headers have two setters. ``set_*`` replaces the value and
    overwrites the header if the response already has one. ``append_*``
    merges into the value and merges into an existing response header.
    Origin, credentials and max-age can only be set.
    """

    def __init__(self, mode: CorsMode) -> None:
        if mode is CorsMode.DEFAULT:
            self._config = CorsConfiguration.default()
        elif mode is CorsMode.DISABLED:
            self._config = CorsConfiguration.disabled()
        else:
            self._config = CorsConfiguration(mode=CorsMode.CUSTOM)

    @property
    def mode(self) -> CorsMode:
        return self._config.mode

    def _update(self, **changes: Any) -> CorsStage:
        if self._config.is_disabled:
            raise CorsConfigurationException(
                "Disabled CORS cannot be customized; start from CorsBuilder.get_builder()",
                code="CORS_CONFIG_DISABLED",
                context={"fields": sorted(changes)},
            )
        self._config = dataclasses.replace(self._config, mode=CorsMode.CUSTOM, **changes)
        return self

    def _appended(self, current: str | None, addition: str) -> str:
        if not current:
            return addition
        return merge_header_values([current], addition)

    # -- Access-Control-Allow-Origin ----------------------------------------

    def set_allow_origin(self, origin: str) -> CorsStage:
        return self._update(allow_origin=_join_tokens("allow_origin", (origin,)), append_allow_origin=False)

    # -- Access-Control-Allow-Methods ---------------------------------------

    def set_allow_methods(self, *methods: Tokens) -> CorsStage:
        return self._update(allow_methods=_join_tokens("allow_methods", methods), append_allow_methods=False)

    def append_allow_methods(self, *methods: Tokens) -> CorsStage:
        value = self._appended(self._config.allow_methods, _join_tokens("allow_methods", methods))
        return self._update(allow_methods=value, append_allow_methods=True)

    # -- Access-Control-Allow-Headers ---------------------------------------

    def set_allow_headers(self, *headers: Tokens) -> CorsStage:
        return self._update(allow_headers=_join_tokens("allow_headers", headers), append_allow_headers=False)

    def append_allow_headers(self, *headers: Tokens) -> CorsStage:
        value = self._appended(self._config.allow_headers, _join_tokens("allow_headers", headers))
        return self._update(allow_headers=value, append_allow_headers=True)

    # -- Access-Control-Expose-Headers --------------------------------------

    def set_expose_headers(self, *headers: Tokens) -> CorsStage:
        return self._update(expose_headers=_join_tokens("expose_headers", headers), append_expose_headers=False)

    def append_expose_headers(self, *headers: Tokens) -> CorsStage:
        value = self._appended(self._config.expose_headers, _join_tokens("expose_headers", headers))
        return self._update(expose_headers=value, append_expose_headers=True)

    # -- Access-Control-Allow-Credentials / Max-Age -------------------------

    def set_allow_credentials(self, allow: bool) -> CorsStage:
        if not isinstance(allow, bool):
            raise CorsConfigurationException(
                f"allow_credentials expects a bool, got {type(allow).__name__}",
                code="CORS_CONFIG_CREDENTIALS",
            )
        return self._update(allow_credentials=allow)

    def set_max_age(self, value: int | timedelta, unit: TimeUnit | None = None) -> CorsStage:
        """Set ``Access-Control-Max-Age``, stored as ``value * unit`` seconds.

        *unit* defaults to seconds. A :class:`~datetime.timedelta` is accepted
        in place of *value* and *unit*; its fractional seconds are dropped and
        passing a *unit* alongside it is rejected.
        """
        if isinstance(value, timedelta):
            if unit is not None:
                raise CorsConfigurationException(
                    "max_age given as a timedelta takes no unit",
                    code="CORS_CONFIG_MAX_AGE",
                    context={"unit": repr(unit)},
                )
            seconds = int(value.total_seconds())
        else:
            if unit is None:
                unit = TimeUnit.SECONDS
            if isinstance(value, bool) or not isinstance(value, int):
                raise CorsConfigurationException(
                    f"max_age expects an int, got {type(value).__name__}",
                    code="CORS_CONFIG_MAX_AGE",
                )
            if not isinstance(unit, TimeUnit):
                raise CorsConfigurationException(
                    f"max_age unit must be a TimeUnit, got {unit!r}",
                    code="CORS_CONFIG_MAX_AGE",
                )
            seconds = value * unit.seconds
        if seconds < 0:
            raise CorsConfigurationException(
                f"max_age must not be negative, got {seconds} seconds",
                code="CORS_CONFIG_MAX_AGE",
                context={"seconds": seconds},
            )
        return self._update(max_age=seconds)

    # -- Info header ---------------------------------------------------------

    def set_info_header(self, name: str, value: str) -> CorsStage:
        return self._update(
            info_header_name=_join_tokens("info_header_name", (name,)),
            info_header_value=_join_tokens("info_header_value", (value,)),
            append_info_header=False,
        )

    def append_info_header(self, name: str, value: str) -> CorsStage:
        name = _join_tokens("info_header_name", (name,))
        value = _join_tokens("info_header_value", (value,))
        if name == self._config.info_header_name:
            value = self._appended(self._config.info_header_value, value)
        return self._update(info_header_name=name, info_header_value=value, append_info_header=True)

    # -- Finishing -----------------------------------------------------------

    def freeze(self) -> CorsConfiguration:
        """Return the accumulated configuration without installing it."""
        config = self._config
        if config.info_header_value and not config.info_header_name:
            raise CorsConfigurationException(
                "Info header value given without a header name",
                code="CORS_CONFIG_INFO_HEADER",
                context={"value": config.info_header_value},
            )
        return config

    def build(self, holder: CorsConfigurationHolder | None = None) -> CorsConfiguration:
        """Freeze the configuration and install it, process-wide unless *holder* is given."""
        config = self.freeze()
        return (holder or default_holder).install(config)


class CorsBuilder:
    """Entry points for building a CORS configuration."""

    @staticmethod
    def get_default_cors() -> CorsStage:
        """Start from the default header set.

        Access-Control-Allow-Origin: *
        Access-Control-Allow-Methods: GET,POST,PUT,DELETE,OPTIONS,HEAD,PATCH
        Access-Control-Allow-Headers: Origin,Accept,Content-Type
        Access-Control-Allow-Credentials: true
        Access-Control-Max-Age: 86400 (24h)
        X-CORS-Headers: Powered-by-CorsHeaders
        """
        return CorsStage(CorsMode.DEFAULT)

    @staticmethod
    def get_builder() -> CorsStage:
        return CorsStage(CorsMode.CUSTOM)

    @staticmethod
    def get_disabled_cors() -> CorsStage:
        return CorsStage(CorsMode.DISABLED)

    @staticmethod
    def from_properties(properties: CorsProperties) -> CorsStage:
        """Start a stage from bound ``corsheaders.cors.*`` properties."""
        try:
            mode = CorsMode(str(properties.mode).lower())
        except ValueError:
            raise CorsConfigurationException(
                f"Unknown CORS mode '{properties.mode}'",
                code="CORS_CONFIG_MODE",
                context={"allowed": [m.value for m in CorsMode]},
            ) from None

        stage = CorsStage(mode)
        if mode is not CorsMode.CUSTOM:
            return stage

        if properties.allow_origin:
            stage.set_allow_origin(properties.allow_origin)
        for value, append, setter, appender in (
            (properties.allow_methods, properties.append_allow_methods,
             stage.set_allow_methods, stage.append_allow_methods),
            (properties.allow_headers, properties.append_allow_headers,
             stage.set_allow_headers, stage.append_allow_headers),
            (properties.expose_headers, properties.append_expose_headers,
             stage.set_expose_headers, stage.append_expose_headers),
        ):
            if value:
                (appender if append else setter)(value)
        if properties.allow_credentials is not None:
            stage.set_allow_credentials(properties.allow_credentials)
        if properties.max_age is not None:
            try:
                unit = TimeUnit.parse(properties.max_age_unit)
            except ValueError as exc:
                raise CorsConfigurationException(str(exc), code="CORS_CONFIG_MAX_AGE") from exc
            stage.set_max_age(properties.max_age, unit)
        if properties.info_header_name or properties.info_header_value:
            info = stage.append_info_header if properties.append_info_header else stage.set_info_header
            info(properties.info_header_name or "", properties.info_header_value or "")
        return stage
