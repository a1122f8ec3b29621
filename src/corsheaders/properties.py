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
"""CORS configuration properties (``corsheaders.cors.*``)."""

from __future__ import annotations

from dataclasses import dataclass

from corsheaders.builder import CorsBuilder
from corsheaders.config import Config, config_properties
from corsheaders.configuration import CorsConfiguration
from corsheaders.holder import CorsConfigurationHolder


@config_properties(prefix="corsheaders.cors")
@dataclass
class CorsProperties:
    """File/env representation of a CORS configuration.

    ``mode`` is ``default``, ``custom`` or ``disabled``; the remaining
    fields are only read in ``custom`` mode. List-valued headers may be
    given as a comma-separated string or a YAML list.
    """

    mode: str = "default"
    allow_origin: str | None = None
    allow_methods: str | None = None
    allow_headers: str | None = None
    expose_headers: str | None = None
    append_allow_methods: bool = False
    append_allow_headers: bool = False
    append_expose_headers: bool = False
    allow_credentials: bool | None = None
    max_age: int | None = None
    max_age_unit: str = "seconds"
    info_header_name: str | None = None
    info_header_value: str | None = None
    append_info_header: bool = False


def configure_cors(config: Config, holder: CorsConfigurationHolder | None = None) -> CorsConfiguration:
    """Bind ``corsheaders.cors.*`` from *config*, then build and install it."""
    return CorsBuilder.from_properties(config.bind(CorsProperties)).build(holder)
