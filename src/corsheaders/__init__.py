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
"""corsheaders — CORS response headers for ASGI applications.

Quick start::

    from corsheaders import CorsBuilder, CorsHeadersMiddleware

    CorsBuilder.get_builder().set_allow_origin("https://example.com").build()
    app.add_middleware(CorsHeadersMiddleware)

Without any ``build()`` call the default header set is installed on the
first intercepted request.
"""

from corsheaders.adapters.starlette import (
    CorsFilter,
    CorsHeadersMiddleware,
    StarletteHeaders,
    WebFilterChainMiddleware,
)
from corsheaders.builder import CorsBuilder, CorsStage
from corsheaders.config import Config, config_properties
from corsheaders.configuration import CorsConfiguration, CorsMode
from corsheaders.enums import CorsHeader, HttpHeader, HttpMethod, TimeUnit
from corsheaders.exceptions import (
    ConfigurationLoadException,
    CorsConfigurationException,
    CorsHeadersException,
)
from corsheaders.filters import OncePerRequestFilter
from corsheaders.holder import (
    CorsConfigurationHolder,
    default_holder,
    get_configuration,
    install_configuration,
)
from corsheaders.interceptor import CorsInterceptor
from corsheaders.merge import merge_header_values, split_header_value
from corsheaders.ports.filter import WebFilter
from corsheaders.ports.response import HeaderResponse
from corsheaders.properties import CorsProperties, configure_cors

__all__ = [
    # Configuration
    "Config",
    "ConfigurationLoadException",
    "CorsBuilder",
    "CorsConfiguration",
    "CorsConfigurationException",
    "CorsConfigurationHolder",
    "CorsHeader",
    "CorsHeadersException",
    "CorsMode",
    "CorsProperties",
    "CorsStage",
    "HttpHeader",
    "HttpMethod",
    "TimeUnit",
    "config_properties",
    "configure_cors",
    "default_holder",
    "get_configuration",
    "install_configuration",
    # Request handling
    "CorsInterceptor",
    "HeaderResponse",
    "OncePerRequestFilter",
    "WebFilter",
    "merge_header_values",
    "split_header_value",
    # Starlette
    "CorsFilter",
    "CorsHeadersMiddleware",
    "StarletteHeaders",
    "WebFilterChainMiddleware",
]
