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
"""Process-wide slot holding the active CORS configuration."""

from __future__ import annotations

import threading

import structlog

from corsheaders.configuration import CorsConfiguration
from corsheaders.exceptions import CorsConfigurationException

logger = structlog.get_logger("corsheaders.holder")


class CorsConfigurationHolder:
    """Publishes one immutable :class:`CorsConfiguration` to request handlers.

    Readers take no lock: a published configuration is frozen and the slot
    is replaced by a single reference assignment. Writers serialize on a
    lock so a lazy default never overwrites an explicit install.
    """

    def __init__(self, configuration: CorsConfiguration | None = None) -> None:
        self._configuration = configuration
        self._lock = threading.Lock()

    def get(self) -> CorsConfiguration | None:
        """Return the installed configuration, or ``None`` if nothing is installed."""
        return self._configuration

    def install(self, configuration: CorsConfiguration) -> CorsConfiguration:
        """Replace the active configuration for all subsequent requests."""
        if not isinstance(configuration, CorsConfiguration):
            raise CorsConfigurationException(
                f"Cannot install {type(configuration).__name__} as a CORS configuration",
                code="CORS_CONFIG_INSTALL",
                context={"received": repr(configuration)},
            )
        with self._lock:
            previous = self._configuration
            self._configuration = configuration
        logger.info(
            "cors_configuration_installed",
            mode=str(configuration.mode),
            replaced=previous is not None,
        )
        return configuration

    def get_or_install_default(self) -> CorsConfiguration:
        """Return the installed configuration, installing the default one if empty."""
        current = self._configuration
        if current is not None:
            return current
        with self._lock:
            if self._configuration is None:
                self._configuration = CorsConfiguration.default()
                logger.info("cors_default_configuration_installed")
            return self._configuration

    def reset(self) -> None:
        """Forget the installed configuration."""
        with self._lock:
            self._configuration = None


default_holder = CorsConfigurationHolder()


def install_configuration(configuration: CorsConfiguration) -> CorsConfiguration:
    """Install *configuration* into the process-wide slot."""
    return default_holder.install(configuration)


def get_configuration() -> CorsConfiguration | None:
    """Return the configuration in the process-wide slot, if any."""
    return default_holder.get()
