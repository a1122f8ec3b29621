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
"""Shared fixtures."""

from __future__ import annotations

import pytest

from corsheaders.holder import default_holder


@pytest.fixture(autouse=True)
def _reset_default_holder():
    """Each test starts with nothing installed in the process-wide slot."""
    default_holder.reset()
    yield
    default_holder.reset()
