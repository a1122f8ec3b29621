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
"""Comma-separated header value merging."""

from __future__ import annotations

import re
from collections.abc import Iterable

_SEPARATOR_RE = re.compile(r"\s*,\s*")


def split_header_value(value: str) -> list[str]:
    """Split a comma-separated header value into its tokens.

    Whitespace around commas is dropped, whitespace inside a token is kept
    as-is, and empty tokens (``"A,,B"`` or a trailing comma) are skipped.
    """
    return [token for token in _SEPARATOR_RE.split(value.strip()) if token]


def merge_header_values(existing_values: Iterable[str], new_value: str) -> str:
    """Union the tokens of *existing_values* and *new_value* into one header value.

    Tokens are compared exactly (case-sensitive) and each appears once in the
    result, in first-seen order: tokens of the existing values first, then any
    new tokens from *new_value*.
    """
    tokens: dict[str, None] = {}
    for value in existing_values:
        tokens.update(dict.fromkeys(split_header_value(value)))
    tokens.update(dict.fromkeys(split_header_value(new_value)))
    return ",".join(tokens)
