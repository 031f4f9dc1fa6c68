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
"""Typed configuration properties bound from ``corsfly.*`` sections."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from corsfly.core.config import config_properties
from corsfly.cors.options import DEFAULT_OPTIONS, WILDCARD, CORSOptions, OriginRule


@config_properties(prefix="corsfly.cors")
@dataclass
class CORSProperties:
    """File-driven CORS policy (corsfly.cors.*).

    ``allowed_origins`` and ``allowed_origin_patterns`` together form an
    allowlist; a ``"*"`` entry switches to the wildcard response. With both
    empty, or ``enabled: false``, CORS is off.
    """

    enabled: bool = True
    allowed_origins: list[str] = field(default_factory=lambda: [WILDCARD])
    allowed_origin_patterns: list[str] = field(default_factory=list)
    allowed_methods: list[str] = field(default_factory=lambda: DEFAULT_OPTIONS.allowed_methods.split(","))
    allowed_headers: list[str] = field(default_factory=list)
    exposed_headers: list[str] = field(default_factory=list)
    credentials: bool = False
    max_age: int | None = None

    def origin_rule(self) -> OriginRule:
        if not self.enabled:
            return False
        if WILDCARD in self.allowed_origins:
            return WILDCARD
        rules: list[str | re.Pattern[str]] = list(self.allowed_origins)
        rules.extend(re.compile(pattern) for pattern in self.allowed_origin_patterns)
        return rules or False

    def to_options(self) -> CORSOptions:
        return CORSOptions(
            origin=self.origin_rule(),
            allowed_methods=list(self.allowed_methods),
            allowed_headers=list(self.allowed_headers) or None,
            exposed_headers=list(self.exposed_headers) or None,
            credentials=self.credentials,
            max_age=self.max_age,
        )
