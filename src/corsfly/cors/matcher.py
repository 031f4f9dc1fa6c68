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
"""Origin matching against fixed, pattern, and list rules."""

from __future__ import annotations

import re
from typing import Any


def is_origin_allowed(origin: str, rule: Any) -> bool:
    """Return whether *origin* satisfies *rule*.

    Strings compare exactly (case-sensitive), compiled patterns use
    ``search`` so anchoring is up to the pattern, and lists match when any
    item does. Any other value falls back to its truthiness.
    """
    if isinstance(rule, str):
        return origin == rule
    if isinstance(rule, re.Pattern):
        return rule.search(origin) is not None
    if isinstance(rule, (list, tuple)):
        return any(is_origin_allowed(origin, item) for item in rule)
    return bool(rule)
