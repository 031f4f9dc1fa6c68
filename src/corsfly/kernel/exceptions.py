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
"""Exception hierarchy for corsfly.

Every error raised by the library inherits from CorsflyException so callers
can catch the whole family at once or a single subclass for targeted handling.

Categories:
- ConfigurationError: a CORS policy that violates the callable contract
"""

from __future__ import annotations


class CorsflyException(Exception):
    """Base exception for all corsfly errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_ORIGIN_CALLBACK").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationError(CorsflyException):
    """The supplied CORS policy breaks the programming contract.

    Raised when a dynamic origin callback returns another callable; origin
    callbacks resolve exactly one level deep. Never retried internally.
    """
