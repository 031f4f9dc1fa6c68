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
"""CORS entry point: request and policy in, response headers out."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

import structlog

from corsfly.cors.builder import build_directives, is_preflight
from corsfly.cors.headers import CORSHeaders, apply_directives
from corsfly.cors.options import CORSOptions, OptionsCallback
from corsfly.cors.resolver import resolve_options

logger = structlog.get_logger("corsfly.cors")

CORSConfig: TypeAlias = Mapping[str, Any] | CORSOptions | OptionsCallback | None


@dataclass(frozen=True, eq=False)
class CORSRequest:
    """Framework-neutral request view.

    ``headers`` may be given as a plain mapping or pairs; it is stored as a
    case-insensitive :class:`CORSHeaders`.
    """

    method: str = "GET"
    headers: Any = field(default_factory=CORSHeaders)

    def __post_init__(self) -> None:
        if not isinstance(self.headers, CORSHeaders):
            object.__setattr__(self, "headers", CORSHeaders(self.headers))


@dataclass(frozen=True, eq=False)
class CORSResult:
    """Headers computed for one request."""

    headers: CORSHeaders
    is_preflight: bool = False


def cors(request: Any, config: CORSConfig = None) -> CORSResult:
    """Compute the CORS response headers for *request*.

    Args:
        request: Anything exposing ``method`` and ``headers.get(name)``,
            e.g. :class:`CORSRequest` or a Starlette ``Request``.
        config: ``None`` for the defaults, a mapping of partial overrides,
            a complete :class:`CORSOptions`, or a callable receiving the
            request origin and returning a mapping of overrides.

    Returns:
        A :class:`CORSResult` whose ``headers`` is a fresh collection. The
        caller decides how to answer; preflights are normally sent as an
        empty 204 carrying these headers.

    Raises:
        ConfigurationError: an origin callback returned another callable.
    """
    request_origin = request.headers.get("origin")
    options = resolve_options(config, request_origin)
    directives = build_directives(options, request)
    headers = apply_directives(directives, CORSHeaders())
    preflight = is_preflight(request)

    logger.debug(
        "cors_headers_resolved",
        method=request.method,
        origin=request_origin,
        preflight=preflight,
        header_count=len(headers),
    )
    return CORSResult(headers=headers, is_preflight=preflight)
