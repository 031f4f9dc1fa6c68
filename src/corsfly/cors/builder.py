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
"""Header directive construction for preflight and actual responses."""

from __future__ import annotations

from typing import Any

import structlog

from corsfly.cors.headers import VARY
from corsfly.cors.matcher import is_origin_allowed
from corsfly.cors.options import WILDCARD, CORSOptions, HeaderDirective, HeaderList, RequestView

logger = structlog.get_logger("corsfly.cors")

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
MAX_AGE = "Access-Control-Max-Age"
EXPOSE_HEADERS = "Access-Control-Expose-Headers"
REQUEST_HEADERS = "Access-Control-Request-Headers"
CONTENT_LENGTH = "Content-Length"

Directives = list[Any]


def is_cors_disabled(origin: Any) -> bool:
    """An origin rule of ``None``, ``False`` or ``""`` turns CORS off."""
    return origin is None or origin is False or (isinstance(origin, str) and not origin)


def is_preflight(request: RequestView) -> bool:
    return request.method.upper() == "OPTIONS"


def _join(value: HeaderList | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return ",".join(value)


def configure_origin(options: CORSOptions, request: RequestView) -> Directives:
    origin = options.origin
    if origin == WILDCARD:
        return [HeaderDirective(ALLOW_ORIGIN, WILDCARD)]
    if isinstance(origin, str):
        return [HeaderDirective(ALLOW_ORIGIN, origin), HeaderDirective(VARY, "Origin")]

    request_origin = request.headers.get("origin")
    if not request_origin:
        allowed = False
    elif origin is True:
        allowed = True
    else:
        allowed = is_origin_allowed(request_origin, origin)

    logger.debug("cors_origin_checked", origin=request_origin, allowed=allowed)
    return [
        HeaderDirective(ALLOW_ORIGIN, request_origin if allowed else None),
        HeaderDirective(VARY, "Origin"),
    ]


def configure_credentials(options: CORSOptions) -> HeaderDirective | None:
    if options.credentials is True:
        return HeaderDirective(ALLOW_CREDENTIALS, True)
    return None


def configure_methods(options: CORSOptions) -> HeaderDirective | None:
    methods = _join(options.allowed_methods)
    if methods:
        return HeaderDirective(ALLOW_METHODS, methods)
    return None


def configure_allowed_headers(options: CORSOptions, request: RequestView) -> Directives:
    allowed = _join(options.allowed_headers)
    if allowed:
        return [HeaderDirective(ALLOW_HEADERS, allowed)]

    # Nothing configured: mirror what the browser asked for.
    requested = request.headers.get(REQUEST_HEADERS.lower())
    if not requested:
        return []
    return [HeaderDirective(VARY, REQUEST_HEADERS), HeaderDirective(ALLOW_HEADERS, requested)]


def configure_max_age(options: CORSOptions) -> HeaderDirective | None:
    max_age = options.max_age
    if isinstance(max_age, (int, float)) and not isinstance(max_age, bool):
        if isinstance(max_age, float) and max_age.is_integer():
            max_age = int(max_age)
        return HeaderDirective(MAX_AGE, str(max_age))
    return None


def configure_exposed_headers(options: CORSOptions) -> HeaderDirective | None:
    exposed = _join(options.exposed_headers)
    if exposed:
        return HeaderDirective(EXPOSE_HEADERS, exposed)
    return None


def build_directives(options: CORSOptions, request: RequestView) -> Directives:
    """Produce the (nested) directive list for *request* under *options*.

    Preflight (``OPTIONS``) responses carry the full set including a fixed
    ``Content-Length: 0``; actual responses carry only origin, credentials
    and exposed headers. A disabled origin rule yields nothing at all.
    """
    if is_cors_disabled(options.origin):
        logger.debug("cors_disabled", method=request.method)
        return []

    if is_preflight(request):
        return [
            configure_origin(options, request),
            configure_credentials(options),
            configure_methods(options),
            configure_allowed_headers(options, request),
            configure_max_age(options),
            configure_exposed_headers(options),
            # Strict clients wait for a body on 204 unless told otherwise.
            HeaderDirective(CONTENT_LENGTH, "0"),
        ]

    return [
        configure_origin(options, request),
        configure_credentials(options),
        configure_exposed_headers(options),
    ]

