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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from typing import Any

import structlog
from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from corsfly.cors import CORSConfig, CORSHeaders, cors

logger = structlog.get_logger("corsfly.web")


def merge_cors_headers(target: MutableHeaders, cors_headers: CORSHeaders) -> None:
    """Copy computed CORS headers onto a Starlette header set.

    ``Vary`` joins whatever the application already declared; every other
    header replaces the existing value.
    """
    for name, value in cors_headers.items():
        if name.lower() == "vary":
            target.add_vary_header(value)
        else:
            target[name] = value


class CORSMiddleware:
    """Applies a corsfly policy to every HTTP request.

    Preflight requests that produce CORS headers are answered here with an
    empty response (204 by default); everything else reaches the app and
    gets the headers merged into its response. Disabled policies let
    ``OPTIONS`` requests through to the app untouched.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so streaming
    responses are never buffered.
    """

    def __init__(self, app: ASGIApp, config: CORSConfig = None, preflight_status: int = 204) -> None:
        self.app = app
        self._config = config
        self._preflight_status = preflight_status

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        result = cors(Request(scope), self._config)

        if result.is_preflight and len(result.headers):
            logger.debug("cors_preflight_answered", path=scope.get("path"), status=self._preflight_status)
            response = Response(status_code=self._preflight_status, headers=result.headers.to_dict())
            await response(scope, receive, send)
            return

        if not len(result.headers):
            await self.app(scope, receive, send)
            return

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                merge_cors_headers(MutableHeaders(scope=message), result.headers)
            await send(message)

        await self.app(scope, receive, send_with_cors)
