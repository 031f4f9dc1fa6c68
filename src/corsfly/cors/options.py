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
"""CORS policy model: options dataclass, origin rule aliases, defaults."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, NamedTuple, Protocol, TypeAlias, runtime_checkable

# A static origin rule: True/False, "*", a fixed origin, a compiled pattern,
# or a (possibly nested) list of fixed origins and patterns.
OriginRule: TypeAlias = bool | str | re.Pattern[str] | Sequence[Any] | None

# Resolved once per request with the request's Origin header (or None).
OriginCallback: TypeAlias = Callable[[str | None], OriginRule]

# Whole-policy callback: request origin in, partial override mapping out.
OptionsCallback: TypeAlias = Callable[[str | None], Mapping[str, Any] | None]

HeaderList: TypeAlias = str | Sequence[str]

WILDCARD = "*"


@dataclass(frozen=True)
class CORSOptions:
    """Resolved CORS policy for a single request.

    Attributes:
        origin: Origin rule, or a callback producing one.
        allowed_methods: Methods advertised on preflight, list or pre-joined string.
        allowed_headers: Headers advertised on preflight; ``None`` reflects
            the request's ``Access-Control-Request-Headers``.
        exposed_headers: Headers exposed to the calling script.
        credentials: Emit ``Access-Control-Allow-Credentials: true`` when ``True``.
        max_age: Preflight cache lifetime in seconds.
    """

    origin: OriginRule | OriginCallback = WILDCARD
    allowed_methods: HeaderList = "GET,HEAD,PUT,PATCH,POST,DELETE"
    allowed_headers: HeaderList | None = None
    exposed_headers: HeaderList | None = None
    credentials: bool = False
    max_age: int | None = None


DEFAULT_OPTIONS = CORSOptions()

OPTION_NAMES: frozenset[str] = frozenset(f.name for f in fields(CORSOptions))


class HeaderDirective(NamedTuple):
    """A single ``(name, value)`` pair destined for the response headers.

    A value of ``None``, ``False`` or ``""`` drops the directive.
    """

    name: str
    value: str | bool | int | None


@runtime_checkable
class RequestHeaders(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...


@runtime_checkable
class RequestView(Protocol):
    """Read-only request surface the engine needs.

    Starlette's ``Request`` satisfies it as-is, as does :class:`CORSRequest`.
    """

    @property
    def method(self) -> str: ...

    @property
    def headers(self) -> RequestHeaders: ...
