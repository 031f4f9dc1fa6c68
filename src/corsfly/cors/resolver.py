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
"""Policy resolution: static or callback config merged onto the defaults."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

import structlog

from corsfly.cors.options import DEFAULT_OPTIONS, OPTION_NAMES, CORSOptions
from corsfly.kernel.exceptions import ConfigurationError

logger = structlog.get_logger("corsfly.cors")


def _overrides(raw: Mapping[str, Any] | None) -> dict[str, Any]:
    if raw is None:
        return {}
    unknown = sorted(str(key) for key in raw if key not in OPTION_NAMES)
    if unknown:
        logger.warning("cors_unknown_options_ignored", keys=unknown)
    return {key: value for key, value in raw.items() if key in OPTION_NAMES}


def resolve_options(config: Any, request_origin: str | None) -> CORSOptions:
    """Build the concrete policy for one request.

    *config* may be ``None``, a :class:`CORSOptions`, a mapping of partial
    overrides, or a callable taking the request origin and returning such a
    mapping. The callable is invoked exactly once. A callable ``origin`` is
    then invoked once more to obtain the origin rule.

    Every recognized key wins over the default, ``None`` included: an
    override of ``{"origin": None}`` disables CORS just as an origin
    callback returning ``None`` does.
    The caller's config is never mutated; a new options record is returned.

    Raises:
        ConfigurationError: the origin callback returned another callable.
    """
    if isinstance(config, CORSOptions):
        options = config
    elif callable(config):
        options = dataclasses.replace(DEFAULT_OPTIONS, **_overrides(config(request_origin)))
    else:
        options = dataclasses.replace(DEFAULT_OPTIONS, **_overrides(config))

    if callable(options.origin):
        origin = options.origin(request_origin)
        if callable(origin):
            raise ConfigurationError(
                "Origin callback result cannot be a callable.",
                code="CORS_ORIGIN_CALLBACK",
                context={"request_origin": request_origin, "result_type": type(origin).__name__},
            )
        options = dataclasses.replace(options, origin=origin)

    return options
