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
"""CORS decision engine — resolve a policy against a request into response headers."""

from corsfly.cors.builder import build_directives
from corsfly.cors.engine import CORSConfig, CORSRequest, CORSResult, cors
from corsfly.cors.headers import CORSHeaders, apply_directives
from corsfly.cors.matcher import is_origin_allowed
from corsfly.cors.options import (
    DEFAULT_OPTIONS,
    CORSOptions,
    HeaderDirective,
    OptionsCallback,
    OriginCallback,
    OriginRule,
    RequestView,
)
from corsfly.cors.resolver import resolve_options

__all__ = [
    "DEFAULT_OPTIONS",
    "CORSConfig",
    "CORSHeaders",
    "CORSOptions",
    "CORSRequest",
    "CORSResult",
    "HeaderDirective",
    "OptionsCallback",
    "OriginCallback",
    "OriginRule",
    "RequestView",
    "apply_directives",
    "build_directives",
    "cors",
    "is_origin_allowed",
    "resolve_options",
]
