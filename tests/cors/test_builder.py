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
"""Tests for directive construction order and branching."""

import re

from corsfly.cors.builder import build_directives, is_cors_disabled
from corsfly.cors.headers import CORSHeaders, apply_directives
from corsfly.cors.options import CORSOptions, HeaderDirective
from corsfly.cors.engine import CORSRequest


def _flatten(directives):
    for directive in directives:
        if directive is None:
            continue
        if isinstance(directive, HeaderDirective):
            yield directive
        else:
            yield from _flatten(directive)


def _names(directives):
    return [d.name for d in _flatten(directives) if d.value not in (None, False, "")]


class TestDisabled:
    def test_disabled_values(self):
        assert is_cors_disabled(False) is True
        assert is_cors_disabled(None) is True
        assert is_cors_disabled("") is True
        assert is_cors_disabled([]) is False
        assert is_cors_disabled("*") is False

    def test_empty_string_origin_produces_nothing(self):
        request = CORSRequest(method="OPTIONS", headers={"Origin": "https://a.com"})
        assert build_directives(CORSOptions(origin=""), request) == []


class TestPreflightOrder:
    def test_full_preflight_order(self):
        options = CORSOptions(
            origin=[re.compile(r"a\.com$")],
            credentials=True,
            max_age=60,
            exposed_headers=["X-Total"],
        )
        request = CORSRequest(
            method="OPTIONS",
            headers={"Origin": "https://a.com", "Access-Control-Request-Headers": "X-Req"},
        )
        assert _names(build_directives(options, request)) == [
            "Access-Control-Allow-Origin",
            "Vary",
            "Access-Control-Allow-Credentials",
            "Access-Control-Allow-Methods",
            "Vary",
            "Access-Control-Allow-Headers",
            "Access-Control-Max-Age",
            "Access-Control-Expose-Headers",
            "Content-Length",
        ]

    def test_actual_request_order(self):
        options = CORSOptions(origin="https://a.com", credentials=True, exposed_headers="X-Total", max_age=5)
        request = CORSRequest(method="POST", headers={"Origin": "https://a.com"})
        assert _names(build_directives(options, request)) == [
            "Access-Control-Allow-Origin",
            "Vary",
            "Access-Control-Allow-Credentials",
            "Access-Control-Expose-Headers",
        ]

    def test_empty_request_origin_is_not_allowed(self):
        request = CORSRequest(method="GET", headers={"Origin": ""})
        headers = apply_directives(build_directives(CORSOptions(origin=True), request), CORSHeaders())
        assert "access-control-allow-origin" not in headers
        assert headers.get("vary") == "Origin"

    def test_float_max_age(self):
        request = CORSRequest(method="OPTIONS")
        headers = apply_directives(build_directives(CORSOptions(max_age=1.5), request), CORSHeaders())
        assert headers.get("access-control-max-age") == "1.5"

    def test_integral_float_max_age_rendered_as_integer(self):
        request = CORSRequest(method="OPTIONS")
        headers = apply_directives(build_directives(CORSOptions(max_age=1.0), request), CORSHeaders())
        assert headers.get("access-control-max-age") == "1"

    def test_bool_max_age_ignored(self):
        request = CORSRequest(method="OPTIONS")
        headers = apply_directives(build_directives(CORSOptions(max_age=True), request), CORSHeaders())
        assert "access-control-max-age" not in headers
