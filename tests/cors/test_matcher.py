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
"""Tests for origin matching."""

import re

from corsfly.cors.matcher import is_origin_allowed


class TestFixedOrigin:
    def test_exact_match(self):
        assert is_origin_allowed("https://a.com", "https://a.com") is True

    def test_case_sensitive(self):
        assert is_origin_allowed("https://A.com", "https://a.com") is False

    def test_no_partial_match(self):
        assert is_origin_allowed("https://a.com.evil", "https://a.com") is False


class TestPatternOrigin:
    def test_search_semantics(self):
        assert is_origin_allowed("https://api.example.com", re.compile(r"example\.com")) is True

    def test_anchored_pattern(self):
        pattern = re.compile(r"^https://(.+\.)?example\.com$")
        assert is_origin_allowed("https://api.example.com", pattern) is True
        assert is_origin_allowed("https://example.com.evil.io", pattern) is False


class TestListOrigin:
    def test_any_item_matches(self):
        rule = ["https://a.com", re.compile(r"\.b\.com$")]
        assert is_origin_allowed("https://x.b.com", rule) is True
        assert is_origin_allowed("https://a.com", rule) is True
        assert is_origin_allowed("https://c.com", rule) is False

    def test_empty_list_rejects(self):
        assert is_origin_allowed("https://a.com", []) is False

    def test_nested_lists(self):
        rule = ["https://a.com", ["https://b.com", [re.compile(r"c\.com$")]]]
        assert is_origin_allowed("https://c.com", rule) is True
        assert is_origin_allowed("https://d.com", rule) is False

    def test_tuple_rule(self):
        assert is_origin_allowed("https://a.com", ("https://z.com", "https://a.com")) is True

    def test_short_circuits_on_first_match(self):
        class Exploding:
            def __bool__(self):
                raise AssertionError("should not be reached")

        assert is_origin_allowed("https://a.com", ["https://a.com", Exploding()]) is True


class TestBooleanFallback:
    def test_true_allows(self):
        assert is_origin_allowed("https://a.com", True) is True

    def test_false_rejects(self):
        assert is_origin_allowed("https://a.com", False) is False
