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
"""Tests for the corsfly CLI."""

import logging
from pathlib import Path

from click.testing import CliRunner

from corsfly.cli.main import cli


def _write_policy(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "corsfly.yaml"
    path.write_text(body)
    return path


class TestCheckCommand:
    def test_default_policy_preflight(self, tmp_path):
        path = _write_policy(tmp_path, "corsfly:\n  cors:\n    max_age: 60\n")
        result = CliRunner().invoke(
            cli, ["check", "-X", "OPTIONS", "--origin", "https://a.com", "--config", str(path)]
        )
        assert result.exit_code == 0, result.output
        assert "preflight" in result.output
        assert "Access-Control-Allow-Methods" in result.output
        assert "Access-Control-Max-Age" in result.output

    def test_allowlist_reflects_origin(self, tmp_path):
        path = _write_policy(
            tmp_path,
            "corsfly:\n  cors:\n    allowed_origins: ['https://a.com']\n    credentials: true\n",
        )
        result = CliRunner().invoke(cli, ["check", "--origin", "https://a.com", "-c", str(path)])
        assert result.exit_code == 0, result.output
        assert "https://a.com" in result.output
        assert "Access-Control-Allow-Credentials" in result.output

    def test_disabled_policy(self, tmp_path):
        path = _write_policy(tmp_path, "corsfly:\n  cors:\n    enabled: false\n")
        result = CliRunner().invoke(cli, ["check", "--origin", "https://a.com", "-c", str(path)])
        assert result.exit_code == 0, result.output
        assert "CORS disabled" in result.output

    def test_profile_overlay(self, tmp_path):
        path = _write_policy(tmp_path, "corsfly:\n  cors:\n    enabled: true\n")
        (tmp_path / "corsfly-locked.yaml").write_text("corsfly:\n  cors:\n    enabled: false\n")
        result = CliRunner().invoke(cli, ["check", "-c", str(path), "-p", "locked"])
        assert result.exit_code == 0, result.output
        assert "CORS disabled" in result.output

    def test_missing_config_file(self, tmp_path):
        result = CliRunner().invoke(cli, ["check", "-c", str(tmp_path / "nope.yaml")])
        assert result.exit_code != 0
        assert "does not exist" in result.output

    def test_malformed_header_option(self, tmp_path):
        path = _write_policy(tmp_path, "corsfly: {}\n")
        result = CliRunner().invoke(cli, ["check", "-c", str(path), "-H", "no-colon"])
        assert result.exit_code != 0

    def test_empty_yaml_list_key(self, tmp_path):
        path = _write_policy(tmp_path, "corsfly:\n  cors:\n    allowed_headers:\n")
        result = CliRunner().invoke(
            cli, ["check", "-X", "OPTIONS", "-c", str(path), "--request-headers", "X-Token"]
        )
        assert result.exit_code == 0, result.output
        assert "X-Token" in result.output

    def test_invalid_log_format_reported(self, tmp_path):
        path = _write_policy(tmp_path, "corsfly:\n  logging:\n    format: xml\n")
        result = CliRunner().invoke(cli, ["check", "-c", str(path)])
        assert result.exit_code == 1
        assert "corsfly.logging.format" in result.output

    def test_verbose_enables_debug_loggers(self, tmp_path):
        path = _write_policy(tmp_path, "corsfly: {}\n")
        result = CliRunner().invoke(cli, ["check", "-v", "-c", str(path)])
        assert result.exit_code == 0, result.output
        assert logging.getLogger("corsfly.cors").level == logging.DEBUG


class TestInfoCommand:
    def test_info_prints_version(self):
        from corsfly import __version__

        result = CliRunner().invoke(cli, ["info"])
        assert result.exit_code == 0, result.output
        assert __version__ in result.output
