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
"""Tests for structlog configuration."""

import logging

import pytest

from corsfly.core.config import Config
from corsfly.logging import CORSFLY_LOGGERS, LoggingSettings, configure_logging


class TestLoggingSettings:
    def test_packaged_defaults(self, tmp_path):
        settings = LoggingSettings.from_config(Config.from_sources(tmp_path))
        assert settings.root_level == "INFO"
        assert settings.format == "console"
        assert settings.levels == {}

    def test_reads_root_level_format_and_module_levels(self):
        config = Config({"corsfly": {"logging": {"format": "JSON", "level": {"root": "debug", "corsfly.web": "warning"}}}})
        settings = LoggingSettings.from_config(config)
        assert settings.root_level == "DEBUG"
        assert settings.format == "json"
        assert settings.levels == {"corsfly.web": "WARNING"}

    def test_verbose_forces_corsfly_loggers_to_debug(self):
        config = Config({"corsfly": {"logging": {"level": {"corsfly.cors": "ERROR"}}}})
        settings = LoggingSettings.from_config(config, verbose=True)
        assert settings.levels == dict.fromkeys(CORSFLY_LOGGERS, "DEBUG")

    def test_unknown_format_rejected(self):
        with pytest.raises(ValueError):
            LoggingSettings.from_config(Config({"corsfly": {"logging": {"format": "xml"}}}))

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            LoggingSettings.from_config(Config({"corsfly": {"logging": {"level": {"root": "LOUD"}}}}))


class TestConfigureLogging:
    def test_applies_module_levels(self):
        configure_logging(Config({"corsfly": {"logging": {"level": {"corsfly.web": "WARNING"}}}}))
        assert logging.getLogger("corsfly.web").level == logging.WARNING

    def test_verbose(self):
        configure_logging(Config({}), verbose=True)
        for name in CORSFLY_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_root_level(self):
        settings = configure_logging(Config({"corsfly": {"logging": {"level": {"root": "ERROR"}}}}))
        assert settings.root_level == "ERROR"
        assert logging.getLogger().level == logging.ERROR
