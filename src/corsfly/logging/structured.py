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
"""Structured logging setup for corsfly's ``corsfly.cors`` and ``corsfly.web`` loggers."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

import structlog

from corsfly.core.config import Config

CORSFLY_LOGGERS = ("corsfly.cors", "corsfly.web")

_FORMATS = ("console", "json")


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ValueError(f"Unknown log level '{level}'")
    return number


@dataclass(frozen=True)
class LoggingSettings:
    """Logging options read from ``corsfly.logging.*``.

    ``level.root`` sets the root level; every other key under ``level`` names
    a logger, so ``corsfly.cors: DEBUG`` surfaces each origin decision.
    """

    root_level: str = "INFO"
    format: str = "console"
    levels: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Config, verbose: bool = False) -> LoggingSettings:
        section = dict(config.get_section("corsfly.logging.level"))
        root_level = str(section.pop("root", "INFO")).upper()
        levels = {name: str(level).upper() for name, level in section.items()}
        if verbose:
            levels.update(dict.fromkeys(CORSFLY_LOGGERS, "DEBUG"))

        fmt = str(config.get("corsfly.logging.format", "console")).lower()
        if fmt not in _FORMATS:
            raise ValueError(f"corsfly.logging.format must be one of {_FORMATS}, got '{fmt}'")

        _level_number(root_level)
        for level in levels.values():
            _level_number(level)
        return cls(root_level=root_level, format=fmt, levels=levels)


def configure_logging(config: Config, verbose: bool = False) -> LoggingSettings:
    """Route structlog through stdlib logging on stderr.

    stdout stays free for command output. ``verbose`` forces the corsfly
    loggers to DEBUG on top of whatever the config says.

    Raises:
        ValueError: unknown format or level name in the config.
    """
    settings = LoggingSettings.from_config(config, verbose=verbose)

    renderer: structlog.types.Processor
    if settings.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=_level_number(settings.root_level),
        force=True,
    )
    for name, level in settings.levels.items():
        logging.getLogger(name).setLevel(_level_number(level))
    return settings
