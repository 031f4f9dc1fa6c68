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
"""'corsfly check' — evaluate the configured policy against a sample request."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from corsfly.cli.console import console
from corsfly.config.properties import CORSProperties
from corsfly.core.config import Config
from corsfly.cors import CORSRequest, cors
from corsfly.logging import configure_logging


def _load_config(config_path: Path | None, profiles: list[str]) -> Config:
    if config_path is None:
        return Config.from_sources(Path.cwd(), active_profiles=profiles)
    if not config_path.is_file():
        raise click.BadParameter(f"{config_path} does not exist", param_hint="--config")
    return Config.from_file(config_path, active_profiles=profiles)


def _parse_header(raw: str) -> tuple[str, str]:
    name, sep, value = raw.partition(":")
    if not sep or not name.strip():
        raise click.BadParameter(f"expected 'Name: value', got {raw!r}", param_hint="--header")
    return name.strip(), value.strip()


@click.command()
@click.option("--method", "-X", default="GET", show_default=True, help="HTTP method of the sample request.")
@click.option("--origin", "-o", default=None, help="Origin header of the sample request.")
@click.option("--request-headers", default=None, help="Access-Control-Request-Headers value.")
@click.option("--header", "-H", "extra_headers", multiple=True, help="Extra request header, 'Name: value'.")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (defaults to corsfly.yaml/.toml in the current directory).",
)
@click.option("--profile", "-p", "profiles", multiple=True, help="Active config profile (repeatable).")
@click.option("--verbose", "-v", is_flag=True, help="Log every origin decision.")
def check_command(
    method: str,
    origin: str | None,
    request_headers: str | None,
    extra_headers: tuple[str, ...],
    config_path: Path | None,
    profiles: tuple[str, ...],
    verbose: bool,
) -> None:
    """Show the CORS headers the configured policy produces for a request."""
    try:
        config = _load_config(config_path, list(profiles))
        properties = config.bind(CORSProperties)
        configure_logging(config, verbose=verbose)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    headers = [_parse_header(raw) for raw in extra_headers]
    if origin is not None:
        headers.append(("Origin", origin))
    if request_headers is not None:
        headers.append(("Access-Control-Request-Headers", request_headers))

    result = cors(CORSRequest(method=method, headers=headers), properties.to_options())

    kind = "preflight" if result.is_preflight else "actual"
    console.print(f"\n[corsfly]{method.upper()}[/corsfly] [dim]({kind} request, origin: {origin or 'none'})[/dim]\n")

    if not len(result.headers):
        console.print("  [warning]CORS disabled[/warning]: no headers produced\n")
        return

    table = Table(title="Response Headers", border_style="dim")
    table.add_column("Header", style="info")
    table.add_column("Value")
    for name, value in result.headers.items():
        table.add_row(name, value)
    console.print(table)
    console.print()
