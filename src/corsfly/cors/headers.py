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
"""Case-insensitive response header collection and directive application."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from corsfly.cors.options import HeaderDirective

VARY = "Vary"


class CORSHeaders:
    """Insertion-ordered, case-insensitive header multi-map.

    ``set`` replaces every value stored under a name, ``append`` adds one
    alongside the existing values. Reads join multiple values with ``", "``
    the way a combinable HTTP header is folded.
    """

    __slots__ = ("_names", "_values")

    def __init__(self, initial: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self._names: dict[str, str] = {}
        self._values: dict[str, list[str]] = {}
        if initial is None:
            return
        pairs = initial.items() if isinstance(initial, Mapping) else initial
        for name, value in pairs:
            self.append(name, value)

    def set(self, name: str, value: str) -> None:
        key = name.lower()
        self._names.setdefault(key, name)
        self._values[key] = [value]

    def append(self, name: str, value: str) -> None:
        key = name.lower()
        self._names.setdefault(key, name)
        self._values.setdefault(key, []).append(value)

    def get(self, name: str, default: Any = None) -> Any:
        values = self._values.get(name.lower())
        if not values:
            return default
        return ", ".join(values)

    def getlist(self, name: str) -> list[str]:
        return list(self._values.get(name.lower(), []))

    def keys(self) -> list[str]:
        return list(self._names.values())

    def items(self) -> list[tuple[str, str]]:
        return [(self._names[key], ", ".join(values)) for key, values in self._values.items()]

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())

    def __getitem__(self, name: str) -> str:
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CORSHeaders):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


def _header_value(value: Any) -> str:
    if value is True:
        return "true"
    return str(value)


def apply_directives(directives: Iterable[Any], headers: CORSHeaders) -> CORSHeaders:
    """Write *directives* into *headers*, flattening nested groups.

    ``Vary`` accumulates across directives; every other name is
    last-write-wins. Directives without a usable value are skipped so they
    never surface as empty headers.
    """
    for directive in directives:
        if directive is None:
            continue
        if not isinstance(directive, HeaderDirective):
            apply_directives(directive, headers)
            continue
        name, value = directive
        if value is None or value is False or value == "":
            continue
        if name.lower() == VARY.lower():
            headers.append(VARY, _header_value(value))
        else:
            headers.set(name, _header_value(value))
    return headers
