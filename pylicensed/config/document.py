# Copyright 2025 Roger Cibrian
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

"""Configuration documents.

A ConfigDocument is an ordered mapping from string keys to JSON-like values:
strings, booleans, numbers, None, lists of values, and nested documents.
Nested mappings are always ConfigDocuments (including mappings inside lists),
so accessors can traverse dotted paths.

Typed Access:
    The typed accessors never fail on a missing key. They return a documented
    default instead and coerce present values permissively:

    - get_string: "" by default; booleans become "true"/"false"
    - get_bool: False by default; "false", "no", "off", "0" and "" are False,
        any other string is True
    - get_list: [] by default; a scalar value becomes a one-element list
    - get_map: an empty document by default

Merge Behavior:
    merge() fills gaps and never overwrites:

    - **Key absent in target**: a deep copy of the source value is added
    - **Both values are mappings**: merged recursively
    - **Anything else** (lists included): the target value is kept

    This is how defaults cascade down to apps while app-level settings always
    win. Merging the same source twice is the same as merging it once.

Example:
    ```python
    from pylicensed.config.document import ConfigDocument

    app = ConfigDocument({"name": "app1", "sources": {"npm": True}})
    defaults = ConfigDocument({"name": "root", "sources": {"bundler": False}})
    app.merge(defaults)
    app["name"]               # "app1"
    app.lookup("sources.bundler")  # False
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from jsonpath_ng import parse as jsonpath_parse

__all__ = ["ConfigDocument"]

_FALSE_STRINGS = frozenset({"", "false", "no", "off", "0"})


def _wrap(value: Any) -> Any:
    """Convert nested mappings to ConfigDocuments."""
    if isinstance(value, ConfigDocument):
        return value
    if isinstance(value, Mapping):
        return ConfigDocument(value)
    if isinstance(value, (list, tuple)):
        return [_wrap(item) for item in value]
    return value


def _unwrap(value: Any) -> Any:
    """Convert a value to plain dicts and lists (always new containers)."""
    if isinstance(value, Mapping):
        return {str(k): _unwrap(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_unwrap(item) for item in value]
    return value


def _detach(value: Any) -> Any:
    """Return a deep copy of value that shares no containers with it."""
    return _wrap(_unwrap(value))


def coerce_bool(value: Any, default: bool = False) -> bool:
    """Interpret a configuration value as a boolean.

    Args:
        value: Any JSON-like value.
        default: Returned when value is None.

    Returns:
        The boolean reading of value.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    if isinstance(value, (int, float)):
        return value != 0
    return bool(value)


class ConfigDocument(MutableMapping[str, Any]):
    """Ordered, mutable mapping of configuration values.

    Keys are stored as strings. Assigned mappings are converted to
    ConfigDocuments; the document itself never holds plain dicts.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = {}
        if data:
            for key, value in data.items():
                self[key] = value

    # Mapping protocol

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[str(key)] = _wrap(value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigDocument({self._data!r})"

    def set(self, key: str, value: Any) -> None:
        """Set key to value, converting nested mappings."""
        self[key] = value

    # Typed accessors

    def get_string(self, key: str, default: str = "") -> str:
        """Return the value of key as a string."""
        value = self._data.get(key)
        if value is None:
            return default
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return the value of key as a boolean."""
        return coerce_bool(self._data.get(key), default)

    def get_list(self, key: str) -> list[Any]:
        """Return the value of key as a list.

        A list value is returned as-is, so appending to it changes the
        document. A scalar value is returned wrapped in a new list.
        """
        value = self._data.get(key)
        if value is None:
            return []
        if isinstance(value, list):
            return value
        return [value]

    def get_map(self, key: str) -> ConfigDocument:
        """Return the value of key as a document.

        A present document is returned as-is. If the key is absent or holds
        a non-mapping value, a new empty document (not attached) is returned.
        """
        value = self._data.get(key)
        if isinstance(value, ConfigDocument):
            return value
        return ConfigDocument()

    def lookup(self, path: str, default: Any = None) -> Any:
        """Return the value at a dotted path such as "sources.npm".

        Args:
            path: JSONPath expression; plain dotted keys and list indexes
                (e.g., "apps[0].name") are supported.
            default: Value returned when nothing matches.

        Returns:
            The first matching value, or default.

        Raises:
            ValueError: If path is not a valid expression.
        """
        # jsonpath-ng raises JsonPathLexerError or a bare Exception on bad syntax.
        try:
            expression = jsonpath_parse(path)
        except Exception as err:
            raise ValueError(f"Invalid configuration path {path!r}: {err}") from err
        matches = expression.find(self)
        if not matches:
            return default
        return matches[0].value

    # Merging

    def merge(self, source: Mapping[str, Any]) -> None:
        """Fill keys missing from this document with values from source.

        Existing keys are never overwritten. When both sides hold a mapping
        for the same key, the mappings are merged recursively. Values copied
        from source are deep copies.

        Args:
            source: Document or mapping supplying default values.
        """
        for key, value in source.items():
            key = str(key)
            if key not in self._data:
                self._data[key] = _detach(value)
                continue
            current = self._data[key]
            if isinstance(current, ConfigDocument) and isinstance(value, Mapping):
                current.merge(value)

    def merged(self, source: Mapping[str, Any]) -> ConfigDocument:
        """Return a copy of this document with source merged into it."""
        result = self.copy()
        result.merge(source)
        return result

    def copy(self) -> ConfigDocument:
        """Return a deep copy of this document."""
        return ConfigDocument(self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        """Return the document as plain dicts and lists."""
        return _unwrap(self)
