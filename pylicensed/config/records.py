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

"""Ignored and reviewed dependency records.

Records live in configuration files under the ``ignored`` and ``reviewed``
keys, bucketed by source type:

    reviewed:
      npm:
        - left-pad            # any version
        - "@scope/pkg@1.2.0"  # only version 1.2.0
      bundler:
        - name: rails
          version: 7.1.0

String entries use "name@version" when pinned to a version. The version is
split off at the last "@" that is not the first character, so scoped npm
package names keep their leading "@".
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = [
    "Dependency",
    "DependencyRecord",
    "as_record",
    "format_entry",
    "parse_entry",
]


@dataclass(frozen=True)
class DependencyRecord:
    """A dependency identified by source type, name and optional version.

    Attributes:
        type: Source type (e.g., "npm").
        name: Package name.
        version: Package version. None matches any version.
    """

    type: str
    name: str
    version: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DependencyRecord:
        """Build a record from a mapping with type, name and version keys."""
        version = data.get("version")
        return cls(
            type=str(data.get("type") or ""),
            name=str(data.get("name") or ""),
            version=str(version) if version not in (None, "") else None,
        )

    def matches(self, other: DependencyRecord) -> bool:
        """Return True if this stored record covers the other dependency.

        Type and name must be equal. The version must be equal only when
        this record specifies one.
        """
        if self.type != other.type or self.name != other.name:
            return False
        return self.version is None or self.version == other.version

    def without_version(self) -> DependencyRecord:
        return DependencyRecord(self.type, self.name)


Dependency = DependencyRecord | Mapping[str, Any]


def as_record(dependency: Dependency) -> DependencyRecord:
    """Normalize a record or mapping to a DependencyRecord."""
    if isinstance(dependency, DependencyRecord):
        return dependency
    return DependencyRecord.from_mapping(dependency)


def parse_entry(source_type: str, entry: Any) -> DependencyRecord | None:
    """Parse one stored entry from a type bucket.

    Args:
        source_type: The bucket the entry was found in.
        entry: A "name", "name@version" string or a name/version mapping.

    Returns:
        The parsed record, or None for entries that name nothing.
    """
    if isinstance(entry, Mapping):
        version = entry.get("version")
        name = str(entry.get("name") or "")
        if not name:
            return None
        return DependencyRecord(
            source_type, name, str(version) if version not in (None, "") else None
        )

    if entry is None:
        return None
    text = str(entry)
    if not text:
        return None

    at = text.rfind("@")
    if at > 0:
        name, version = text[:at], text[at + 1 :]
        return DependencyRecord(source_type, name, version or None)
    return DependencyRecord(source_type, text)


def format_entry(record: DependencyRecord) -> str:
    """Format a record as a stored string entry."""
    if record.version is None:
        return record.name
    return f"{record.name}@{record.version}"
