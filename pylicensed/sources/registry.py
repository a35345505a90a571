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

"""Registry of known dependency source types.

Dependency sources (bundler, npm, pip, ...) enumerate the packages of a
project. The adapters themselves live outside the configuration core; all the
core needs is the set of source type names, so it can tell whether a name in
the ``sources`` mapping or passed to ``Configuration.is_enabled`` refers to a
real source.

The registry is an explicit value that is passed into a Configuration rather
than module-level state. default_registry() returns a fresh registry holding
the built-in source types; callers may register additional types on it.

Example:
    Register a custom source type:
        ```python
        from pylicensed.sources import default_registry

        registry = default_registry()
        registry.register("conda")
        config = Configuration.load_from(Path("."), registry=registry)
        config.is_enabled("conda")  # True
        ```
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["BUILTIN_SOURCE_TYPES", "SourceRegistry", "default_registry"]

BUILTIN_SOURCE_TYPES: tuple[str, ...] = (
    "bower",
    "bundler",
    "cabal",
    "composer",
    "dep",
    "git_submodule",
    "go",
    "gradle",
    "manifest",
    "mix",
    "npm",
    "nuget",
    "pip",
    "pipenv",
    "swift",
    "yarn",
)


class SourceRegistry:
    """An ordered set of source type names.

    Registering the same name twice is a no-op. Names are case-sensitive and
    match the keys used under ``sources`` in configuration files.
    """

    def __init__(self, source_types: Iterable[str] = ()) -> None:
        self._types: dict[str, None] = {}
        for source_type in source_types:
            self.register(source_type)

    def register(self, source_type: str) -> None:
        """Add a source type to the registry.

        Args:
            source_type: Source type name (e.g., "npm").

        Raises:
            ValueError: If source_type is empty.
        """
        if not source_type:
            raise ValueError("source type name must not be empty")
        self._types[source_type] = None

    def __contains__(self, source_type: object) -> bool:
        return source_type in self._types

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._types))

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        return f"SourceRegistry({list(self._types)!r})"


def default_registry() -> SourceRegistry:
    """Return a new registry populated with the built-in source types."""
    return SourceRegistry(BUILTIN_SOURCE_TYPES)
