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

"""Configuration objects for license scanning.

A Configuration describes one scanned project (an "app"): where its sources
live, where cached license data goes, which dependencies are ignored or
reviewed, which licenses are allowed, and which dependency sources are
enabled.

Apps:
    A root configuration may list sub-projects under ``apps``. Every other
    top-level key of the root except ``name`` acts as a default for each app
    entry; the entry's own values always win (see ConfigDocument.merge). An
    app without a name is called "licensed". An app that inherits its cache
    path gets its name appended so sibling apps never share a cache
    directory:

        cache_path: vendor/licenses
        apps:
          - name: api
            source_path: services/api     # cache: vendor/licenses/api
          - name: web
            source_path: web
            cache_path: web/.licenses      # cache: web/.licenses

    Each app is built from deep copies, so changing one app's records is
    never visible in a sibling or in the root configuration.

Root Resolution:
    The project root is the base for all relative paths. In order:

    1. ``root: <path>`` resolved against the configuration file's directory
    2. ``root: true`` meaning the configuration file's directory
    3. The enclosing git repository's top-level directory
    4. The current working directory

Source Enablement:
    ``sources`` maps source types to booleans. If it is empty every source is
    enabled. If any entry is true, only the entries set to true are enabled.
    Otherwise every source not set to false is enabled. A mapping such as
    ``{npm: true, bundler: false}`` therefore enables npm alone.

Example:
    ```python
    from pathlib import Path
    from pylicensed.config import Configuration

    config = Configuration.load_from(Path("."))
    for app in config.apps:
        if app.is_enabled("npm"):
            print(app.name, app.source_path, app.cache_path)
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pylicensed.config.document import ConfigDocument, coerce_bool
from pylicensed.config.records import (
    Dependency,
    as_record,
    format_entry,
    parse_entry,
)
from pylicensed.exceptions import LoadError
from pylicensed.git import repository_root
from pylicensed.logging import get_global_logger
from pylicensed.sources import SourceRegistry, default_registry

__all__ = [
    "AppConfiguration",
    "Configuration",
    "DEFAULT_APP_NAME",
    "DEFAULT_CACHE_PATH",
]

DEFAULT_CACHE_PATH = ".licenses"
DEFAULT_APP_NAME = "licensed"


class AppConfiguration:
    """Configuration for a single scanned project.

    Attributes:
        document: The underlying configuration values.
        config_path: The file the configuration was loaded from, if any.
        registry: Known source types, consulted by is_enabled().
    """

    LoadError = LoadError

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        config_path: Path | None = None,
        registry: SourceRegistry | None = None,
    ) -> None:
        self.document = ConfigDocument(options or {}).copy()
        self.config_path = config_path
        self.registry = registry if registry is not None else default_registry()
        self._root: Path | None = None

        # Reserved keys left empty in the file (e.g. "sources:") take defaults.
        defaults = self._default_options()
        self._defaults = {
            k: v for k, v in defaults.items() if self.document.get(k) is None
        }
        for key in self._defaults:
            self.document.pop(key, None)
        self.document.merge(defaults)
        self._warn_unknown_sources()

    def _default_options(self) -> dict[str, Any]:
        return {
            "name": DEFAULT_APP_NAME,
            "sources": {},
            "ignored": {},
            "reviewed": {},
            "allowed": [],
        }

    def _mark_derived(self, values: Mapping[str, Any]) -> None:
        """Record values that were inherited or computed, not configured."""
        self._defaults.update(values)

    def _warn_unknown_sources(self) -> None:
        logger = get_global_logger()
        for source_type in self.document.get_map("sources"):
            if source_type not in self.registry:
                logger.warning(
                    "CONFIG", f"Unknown source type in 'sources': {source_type!r}"
                )

    # Item access

    def __getitem__(self, key: str) -> Any:
        return self.document[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.document[key] = value
        if key == "root":
            self._root = None

    def __contains__(self, key: object) -> bool:
        return key in self.document

    def get(self, key: str, default: Any = None) -> Any:
        return self.document.get(key, default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    # Paths

    @property
    def name(self) -> str:
        return self.document.get_string("name") or DEFAULT_APP_NAME

    @property
    def root(self) -> Path:
        """Absolute project root; computed once and cached."""
        if self._root is None:
            self._root = self._resolve_root()
        return self._root

    def _resolve_root(self) -> Path:
        logger = get_global_logger()
        value = self.document.get("root")
        base = self.config_path.parent if self.config_path else Path.cwd()

        if isinstance(value, bool):
            if value:
                logger.verbose("CONFIG", f"Root set to configuration directory: {base}")
                return base.resolve()
        elif isinstance(value, str) and value:
            return (base / value).resolve()

        git_root = repository_root()
        if git_root is not None:
            logger.verbose("CONFIG", f"Root set to git repository: {git_root}")
            return git_root.resolve()

        logger.verbose("CONFIG", "Root set to current working directory")
        return Path.cwd()

    @property
    def source_path(self) -> Path:
        """Directory to scan; relative values are resolved against root."""
        value = self.document.get_string("source_path")
        if not value:
            return Path.cwd()
        return (self.root / value).resolve()

    @property
    def cache_path(self) -> Path:
        """Directory for cached license data; defaults to root/.licenses."""
        value = self.document.get_string("cache_path") or DEFAULT_CACHE_PATH
        return (self.root / value).resolve()

    # Apps

    @property
    def apps(self) -> list[AppConfiguration]:
        return [self]

    # Ignored and reviewed dependencies

    def ignore(self, dependency: Dependency, *, at_version: bool = False) -> None:
        """Mark a dependency as ignored.

        Args:
            dependency: DependencyRecord or mapping with type, name and
                optional version.
            at_version: If True, only the dependency's current version is
                ignored. Otherwise every version is.
        """
        self._add_record("ignored", dependency, at_version)

    def is_ignored(self, dependency: Dependency) -> bool:
        return self._has_record("ignored", dependency)

    def review(self, dependency: Dependency, *, at_version: bool = False) -> None:
        """Mark a dependency as reviewed. See ignore() for arguments."""
        self._add_record("reviewed", dependency, at_version)

    def is_reviewed(self, dependency: Dependency) -> bool:
        return self._has_record("reviewed", dependency)

    def _records(self, key: str) -> ConfigDocument:
        records = self.document.get(key)
        if not isinstance(records, ConfigDocument):
            self.document[key] = {}
            records = self.document[key]
        return records

    def _add_record(self, key: str, dependency: Dependency, at_version: bool) -> None:
        record = as_record(dependency)
        if not record.type or not record.name:
            raise ValueError(f"Dependency must have a type and a name: {dependency!r}")
        if not at_version:
            record = record.without_version()

        records = self._records(key)
        bucket = records.get(record.type)
        if not isinstance(bucket, list):
            records[record.type] = records.get_list(record.type)
            bucket = records[record.type]

        if any(parse_entry(record.type, entry) == record for entry in bucket):
            return
        bucket.append(format_entry(record))

    def _has_record(self, key: str, dependency: Dependency) -> bool:
        record = as_record(dependency)
        bucket = self.document.get_map(key).get_list(record.type)
        for entry in bucket:
            stored = parse_entry(record.type, entry)
            if stored is not None and stored.matches(record):
                return True
        return False

    # Allowed licenses

    def allow(self, license_id: str) -> None:
        """Add a license identifier to the allowed set."""
        allowed = self.document.get("allowed")
        if not isinstance(allowed, list):
            self.document["allowed"] = self.document.get_list("allowed")
            allowed = self.document["allowed"]
        if license_id not in allowed:
            allowed.append(license_id)

    def is_allowed(self, license_id: str) -> bool:
        return license_id in self.document.get_list("allowed")

    # Sources

    def is_enabled(self, source_type: str) -> bool:
        """Return True if the source type should be used for this app.

        Args:
            source_type: Source type name (e.g., "npm").

        Returns:
            False for source types unknown to the registry. Otherwise the
                result of the sources policy described in the module docstring.
        """
        if source_type not in self.registry:
            get_global_logger().debug(
                "SOURCES", f"Source type {source_type!r} is not registered"
            )
            return False

        sources = self.document.get_map("sources")
        if not sources:
            return True
        if any(coerce_bool(value) for value in sources.values()):
            return sources.get_bool(source_type, default=False)
        return sources.get_bool(source_type, default=True)

    def enabled_source_types(self) -> list[str]:
        """Return the registered source types enabled for this app."""
        return [t for t in self.registry if self.is_enabled(t)]

    # Persistence

    def to_dict(self) -> dict[str, Any]:
        """Return the configuration as plain data for writing back.

        Built-in defaults that were never set or changed are left out.
        """
        data = self.document.to_dict()
        for key, value in self._defaults.items():
            if key in data and data[key] == value:
                del data[key]
        return data

    def write(self, path: Path | None = None) -> Path:
        """Write the configuration to path or to the file it was loaded from.

        Returns:
            The path written.

        Raises:
            LoadError: If no path is given and the configuration was not
                loaded from a file, or the file type is not supported.
        """
        from pylicensed.config.loader import dump_config

        target = path or self.config_path
        if target is None:
            raise LoadError("No configuration file to write to")
        dump_config(self.to_dict(), target)
        return target


class Configuration(AppConfiguration):
    """Root configuration, optionally expanded into several apps.

    Example:
        ```python
        config = Configuration({
            "cache_path": "vendor/cache",
            "apps": [{"name": "app1", "source_path": "app1"}],
        })
        config.apps[0].cache_path  # <root>/vendor/cache/app1
        ```
    """

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        config_path: Path | None = None,
        registry: SourceRegistry | None = None,
    ) -> None:
        options = dict(options or {})
        entries = options.pop("apps", None)
        super().__init__(options, config_path=config_path, registry=registry)

        self._apps: list[AppConfiguration] = []
        if entries is not None:
            self._apps = self._expand_apps(entries, ConfigDocument(options))

    @classmethod
    def load_from(
        cls, path: Path | str | None = None, *, registry: SourceRegistry | None = None
    ) -> Configuration:
        """Load a configuration from a file or directory. See loader.load_from."""
        from pylicensed.config.loader import load_from

        return load_from(path, registry=registry)

    def _default_options(self) -> dict[str, Any]:
        options = super()._default_options()
        options["name"] = Path.cwd().name
        return options

    def _expand_apps(
        self, entries: Any, inherited: ConfigDocument
    ) -> list[AppConfiguration]:
        """Build one AppConfiguration per entry of the apps list.

        Raises:
            LoadError: If apps is not a list, an entry is not a mapping, or an
                app has no source_path after inheriting the defaults.
        """
        logger = get_global_logger()
        if not isinstance(entries, list):
            raise LoadError(f"'apps' must be a list, got {type(entries).__name__}")

        defaults = inherited.copy()
        defaults.pop("name", None)
        defaults["root"] = str(self.root)

        logger.verbose("CONFIG", f"Expanding {len(entries)} app(s)")
        apps: list[AppConfiguration] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, Mapping):
                raise LoadError(
                    f"App entry {index} must be a mapping, got {type(entry).__name__}"
                )
            app = ConfigDocument(entry).copy()
            own_cache_path = bool(app.get_string("cache_path"))
            app.merge(defaults)

            name = app.get_string("name") or DEFAULT_APP_NAME
            app["name"] = name
            if not own_cache_path:
                base = app.get_string("cache_path") or DEFAULT_CACHE_PATH
                app["cache_path"] = str(Path(base) / name)

            if not app.get_string("source_path"):
                raise LoadError(f"App {name!r} is missing required key 'source_path'")

            logger.debug("CONFIG", f"App {name!r}: {app.to_dict()}")
            config = AppConfiguration(
                app, config_path=self.config_path, registry=self.registry
            )
            config._mark_derived(
                {k: v for k, v in app.to_dict().items() if k not in entry}
            )
            apps.append(config)
        return apps

    @property
    def apps(self) -> list[AppConfiguration]:
        """Expanded app configurations, or [self] when no apps are listed."""
        if not self._apps:
            return [self]
        return list(self._apps)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self._apps:
            data["apps"] = [app.to_dict() for app in self._apps]
        return data
