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

"""Configuration file loading for pylicensed.

This module turns a path argument into a Configuration:

1. Resolve the path to a configuration file (find_config_file)
2. Decode the file to a mapping, or use {} if no file was found
3. Build the root Configuration, expanding any ``apps`` entries

Path Resolution:
    - An existing file is used as-is (made absolute)
    - An existing directory is searched for, in order:
      ``.licensed.yml``, ``.licensed.yaml``, ``.licensed.json``
    - No argument means the current working directory
    - A directory without a configuration file is NOT an error; all defaults
      apply

File Formats:
    The format is chosen by extension: ``.yml`` and ``.yaml`` are read with
    PyYAML (safe loader), ``.json`` with the standard json module. Any other
    extension is rejected before the file is read.

Error Handling:
    - LoadError: unknown extension, missing explicit path, parse errors, a
        top-level value that is not a mapping, or an invalid app entry
    - All errors are chained with "from err" for better debugging

Example:
    ```python
    from pathlib import Path
    from pylicensed.config import load_from

    config = load_from(Path("."))
    print(config.name, config.cache_path)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import json
from pathlib import Path
from typing import Any

import yaml

from pylicensed.config.configuration import Configuration
from pylicensed.exceptions import LoadError
from pylicensed.logging import get_global_logger
from pylicensed.sources import SourceRegistry

__all__ = [
    "DEFAULT_CONFIG_FILES",
    "dump_config",
    "find_config_file",
    "load_config_file",
    "load_from",
]

DEFAULT_CONFIG_FILES: tuple[str, ...] = (
    ".licensed.yml",
    ".licensed.yaml",
    ".licensed.json",
)

# -------------------------------
# Decoders
# -------------------------------


def _decode_yaml(text: str) -> Any:
    return yaml.safe_load(text)


def _decode_json(text: str) -> Any:
    return json.loads(text)


_DECODERS: dict[str, Callable[[str], Any]] = {
    ".yml": _decode_yaml,
    ".yaml": _decode_yaml,
    ".json": _decode_json,
}


def _decoder_for(path: Path) -> Callable[[str], Any]:
    decoder = _DECODERS.get(path.suffix.lower())
    if decoder is None:
        raise LoadError(f"Unknown file type {path.suffix!r} for {path}")
    return decoder


# -------------------------------
# Path resolution
# -------------------------------


def find_config_file(path: Path | str | None = None) -> Path | None:
    """Resolve a path argument to the configuration file to load.

    Args:
        path: A configuration file or a directory to search. Defaults to the
            current working directory.

    Returns:
        Absolute path of the configuration file, or None if path is a
            directory containing none of DEFAULT_CONFIG_FILES.

    Raises:
        LoadError: If path does not exist.
    """
    candidate = Path(path) if path is not None else Path.cwd()
    candidate = candidate.resolve()

    if candidate.is_dir():
        for filename in DEFAULT_CONFIG_FILES:
            config_file = candidate / filename
            if config_file.is_file():
                return config_file
        return None

    if candidate.is_file():
        return candidate

    raise LoadError(f"Configuration file not found: {candidate}")


# -------------------------------
# Reading and writing
# -------------------------------


def load_config_file(path: Path) -> dict[str, Any]:
    """Decode a configuration file to a mapping.

    An empty file decodes to an empty mapping.

    Raises:
        LoadError: On an unknown extension, read or parse errors, or a
            top-level value that is not a mapping.
    """
    decoder = _decoder_for(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise LoadError(f"Failed to read configuration file {path}: {err}") from err

    try:
        data = decoder(text)
    except (yaml.YAMLError, json.JSONDecodeError) as err:
        raise LoadError(f"Error parsing configuration file {path}: {err}") from err

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise LoadError(
            f"Top-level value must be a mapping, got {type(data).__name__}: {path}"
        )
    return dict(data)


def dump_config(data: Mapping[str, Any], path: Path) -> None:
    """Write configuration data to a YAML or JSON file.

    Parent directories are created if needed. Key order is preserved.

    Raises:
        LoadError: On an unknown extension or a write failure.
    """
    suffix = path.suffix.lower()
    if suffix in (".yml", ".yaml"):
        text = yaml.safe_dump(dict(data), default_flow_style=False, sort_keys=False)
    elif suffix == ".json":
        text = json.dumps(data, indent=2) + "\n"
    else:
        raise LoadError(f"Unknown file type {path.suffix!r} for {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as err:
        raise LoadError(f"Failed to write configuration file {path}: {err}") from err

    get_global_logger().verbose("CONFIG", f"Wrote configuration: {path}")


# -------------------------------
# Verbose helpers
# -------------------------------


def _print_yaml_content(data: Mapping[str, Any], indent: int = 0) -> None:
    """Print decoded content in debug mode."""
    logger = get_global_logger()
    yaml_str = yaml.safe_dump(dict(data), default_flow_style=False, sort_keys=False)
    for line in yaml_str.split("\n"):
        if line.strip():
            logger.debug("CONFIG", " " * indent + line)


# -------------------------------
# Public API
# -------------------------------


def load_from(
    path: Path | str | None = None,
    *,
    registry: SourceRegistry | None = None,
) -> Configuration:
    """Load the configuration for a file or directory.

    Args:
        path: Configuration file or directory to search. Defaults to the
            current working directory.
        registry: Known source types. Defaults to the built-in source types.

    Returns:
        The root Configuration. Its apps property lists one configuration per
            app entry, or the root itself when there are none.

    Raises:
        LoadError: See module docstring.
    """
    logger = get_global_logger()

    config_file = find_config_file(path)
    if config_file is None:
        logger.verbose("CONFIG", f"No configuration file found in {path or '.'}")
        data: dict[str, Any] = {}
    else:
        logger.verbose("CONFIG", f"Loading configuration: {config_file}")
        data = load_config_file(config_file)
        logger.debug("CONFIG", f"--- Content from {config_file.name} ---")
        _print_yaml_content(data)

    config = Configuration(data, config_path=config_file, registry=registry)
    logger.verbose(
        "CONFIG", f"Loaded {config.name!r} with {len(config.apps)} app(s)"
    )
    return config
