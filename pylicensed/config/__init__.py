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

"""Configuration loading and management for pylicensed.

This package loads YAML or JSON configuration files describing how to scan
one or more projects ("apps") for dependency licenses:

  - PathResolver: find_config_file locates .licensed.yml/.yaml/.json
  - ConfigDocument: ordered mapping with typed accessors and a gap-filling
    merge used for defaults and app inheritance
  - Configuration: root, cache and source paths, ignored/reviewed/allowed
    records and source enablement, expanded into apps

Example:
    Basic usage:
        ```python
        from pathlib import Path
        from pylicensed.config import load_from

        config = load_from(Path("."))
        for app in config.apps:
            print(app.name, app.cache_path)
        ```
"""

from .configuration import (
    DEFAULT_APP_NAME,
    DEFAULT_CACHE_PATH,
    AppConfiguration,
    Configuration,
)
from .document import ConfigDocument
from .loader import (
    DEFAULT_CONFIG_FILES,
    dump_config,
    find_config_file,
    load_config_file,
    load_from,
)
from .records import DependencyRecord

__all__ = [
    "AppConfiguration",
    "ConfigDocument",
    "Configuration",
    "DEFAULT_APP_NAME",
    "DEFAULT_CACHE_PATH",
    "DEFAULT_CONFIG_FILES",
    "DependencyRecord",
    "dump_config",
    "find_config_file",
    "load_config_file",
    "load_from",
]
