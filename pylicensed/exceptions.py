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

"""Exception hierarchy for pylicensed.

All exceptions inherit from LicensedError, allowing users to catch every
pylicensed error with a single except clause if needed.

Example:
    Catching load errors:
        ```python
        from pylicensed.config import load_from
        from pylicensed.exceptions import LoadError

        try:
            config = load_from(".licensed.yml")
        except LoadError as e:
            print(f"Configuration error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "LicensedError",
    "LoadError",
]


class LicensedError(Exception):
    """Base exception for all pylicensed errors."""

    pass


class LoadError(LicensedError):
    """Raised when a configuration cannot be loaded.

    This exception is raised when there are problems with:

    - Configuration files with an unrecognized extension
    - YAML or JSON parse errors, or a top-level value that is not a mapping
    - An explicit configuration path that does not exist
    - An app entry that is not a mapping, or that has no source_path after
        inheriting the root configuration's settings

    A LoadError aborts the whole load; no partially-valid configuration is
    returned.

    Example:
        Catching load errors:
            ```python
            from pylicensed.exceptions import LoadError

            try:
                config = Configuration.load_from(Path("."))
            except LoadError as e:
                print(f"Config error: {e}")
            ```
    """

    pass
