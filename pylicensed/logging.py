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

"""Output for configuration loading.

Loading a configuration reports what it did through a process-wide logger:
which file was found, how the project root was chosen, which apps were
expanded, and which source types look misspelled. Messages carry a short
prefix naming the area they come from ("CONFIG", "GIT" or "SOURCES") and are
printed as ``[PREFIX] message``.

Nothing is printed until a front end installs a logger, so importing and
using pylicensed as a library stays quiet.

Example:
    ```python
    from pylicensed import load_from
    from pylicensed.logging import get_logger, set_global_logger

    set_global_logger(get_logger(verbose=True))
    load_from()
    # [CONFIG] Loading configuration: /work/.licensed.yml
    # [CONFIG] Root set to git repository: /work
    ```
"""

from __future__ import annotations

from typing import Protocol


class Logger(Protocol):
    """What configuration code needs from a logger.

    verbose() traces normal progress, debug() dumps decoded values and git
    failures, warning() flags configuration that is probably a mistake.
    """

    def verbose(self, prefix: str, message: str) -> None: ...

    def debug(self, prefix: str, message: str) -> None: ...

    def warning(self, prefix: str, message: str) -> None: ...


class DefaultLogger:
    """Prints to stdout. Warnings always show; the rest depends on flags."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        # Debug output is a superset of verbose output.
        self._verbose = verbose or debug
        self._debug = debug

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")

    def warning(self, prefix: str, message: str) -> None:
        print(f"[{prefix}] WARNING: {message}")


class SilentLogger:
    """Discards everything. The global logger until one is installed."""

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass

    def warning(self, prefix: str, message: str) -> None:
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Return a stdout logger; debug=True also turns on verbose output."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger used by the loader, configuration and git modules."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install logger for every later configuration load in this process.

    Args:
        logger: Any object with verbose(), debug() and warning() methods,
            such as SilentLogger() to restore the quiet default.
    """
    global _global_logger
    _global_logger = logger
