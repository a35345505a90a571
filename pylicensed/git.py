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

"""Git repository queries.

The configuration core only needs one thing from version control: the
top-level working directory of the repository that contains the current
directory. It is used as the fallback project root when a configuration does
not name one.

Queries fail soft. When git is not installed, the directory is not inside a
repository, or the command fails for any other reason, None is returned and
the caller falls back to another root-determination rule.

Example:
    ```python
    from pylicensed.git import repository_root

    root = repository_root() or Path.cwd()
    ```
"""

from __future__ import annotations

from pathlib import Path
import shutil
import subprocess

from pylicensed.logging import get_global_logger

__all__ = ["repository_root"]

GIT_TIMEOUT_SECONDS = 10


def repository_root(cwd: Path | None = None) -> Path | None:
    """Return the top-level directory of the enclosing git repository.

    Args:
        cwd: Directory to query from. Defaults to the process working
            directory.

    Returns:
        Absolute path of the repository root, or None if it cannot be
            determined.
    """
    logger = get_global_logger()

    git = shutil.which("git")
    if git is None:
        logger.debug("GIT", "git executable not found on PATH")
        return None

    try:
        result = subprocess.run(
            [git, "rev-parse", "--show-toplevel"],
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except subprocess.CalledProcessError as err:
        stderr = (err.stderr or "").strip()
        logger.debug("GIT", f"Not inside a git repository: {stderr}")
        return None
    except subprocess.TimeoutExpired:
        logger.debug("GIT", "git rev-parse timed out")
        return None
    except OSError as err:
        logger.debug("GIT", f"Failed to run git: {err}")
        return None

    root = result.stdout.strip()
    if not root:
        return None

    logger.debug("GIT", f"Repository root: {root}")
    return Path(root)
