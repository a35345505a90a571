"""pylicensed - dependency license compliance configuration

pylicensed loads and merges the configuration that drives a dependency
license-compliance scan:

- YAML or JSON configuration files found by path or directory search
- Layered defaults: root settings cascade into per-app settings
- Project root discovery (explicit, configuration directory, or git)
- Cache and source path resolution per app
- Ignored, reviewed and allowed records
- Allow-list / deny-list enablement of dependency sources

Quick Start:

    from pylicensed import load_from

    config = load_from(".")
    for app in config.apps:
        print(app.name, app.source_path, app.cache_path)

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Configuration core for dependency license compliance scans"

from pylicensed.config import (
    AppConfiguration,
    ConfigDocument,
    Configuration,
    DependencyRecord,
    load_from,
)
from pylicensed.exceptions import LicensedError, LoadError
from pylicensed.sources import SourceRegistry, default_registry

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "AppConfiguration",
    "ConfigDocument",
    "Configuration",
    "DependencyRecord",
    "LicensedError",
    "LoadError",
    "SourceRegistry",
    "default_registry",
    "load_from",
]
