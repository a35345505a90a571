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

"""Dependency source types known to pylicensed.

Source adapters are external collaborators; this package only tracks which
source type names exist so configurations can validate the names they enable
or disable.
"""

from .registry import BUILTIN_SOURCE_TYPES, SourceRegistry, default_registry

__all__ = ["BUILTIN_SOURCE_TYPES", "SourceRegistry", "default_registry"]
