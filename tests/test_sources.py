"""
Tests for pylicensed.sources module.

Tests the source type registry.
"""

from __future__ import annotations

import pytest

from pylicensed.sources import BUILTIN_SOURCE_TYPES, SourceRegistry, default_registry

pytestmark = pytest.mark.unit


class TestSourceRegistry:
    """Tests for SourceRegistry."""

    def test_default_registry_has_builtin_types(self):
        registry = default_registry()

        assert list(registry) == list(BUILTIN_SOURCE_TYPES)
        assert "npm" in registry
        assert "bundler" in registry

    def test_default_registry_is_a_new_value(self):
        first = default_registry()
        second = default_registry()

        first.register("conda")

        assert "conda" in first
        assert "conda" not in second

    def test_register_is_idempotent(self):
        registry = SourceRegistry(["npm"])

        registry.register("npm")
        registry.register("pip")

        assert list(registry) == ["npm", "pip"]
        assert len(registry) == 2

    def test_names_are_case_sensitive(self):
        registry = SourceRegistry(["npm"])

        assert "NPM" not in registry

    def test_empty_name_rejected(self):
        registry = SourceRegistry()

        with pytest.raises(ValueError):
            registry.register("")
