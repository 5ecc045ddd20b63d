"""Shared fixtures. Run pytest from the project root; pyproject.toml puts src/ on the path."""

from unittest.mock import MagicMock

import pytest

from variant_registry.domain.registry import StrategyRegistry
from variant_registry.domain.variants import BUILTIN_FACTORIES


@pytest.fixture
def registry() -> StrategyRegistry:
    """An empty registry."""
    return StrategyRegistry()


@pytest.fixture
def builtin_registry() -> StrategyRegistry:
    """A registry holding every built-in kind."""
    reg = StrategyRegistry()
    for key, factory in BUILTIN_FACTORIES.items():
        reg.register(key, factory)
    return reg


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()
