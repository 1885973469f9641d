"""Shared pytest fixtures for kitchen_patterns tests."""

import pytest
from loguru import logger

from kitchen_patterns.builder import OrderBuilder
from kitchen_patterns.config import get_settings
from kitchen_patterns.decorator import Coffee
from kitchen_patterns.singleton import registry


@pytest.fixture(autouse=True)
def fresh_registry():
    """Start every test without any shared instances."""
    registry.reset()
    yield
    registry.reset()


@pytest.fixture(autouse=True)
def quiet_logger():
    """Drop any sinks a test configured (they may point at captured streams)."""
    yield
    logger.remove()


@pytest.fixture
def fresh_settings():
    """Clear the cached Settings so env overrides take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def builder() -> OrderBuilder:
    """Create an empty order builder."""
    return OrderBuilder()


@pytest.fixture
def coffee() -> Coffee:
    """Create an undecorated coffee."""
    return Coffee()
