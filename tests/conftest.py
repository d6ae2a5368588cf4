"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from memory_cache.cache.clock import ManualClock
from memory_cache.cache.store import Cache
from memory_cache.protocol.parser import ProtocolParser
from memory_cache.shell import CacheShell


# ============================================================================
# Cache Fixtures
# ============================================================================

@pytest.fixture
def clock() -> ManualClock:
    """A clock that only moves when a test advances it, starting at t=1000."""
    return ManualClock(start=1000.0)


@pytest.fixture
def cache(clock: ManualClock) -> Cache:
    """Create a fresh Cache driven by the manual clock (default TTL 30s)."""
    return Cache(clock=clock, default_ttl=30)


# ============================================================================
# Protocol Fixtures
# ============================================================================

@pytest.fixture
def parser() -> ProtocolParser:
    """Create a ProtocolParser instance."""
    return ProtocolParser()


# ============================================================================
# Shell Fixtures
# ============================================================================

@pytest.fixture
def shell(cache: Cache) -> CacheShell:
    """Create a CacheShell over the manual-clock cache, with no prompt."""
    return CacheShell(cache)


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
