"""Tests for config module."""

import pytest

from gc_retention_bench.config import DEFAULT_NUM_ELEMENTS, BenchmarkConfig


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("NUM_ELEMENTS", "TRACE_ALLOCATIONS", "TAGGER", "VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    """Test configuration defaults."""
    config = BenchmarkConfig.from_env()

    assert config.num_elements == DEFAULT_NUM_ELEMENTS == 10_000_000
    assert config.trace_allocations is False
    assert config.tagger == "none"
    assert config.verbose is False


def test_from_env(clean_env):
    """Test loading values from environment variables."""
    clean_env.setenv("NUM_ELEMENTS", "1234")
    clean_env.setenv("TRACE_ALLOCATIONS", "true")
    clean_env.setenv("TAGGER", "WeakRef")
    clean_env.setenv("VERBOSE", "1")

    config = BenchmarkConfig.from_env()

    assert config.num_elements == 1234
    assert config.trace_allocations is True
    assert config.tagger == "weakref"
    assert config.verbose is True


def test_validation():
    """Test that invalid values are rejected."""
    with pytest.raises(ValueError, match="non-negative"):
        BenchmarkConfig(num_elements=-1)
    with pytest.raises(ValueError, match="32-bit"):
        BenchmarkConfig(num_elements=2**31)
    with pytest.raises(ValueError, match="Unknown tagger"):
        BenchmarkConfig(tagger="unsafe")


def test_zero_elements_allowed():
    """Test that an empty run is a valid configuration."""
    assert BenchmarkConfig(num_elements=0).num_elements == 0
