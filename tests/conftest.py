"""
Pytest configuration and fixtures for PyFastNoise test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, description in (
        ("unit", "fast tests of a single module"),
        ("integration", "tests combining several modules"),
        ("importtest", "module import smoke tests"),
        ("slow", "tests sampling many coordinates"),
    ):
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Property sweeps over many samples
        if "property" in item.name.lower() or "statistics" in item.name.lower():
            item.add_marker("slow")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture
def default_config():
    """Fresh NoiseConfig with library defaults."""
    from pyfastnoise.noise import NoiseConfig
    return NoiseConfig()


@pytest.fixture(scope="session")
def sample_points_2d():
    """Provide reproducible 2D sample coordinates, including negatives."""
    rng = np.random.default_rng(42)
    return rng.uniform(-500.0, 500.0, size=(400, 2))


@pytest.fixture(scope="session")
def sample_points_3d():
    """Provide reproducible 3D sample coordinates, including negatives."""
    rng = np.random.default_rng(7)
    return rng.uniform(-200.0, 200.0, size=(200, 3))


class ConfigFactory:
    """Helper class for building configurations."""

    @staticmethod
    def make(noise_type=None, **kwargs):
        from pyfastnoise.noise import NoiseConfig
        config = NoiseConfig(**kwargs)
        if noise_type is not None:
            config.noise_type = noise_type
        return config

    @staticmethod
    def lattice_families():
        from pyfastnoise.enums import NoiseFamily
        return [NoiseFamily.VALUE, NoiseFamily.PERLIN, NoiseFamily.SIMPLEX, NoiseFamily.CUBIC]


@pytest.fixture
def config_factory():
    """Provide access to configuration building utilities."""
    return ConfigFactory()
