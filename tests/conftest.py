"""
Pytest configuration and fixtures for PGA2D tests.
"""

import matplotlib
matplotlib.use("Agg")

import pytest
import torch

from pga2d.pga.primitives import Point2D


@pytest.fixture
def generator():
    """Seeded random generator for reproducible property checks."""
    return torch.Generator().manual_seed(0)


@pytest.fixture
def num_samples():
    """Default number of random samples for property tests."""
    return 50


@pytest.fixture
def triangle_ccw():
    """Right triangle (0,0), (4,0), (0,4), counter-clockwise."""
    return (Point2D(0.0, 0.0), Point2D(4.0, 0.0), Point2D(0.0, 4.0))


@pytest.fixture
def triangle_cw(triangle_ccw):
    """Same triangle with clockwise winding."""
    return tuple(reversed(triangle_ccw))


@pytest.fixture
def unit_square():
    """Unit square [0,1]^2, counter-clockwise."""
    return [
        Point2D(0.0, 0.0),
        Point2D(1.0, 0.0),
        Point2D(1.0, 1.0),
        Point2D(0.0, 1.0),
    ]


@pytest.fixture
def random_coords(generator, num_samples):
    """Random coordinates in [-5, 5]^2, shape (num_samples, 2)."""
    return torch.rand(num_samples, 2, generator=generator, dtype=torch.float64) * 10 - 5


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
