import sys
import os

import numpy as np
import pytest

# Make the shared samples module importable from every test subdirectory
tests_root = os.path.dirname(os.path.abspath(__file__))
if tests_root not in sys.path:
    sys.path.insert(0, tests_root)


@pytest.fixture
def rgb_grid():
    """Every RGB triple on a 15-step lattice, shape (N, 3), uint8."""
    axis = np.arange(0, 256, 15, dtype=np.uint8)
    r, g, b = np.meshgrid(axis, axis, axis, indexing="ij")
    return np.stack([r.ravel(), g.ravel(), b.ravel()], axis=-1)


@pytest.fixture
def all_bytes():
    return np.arange(256, dtype=np.uint8)
