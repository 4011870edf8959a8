from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest


def pytest_configure() -> None:
    """
    Ensure the repo root is on sys.path so tests can import `framefilters`
    without requiring an editable install.
    """
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def solid_image():
    """64x64 BGR image of a single color."""
    image = np.zeros((64, 64, 3), dtype=np.uint8)
    image[...] = (40, 120, 200)
    return image


@pytest.fixture
def pattern_image():
    """48x64 BGR image with edges in every channel."""
    rng = np.random.default_rng(7)
    image = np.zeros((48, 64, 3), dtype=np.uint8)
    image[10:30, 12:40, 0] = 230
    image[20:44, 30:60, 1] = 200
    image[5:15, 5:60, 2] = 180
    image += rng.integers(0, 20, size=image.shape, dtype=np.uint8)
    return image
