"""Shared fixtures for measurement module tests."""

from __future__ import annotations

import numpy as np
import pytest

from colocount.measure.mask import roi_from_mask


@pytest.fixture
def full_roi_4x4():
    """ROI covering every pixel of a 4x4 frame (16 pixels)."""
    return roi_from_mask(np.ones((4, 4), dtype=bool))


@pytest.fixture
def noisy_plane() -> np.ndarray:
    """16x16 plane: a 6x6 bright block plus one isolated bright noise pixel at (1, 1)."""
    plane = np.zeros((16, 16), dtype=np.uint8)
    plane[5:11, 5:11] = 200
    plane[1, 1] = 200
    return plane
