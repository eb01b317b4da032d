"""Shared test fixtures for colocount."""

import numpy as np
import pytest

from colocount.core.config import AnalysisSettings


@pytest.fixture
def settings() -> AnalysisSettings:
    """Three-channel settings without median filtering."""
    return AnalysisSettings(channel_names=("GFP", "RFP", "DAPI"))


@pytest.fixture
def single_frame_stack() -> np.ndarray:
    """1 frame, 4x4, channels 1 and 2 on in the top-left 2x2 block, channel 3 empty.

    Expected result over an all-on mask: pixels [4, 0, 0], percent [25, 0, 0].
    """
    stack = np.zeros((1, 4, 4, 3), dtype=np.uint8)
    stack[0, 0:2, 0:2, 0] = 200
    stack[0, 0:2, 0:2, 1] = 180
    return stack


@pytest.fixture
def two_frame_stack(single_frame_stack: np.ndarray) -> np.ndarray:
    """Frame 1 as ``single_frame_stack``; frame 2 has 8 coincident 1-2 pixels (top half)."""
    frame2 = np.zeros((1, 4, 4, 3), dtype=np.uint8)
    frame2[0, 0:2, :, 0] = 150
    frame2[0, 0:2, :, 1] = 220
    return np.concatenate([single_frame_stack, frame2], axis=0)


@pytest.fixture
def random_stack() -> np.ndarray:
    """3 frames of 32x32 noisy RGB with partially overlapping bright blobs."""
    rng = np.random.default_rng(7)
    stack = rng.normal(20, 4, (3, 32, 32, 3)).clip(0, 255).astype(np.uint8)
    stack[:, 4:20, 4:20, 0] += 150
    stack[:, 10:28, 10:28, 1] += 150
    stack[:, 0:12, 16:32, 2] += 150
    return stack
