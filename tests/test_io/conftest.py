"""Shared fixtures for IO module tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import tifffile

from colocount.core.config import AnalysisSettings
from colocount.measure.pipeline import ColocalizationPipeline


@pytest.fixture
def rgb_stack_path(tmp_path: Path, two_frame_stack: np.ndarray) -> Path:
    """Two-frame 4x4 RGB TIFF."""
    p = tmp_path / "stack.tif"
    tifffile.imwrite(str(p), two_frame_stack, photometric="rgb")
    return p


@pytest.fixture
def rgb_frame_path(tmp_path: Path, single_frame_stack: np.ndarray) -> Path:
    """Single-frame 4x4 RGB TIFF."""
    p = tmp_path / "frame.tif"
    tifffile.imwrite(str(p), single_frame_stack[0], photometric="rgb")
    return p


@pytest.fixture
def two_frame_result(two_frame_stack: np.ndarray):
    """Analysis result of ``two_frame_stack`` with a two-channel label set."""
    settings = AnalysisSettings(channel_names=("GFP", "DAPI", "none"), median_filter=False)
    return ColocalizationPipeline(settings).run(two_frame_stack)
