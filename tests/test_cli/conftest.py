"""Shared fixtures for CLI module tests."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest
import tifffile
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def image_dir(tmp_path: Path, two_frame_stack: np.ndarray) -> Path:
    """Directory holding a two-frame 4x4 RGB stack named ``image.tif``."""
    d = tmp_path / "data"
    d.mkdir()
    tifffile.imwrite(str(d / "image.tif"), two_frame_stack, photometric="rgb")
    return d


@pytest.fixture
def image_path(image_dir: Path) -> Path:
    return image_dir / "image.tif"


@pytest.fixture
def top_row_mask(image_dir: Path) -> Path:
    """4x4 mask selecting only the first row, saved as ``mask.tif`` beside the image."""
    mask = np.zeros((4, 4), dtype=np.uint8)
    mask[0, :] = 255
    p = image_dir / "mask.tif"
    tifffile.imwrite(str(p), mask)
    return p
