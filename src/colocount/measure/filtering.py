"""SignalFilter — optional median noise suppression per channel plane."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy import ndimage

from colocount.core.config import DEFAULT_MEDIAN_SIZE


def median_filter_plane(plane: np.ndarray, size: int = DEFAULT_MEDIAN_SIZE) -> np.ndarray:
    """Median filter a 2D plane over a ``size`` x ``size`` neighbourhood.

    Borders are zero padded, so output shape and dtype equal the input's.
    """
    return ndimage.median_filter(plane, size=size, mode="constant", cval=0)


def filter_channels(
    planes: Sequence[np.ndarray],
    enabled: bool,
    size: int = DEFAULT_MEDIAN_SIZE,
) -> tuple[np.ndarray, ...]:
    """Median filter each plane independently, or return them unchanged."""
    if not enabled:
        return tuple(planes)
    return tuple(median_filter_plane(p, size) for p in planes)
