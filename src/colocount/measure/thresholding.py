"""Binarizer — global automatic thresholding of channel planes."""

from __future__ import annotations

import logging

import numpy as np

from colocount.core.config import SUPPORTED_METHODS
from colocount.core.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def compute_threshold(
    plane: np.ndarray,
    method: str = "otsu",
    manual_value: float | None = None,
) -> float:
    """Compute a global threshold for a 2D plane.

    Args:
        plane: Channel intensity plane.
        method: "otsu" (default), "li", "triangle", "mean" or "manual".
        manual_value: Threshold value (required when method="manual").

    Returns:
        The threshold. For a uniform plane this is its constant value.

    Raises:
        InvalidArgumentError: If method is unknown or manual_value missing.
    """
    from skimage.filters import (
        threshold_li,
        threshold_mean,
        threshold_otsu,
        threshold_triangle,
    )

    if method not in SUPPORTED_METHODS:
        raise InvalidArgumentError(
            "threshold_method",
            f"unknown method {method!r}. Supported: {sorted(SUPPORTED_METHODS)}",
        )
    if method == "manual":
        if manual_value is None:
            raise InvalidArgumentError(
                "manual_threshold", "required when threshold_method='manual'"
            )
        return float(manual_value)

    lo, hi = plane.min(), plane.max()
    if lo == hi:
        # No histogram to split; everything ends up "off".
        logger.info("Uniform channel plane (value %s); binarising to all-off", lo)
        return float(lo)

    if method == "otsu":
        return float(threshold_otsu(plane))
    elif method == "li":
        return float(threshold_li(plane))
    elif method == "triangle":
        return float(threshold_triangle(plane))
    else:
        return float(threshold_mean(plane))


def binarize(
    plane: np.ndarray,
    method: str = "otsu",
    manual_value: float | None = None,
) -> tuple[np.ndarray, float]:
    """Binarise a plane: a pixel is on iff its intensity exceeds the threshold.

    Returns:
        Tuple of (bool plane, threshold used).
    """
    threshold = compute_threshold(plane, method, manual_value)
    return plane > threshold, threshold
