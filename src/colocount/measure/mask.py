"""MaskResolver — turn an optional mask image into the ROI pixel set."""

from __future__ import annotations

import logging

import numpy as np

from colocount.core.exceptions import (
    DegenerateROIError,
    InvalidImageError,
    MaskDimensionMismatchError,
)
from colocount.core.models import RoiPixelSet

logger = logging.getLogger(__name__)


def resolve_mask(mask: np.ndarray | None, shape: tuple[int, int]) -> np.ndarray:
    """Produce a boolean mask of exactly ``shape``.

    Args:
        mask: Mask image, or None to select every pixel. 2D masks are "on"
            where non-zero; colour masks (Y, X, 3|4) are "on" where any of
            the first three channels is non-zero.
        shape: (Y, X) frame shape of the image stack.

    Returns:
        2D bool array with the given shape.

    Raises:
        InvalidImageError: If the mask has an unsupported dimensionality.
        MaskDimensionMismatchError: If the mask size differs from ``shape``.
    """
    shape = (int(shape[0]), int(shape[1]))
    if mask is None:
        logger.info("Mask image not found. Analysing entire image.")
        return np.ones(shape, dtype=bool)

    mask = np.asarray(mask)
    if mask.ndim == 3 and mask.shape[-1] in (3, 4):
        binary = np.any(mask[..., :3] != 0, axis=-1)
    elif mask.ndim == 2:
        binary = mask != 0
    else:
        raise InvalidImageError(
            f"mask must be a single 2D frame, got array of shape {mask.shape}"
        )

    if binary.shape != shape:
        raise MaskDimensionMismatchError(binary.shape, shape)

    logger.info("Using mask image to analyse region of interest.")
    return binary


def roi_from_mask(mask: np.ndarray) -> RoiPixelSet:
    """Enumerate the "on" pixels of a boolean mask.

    Raises:
        DegenerateROIError: If the mask selects no pixels.
    """
    rows, cols = np.nonzero(mask)
    if rows.size == 0:
        raise DegenerateROIError("mask selects no pixels")
    logger.debug("ROI contains %d pixels", rows.size)
    return RoiPixelSet(
        rows=rows.astype(np.intp),
        cols=cols.astype(np.intp),
        shape=(int(mask.shape[0]), int(mask.shape[1])),
    )
