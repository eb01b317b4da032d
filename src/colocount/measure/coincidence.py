"""CoincidenceCounter — per-frame pairwise colocalisation within the ROI."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from colocount.core.config import AnalysisSettings
from colocount.core.exceptions import DegenerateROIError
from colocount.core.models import CHANNEL_PAIRS, PerFrameResult, RoiPixelSet
from colocount.measure.channels import extract_channels
from colocount.measure.filtering import filter_channels
from colocount.measure.thresholding import binarize

logger = logging.getLogger(__name__)


def count_coincidences(
    signals: Sequence[np.ndarray], roi: RoiPixelSet,
) -> tuple[int, int, int]:
    """Count ROI pixels that are on in both channels of each pair.

    Only the ROI coordinates are read, so the cost scales with the ROI
    size rather than the frame size.

    Args:
        signals: Binary planes for channels 1, 2, 3.
        roi: ROI coordinates shared across frames.

    Returns:
        Counts for pairs (1-2, 1-3, 2-3).
    """
    values = [np.asarray(s, dtype=bool)[roi.rows, roi.cols] for s in signals]
    counts = [
        int(np.count_nonzero(values[a] & values[b])) for a, b in CHANNEL_PAIRS
    ]
    return counts[0], counts[1], counts[2]


def percentages(
    pixels: Sequence[int], total_mask_pixels: int,
) -> tuple[float, float, float]:
    """Express pair counts as a percentage of the ROI size.

    Raises:
        DegenerateROIError: If ``total_mask_pixels`` is not positive.
    """
    if total_mask_pixels <= 0:
        raise DegenerateROIError("cannot compute percentages of zero ROI pixels")
    pct = [count / total_mask_pixels * 100 for count in pixels]
    return pct[0], pct[1], pct[2]


def process_frame(
    frame: np.ndarray,
    frame_index: int,
    roi: RoiPixelSet,
    settings: AnalysisSettings,
) -> PerFrameResult:
    """Run extraction, filtering, binarisation and counting for one frame."""
    planes = extract_channels(frame, frame_index)
    planes = filter_channels(planes, settings.median_filter, settings.median_size)

    signals = []
    thresholds = []
    for plane in planes:
        signal, threshold = binarize(
            plane, settings.threshold_method, settings.manual_threshold,
        )
        signals.append(signal)
        thresholds.append(threshold)
    logger.debug("Frame %d thresholds: %s", frame_index + 1, thresholds)

    pixels = count_coincidences(signals, roi)
    return PerFrameResult(
        frame_index=frame_index,
        pixels=pixels,
        percent=percentages(pixels, roi.total_mask_pixels),
        thresholds=(thresholds[0], thresholds[1], thresholds[2]),
    )
