"""Aggregator — fold per-frame counts into whole-stack totals."""

from __future__ import annotations

from collections.abc import Sequence

from colocount.core.exceptions import DegenerateROIError
from colocount.core.models import AggregateResult, PerFrameResult


def aggregate(
    per_frame: Sequence[PerFrameResult], total_mask_pixels: int,
) -> AggregateResult:
    """Sum pair counts across frames and normalise by all ROI pixel instances.

    Raises:
        DegenerateROIError: If there are no frames or the ROI is empty.
    """
    if not per_frame:
        raise DegenerateROIError("no frames to aggregate")
    if total_mask_pixels <= 0:
        raise DegenerateROIError("cannot compute percentages of zero ROI pixels")

    totals = [0, 0, 0]
    for result in per_frame:
        for i, count in enumerate(result.pixels):
            totals[i] += count

    frame_count = len(per_frame)
    denominator = frame_count * total_mask_pixels
    pct = [t / denominator * 100 for t in totals]

    return AggregateResult(
        total_pixels=(totals[0], totals[1], totals[2]),
        total_percent=(pct[0], pct[1], pct[2]),
        frame_count=frame_count,
        total_mask_pixels=total_mask_pixels,
    )
