"""Tests for colocount.measure.aggregate."""

import pytest

from colocount.core.exceptions import DegenerateROIError
from colocount.core.models import PerFrameResult
from colocount.measure.aggregate import aggregate


class TestAggregate:
    def test_single_frame(self):
        agg = aggregate([PerFrameResult(0, (4, 0, 0), (25.0, 0.0, 0.0))], 16)
        assert agg.total_pixels == (4, 0, 0)
        assert agg.total_percent == pytest.approx((25.0, 0.0, 0.0))
        assert agg.frame_count == 1
        assert agg.total_mask_pixels == 16

    def test_two_frames(self):
        frames = [
            PerFrameResult(0, (4, 0, 0), (25.0, 0.0, 0.0)),
            PerFrameResult(1, (8, 2, 16), (50.0, 12.5, 100.0)),
        ]
        agg = aggregate(frames, 16)
        assert agg.total_pixels == (12, 2, 16)
        assert agg.total_percent[0] == pytest.approx(37.5)
        assert agg.total_percent[1] == pytest.approx(6.25)
        assert agg.total_percent[2] == pytest.approx(50.0)

    def test_order_independent(self):
        frames = [
            PerFrameResult(0, (1, 2, 3), (0.0, 0.0, 0.0)),
            PerFrameResult(1, (4, 5, 6), (0.0, 0.0, 0.0)),
            PerFrameResult(2, (7, 8, 9), (0.0, 0.0, 0.0)),
        ]
        assert aggregate(frames, 10) == aggregate(list(reversed(frames)), 10)

    def test_no_frames_raises(self):
        with pytest.raises(DegenerateROIError, match="no frames"):
            aggregate([], 16)

    def test_zero_roi_raises(self):
        with pytest.raises(DegenerateROIError):
            aggregate([PerFrameResult(0, (0, 0, 0), (0.0, 0.0, 0.0))], 0)
