"""Tests for colocount.core.exceptions."""

import pytest

from colocount.core.exceptions import (
    AnalysisCancelledError,
    ColocalizationError,
    DegenerateROIError,
    InvalidArgumentError,
    InvalidImageError,
    MaskDimensionMismatchError,
)


class TestExceptionHierarchy:
    def test_all_inherit_from_colocalization_error(self):
        for exc_cls in (InvalidArgumentError, InvalidImageError, DegenerateROIError,
                        MaskDimensionMismatchError, AnalysisCancelledError):
            assert issubclass(exc_cls, ColocalizationError)

    def test_catch_all_with_base(self):
        with pytest.raises(ColocalizationError):
            raise InvalidImageError("not RGB")

    def test_invalid_argument_message(self):
        exc = InvalidArgumentError("filter", "choose either 0 or 1")
        assert "'filter'" in str(exc)
        assert "choose either 0 or 1" in str(exc)
        assert exc.argument == "filter"

    def test_invalid_image_reports_one_based_frame(self):
        exc = InvalidImageError("image is not RGB", frame_index=2)
        assert "frame 3" in str(exc)
        assert exc.frame_index == 2

    def test_invalid_image_without_frame(self):
        exc = InvalidImageError("bad layout")
        assert "frame" not in str(exc)

    def test_mask_mismatch_names_both_shapes(self):
        exc = MaskDimensionMismatchError((4, 4), (8, 8))
        assert "(4, 4)" in str(exc)
        assert "(8, 8)" in str(exc)
        assert exc.mask_shape == (4, 4)
        assert exc.frame_shape == (8, 8)

    def test_degenerate_roi_default_message(self):
        assert "empty" in str(DegenerateROIError())

    def test_cancelled_frames_done(self):
        exc = AnalysisCancelledError(frames_done=3)
        assert "3 frame" in str(exc)
        assert exc.frames_done == 3
