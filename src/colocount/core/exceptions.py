"""Exception classes for the colocount core module."""

from __future__ import annotations


class ColocalizationError(Exception):
    """Base exception for all colocalisation analysis errors."""


class InvalidArgumentError(ColocalizationError):
    """Raised when an analysis argument has the wrong type or range."""

    def __init__(self, argument: str, reason: str | None = None) -> None:
        msg = f"Invalid argument '{argument}'"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.argument = argument
        self.reason = reason


class InvalidImageError(ColocalizationError):
    """Raised when an image cannot be split into three channels."""

    def __init__(self, reason: str, frame_index: int | None = None) -> None:
        if frame_index is not None:
            msg = f"Invalid image (frame {frame_index + 1}): {reason}"
        else:
            msg = f"Invalid image: {reason}"
        super().__init__(msg)
        self.reason = reason
        self.frame_index = frame_index


class DegenerateROIError(ColocalizationError):
    """Raised when the region of interest contains no pixels."""

    def __init__(self, reason: str | None = None) -> None:
        msg = "Region of interest is empty"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.reason = reason


class MaskDimensionMismatchError(ColocalizationError):
    """Raised when the mask and the image frames differ in size."""

    def __init__(
        self, mask_shape: tuple[int, ...], frame_shape: tuple[int, ...],
    ) -> None:
        super().__init__(
            f"Mask shape {tuple(mask_shape)} does not match "
            f"frame shape {tuple(frame_shape)}"
        )
        self.mask_shape = tuple(mask_shape)
        self.frame_shape = tuple(frame_shape)


class AnalysisCancelledError(ColocalizationError):
    """Raised when a run is cancelled between frames."""

    def __init__(self, frames_done: int | None = None) -> None:
        msg = "Analysis cancelled"
        if frames_done is not None:
            msg = f"{msg} after {frames_done} frame(s)"
        super().__init__(msg)
        self.frames_done = frames_done
