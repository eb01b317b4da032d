"""ChannelExtractor — split one RGB frame into its three channel planes."""

from __future__ import annotations

import numpy as np

from colocount.core.exceptions import InvalidImageError

REQUIRED_CHANNELS = 3


def extract_channels(
    frame: np.ndarray, frame_index: int = 0,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the channel 1, 2 and 3 planes of a (Y, X, C) frame.

    Two-colour images are expected to still carry an (empty) third channel.
    Extra channels beyond the third (e.g. alpha) are ignored.

    Raises:
        InvalidImageError: If the frame has fewer than three channels.
    """
    if frame.ndim != 3:
        raise InvalidImageError(
            f"image is not RGB (frame has shape {frame.shape})", frame_index,
        )
    n_channels = frame.shape[-1]
    if n_channels < REQUIRED_CHANNELS:
        raise InvalidImageError(
            f"image is not RGB ({n_channels} channel(s), need {REQUIRED_CHANNELS})",
            frame_index,
        )
    return frame[..., 0], frame[..., 1], frame[..., 2]
