"""Normalise decoded images into (frames, height, width, channels) stacks."""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np

from colocount.core.exceptions import InvalidImageError
from colocount.io.tiff import read_tiff, read_tiff_metadata

logger = logging.getLogger(__name__)

# Arrays whose trailing axis is at most this long are read as channel-last.
_MAX_CHANNELS = 4

# tifffile axis codes: C channel, S sample (RGB); everything except Y/X/C/S
# (Z, T, I, Q, ...) counts as a frame axis.
_CHANNEL_AXES = frozenset("CS")
_PLANE_AXES = frozenset("YX")


def _stack_from_axes(image: np.ndarray, axes: str) -> np.ndarray:
    """Reorder an array with known tifffile axes into (F, Y, X, C)."""
    axes = axes.upper()
    if "Y" not in axes or "X" not in axes:
        raise InvalidImageError(f"image axes {axes!r} have no Y/X plane")
    channel = [i for i, a in enumerate(axes) if a in _CHANNEL_AXES]
    if len(channel) > 1:
        raise InvalidImageError(f"image axes {axes!r} have more than one channel axis")
    frames = [i for i, a in enumerate(axes) if a not in _CHANNEL_AXES | _PLANE_AXES]

    order = frames + [axes.index("Y"), axes.index("X")] + channel
    out = np.transpose(image, order)
    n_frames = math.prod(image.shape[i] for i in frames)
    n_channels = image.shape[channel[0]] if channel else 1
    return out.reshape(n_frames, out.shape[len(frames)], out.shape[len(frames) + 1], n_channels)


def _frame_count(shape: tuple[int, ...], axes: str) -> int:
    """Number of frames described by a tifffile shape and axes string."""
    return math.prod(
        n for n, a in zip(shape, axes.upper()) if a not in _CHANNEL_AXES | _PLANE_AXES
    )


def as_frame_stack(image: np.ndarray, axes: str | None = None) -> np.ndarray:
    """Reshape a decoded image into a (F, Y, X, C) stack.

    With ``axes`` (tifffile's series axes, e.g. "CYX", "IYXS", "TZCYX") the
    layout is taken from it: C/S is the channel axis, Y/X the plane, and
    every other axis is flattened into frames.

    Without ``axes`` the layout is guessed from the shape:
        (Y, X)        single grayscale frame -> (1, Y, X, 1)
        (Y, X, C)     single colour frame, C <= 4 -> (1, Y, X, C)
        (F, Y, X)     grayscale stack -> (F, Y, X, 1)
        (F, Y, X, C)  colour stack, C <= 4
        (F, C, Y, X)  ImageJ-style hyperstack, C <= 4 -> (F, Y, X, C)

    Grayscale inputs are accepted here and rejected later, frame by frame,
    when channels are extracted.

    Raises:
        InvalidImageError: If the array layout cannot be interpreted.
    """
    image = np.asarray(image)
    if axes is not None:
        if len(axes) != image.ndim:
            raise InvalidImageError(
                f"axes {axes!r} do not match image of shape {image.shape}"
            )
        return _stack_from_axes(image, axes)

    if image.ndim == 2:
        return image[None, :, :, None]
    if image.ndim == 3:
        if image.shape[-1] <= _MAX_CHANNELS:
            return image[None, ...]
        return image[..., None]
    if image.ndim == 4:
        if image.shape[-1] <= _MAX_CHANNELS:
            return image
        if image.shape[1] <= _MAX_CHANNELS:
            return np.moveaxis(image, 1, -1)
    raise InvalidImageError(f"unsupported image layout with shape {image.shape}")


def load_stack(path: Path) -> np.ndarray:
    """Read a TIFF image and return it as a (F, Y, X, C) stack."""
    meta = read_tiff_metadata(path)
    stack = as_frame_stack(read_tiff(path), axes=meta["axes"])
    logger.info(
        "Loaded %s (axes %s): %d frame(s) of %dx%d with %d channel(s)",
        path, meta["axes"], stack.shape[0], stack.shape[2], stack.shape[1], stack.shape[3],
    )
    return stack


def load_mask(path: Path) -> np.ndarray:
    """Read a single-frame mask image.

    Raises:
        InvalidImageError: If the file holds more than one frame.
    """
    meta = read_tiff_metadata(path)
    n_frames = _frame_count(meta["shape"], meta["axes"])
    if n_frames > 1:
        raise InvalidImageError(
            f"mask must be a single frame, got {n_frames} frames in {path}"
        )
    mask = read_tiff(path)
    # Drop singleton frame axes so the mask is (Y, X) or (Y, X, C).
    stack = as_frame_stack(mask, axes=meta["axes"])[0]
    return stack[..., 0] if stack.shape[-1] == 1 else stack
