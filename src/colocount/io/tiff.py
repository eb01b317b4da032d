"""TIFF reading via tifffile."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import tifffile


def read_tiff(path: Path) -> np.ndarray:
    """Read a TIFF file (all pages) into a numpy array.

    Args:
        path: Path to the TIFF file.

    Returns:
        Numpy array with the image data.
    """
    return tifffile.imread(str(path))


def read_tiff_metadata(path: Path) -> dict:
    """Describe a TIFF file without reading pixel data.

    Args:
        path: Path to the TIFF file.

    Returns:
        Dict with keys: 'shape' (of the full series), 'axes' (tifffile axis
        codes for that shape, e.g. "CYX" or "QYXS"), 'dtype', 'n_pages'.
    """
    with tifffile.TiffFile(str(path)) as tif:
        series = tif.series[0]
        return {
            "shape": tuple(series.shape),
            "axes": str(series.axes),
            "dtype": str(series.dtype),
            "n_pages": len(tif.pages),
        }
