"""colocount IO — TIFF loading, mask discovery and result persistence."""

from colocount.io.discovery import find_mask_file
from colocount.io.results import (
    DEFAULT_RESULT_NAME,
    load_mat,
    save_csv,
    save_mat,
    to_dataframe,
)
from colocount.io.stack import as_frame_stack, load_mask, load_stack
from colocount.io.tiff import read_tiff, read_tiff_metadata

__all__ = [
    "DEFAULT_RESULT_NAME",
    "as_frame_stack",
    "find_mask_file",
    "load_mask",
    "load_mat",
    "load_stack",
    "read_tiff",
    "read_tiff_metadata",
    "save_csv",
    "save_mat",
    "to_dataframe",
]
