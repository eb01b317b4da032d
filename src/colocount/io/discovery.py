"""Mask discovery by filename convention (``mask*`` beside the image)."""

from __future__ import annotations

from pathlib import Path

from colocount.core.exceptions import InvalidArgumentError

TIFF_EXTENSIONS = {".tif", ".tiff"}


def find_mask_file(directory: Path, prefix: str = "mask") -> Path | None:
    """Find the single TIFF in ``directory`` whose name starts with ``prefix``.

    Args:
        directory: Directory to look in (not recursive).
        prefix: Filename prefix identifying the mask.

    Returns:
        Path to the mask, or None if there is none.

    Raises:
        FileNotFoundError: If the directory does not exist.
        InvalidArgumentError: If more than one candidate is found.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Directory does not exist: {directory}")

    candidates = sorted(
        p for p in directory.iterdir()
        if p.is_file()
        and p.name.startswith(prefix)
        and p.suffix.lower() in TIFF_EXTENSIONS
    )
    if not candidates:
        return None
    if len(candidates) > 1:
        names = ", ".join(p.name for p in candidates)
        raise InvalidArgumentError(
            "mask", f"multiple files start with '{prefix}': {names}"
        )
    return candidates[0]
