"""Persist ColocalizationResult to MAT-files and CSV.

The MAT-file holds the five variables ``info``, ``ResultsPerFrame_pixels``,
``ResultsPerFrame_percent``, ``totalColocPixels`` and ``totalColocPercent``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
from scipy import io as sio

from colocount.core.exceptions import InvalidArgumentError
from colocount.core.models import PAIR_LABELS, ColocalizationResult

logger = logging.getLogger(__name__)

DEFAULT_RESULT_NAME = "colocAnalysis.mat"

MAT_VARIABLES = (
    "info",
    "ResultsPerFrame_pixels",
    "ResultsPerFrame_percent",
    "totalColocPixels",
    "totalColocPercent",
)


def result_to_mat_dict(result: ColocalizationResult) -> dict[str, Any]:
    """Map a result onto the MAT-file variable names."""
    return {
        "info": np.array(result.metadata.info_lines(), dtype=object),
        "ResultsPerFrame_pixels": result.per_frame_pixels,
        "ResultsPerFrame_percent": result.per_frame_percent,
        "totalColocPixels": np.array(result.aggregate.total_pixels, dtype=np.int64),
        "totalColocPercent": np.array(result.aggregate.total_percent, dtype=np.float64),
    }


def save_mat(result: ColocalizationResult, path: Path) -> Path:
    """Write a result as a MATLAB MAT-file.

    Args:
        result: Completed analysis result.
        path: Output file path.

    Returns:
        The path written.
    """
    path = Path(path)
    sio.savemat(str(path), result_to_mat_dict(result), oned_as="row")
    logger.info("Saved colocalisation results to %s", path)
    return path


def load_mat(path: Path) -> dict[str, Any]:
    """Read the five result variables back from a MAT-file.

    Returns:
        Dict keyed by MAT variable name. ``info`` is a list of str, per-frame
        matrices are (F, 3) arrays and totals are length-3 arrays.

    Raises:
        InvalidArgumentError: If any result variable is missing.
    """
    raw = sio.loadmat(str(path), squeeze_me=True)
    missing = [name for name in MAT_VARIABLES if name not in raw]
    if missing:
        raise InvalidArgumentError(
            "result", f"not a colocalisation result file, missing: {', '.join(missing)}"
        )

    return {
        "info": [str(line) for line in np.atleast_1d(raw["info"])],
        "ResultsPerFrame_pixels": np.asarray(raw["ResultsPerFrame_pixels"]).reshape(-1, 3),
        "ResultsPerFrame_percent": np.asarray(raw["ResultsPerFrame_percent"], dtype=np.float64).reshape(-1, 3),
        "totalColocPixels": np.asarray(raw["totalColocPixels"]).reshape(3),
        "totalColocPercent": np.asarray(raw["totalColocPercent"], dtype=np.float64).reshape(3),
    }


def to_dataframe(result: ColocalizationResult) -> pd.DataFrame:
    """Tabulate a result: one row per frame followed by a ``total`` row."""
    rows: list[dict[str, Any]] = []
    for frame in result.per_frame:
        row: dict[str, Any] = {"frame": str(frame.frame_index + 1)}
        for label, count, pct in zip(PAIR_LABELS, frame.pixels, frame.percent):
            row[f"pixels_{label}"] = count
            row[f"percent_{label}"] = pct
        rows.append(row)

    total: dict[str, Any] = {"frame": "total"}
    agg = result.aggregate
    for label, count, pct in zip(PAIR_LABELS, agg.total_pixels, agg.total_percent):
        total[f"pixels_{label}"] = count
        total[f"percent_{label}"] = pct
    rows.append(total)

    columns = ["frame"]
    columns += [f"pixels_{label}" for label in PAIR_LABELS]
    columns += [f"percent_{label}" for label in PAIR_LABELS]
    return pd.DataFrame(rows, columns=columns)


def save_csv(result: ColocalizationResult, path: Path) -> Path:
    """Write the tabulated result to CSV."""
    path = Path(path)
    to_dataframe(result).to_csv(path, index=False)
    logger.info("Saved colocalisation table to %s", path)
    return path
