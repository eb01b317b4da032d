"""colocount core — models, settings and exceptions."""

from colocount.core.config import AnalysisSettings
from colocount.core.exceptions import (
    AnalysisCancelledError,
    ColocalizationError,
    DegenerateROIError,
    InvalidArgumentError,
    InvalidImageError,
    MaskDimensionMismatchError,
)
from colocount.core.models import (
    CHANNEL_PAIRS,
    PAIR_LABELS,
    AggregateResult,
    AnalysisMetadata,
    ColocalizationResult,
    PerFrameResult,
    RoiPixelSet,
)

__all__ = [
    "AggregateResult",
    "AnalysisCancelledError",
    "AnalysisMetadata",
    "AnalysisSettings",
    "CHANNEL_PAIRS",
    "ColocalizationError",
    "ColocalizationResult",
    "DegenerateROIError",
    "InvalidArgumentError",
    "InvalidImageError",
    "MaskDimensionMismatchError",
    "PAIR_LABELS",
    "PerFrameResult",
    "RoiPixelSet",
]
