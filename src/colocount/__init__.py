"""colocount — pixel colocalisation between fluorescence channels."""

__version__ = "0.1.0"

from colocount.core import (
    AnalysisSettings,
    ColocalizationError,
    ColocalizationResult,
)
from colocount.measure import ColocalizationPipeline, analyze_stack

__all__ = [
    "AnalysisSettings",
    "ColocalizationError",
    "ColocalizationPipeline",
    "ColocalizationResult",
    "__version__",
    "analyze_stack",
]
