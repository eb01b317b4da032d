"""colocount measure — mask, channel, threshold and coincidence engine."""

from colocount.measure.aggregate import aggregate
from colocount.measure.channels import extract_channels
from colocount.measure.coincidence import count_coincidences, percentages, process_frame
from colocount.measure.filtering import filter_channels, median_filter_plane
from colocount.measure.mask import resolve_mask, roi_from_mask
from colocount.measure.pipeline import ColocalizationPipeline, analyze_stack
from colocount.measure.thresholding import binarize, compute_threshold

__all__ = [
    "ColocalizationPipeline",
    "aggregate",
    "analyze_stack",
    "binarize",
    "compute_threshold",
    "count_coincidences",
    "extract_channels",
    "filter_channels",
    "median_filter_plane",
    "percentages",
    "process_frame",
    "resolve_mask",
    "roi_from_mask",
]
