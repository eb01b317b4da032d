"""ColocalizationPipeline — run the per-frame analysis over a whole stack."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable

import numpy as np

from colocount.core.config import AnalysisSettings
from colocount.core.exceptions import (
    AnalysisCancelledError,
    InvalidArgumentError,
    InvalidImageError,
)
from colocount.core.models import ColocalizationResult, PerFrameResult, RoiPixelSet
from colocount.measure.aggregate import aggregate
from colocount.measure.coincidence import process_frame
from colocount.measure.mask import resolve_mask, roi_from_mask

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


class ColocalizationPipeline:
    """Quantify pairwise channel colocalisation in a (F, Y, X, C) stack.

    Frames are independent given the shared ROI, so with ``workers > 1``
    they are processed on a thread pool and reduced once all have finished.

    Args:
        settings: Validated analysis settings.
        workers: Number of frames processed concurrently (default: 1).
    """

    def __init__(self, settings: AnalysisSettings, workers: int = 1) -> None:
        if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
            raise InvalidArgumentError("workers", f"must be >= 1, got {workers!r}")
        self._settings = settings
        self._workers = workers

    @property
    def settings(self) -> AnalysisSettings:
        return self._settings

    def run(
        self,
        stack: np.ndarray,
        mask: np.ndarray | None = None,
        progress_callback: ProgressCallback | None = None,
        cancel: threading.Event | None = None,
    ) -> ColocalizationResult:
        """Analyse every frame of ``stack`` within the ROI given by ``mask``.

        Args:
            stack: Image stack shaped (F, Y, X, C) with C >= 3.
            mask: Optional ROI mask shaped (Y, X). None analyses every pixel.
            progress_callback: Optional callback(current, total, label).
            cancel: Optional event; when set, the run stops before the next frame.

        Returns:
            ColocalizationResult with per-frame and whole-stack results.

        Raises:
            InvalidImageError: If the stack is not (F, Y, X, C) or a frame
                has fewer than three channels.
            MaskDimensionMismatchError: If mask and frame sizes differ.
            DegenerateROIError: If the mask selects no pixels.
            AnalysisCancelledError: If ``cancel`` is set during the run.
        """
        start = time.monotonic()
        stack = np.asarray(stack)
        if stack.ndim != 4:
            raise InvalidImageError(
                f"expected a (frames, height, width, channels) stack, got shape {stack.shape}"
            )
        n_frames = stack.shape[0]
        if n_frames < 1:
            raise InvalidImageError("image stack contains no frames")

        roi = roi_from_mask(resolve_mask(mask, stack.shape[1:3]))

        if self._workers == 1 or n_frames == 1:
            per_frame = self._run_sequential(stack, roi, progress_callback, cancel)
        else:
            per_frame = self._run_concurrent(stack, roi, progress_callback, cancel)

        result = ColocalizationResult(
            metadata=self._settings.metadata(),
            per_frame=tuple(per_frame),
            aggregate=aggregate(per_frame, roi.total_mask_pixels),
        )
        logger.info(
            "Analysed %d frame(s), %d ROI pixels each, in %.3fs",
            n_frames, roi.total_mask_pixels, time.monotonic() - start,
        )
        return result

    def _run_sequential(
        self,
        stack: np.ndarray,
        roi: RoiPixelSet,
        progress_callback: ProgressCallback | None,
        cancel: threading.Event | None,
    ) -> list[PerFrameResult]:
        total = stack.shape[0]
        results: list[PerFrameResult] = []
        for i in range(total):
            if cancel is not None and cancel.is_set():
                raise AnalysisCancelledError(frames_done=i)
            logger.info("Analysing frame %d of %d", i + 1, total)
            results.append(process_frame(stack[i], i, roi, self._settings))
            if progress_callback:
                progress_callback(i + 1, total, f"frame {i + 1}")
        return results

    def _run_concurrent(
        self,
        stack: np.ndarray,
        roi: RoiPixelSet,
        progress_callback: ProgressCallback | None,
        cancel: threading.Event | None,
    ) -> list[PerFrameResult]:
        total = stack.shape[0]
        slots: list[PerFrameResult | None] = [None] * total

        def task(index: int) -> PerFrameResult:
            if cancel is not None and cancel.is_set():
                raise AnalysisCancelledError()
            logger.info("Analysing frame %d of %d", index + 1, total)
            return process_frame(stack[index], index, roi, self._settings)

        with ThreadPoolExecutor(max_workers=self._workers) as pool:
            futures = [pool.submit(task, i) for i in range(total)]
            done = 0
            try:
                for future in as_completed(futures):
                    result = future.result()
                    slots[result.frame_index] = result
                    done += 1
                    if progress_callback:
                        progress_callback(done, total, f"frame {result.frame_index + 1}")
            except BaseException:
                for future in futures:
                    future.cancel()
                raise

        return [r for r in slots if r is not None]


def analyze_stack(
    stack: np.ndarray,
    channel_names: tuple[str, str, str],
    median_filter: bool = False,
    mask: np.ndarray | None = None,
    workers: int = 1,
) -> ColocalizationResult:
    """Convenience wrapper: build settings and run the pipeline once."""
    settings = AnalysisSettings(channel_names=channel_names, median_filter=median_filter)
    return ColocalizationPipeline(settings, workers=workers).run(stack, mask)
