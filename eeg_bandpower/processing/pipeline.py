"""
Sliding-window band power pipeline

This module slides a fixed-size window across a multi-channel series and
produces one BandPowerRecord per window.

Window starts are 0, overlap, 2*overlap, ... while start < n_samples -
window_size. A window that ends exactly on the last sample is therefore not
processed, and a series of exactly window_size samples yields no records.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from threading import Event
from typing import List, Optional

from ..core.config import PipelineConfig, validate_config
from ..core.data_types import Series, BandPowerRecord
from ..core.exceptions import ProcessingCancelled
from .features import FeatureExtractor


def window_starts(n_samples: int, window_size: int, overlap: int) -> range:
    """Start index of every window processed for a series of n_samples"""
    return range(0, n_samples - window_size, overlap)


class BandPowerPipeline:
    """
    Windowing pipeline: taper, transform and band power for every window

    With workers > 1 windows are scattered over a thread pool and gathered
    back by window index, so the output order and values match the
    sequential run exactly.
    """

    def __init__(self, config: Optional[PipelineConfig] = None, workers: int = 1):
        self.config = config if config is not None else PipelineConfig()
        validate_config(self.config)

        if workers < 1:
            raise ValueError(f"Worker count must be >= 1, got {workers}")
        self.workers = workers
        self.feature_extractor = FeatureExtractor(self.config)

    def process_window(self, series: Series, start: int) -> BandPowerRecord:
        """
        Compute the record for the window beginning at sample ``start``

        Args:
            series: Input recording
            start: Index of the first sample of the window

        Returns:
            BandPowerRecord: Timestamp of the first sample plus dB powers
        """
        window = series.window(start, self.config.window_size)
        powers = self.feature_extractor.extract_features(window)
        return BandPowerRecord(timestamp=float(series.timestamps[start]), powers=powers)

    def run(self, series: Series, cancel_event: Optional[Event] = None) -> List[BandPowerRecord]:
        """
        Process every window of a series

        Args:
            series: Input recording; its channel count must match the config
            cancel_event: Optional event checked before each window

        Returns:
            List[BandPowerRecord]: One record per window, in window order.
            Empty when the series is too short for a single window.

        Raises:
            ValueError: If the series channel count differs from the config
            ProcessingCancelled: If cancel_event is set during the pass
        """
        if len(series) > 0 and series.n_channels != self.config.n_channels:
            raise ValueError(
                f"Series has {series.n_channels} channels, pipeline expects {self.config.n_channels}"
            )

        starts = window_starts(len(series), self.config.window_size, self.config.overlap)
        logging.info(
            f"Processing {len(series)} samples: {len(starts)} windows "
            f"(size={self.config.window_size}, stride={self.config.overlap}, "
            f"fs={self.config.sample_rate}Hz, channels={self.config.n_channels})"
        )

        if len(starts) == 0:
            logging.warning(
                f"Series of {len(series)} samples is too short for a "
                f"{self.config.window_size}-sample window - no records produced"
            )
            return []

        if self.workers == 1:
            records = self._run_sequential(series, starts, cancel_event)
        else:
            records = self._run_parallel(series, starts, cancel_event)

        logging.info(f"Produced {len(records)} band power records")
        return records

    def _check_cancel(self, cancel_event: Optional[Event], windows_done: int) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logging.info(f"Cancellation requested after {windows_done} windows")
            raise ProcessingCancelled(windows_done)

    def _run_sequential(self, series: Series, starts: range,
                        cancel_event: Optional[Event]) -> List[BandPowerRecord]:
        records = []
        for idx, start in enumerate(starts):
            self._check_cancel(cancel_event, idx)
            records.append(self.process_window(series, start))
            logging.debug(f"Window {idx} at sample {start} done")
        return records

    def _run_parallel(self, series: Series, starts: range,
                      cancel_event: Optional[Event]) -> List[BandPowerRecord]:
        records: List[Optional[BandPowerRecord]] = [None] * len(starts)

        def task(idx: int) -> None:
            self._check_cancel(cancel_event, idx)
            records[idx] = self.process_window(series, starts[idx])

        logging.debug(f"Distributing {len(starts)} windows over {self.workers} workers")
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = [executor.submit(task, idx) for idx in range(len(starts))]
            for future in futures:
                try:
                    future.result()
                except ProcessingCancelled:
                    for pending in futures:
                        pending.cancel()
                    done = sum(1 for record in records if record is not None)
                    raise ProcessingCancelled(done)

        return records


def process_series(series: Series, config: Optional[PipelineConfig] = None,
                   workers: int = 1) -> List[BandPowerRecord]:
    """Convenience wrapper: run a fresh pipeline over a series"""
    return BandPowerPipeline(config, workers=workers).run(series)
