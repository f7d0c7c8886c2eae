"""
EEG band power features

This module reduces a channel spectrum to one linear power value per frequency
band and converts those powers to decibels.

Band edges are mapped to bins by truncation: a band [low, high) Hz covers bins
int(low * N / fs) up to, but excluding, int(high * N / fs). Fractional bin
edges are not interpolated.
"""

import logging
from typing import Dict, Optional, Tuple
import numpy as np

from ..core.config import PipelineConfig
from .spectrum import compute_spectrum
from .window import hamming_window


def band_bins(low_freq: float, high_freq: float, window_size: int,
              sample_rate: float) -> Tuple[int, int]:
    """
    Map a frequency range to a half-open range of spectrum bins

    Args:
        low_freq: Lower band edge (Hz)
        high_freq: Upper band edge (Hz)
        window_size: Samples per window (N)
        sample_rate: Sampling frequency (Hz)

    Returns:
        Tuple[low_bin, high_bin]: Truncated bin indices, high bin excluded
    """
    low_bin = int(low_freq * window_size / sample_rate)
    high_bin = int(high_freq * window_size / sample_rate)
    return low_bin, high_bin


def band_power(spectrum: np.ndarray, low_freq: float, high_freq: float,
               window_size: int, sample_rate: float) -> float:
    """
    Sum of squared magnitudes over a band, divided by the window size

    Bins past the end of the spectrum are dropped. An empty range gives 0.0.

    Args:
        spectrum: Complex spectrum for one channel
        low_freq: Lower band edge (Hz)
        high_freq: Upper band edge (Hz)
        window_size: Samples per window, used as the normaliser
        sample_rate: Sampling frequency (Hz)

    Returns:
        float: Non-negative linear power
    """
    low_bin, high_bin = band_bins(low_freq, high_freq, window_size, sample_rate)
    high_bin = min(high_bin, len(spectrum))

    if low_bin >= high_bin:
        return 0.0

    magnitudes = np.abs(spectrum[low_bin:high_bin])
    return float(np.sum(magnitudes * magnitudes) / window_size)


def power_to_db(power: float) -> float:
    """10 * log10(power), or -inf for non-positive power"""
    if power <= 0:
        return float(-np.inf)
    return float(10 * np.log10(power))


def compute_channel_band_powers(window: np.ndarray, channel: int,
                                config: PipelineConfig) -> Dict[str, float]:
    """
    Band powers in dB for one channel of one window

    This is the unit of work of the pipeline. It reads only its own slice of
    the window and has no side effects, so windows and channels can be
    processed in any order.

    Args:
        window: Window samples (window_size x n_channels)
        channel: Channel index into the window columns
        config: Pipeline configuration

    Returns:
        Dict[str, float]: band name -> dB power, in band table order
    """
    if channel < 0 or channel >= window.shape[1]:
        raise ValueError(f"Channel {channel} out of range for window with {window.shape[1]} channels")

    tapered = hamming_window(window[:, channel])
    spectrum = compute_spectrum(tapered)

    powers = {}
    for band_name, (low, high) in config.freq_bands.items():
        linear = band_power(spectrum, low, high, config.window_size, config.sample_rate)
        powers[band_name] = power_to_db(linear)

    return powers


class FeatureExtractor:
    """
    Extract band power features from analysis windows

    Runs the per-channel computation across every channel of a window and
    arranges the result band by band.
    """

    def __init__(self, config: Optional[PipelineConfig] = None):
        self.config = config if config is not None else PipelineConfig()

    def extract_band_power(self, data: np.ndarray, freq_range: Tuple[float, float]) -> float:
        """
        Linear power of a single channel in one frequency band

        Args:
            data: Raw samples for a single channel (window_size,)
            freq_range: (low_freq, high_freq) in Hz

        Returns:
            float: Linear band power
        """
        spectrum = compute_spectrum(hamming_window(data))
        return band_power(spectrum, freq_range[0], freq_range[1],
                          self.config.window_size, self.config.sample_rate)

    def extract_features(self, window: np.ndarray) -> Dict[str, np.ndarray]:
        """
        Extract all band powers (dB) from a window

        Args:
            window: Window samples (window_size x n_channels)

        Returns:
            Dict[str, np.ndarray]: band name -> (n_channels,) dB values
        """
        n_channels = window.shape[1]
        powers = {name: np.empty(n_channels, dtype=np.float64) for name in self.config.band_names}

        for ch_idx in range(n_channels):
            channel_powers = compute_channel_band_powers(window, ch_idx, self.config)
            for band_name, value in channel_powers.items():
                powers[band_name][ch_idx] = value

        logging.debug(f"Extracted {len(powers)} bands for {n_channels} channels")
        return powers
