"""
EEG signal processing components

This module contains the windowing, spectral and band power stages and the
pipeline that chains them.
"""

from .window import hamming_window, hamming_coefficients
from .spectrum import compute_spectrum
from .features import FeatureExtractor, band_power, band_bins, power_to_db, compute_channel_band_powers
from .pipeline import BandPowerPipeline, process_series, window_starts

__all__ = [
    'hamming_window', 'hamming_coefficients', 'compute_spectrum',
    'FeatureExtractor', 'band_power', 'band_bins', 'power_to_db', 'compute_channel_band_powers',
    'BandPowerPipeline', 'process_series', 'window_starts',
]
