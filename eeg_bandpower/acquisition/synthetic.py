"""
Synthetic EEG series generation

Builds multi-channel recordings from sinusoidal rhythms plus Gaussian noise,
for demos (``--fake``) and tests without a recorded input file.
"""

import logging
from typing import Dict, Optional, Tuple
import numpy as np

from ..core.config import SAMPLE_RATE, N_CHANNELS
from ..core.data_types import Series

# Default rhythm per channel: (frequency Hz, amplitude)
DEFAULT_RHYTHMS = {
    0: (10.0, 15.0),   # Alpha
    1: (10.0, 15.0),   # Alpha
    2: (10.0, 12.0),   # Alpha
    3: (20.0, 8.0),    # Beta
    4: (20.0, 8.0),    # Beta
    5: (6.0, 10.0),    # Theta
}


def sine_series(freq: float, n_samples: int, fs: float = SAMPLE_RATE,
                amplitude: float = 1.0, start_time: float = 0.0) -> Series:
    """
    Single-channel pure tone

    Args:
        freq: Tone frequency (Hz)
        n_samples: Number of samples
        fs: Sampling frequency (Hz)
        amplitude: Peak amplitude
        start_time: Timestamp of the first sample (s)

    Returns:
        Series: One channel, timestamps start_time + k / fs
    """
    k = np.arange(n_samples, dtype=np.float64)
    t = k / fs
    values = amplitude * np.sin(2 * np.pi * freq * t)
    return Series(timestamps=start_time + t, samples=values.reshape(-1, 1))


def synthesize_series(
    duration_sec: float = 10.0,
    fs: float = SAMPLE_RATE,
    n_channels: int = N_CHANNELS,
    rhythms: Optional[Dict[int, Tuple[float, float]]] = None,
    noise_std: float = 5.0,
    seed: Optional[int] = 42,
    start_time: float = 0.0,
) -> Series:
    """
    Generate a synthetic multi-channel EEG series

    Each channel gets Gaussian background noise; channels listed in
    ``rhythms`` also get a sinusoid with a random phase.

    Args:
        duration_sec: Length of the recording (s)
        fs: Sampling frequency (Hz)
        n_channels: Number of channels
        rhythms: channel index -> (frequency Hz, amplitude); defaults to
            alpha on the first channels, beta and theta on the rest
        noise_std: Standard deviation of the background noise
        seed: Random seed for reproducible output
        start_time: Timestamp of the first sample (s)

    Returns:
        Series: (int(duration_sec * fs) x n_channels) recording
    """
    if rhythms is None:
        rhythms = DEFAULT_RHYTHMS

    rng = np.random.default_rng(seed)
    n_samples = int(duration_sec * fs)
    t = np.arange(n_samples, dtype=np.float64) / fs

    logging.info(f"Generating synthetic EEG: {n_samples} samples, {n_channels} channels, fs={fs}Hz")

    data = rng.standard_normal((n_samples, n_channels)) * noise_std
    for ch, (freq, amplitude) in rhythms.items():
        if ch >= n_channels:
            continue
        phase = rng.random() * 2 * np.pi
        data[:, ch] += amplitude * np.sin(2 * np.pi * freq * t + phase)

    return Series(timestamps=start_time + t, samples=data)

