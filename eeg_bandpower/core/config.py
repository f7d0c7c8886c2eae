"""
Configuration constants for EEG Band Power

This module contains the reference processing parameters and the pipeline
configuration dataclass. The module constants are the reference values; the
dataclass lets callers override them (e.g. small synthetic windows in tests).
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# ============================================================================
# PROCESSING CONFIGURATION - Reference values
# ============================================================================

# Windowing
WINDOW_SIZE = 256                 # Samples per analysis window (1 s at 256 Hz)
OVERLAP = 128                     # Step between consecutive window starts (50% slide)
SAMPLE_RATE = 256.0               # Sampling rate (Hz)

# Recording layout
N_CHANNELS = 6                    # EEG channels per sample row

# Frequency Bands (Hz) - order here is the output column order
FREQ_BANDS = {
    "delta": (0.5, 4.0),
    "theta": (4.0, 8.0),
    "alpha": (8.0, 13.0),
    "beta": (13.0, 30.0),
    "gamma": (30.0, 100.0),
}

# File Paths
INPUT_PATH = "eeg_data.csv"                 # Raw samples: timestamp, ch1..chC
OUTPUT_PATH = "processed_eeg_data.csv"      # Band powers in dB

# Output formatting
POWER_DECIMALS = 2                # Fractional digits for dB values
NEG_INF_TOKEN = "-Inf"            # Written for silent bands (zero power)
POS_INF_TOKEN = "+Inf"
NAN_TOKEN = "NaN"
TIMESTAMP_HEADER = "timestamps"


@dataclass
class PipelineConfig:
    """
    Configuration for the band power pipeline

    Windowing Parameters:
    - window_size: Samples per analysis window (must be >= 2)
    - overlap: Stride between consecutive window starts, in samples. The name
      follows the reference constants; 128 with a 256-sample window gives a
      50% overlapping slide.
    - sample_rate: Sampling frequency in Hz

    Layout:
    - n_channels: Number of amplitude columns per sample

    Bands:
    - freq_bands: Ordered mapping of band name to (low_hz, high_hz)
    """

    window_size: int = WINDOW_SIZE
    overlap: int = OVERLAP
    sample_rate: float = SAMPLE_RATE
    n_channels: int = N_CHANNELS
    freq_bands: Optional[Dict[str, Tuple[float, float]]] = None

    def __post_init__(self):
        # Copy so per-instance edits never leak into the module default
        if self.freq_bands is None:
            self.freq_bands = dict(FREQ_BANDS)
        else:
            self.freq_bands = dict(self.freq_bands)

    @property
    def stride(self) -> int:
        """Samples advanced between window starts (same value as ``overlap``)"""
        return self.overlap

    @property
    def bin_width(self) -> float:
        """Frequency span of a single spectrum bin (Hz)"""
        return self.sample_rate / self.window_size

    @property
    def band_names(self) -> Tuple[str, ...]:
        return tuple(self.freq_bands.keys())


def validate_config(config: PipelineConfig) -> None:
    """
    Validate pipeline parameters

    Args:
        config: Configuration to validate

    Raises:
        ValueError: If configuration parameters are invalid
    """
    if config.window_size < 2:
        raise ValueError(f"Window size must be >= 2, got {config.window_size}")

    if config.overlap < 1:
        raise ValueError(f"Overlap (window stride) must be >= 1, got {config.overlap}")

    if config.sample_rate <= 0:
        raise ValueError(f"Sample rate must be positive, got {config.sample_rate}")

    if config.n_channels < 1:
        raise ValueError(f"Channel count must be >= 1, got {config.n_channels}")

    if not config.freq_bands:
        raise ValueError("At least one frequency band is required")

    for name, (low, high) in config.freq_bands.items():
        if low < 0:
            raise ValueError(f"Band '{name}' low edge must be >= 0, got {low}")
        if low >= high:
            raise ValueError(f"Band '{name}' low ({low}) must be < high ({high})")
