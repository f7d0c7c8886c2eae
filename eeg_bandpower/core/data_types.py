"""
Core data types for EEG Band Power

This module defines the data structures passed between the input reader,
the windowing pipeline and the output writer.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple
import numpy as np


@dataclass(frozen=True)
class Sample:
    """One timestamped row of per-channel amplitudes"""
    timestamp: float          # Seconds
    values: Tuple[float, ...] # One reading per channel


@dataclass
class Series:
    """
    Ordered multi-channel recording

    Timestamps are assumed non-decreasing; they are not re-checked here.
    Both arrays are made read-only so a pass over the series cannot alter it.
    """
    timestamps: np.ndarray    # Shape: (n_samples,)
    samples: np.ndarray       # Shape: (n_samples, n_channels)

    def __post_init__(self):
        self.timestamps = np.array(self.timestamps, dtype=np.float64).reshape(-1)
        samples = np.array(self.samples, dtype=np.float64)
        if samples.ndim == 1:
            # Single-channel recording
            samples = samples.reshape(-1, 1)
        if samples.ndim != 2:
            raise ValueError(f"Samples must be 2D (n_samples x n_channels), got {samples.ndim}D")
        if samples.shape[0] != self.timestamps.shape[0]:
            raise ValueError(
                f"Timestamp count ({self.timestamps.shape[0]}) does not match "
                f"sample rows ({samples.shape[0]})"
            )
        self.samples = samples
        self.timestamps.flags.writeable = False
        self.samples.flags.writeable = False

    @classmethod
    def from_samples(cls, samples: Sequence[Sample], n_channels: int = None) -> "Series":
        """Build a series from Sample rows, all with the same channel count"""
        if n_channels is None:
            n_channels = len(samples[0].values) if samples else 0

        for idx, sample in enumerate(samples):
            if len(sample.values) != n_channels:
                raise ValueError(
                    f"Sample {idx} has {len(sample.values)} channels, expected {n_channels}"
                )

        timestamps = [s.timestamp for s in samples]
        values = np.array([s.values for s in samples], dtype=np.float64).reshape(len(samples), n_channels)
        return cls(timestamps=timestamps, samples=values)

    @classmethod
    def empty(cls, n_channels: int) -> "Series":
        return cls(timestamps=np.zeros(0), samples=np.zeros((0, n_channels)))

    def __len__(self) -> int:
        return self.samples.shape[0]

    @property
    def n_samples(self) -> int:
        return self.samples.shape[0]

    @property
    def n_channels(self) -> int:
        return self.samples.shape[1]

    def window(self, start: int, size: int) -> np.ndarray:
        """Read-only (size, n_channels) view starting at sample ``start``"""
        if start < 0 or start + size > self.n_samples:
            raise ValueError(
                f"Window [{start}, {start + size}) outside series of {self.n_samples} samples"
            )
        return self.samples[start:start + size]


@dataclass
class BandPowerRecord:
    """Band powers (dB) for one analysis window"""
    timestamp: float                                        # First sample of the window
    powers: Dict[str, np.ndarray] = field(default_factory=dict)  # band -> (n_channels,)

    def band(self, name: str) -> np.ndarray:
        return self.powers[name]

    def to_row(self, band_order: Sequence[str]) -> List[float]:
        """Flatten as band-major, channel-minor values (timestamp excluded)"""
        row: List[float] = []
        for name in band_order:
            row.extend(float(v) for v in self.band(name))
        return row
