import numpy as np
import pytest

from eeg_bandpower.core.config import PipelineConfig
from eeg_bandpower.core.data_types import Series


@pytest.fixture
def small_config():
    """16-sample windows at 16 Hz: one bin per Hz, small enough to reason about"""
    return PipelineConfig(window_size=16, overlap=8, sample_rate=16.0, n_channels=2)


@pytest.fixture
def make_series():
    def _make(n_samples, n_channels=2, seed=0, start_time=0.0, fs=16.0):
        rng = np.random.default_rng(seed)
        timestamps = start_time + np.arange(n_samples) / fs
        return Series(timestamps=timestamps, samples=rng.standard_normal((n_samples, n_channels)))
    return _make


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="eeg_data.csv"):
        path = tmp_path / name
        path.write_text(text)
        return str(path)
    return _write
