import math

import numpy as np
import pytest

from eeg_bandpower.acquisition.synthetic import sine_series
from eeg_bandpower.core.config import FREQ_BANDS, PipelineConfig
from eeg_bandpower.processing.features import (
    FeatureExtractor,
    band_bins,
    band_power,
    compute_channel_band_powers,
    power_to_db,
)


class TestBandBins:
    def test_reference_bands(self):
        assert band_bins(0.5, 4, 256, 256.0) == (0, 4)
        assert band_bins(8, 13, 256, 256.0) == (8, 13)
        assert band_bins(30, 100, 256, 256.0) == (30, 100)

    def test_fractional_edges_truncate(self):
        # 64-point window at 256 Hz: 4 Hz per bin
        assert band_bins(0.5, 4, 64, 256.0) == (0, 1)
        assert band_bins(8, 13, 64, 256.0) == (2, 3)
        assert band_bins(13, 30, 64, 256.0) == (3, 7)


class TestBandPower:
    def test_zero_spectrum_gives_zero_for_every_band(self):
        spectrum = np.zeros(256, dtype=complex)
        for low, high in FREQ_BANDS.values():
            assert band_power(spectrum, low, high, 256, 256.0) == 0.0

    def test_sum_of_squares_over_window_size(self):
        spectrum = np.array([1, 2j, 3, 4, 5, 6, 7, 8], dtype=complex)
        # bins 0..3 at 1 Hz per bin: 1 + 4 + 9 + 16
        assert band_power(spectrum, 0, 4, 8, 8.0) == pytest.approx(30 / 8)

    def test_high_bin_excluded(self):
        spectrum = np.ones(8, dtype=complex)
        assert band_power(spectrum, 2, 3, 8, 8.0) == pytest.approx(1 / 8)

    def test_range_past_spectrum_is_truncated(self):
        spectrum = np.ones(10, dtype=complex)
        assert band_power(spectrum, 0, 100, 10, 10.0) == pytest.approx(1.0)

    def test_low_bin_past_spectrum_gives_zero(self):
        spectrum = np.ones(16, dtype=complex)
        assert band_power(spectrum, 30, 100, 16, 16.0) == 0.0

    def test_empty_bin_range_gives_zero(self):
        spectrum = np.ones(256, dtype=complex)
        assert band_power(spectrum, 4.1, 4.9, 256, 256.0) == 0.0

    def test_normalised_by_window_size_not_spectrum_length(self):
        spectrum = np.ones(8, dtype=complex)
        assert band_power(spectrum, 0, 4, 16, 16.0) == pytest.approx(4 / 16)


class TestPowerToDb:
    def test_zero_is_negative_infinity(self):
        assert power_to_db(0.0) == -math.inf

    def test_negative_is_negative_infinity(self):
        assert power_to_db(-3.0) == -math.inf

    def test_known_values(self):
        assert power_to_db(1.0) == 0.0
        assert power_to_db(10.0) == pytest.approx(10.0)
        assert power_to_db(100.0) == pytest.approx(20.0)

    def test_monotonic(self):
        values = [power_to_db(p) for p in np.logspace(-6, 6, 50)]
        assert all(a < b for a, b in zip(values, values[1:]))


class TestChannelBandPowers:
    def test_ten_hz_sine_dominates_alpha(self):
        series = sine_series(10.0, 256, fs=256.0, amplitude=1.0)
        config = PipelineConfig(n_channels=1)
        powers = compute_channel_band_powers(series.window(0, 256), 0, config)

        assert list(powers) == ["delta", "theta", "alpha", "beta", "gamma"]
        for band in ("delta", "theta", "beta", "gamma"):
            assert powers["alpha"] > powers[band] + 20.0

    def test_matches_direct_computation(self, small_config):
        rng = np.random.default_rng(7)
        window = rng.standard_normal((16, 2))
        powers = compute_channel_band_powers(window, 1, small_config)

        n = 16
        tapered = [window[i, 1] * (0.54 - 0.46 * math.cos(2 * math.pi * i / (n - 1))) for i in range(n)]
        spectrum = np.fft.fft(tapered)
        for band, (low, high) in small_config.freq_bands.items():
            lo, hi = int(low * n / 16.0), int(high * n / 16.0)
            total = sum(abs(spectrum[i]) ** 2 for i in range(lo, min(hi, n)))
            expected = 10 * math.log10(total / n) if total > 0 else -math.inf
            assert powers[band] == pytest.approx(expected, abs=1e-9)

    def test_silent_channel_is_negative_infinity(self, small_config):
        powers = compute_channel_band_powers(np.zeros((16, 2)), 0, small_config)
        assert all(v == -math.inf for v in powers.values())

    def test_channel_out_of_range(self, small_config):
        with pytest.raises(ValueError):
            compute_channel_band_powers(np.zeros((16, 2)), 2, small_config)


class TestFeatureExtractor:
    def test_band_major_layout(self, small_config):
        window = np.zeros((16, 2))
        window[:, 1] = np.random.default_rng(0).standard_normal(16)
        features = FeatureExtractor(small_config).extract_features(window)

        assert list(features) == list(small_config.band_names)
        for values in features.values():
            assert values.shape == (2,)
        # Channel 0 is silent, channel 1 is not
        assert features["delta"][0] == -math.inf
        assert np.isfinite(features["delta"][1])

    def test_extract_band_power_is_linear(self):
        series = sine_series(10.0, 256, fs=256.0)
        extractor = FeatureExtractor(PipelineConfig(n_channels=1))
        linear = extractor.extract_band_power(series.samples[:, 0], (8, 13))
        assert linear > 0
        assert power_to_db(linear) == pytest.approx(
            compute_channel_band_powers(series.samples, 0, extractor.config)["alpha"])
