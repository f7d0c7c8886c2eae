import numpy as np
import pytest

from eeg_bandpower.processing.spectrum import compute_spectrum


def test_full_length_complex():
    spectrum = compute_spectrum(np.random.default_rng(1).standard_normal(256))
    assert spectrum.shape == (256,)
    assert spectrum.dtype == np.complex128


def test_unscaled_dc_bin():
    spectrum = compute_spectrum(np.ones(16))
    assert spectrum[0] == pytest.approx(16.0)
    np.testing.assert_allclose(np.abs(spectrum[1:]), 0.0, atol=1e-12)


def test_bin_k_is_k_times_resolution():
    n, fs = 64, 64.0
    t = np.arange(n) / fs
    spectrum = compute_spectrum(np.sin(2 * np.pi * 8 * t))
    magnitudes = np.abs(spectrum[:n // 2 + 1])
    assert int(np.argmax(magnitudes)) == 8
    # Unit-amplitude sine lands N/2 in its bin without normalisation
    assert magnitudes[8] == pytest.approx(n / 2)


def test_deterministic():
    data = np.random.default_rng(3).standard_normal(128)
    np.testing.assert_array_equal(compute_spectrum(data), compute_spectrum(data))

