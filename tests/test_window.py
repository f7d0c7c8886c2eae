import numpy as np
import pytest

from eeg_bandpower.processing.window import hamming_coefficients, hamming_window


@pytest.mark.parametrize("n", [2, 3, 16, 255, 256])
def test_length_preserved(n):
    assert hamming_window(np.ones(n)).shape == (n,)


@pytest.mark.parametrize("n", [2, 5, 256])
def test_endpoints_scaled_by_0_08(n):
    out = hamming_window(np.full(n, 10.0))
    assert out[0] == pytest.approx(0.8)
    assert out[-1] == pytest.approx(0.8)


@pytest.mark.parametrize("n", [3, 7, 257])
def test_odd_midpoint_scaled_by_one(n):
    out = hamming_window(np.full(n, 3.0))
    assert out[n // 2] == pytest.approx(3.0)


def test_matches_formula():
    n = 32
    data = np.linspace(-1.0, 2.0, n)
    expected = [data[i] * (0.54 - 0.46 * np.cos(2 * np.pi * i / (n - 1))) for i in range(n)]
    np.testing.assert_allclose(hamming_window(data), expected, rtol=0, atol=1e-15)


def test_symmetric():
    w = hamming_coefficients(64)
    np.testing.assert_allclose(w, w[::-1], atol=1e-15)


def test_input_not_modified():
    data = np.arange(8, dtype=float)
    hamming_window(data)
    np.testing.assert_array_equal(data, np.arange(8, dtype=float))


@pytest.mark.parametrize("n", [0, 1])
def test_rejects_short_window(n):
    with pytest.raises(ValueError):
        hamming_window(np.ones(n))
