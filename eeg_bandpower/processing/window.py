"""
Tapering window applied to each channel before the spectral transform

A symmetric Hamming window is used. Both end samples are scaled by 0.08 and
the centre of an odd-length window by 1.0.
"""

import numpy as np

HAMMING_ALPHA = 0.54
HAMMING_BETA = 0.46


def hamming_coefficients(n: int) -> np.ndarray:
    """
    Symmetric Hamming coefficients of length n

    Args:
        n: Window length, must be >= 2

    Returns:
        np.ndarray: w[i] = 0.54 - 0.46 * cos(2*pi*i / (n - 1))

    Raises:
        ValueError: If n < 2 (the denominator n - 1 would be zero)
    """
    if n < 2:
        raise ValueError(f"Hamming window needs at least 2 samples, got {n}")

    i = np.arange(n, dtype=np.float64)
    return HAMMING_ALPHA - HAMMING_BETA * np.cos(2 * np.pi * i / (n - 1))


def hamming_window(data: np.ndarray) -> np.ndarray:
    """
    Apply a Hamming taper to a single-channel sample vector

    Args:
        data: Raw samples for one channel (samples,)

    Returns:
        np.ndarray: New array of the same length; the input is not modified
    """
    data = np.asarray(data, dtype=np.float64)
    return data * hamming_coefficients(data.shape[0])
