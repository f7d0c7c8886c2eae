"""
Spectral transform for a windowed channel

The spectrum is the full-length discrete Fourier transform of the real input,
unscaled (no 1/N normalisation). Bin k corresponds to k * fs / N Hz; only bins
0..N/2 are consulted by the band power stage.
"""

import numpy as np
from scipy import fft as sp_fft


def compute_spectrum(windowed: np.ndarray) -> np.ndarray:
    """
    Compute the complex spectrum of a real-valued sample vector

    Args:
        windowed: Tapered samples for one channel (samples,)

    Returns:
        np.ndarray: complex128 array of the same length as the input
    """
    windowed = np.asarray(windowed, dtype=np.float64)
    return sp_fft.fft(windowed).astype(np.complex128, copy=False)

