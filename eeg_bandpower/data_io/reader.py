"""
Input table loading

Reads a CSV with a header row followed by rows of
``timestamp, ch1, ..., chC``. Columns are taken by position; header names are
not interpreted.

Malformed numeric fields are replaced by 0.0 and the number of replaced cells
is logged as a warning.
"""

import logging
import os
from typing import Optional
import numpy as np
import pandas as pd

from ..core.config import N_CHANNELS
from ..core.data_types import Series
from ..core.exceptions import InputReadError


def _parse_field(text: str) -> Optional[float]:
    """Correctly rounded float of a cell, or None if it is not a number"""
    try:
        return float(text)
    except ValueError:
        return None


def _check_field_counts(df: pd.DataFrame, path: str) -> None:
    """Every data row must have as many fields as the header"""
    # With keep_default_na=False only a missing trailing field is NaN
    short_rows = df.isna().any(axis=1).to_numpy()
    if short_rows.any():
        row = int(np.argmax(short_rows))
        n_fields = int(df.iloc[row].notna().sum())
        raise InputReadError(
            f"data row {row + 1} has {n_fields} fields, expected {df.shape[1]}",
            path=path,
        )


def _coerce_numeric(frame: pd.DataFrame) -> np.ndarray:
    """Parse every cell as float, substituting 0.0 for unparseable cells"""
    values = np.zeros(frame.shape, dtype=np.float64)
    bad_mask = np.zeros(frame.shape, dtype=bool)

    for col_idx in range(frame.shape[1]):
        parsed = [_parse_field(text) for text in frame.iloc[:, col_idx].tolist()]
        for row_idx, value in enumerate(parsed):
            if value is None:
                bad_mask[row_idx, col_idx] = True
            else:
                values[row_idx, col_idx] = value

    n_bad = int(bad_mask.sum())
    if n_bad:
        rows, cols = np.nonzero(bad_mask)
        logging.warning(
            f"{n_bad} malformed numeric field(s) replaced by 0.0 "
            f"(first at data row {rows[0] + 1}, column {cols[0] + 1})"
        )

    return values


def load_csv(path: str, n_channels: Optional[int] = N_CHANNELS) -> Series:
    """
    Load a multi-channel EEG series from a CSV file

    Args:
        path: Path to CSV file
        n_channels: Number of amplitude columns after the timestamp. If None,
            every column after the timestamp is used.

    Returns:
        Series: Timestamps and (n_samples x n_channels) amplitudes

    Raises:
        InputReadError: If the file is missing, unreadable, or has too few columns
    """
    if not os.path.exists(path):
        raise InputReadError("file not found", path=path)

    logging.info(f"Loading CSV data from: {path}")

    try:
        # Header read as a data row so a header shorter or longer than the
        # data rows is caught by the field count checks below
        table = pd.read_csv(path, header=None, index_col=False, dtype=str,
                            keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise InputReadError("file is empty (no header row)", path=path)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise InputReadError(str(e), path=path) from e

    df = table.iloc[1:].reset_index(drop=True)
    _check_field_counts(df, path)
    logging.info(f"CSV shape: {df.shape}")

    if n_channels is None:
        n_channels = df.shape[1] - 1
        logging.info(f"Auto-detected {n_channels} EEG channels")

    if n_channels < 1 or df.shape[1] < n_channels + 1:
        raise InputReadError(
            f"expected timestamp plus {n_channels} channel columns, found {df.shape[1]} columns",
            path=path,
        )

    if df.shape[1] > n_channels + 1:
        logging.debug(f"Ignoring {df.shape[1] - n_channels - 1} extra column(s)")

    values = _coerce_numeric(df.iloc[:, :n_channels + 1])

    series = Series(timestamps=values[:, 0], samples=values[:, 1:])
    logging.info(f"EEG data shape: {series.samples.shape}")
    return series
