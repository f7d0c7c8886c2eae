"""
Output table writing

Writes one row per band power record:
``timestamps, delta_1..delta_C, theta_1..theta_C, ..., gamma_1..gamma_C``.
Timestamps keep full precision; powers are written with two decimals and
silent bands (-inf dB) as NEG_INF_TOKEN.
"""

import logging
import math
import os
from typing import List, Optional, Sequence
import numpy as np
import pandas as pd

from ..core.config import (PipelineConfig, POWER_DECIMALS, NEG_INF_TOKEN,
                           POS_INF_TOKEN, NAN_TOKEN, TIMESTAMP_HEADER)
from ..core.data_types import BandPowerRecord
from ..core.exceptions import OutputWriteError


def format_timestamp(value: float) -> str:
    """Shortest round-trip decimal form, never in exponent notation"""
    if math.isnan(value):
        return NAN_TOKEN
    if math.isinf(value):
        return NEG_INF_TOKEN if value < 0 else POS_INF_TOKEN
    return np.format_float_positional(value, trim="-")


def format_power(value: float) -> str:
    """Fixed two-decimal dB value; infinities and NaN as named tokens"""
    if math.isnan(value):
        return NAN_TOKEN
    if math.isinf(value):
        return NEG_INF_TOKEN if value < 0 else POS_INF_TOKEN
    return f"{value:.{POWER_DECIMALS}f}"


def build_header(band_names: Sequence[str], n_channels: int) -> List[str]:
    """Header row: timestamp column then band-major, channel-minor columns"""
    header = [TIMESTAMP_HEADER]
    for band_name in band_names:
        header.extend(f"{band_name}_{ch + 1}" for ch in range(n_channels))
    return header


def records_to_frame(records: Sequence[BandPowerRecord],
                     config: Optional[PipelineConfig] = None) -> pd.DataFrame:
    """
    Format records as a table of strings ready to be written

    Args:
        records: Pipeline output, in window order
        config: Supplies band order and channel count

    Returns:
        pd.DataFrame: One formatted row per record
    """
    if config is None:
        config = PipelineConfig()

    header = build_header(config.band_names, config.n_channels)
    rows = []
    for record in records:
        row = [format_timestamp(record.timestamp)]
        row.extend(format_power(v) for v in record.to_row(config.band_names))
        if len(row) != len(header):
            raise ValueError(f"Record has {len(row)} fields, header has {len(header)}")
        rows.append(row)

    return pd.DataFrame(rows, columns=header, dtype=object)


def save_csv(records: Sequence[BandPowerRecord], path: str,
             config: Optional[PipelineConfig] = None) -> None:
    """
    Write band power records to a CSV file

    Args:
        records: Pipeline output, in window order
        path: Destination CSV path (parent directories are created)
        config: Supplies band order and channel count

    Raises:
        OutputWriteError: If the file cannot be created or written
    """
    frame = records_to_frame(records, config)
    logging.info(f"Writing {len(frame)} records to: {path}")

    try:
        directory = os.path.dirname(path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory, exist_ok=True)
        frame.to_csv(path, index=False, lineterminator="\n")
    except OSError as e:
        raise OutputWriteError(str(e), path=path) from e

    logging.info("Band power table saved successfully")
