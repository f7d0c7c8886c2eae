"""
Tabular input/output for EEG Band Power

CSV reading of raw samples and CSV writing of band power records.
"""

from .reader import load_csv
from .writer import save_csv, records_to_frame, build_header, format_power, format_timestamp

__all__ = ['load_csv', 'save_csv', 'records_to_frame', 'build_header', 'format_power', 'format_timestamp']
