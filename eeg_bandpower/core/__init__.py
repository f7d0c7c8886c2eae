"""
Core data types and structures for EEG Band Power

This module contains the fundamental data classes, configuration and error
types used throughout the system.
"""

from .data_types import Sample, Series, BandPowerRecord
from .config import *
from .exceptions import BoundaryError, InputReadError, OutputWriteError, ProcessingCancelled

__all__ = [
    'Sample', 'Series', 'BandPowerRecord',
    'PipelineConfig', 'validate_config',
    'BoundaryError', 'InputReadError', 'OutputWriteError', 'ProcessingCancelled',
]
