"""
EEG Band Power - sliding-window spectral band powers for multi-channel EEG

Converts a multi-channel EEG recording into per-window, per-channel
delta/theta/alpha/beta/gamma powers in decibels.

Python: 3.10+
"""

__version__ = "1.0.0"

# Main package imports for easy access
from .core.data_types import Sample, Series, BandPowerRecord
from .core.config import PipelineConfig, validate_config
from .core.exceptions import BoundaryError, InputReadError, OutputWriteError, ProcessingCancelled
from .processing.features import FeatureExtractor
from .processing.pipeline import BandPowerPipeline, process_series
from .data_io.reader import load_csv
from .data_io.writer import save_csv
from .acquisition.synthetic import synthesize_series

__all__ = [
    'Sample', 'Series', 'BandPowerRecord',
    'PipelineConfig', 'validate_config',
    'BoundaryError', 'InputReadError', 'OutputWriteError', 'ProcessingCancelled',
    'FeatureExtractor', 'BandPowerPipeline', 'process_series',
    'load_csv', 'save_csv', 'synthesize_series',
]
