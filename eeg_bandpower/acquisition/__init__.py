"""
EEG data sources

This module provides synthetic data generation for demos and testing.
"""

from .synthetic import synthesize_series, sine_series

__all__ = ['synthesize_series', 'sine_series']
