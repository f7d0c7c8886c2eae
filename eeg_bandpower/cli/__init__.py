"""
Command line interface

This module provides the CLI functionality for the EEG Band Power system.
"""

from .main import main, create_parser, run_batch_processing

__all__ = ['main', 'create_parser', 'run_batch_processing']
