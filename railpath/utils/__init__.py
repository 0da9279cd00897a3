"""
Utility functions for railpath.

Logging setup and data directory resolution.
"""

from .logging_config import setup_logging
from .data_path_resolver import get_data_directory, get_railway_file_path

__all__ = ["setup_logging", "get_data_directory", "get_railway_file_path"]
