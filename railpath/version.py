"""
Version information for railpath.

Centralized version management for the package.
"""

# Core package information
__version__ = "1.0.0"
__version_info__ = (1, 0, 0)
__app_name__ = "railpath"
__description__ = "Multi-line rail transit route planning over station listings"
