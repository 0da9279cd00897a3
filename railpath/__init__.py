"""
railpath

Route planning for multi-line rail transit networks: build a station/line
graph from station listings, find routes that minimise transfers then
distance, and summarise them as per-line segments.
"""

from .version import __version__
