"""
Freelancer Player Stats - Python package for Freelancer server statistics

This package reads the per-account save files of a Freelancer server and
produces per-player statistics reports: identity, wealth, ship, kills,
missions and exploration counts, filtered by recency and sorted.

Configuration is handled by the companion config module.
"""

__version__ = '1.0.0'
