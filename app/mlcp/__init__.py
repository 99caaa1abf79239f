"""mlcp - Music Library "Crud" Purge.

Purge, or back up, files that are not music from a music library while
preserving its folder structure.
"""

__version__ = "0.3.0"
