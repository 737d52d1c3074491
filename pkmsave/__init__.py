"""Save-file reader for the Gen 1-3 handheld monster-collecting games."""

__version__ = "0.1.0"
