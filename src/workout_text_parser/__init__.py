"""Free-text workout parsing service."""

__version__ = "0.1.0"
