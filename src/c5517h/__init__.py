"""Serial control protocol for the C5517H display."""

__version__ = "0.1.0"
