"""Client library for the UNACH product inventory API."""

__version__ = "1.0.0"
