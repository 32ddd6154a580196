"""Turn-based text combat simulator."""

__version__ = "0.3.0"
