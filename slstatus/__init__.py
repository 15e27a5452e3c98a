"""Status line generator that reports system information at a fixed interval."""

__version__ = "1.0"