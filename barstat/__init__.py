"""Status line generator built from small system information probes."""

__version__ = "0.1.0"