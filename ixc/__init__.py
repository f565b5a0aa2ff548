"""Account ids, error codes, gas metering, messages, handler interfaces and simple time values."""

__version__ = "0.1.0"