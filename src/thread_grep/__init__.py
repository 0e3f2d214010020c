"""Thread Grep - filter thread dumps by regular expression."""

__version__ = "0.1.0"
