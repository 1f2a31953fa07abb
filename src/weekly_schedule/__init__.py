"""Weekly activity scheduler with an in-memory HTTP API."""

__version__ = "0.1.0"
