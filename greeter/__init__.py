"""Fixed-greeting HTTP server."""

__version__ = "1.0.0"
