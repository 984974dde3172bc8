"""Read-only query service for a catalog of versioned, tagged resources."""

__version__ = "0.1.0"
