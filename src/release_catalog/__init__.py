"""Release Catalog API - read-only catalog of music releases."""

__version__ = "0.1.0"
