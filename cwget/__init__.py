"""cwget — catalog-driven download and build commands for small C libraries."""

__version__ = "0.1.0"
