"""Report disk usage of installed node_modules dependencies."""

__version__ = "0.1.0"
