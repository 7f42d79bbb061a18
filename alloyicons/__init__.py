"""Icon font catalog compiler for Alloy Icons."""

__version__ = "1.0.0"
