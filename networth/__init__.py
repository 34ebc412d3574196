"""Net worth snapshots for blockchain addresses."""

__version__ = "0.1.0"
