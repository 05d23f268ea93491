"""MillOps Analytics — downtime transitions API."""

__version__ = "1.0.0"
