"""Schema and validation layer for the content-approval workflow."""

__version__ = "1.0.0"
