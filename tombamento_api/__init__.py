"""Tombamentos API: asset-tag records and their details over JSON/HTTP."""

__version__ = "1.0.0"
