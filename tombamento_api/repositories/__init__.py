"""
Persistence adapters.

These modules encapsulate how the store is read from and written to disk
(today a single JSON document). Services depend on the repository instead of
touching the file directly.
"""
