"""
Core utilities shared across the Tombamentos API.

This package hosts configuration helpers (env vars, paths), logging setup,
error types and small helpers used by routers/services.
"""
