"""
Use cases for the Tombamentos API.

Each service validates request payloads, applies the change through the
JSON repository and persists the store after every mutation. Routers call
these services instead of touching the store directly.
"""
