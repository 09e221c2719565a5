"""
Core utilities shared across the card service.

This package hosts configuration helpers (env vars, paths), the error
taxonomy mapped to HTTP statuses and the logging setup. Routers and services
depend on these primitives instead of reading os.environ directly.
"""
