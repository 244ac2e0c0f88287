"""
Core utilities shared across the daycare package.

This package hosts:
- configuration helpers (env vars, data file path, seed)
- logging setup
- the source of randomness used when breeding

Domain, repositories and services depend on these primitives instead of
reading os.environ or the random module directly.
"""
