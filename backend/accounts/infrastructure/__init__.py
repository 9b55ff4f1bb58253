"""Infrastructure Layer — database pool, logging and metrics.

Invariants:
    - Infrastructure never imports from api/
"""
