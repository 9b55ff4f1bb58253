"""Database Infrastructure — declarative bases for the two services.

Invariants:
    - Each service owns a separate database, so each has its own metadata
"""
