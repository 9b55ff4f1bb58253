"""Accounts — auth service and user directory service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
