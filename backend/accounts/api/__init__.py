"""API Layer — FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in auth_main.py / users_main.py (no auto-discovery)
    - Every failure reaches the client as an Error JSON body with a matching status
"""
