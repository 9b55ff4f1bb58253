"""JSON wire schemas — Pydantic models at the API boundary.

Design Decisions:
    - camelCase aliases match the JSON field names clients already send
    - populate_by_name lets Python code build models with snake_case names
"""
