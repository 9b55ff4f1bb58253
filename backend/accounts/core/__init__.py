"""Core — framework-free building blocks shared by both services.

Invariants:
    - core/ never imports FastAPI; IO happens behind the protocols in repository_protocols
"""
