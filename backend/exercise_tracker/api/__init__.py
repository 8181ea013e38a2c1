"""API Layer: FastAPI routes, request dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON; errors use the {"error": message} envelope

Design Decisions:
    - Thin routes delegate parsing to core/ and state to the store
"""
