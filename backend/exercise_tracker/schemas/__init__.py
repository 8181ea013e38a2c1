"""Pydantic Schemas: response shapes for API endpoints.

Invariants:
    - Schemas describe the wire contract (``_id`` aliasing, field order)
    - Request bodies are parsed by core/validate_input, not by schemas

Design Decisions:
    - Separate from core records: schemas are API contracts, records are domain state
"""
