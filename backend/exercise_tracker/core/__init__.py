"""Core Layer: pure domain logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - All functions are pure and deterministic (no clock reads, no randomness except ids.py)

Design Decisions:
    - Functional core separated from imperative shell (routes + store)
"""
