"""Infrastructure Layer: in-memory store and logging setup.

Invariants:
    - The store is the only owner of user and exercise records
"""
