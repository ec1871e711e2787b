"""Core Layer: pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are pure; randomness arrives as an injected random.Random

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
