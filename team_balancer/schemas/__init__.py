"""Pydantic Schemas: validation for integration events and API responses.

Invariants:
    - Schemas validate at system boundary (event envelopes, API responses)

Design Decisions:
    - Separate from models: schemas are contracts, models are persistence
"""
